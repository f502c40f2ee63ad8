from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from ..responses import ok
from ..services.contacts import list_contacts
from ..viewmodels import contact_card


@api_view(['GET'])
@permission_classes([AllowAny])
def contact_page(request):
    contacts = [contact_card(c) for c in list_contacts()]
    return ok({
        'page': 'contact',
        'title': 'Contact Us',
        'contacts': contacts,
        'emptyMessage': None if contacts else 'No contact information available at the moment. Please check back later.',
        'enquiryForm': {
            'action': '/api/enquiries/submit',
            'fields': ['name', 'email', 'phone', 'message'],
        },
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def api_contacts(request):
    return ok([contact_card(c) for c in list_contacts()])
