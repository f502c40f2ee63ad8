"""
Medical department catalog and department detail pages.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from ..catalog import DEPARTMENTS, SPECIALIST_TABS, SPECIALISTS_PER_TAB, department_card, get_department
from ..responses import ok
from ..services.doctors import list_doctors, list_doctors_by_specialty
from ..viewmodels import doctor_card


def specialist_tabs(doctors) -> list[dict]:
    tabs = []
    for value, label in SPECIALIST_TABS:
        if value == 'all':
            members = list(doctors)
        else:
            members = [d for d in doctors if d.specialty.lower() == value]
        tabs.append({
            'value': value,
            'label': label,
            'doctors': [doctor_card(d) for d in members[:SPECIALISTS_PER_TAB]],
            'hasMore': len(members) > SPECIALISTS_PER_TAB,
            'viewAllLink': '/doctors',
        })
    return tabs


@api_view(['GET'])
@permission_classes([AllowAny])
def services_page(request):
    return ok({
        'page': 'services',
        'title': 'Our Services',
        'departments': [department_card(d) for d in DEPARTMENTS],
        'specialists': specialist_tabs(list_doctors()),
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def service_detail_page(request, service_id):
    department = get_department(service_id)
    if department is None:
        return ok({
            'page': 'service-not-found',
            'title': 'Service Not Found',
            'message': "The service you're looking for doesn't exist.",
            'link': {'label': 'Back to Services', 'link': '/services'},
        }, status=404)
    doctors = list_doctors_by_specialty(department['title'])
    return ok({
        'page': 'service',
        'service': {
            'id': department['id'],
            'title': department['title'],
            'description': department['description'],
            'icon': department['icon'],
            'features': list(department['features']),
        },
        'doctors': [doctor_card(d) for d in doctors],
        'emptyMessage': f"No {department['title'].lower()} specialists are listed yet.",
        'bookingLink': '/appointments',
    })
