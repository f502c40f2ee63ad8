from django.contrib.messages import get_messages
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from ..catalog import DEPARTMENTS, department_card
from ..responses import ok
from ..services.doctors import featured_doctors
from ..session import get_session_context
from ..viewmodels import doctor_card


def drain_notifications(request) -> list[dict]:
    """Pop pending one-shot notices (e.g. from a blocked admin page)."""
    raw = getattr(request, '_request', request)
    return [{'level': m.level_tag, 'message': str(m)} for m in get_messages(raw)]


@api_view(['GET'])
@permission_classes([AllowAny])
def home(request):
    return ok({
        'page': 'home',
        'session': get_session_context(request).as_dict(),
        'notifications': drain_notifications(request),
        'services': [department_card(d) for d in DEPARTMENTS],
        'featuredDoctors': [doctor_card(d) for d in featured_doctors(3)],
        'actions': [
            {'label': 'Book Appointment', 'link': '/appointments'},
            {'label': 'Our Services', 'link': '/services'},
        ],
    })


@api_view(['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([AllowAny])
def not_found(request, *args, **kwargs):
    return ok({
        'page': 'not-found',
        'title': 'Page not found',
        'message': "The page you're looking for doesn't exist or has been moved.",
        'link': {'label': 'Return to Home', 'link': '/'},
    }, status=404)
