from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated

from ..responses import ok
from ..services.medical_records import list_medical_records
from ..session import get_session_context
from ..viewmodels import medical_record_row


def _records_for(context) -> list[dict]:
    # Administrators see every patient's records
    email = None if context.is_admin else context.user.email
    return [medical_record_row(r) for r in list_medical_records(email)]


@api_view(['GET'])
@permission_classes([AllowAny])
def medical_records_page(request):
    context = get_session_context(request)
    if not context.is_authenticated:
        return ok({
            'page': 'medical-records',
            'signInPrompt': {'message': 'Please log in to view your medical records.', 'link': '/login'},
        })
    return ok({
        'page': 'medical-records',
        'title': 'Medical Records',
        'scope': 'all' if context.is_admin else 'own',
        'records': _records_for(context),
        'emptyMessage': 'No medical records found',
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def api_medical_records(request):
    return ok(_records_for(get_session_context(request)))
