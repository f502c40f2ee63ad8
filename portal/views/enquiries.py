"""
Enquiry submission (public) and enquiry triage (administrators).
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated

from ..backend import BackendError
from ..guard import admin_route
from ..permissions import IsAdminRole
from ..responses import fail, ok, toast
from ..serializers.enquiries import EnquiryStatusSerializer, EnquirySubmitSerializer
from ..services.audit import client_ip, log_action
from ..services.enquiries import list_enquiries, submit_enquiry, update_enquiry_status
from ..throttles import EnquirySubmitThrottle
from ..viewmodels import enquiry_row, enquiry_status_options


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([EnquirySubmitThrottle])
def api_submit_enquiry(request):
    s = EnquirySubmitSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    record = submit_enquiry(s.validated_data)
    user = request.user if request.user and request.user.is_authenticated else None
    log_action(user=user, action='submit_enquiry', object_type=record.KIND, object_id=record.id,
               detail={'ip': client_ip(request)})
    return ok(
        enquiry_row(record),
        toast=toast('Enquiry Submitted', "Thank you for contacting us. We'll get back to you soon."),
        status=201,
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def api_enquiries(request):
    """Enquiries newest first. ``status`` may be ``all`` (default) or a single status."""
    status_filter = request.query_params.get('status') or 'all'
    return ok([enquiry_row(e) for e in list_enquiries(status_filter)])


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def api_update_enquiry_status(request):
    s = EnquiryStatusSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        record = update_enquiry_status(s.validated_data['id'], s.validated_data['status'])
    except BackendError as e:
        return fail(e, toast=toast('Error', e.message or 'Failed to update the status.', 'destructive'))
    log_action(user=request.user, action='update_enquiry_status', object_type=record.KIND, object_id=record.id,
               detail={'status': record.status.value})
    return ok(
        enquiry_row(record),
        toast=toast('Status Updated', 'The enquiry status has been updated successfully.'),
    )


@api_view(['GET'])
@permission_classes([AllowAny])
@admin_route
def enquiries_page(request):
    return ok({
        'page': 'admin-enquiries',
        'title': 'Enquiries',
        'filter': 'all',
        'statusOptions': enquiry_status_options(),
        'enquiries': [enquiry_row(e) for e in list_enquiries('all')],
        'emptyMessage': 'No enquiries found.',
    })
