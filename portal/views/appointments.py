"""
Appointments page and the booking, cancel and reschedule endpoints.

Anyone may book; the list of appointments and the cancel/reschedule
actions need a signed-in user and only reach that user's own
appointments (administrators may act on any of them).
"""
from __future__ import annotations

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated

from ..backend import BackendError
from ..catalog import DEFAULT_LOCATION, TIME_SLOTS
from ..responses import fail, ok, toast
from ..serializers.appointments import AppointmentIdSerializer, BookingSerializer
from ..services import appointments as appointment_service
from ..services.audit import log_action
from ..services.doctors import list_doctors
from ..session import get_session_context
from ..throttles import BookingThrottle
from ..viewmodels import appointment_card, appointment_tabs


def scheduler(context) -> dict:
    user = context.user if context.is_authenticated else None
    return {
        'doctors': [{'id': d.id, 'name': d.name, 'specialty': d.specialty} for d in list_doctors()],
        'timeSlots': list(TIME_SLOTS),
        'minDate': timezone.localdate().isoformat(),
        'defaults': {
            'patient_name': (user.get_full_name() if user else '') or '',
            'patient_email': (user.email if user else '') or '',
            'location': DEFAULT_LOCATION,
        },
        'action': '/api/appointments/book',
    }


@api_view(['GET'])
@permission_classes([AllowAny])
def appointments_page(request):
    context = get_session_context(request)
    data = {
        'page': 'appointments',
        'title': 'Appointments',
        'scheduler': scheduler(context),
    }
    if context.is_authenticated:
        data['tabs'] = appointment_tabs(appointment_service.list_appointments_for_patient(context.user.email))
    else:
        data['signInPrompt'] = {
            'message': 'Please log in to view your appointments.',
            'link': '/login',
        }
    return ok(data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def api_appointments(request):
    """The caller's appointments, split into status tabs."""
    context = get_session_context(request)
    return ok({'tabs': appointment_tabs(appointment_service.list_appointments_for_patient(context.user.email))})


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([BookingThrottle])
def book_appointment(request):
    s = BookingSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        record = appointment_service.book_appointment(s.validated_data)
    except BackendError as e:
        return fail(e, toast=toast('Booking Failed', e.message, 'destructive'))

    user = request.user if request.user and request.user.is_authenticated else None
    log_action(user=user, action='book_appointment', object_type=record.KIND, object_id=record.id,
               detail={'doctor': record.doctor_id, 'date': record.appointment_date.isoformat()})
    return ok(
        appointment_card(record),
        toast=toast('Appointment Booked', 'Your appointment has been successfully scheduled.'),
        status=201,
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def cancel_appointment(request):
    s = AppointmentIdSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    context = get_session_context(request)
    try:
        record = appointment_service.cancel_appointment(s.validated_data['id'], context)
    except BackendError as e:
        return fail(e, toast=toast('Error', f'Failed to cancel appointment: {e.message}', 'destructive'))

    log_action(user=request.user, action='cancel_appointment', object_type=record.KIND, object_id=record.id)
    return ok(
        appointment_card(record),
        toast=toast('Appointment Cancelled', 'Your appointment has been cancelled successfully.'),
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def reschedule_appointment(request):
    """Record a reschedule request; staff follow up, the appointment is unchanged."""
    s = AppointmentIdSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    record = appointment_service.request_reschedule(s.validated_data['id'], get_session_context(request))
    log_action(user=request.user, action='reschedule_request', object_type=record.KIND, object_id=record.id)
    return ok(
        appointment_card(record),
        toast=toast(
            'Reschedule Requested',
            f"You've requested to reschedule appointment #{record.id}. Our staff will contact you shortly.",
        ),
    )
