"""
Appointment queries and mutations.

Appointments are matched to patients by e-mail address.  Rows are never
deleted; the only status change exposed to users is
``upcoming -> cancelled``.  There is no conflict detection, so two
bookings of the same doctor and slot are both accepted.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from django.db.models.functions import Lower

from portal import querycache
from portal.backend import BackendError, ForbiddenError, NotFoundError, backend_call, parse_id
from portal.models import Appointment
from portal.records import AppointmentRecord, AppointmentStatus, appointment_from_row

logger = logging.getLogger(__name__)

APPOINTMENT_NOT_FOUND = 'Appointment not found'


def _rows():
    return Appointment.objects.select_related('doctor')


def _load(pk) -> Appointment:
    row = _rows().filter(pk=pk).first()
    if row is None:
        raise NotFoundError(APPOINTMENT_NOT_FOUND)
    return row


def _check_owner(row: Appointment, context) -> None:
    if getattr(context, 'is_admin', False):
        return
    user = getattr(context, 'user', None)
    email = (getattr(user, 'email', '') or '').lower()
    if not email or email != row.patient_email.lower():
        raise ForbiddenError('You can only manage your own appointments')


@backend_call
def list_appointments_for_patient(email: str) -> List[AppointmentRecord]:
    email = (email or '').strip().lower()
    if not email:
        return []

    def load() -> List[AppointmentRecord]:
        qs = _rows().filter(patient_email__iexact=email).order_by('appointment_date', 'created_at')
        return [appointment_from_row(a) for a in qs]

    return querycache.fetch('appointments', load, email=email)


@backend_call
def list_appointments() -> List[AppointmentRecord]:
    def load() -> List[AppointmentRecord]:
        return [appointment_from_row(a) for a in _rows().order_by('appointment_date', 'created_at')]

    return querycache.fetch('appointments', load, scope='all')


@backend_call
def book_appointment(data: Dict[str, Any]) -> AppointmentRecord:
    """Create an upcoming appointment from already validated form data."""
    row = Appointment.objects.create(
        doctor_id=data['doctor_id'],
        patient_name=data['patient_name'],
        patient_email=data['patient_email'],
        appointment_date=data['appointment_date'],
        appointment_time=data['appointment_time'],
        location=data.get('location') or 'Main Hospital',
        reason=data.get('reason') or None,
        status=AppointmentStatus.UPCOMING.value,
    )
    querycache.invalidate_after('book_appointment')
    logger.info("appointment %s booked for %s", row.id, row.patient_email)
    return appointment_from_row(_load(row.pk))


@backend_call
def cancel_appointment(appointment_id, context) -> AppointmentRecord:
    """Set one appointment's status to cancelled.

    Only the ``status`` column is written.  Completed appointments are
    refused and cancelling a cancelled appointment changes nothing.
    """
    pk = parse_id(appointment_id, APPOINTMENT_NOT_FOUND)
    row = _load(pk)
    _check_owner(row, context)
    if row.status == AppointmentStatus.CANCELLED.value:
        return appointment_from_row(row)
    if row.status == AppointmentStatus.COMPLETED.value:
        raise BackendError('Completed appointments cannot be cancelled')
    Appointment.objects.filter(pk=pk).update(status=AppointmentStatus.CANCELLED.value)
    querycache.invalidate_after('cancel_appointment')
    logger.info("appointment %s cancelled", pk)
    return appointment_from_row(_load(pk))


@backend_call
def request_reschedule(appointment_id, context) -> AppointmentRecord:
    """Check that the appointment exists and belongs to the caller.

    Rescheduling itself is handled by staff, so the row is not changed.
    """
    pk = parse_id(appointment_id, APPOINTMENT_NOT_FOUND)
    row = _load(pk)
    _check_owner(row, context)
    return appointment_from_row(row)


@backend_call
def count_appointments() -> int:
    return querycache.fetch('appointments-count', Appointment.objects.count)


@backend_call
def count_patients() -> int:
    """Number of distinct patient e-mail addresses with an appointment."""
    def load() -> int:
        return (
            Appointment.objects.annotate(email_key=Lower('patient_email'))
            .order_by().values('email_key').distinct().count()
        )

    return querycache.fetch('patients-count', load)
