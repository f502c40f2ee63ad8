"""
Display shapes for records.

Functions here turn records from :mod:`portal.records` into the
camelCase dictionaries the front end renders: doctor names joined into
appointments, long and short date formats, status labels and the
status tabs of the appointments page.
"""
from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Dict, Any

from .records import (
    AppointmentRecord,
    AppointmentStatus,
    DoctorRecord,
    EnquiryRecord,
    EnquiryStatus,
    HospitalContactRecord,
    MedicalRecordEntry,
)

PLACEHOLDER_IMAGE = '/placeholder.svg'

EMPTY_TAB_MESSAGES = {
    AppointmentStatus.UPCOMING: 'No upcoming appointments.',
    AppointmentStatus.COMPLETED: 'No completed appointments.',
    AppointmentStatus.CANCELLED: 'No cancelled appointments.',
}


def long_date(value: dt.date) -> str:
    """``October 18, 2026``"""
    return f"{value:%B} {value.day}, {value.year}"


def short_date(value: dt.date) -> str:
    """``Oct 18, 2026``"""
    return f"{value:%b} {value.day}, {value.year}"


def doctor_card(doctor: DoctorRecord) -> Dict[str, Any]:
    return {
        'id': doctor.id,
        'name': doctor.name,
        'specialty': doctor.specialty,
        'rating': doctor.rating,
        'reviewCount': doctor.review_count,
        'experience': doctor.experience,
        'imageUrl': doctor.image_url or PLACEHOLDER_IMAGE,
        'link': f'/doctor/{doctor.id}',
    }


def doctor_profile(doctor: DoctorRecord) -> Dict[str, Any]:
    data = doctor_card(doctor)
    data['about'] = (
        f"{doctor.name} is a highly skilled {doctor.specialty.lower()} specialist with "
        f"{doctor.experience} years of experience. Their practice focuses on providing "
        f"exceptional patient care and utilizing the latest medical advancements to treat "
        f"a wide range of conditions."
    )
    data['email'] = 'doctor.' + '.'.join(doctor.name.lower().split()) + '@hospital.com'
    data['bookingLink'] = '/appointments'
    return data


def appointment_card(appointment: AppointmentRecord) -> Dict[str, Any]:
    return {
        'id': appointment.id,
        'doctorId': appointment.doctor_id,
        'doctorName': appointment.doctor_name,
        'doctorSpecialty': appointment.doctor_specialty,
        'doctorImage': appointment.doctor_image or PLACEHOLDER_IMAGE,
        'patientName': appointment.patient_name,
        'patientEmail': appointment.patient_email,
        'date': appointment.appointment_date.isoformat(),
        'displayDate': long_date(appointment.appointment_date),
        'time': appointment.appointment_time,
        'location': appointment.location,
        'reason': appointment.reason,
        'status': appointment.status.value,
        'statusLabel': appointment.status.label,
        'canCancel': appointment.status == AppointmentStatus.UPCOMING,
        'canReschedule': appointment.status == AppointmentStatus.UPCOMING,
    }


def partition_by_status(appointments: Iterable[AppointmentRecord]) -> Dict[AppointmentStatus, List[AppointmentRecord]]:
    """Split appointments into one bucket per status; every record lands in exactly one."""
    buckets: Dict[AppointmentStatus, List[AppointmentRecord]] = {status: [] for status in AppointmentStatus}
    for appointment in appointments:
        buckets[appointment.status].append(appointment)
    return buckets


def appointment_tabs(appointments: Iterable[AppointmentRecord]) -> List[Dict[str, Any]]:
    tabs = []
    for status, rows in partition_by_status(appointments).items():
        tabs.append({
            'value': status.value,
            'label': f"{status.label} ({len(rows)})",
            'count': len(rows),
            'items': [appointment_card(a) for a in rows],
            'emptyMessage': EMPTY_TAB_MESSAGES[status],
        })
    return tabs


def enquiry_row(enquiry: EnquiryRecord) -> Dict[str, Any]:
    return {
        'id': enquiry.id,
        'name': enquiry.name,
        'email': enquiry.email,
        'phone': enquiry.phone or '',
        'message': enquiry.message,
        'status': enquiry.status.value,
        'statusLabel': enquiry.status.label,
        'createdAt': enquiry.created_at.isoformat(),
        'displayDate': short_date(enquiry.created_at),
    }


def enquiry_status_options() -> List[Dict[str, str]]:
    return [{'value': s.value, 'label': s.label} for s in EnquiryStatus]


def contact_card(contact: HospitalContactRecord) -> Dict[str, Any]:
    return {
        'id': contact.id,
        'name': contact.name,
        'phone': contact.phone,
        'email': contact.email,
        'address': contact.address,
        'department': contact.department,
    }


def medical_record_row(entry: MedicalRecordEntry) -> Dict[str, Any]:
    return {
        'id': entry.id,
        'patientName': entry.patient_name,
        'patientEmail': entry.patient_email,
        'doctorName': entry.doctor_name,
        'diagnosis': entry.diagnosis,
        'treatment': entry.treatment,
        'prescription': entry.prescription,
        'visitDate': entry.visit_date.isoformat(),
        'displayDate': long_date(entry.visit_date),
        'notes': entry.notes,
    }
