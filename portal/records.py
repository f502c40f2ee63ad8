"""
Typed records handed from the data-access layer to the rest of the app.

Each entity has one frozen record type and exactly one function that
turns an ORM row into it.  Views, view-models and analytics only ever
see these records.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

UNKNOWN_DOCTOR = 'Unknown Doctor'
DEFAULT_SPECIALTY = 'General'


class AppointmentStatus(str, Enum):
    UPCOMING = 'upcoming'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    @property
    def label(self) -> str:
        return self.value.capitalize()


class EnquiryStatus(str, Enum):
    NEW = 'new'
    IN_PROGRESS = 'in-progress'
    COMPLETED = 'completed'

    @property
    def label(self) -> str:
        return {
            EnquiryStatus.NEW: 'New',
            EnquiryStatus.IN_PROGRESS: 'In Progress',
            EnquiryStatus.COMPLETED: 'Completed',
        }[self]


@dataclass(frozen=True)
class DoctorRecord:
    KIND: ClassVar[str] = 'doctor'

    id: str
    name: str
    specialty: str
    rating: float
    review_count: int
    experience: int
    image_url: str
    created_at: Optional[dt.datetime] = None


@dataclass(frozen=True)
class AppointmentRecord:
    KIND: ClassVar[str] = 'appointment'

    id: str
    doctor_id: Optional[str]
    doctor_name: str
    doctor_specialty: str
    doctor_image: str
    patient_name: str
    patient_email: str
    appointment_date: dt.date
    appointment_time: str
    location: str
    reason: Optional[str]
    status: AppointmentStatus
    created_at: Optional[dt.datetime] = None


@dataclass(frozen=True)
class EnquiryRecord:
    KIND: ClassVar[str] = 'enquiry'

    id: str
    name: str
    email: str
    phone: Optional[str]
    message: str
    status: EnquiryStatus
    created_at: dt.datetime


@dataclass(frozen=True)
class HospitalContactRecord:
    KIND: ClassVar[str] = 'hospital-contact'

    id: str
    name: str
    phone: str
    email: str
    address: Optional[str]
    department: Optional[str]


@dataclass(frozen=True)
class MedicalRecordEntry:
    KIND: ClassVar[str] = 'medical-record'

    id: str
    patient_name: str
    patient_email: str
    doctor_id: Optional[str]
    doctor_name: str
    diagnosis: str
    treatment: str
    prescription: str
    visit_date: dt.date
    notes: Optional[str]


def doctor_from_row(row) -> DoctorRecord:
    return DoctorRecord(
        id=str(row.id),
        name=row.name,
        specialty=row.specialty,
        rating=float(row.rating or 0),
        review_count=int(row.review_count or 0),
        experience=int(row.experience or 0),
        image_url=row.image_url or '',
        created_at=row.created_at,
    )


def appointment_from_row(row) -> AppointmentRecord:
    # The doctor may have been removed; the row keeps a NULL reference
    doctor = row.doctor
    return AppointmentRecord(
        id=str(row.id),
        doctor_id=str(doctor.id) if doctor else None,
        doctor_name=doctor.name if doctor else UNKNOWN_DOCTOR,
        doctor_specialty=doctor.specialty if doctor else DEFAULT_SPECIALTY,
        doctor_image=(doctor.image_url or '') if doctor else '',
        patient_name=row.patient_name,
        patient_email=row.patient_email,
        appointment_date=row.appointment_date,
        appointment_time=row.appointment_time,
        location=row.location,
        reason=row.reason or None,
        status=AppointmentStatus(row.status),
        created_at=row.created_at,
    )


def enquiry_from_row(row) -> EnquiryRecord:
    return EnquiryRecord(
        id=str(row.id),
        name=row.name,
        email=row.email,
        phone=row.phone or None,
        message=row.message,
        status=EnquiryStatus(row.status),
        created_at=row.created_at,
    )


def contact_from_row(row) -> HospitalContactRecord:
    return HospitalContactRecord(
        id=str(row.id),
        name=row.name,
        phone=row.phone,
        email=row.email,
        address=row.address or None,
        department=row.department or None,
    )


def medical_record_from_row(row) -> MedicalRecordEntry:
    doctor = row.doctor
    return MedicalRecordEntry(
        id=str(row.id),
        patient_name=row.patient_name,
        patient_email=row.patient_email,
        doctor_id=str(doctor.id) if doctor else None,
        doctor_name=doctor.name if doctor else UNKNOWN_DOCTOR,
        diagnosis=row.diagnosis,
        treatment=row.treatment,
        prescription=row.prescription,
        visit_date=row.visit_date,
        notes=row.notes or None,
    )
