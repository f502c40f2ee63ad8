from typing import Optional, List

from portal import querycache
from portal.backend import NotFoundError, backend_call, parse_id
from portal.models import Doctor
from portal.records import DoctorRecord, doctor_from_row

DOCTOR_NOT_FOUND = "Sorry, we couldn't find the doctor you're looking for."


@backend_call
def list_doctors(q: Optional[str] = None, specialty: Optional[str] = None) -> List[DoctorRecord]:
    q = (q or '').strip() or None
    specialty = (specialty or '').strip() or None
    if specialty and specialty.lower() == 'all':
        specialty = None

    def load() -> List[DoctorRecord]:
        qs = Doctor.objects.all()
        if q:
            qs = qs.filter(name__icontains=q)
        if specialty:
            qs = qs.filter(specialty__iexact=specialty)
        return [doctor_from_row(d) for d in qs.order_by('name')]

    return querycache.fetch('doctors', load, q=q, specialty=specialty)


@backend_call
def get_doctor(doctor_id) -> DoctorRecord:
    pk = parse_id(doctor_id, DOCTOR_NOT_FOUND)

    def load() -> DoctorRecord:
        row = Doctor.objects.filter(pk=pk).first()
        if row is None:
            raise NotFoundError(DOCTOR_NOT_FOUND)
        return doctor_from_row(row)

    return querycache.fetch('doctors', load, id=pk)


@backend_call
def list_doctors_by_specialty(specialty: str) -> List[DoctorRecord]:
    """Doctors whose specialty equals ``specialty``, ignoring case."""
    return list_doctors(specialty=specialty) if (specialty or '').strip() else []


@backend_call
def featured_doctors(limit: int = 3) -> List[DoctorRecord]:
    def load() -> List[DoctorRecord]:
        qs = Doctor.objects.order_by('-rating', '-review_count', 'name')[:limit]
        return [doctor_from_row(d) for d in qs]

    return querycache.fetch('doctors', load, featured=limit)


@backend_call
def list_specialties() -> List[str]:
    """Distinct specialties, ordered by name, first spelling wins."""
    seen: dict[str, str] = {}
    for doctor in list_doctors():
        seen.setdefault(doctor.specialty.lower(), doctor.specialty)
    return sorted(seen.values(), key=str.lower)


@backend_call
def count_doctors() -> int:
    return querycache.fetch('doctors-count', Doctor.objects.count)
