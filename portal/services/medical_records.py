from typing import List, Optional

from portal import querycache
from portal.backend import backend_call
from portal.models import MedicalRecord
from portal.records import MedicalRecordEntry, medical_record_from_row


@backend_call
def list_medical_records(patient_email: Optional[str] = None) -> List[MedicalRecordEntry]:
    """Records newest visit first; all patients when ``patient_email`` is None."""
    email = (patient_email or '').strip().lower() or None

    def load() -> List[MedicalRecordEntry]:
        qs = MedicalRecord.objects.select_related('doctor')
        if email:
            qs = qs.filter(patient_email__iexact=email)
        return [medical_record_from_row(r) for r in qs.order_by('-visit_date', '-created_at')]

    return querycache.fetch('medical-records', load, email=email)
