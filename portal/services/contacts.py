from typing import List

from portal import querycache
from portal.backend import backend_call
from portal.models import HospitalContact
from portal.records import HospitalContactRecord, contact_from_row


@backend_call
def list_contacts() -> List[HospitalContactRecord]:
    def load() -> List[HospitalContactRecord]:
        return [contact_from_row(c) for c in HospitalContact.objects.order_by('name')]

    return querycache.fetch('hospital-contacts', load)
