"""
Enquiry queries and mutations.

Enquiries come in through the public contact form and are triaged by
administrators.  Any status may follow any other and writing the same
status twice leaves the row as it was.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from portal import querycache
from portal.backend import BackendError, NotFoundError, backend_call, parse_id
from portal.models import Enquiry
from portal.records import EnquiryRecord, EnquiryStatus, enquiry_from_row

logger = logging.getLogger(__name__)

ENQUIRY_NOT_FOUND = 'Enquiry not found'


@backend_call
def list_enquiries(status: Optional[str] = None) -> List[EnquiryRecord]:
    """Enquiries newest first, optionally limited to one status ('all' = no filter)."""
    status = (status or 'all').strip() or 'all'
    if status != 'all' and status not in {s.value for s in EnquiryStatus}:
        raise BackendError(f'Unknown enquiry status: {status}')

    def load() -> List[EnquiryRecord]:
        qs = Enquiry.objects.all()
        if status != 'all':
            qs = qs.filter(status=status)
        return [enquiry_from_row(e) for e in qs.order_by('-created_at')]

    return querycache.fetch('enquiries', load, status=status)


@backend_call
def recent_enquiries(limit: int = 5) -> List[EnquiryRecord]:
    def load() -> List[EnquiryRecord]:
        return [enquiry_from_row(e) for e in Enquiry.objects.order_by('-created_at')[:limit]]

    return querycache.fetch('recent-enquiries', load, limit=limit)


@backend_call
def submit_enquiry(data: Dict[str, Any]) -> EnquiryRecord:
    row = Enquiry.objects.create(
        name=data['name'],
        email=data['email'],
        phone=data.get('phone') or None,
        message=data['message'],
        status=EnquiryStatus.NEW.value,
    )
    querycache.invalidate_after('submit_enquiry')
    logger.info("enquiry %s submitted by %s", row.id, row.email)
    return enquiry_from_row(row)


@backend_call
def update_enquiry_status(enquiry_id, status: str) -> EnquiryRecord:
    pk = parse_id(enquiry_id, ENQUIRY_NOT_FOUND)
    try:
        new_status = EnquiryStatus(status)
    except ValueError:
        raise BackendError(f'Unknown enquiry status: {status}')
    updated = Enquiry.objects.filter(pk=pk).update(status=new_status.value)
    if not updated:
        raise NotFoundError(ENQUIRY_NOT_FOUND)
    querycache.invalidate_after('update_enquiry_status')
    logger.info("enquiry %s status set to %s", pk, new_status.value)
    return enquiry_from_row(Enquiry.objects.get(pk=pk))


@backend_call
def count_enquiries() -> int:
    return querycache.fetch('enquiries-count', Enquiry.objects.count)
