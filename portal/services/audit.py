from typing import Optional, Any, Dict

from django.contrib.auth import get_user_model

from portal.models import AuditEvent

User = get_user_model()


def log_action(*, user: Optional[Any], action: str, object_type: Optional[str] = None,
               object_id: Optional[Any] = None, detail: Optional[Dict[str, Any]] = None) -> AuditEvent:
    # Anonymous callers are recorded without a user
    return AuditEvent.objects.create(
        user=user if isinstance(user, User) and user.pk else None,
        action=action,
        object_type=object_type,
        object_id=str(object_id) if object_id is not None else None,
        detail=detail or {},
    )


def client_ip(request) -> Optional[str]:
    # First hop of X-Forwarded-For when behind a proxy
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    if forwarded:
        return forwarded.split(',')[0].strip() or None
    return request.META.get('REMOTE_ADDR')
