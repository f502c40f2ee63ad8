"""
Role lookups backed by :class:`portal.models.UserRole`.

The ``is_admin`` flag on the role row is authoritative; a missing row
means a regular user.
"""
from __future__ import annotations

import logging

from portal.backend import backend_call
from portal.models import UserRole

logger = logging.getLogger(__name__)


@backend_call
def is_admin_user(user) -> bool:
    if not (user and getattr(user, 'is_authenticated', False)):
        return False
    return UserRole.objects.filter(user_id=user.pk, is_admin=True).exists()


@backend_call
def ensure_role(user) -> UserRole:
    role, _ = UserRole.objects.get_or_create(user=user)
    return role


@backend_call
def set_admin(user, flag: bool) -> UserRole:
    role, _ = UserRole.objects.get_or_create(user=user)
    if role.is_admin != flag:
        role.is_admin = flag
        role.save(update_fields=['is_admin'])
        logger.info("admin flag for %s set to %s", user.get_username(), flag)
    return role
