"""
Custom permission classes for role based access control.
"""
from rest_framework.permissions import BasePermission

from .session import get_session_context


class IsAdminRole(BasePermission):
    """Allow access only to signed-in users whose role flag is set."""
    message = 'Administrator access required.'

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        if not (user and user.is_authenticated):
            return False
        return get_session_context(request).is_admin
