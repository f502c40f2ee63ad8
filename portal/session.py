"""
Per-request session and role context.

A :class:`SessionContext` holds the signed-in identity and the derived
``is_admin`` flag.  It starts out loading, is restored from the
authenticated user of the request and is then kept up to date by auth
events: Django's ``user_logged_in``/``user_logged_out`` signals are
forwarded here as ``SIGNED_IN``/``SIGNED_OUT``.  ``USER_UPDATED`` has no
signal behind it; code that swaps the user object during a request
passes it to :meth:`SessionContext.update` itself.  Views obtain the
context with :func:`get_session_context`; nothing is stored globally.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional

from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.dispatch import receiver

logger = logging.getLogger(__name__)

RoleResolver = Callable[[Any], bool]
Listener = Callable[['AuthEvent', 'SessionContext'], None]


class AuthEvent(str, Enum):
    INITIAL_SESSION = 'INITIAL_SESSION'
    SIGNED_IN = 'SIGNED_IN'
    SIGNED_OUT = 'SIGNED_OUT'
    USER_UPDATED = 'USER_UPDATED'


def default_role_resolver(user) -> bool:
    from portal.services.roles import is_admin_user

    return is_admin_user(user)


class SessionContext:
    def __init__(self, role_resolver: Optional[RoleResolver] = None) -> None:
        self._resolve_role = role_resolver or default_role_resolver
        self._listeners: list[Listener] = []
        self.user = None
        self.is_admin = False
        self.loading = True

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user is not None and getattr(self.user, 'is_authenticated', False))

    def restore(self, user) -> 'SessionContext':
        """Rehydrate from the user the request was authenticated as."""
        self._apply(user)
        self._notify(AuthEvent.INITIAL_SESSION)
        return self

    def update(self, event: AuthEvent | str, user=None) -> 'SessionContext':
        event = AuthEvent(event)
        if event == AuthEvent.SIGNED_OUT:
            self.clear()
            return self
        self._apply(user)
        self._notify(event)
        return self

    def clear(self) -> None:
        self.user = None
        self.is_admin = False
        self.loading = False
        self._notify(AuthEvent.SIGNED_OUT)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def identity(self) -> Optional[dict]:
        if not self.is_authenticated:
            return None
        user = self.user
        return {
            'id': user.pk,
            'email': user.email,
            'firstName': user.first_name,
            'lastName': user.last_name,
            'name': user.get_full_name() or user.email,
        }

    def as_dict(self) -> dict:
        return {
            'loading': self.loading,
            'signedIn': self.is_authenticated,
            'isAdmin': self.is_admin,
            'user': self.identity(),
        }

    def _apply(self, user) -> None:
        if user is not None and getattr(user, 'is_authenticated', False):
            self.user = user
            self.is_admin = bool(self._resolve_role(user))
        else:
            self.user = None
            self.is_admin = False
        self.loading = False

    def _notify(self, event: AuthEvent) -> None:
        logger.debug("session %s user=%s admin=%s", event.value,
                     getattr(self.user, 'pk', None), self.is_admin)
        for listener in list(self._listeners):
            listener(event, self)


def _raw_request(request):
    # DRF wraps the Django request; the context lives on the inner one
    return getattr(request, '_request', request)


def get_session_context(request, role_resolver: Optional[RoleResolver] = None) -> SessionContext:
    raw = _raw_request(request)
    context = getattr(raw, 'session_context', None)
    if context is None:
        context = SessionContext(role_resolver)
        raw.session_context = context
    if context.loading:
        context.restore(getattr(request, 'user', None))
    return context


@receiver(user_logged_in)
def _on_signed_in(sender, request, user, **kwargs):
    if request is not None:
        get_session_context(request).update(AuthEvent.SIGNED_IN, user)


@receiver(user_logged_out)
def _on_signed_out(sender, request, user, **kwargs):
    if request is not None:
        raw = _raw_request(request)
        context = getattr(raw, 'session_context', None)
        if context is None:
            context = SessionContext()
            raw.session_context = context
        context.clear()
