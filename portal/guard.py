"""
Role-gated routing for admin pages.

:class:`RouteGuard` is a three-state machine.  It starts in ``loading``
and :meth:`RouteGuard.resolve` moves it to ``authorized`` only when the
session has a signed-in user whose role flag is set; any other outcome
is ``unauthorized``.  :func:`admin_route` wraps a page view so that an
unauthorized visitor is redirected to the home page with a one-shot
notice instead of receiving any admin data.
"""
from __future__ import annotations

import functools
import logging
from enum import Enum

from django.contrib import messages
from django.shortcuts import redirect

from .session import SessionContext, get_session_context

logger = logging.getLogger(__name__)

REDIRECT_TO = '/'
UNAUTHORIZED_NOTICE = 'You need administrator access to view that page.'


class GuardState(str, Enum):
    LOADING = 'loading'
    AUTHORIZED = 'authorized'
    UNAUTHORIZED = 'unauthorized'


class RouteGuard:
    def __init__(self, context: SessionContext) -> None:
        self.context = context
        self.state = GuardState.LOADING

    def resolve(self) -> GuardState:
        if self.context.loading:
            return self.state
        if self.context.is_authenticated and self.context.is_admin:
            self.state = GuardState.AUTHORIZED
        else:
            self.state = GuardState.UNAUTHORIZED
        return self.state


def admin_route(view):
    """Redirect to ``/`` unless the signed-in user is an administrator."""

    @functools.wraps(view)
    def wrapper(request, *args, **kwargs):
        guard = RouteGuard(get_session_context(request))
        if guard.resolve() != GuardState.AUTHORIZED:
            raw = getattr(request, '_request', request)
            logger.info("blocked %s for %s", raw.path, getattr(guard.context.user, 'pk', 'anonymous'))
            messages.warning(raw, UNAUTHORIZED_NOTICE)
            return redirect(REDIRECT_TO)
        return view(request, *args, **kwargs)

    return wrapper


def anonymous_route(view):
    """Send signed-in users away from the sign-in and registration pages."""

    @functools.wraps(view)
    def wrapper(request, *args, **kwargs):
        if get_session_context(request).is_authenticated:
            return redirect(REDIRECT_TO)
        return view(request, *args, **kwargs)

    return wrapper
