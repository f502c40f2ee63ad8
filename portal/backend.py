"""
Error types raised by the data-access layer.

Every function in :mod:`portal.services` either returns records or raises
:class:`BackendError` with a message that can be shown to the user as
is.  Database failures are converted by :func:`backend_call` so that the
views never see ORM exceptions.
"""
from __future__ import annotations

import functools
import logging
import uuid
from typing import Any, Callable, TypeVar

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


class BackendError(Exception):
    """A failed query or mutation, carrying a human-readable message."""

    code = 'backend_error'
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(BackendError):
    code = 'not_found'
    status_code = 404


class ForbiddenError(BackendError):
    """The caller may not touch this row."""
    code = 'api_error'
    status_code = 403


def backend_call(func: F) -> F:
    """Convert database errors raised by ``func`` into :class:`BackendError`."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BackendError:
            raise
        except DjangoValidationError as exc:
            message = '; '.join(exc.messages) if exc.messages else str(exc)
            raise BackendError(message) from exc
        except DatabaseError as exc:
            logger.exception("database error in %s", func.__qualname__)
            raise BackendError(str(exc) or 'Database error') from exc

    return wrapper  # type: ignore[return-value]


def parse_id(value: Any, message: str) -> uuid.UUID:
    """Parse a row id, treating malformed ids as missing rows."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise NotFoundError(message)
