"""
Unified API error responses.

Every failure leaves the API as ``{'ok': False, 'error': {'code', 'message'}}``.
Validation errors also carry ``fields`` with the first message per field.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .backend import BackendError

logger = logging.getLogger(__name__)


def _first_message(value):
    if isinstance(value, (list, tuple)):
        return _first_message(value[0]) if value else ''
    if isinstance(value, dict):
        return _first_message(next(iter(value.values()))) if value else ''
    return str(value)


def field_errors(detail) -> dict:
    if isinstance(detail, dict):
        return {field: _first_message(messages) for field, messages in detail.items()}
    return {'non_field_errors': _first_message(detail)}


def api_exception_handler(exc, context):
    if isinstance(exc, BackendError):
        return Response({'ok': False, 'error': {'code': exc.code, 'message': exc.message}},
                        status=exc.status_code)

    if isinstance(exc, exceptions.ValidationError):
        fields = field_errors(exc.detail)
        headline = next(iter(fields.values()), 'Invalid input')
        return Response(
            {'ok': False, 'error': {'code': 'validation_error', 'message': headline, 'fields': fields}},
            status=status.HTTP_400_BAD_REQUEST,
        )

    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error("unhandled API error", exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    return Response({'ok': False, 'error': {'code': 'api_error', 'message': str(detail)}},
                    status=resp.status_code, headers=_passthrough_headers(resp))


def _passthrough_headers(resp) -> dict:
    return {name: resp[name] for name in ('WWW-Authenticate', 'Retry-After') if resp.has_header(name)}
