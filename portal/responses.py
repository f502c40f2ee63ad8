from typing import Any, Optional

from rest_framework.response import Response


def toast(title: str, description: str = '', variant: str = 'default') -> dict:
    return {'title': title, 'description': description, 'variant': variant}


def ok(data: Any = None, *, toast: Optional[dict] = None, status: int = 200) -> Response:
    payload = {'ok': True, 'data': data}
    if toast:
        payload['toast'] = toast
    return Response(payload, status=status)


def fail(exc, *, toast: Optional[dict] = None) -> Response:
    """Error response for a :class:`portal.backend.BackendError` with an optional toast."""
    payload = {'ok': False, 'error': {'code': exc.code, 'message': exc.message}}
    if toast:
        payload['toast'] = toast
    return Response(payload, status=exc.status_code)
