"""
Authentication endpoints and the sign-in / registration pages.

Signing in goes through :func:`django.contrib.auth.login` so that the
session cookie is set and the ``user_logged_in`` signal updates the
session context.  API clients additionally receive a DRF token and a
JWT pair.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.db import transaction
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken

from ..backend import BackendError
from ..guard import anonymous_route
from ..responses import ok, toast
from ..serializers.auth import RefreshSerializer, SignInSerializer, SignUpSerializer
from ..services.audit import client_ip, log_action
from ..services.roles import ensure_role
from ..session import get_session_context
from ..throttles import SignInThrottle, SignUpThrottle

logger = logging.getLogger(__name__)

User = get_user_model()

INVALID_CREDENTIALS = 'Invalid login credentials'


def _tokens(user) -> dict:
    token_obj, _ = Token.objects.get_or_create(user=user)
    refresh = RefreshToken.for_user(user)
    return {
        'token': token_obj.key,
        'jwt_access': str(refresh.access_token),
        'jwt_refresh': str(refresh),
    }


# ---------------------------------------------------------------------
# API
# ---------------------------------------------------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([SignUpThrottle])
def sign_up(request):
    """Register a new account.

    The e-mail address (lower-cased) is used as the username.  New
    accounts always start without the admin flag.
    """
    s = SignUpSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    with transaction.atomic():
        user = User.objects.create_user(
            username=vd['email'],
            email=vd['email'],
            password=vd['password'],
            first_name=vd['first_name'],
            last_name=vd['last_name'],
        )
        ensure_role(user)

    log_action(user=user, action='sign_up', object_type='user', object_id=user.pk,
               detail={'ip': client_ip(request)})
    logger.info("registered user %s", user.pk)
    return ok(
        {'user': {'id': user.pk, 'email': user.email}},
        toast=toast('Registration successful', 'Please check your email to confirm your account'),
        status=201,
    )


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([SignInThrottle])
def sign_in(request):
    s = SignInSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    email = s.validated_data['email']

    user = authenticate(request._request, username=email, password=s.validated_data['password'])
    if not user:
        log_action(user=None, action='sign_in', object_type='user', object_id=None,
                   detail={'result': 'fail', 'email': email, 'ip': client_ip(request)})
        raise BackendError(INVALID_CREDENTIALS)

    login(request._request, user)
    context = get_session_context(request)
    log_action(user=user, action='sign_in', object_type='user', object_id=user.pk,
               detail={'result': 'ok', 'ip': client_ip(request)})

    return ok({**_tokens(user), **context.as_dict()}, toast=toast('Signed in', f'Welcome back, {user.first_name or user.email}'))


@api_view(['POST'])
@permission_classes([AllowAny])
def sign_out(request):
    """End the session and revoke the caller's API credentials."""
    user = request.user
    if user is not None and user.is_authenticated:
        Token.objects.filter(user=user).delete()
        for outstanding in OutstandingToken.objects.filter(user=user):
            BlacklistedToken.objects.get_or_create(token=outstanding)
        log_action(user=user, action='sign_out', object_type='user', object_id=user.pk)
    logout(request._request)
    return ok(get_session_context(request).as_dict(), toast=toast('Signed out'))


@api_view(['GET'])
@permission_classes([AllowAny])
def session_view(request):
    return ok(get_session_context(request).as_dict())


@api_view(['POST'])
@permission_classes([AllowAny])
def refresh_view(request):
    """Exchange a refresh token for a new access token."""
    s = RefreshSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        refresh = RefreshToken(s.validated_data['refresh'])
    except TokenError as e:
        return Response({'ok': False, 'error': {'code': 'api_error', 'message': str(e)}}, status=401)
    return ok({'jwt_access': str(refresh.access_token)})


# ---------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------
@api_view(['GET'])
@permission_classes([AllowAny])
@anonymous_route
def login_page(request):
    return ok({
        'page': 'auth',
        'mode': 'sign-in',
        'title': 'Sign in to your account',
        'action': '/api/auth/sign-in',
        'alternate': {'label': 'Create an account', 'link': '/register'},
    })


@api_view(['GET'])
@permission_classes([AllowAny])
@anonymous_route
def register_page(request):
    return ok({
        'page': 'auth',
        'mode': 'sign-up',
        'title': 'Create an account',
        'action': '/api/auth/sign-up',
        'fields': ['first_name', 'last_name', 'email', 'password'],
        'alternate': {'label': 'Sign in instead', 'link': '/login'},
    })
