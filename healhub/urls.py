"""
URL configuration for the HealHub project.

The Django admin site lives at ``/django-admin/`` because ``/admin`` is
the portal's own dashboard.  OpenAPI documentation is exposed at
``/swagger/`` and ``/redoc/`` and Prometheus metrics at ``/metrics``.
The portal routes come last since they end in a catch-all.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="HealHub API",
    default_version='v1',
    description="Doctors, services, appointments and enquiries for the HealHub hospital site.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('django-admin/', admin.site.urls),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    # Prometheus exposes its own "metrics" path
    path('', include('django_prometheus.urls')),
    path('', include('portal.routes')),
]
