"""
URL configuration for the clinic front-desk project.

The `urlpatterns` list routes URLs to views.  API routes come from the
frontdesk app; OpenAPI documentation is exposed at ``/swagger/`` and
``/redoc/``.
"""
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Clinic Front Desk API",
    default_version='v1',
    description="Patient queue, doctor roster and appointment book for a small clinic.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
    authentication_classes=(),
)

urlpatterns = [
    path('', include('frontdesk.routers')),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
