# shopfront/urls.py
"""
PROJECT URLS

Pages:
- /                       storefront (catalog app)
- /login/ /register/ /logout/
- /<CONSOLE_PATH>         admin console (default /console/)

JSON API under /api/:
- /api/catalog/   public catalog (AllowAny)
- /api/auth/      login / register / me
- /api/console/   admin console API

Operational maturity:
- /api/health/ (AllowAny) checks the record service is reachable.
"""

from __future__ import annotations

from django.conf import settings
from django.urls import include, path
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from records.client import get_client
from records.exceptions import RecordServiceError


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "auth": {"type": "object"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "Storefront API is running",
            "auth": {
                "register": "/api/auth/register/",
                "login": "/api/auth/login/",
                "me": "/api/auth/me/",
            },
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
            "modules": {
                "catalog": "/api/catalog/products/",
                "console": "/api/console/",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "records": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "records": {"type": "string"},
                "error": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms the record service answers its health probe
    """
    try:
        get_client().health()
    except RecordServiceError as e:
        return Response(
            {"status": "degraded", "records": "down", "error": e.message}, status=503
        )
    return Response({"status": "ok", "records": "ok"})


# ------------------ CONSOLE PATH ------------------
# Keep trailing slash.
CONSOLE_PATH = getattr(settings, "CONSOLE_PATH", "console/")
if not CONSOLE_PATH.endswith("/"):
    CONSOLE_PATH = f"{CONSOLE_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    # Health check / root
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Modules
    path("auth/", include("accounts.api.urls")),
    path("catalog/", include("catalog.api.urls")),
    path("console/", include("console.api.urls")),
]

urlpatterns = [
    path("api/", include(api_urlpatterns)),
    path(CONSOLE_PATH, include("console.urls")),
    path("", include("accounts.urls")),
    path("", include("catalog.urls")),
]
