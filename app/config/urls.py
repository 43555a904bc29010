"""
URL configuration for the Django application.

The `urlpatterns` list routes URLs to views. This is the root URL configuration
that includes all app-specific routes.

URL Structure:
    /docs/                         - ReDoc API documentation
    /schema/                       - OpenAPI schema (YAML)
    /admin/                        - Django admin interface (users and roles)
    /uploads/{filename}            - Public, unauthenticated asset delivery
    /api/health/                   - Health check endpoint
    /api/auth/                     - Token endpoints
        token/                     - Obtain access/refresh pair
        token/refresh/             - Refresh access token
    /api/media/                    - Media endpoints (admin only)
        (GET)                      - List stored images
        (POST)                     - Upload up to 5 images (field "images")
        single/                    - Upload one image (field "image")
        {filename}/ (DELETE)       - Delete a stored image

Unknown routes render a JSON 404 via handler404.

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

from core.views import health_check
from media.views import PublicAssetView

# =============================================================================
# API Routes
# =============================================================================
api_patterns = [
    path("health/", health_check, name="health_check"),
    path("auth/", include("authentication.urls")),
    path("media/", include("media.urls")),
]

urlpatterns = [
    # Documentation
    path("docs/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # Admin
    path("admin/", admin.site.urls),
    # Public asset delivery (no authentication, embeddable cross-origin)
    path("uploads/<str:filename>", PublicAssetView.as_view(), name="uploads"),
    # API
    path("api/", include(api_patterns)),
]

handler404 = "core.views.route_not_found"
handler500 = "core.views.server_error"

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "We3Vision Admin"
admin.site.site_title = "Admin Portal"
admin.site.index_title = "Welcome to the Admin Portal"
