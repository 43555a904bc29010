"""
URL configuration for authentication app.

URL structure:
    /api/auth/token/          - Obtain access/refresh JWT pair (POST email + password)
    /api/auth/token/refresh/  - Exchange refresh token for a new access token
"""

from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

app_name = "authentication"

urlpatterns = [
    path("token/", TokenObtainPairView.as_view(), name="token-obtain"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
]
