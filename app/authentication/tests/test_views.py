"""
Tests for token endpoints.

These tests verify:
- POST /api/auth/token/ issues a JWT pair with a role claim
- Wrong credentials are rejected
- Refresh tokens can be exchanged for access tokens
"""

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from authentication.tests.factories import AdminUserFactory


@pytest.mark.django_db
class TestTokenObtainView:
    """Tests for the token obtain endpoint."""

    def test_issues_token_pair_with_role_claim(self):
        AdminUserFactory(email="boss@example.com", password="Secret123!")

        response = APIClient().post(
            reverse("authentication:token-obtain"),
            {"email": "boss@example.com", "password": "Secret123!"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert "refresh" in response.data
        access = AccessToken(response.data["access"])
        assert access["role"] == "admin"

    def test_wrong_password_is_401(self):
        AdminUserFactory(email="boss2@example.com", password="Secret123!")

        response = APIClient().post(
            reverse("authentication:token-obtain"),
            {"email": "boss2@example.com", "password": "wrong"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["status"] == "error"


@pytest.mark.django_db
class TestTokenRefreshView:
    """Tests for the token refresh endpoint."""

    def test_refresh_returns_new_access_token(self):
        AdminUserFactory(email="boss3@example.com", password="Secret123!")
        client = APIClient()
        pair = client.post(
            reverse("authentication:token-obtain"),
            {"email": "boss3@example.com", "password": "Secret123!"},
            format="json",
        ).data

        response = client.post(
            reverse("authentication:token-refresh"),
            {"refresh": pair["refresh"]},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert "access" in response.data
