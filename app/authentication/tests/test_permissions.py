"""
Tests for role permission classes.

These tests verify HasRole / IsAdminRole against DRF requests for
anonymous, regular and admin principals.
"""

import pytest
from django.contrib.auth.models import AnonymousUser
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory
from rest_framework.views import APIView

from authentication.models import User
from authentication.permissions import HasRole, IsAdminRole
from authentication.tests.factories import AdminUserFactory, UserFactory


def make_request(user=None):
    """Create a DRF Request object with the given user."""
    drf_request = Request(APIRequestFactory().get("/"))
    drf_request._user = user or AnonymousUser()
    return drf_request


@pytest.mark.django_db
class TestIsAdminRole:
    """Tests for IsAdminRole."""

    def test_admin_allowed(self):
        assert IsAdminRole().has_permission(make_request(AdminUserFactory()), APIView()) is True

    def test_regular_user_denied(self):
        assert IsAdminRole().has_permission(make_request(UserFactory()), APIView()) is False

    def test_anonymous_denied(self):
        assert IsAdminRole().has_permission(make_request(), APIView()) is False

    def test_denial_message(self):
        assert IsAdminRole.message == "Access denied. Insufficient role."


@pytest.mark.django_db
class TestHasRole:
    """Tests for the HasRole factory."""

    def test_user_role_allows_regular_user(self):
        permission = HasRole(User.Role.USER)()

        assert permission.has_permission(make_request(UserFactory()), APIView()) is True

    def test_factory_names_class_after_role(self):
        assert HasRole(User.Role.USER).__name__ == "HasRole_user"
