"""
Root pytest configuration for the Django project.

This module configures pytest-django and provides project-wide fixtures.
App-specific fixtures are defined in each app's tests/conftest.py.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import django
import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

if TYPE_CHECKING:
    from authentication.models import User

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


def pytest_configure():
    """Configure Django settings before tests run."""
    django.setup()

    from django.conf import settings

    # Disable throttling during tests to prevent rate limit failures
    settings.REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []
    settings.REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {}

    # No Redis needed to run the suite
    settings.CACHES = {
        "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}
    }

    # Use fast password hasher for tests (PBKDF2 is too slow with 870K iterations)
    settings.PASSWORD_HASHERS = [
        "django.contrib.auth.hashers.MD5PasswordHasher",
    ]


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_integration.py → e2e (full request journeys)
    - test_views.py, test_services.py, test_upload.py, etc. → integration
    - test_models.py, test_naming.py, test_validators.py, etc. → unit
    - Unmatched files → integration (safe default for Django)

    Explicit markers on test functions/classes take precedence.
    """
    e2e_patterns = ["test_integration.py"]

    integration_patterns = [
        "test_views.py",
        "test_services.py",
        "test_permissions.py",
        "test_middleware.py",
        "test_exception_handler.py",
        "test_upload.py",
        "test_directory.py",
        "test_delivery.py",
    ]

    unit_patterns = [
        "test_models.py",
        "test_serializers.py",
        "test_validators.py",
        "test_naming.py",
        "test_conf.py",
        "test_helpers.py",
    ]

    for item in items:
        # Skip if test already has unit/integration/e2e marker
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration", "e2e"}:
            continue

        filename = str(item.fspath).split("/")[-1]

        if any(pattern in filename for pattern in e2e_patterns):
            item.add_marker(pytest.mark.e2e)
        elif any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        elif any(pattern in filename for pattern in unit_patterns):
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# API Client Fixtures
# =============================================================================


def _bearer_client(user: User) -> APIClient:
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
    return client


@pytest.fixture
def api_client() -> APIClient:
    """Return unauthenticated API client."""
    return APIClient()


@pytest.fixture
def regular_user(db) -> User:
    """Create an active user with the default "user" role."""
    from authentication.tests.factories import UserFactory

    return UserFactory()


@pytest.fixture
def media_admin(db) -> User:
    """Create an active user with the "admin" role."""
    from authentication.tests.factories import AdminUserFactory

    return AdminUserFactory()


@pytest.fixture
def admin_api_client(media_admin: User) -> APIClient:
    """Return API client authenticated as a media admin."""
    return _bearer_client(media_admin)


@pytest.fixture
def user_api_client(regular_user: User) -> APIClient:
    """Return API client authenticated as a user without the admin role."""
    return _bearer_client(regular_user)


@pytest.fixture(autouse=True)
def _clear_cache():
    """Start every test with an empty cache so throttle history never leaks."""
    from django.core.cache import cache

    cache.clear()
    yield
