"""
Tests for the DRF exception handler.

These tests verify that every error leaves the API in the
{"status": "error", "message": ...} envelope with the right status code,
and that unexpected failures never leak internal details.
"""

from __future__ import annotations

from rest_framework import exceptions as drf_exceptions
from rest_framework.views import APIView

from core.exception_handler import GENERIC_ERROR_MESSAGE, api_exception_handler
from core.exceptions import (
    InternalError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


def _context():
    return {"view": APIView(), "args": (), "kwargs": {}, "request": None}


class TestApplicationErrors:
    """Application errors render with their own status code."""

    def test_validation_error_is_400(self):
        response = api_exception_handler(
            ValidationError("Invalid filename", error_code="INVALID_FILENAME"),
            _context(),
        )

        assert response.status_code == 400
        assert response.data == {
            "status": "error",
            "message": "Invalid filename",
            "error_code": "INVALID_FILENAME",
        }

    def test_not_found_error_is_404(self):
        response = api_exception_handler(NotFoundError("File not found"), _context())

        assert response.status_code == 404
        assert response.data["message"] == "File not found"

    def test_permission_denied_is_403(self):
        response = api_exception_handler(PermissionDeniedError("nope"), _context())

        assert response.status_code == 403

    def test_internal_error_is_500(self):
        response = api_exception_handler(
            InternalError("Failed to list media", error_code="MEDIA_LIST_FAILED"),
            _context(),
        )

        assert response.status_code == 500
        assert response.data["message"] == "Failed to list media"


class TestFrameworkErrors:
    """DRF errors are flattened into the same envelope."""

    def test_not_authenticated_is_401(self):
        response = api_exception_handler(drf_exceptions.NotAuthenticated(), _context())

        assert response.status_code == 401
        assert response.data["status"] == "error"
        assert "credentials" in response.data["message"].lower()

    def test_throttled_is_429(self):
        response = api_exception_handler(drf_exceptions.Throttled(wait=60), _context())

        assert response.status_code == 429
        assert response.data["status"] == "error"

    def test_field_errors_are_kept(self):
        exc = drf_exceptions.ValidationError({"filename": ["This field is required."]})

        response = api_exception_handler(exc, _context())

        assert response.status_code == 400
        assert response.data["message"] == "This field is required."
        assert response.data["errors"] == {"filename": ["This field is required."]}


class TestUnexpectedErrors:
    """Unknown exceptions become a generic 500."""

    def test_unknown_exception_is_generic_500(self):
        response = api_exception_handler(
            RuntimeError("secret path /srv/uploads/x.png"), _context()
        )

        assert response.status_code == 500
        assert response.data == {"status": "error", "message": GENERIC_ERROR_MESSAGE}
