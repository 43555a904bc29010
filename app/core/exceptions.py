"""
Base exception classes for application-wide error handling.

This module provides a standardized exception hierarchy that enables:
- Consistent error responses across the application
- Machine-readable error codes for client handling
- A single mapping from error class to HTTP status

Exception Hierarchy:
    BaseApplicationError (base)
    ├── ValidationError - Input validation failures (400)
    ├── AuthenticationError - Missing or invalid credentials (401)
    ├── PermissionDeniedError - Authorization failures (403)
    ├── NotFoundError - Resource not found (404)
    ├── ConflictError - State conflicts (409)
    ├── RateLimitError - Rate limit exceeded (429)
    ├── InternalError - Unexpected server-side faults (500)
    └── ExternalServiceError - Third-party service failures (502)

Usage:
    from core.exceptions import ValidationError, NotFoundError

    # Raise with message only
    raise ValidationError("Invalid filename")

    # Raise with error code for client handling
    raise NotFoundError("File not found", error_code="FILE_NOT_FOUND")

    # Rendered by core.exception_handler as
    # {"status": "error", "message": "File not found", "error_code": "FILE_NOT_FOUND"}

Note:
    These exceptions are for domain/business logic errors.
    DRF handles API-layer exceptions (parsing, authentication, throttling).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description, safe to show to clients
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, metadata, etc.)
        status_code: HTTP status used when the error reaches the API layer

    Example:
        try:
            service.delete_asset(filename)
        except NotFoundError as e:
            logger.warning(f"Asset not found: {e.error_code}")
            return Response(e.to_dict(), status=e.status_code)
    """

    default_error_code: str = "APPLICATION_ERROR"
    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dict with status, message, error_code and optional details keys

        Example:
            {
                "status": "error",
                "message": "File not found",
                "error_code": "FILE_NOT_FOUND"
            }
        """
        result: dict[str, Any] = {
            "status": "error",
            "message": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation fails.

    Use for:
    - Invalid filenames
    - Wrong content types
    - Size or count limits exceeded

    Example:
        raise ValidationError(
            "File too large. Maximum size is 5MB.",
            error_code="FILE_TOO_LARGE",
            details={"filename": "photo.png"},
        )
    """

    default_error_code: str = "VALIDATION_ERROR"
    status_code: int = 400


class AuthenticationError(BaseApplicationError):
    """
    Raised when a request carries no usable credential.

    Note:
        Inside DRF views authentication is normally handled by the
        authentication classes; this is for explicit checks outside them.
    """

    default_error_code: str = "NOT_AUTHENTICATED"
    status_code: int = 401


class PermissionDeniedError(BaseApplicationError):
    """
    Raised when user lacks permission for an operation.

    Use for:
    - Role-based access control violations
    - Unauthorized resource access

    Example:
        if not AccessGate.authorize(user, Role.ADMIN):
            raise PermissionDeniedError(
                "Admin access required",
                error_code="ADMIN_REQUIRED"
            )
    """

    default_error_code: str = "PERMISSION_DENIED"
    status_code: int = 403


class NotFoundError(BaseApplicationError):
    """
    Raised when a requested resource is not found.

    Use for:
    - File not found
    - Database record not found

    Note:
        Consider returning empty results for list queries.
        Use NotFoundError for single-resource lookups where existence is expected.
    """

    default_error_code: str = "NOT_FOUND"
    status_code: int = 404


class ConflictError(BaseApplicationError):
    """
    Raised when operation conflicts with current resource state.

    Use for:
    - Duplicate entries
    - Concurrent modification conflicts
    """

    default_error_code: str = "CONFLICT"
    status_code: int = 409


class RateLimitError(BaseApplicationError):
    """
    Raised when rate limit is exceeded.

    Note:
        Include retry_after in details when possible to help clients.
    """

    default_error_code: str = "RATE_LIMIT_EXCEEDED"
    status_code: int = 429


class InternalError(BaseApplicationError):
    """
    Raised for unexpected server-side faults (I/O, filesystem).

    The message must be generic; the underlying cause is logged server-side
    and never rendered to clients.

    Example:
        except OSError:
            logger.exception("Failed to list uploads directory")
            raise InternalError("Failed to list media", error_code="MEDIA_LIST_FAILED")
    """

    default_error_code: str = "INTERNAL_ERROR"
    status_code: int = 500


class ExternalServiceError(BaseApplicationError):
    """
    Raised when an external service call fails.

    Note:
        Log the original error for debugging but don't expose
        internal details to clients in production.
    """

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"
    status_code: int = 502
