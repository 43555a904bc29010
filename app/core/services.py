"""
Base service layer patterns for business logic encapsulation.

This module provides foundational patterns for the service layer:
- ServiceResult: Standard result wrapper for consistent success/failure handling
- BaseService: Base class with common service utilities

Service Layer Philosophy:
    Services encapsulate business logic separate from views and models.
    Views handle HTTP concerns, services handle logic and filesystem state.

Pattern Comparison:
    - ServiceResult: Use for expected failures (validation, missing files)
    - Exceptions: Use for unexpected failures (bugs)

Usage:
    from core.services import BaseService, ServiceResult

    class AssetService(BaseService):
        def delete_asset(self, filename: str) -> ServiceResult[None]:
            if not is_safe(filename):
                return ServiceResult.failure(
                    "Invalid filename",
                    error_code="INVALID_FILENAME",
                )
            ...
            return ServiceResult.success(None)

    # In view
    result = service.delete_asset(filename)
    result.raise_for_error()  # raises the mapped core.exceptions error
    return Response({"status": "success", "message": "File deleted"})

Related:
    - core.exceptions: Error classes and their HTTP status codes
    - core.exception_handler: Renders raised errors as JSON
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from core.exceptions import BaseApplicationError, InternalError, ValidationError

if TYPE_CHECKING:
    from typing import Any

# Generic type for ServiceResult data
T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Standard result wrapper for service operations.

    Provides consistent success/failure handling without exceptions.
    Use this for expected failures (validation errors, missing resources).

    Attributes:
        success: Whether the operation succeeded
        data: Result data if successful (None if failed)
        error: Error message if failed (None if successful)
        error_code: Machine-readable error code for client handling
        errors: Field-level errors for validation failures
        error_class: Application error raised by raise_for_error()

    Usage:
        # Success case
        return ServiceResult.success(assets)

        # Failure case
        return ServiceResult.failure("File not found", "FILE_NOT_FOUND", error_class=NotFoundError)

        # Check result
        result = service.list_assets()
        if result.success:
            assets = result.data
        else:
            print(f"Error: {result.error} ({result.error_code})")
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: str | None = None
    errors: dict[str, list[str]] | None = field(default=None)
    error_class: type[BaseApplicationError] = field(default=ValidationError)

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        """
        Create a successful result.

        Args:
            data: The result data

        Returns:
            ServiceResult with success=True and data set
        """
        return cls(success=True, data=data)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: str | None = None,
        errors: dict[str, list[str]] | None = None,
        error_class: type[BaseApplicationError] = ValidationError,
    ) -> ServiceResult[T]:
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            error_code: Machine-readable error code for client handling
            errors: Field-level errors (for validation failures)
            error_class: Error class describing the failure category;
                decides the HTTP status when raised

        Returns:
            ServiceResult with success=False and error details

        Example:
            return ServiceResult.failure(
                "Too many files. Maximum is 5 files.",
                error_code="TOO_MANY_FILES",
            )
        """
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            errors=errors,
            error_class=error_class,
        )

    def to_response(self) -> dict[str, Any]:
        """
        Convert to API response format.

        Returns:
            Dict with status and data, or status and message on failure
        """
        if self.success:
            return {"status": "success", "data": self.data}

        response: dict[str, Any] = {
            "status": "error",
            "message": self.error,
        }
        if self.error_code:
            response["error_code"] = self.error_code
        if self.errors:
            response["errors"] = self.errors
        return response

    def raise_for_error(self) -> None:
        """
        Raise the mapped application error if the result failed.

        Lets views compose service calls as sequential steps with an early
        exit on failure; core.exception_handler renders the raised error.

        Raises:
            BaseApplicationError: Subclass chosen by error_class
        """
        if self.success:
            return
        details = {"errors": self.errors} if self.errors else None
        raise self.error_class(self.error or "", error_code=self.error_code, details=details)

    def map(self, func) -> ServiceResult:
        """
        Transform the data if successful.

        Example:
            result = service.list_assets()
            serialized = result.map(lambda assets: [a.to_dict() for a in assets])
        """
        if self.success and self.data is not None:
            return ServiceResult.success(func(self.data))
        return self  # type: ignore

    def __bool__(self) -> bool:
        """Allow using result in boolean context."""
        return self.success


class BaseService:
    """
    Base class for service layer classes.

    Provides common utilities for services:
    - Logging setup per service
    - Exception handling patterns

    Design Notes:
        - Services hold only immutable configuration, never request state
        - Use ServiceResult for expected failures
        - Unexpected failures are logged and reported generically
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    def handle_exception(
        cls,
        exc: Exception,
        message: str,
        error_code: str,
        context: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """
        Convert an unexpected exception to a generic InternalError result.

        The exception and its traceback are logged; only `message` is ever
        shown to clients.

        Args:
            exc: The caught exception
            message: Generic client-facing message
            error_code: Machine-readable error code
            context: Structured logging context

        Returns:
            Failed ServiceResult mapped to InternalError

        Example:
            try:
                os.unlink(path)
            except OSError as e:
                return cls.handle_exception(e, "Failed to delete media", "MEDIA_DELETE_FAILED")
        """
        cls.get_logger().error(
            f"{message}: {exc}",
            exc_info=exc,
            extra=context or {},
        )
        return ServiceResult.failure(
            message,
            error_code=error_code,
            error_class=InternalError,
        )
