"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code shared by the domain apps:

- Generic, reusable base classes (no domain-specific logic)
- A single JSON error envelope for every API failure
- Request logging and cross-origin resource headers

Services (import from core.services):
    - BaseService: Base class for service layer
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ValidationError: Input validation failures (400)
    - AuthenticationError: Missing or invalid credentials (401)
    - PermissionDeniedError: Authorization failures (403)
    - NotFoundError: Resource not found (404)
    - ConflictError: State conflicts (409)
    - RateLimitError: Rate limit exceeded (429)
    - InternalError: Unexpected server-side faults (500)
    - ExternalServiceError: Third-party service failures (502)

Helpers (import from core.helpers):
    - get_client_ip: Client IP extraction from request
    - join_url: Base URL and path segment composition

Infrastructure (wired in config.settings / config.urls):
    - core.exception_handler.api_exception_handler
    - core.middleware.RequestLoggingMiddleware
    - core.middleware.CrossOriginResourcePolicyMiddleware
    - core.views.health_check, route_not_found, server_error

Usage:
    from core.services import BaseService, ServiceResult
    from core.exceptions import ValidationError, NotFoundError
    from core.helpers import join_url

Note:
    - Business logic should NOT go here. Extend core classes in your domain apps.
"""

# Services (no Django model dependencies)
from .services import BaseService, ServiceResult

# Exceptions (no Django dependencies)
from .exceptions import (
    AuthenticationError,
    BaseApplicationError,
    ConflictError,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ValidationError,
)

# Helpers (no Django model dependencies)
from .helpers import get_client_ip, join_url

__all__ = [
    # Services
    "BaseService",
    "ServiceResult",
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "InternalError",
    "ExternalServiceError",
    # Helpers
    "get_client_ip",
    "join_url",
]
