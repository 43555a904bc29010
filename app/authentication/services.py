"""
Access gate: authentication and role authorization for privileged routes.

The gate answers two questions, always in this order:
    1. authenticate(request) -> User, or AuthenticationError
    2. authorize(principal, role) -> bool

Inside DRF views the same sequence runs through the configured
authentication classes (JWT bearer tokens) and the permission classes in
authentication.permissions, both before the view body executes, so a
rejected caller never causes side effects.

Related files:
    - permissions.py: HasRole / IsAdminRole built on AccessGate.authorize
    - models.py: User.role
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from core.exceptions import AuthenticationError

if TYPE_CHECKING:
    from django.http import HttpRequest

    from authentication.models import User

logger = logging.getLogger(__name__)


class AccessGate:
    """
    Authentication + role authorization.

    Usage:
        user = AccessGate.authenticate(request)
        if not AccessGate.authorize(user, User.Role.ADMIN):
            raise PermissionDeniedError("Admin access required")
    """

    authenticator_class = JWTAuthentication

    @classmethod
    def authenticate(cls, request: HttpRequest) -> User:
        """
        Resolve the bearer credential on a request to a user.

        Args:
            request: Django or DRF request carrying an Authorization header

        Returns:
            The authenticated, active user

        Raises:
            AuthenticationError: Missing, malformed, expired or revoked credential
        """
        try:
            resolved = cls.authenticator_class().authenticate(request)
        except AuthenticationFailed as e:
            logger.info(f"Rejected bearer credential: {e.detail}")
            raise AuthenticationError(
                "Invalid or expired token", error_code="INVALID_TOKEN"
            ) from e

        if resolved is None:
            raise AuthenticationError(
                "Authentication credentials were not provided.",
                error_code="NOT_AUTHENTICATED",
            )

        user, _token = resolved
        return user

    @staticmethod
    def authorize(principal: User | None, role: str) -> bool:
        """
        Check whether a principal holds a role.

        Args:
            principal: The authenticated user (or None / anonymous)
            role: Required role, e.g. User.Role.ADMIN

        Returns:
            True if the principal is an active, authenticated user with the role
        """
        if principal is None or not getattr(principal, "is_authenticated", False):
            return False
        if not principal.is_active:
            return False
        return principal.has_role(role)
