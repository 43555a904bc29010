"""
Permission classes for role-guarded API routes.

This module provides DRF permission classes backed by AccessGate.authorize:
- HasRole(role): factory producing a permission class for any role
- IsAdminRole: callers must hold the "admin" role

Authentication has already run when these are evaluated; an anonymous caller
is reported by DRF as 401, an authenticated caller without the role as 403.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework import permissions

from authentication.models import User
from authentication.services import AccessGate

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.views import APIView

logger = logging.getLogger(__name__)


def HasRole(role: str) -> type[permissions.BasePermission]:  # noqa: N802
    """
    Build a permission class requiring the given role.

    Example:
        class ReportView(APIView):
            permission_classes = [HasRole(User.Role.ADMIN)]
    """

    class _HasRole(permissions.BasePermission):
        message = "Access denied. Insufficient role."
        required_role = role

        def has_permission(self, request: Request, view: APIView) -> bool:
            allowed = AccessGate.authorize(request.user, self.required_role)
            if not allowed and request.user.is_authenticated:
                logger.warning(
                    f"Role check failed for {request.user}: requires {self.required_role}",
                    extra={
                        "user_id": request.user.pk,
                        "required_role": self.required_role,
                        "path": request.path,
                    },
                )
            return allowed

    _HasRole.__name__ = f"HasRole_{role}"
    return _HasRole


IsAdminRole = HasRole(User.Role.ADMIN)
