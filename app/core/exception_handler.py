"""
DRF exception handler rendering every API error in one JSON envelope.

All errors leave the API as:
    {"status": "error", "message": "<safe message>", ...}

Mapping:
    - BaseApplicationError subclasses: their own status_code and to_dict()
    - DRF APIException (401, 403, 404, 405, 415, 429, parse errors):
      DRF's status code, detail flattened into message
    - Django Http404 / PermissionDenied: via DRF's default handling
    - Anything else: logged with traceback, 500 "Something went wrong!"

Configured via REST_FRAMEWORK["EXCEPTION_HANDLER"].
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions import BaseApplicationError

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


def _flatten_detail(detail: Any) -> str:
    """Reduce DRF's nested error detail to a single message string."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _flatten_detail(detail["detail"])
        for value in detail.values():
            return _flatten_detail(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _flatten_detail(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """
    Render an exception raised inside a DRF view.

    Args:
        exc: The raised exception
        context: DRF handler context (view, request, args, kwargs)

    Returns:
        Response with the error envelope
    """
    if isinstance(exc, BaseApplicationError):
        if exc.status_code >= 500:
            logger.error(
                f"Application error in {context.get('view').__class__.__name__}: {exc!r}",
                exc_info=exc,
            )
        return Response(exc.to_dict(), status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        body: dict[str, Any] = {
            "status": "error",
            "message": _flatten_detail(response.data),
        }
        if isinstance(response.data, dict) and "detail" not in response.data:
            body["errors"] = response.data
        response.data = body
        return response

    logger.exception(
        f"Unhandled error in {context.get('view').__class__.__name__}: {exc}",
        exc_info=exc,
    )
    return Response(
        {"status": "error", "message": GENERIC_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
