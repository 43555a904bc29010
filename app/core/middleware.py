"""
HTTP middleware for cross-cutting request concerns.

Provides:
- RequestLoggingMiddleware: method, path, status and timing for every request
- CrossOriginResourcePolicyMiddleware: marks responses as embeddable cross-origin

Both are generic and carry no domain knowledge.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from core.helpers import get_client_ip

if TYPE_CHECKING:
    from typing import Callable

    from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Log every request/response pair.

    Logs at INFO for normal responses, WARNING for 4xx and ERROR for 5xx.
    Request bodies are never logged (they may carry credentials or binary data).
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = int((time.monotonic() - started) * 1000)

        status_code = getattr(response, "status_code", 0)
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            f"{request.method} {request.path} {status_code} {duration_ms}ms",
            extra={
                "method": request.method,
                "path": request.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
                "client_ip": get_client_ip(request),
            },
        )
        return response


class CrossOriginResourcePolicyMiddleware:
    """
    Set Cross-Origin-Resource-Policy: cross-origin on every response.

    Uploaded images are embedded by front-ends on other origins; a same-origin
    policy would make browsers refuse to render them.
    """

    header = "Cross-Origin-Resource-Policy"
    policy = "cross-origin"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        response.headers.setdefault(self.header, self.policy)
        return response
