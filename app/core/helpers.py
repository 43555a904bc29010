"""
Helper functions for common infrastructure operations.

This module provides domain-agnostic utility functions for:
- HTTP request helpers (client IP extraction)
- URL composition

Usage:
    from core.helpers import get_client_ip, join_url

    ip = get_client_ip(request)
    url = join_url("https://api.example.com", "uploads", "a.png")
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from django.http import HttpRequest


def get_client_ip(request: HttpRequest) -> str:
    """
    Extract client IP from request, handling proxies.

    Checks X-Forwarded-For header for proxy chains.

    Args:
        request: Django HTTP request

    Returns:
        Client IP address string
    """
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        # Take the first IP in the chain (original client)
        ip = x_forwarded_for.split(",")[0].strip()
    else:
        ip = request.META.get("REMOTE_ADDR", "")
    return ip


def join_url(base: str, *segments: str) -> str:
    """
    Join a base URL with path segments using single slashes.

    Segments are percent-encoded; an empty base yields a root-relative path.

    Example:
        join_url("https://x.io/", "uploads", "a b.png")  # "https://x.io/uploads/a%20b.png"
        join_url("", "uploads", "a.png")                 # "/uploads/a.png"
    """
    path = "/".join(quote(segment.strip("/"), safe="") for segment in segments)
    return f"{base.rstrip('/')}/{path}"
