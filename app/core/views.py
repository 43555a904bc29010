"""
Core views providing infrastructure endpoints.

This module contains views that are not part of the business domain but are
essential for application infrastructure:
- health_check: liveness/readiness probe
- route_not_found / server_error: JSON replacements for Django's HTML error pages
"""

import logging

from django.db import connection
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)


def health_check(request):
    """
    Health check endpoint for monitoring and orchestration.

    Returns:
        JsonResponse with status, message, timestamp and database health

    HTTP Status Codes:
        200: All systems operational
        503: Database unreachable

    Example Response:
        {
            "status": "success",
            "message": "We3Vision API is running",
            "timestamp": "2026-01-01T00:00:00+00:00",
            "database": "connected"
        }
    """
    logger.debug("Health check endpoint hit")
    health_status = {
        "status": "success",
        "message": "We3Vision API is running",
        "timestamp": timezone.now().isoformat(),
        "database": "unknown",
    }
    status_code = 200

    # Check database connectivity
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        health_status["database"] = "connected"
    except Exception:
        logger.exception("Health check database probe failed")
        health_status["database"] = "disconnected"
        health_status["status"] = "error"
        health_status["message"] = "Database unavailable"
        status_code = 503

    return JsonResponse(health_status, status=status_code)


def route_not_found(request, exception=None):
    """Render unknown routes as a JSON 404."""
    logger.info(f"Route not found: {request.method} {request.path}")
    return JsonResponse({"status": "error", "message": "Route not found"}, status=404)


def server_error(request):
    """Render unhandled non-API errors without leaking details."""
    return JsonResponse(
        {"status": "error", "message": "Something went wrong!"}, status=500
    )
