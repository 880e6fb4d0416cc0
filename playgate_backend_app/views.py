"""
views.py — Health Check Endpoint for Playgate Backend

Provides a simple JSON response indicating service health.

Checks performed:
- Database connectivity (simple SELECT 1)
- Cache round trip (the pairing throttles depend on it)

Returns HTTP 200 if all checks pass, otherwise 503.
"""

import logging

from django.core.cache import cache
from django.http import JsonResponse
from django.db import connection
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


def _check_database():
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return "ok"
    except Exception as e:
        logger.exception("Health check: database unavailable")
        return f"error: {str(e)}"


def _check_cache():
    try:
        cache.set("health:ping", "pong", timeout=5)
        if cache.get("health:ping") != "pong":
            return "error: cache round trip failed"
        return "ok"
    except Exception as e:
        logger.exception("Health check: cache unavailable")
        return f"error: {str(e)}"


@require_GET
def health_check(request):
    """
    Health-check endpoint.

    Used by Docker, load balancers, or uptime monitors
    to verify that the backend, database and cache are operational.

    Returns:
        JSON response:
        {
            "status": "ok" | "error",
            "components": {
                "database": "ok" | "error: <message>",
                "cache": "ok" | "error: <message>"
            }
        }
    """
    components = {
        "database": _check_database(),
        "cache": _check_cache(),
    }
    healthy = all(v == "ok" for v in components.values())

    return JsonResponse(
        {
            "status": "ok" if healthy else "error",
            "components": components,
        },
        status=200 if healthy else 503,
    )
