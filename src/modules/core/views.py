import time
from typing import Any, Dict

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.exception_handler import INTERNAL_ERROR_MESSAGE, ApiErrorResponse

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except DatabaseError:
        services["database"] = {"status": "down"}
        healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    logger.info("health_check_completed", status="healthy" if healthy else "unhealthy")

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )


# ---------------------------------------------------------------------------
# Envelope responses for requests that never reach a DRF view
# ---------------------------------------------------------------------------


def not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    envelope = ApiErrorResponse(status_code=404, message="Resource not found")
    return JsonResponse(envelope.model_dump(by_alias=True, exclude_none=True), status=404)


def server_error(request: HttpRequest) -> JsonResponse:
    envelope = ApiErrorResponse(status_code=500, message=INTERNAL_ERROR_MESSAGE)
    return JsonResponse(envelope.model_dump(by_alias=True, exclude_none=True), status=500)
