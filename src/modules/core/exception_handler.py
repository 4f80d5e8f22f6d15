"""Global DRF exception handler.

The single place where raised errors become HTTP responses.  Every
error is rendered as the uniform envelope::

    {"statusCode": 404, "message": "...", "errors": {...}}

``errors`` is only present for request validation failures.  Internal
exception text is logged, never echoed to the client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import PermissionDenied
from django.http import Http404
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import set_rollback

from modules.core.exceptions import ApplicationError

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request"


class ApiErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    status_code: int
    message: str
    errors: Optional[Dict[str, List[str]]] = None

    def to_response(self) -> Response:
        return Response(
            self.model_dump(by_alias=True, exclude_none=True),
            status=self.status_code,
        )


def _framework_message(detail: Any) -> str:
    if isinstance(detail, (list, tuple)) and detail:
        return _framework_message(detail[0])
    if isinstance(detail, dict) and detail:
        return _framework_message(next(iter(detail.values())))
    return str(detail)


def build_error_envelope(exc: Exception) -> ApiErrorResponse:
    """Map an exception to its envelope.

    Application errors use their own status and message, DRF errors keep
    the framework's status and detail, anything else becomes a 500.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, ApplicationError):
        return ApiErrorResponse(
            status_code=exc.status_code,
            message=exc.message,
            errors=exc.errors,
        )
    if isinstance(exc, exceptions.APIException):
        return ApiErrorResponse(
            status_code=exc.status_code,
            message=_framework_message(exc.detail),
        )
    return ApiErrorResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=INTERNAL_ERROR_MESSAGE,
    )


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER`` hook."""
    envelope = build_error_envelope(exc)
    view = context.get("view")
    log = logger.bind(
        view=type(view).__name__ if view is not None else None,
        status_code=envelope.status_code,
    )

    if envelope.status_code >= 500:
        log.error("request.unhandled_exception", exc_info=exc)
    else:
        log.warning("request.rejected", error=envelope.message)

    set_rollback()
    return envelope.to_response()
