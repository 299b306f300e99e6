"""
DRF exception handler.

Every error leaves the API as ``{"message": ..., "status": "<code>"}``.
Validation errors add one key per invalid field holding its first message.
"""

from __future__ import annotations

from typing import Any, Dict

import structlog
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from apps.properties.domain.exceptions import (
    PropertyNotFoundError,
    ReferenceNotFoundError,
    UpstreamUnavailableError,
)

logger = structlog.get_logger(__name__)

VALIDATION_MESSAGE = "Validation failed"


def _first_message(detail: Any) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def error_body(message: str, status_code: int, **fields: str) -> Dict[str, str]:
    body = dict(fields)
    body["message"] = message
    body["status"] = str(status_code)
    return body


def _validation_response(exc: exceptions.ValidationError) -> Response:
    detail = exc.detail
    if isinstance(detail, dict):
        fields = {str(name): _first_message(errors) for name, errors in detail.items()}
        body = error_body(VALIDATION_MESSAGE, status.HTTP_400_BAD_REQUEST, **fields)
    else:
        body = error_body(_first_message(detail) or VALIDATION_MESSAGE, status.HTTP_400_BAD_REQUEST)
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


def api_exception_handler(exc, context):  # type: ignore
    if isinstance(exc, PropertyNotFoundError):
        return Response(error_body(str(exc), status.HTTP_404_NOT_FOUND), status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, (ReferenceNotFoundError, UpstreamUnavailableError)):
        logger.error("reference_check_failed", error=str(exc), error_type=type(exc).__name__)
        return Response(
            error_body(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        return _validation_response(exc)

    response = exception_handler(exc, context)
    if response is not None:
        # Http404, PermissionDenied and DRF's own APIExceptions
        response.data = error_body(_first_message(response.data), response.status_code)
        return response

    view = context.get("view") if context else None
    logger.error(
        "unhandled_api_error",
        exc_info=exc,
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
    )
    message = str(exc) or type(exc).__name__
    return Response(
        error_body(message, status.HTTP_500_INTERNAL_SERVER_ERROR),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
