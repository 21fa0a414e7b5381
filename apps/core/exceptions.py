"""
API exceptions and the JSON error handler.

Every error leaves the API as ``{"error": "<message>"}`` with a 4xx/5xx
status. Unexpected exceptions are logged with their traceback and reported
to the caller with a generic message only.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class InvalidOperation(exceptions.APIException):
    """A business rule forbids the requested operation in the current state."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "This operation is not allowed."
    default_code = "invalid_operation"


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The resource already exists."
    default_code = "conflict"


class ConstraintViolation(exceptions.APIException):
    """A uniqueness constraint kept failing after the allowed retry."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = GENERIC_ERROR_MESSAGE
    default_code = "constraint_violation"


def _first_message(detail):
    """Flatten DRF's nested error detail into a single human-readable message."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if not message:
                continue
            if field in ("non_field_errors", "detail"):
                return message
            return f"{field}: {message}"
        return ""
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = _first_message(value)
            if message:
                return message
        return ""
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF exception handler producing ``{"error": ...}`` bodies.

    Configured through ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view else "API view",
            exc_info=exc,
        )
        set_rollback()
        return Response(
            {"error": GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if response.status_code >= 500:
        logger.error("API error %s: %s", response.status_code, exc)

    response.data = {"error": _first_message(response.data) or GENERIC_ERROR_MESSAGE}
    return response
