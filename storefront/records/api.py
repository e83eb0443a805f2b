# records/api.py

"""
DRF EXCEPTION HANDLER

Turns record service failures into API responses:
- RecordNotFound            -> 404
- RecordValidationError     -> 400 (+ per-field errors)
- RecordPermissionDenied    -> 401 / 403
- RecordServiceUnavailable  -> 503
- anything else from the service -> 502
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from records.exceptions import (
    RecordNotFound,
    RecordPermissionDenied,
    RecordServiceError,
    RecordServiceUnavailable,
    RecordValidationError,
)

logger = logging.getLogger(__name__)


def _status_for(exc: RecordServiceError) -> int:
    if isinstance(exc, RecordNotFound):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, RecordValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, RecordPermissionDenied):
        return exc.status if exc.status in (401, 403) else status.HTTP_403_FORBIDDEN
    if isinstance(exc, RecordServiceUnavailable):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_502_BAD_GATEWAY


def exception_handler(exc, context):
    if isinstance(exc, RecordServiceError):
        code = _status_for(exc)
        if code >= 500:
            logger.error("Record service failure: %s", exc.message)

        body = {"detail": exc.message}
        errors = exc.field_errors()
        if errors:
            body["errors"] = errors
        return Response(body, status=code)

    return drf_exception_handler(exc, context)
