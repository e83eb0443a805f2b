# records/exceptions.py

"""
RECORD SERVICE ERRORS

Centralized errors raised by records.client for every failed round trip.

The record service answers failures with:
    {"code": 400, "message": "...", "data": {"field": {"code": "...", "message": "..."}}}
"""

from __future__ import annotations

from typing import Any


class RecordServiceError(Exception):
    """Base exception for all record service failures."""

    status = 0

    def __init__(self, message: str = "", *, status: int | None = None, payload: Any = None):
        super().__init__(message)
        self.message = message or "Record service request failed"
        if status is not None:
            self.status = status
        self.payload = payload if isinstance(payload, dict) else {}

    def field_errors(self) -> dict[str, str]:
        data = self.payload.get("data")
        if not isinstance(data, dict):
            return {}

        errors = {}
        for field, detail in data.items():
            if isinstance(detail, dict):
                errors[field] = str(detail.get("message") or detail.get("code") or "")
            else:
                errors[field] = str(detail)
        return errors

    def display_message(self, prefix: str = "Update failed") -> str:
        errors = self.field_errors()
        if not errors:
            return self.message
        joined = ", ".join(f"{field}: {msg}" for field, msg in errors.items())
        return f"{prefix}: {joined}"

    def __str__(self):
        return self.message


class RecordValidationError(RecordServiceError):
    """Raised when the service rejects submitted data (400)."""

    status = 400


class RecordPermissionDenied(RecordServiceError):
    """Raised when the collection rules deny the request (401/403)."""

    status = 403


class RecordNotFound(RecordServiceError):
    """Raised when the requested record does not exist (404)."""

    status = 404


class RecordServiceUnavailable(RecordServiceError):
    """Raised on connection failures, timeouts, 5xx or non-JSON replies."""

    status = 503


def error_for_status(status: int, payload: Any = None, fallback: str = "") -> RecordServiceError:
    """
    Map an HTTP status + decoded body to the matching error type.
    The service's own message wins over the fallback text.
    """
    message = ""
    if isinstance(payload, dict):
        message = str(payload.get("message") or "").strip()
    message = message or fallback or f"Record service returned HTTP {status}"

    if status == 400:
        cls = RecordValidationError
    elif status in (401, 403):
        cls = RecordPermissionDenied
    elif status == 404:
        cls = RecordNotFound
    elif status >= 500:
        cls = RecordServiceUnavailable
    else:
        cls = RecordServiceError

    return cls(message, status=status, payload=payload)
