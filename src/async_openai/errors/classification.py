"""
Error classification for OpenAI-compatible API failures.

Maps HTTP status codes and error bodies onto a small set of standard
error classes so callers can decide what to do with a failure.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorClass(str, Enum):
    """Standard error classification."""

    INVALID_REQUEST = "invalid_request"
    """Malformed request body, invalid parameters, or unsupported operation."""

    AUTHENTICATION = "authentication"
    """Missing/invalid credentials (API key/token)."""

    PERMISSION_DENIED = "permission_denied"
    """Caller is authenticated but not permitted to access the resource."""

    NOT_FOUND = "not_found"
    """Requested resource not found."""

    QUOTA_EXHAUSTED = "quota_exhausted"
    """Account quota/billing/spend limit exceeded."""

    RATE_LIMITED = "rate_limited"
    """Throttled due to request/token limits."""

    REQUEST_TOO_LARGE = "request_too_large"
    """Payload too large (e.g., context too long, request too big)."""

    TIMEOUT = "timeout"
    """Request timed out or deadline exceeded."""

    CONFLICT = "conflict"
    """Request conflict."""

    SERVER_ERROR = "server_error"
    """Transient server-side failure (5xx)."""

    OVERLOADED = "overloaded"
    """Service overloaded / temporarily unavailable."""

    OTHER = "other"
    """Unknown classification."""


_RETRYABLE_CLASSES: frozenset[ErrorClass] = frozenset(
    {
        ErrorClass.RATE_LIMITED,
        ErrorClass.TIMEOUT,
        ErrorClass.CONFLICT,
        ErrorClass.SERVER_ERROR,
        ErrorClass.OVERLOADED,
    }
)

_DEFAULT_STATUS_MAPPING: dict[int, ErrorClass] = {
    400: ErrorClass.INVALID_REQUEST,
    401: ErrorClass.AUTHENTICATION,
    403: ErrorClass.PERMISSION_DENIED,
    404: ErrorClass.NOT_FOUND,
    408: ErrorClass.TIMEOUT,
    409: ErrorClass.CONFLICT,
    413: ErrorClass.REQUEST_TOO_LARGE,
    422: ErrorClass.INVALID_REQUEST,
    429: ErrorClass.RATE_LIMITED,
    500: ErrorClass.SERVER_ERROR,
    502: ErrorClass.SERVER_ERROR,
    503: ErrorClass.OVERLOADED,
    504: ErrorClass.TIMEOUT,
}

_QUOTA_PATTERNS = ("quota", "billing", "insufficient_quota")


def classify_http_error(
    status_code: int,
    body: dict[str, Any] | None = None,
) -> ErrorClass:
    """Classify an HTTP error into a standard error class.

    Args:
        status_code: HTTP status code
        body: Response body (parsed JSON)

    Returns:
        ErrorClass representing the error type
    """
    fields = extract_error_fields(body)
    code_val = (fields.get("code") or fields.get("type") or "").lower()

    # Body-based hints take precedence
    if status_code == 400 and "context_length" in code_val:
        return ErrorClass.REQUEST_TOO_LARGE

    if status_code == 429:
        msg_lower = (extract_error_message(body) or "").lower()
        for pattern in _QUOTA_PATTERNS:
            if pattern in msg_lower or pattern in code_val:
                return ErrorClass.QUOTA_EXHAUSTED

    if status_code in _DEFAULT_STATUS_MAPPING:
        return _DEFAULT_STATUS_MAPPING[status_code]

    if 400 <= status_code < 500:
        return ErrorClass.INVALID_REQUEST
    if 500 <= status_code < 600:
        return ErrorClass.SERVER_ERROR

    return ErrorClass.OTHER


def is_retryable(error_class: ErrorClass) -> bool:
    """Check if an error class is typically transient.

    The client never retries on its own; this only informs callers.
    """
    return error_class in _RETRYABLE_CLASSES


def extract_error_fields(body: dict[str, Any] | None) -> dict[str, str | None]:
    """Pull ``type``, ``param`` and ``code`` out of an OpenAI error envelope."""
    result: dict[str, str | None] = {"type": None, "param": None, "code": None}
    if not body:
        return result
    error = body.get("error")
    if not isinstance(error, dict):
        return result
    for key in result:
        value = error.get(key)
        if value is not None:
            result[key] = str(value)
    return result


def extract_error_message(body: dict[str, Any] | None) -> str | None:
    """Extract error message from response body.

    Supports multiple error envelope formats:
    - OpenAI/Azure style: {"error": {"message": "..."}}
    - Simple: {"message": "..."}
    - Detail: {"detail": "..."}

    Args:
        body: Response body (parsed JSON)

    Returns:
        Error message if found, None otherwise
    """
    if not body:
        return None

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            msg = error.get("message")
            if isinstance(msg, str):
                return msg
        elif isinstance(error, str):
            return error

    if "message" in body:
        msg = body["message"]
        if isinstance(msg, str):
            return msg

    if "detail" in body:
        detail = body["detail"]
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list) and detail:
            return str(detail[0])

    return None
