"""错误基类：提供分层错误体系和结构化错误上下文。

Base error classes for async-openai.

Provides a layered error hierarchy:
- OpenAIError: Base class for all library errors
- ApiError: Error object returned by the API (status >= 400 or in-stream)
- TransportError: HTTP/network/TLS errors
- JsonDecodeError: Response body could not be deserialized
- FileSaveError / FileReadError: Local file I/O failures
- StreamError: Event stream failures
- InvalidArgumentError: Request could not be built from the given arguments
"""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from async_openai.errors.classification import ErrorClass


@dataclass
class ErrorContext:
    """Structured error context for diagnostics.

    Provides actionable information for debugging and error handling.
    """

    field_path: str | None = None
    """Path to the problematic field (e.g., 'messages[0].content')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'api', 'transport', 'stream')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class OpenAIError(Exception):
    """Base class for all async-openai errors.

    Attributes:
        message: Human-readable error message
        context: Optional structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> OpenAIError:
        """Add a hint to this error."""
        self.context.hint = hint
        return self


class TransportError(OpenAIError):
    """Error during HTTP transport.

    Raised when:
    - Network connection failure
    - Timeout
    - SSL/TLS errors
    - Proxy errors
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        if status_code:
            ctx.details["status_code"] = status_code
        super().__init__(message, ctx)
        self.url = url
        self.status_code = status_code
        self.__cause__ = cause


class JsonDecodeError(OpenAIError):
    """Response body could not be deserialized as JSON.

    The undecodable text is kept on ``content`` for inspection.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        content: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="deserialize")
        if content is not None:
            ctx.details["content"] = content[:200]
        super().__init__(message, ctx)
        self.content = content
        self.__cause__ = cause


class FileSaveError(OpenAIError):
    """Failed to write response bytes to the local filesystem."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        ctx = ErrorContext(source="file")
        if path:
            ctx.details["path"] = path
        super().__init__(message, ctx)
        self.path = path


class FileReadError(OpenAIError):
    """Failed to read an upload source from the local filesystem."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        ctx = ErrorContext(source="file")
        if path:
            ctx.details["path"] = path
        super().__init__(message, ctx)
        self.path = path


class StreamError(OpenAIError):
    """Error while consuming a server-sent event stream."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context or ErrorContext(source="stream"))
        self.__cause__ = cause


class InvalidArgumentError(OpenAIError):
    """A request could not be built from the supplied arguments.

    Raised before any network I/O takes place.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        field: str | None = None,
        actual: Any = None,
    ) -> None:
        ctx = context or ErrorContext(source="validation")
        if field:
            ctx.field_path = field
        if actual is not None:
            ctx.details["actual"] = repr(actual)
        super().__init__(message, ctx)
        self.field = field
        self.actual = actual


class ApiError(OpenAIError):
    """Error object returned by the API.

    OpenAI wraps failures in ``{"error": {"message", "type", "param", "code"}}``.
    The same envelope may also arrive inside an event stream.

    Attributes:
        status_code: HTTP status code (None when raised from a stream frame)
        error_type: The ``type`` field of the error object
        param: The offending request parameter, if reported
        code: Machine-readable error code, if reported
        error_class: Standardized error classification
        retryable: Whether a later identical request may succeed
        raw_error: Raw error body
        retry_after: Suggested delay in seconds (from header)
        request_id: Server-side request identifier
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None,
        error_class: ErrorClass,
        error_type: str | None = None,
        param: str | None = None,
        code: str | None = None,
        retryable: bool = False,
        raw_error: dict[str, Any] | None = None,
        retry_after: float | None = None,
        request_id: str | None = None,
    ) -> None:
        ctx = ErrorContext(source="api")
        if status_code is not None:
            ctx.details["status_code"] = status_code
        ctx.details["error_class"] = error_class.value
        if error_type:
            ctx.details["type"] = error_type
        if code:
            ctx.details["code"] = code
        if param:
            ctx.field_path = param
        if request_id:
            ctx.details["request_id"] = request_id

        super().__init__(message, ctx)

        self.status_code = status_code
        self.error_class = error_class
        self.error_type = error_type
        self.param = param
        self.code = code
        self.retryable = retryable
        self.raw_error = raw_error or {}
        self.retry_after = retry_after
        self.request_id = request_id

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiError:
        """Create ApiError from an HTTP error response.

        Args:
            status_code: HTTP status code
            body: Response body (parsed JSON)
            headers: Response headers

        Returns:
            ApiError with appropriate classification
        """
        from async_openai.errors.classification import (
            classify_http_error,
            extract_error_fields,
            extract_error_message,
            is_retryable,
        )

        error_class = classify_http_error(status_code, body)
        message = extract_error_message(body) or f"HTTP {status_code}"
        fields = extract_error_fields(body)

        retry_after = None
        request_id = None
        if headers:
            lowered = {k.lower(): v for k, v in headers.items()}
            retry_after_str = lowered.get("retry-after")
            if retry_after_str:
                with contextlib.suppress(ValueError):
                    retry_after = float(retry_after_str)
            request_id = lowered.get("x-request-id") or lowered.get("apim-request-id")

        return cls(
            message=message,
            status_code=status_code,
            error_class=error_class,
            error_type=fields.get("type"),
            param=fields.get("param"),
            code=fields.get("code"),
            retryable=is_retryable(error_class),
            raw_error=body,
            retry_after=retry_after,
            request_id=request_id,
        )

    @classmethod
    def from_stream_frame(cls, frame: dict[str, Any]) -> ApiError:
        """Create ApiError from an error object received inside an event stream."""
        from async_openai.errors.classification import (
            ErrorClass,
            extract_error_fields,
            extract_error_message,
        )

        fields = extract_error_fields(frame)
        return cls(
            message=extract_error_message(frame) or "stream returned an error",
            status_code=None,
            error_class=ErrorClass.OTHER,
            error_type=fields.get("type"),
            param=fields.get("param"),
            code=fields.get("code"),
            raw_error=frame,
        )
