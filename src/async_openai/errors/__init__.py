"""错误体系：提供结构化的客户端错误类型。

Error hierarchy for async-openai.
"""

from async_openai.errors.base import (
    ApiError,
    ErrorContext,
    FileReadError,
    FileSaveError,
    InvalidArgumentError,
    JsonDecodeError,
    OpenAIError,
    StreamError,
    TransportError,
)
from async_openai.errors.classification import (
    ErrorClass,
    classify_http_error,
    extract_error_message,
    is_retryable,
)

__all__ = [
    "ApiError",
    "ErrorClass",
    "ErrorContext",
    "FileReadError",
    "FileSaveError",
    "InvalidArgumentError",
    "JsonDecodeError",
    "OpenAIError",
    "StreamError",
    "TransportError",
    "classify_http_error",
    "extract_error_message",
    "is_retryable",
]
