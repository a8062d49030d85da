"""
Telemetry module for async-openai.

Provides structured logging with sensitive data masking.
"""

from async_openai.telemetry.logger import (
    JsonFormatter,
    LogContext,
    LogLevel,
    OpenAILogger,
    SensitiveDataMasker,
    TextFormatter,
    clear_log_context,
    get_log_context,
    get_logger,
    set_log_context,
)

__all__ = [
    "JsonFormatter",
    "LogContext",
    "LogLevel",
    "OpenAILogger",
    "SensitiveDataMasker",
    "TextFormatter",
    "clear_log_context",
    "get_log_context",
    "get_logger",
    "set_log_context",
]
