"""Tests for telemetry module."""

import io
import json
import logging

import pytest

from async_openai import require_extra
from async_openai.telemetry import (
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


def _record(msg: str, **extra_fields: object) -> logging.LogRecord:
    record = logging.LogRecord("async_openai.test", logging.INFO, __file__, 1, msg, None, None)
    if extra_fields:
        record.extra_fields = extra_fields
    return record


class TestLogContext:
    """Tests for LogContext."""

    def test_empty_context(self) -> None:
        assert LogContext().to_dict() == {}

    def test_context_with_fields(self) -> None:
        ctx = LogContext(request_id="req-123", model="gpt-4o", extra={"attempt": 1})
        assert ctx.to_dict() == {"request_id": "req-123", "model": "gpt-4o", "attempt": 1}

    def test_set_and_clear(self) -> None:
        set_log_context(LogContext(request_id="req-1", extra={"path": "/models"}))
        ctx = get_log_context()
        assert ctx.request_id == "req-1"
        assert ctx.extra == {"path": "/models"}
        clear_log_context()
        assert get_log_context().to_dict() == {}


class TestSensitiveDataMasker:
    """Tests for sensitive data masking."""

    def test_mask_openai_key(self) -> None:
        masked = SensitiveDataMasker().mask("using sk-abcdefghijklmnopqrstuvwxyz123456")
        assert "abcdefghijklmnop" not in masked
        assert "REDACTED" in masked

    def test_mask_bearer(self) -> None:
        masked = SensitiveDataMasker().mask("Authorization: Bearer token-value-123")
        assert "token-value-123" not in masked

    def test_mask_azure_header(self) -> None:
        masked = SensitiveDataMasker().mask("api-key: 0123456789abcdef")
        assert "0123456789abcdef" not in masked

    def test_mask_dict(self) -> None:
        result = SensitiveDataMasker().mask_dict(
            {"api_key": "secret", "url": "https://api.openai.com/v1/models", "nested": {"token": "t"}}
        )
        assert result["api_key"] == "***REDACTED***"
        assert result["url"] == "https://api.openai.com/v1/models"
        assert result["nested"] == {"token": "***REDACTED***"}


class TestFormatters:
    def test_json_formatter(self) -> None:
        output = JsonFormatter().format(_record("request completed", status=200, api_key="sk-x"))
        data = json.loads(output)
        assert data["message"] == "request completed"
        assert data["status"] == 200
        assert data["api_key"] == "***REDACTED***"
        assert data["level"] == "INFO"

    def test_text_formatter(self) -> None:
        output = TextFormatter().format(_record("stream opened", status=200))
        assert "stream opened" in output
        assert output.endswith("status=200")


class TestOpenAILogger:
    """Tests for the logger wrapper."""

    def test_get_logger_cached(self) -> None:
        first = get_logger("async_openai.test.cached")
        second = get_logger("async_openai.test.cached")
        assert first.name == second.name == "async_openai.test.cached"

    def test_default_level_is_warning(self) -> None:
        logger = get_logger("async_openai.test.level")
        assert logger.is_enabled_for(LogLevel.WARNING)
        assert not logger.is_enabled_for(LogLevel.DEBUG)

    def test_configure_json_output(self) -> None:
        stream = io.StringIO()
        logger = get_logger("async_openai.test.configure")
        try:
            OpenAILogger.configure(level=LogLevel.DEBUG, format="json", stream=stream)
            logger.debug("request completed", method="GET", url="https://api.openai.com/v1/models")
            data = json.loads(stream.getvalue().strip())
            assert data["method"] == "GET"
            assert data["logger"] == "async_openai.test.configure"
        finally:
            OpenAILogger.configure(level=LogLevel.WARNING)


class TestFeatures:
    def test_require_extra_available(self) -> None:
        require_extra("core", "json")

    def test_require_extra_missing(self) -> None:
        with pytest.raises(ImportError, match=r"pip install async-openai\[missing\]"):
            require_extra("missing", "definitely_not_a_real_module_xyz")
