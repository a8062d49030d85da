"""Tests for errors module."""

from async_openai.errors import (
    ApiError,
    ErrorClass,
    ErrorContext,
    FileSaveError,
    InvalidArgumentError,
    JsonDecodeError,
    OpenAIError,
    StreamError,
    TransportError,
    classify_http_error,
    extract_error_message,
    is_retryable,
)


class TestErrorContext:
    """Tests for ErrorContext."""

    def test_empty_context(self) -> None:
        assert str(ErrorContext()) == ""

    def test_context_str(self) -> None:
        ctx = ErrorContext(source="api", field_path="messages.0", hint="check it")
        assert str(ctx) == "[api] at 'messages.0' (hint: check it)"


class TestOpenAIError:
    """Tests for the base error."""

    def test_message_includes_context(self) -> None:
        error = OpenAIError("boom", ErrorContext(source="transport"))
        assert str(error) == "boom [transport]"
        assert error.message == "boom"

    def test_with_hint(self) -> None:
        error = OpenAIError("boom").with_hint("try again")
        assert error.context.hint == "try again"

    def test_subclasses(self) -> None:
        for cls in (TransportError, JsonDecodeError, StreamError, InvalidArgumentError):
            assert issubclass(cls, OpenAIError)
        assert issubclass(ApiError, OpenAIError)


class TestTransportError:
    def test_transport_error(self) -> None:
        cause = ConnectionError("refused")
        error = TransportError("Connection failed", url="https://api.openai.com/v1/models", cause=cause)
        assert error.url == "https://api.openai.com/v1/models"
        assert error.context.details["url"] == "https://api.openai.com/v1/models"
        assert error.__cause__ is cause


class TestJsonDecodeError:
    def test_keeps_content(self) -> None:
        error = JsonDecodeError("bad json", content="{not json")
        assert error.content == "{not json"
        assert error.context.source == "deserialize"

    def test_details_truncated(self) -> None:
        error = JsonDecodeError("bad json", content="x" * 500)
        assert len(error.context.details["content"]) == 200
        assert len(error.content) == 500


class TestInvalidArgumentError:
    def test_field_and_actual(self) -> None:
        error = InvalidArgumentError("model is required", field="model", actual=3)
        assert error.field == "model"
        assert error.context.field_path == "model"
        assert error.context.details["actual"] == "3"
        assert "at 'model'" in str(error)


class TestFileErrors:
    def test_file_save_error(self) -> None:
        error = FileSaveError("Cannot save", path="/tmp/out.mp3")
        assert error.path == "/tmp/out.mp3"
        assert error.context.details["path"] == "/tmp/out.mp3"


class TestApiError:
    """Tests for ApiError construction from responses and stream frames."""

    def test_from_response_fields(self) -> None:
        body = {
            "error": {
                "message": "Invalid value for 'temperature'",
                "type": "invalid_request_error",
                "param": "temperature",
                "code": None,
            }
        }
        error = ApiError.from_response(400, body)
        assert error.status_code == 400
        assert error.message == "Invalid value for 'temperature'"
        assert error.error_type == "invalid_request_error"
        assert error.param == "temperature"
        assert error.code is None
        assert error.error_class == ErrorClass.INVALID_REQUEST
        assert error.raw_error == body

    def test_from_response_rate_limited(self) -> None:
        error = ApiError.from_response(
            status_code=429,
            body={"error": {"message": "Too many requests"}},
            headers={"Retry-After": "30", "X-Request-Id": "req_123"},
        )
        assert error.error_class == ErrorClass.RATE_LIMITED
        assert error.retryable is True
        assert error.retry_after == 30.0
        assert error.request_id == "req_123"

    def test_from_response_quota_exhausted(self) -> None:
        error = ApiError.from_response(
            status_code=429,
            body={"error": {"message": "You exceeded your current quota", "code": "insufficient_quota"}},
        )
        assert error.error_class == ErrorClass.QUOTA_EXHAUSTED
        assert error.retryable is False

    def test_from_response_azure_request_id(self) -> None:
        error = ApiError.from_response(500, None, {"apim-request-id": "azure-1"})
        assert error.request_id == "azure-1"
        assert error.message == "HTTP 500"

    def test_invalid_retry_after_ignored(self) -> None:
        error = ApiError.from_response(503, None, {"retry-after": "soon"})
        assert error.retry_after is None
        assert error.error_class == ErrorClass.OVERLOADED

    def test_from_stream_frame(self) -> None:
        frame = {"error": {"message": "The server had an error", "type": "server_error"}}
        error = ApiError.from_stream_frame(frame)
        assert error.status_code is None
        assert error.message == "The server had an error"
        assert error.error_type == "server_error"
        assert error.raw_error == frame


class TestClassification:
    """Tests for HTTP error classification."""

    def test_status_mapping(self) -> None:
        assert classify_http_error(401) == ErrorClass.AUTHENTICATION
        assert classify_http_error(403) == ErrorClass.PERMISSION_DENIED
        assert classify_http_error(404) == ErrorClass.NOT_FOUND
        assert classify_http_error(409) == ErrorClass.CONFLICT
        assert classify_http_error(502) == ErrorClass.SERVER_ERROR
        assert classify_http_error(504) == ErrorClass.TIMEOUT

    def test_range_fallbacks(self) -> None:
        assert classify_http_error(418) == ErrorClass.INVALID_REQUEST
        assert classify_http_error(599) == ErrorClass.SERVER_ERROR
        assert classify_http_error(302) == ErrorClass.OTHER

    def test_context_length(self) -> None:
        body = {"error": {"message": "too long", "code": "context_length_exceeded"}}
        assert classify_http_error(400, body) == ErrorClass.REQUEST_TOO_LARGE

    def test_is_retryable(self) -> None:
        assert is_retryable(ErrorClass.SERVER_ERROR)
        assert not is_retryable(ErrorClass.AUTHENTICATION)

    def test_extract_error_message(self) -> None:
        assert extract_error_message({"error": {"message": "a"}}) == "a"
        assert extract_error_message({"error": "b"}) == "b"
        assert extract_error_message({"message": "c"}) == "c"
        assert extract_error_message({"detail": ["d"]}) == "d"
        assert extract_error_message({}) is None
