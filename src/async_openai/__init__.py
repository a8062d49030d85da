"""OpenAI 异步 Python 客户端：覆盖 Chat、Assistants、Files 等 REST 接口，兼容 Azure OpenAI。

async-openai: asynchronous Python client for the OpenAI REST API.

Requests are typed pydantic models (or plain mappings); responses are
schema-less ApiObject views over the JSON the API returns.
"""
from __future__ import annotations

from async_openai._features import (
    HAS_CERTIFI,
    HAS_HTTP2,
    HAS_KEYRING,
    HAS_TRUSTSTORE,
    require_extra,
)
from async_openai.client import Client, SpeechResponse
from async_openai.config import AzureConfig, Config, OpenAIConfig
from async_openai.errors import (
    ApiError,
    FileReadError,
    FileSaveError,
    InvalidArgumentError,
    JsonDecodeError,
    OpenAIError,
    StreamError,
    TransportError,
)
from async_openai.transport import TlsBackend
from async_openai.types import (
    ApiObject,
    AssistantMessage,
    CreateChatCompletionRequest,
    CreateCompletionRequest,
    CreateEmbeddingRequest,
    SystemMessage,
    ToolMessage,
    UserMessage,
)

__version__ = "0.23.1"

__all__ = [
    # Client
    "Client",
    "SpeechResponse",
    # Config
    "AzureConfig",
    "Config",
    "OpenAIConfig",
    "TlsBackend",
    # Feature flags
    "HAS_CERTIFI",
    "HAS_HTTP2",
    "HAS_KEYRING",
    "HAS_TRUSTSTORE",
    "require_extra",
    # Errors
    "ApiError",
    "FileReadError",
    "FileSaveError",
    "InvalidArgumentError",
    "JsonDecodeError",
    "OpenAIError",
    "StreamError",
    "TransportError",
    # Types
    "ApiObject",
    "AssistantMessage",
    "CreateChatCompletionRequest",
    "CreateCompletionRequest",
    "CreateEmbeddingRequest",
    "SystemMessage",
    "ToolMessage",
    "UserMessage",
    # Version
    "__version__",
]
