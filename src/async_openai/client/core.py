"""核心客户端实现：按 API 分组访问 OpenAI 接口。

Core Client implementation.
"""

from __future__ import annotations

import json
from contextlib import aclosing
from typing import TYPE_CHECKING, Any

from async_openai.config import Config, OpenAIConfig
from async_openai.errors import InvalidArgumentError, JsonDecodeError
from async_openai.transport import HttpTransport
from async_openai.types.base import ApiObject

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    import httpx

    from async_openai.api import (
        Assistants,
        Audio,
        Chat,
        Completions,
        Embeddings,
        Files,
        FineTuning,
        Images,
        Models,
        Moderations,
        Threads,
    )
    from async_openai.transport import TlsBackend


class Client:
    """Client for the OpenAI API (and Azure OpenAI deployments).

    The client is a thin handle: API groups (``chat()``, ``files()``, ...)
    are cheap views that share its transport.

    Example:
        >>> # API key from OPENAI_API_KEY, default base URL
        >>> client = Client()

        >>> # Explicit configuration
        >>> config = OpenAIConfig().with_api_key("sk-...").with_org_id("the-continental")
        >>> client = Client.with_config(config)

        >>> # Custom httpx client
        >>> http_client = httpx.AsyncClient(headers={"User-Agent": "my-app"})
        >>> client = Client().with_http_client(http_client)

        >>> request = CreateCompletionRequest.args().model("gpt-3.5-turbo-instruct").prompt("Hi").build()
        >>> response = await client.completions().create(request)
        >>> print(response.choices[0].text)
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        tls_backend: str | TlsBackend | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
    ) -> None:
        """Create a client.

        Args:
            config: Endpoint configuration (default: OpenAIConfig())
            http_client: Pre-built httpx client
            tls_backend: TLS backend for the internally created httpx client
            timeout: Request timeout in seconds
            proxy: Proxy URL
        """
        self._config = config if config is not None else OpenAIConfig()
        self._tls_backend = tls_backend
        self._timeout = timeout
        self._proxy = proxy
        self._transport = HttpTransport(
            self._config,
            http_client=http_client,
            tls_backend=tls_backend,
            timeout=timeout,
            proxy=proxy,
        )

    @classmethod
    def with_config(cls, config: Config) -> Client:
        """Create a client for the given configuration."""
        return cls(config)

    def with_http_client(self, http_client: httpx.AsyncClient) -> Client:
        """Return a client with the same config that sends through ``http_client``.

        The caller keeps ownership of ``http_client`` and must close it.
        """
        return Client(
            self._config,
            http_client=http_client,
            timeout=self._timeout,
            proxy=self._proxy,
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    # API groups

    def chat(self) -> Chat:
        from async_openai.api import Chat

        return Chat(self)

    def completions(self) -> Completions:
        from async_openai.api import Completions

        return Completions(self)

    def embeddings(self) -> Embeddings:
        from async_openai.api import Embeddings

        return Embeddings(self)

    def moderations(self) -> Moderations:
        from async_openai.api import Moderations

        return Moderations(self)

    def models(self) -> Models:
        from async_openai.api import Models

        return Models(self)

    def images(self) -> Images:
        from async_openai.api import Images

        return Images(self)

    def audio(self) -> Audio:
        from async_openai.api import Audio

        return Audio(self)

    def files(self) -> Files:
        from async_openai.api import Files

        return Files(self)

    def fine_tuning(self) -> FineTuning:
        from async_openai.api import FineTuning

        return FineTuning(self)

    def assistants(self) -> Assistants:
        from async_openai.api import Assistants

        return Assistants(self)

    def threads(self) -> Threads:
        from async_openai.api import Threads

        return Threads(self)

    # Request primitives used by the API groups

    async def get(self, path: str, params: dict[str, Any] | None = None) -> ApiObject:
        return _to_object(await self._transport.get(path, params=params))

    async def get_raw(self, path: str) -> bytes:
        return await self._transport.get_raw(path)

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> ApiObject:
        return _to_object(await self._transport.post(path, json=payload))

    async def post_raw(self, path: str, payload: dict[str, Any]) -> bytes:
        return await self._transport.post_raw(path, json=payload)

    async def post_form(
        self,
        path: str,
        data: dict[str, Any],
        files: dict[str, Any],
    ) -> ApiObject | str:
        result = await self._transport.post_form(path, data, files)
        if isinstance(result, str):
            return result
        return _to_object(result)

    async def delete(self, path: str) -> ApiObject:
        return _to_object(await self._transport.delete(path))

    async def post_stream(
        self, path: str, payload: dict[str, Any]
    ) -> AsyncIterator[ApiObject]:
        """POST with ``stream=true`` and yield each event as an ApiObject."""
        async with aclosing(self._transport.stream_post(path, payload)) as frames:
            async for frame in frames:
                yield _to_object(frame)

    async def close(self) -> None:
        """Close the underlying HTTP client (unless it was supplied by the caller)."""
        await self._transport.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def require_id(value: str, name: str) -> str:
    """Reject empty resource identifiers before any request is made."""
    if not value or not value.strip():
        raise InvalidArgumentError(f"{name} must not be empty", field=name, actual=value)
    return value


def _to_object(data: Any) -> ApiObject:
    """Wrap a decoded JSON body, which must be an object."""
    if not isinstance(data, dict):
        raise JsonDecodeError(
            f"Expected a JSON object, got {type(data).__name__}",
            content=json.dumps(data),
        )
    return ApiObject.model_validate(data)
