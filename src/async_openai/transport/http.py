"""HTTP 传输层：基于 httpx 的异步 HTTP 客户端，支持流式传输、TLS 后端和代理。

HTTP transport using httpx for async requests.

Provides:
- JSON, raw-bytes and multipart requests
- Server-sent event streaming
- Pluggable TLS backend
- Configurable timeouts and proxy
- Header/query injection from the active Config
"""

from __future__ import annotations

import os
import time
from contextlib import suppress
from typing import TYPE_CHECKING, Any

import httpx

from async_openai._features import HAS_HTTP2
from async_openai.errors import ApiError, JsonDecodeError, StreamError, TransportError
from async_openai.streaming import SSEDecoder
from async_openai.telemetry import get_logger
from async_openai.transport.tls import TlsBackend, create_ssl_context

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from async_openai.config import Config

logger = get_logger(__name__)

# Default timeouts
_DEFAULT_TIMEOUT = 600.0
_DEFAULT_CONNECT_TIMEOUT = 10.0

_UA_VERSION: str | None = None


def _trust_env_enabled() -> bool:
    """Use env proxy settings only when explicitly enabled."""
    return os.getenv("OPENAI_HTTP_TRUST_ENV", "0") == "1"


def _get_ua_version() -> str:
    """Get package version for User-Agent (cached)."""
    global _UA_VERSION
    if _UA_VERSION is None:
        try:
            from importlib.metadata import version

            _UA_VERSION = version("async-openai")
        except Exception:
            _UA_VERSION = "0.23.1"
    return _UA_VERSION


def resolve_timeout(timeout: float | None = None) -> float:
    """Resolve request timeout: explicit > ``OPENAI_TIMEOUT_SECS`` > default."""
    if timeout is not None:
        return timeout
    env_timeout = os.getenv("OPENAI_TIMEOUT_SECS")
    if env_timeout:
        with suppress(ValueError):
            return float(env_timeout)
    return _DEFAULT_TIMEOUT


class HttpTransport:
    """HTTP transport for API communication.

    Uses httpx for async HTTP requests with streaming support. The underlying
    ``httpx.AsyncClient`` is created lazily with the selected TLS backend,
    unless one is supplied by the caller (in which case the caller owns it and
    its TLS settings).

    Example:
        >>> transport = HttpTransport(OpenAIConfig())
        >>> data = await transport.get("/models")
        >>> async for frame in transport.stream_post("/chat/completions", payload):
        ...     process(frame)
    """

    def __init__(
        self,
        config: Config,
        *,
        http_client: httpx.AsyncClient | None = None,
        tls_backend: str | TlsBackend | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            config: Endpoint and credential configuration
            http_client: Pre-built httpx client to use instead of creating one
            tls_backend: TLS backend for the created client
            timeout: Request timeout in seconds
            proxy: Proxy URL
        """
        self._config = config
        self._client = http_client
        self._owns_client = http_client is None
        self._tls_backend = tls_backend
        self._timeout = resolve_timeout(timeout)

        # Resolve proxy: default to direct connection unless trust_env is enabled.
        if proxy is not None:
            self._proxy = proxy
        elif _trust_env_enabled():
            self._proxy = os.getenv("OPENAI_PROXY_URL")
        else:
            self._proxy = None

        self._decoder = SSEDecoder()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            timeout = httpx.Timeout(
                self._timeout,
                connect=_DEFAULT_CONNECT_TIMEOUT,
            )

            self._client = httpx.AsyncClient(
                timeout=timeout,
                verify=create_ssl_context(self._tls_backend),
                proxy=self._proxy,
                http2=HAS_HTTP2,
                trust_env=_trust_env_enabled(),
            )
            self._owns_client = True

        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers from the config plus any extras."""
        headers = {
            "User-Agent": f"async-openai/{_get_ua_version()}",
        }
        headers.update(self._config.headers())
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _build_params(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        merged = dict(self._config.query())
        if params:
            merged.update({k: v for k, v in params.items() if v is not None})
        return merged

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request.

        Args:
            method: HTTP method
            path: API path (e.g. ``/chat/completions``)
            json: JSON body
            params: Query parameters
            data: Multipart form fields
            files: Multipart file parts
            headers: Additional headers

        Returns:
            HTTP response with a success status

        Raises:
            TransportError: On network/connection errors
            ApiError: On API errors (4xx, 5xx)
        """
        client = self._get_client()
        url = self._config.url(path)
        started = time.monotonic()

        try:
            response = await client.request(
                method=method,
                url=url,
                json=json,
                data=data,
                files=files,
                params=self._build_params(params),
                headers=self._build_headers(headers),
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out: {e}", url=url, cause=e) from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error: {e}", url=url, cause=e) from e

        logger.debug(
            "request completed",
            method=method,
            url=url,
            status=response.status_code,
            latency_ms=round((time.monotonic() - started) * 1000, 1),
        )

        if response.status_code >= 400:
            raise self._api_error(response)

        return response

    @staticmethod
    def _api_error(response: httpx.Response) -> ApiError:
        body = None
        with suppress(ValueError):
            body = response.json()
        if not isinstance(body, dict):
            body = {"error": {"message": response.text}} if response.text else None
        return ApiError.from_response(
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
        )

    @staticmethod
    def _decode_json(response: httpx.Response) -> dict[str, Any]:
        try:
            return response.json()
        except ValueError as e:
            raise JsonDecodeError(
                f"Failed to decode response body: {e}",
                content=response.text,
                cause=e,
            ) from e

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """GET a JSON resource."""
        response = await self.request("GET", path, params=params)
        return self._decode_json(response)

    async def get_raw(self, path: str) -> bytes:
        """GET a resource as raw bytes."""
        response = await self.request("GET", path)
        return response.content

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """POST a JSON body and decode the JSON response."""
        response = await self.request("POST", path, json=json)
        return self._decode_json(response)

    async def post_raw(self, path: str, json: dict[str, Any]) -> bytes:
        """POST a JSON body and return the raw response bytes."""
        response = await self.request("POST", path, json=json)
        return response.content

    async def post_form(
        self,
        path: str,
        data: dict[str, Any],
        files: dict[str, Any],
    ) -> dict[str, Any] | str:
        """POST a multipart form.

        Returns decoded JSON, or the plain text body for non-JSON responses
        (transcriptions requested as ``text``, ``srt`` or ``vtt``).
        """
        response = await self.request("POST", path, data=data, files=files)
        if "json" not in response.headers.get("content-type", ""):
            return response.text
        return self._decode_json(response)

    async def delete(self, path: str) -> dict[str, Any]:
        """DELETE a resource."""
        response = await self.request("DELETE", path)
        return self._decode_json(response)

    async def stream_post(
        self,
        path: str,
        json: dict[str, Any],
    ) -> AsyncIterator[dict[str, Any]]:
        """POST a JSON body and yield the server-sent event frames.

        Raises:
            TransportError: If the connection cannot be established
            ApiError: On an error status, or an error object inside the stream
            StreamError: If the connection drops mid-stream
            JsonDecodeError: If a frame is not valid JSON
        """
        client = self._get_client()
        url = self._config.url(path)
        headers = self._build_headers({"Accept": "text/event-stream"})

        try:
            async with client.stream(
                "POST",
                url,
                json=json,
                params=self._build_params(),
                headers=headers,
            ) as response:
                logger.debug("stream opened", url=url, status=response.status_code)
                if response.status_code >= 400:
                    await response.aread()
                    raise self._api_error(response)

                try:
                    async for frame in self._decoder.decode(response.aiter_bytes()):
                        if isinstance(frame, dict) and isinstance(frame.get("error"), dict):
                            raise ApiError.from_stream_frame(frame)
                        yield frame
                except httpx.HTTPError as e:
                    raise StreamError(f"Stream interrupted: {e}", cause=e) from e
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out: {e}", url=url, cause=e) from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error: {e}", url=url, cause=e) from e

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
