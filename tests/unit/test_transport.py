"""Tests for transport module."""

import ssl

import httpx
import pytest

from async_openai import HAS_TRUSTSTORE
from async_openai.config import AzureConfig, OpenAIConfig
from async_openai.errors import InvalidArgumentError
from async_openai.transport import (
    DEFAULT_TLS_BACKEND,
    HttpTransport,
    TlsBackend,
    create_ssl_context,
    resolve_timeout,
    resolve_tls_backend,
)


class TestTlsBackend:
    """Tests for TLS backend selection."""

    def test_default_is_system(self) -> None:
        assert DEFAULT_TLS_BACKEND is TlsBackend.SYSTEM
        assert resolve_tls_backend() is TlsBackend.SYSTEM

    def test_parse(self) -> None:
        assert TlsBackend.parse("bundled") is TlsBackend.BUNDLED
        assert TlsBackend.parse("OpenSSL") is TlsBackend.OPENSSL
        assert TlsBackend.parse("openssl_bundled") is TlsBackend.OPENSSL_BUNDLED
        assert TlsBackend.parse(TlsBackend.SYSTEM) is TlsBackend.SYSTEM

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            TlsBackend.parse("schannel")
        assert exc_info.value.field == "tls_backend"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_TLS_BACKEND", "openssl")
        assert resolve_tls_backend() is TlsBackend.OPENSSL

    def test_explicit_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_TLS_BACKEND", "openssl")
        assert resolve_tls_backend("bundled") is TlsBackend.BUNDLED

    @pytest.mark.parametrize("backend", ["bundled", "openssl", "openssl-bundled"])
    def test_contexts_verify(self, backend: str) -> None:
        ctx = create_ssl_context(backend)
        assert isinstance(ctx, ssl.SSLContext)
        assert ctx.verify_mode == ssl.CERT_REQUIRED
        assert ctx.check_hostname is True

    @pytest.mark.skipif(not HAS_TRUSTSTORE, reason="truststore not installed")
    def test_system_context(self) -> None:
        import truststore

        assert isinstance(create_ssl_context("system"), truststore.SSLContext)


class TestResolveTimeout:
    def test_default(self) -> None:
        assert resolve_timeout() == 600.0

    def test_explicit(self) -> None:
        assert resolve_timeout(5.0) == 5.0

    def test_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_TIMEOUT_SECS", "42")
        assert resolve_timeout() == 42.0

    def test_invalid_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_TIMEOUT_SECS", "forever")
        assert resolve_timeout() == 600.0


class TestHttpTransport:
    """Tests for HttpTransport setup."""

    def test_proxy_ignored_without_trust_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_PROXY_URL", "http://proxy:3128")
        transport = HttpTransport(OpenAIConfig())
        assert transport._proxy is None

    def test_proxy_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_HTTP_TRUST_ENV", "1")
        monkeypatch.setenv("OPENAI_PROXY_URL", "http://proxy:3128")
        transport = HttpTransport(OpenAIConfig())
        assert transport._proxy == "http://proxy:3128"

    def test_explicit_proxy(self) -> None:
        transport = HttpTransport(OpenAIConfig(), proxy="http://explicit:8080")
        assert transport._proxy == "http://explicit:8080"

    def test_headers_include_config(self) -> None:
        transport = HttpTransport(OpenAIConfig().with_api_key("sk-test"))
        headers = transport._build_headers({"Accept": "text/event-stream"})
        assert headers["Authorization"] == "Bearer sk-test"
        assert headers["Accept"] == "text/event-stream"
        assert headers["User-Agent"].startswith("async-openai/")

    def test_params_merge_config_query(self) -> None:
        config = AzureConfig().with_api_base("https://x.openai.azure.com").with_api_key("k")
        transport = HttpTransport(config)
        params = transport._build_params({"limit": 10, "after": None})
        assert params == {"api-version": "2023-03-15-preview", "limit": 10}

    def test_timeout(self) -> None:
        assert HttpTransport(OpenAIConfig(), timeout=3.0).timeout == 3.0

    @pytest.mark.asyncio
    async def test_close_keeps_injected_client(self) -> None:
        http_client = httpx.AsyncClient()
        transport = HttpTransport(OpenAIConfig(), http_client=http_client)
        await transport.close()
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_close_owned_client(self) -> None:
        transport = HttpTransport(OpenAIConfig(), tls_backend="bundled")
        client = transport._get_client()
        await transport.close()
        assert client.is_closed
