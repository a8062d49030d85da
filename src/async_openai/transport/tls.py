"""TLS 后端选择：为 HTTP 客户端构建对应的 SSLContext。

TLS backend selection.

Exactly one backend is active per client. Each backend decides which root
certificates the HTTP client trusts:

- ``system`` (default): the operating system's native trust store, via truststore
- ``bundled``: the bundled Mozilla root set from certifi instead of OS roots
- ``openssl``: the interpreter's OpenSSL with its default verify paths
- ``openssl-bundled``: an OpenSSL context that loads the bundled root set and
  does not depend on certificates installed on the system
"""

from __future__ import annotations

import os
import ssl
from enum import Enum

from async_openai.errors import InvalidArgumentError

TLS_BACKEND_ENV = "OPENAI_TLS_BACKEND"


class TlsBackend(str, Enum):
    """Available TLS backends."""

    SYSTEM = "system"
    BUNDLED = "bundled"
    OPENSSL = "openssl"
    OPENSSL_BUNDLED = "openssl-bundled"

    @classmethod
    def parse(cls, value: str | TlsBackend) -> TlsBackend:
        """Parse a backend name, accepting ``_`` in place of ``-``."""
        if isinstance(value, TlsBackend):
            return value
        normalized = value.strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(b.value for b in cls)
            raise InvalidArgumentError(
                f"Unknown TLS backend '{value}' (expected one of: {choices})",
                field="tls_backend",
                actual=value,
            ) from None


DEFAULT_TLS_BACKEND = TlsBackend.SYSTEM


def resolve_tls_backend(backend: str | TlsBackend | None = None) -> TlsBackend:
    """Resolve the backend: explicit > ``OPENAI_TLS_BACKEND`` > default."""
    if backend is not None:
        return TlsBackend.parse(backend)
    env_value = os.getenv(TLS_BACKEND_ENV)
    if env_value:
        return TlsBackend.parse(env_value)
    return DEFAULT_TLS_BACKEND


def create_ssl_context(backend: str | TlsBackend | None = None) -> ssl.SSLContext:
    """Build the SSLContext for a TLS backend.

    Args:
        backend: Backend name or enum; resolved through ``resolve_tls_backend``

    Returns:
        A client-side SSLContext with certificate verification enabled

    Raises:
        ImportError: If the backend's library is not installed
        InvalidArgumentError: If the backend name is unknown
    """
    selected = resolve_tls_backend(backend)

    if selected is TlsBackend.SYSTEM:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    if selected is TlsBackend.BUNDLED:
        import certifi

        return ssl.create_default_context(cafile=certifi.where())

    if selected is TlsBackend.OPENSSL:
        return ssl.create_default_context()

    # OPENSSL_BUNDLED: no default verify paths, only the bundled roots
    import certifi

    ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    ctx.load_verify_locations(cafile=certifi.where())
    return ctx
