"""
Transport layer - HTTP client for API communication.

Provides httpx-based transport with:
- Async streaming support
- Selectable TLS backend
- Proxy configuration
- Timeout management
"""

from async_openai.transport.http import HttpTransport, resolve_timeout
from async_openai.transport.tls import (
    DEFAULT_TLS_BACKEND,
    TLS_BACKEND_ENV,
    TlsBackend,
    create_ssl_context,
    resolve_tls_backend,
)

__all__ = [
    "DEFAULT_TLS_BACKEND",
    "TLS_BACKEND_ENV",
    "HttpTransport",
    "TlsBackend",
    "create_ssl_context",
    "resolve_timeout",
    "resolve_tls_backend",
]
