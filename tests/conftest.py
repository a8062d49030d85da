"""Root pytest fixtures for async-openai tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import pytest_asyncio

from async_openai import Client, OpenAIConfig

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

API_BASE = "https://api.openai.com/v1"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the tests.

    A fixed OPENAI_API_KEY also keeps key resolution away from the keyring.
    """
    for name in (
        "OPENAI_TLS_BACKEND",
        "OPENAI_TIMEOUT_SECS",
        "OPENAI_HTTP_TRUST_ENV",
        "OPENAI_PROXY_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env-test")


@pytest.fixture
def api_base() -> str:
    return API_BASE


@pytest.fixture
def openai_config() -> OpenAIConfig:
    """OpenAI config with a fixed test key."""
    return OpenAIConfig().with_api_key("sk-test")


@pytest_asyncio.fixture
async def client(openai_config: OpenAIConfig) -> AsyncIterator[Client]:
    """Client using the bundled root set, so truststore is not exercised."""
    async with Client(openai_config, tls_backend="bundled") as c:
        yield c
