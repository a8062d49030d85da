"""Tests for endpoint configuration and API key resolution."""

from unittest.mock import patch

import pytest
from pydantic import SecretStr, ValidationError

from async_openai.config import (
    DEFAULT_AZURE_API_VERSION,
    OPENAI_API_BASE,
    AzureConfig,
    OpenAIConfig,
    resolve_api_key,
)


class TestResolveApiKey:
    """Tests for API key resolution."""

    def test_explicit_key(self) -> None:
        key = resolve_api_key("sk-explicit")
        assert key.get_secret_value() == "sk-explicit"

    def test_explicit_secret(self) -> None:
        secret = SecretStr("sk-secret")
        assert resolve_api_key(secret) is secret

    def test_env_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        assert resolve_api_key().get_secret_value() == "sk-env"

    def test_custom_env_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AZURE_OPENAI_KEY", "azure-key")
        assert resolve_api_key(env_var="AZURE_OPENAI_KEY").get_secret_value() == "azure-key"

    def test_keyring_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with patch("async_openai.config.auth._try_keyring", return_value="sk-keyring") as lookup:
            key = resolve_api_key()
        assert key.get_secret_value() == "sk-keyring"
        lookup.assert_called_once_with("default")

    def test_no_key_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with patch("async_openai.config.auth._try_keyring", return_value=None):
            key = resolve_api_key()
        assert key.get_secret_value() == ""


class TestOpenAIConfig:
    """Tests for OpenAIConfig."""

    def test_defaults(self) -> None:
        config = OpenAIConfig()
        assert config.api_base == OPENAI_API_BASE
        assert config.api_key.get_secret_value() == "sk-env-test"
        assert config.org_id == ""
        assert config.project_id == ""

    def test_headers(self) -> None:
        config = OpenAIConfig().with_api_key("sk-test")
        assert config.headers() == {
            "Authorization": "Bearer sk-test",
            "OpenAI-Beta": "assistants=v1",
        }

    def test_org_and_project_headers(self) -> None:
        config = OpenAIConfig().with_org_id("org-1").with_project_id("proj-1")
        headers = config.headers()
        assert headers["OpenAI-Organization"] == "org-1"
        assert headers["OpenAI-Project"] == "proj-1"

    def test_url(self) -> None:
        config = OpenAIConfig().with_api_base("http://localhost:8080/v1/")
        assert config.url("/chat/completions") == "http://localhost:8080/v1/chat/completions"
        assert config.query() == {}

    def test_with_methods_return_copies(self) -> None:
        config = OpenAIConfig()
        updated = config.with_org_id("org-2")
        assert config.org_id == ""
        assert updated.org_id == "org-2"

    def test_frozen(self) -> None:
        config = OpenAIConfig()
        with pytest.raises(ValidationError):
            config.org_id = "org-3"

    def test_key_not_in_repr(self) -> None:
        config = OpenAIConfig().with_api_key("sk-very-secret")
        assert "sk-very-secret" not in repr(config)


class TestAzureConfig:
    """Tests for AzureConfig."""

    def _config(self) -> AzureConfig:
        return (
            AzureConfig()
            .with_api_base("https://my-resource.openai.azure.com")
            .with_deployment_id("gpt35")
            .with_api_key("azure-key")
        )

    def test_url(self) -> None:
        assert self._config().url("/chat/completions") == (
            "https://my-resource.openai.azure.com/openai/deployments/gpt35/chat/completions"
        )

    def test_headers(self) -> None:
        assert self._config().headers() == {"api-key": "azure-key"}

    def test_query(self) -> None:
        assert self._config().query() == {"api-version": DEFAULT_AZURE_API_VERSION}
        assert self._config().with_api_version("2024-02-01").query() == {
            "api-version": "2024-02-01"
        }
