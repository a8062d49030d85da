"""
Config for Microsoft Azure OpenAI deployments.

Azure exposes each model behind a named deployment and versions its API
through a mandatory ``api-version`` query parameter. The service does not
implement every OpenAI endpoint; the client still lets you call all of them.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr

from async_openai.config.auth import resolve_api_key
from async_openai.config.base import Config

DEFAULT_AZURE_API_VERSION = "2023-03-15-preview"


class AzureConfig(Config):
    """Configuration for an Azure OpenAI deployment.

    Example:
        >>> config = (
        ...     AzureConfig()
        ...     .with_api_base("https://my-resource-name.openai.azure.com")
        ...     .with_api_version("2023-03-15-preview")
        ...     .with_deployment_id("deployment-id")
        ...     .with_api_key("...")
        ... )
    """

    api_base: str = ""
    api_key: SecretStr = Field(default_factory=resolve_api_key)
    api_version: str = DEFAULT_AZURE_API_VERSION
    deployment_id: str = ""

    def with_api_version(self, api_version: str) -> AzureConfig:
        return self._replace(api_version=api_version)

    def with_deployment_id(self, deployment_id: str) -> AzureConfig:
        return self._replace(deployment_id=deployment_id)

    def headers(self) -> dict[str, str]:
        return {"api-key": self.api_key.get_secret_value()}

    def url(self, path: str) -> str:
        return f"{self.api_base}/openai/deployments/{self.deployment_id}{path}"

    def query(self) -> dict[str, Any]:
        return {"api-version": self.api_version}
