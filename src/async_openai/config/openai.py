"""
Config for the public OpenAI API.
"""

from __future__ import annotations

from pydantic import Field, SecretStr

from async_openai.config.auth import resolve_api_key
from async_openai.config.base import Config

OPENAI_API_BASE = "https://api.openai.com/v1"

OPENAI_ORGANIZATION_HEADER = "OpenAI-Organization"
OPENAI_PROJECT_HEADER = "OpenAI-Project"
OPENAI_BETA_HEADER = "OpenAI-Beta"


class OpenAIConfig(Config):
    """Configuration for the OpenAI API.

    The API key defaults to ``OPENAI_API_KEY`` (then the system keyring).

    Example:
        >>> config = OpenAIConfig().with_api_key("sk-...").with_org_id("the-continental")
        >>> client = Client.with_config(config)
    """

    api_base: str = OPENAI_API_BASE
    api_key: SecretStr = Field(default_factory=resolve_api_key)
    org_id: str = ""
    project_id: str = ""

    def with_org_id(self, org_id: str) -> OpenAIConfig:
        """Return a copy sending ``OpenAI-Organization``."""
        return self._replace(org_id=org_id)

    def with_project_id(self, project_id: str) -> OpenAIConfig:
        """Return a copy sending ``OpenAI-Project``."""
        return self._replace(project_id=project_id)

    def headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_key.get_secret_value()}",
            # Assistants, threads and runs are gated behind this header
            OPENAI_BETA_HEADER: "assistants=v1",
        }
        if self.org_id:
            headers[OPENAI_ORGANIZATION_HEADER] = self.org_id
        if self.project_id:
            headers[OPENAI_PROJECT_HEADER] = self.project_id
        return headers

    def url(self, path: str) -> str:
        return f"{self.api_base}{path}"
