"""
Config interface shared by OpenAI and Azure OpenAI endpoints.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, SecretStr


class Config(BaseModel, ABC):
    """Connection settings for an OpenAI-compatible endpoint.

    A config knows how to turn an API path into a full URL, which headers
    authenticate the request, and which query parameters every request needs.

    Configs are immutable: every ``with_*`` method returns a modified copy.
    """

    model_config = ConfigDict(frozen=True)

    api_base: str
    api_key: SecretStr

    @abstractmethod
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""

    @abstractmethod
    def url(self, path: str) -> str:
        """Full URL for an API path such as ``/chat/completions``."""

    def query(self) -> dict[str, Any]:
        """Query parameters sent with every request."""
        return {}

    def _replace(self, **changes: Any) -> Any:
        return self.model_copy(update=changes)

    def with_api_base(self, api_base: str) -> Any:
        """Return a copy pointing at a different API base."""
        return self._replace(api_base=api_base.rstrip("/"))

    def with_api_key(self, api_key: str | SecretStr) -> Any:
        """Return a copy using a different API key."""
        if not isinstance(api_key, SecretStr):
            api_key = SecretStr(api_key)
        return self._replace(api_key=api_key)
