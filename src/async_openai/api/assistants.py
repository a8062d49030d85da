"""
Assistants API group (beta).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.client.core import require_id
from async_openai.types.builder import coerce_request
from async_openai.types.requests import (
    CreateAssistantFileRequest,
    CreateAssistantRequest,
    ModifyRequest,
)

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject

Query = Mapping[str, Any]


class Assistants:
    """Build assistants that can call models and use tools to perform tasks."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def files(self, assistant_id: str) -> AssistantFiles:
        """Files attached to the assistant ``assistant_id``."""
        return AssistantFiles(self._client, assistant_id)

    async def create(self, request: CreateAssistantRequest | Mapping[str, Any]) -> ApiObject:
        req = coerce_request(CreateAssistantRequest, request)
        return await self._client.post("/assistants", req.to_payload())

    async def retrieve(self, assistant_id: str) -> ApiObject:
        require_id(assistant_id, "assistant_id")
        return await self._client.get(f"/assistants/{assistant_id}")

    async def update(
        self, assistant_id: str, request: ModifyRequest | Mapping[str, Any]
    ) -> ApiObject:
        """Modify an assistant."""
        require_id(assistant_id, "assistant_id")
        req = coerce_request(ModifyRequest, request)
        return await self._client.post(f"/assistants/{assistant_id}", req.to_payload())

    async def delete(self, assistant_id: str) -> ApiObject:
        require_id(assistant_id, "assistant_id")
        return await self._client.delete(f"/assistants/{assistant_id}")

    async def list(self, query: Query | None = None) -> ApiObject:
        """List assistants (``limit``, ``order``, ``after`` and ``before`` are passed as query)."""
        return await self._client.get("/assistants", dict(query or {}))


class AssistantFiles:
    def __init__(self, client: Client, assistant_id: str) -> None:
        self._client = client
        self.assistant_id = require_id(assistant_id, "assistant_id")

    @property
    def _base(self) -> str:
        return f"/assistants/{self.assistant_id}/files"

    async def create(
        self, request: CreateAssistantFileRequest | Mapping[str, Any]
    ) -> ApiObject:
        """Attach a previously uploaded file to the assistant."""
        req = coerce_request(CreateAssistantFileRequest, request)
        return await self._client.post(self._base, req.to_payload())

    async def retrieve(self, file_id: str) -> ApiObject:
        require_id(file_id, "file_id")
        return await self._client.get(f"{self._base}/{file_id}")

    async def delete(self, file_id: str) -> ApiObject:
        """Detach a file from the assistant."""
        require_id(file_id, "file_id")
        return await self._client.delete(f"{self._base}/{file_id}")

    async def list(self, query: Query | None = None) -> ApiObject:
        return await self._client.get(self._base, dict(query or {}))
