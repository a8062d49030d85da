"""
Thread messages API group (beta).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.client.core import require_id
from async_openai.types.builder import coerce_request
from async_openai.types.requests import CreateMessageRequest, ModifyRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Messages:
    """Messages within a thread."""

    def __init__(self, client: Client, thread_id: str) -> None:
        self._client = client
        self.thread_id = require_id(thread_id, "thread_id")

    @property
    def _base(self) -> str:
        return f"/threads/{self.thread_id}/messages"

    def files(self, message_id: str) -> MessageFiles:
        return MessageFiles(self._client, self.thread_id, message_id)

    async def create(self, request: CreateMessageRequest | Mapping[str, Any]) -> ApiObject:
        req = coerce_request(CreateMessageRequest, request)
        return await self._client.post(self._base, req.to_payload())

    async def retrieve(self, message_id: str) -> ApiObject:
        require_id(message_id, "message_id")
        return await self._client.get(f"{self._base}/{message_id}")

    async def update(
        self, message_id: str, request: ModifyRequest | Mapping[str, Any]
    ) -> ApiObject:
        require_id(message_id, "message_id")
        req = coerce_request(ModifyRequest, request)
        return await self._client.post(f"{self._base}/{message_id}", req.to_payload())

    async def list(self, query: Mapping[str, Any] | None = None) -> ApiObject:
        return await self._client.get(self._base, dict(query or {}))


class MessageFiles:
    """Files attached to a single message."""

    def __init__(self, client: Client, thread_id: str, message_id: str) -> None:
        self._client = client
        self.thread_id = require_id(thread_id, "thread_id")
        self.message_id = require_id(message_id, "message_id")

    @property
    def _base(self) -> str:
        return f"/threads/{self.thread_id}/messages/{self.message_id}/files"

    async def retrieve(self, file_id: str) -> ApiObject:
        require_id(file_id, "file_id")
        return await self._client.get(f"{self._base}/{file_id}")

    async def list(self, query: Mapping[str, Any] | None = None) -> ApiObject:
        return await self._client.get(self._base, dict(query or {}))
