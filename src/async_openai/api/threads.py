"""
Threads API group (beta).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.api.messages import Messages
from async_openai.api.runs import Runs
from async_openai.client.core import require_id
from async_openai.types.builder import coerce_request
from async_openai.types.requests import (
    CreateThreadAndRunRequest,
    CreateThreadRequest,
    ModifyRequest,
)

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Threads:
    """Conversation threads that assistants can interact with.

    Example:
        >>> thread = await client.threads().create({})
        >>> await client.threads().messages(thread.id).create({"content": "Hi"})
        >>> run = await client.threads().runs(thread.id).create({"assistant_id": "asst_abc"})
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def messages(self, thread_id: str) -> Messages:
        return Messages(self._client, thread_id)

    def runs(self, thread_id: str) -> Runs:
        return Runs(self._client, thread_id)

    async def create_and_run(
        self, request: CreateThreadAndRunRequest | Mapping[str, Any]
    ) -> ApiObject:
        """Create a thread and run it in one request."""
        req = coerce_request(CreateThreadAndRunRequest, request)
        return await self._client.post("/threads/runs", req.to_payload())

    async def create(
        self, request: CreateThreadRequest | Mapping[str, Any] | None = None
    ) -> ApiObject:
        req = coerce_request(CreateThreadRequest, request if request is not None else {})
        return await self._client.post("/threads", req.to_payload())

    async def retrieve(self, thread_id: str) -> ApiObject:
        require_id(thread_id, "thread_id")
        return await self._client.get(f"/threads/{thread_id}")

    async def update(
        self, thread_id: str, request: ModifyRequest | Mapping[str, Any]
    ) -> ApiObject:
        require_id(thread_id, "thread_id")
        req = coerce_request(ModifyRequest, request)
        return await self._client.post(f"/threads/{thread_id}", req.to_payload())

    async def delete(self, thread_id: str) -> ApiObject:
        require_id(thread_id, "thread_id")
        return await self._client.delete(f"/threads/{thread_id}")
