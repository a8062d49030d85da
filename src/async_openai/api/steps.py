"""
Run steps API group (beta).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.client.core import require_id

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Steps:
    """Steps taken by a run: message creation and tool calls."""

    def __init__(self, client: Client, thread_id: str, run_id: str) -> None:
        self._client = client
        self.thread_id = require_id(thread_id, "thread_id")
        self.run_id = require_id(run_id, "run_id")

    @property
    def _base(self) -> str:
        return f"/threads/{self.thread_id}/runs/{self.run_id}/steps"

    async def retrieve(self, step_id: str) -> ApiObject:
        require_id(step_id, "step_id")
        return await self._client.get(f"{self._base}/{step_id}")

    async def list(self, query: Mapping[str, Any] | None = None) -> ApiObject:
        return await self._client.get(self._base, dict(query or {}))
