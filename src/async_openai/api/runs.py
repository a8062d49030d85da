"""
Runs API group (beta).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.api.steps import Steps
from async_openai.client.core import require_id
from async_openai.types.builder import coerce_request
from async_openai.types.requests import CreateRunRequest, ModifyRequest, SubmitToolOutputsRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Runs:
    """Invocations of an assistant on a thread."""

    def __init__(self, client: Client, thread_id: str) -> None:
        self._client = client
        self.thread_id = require_id(thread_id, "thread_id")

    @property
    def _base(self) -> str:
        return f"/threads/{self.thread_id}/runs"

    def steps(self, run_id: str) -> Steps:
        return Steps(self._client, self.thread_id, run_id)

    async def create(self, request: CreateRunRequest | Mapping[str, Any]) -> ApiObject:
        req = coerce_request(CreateRunRequest, request)
        return await self._client.post(self._base, req.to_payload())

    async def retrieve(self, run_id: str) -> ApiObject:
        require_id(run_id, "run_id")
        return await self._client.get(f"{self._base}/{run_id}")

    async def update(self, run_id: str, request: ModifyRequest | Mapping[str, Any]) -> ApiObject:
        require_id(run_id, "run_id")
        req = coerce_request(ModifyRequest, request)
        return await self._client.post(f"{self._base}/{run_id}", req.to_payload())

    async def list(self, query: Mapping[str, Any] | None = None) -> ApiObject:
        return await self._client.get(self._base, dict(query or {}))

    async def submit_tool_outputs(
        self,
        run_id: str,
        request: SubmitToolOutputsRequest | Mapping[str, Any],
    ) -> ApiObject:
        """Submit tool call results for a run with status ``requires_action``.

        All outputs must be submitted in a single request.
        """
        require_id(run_id, "run_id")
        req = coerce_request(SubmitToolOutputsRequest, request)
        return await self._client.post(
            f"{self._base}/{run_id}/submit_tool_outputs", req.to_payload()
        )

    async def cancel(self, run_id: str) -> ApiObject:
        """Cancel a run that is ``in_progress``."""
        require_id(run_id, "run_id")
        return await self._client.post(f"{self._base}/{run_id}/cancel")
