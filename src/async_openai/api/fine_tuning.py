"""
Fine-tuning jobs API group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.client.core import require_id
from async_openai.types.builder import coerce_request
from async_openai.types.requests import CreateFineTuningJobRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class FineTuning:
    """Manage fine-tuning jobs to tailor a model to your training data."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def create(
        self, request: CreateFineTuningJobRequest | Mapping[str, Any]
    ) -> ApiObject:
        """Create a job that fine-tunes a model from a given dataset.

        The response includes details of the enqueued job, including its
        status and the name of the fine-tuned model once complete.
        """
        req = coerce_request(CreateFineTuningJobRequest, request)
        return await self._client.post("/fine_tuning/jobs", req.to_payload())

    async def list_paginated(
        self, after: str | None = None, limit: int | None = None
    ) -> ApiObject:
        """List your organization's fine-tuning jobs."""
        return await self._client.get("/fine_tuning/jobs", {"after": after, "limit": limit})

    async def retrieve(self, fine_tuning_job_id: str) -> ApiObject:
        require_id(fine_tuning_job_id, "fine_tuning_job_id")
        return await self._client.get(f"/fine_tuning/jobs/{fine_tuning_job_id}")

    async def cancel(self, fine_tuning_job_id: str) -> ApiObject:
        """Immediately cancel a fine-tune job."""
        require_id(fine_tuning_job_id, "fine_tuning_job_id")
        return await self._client.post(f"/fine_tuning/jobs/{fine_tuning_job_id}/cancel")

    async def list_events(
        self,
        fine_tuning_job_id: str,
        after: str | None = None,
        limit: int | None = None,
    ) -> ApiObject:
        """Get status updates for a fine-tuning job."""
        require_id(fine_tuning_job_id, "fine_tuning_job_id")
        return await self._client.get(
            f"/fine_tuning/jobs/{fine_tuning_job_id}/events",
            {"after": after, "limit": limit},
        )
