"""
Models API group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from async_openai.client.core import require_id

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Models:
    """List and describe the models available in the API."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def list(self) -> ApiObject:
        return await self._client.get("/models")

    async def retrieve(self, model: str) -> ApiObject:
        require_id(model, "model")
        return await self._client.get(f"/models/{model}")

    async def delete(self, model: str) -> ApiObject:
        """Delete a fine-tuned model you own."""
        require_id(model, "model")
        return await self._client.delete(f"/models/{model}")
