"""
Embeddings API group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.types.builder import coerce_request
from async_openai.types.requests import CreateEmbeddingRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Embeddings:
    """Get a vector representation of a given input."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def create(self, request: CreateEmbeddingRequest | Mapping[str, Any]) -> ApiObject:
        req = coerce_request(CreateEmbeddingRequest, request)
        return await self._client.post("/embeddings", req.to_payload())
