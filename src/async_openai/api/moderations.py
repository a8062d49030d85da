"""
Moderations API group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.types.builder import coerce_request
from async_openai.types.requests import CreateModerationRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Moderations:
    """Classify whether text violates the usage policies."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def create(self, request: CreateModerationRequest | Mapping[str, Any]) -> ApiObject:
        req = coerce_request(CreateModerationRequest, request)
        return await self._client.post("/moderations", req.to_payload())
