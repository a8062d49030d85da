"""
Legacy text completions API group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.errors import InvalidArgumentError
from async_openai.types.builder import coerce_request
from async_openai.types.requests import CreateCompletionRequest

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from async_openai.client import Client
    from async_openai.types.base import ApiObject

CompletionRequest = CreateCompletionRequest | Mapping[str, Any]


class Completions:
    """Given a prompt, the model returns one or more predicted completions."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def create(self, request: CompletionRequest) -> ApiObject:
        req = coerce_request(CreateCompletionRequest, request)
        if req.stream:
            raise InvalidArgumentError(
                "When stream is true, use Completions.create_stream", field="stream"
            )
        return await self._client.post("/completions", req.to_payload())

    def create_stream(self, request: CompletionRequest) -> AsyncIterator[ApiObject]:
        """Stream back partial progress as the completion is generated."""
        req = coerce_request(CreateCompletionRequest, request)
        if req.stream is False:
            raise InvalidArgumentError(
                "When stream is false, use Completions.create", field="stream"
            )
        payload = req.to_payload()
        payload["stream"] = True
        return self._client.post_stream("/completions", payload)
