"""
Chat completions API group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.errors import InvalidArgumentError
from async_openai.types.builder import coerce_request
from async_openai.types.chat import CreateChatCompletionRequest

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from async_openai.client import Client
    from async_openai.types.base import ApiObject

ChatRequest = CreateChatCompletionRequest | Mapping[str, Any]


class Chat:
    """Given a list of messages comprising a conversation, the model returns a response.

    Example:
        >>> request = CreateChatCompletionRequest(
        ...     model="gpt-3.5-turbo",
        ...     messages=[UserMessage(content="Hello!")],
        ...     max_tokens=512,
        ... )
        >>> async for chunk in client.chat().create_stream(request):
        ...     if chunk.choices:
        ...         print(chunk.choices[0].delta.get("content") or "", end="")
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    async def create(self, request: ChatRequest) -> ApiObject:
        """Create a chat completion.

        Raises:
            InvalidArgumentError: If the request asks for streaming
        """
        req = coerce_request(CreateChatCompletionRequest, request)
        if req.stream:
            raise InvalidArgumentError(
                "When stream is true, use Chat.create_stream", field="stream"
            )
        return await self._client.post("/chat/completions", req.to_payload())

    def create_stream(self, request: ChatRequest) -> AsyncIterator[ApiObject]:
        """Create a chat completion and stream back partial deltas.

        The request is validated immediately; events are produced as the
        returned iterator is consumed. The stream ends at ``data: [DONE]``.

        Raises:
            InvalidArgumentError: If the request sets ``stream=False``
        """
        req = coerce_request(CreateChatCompletionRequest, request)
        if req.stream is False:
            raise InvalidArgumentError(
                "When stream is false, use Chat.create", field="stream"
            )
        payload = req.to_payload()
        payload["stream"] = True
        return self._client.post_stream("/chat/completions", payload)
