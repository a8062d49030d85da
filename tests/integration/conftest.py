"""
Integration test helper utilities.

Builders for OpenAI-shaped response bodies shared by the integration tests.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def _chat_completion_body(
    content: str = "Hello from OpenAI!",
    model: str = "gpt-3.5-turbo",
    finish_reason: str = "stop",
) -> dict[str, Any]:
    """Create a mock chat completion response."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1699012345,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": finish_reason,
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
    }


def _chat_chunks(content: str, model: str = "gpt-3.5-turbo") -> list[dict[str, Any]]:
    """Create mock streaming chunks, one per character plus a final stop chunk."""
    chunks = [
        {
            "id": "chatcmpl-123",
            "object": "chat.completion.chunk",
            "created": 1699012345,
            "model": model,
            "choices": [{"index": 0, "delta": {"content": char}, "finish_reason": None}],
        }
        for char in content
    ]
    chunks.append(
        {
            "id": "chatcmpl-123",
            "object": "chat.completion.chunk",
            "created": 1699012345,
            "model": model,
            "choices": [{"index": 0, "delta": {}, "finish_reason": "stop"}],
        }
    )
    return chunks


def _sse_body(frames: list[dict[str, Any]], done: bool = True) -> bytes:
    """Encode frames the way the API streams them."""
    lines = [f"data: {json.dumps(frame)}\n\n" for frame in frames]
    if done:
        lines.append("data: [DONE]\n\n")
    return "".join(lines).encode()


@pytest.fixture
def sse_headers() -> dict[str, str]:
    return {"content-type": "text/event-stream"}


@pytest.fixture
def chat_completion_body() -> Any:
    return _chat_completion_body


@pytest.fixture
def chat_chunks() -> Any:
    return _chat_chunks


@pytest.fixture
def sse_body() -> Any:
    return _sse_body
