"""Tests for server-sent event decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from async_openai.errors import JsonDecodeError
from async_openai.streaming import SSEDecoder

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


async def _chunks(*parts: bytes) -> AsyncIterator[bytes]:
    for part in parts:
        yield part


async def _collect(*parts: bytes) -> list[dict[str, Any]]:
    return [frame async for frame in SSEDecoder().decode(_chunks(*parts))]


class TestSSEDecoder:
    """Tests for SSEDecoder."""

    @pytest.mark.asyncio
    async def test_basic_frames(self) -> None:
        frames = await _collect(b'data: {"a": 1}\n\ndata: {"a": 2}\n\ndata: [DONE]\n\n')
        assert frames == [{"a": 1}, {"a": 2}]

    @pytest.mark.asyncio
    async def test_stops_at_done(self) -> None:
        frames = await _collect(b'data: {"a": 1}\n\ndata: [DONE]\n\ndata: {"a": 2}\n\n')
        assert frames == [{"a": 1}]

    @pytest.mark.asyncio
    async def test_frame_split_across_chunks(self) -> None:
        frames = await _collect(b'data: {"con', b'tent": "hi"}\n', b"\ndata: [DONE]\n\n")
        assert frames == [{"content": "hi"}]

    @pytest.mark.asyncio
    async def test_multibyte_split_across_chunks(self) -> None:
        payload = 'data: {"text": "héllo"}\n\n'.encode()
        split = payload.index(b"\xc3") + 1
        frames = await _collect(payload[:split], payload[split:])
        assert frames == [{"text": "héllo"}]

    @pytest.mark.asyncio
    async def test_crlf_line_endings(self) -> None:
        frames = await _collect(b'data: {"a": 1}\r\n\r\ndata: [DONE]\r\n\r\n')
        assert frames == [{"a": 1}]

    @pytest.mark.asyncio
    async def test_comments_and_other_fields_ignored(self) -> None:
        frames = await _collect(
            b": keep-alive\n\n",
            b'event: message\nid: 7\ndata: {"a": 1}\n\n',
        )
        assert frames == [{"a": 1}]

    @pytest.mark.asyncio
    async def test_multiline_data(self) -> None:
        frames = await _collect(b'data: {"a":\ndata: 1}\n\n')
        assert frames == [{"a": 1}]

    @pytest.mark.asyncio
    async def test_trailing_frame_without_blank_line(self) -> None:
        frames = await _collect(b'data: {"a": 1}\n\ndata: {"a": 2}')
        assert frames == [{"a": 1}, {"a": 2}]

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        with pytest.raises(JsonDecodeError) as exc_info:
            await _collect(b"data: {not json}\n\n")
        assert exc_info.value.content == "{not json}"

    @pytest.mark.asyncio
    async def test_empty_stream(self) -> None:
        assert await _collect() == []
