"""
Server-Sent Events decoding for streamed completions.

The API streams ``data: {json}`` frames separated by blank lines and ends
the stream with ``data: [DONE]``.
"""

from __future__ import annotations

import codecs
import json
from typing import TYPE_CHECKING, Any

from async_openai.errors import JsonDecodeError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class SSEDecoder:
    """Server-Sent Events (SSE) decoder.

    Parses SSE format:
    ```
    data: {"key": "value"}

    data: {"key": "value2"}

    data: [DONE]
    ```

    Frames may be split across arbitrary chunk boundaries. Comment lines
    (starting with ``:``) and ``event:``/``id:``/``retry:`` fields are ignored.

    Attributes:
        prefix: Data field name (default: "data:")
        done_signal: End of stream signal (default: "[DONE]")
    """

    def __init__(
        self,
        prefix: str = "data:",
        done_signal: str = "[DONE]",
    ) -> None:
        self._prefix = prefix
        self._done_signal = done_signal

    async def decode(
        self, byte_stream: AsyncIterator[bytes]
    ) -> AsyncIterator[dict[str, Any]]:
        """Decode SSE byte stream into JSON frames.

        Args:
            byte_stream: Async iterator of raw bytes

        Yields:
            Parsed JSON frames

        Raises:
            JsonDecodeError: If a data frame is not valid JSON
        """
        buffer = ""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

        async for chunk in byte_stream:
            buffer += decoder.decode(chunk)
            buffer = buffer.replace("\r\n", "\n")

            while "\n\n" in buffer:
                frame, buffer = buffer.split("\n\n", 1)
                data = self._frame_data(frame)
                if data is None:
                    continue
                if data == self._done_signal:
                    return
                yield self._parse(data)

        # Stream closed without a trailing blank line
        buffer += decoder.decode(b"", final=True)
        data = self._frame_data(buffer)
        if data is not None and data != self._done_signal:
            yield self._parse(data)

    def _frame_data(self, frame: str) -> str | None:
        """Join the data lines of one frame, or None if it carries no data."""
        data_lines = []
        for line in frame.split("\n"):
            if not line or line.startswith(":"):
                continue
            if line.startswith(self._prefix):
                value = line[len(self._prefix) :]
                if value.startswith(" "):
                    value = value[1:]
                data_lines.append(value)
        if not data_lines:
            return None
        data = "\n".join(data_lines).strip()
        return data or None

    @staticmethod
    def _parse(data: str) -> dict[str, Any]:
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            raise JsonDecodeError(
                f"Failed to decode stream frame: {e}",
                content=data,
                cause=e,
            ) from e
