"""
Response types that are not JSON objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from async_openai.utils.files import save_bytes

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class SpeechResponse:
    """Audio bytes returned by text-to-speech.

    Attributes:
        content: Encoded audio (format chosen by the request's response_format)
    """

    content: bytes

    async def save(self, path: str | Path) -> Path:
        """Write the audio to ``path``.

        Raises:
            FileSaveError: If the file cannot be written
        """
        return await save_bytes(self.content, path)

    def __len__(self) -> int:
        return len(self.content)
