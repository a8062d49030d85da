"""
Helpers for turning upload sources into multipart file parts.
"""

from __future__ import annotations

import asyncio
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING

from async_openai.errors import FileReadError, FileSaveError

if TYPE_CHECKING:
    from async_openai.types.inputs import InputSource

FilePart = tuple[str, bytes, str]
"""(filename, content, content type) as accepted by ``httpx`` ``files=``."""


def guess_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or "application/octet-stream"


async def create_file_part(source: InputSource) -> FilePart:
    """Load an input source into a multipart file part.

    Raises:
        FileReadError: If the source path cannot be read
    """
    if source.content is not None:
        content = source.content
    elif source.path is not None:
        try:
            content = await asyncio.to_thread(source.path.read_bytes)
        except OSError as e:
            raise FileReadError(
                f"Cannot read {source.path}: {e.strerror or e}",
                path=str(source.path),
            ) from e
    else:
        content = b""

    filename = source.filename or (source.path.name if source.path else "")
    return filename, content, guess_content_type(filename)


async def save_bytes(content: bytes, path: str | Path) -> Path:
    """Write bytes to ``path``, creating parent directories as needed.

    Raises:
        FileSaveError: If the file cannot be written
    """
    target = Path(path)

    def _write() -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    try:
        await asyncio.to_thread(_write)
    except OSError as e:
        raise FileSaveError(
            f"Cannot save to {target}: {e.strerror or e}",
            path=str(target),
        ) from e
    return target
