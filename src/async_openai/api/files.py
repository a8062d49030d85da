"""
Files API group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.client.core import require_id
from async_openai.types.builder import coerce_request
from async_openai.types.multipart import CreateFileRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Files:
    """Upload and manage documents used by fine-tuning and assistants."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def create(self, request: CreateFileRequest | Mapping[str, Any]) -> ApiObject | str:
        """Upload a file.

        The size of all files uploaded by one organization can be up to 100 GB.
        """
        req = coerce_request(CreateFileRequest, request)
        data, files = await req.to_form()
        return await self._client.post_form("/files", data, files)

    async def list(self, purpose: str | None = None) -> ApiObject:
        """List files, optionally only those with the given purpose."""
        return await self._client.get("/files", {"purpose": purpose})

    async def retrieve(self, file_id: str) -> ApiObject:
        require_id(file_id, "file_id")
        return await self._client.get(f"/files/{file_id}")

    async def delete(self, file_id: str) -> ApiObject:
        require_id(file_id, "file_id")
        return await self._client.delete(f"/files/{file_id}")

    async def retrieve_content(self, file_id: str) -> str:
        """Return the contents of the file as text."""
        require_id(file_id, "file_id")
        content = await self._client.get_raw(f"/files/{file_id}/content")
        return content.decode("utf-8", errors="replace")
