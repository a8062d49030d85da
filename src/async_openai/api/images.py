"""
Images API group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.types.builder import coerce_request
from async_openai.types.multipart import CreateImageEditRequest, CreateImageVariationRequest
from async_openai.types.requests import CreateImageRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Images:
    """Given a prompt and/or an input image, the model will generate a new image."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def create(self, request: CreateImageRequest | Mapping[str, Any]) -> ApiObject:
        """Create an image given a prompt."""
        req = coerce_request(CreateImageRequest, request)
        return await self._client.post("/images/generations", req.to_payload())

    async def create_edit(
        self, request: CreateImageEditRequest | Mapping[str, Any]
    ) -> ApiObject | str:
        """Create an edited or extended image given an original image and a prompt."""
        req = coerce_request(CreateImageEditRequest, request)
        data, files = await req.to_form()
        return await self._client.post_form("/images/edits", data, files)

    async def create_variation(
        self, request: CreateImageVariationRequest | Mapping[str, Any]
    ) -> ApiObject | str:
        """Create a variation of a given image."""
        req = coerce_request(CreateImageVariationRequest, request)
        data, files = await req.to_form()
        return await self._client.post_form("/images/variations", data, files)
