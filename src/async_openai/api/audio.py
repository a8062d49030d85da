"""
Audio API group: speech-to-text and text-to-speech.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from async_openai.client.response import SpeechResponse
from async_openai.types.builder import coerce_request
from async_openai.types.multipart import CreateTranscriptionRequest, CreateTranslationRequest
from async_openai.types.requests import CreateSpeechRequest

if TYPE_CHECKING:
    from async_openai.client import Client
    from async_openai.types.base import ApiObject


class Audio:
    """Turn audio into text or text into audio.

    Transcriptions and translations come back as an :class:`ApiObject` for
    the ``json`` and ``verbose_json`` formats, and as plain text for
    ``text``, ``srt`` and ``vtt``.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    async def transcribe(
        self, request: CreateTranscriptionRequest | Mapping[str, Any]
    ) -> ApiObject | str:
        """Transcribe audio into the input language."""
        req = coerce_request(CreateTranscriptionRequest, request)
        data, files = await req.to_form()
        return await self._client.post_form("/audio/transcriptions", data, files)

    async def translate(
        self, request: CreateTranslationRequest | Mapping[str, Any]
    ) -> ApiObject | str:
        """Translate audio into English."""
        req = coerce_request(CreateTranslationRequest, request)
        data, files = await req.to_form()
        return await self._client.post_form("/audio/translations", data, files)

    async def speech(self, request: CreateSpeechRequest | Mapping[str, Any]) -> SpeechResponse:
        """Generate audio from the input text."""
        req = coerce_request(CreateSpeechRequest, request)
        content = await self._client.post_raw("/audio/speech", req.to_payload())
        return SpeechResponse(content)
