"""
Multipart request types for upload endpoints.

Each request renders itself into ``(data, files)`` for an ``httpx``
multipart POST. Optional fields are left out of the form when unset.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from async_openai.types.builder import RequestArgs
from async_openai.types.enums import (
    AudioResponseFormat,
    DallE2ImageSize,
    ImageModel,
    ResponseFormat,
    TimestampGranularity,
)
from async_openai.types.inputs import AudioFile, ImageFile, UploadFile
from async_openai.utils.files import FilePart, create_file_part

FormData = dict[str, Union[str, list[str]]]
FormFiles = dict[str, FilePart]


class MultipartRequest(BaseModel):
    """Base for requests sent as ``multipart/form-data``.

    Only declared fields are rendered into the form, so unknown fields are
    rejected instead of being dropped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def args(cls) -> RequestArgs[Any]:
        """Start a fluent builder for this request."""
        return RequestArgs(cls)

    async def to_form(self) -> tuple[FormData, FormFiles]:
        raise NotImplementedError

    @staticmethod
    def _put(data: FormData, name: str, value: Any) -> None:
        if value is not None:
            data[name] = str(value)


class CreateTranscriptionRequest(MultipartRequest):
    """Body of ``POST /audio/transcriptions``."""

    file: AudioFile
    model: str
    prompt: str | None = None
    response_format: AudioResponseFormat | None = None
    temperature: float | None = None
    language: str | None = None
    timestamp_granularities: list[TimestampGranularity] | None = None

    async def to_form(self) -> tuple[FormData, FormFiles]:
        files = {"file": await create_file_part(self.file.source)}
        data: FormData = {"model": self.model}
        self._put(data, "prompt", self.prompt)
        self._put(data, "response_format", self.response_format)
        self._put(data, "temperature", self.temperature)
        self._put(data, "language", self.language)
        if self.timestamp_granularities:
            data["timestamp_granularities[]"] = [str(g) for g in self.timestamp_granularities]
        return data, files


class CreateTranslationRequest(MultipartRequest):
    """Body of ``POST /audio/translations``."""

    file: AudioFile
    model: str
    prompt: str | None = None
    response_format: AudioResponseFormat | None = None
    temperature: float | None = None

    async def to_form(self) -> tuple[FormData, FormFiles]:
        files = {"file": await create_file_part(self.file.source)}
        data: FormData = {"model": self.model}
        self._put(data, "prompt", self.prompt)
        self._put(data, "response_format", self.response_format)
        self._put(data, "temperature", self.temperature)
        return data, files


class CreateImageEditRequest(MultipartRequest):
    """Body of ``POST /images/edits``."""

    image: ImageFile
    prompt: str
    mask: ImageFile | None = None
    model: Union[ImageModel, str, None] = None
    n: int | None = None
    size: DallE2ImageSize | None = None
    response_format: ResponseFormat | None = None
    user: str | None = None

    async def to_form(self) -> tuple[FormData, FormFiles]:
        files = {"image": await create_file_part(self.image.source)}
        data: FormData = {"prompt": self.prompt}
        if self.mask is not None:
            files["mask"] = await create_file_part(self.mask.source)
        self._put(data, "model", self.model)
        self._put(data, "n", self.n)
        self._put(data, "size", self.size)
        self._put(data, "response_format", self.response_format)
        self._put(data, "user", self.user)
        return data, files


class CreateImageVariationRequest(MultipartRequest):
    """Body of ``POST /images/variations``."""

    image: ImageFile
    model: Union[ImageModel, str, None] = None
    n: int | None = None
    size: DallE2ImageSize | None = None
    response_format: ResponseFormat | None = None
    user: str | None = None

    async def to_form(self) -> tuple[FormData, FormFiles]:
        files = {"image": await create_file_part(self.image.source)}
        data: FormData = {}
        self._put(data, "model", self.model)
        self._put(data, "n", self.n)
        self._put(data, "size", self.size)
        self._put(data, "response_format", self.response_format)
        self._put(data, "user", self.user)
        return data, files


class CreateFileRequest(MultipartRequest):
    """Body of ``POST /files``."""

    file: UploadFile
    purpose: str

    async def to_form(self) -> tuple[FormData, FormFiles]:
        files = {"file": await create_file_part(self.file.source)}
        return {"purpose": self.purpose}, files
