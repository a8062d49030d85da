"""Tests for multipart request rendering and file helpers."""

from pathlib import Path

import pytest

from async_openai.client import SpeechResponse
from async_openai.errors import FileReadError, FileSaveError, InvalidArgumentError
from async_openai.types import (
    AudioInput,
    AudioResponseFormat,
    CreateFileRequest,
    CreateImageEditRequest,
    CreateImageVariationRequest,
    CreateTranscriptionRequest,
    InputSource,
    TimestampGranularity,
)
from async_openai.types.builder import coerce_request
from async_openai.utils import create_file_part, guess_content_type, save_bytes


class TestInputSource:
    def test_from_path(self, tmp_path: Path) -> None:
        source = InputSource.from_path(tmp_path / "audio.mp3")
        assert source.filename == "audio.mp3"
        assert source.content is None

    def test_default_is_empty(self) -> None:
        assert AudioInput().source.content == b""
        assert InputSource().is_empty

    def test_coerce_from_str_path(self) -> None:
        request = CreateTranscriptionRequest(file="speech.wav", model="whisper-1")
        assert request.file.source.path == Path("speech.wav")


class TestCreateFilePart:
    @pytest.mark.asyncio
    async def test_from_bytes(self) -> None:
        part = await create_file_part(InputSource.from_bytes("data.jsonl", b'{"a":1}\n'))
        assert part[0] == "data.jsonl"
        assert part[1] == b'{"a":1}\n'

    @pytest.mark.asyncio
    async def test_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "image.png"
        path.write_bytes(b"\x89PNG")
        assert await create_file_part(InputSource.from_path(path)) == (
            "image.png",
            b"\x89PNG",
            "image/png",
        )

    @pytest.mark.asyncio
    async def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError) as exc_info:
            await create_file_part(InputSource.from_path(tmp_path / "missing.wav"))
        assert exc_info.value.path == str(tmp_path / "missing.wav")

    def test_guess_content_type(self) -> None:
        assert guess_content_type("x.unknownext") == "application/octet-stream"


class TestMultipartRequests:
    """Tests for form rendering."""

    @pytest.mark.asyncio
    async def test_transcription_form(self) -> None:
        request = CreateTranscriptionRequest(
            file=AudioInput.from_bytes("hello.mp3", b"ID3"),
            model="whisper-1",
            response_format=AudioResponseFormat.VERBOSE_JSON,
            temperature=0.2,
            timestamp_granularities=[TimestampGranularity.WORD, TimestampGranularity.SEGMENT],
        )
        data, files = await request.to_form()
        assert data == {
            "model": "whisper-1",
            "response_format": "verbose_json",
            "temperature": "0.2",
            "timestamp_granularities[]": ["word", "segment"],
        }
        assert files["file"][:2] == ("hello.mp3", b"ID3")

    @pytest.mark.asyncio
    async def test_image_edit_with_mask(self) -> None:
        request = CreateImageEditRequest(
            image=InputSource.from_bytes("img.png", b"img"),
            mask=InputSource.from_bytes("mask.png", b"mask"),
            prompt="Add a hat",
            n=2,
        )
        data, files = await request.to_form()
        assert data == {"prompt": "Add a hat", "n": "2"}
        assert set(files) == {"image", "mask"}

    @pytest.mark.asyncio
    async def test_image_variation_minimal(self) -> None:
        request = CreateImageVariationRequest(image=InputSource.from_bytes("img.png", b"img"))
        data, files = await request.to_form()
        assert data == {}
        assert files["image"][2] == "image/png"

    @pytest.mark.asyncio
    async def test_file_upload(self) -> None:
        request = CreateFileRequest.args().file(
            InputSource.from_bytes("train.jsonl", b"{}")
        ).purpose("fine-tune").build()
        data, files = await request.to_form()
        assert data == {"purpose": "fine-tune"}
        assert files["file"][0] == "train.jsonl"

    def test_builder_rejects_unknown_field(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            (
                CreateTranscriptionRequest.args()
                .file("a.wav")
                .model("whisper-1")
                .langauge("en")
                .build()
            )
        assert exc_info.value.field == "langauge"

    def test_mapping_rejects_unknown_field(self) -> None:
        with pytest.raises(InvalidArgumentError):
            coerce_request(CreateFileRequest, {"file": "train.jsonl", "purpose": "fine-tune", "porpose": "x"})


class TestSaveBytes:
    @pytest.mark.asyncio
    async def test_speech_save(self, tmp_path: Path) -> None:
        speech = SpeechResponse(b"RIFF")
        target = await speech.save(tmp_path / "out" / "speech.wav")
        assert target.read_bytes() == b"RIFF"
        assert len(speech) == 4

    @pytest.mark.asyncio
    async def test_save_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(FileSaveError):
            await save_bytes(b"x", blocker / "nested.bin")
