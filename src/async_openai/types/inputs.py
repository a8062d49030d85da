"""
Flexible input types.

Several request fields accept more than one shape: a prompt can be a string,
a batch of strings, a token array or a batch of token arrays. The annotated
aliases below normalize whatever the caller passes (tuples included) into the
JSON shape the API expects, and reject anything else.

File uploads take an ``InputSource``: either a path on disk, or a filename
plus in-memory bytes.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _is_token(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _coerce_strings(value: Any, kind: str) -> str | list[str]:
    """Accept a string or a sequence of strings."""
    if isinstance(value, str):
        return value
    if _is_sequence(value) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ValueError(f"{kind} must be a string or a list of strings, got {type(value).__name__}")


def _coerce_tokens_or_strings(
    value: Any, kind: str
) -> str | list[str] | list[int] | list[list[int]]:
    """Accept strings, token arrays, or batches of token arrays."""
    if isinstance(value, str):
        return value
    if not _is_sequence(value):
        raise ValueError(f"{kind} must be a string, a list of strings or token arrays")
    items = list(value)
    if all(isinstance(v, str) for v in items):
        return items
    if all(_is_token(v) for v in items):
        return items
    if all(_is_sequence(v) and all(_is_token(t) for t in v) for v in items):
        return [list(v) for v in items]
    raise ValueError(f"{kind} mixes incompatible element types")


Prompt = Annotated[
    Union[str, list[str], list[int], list[list[int]]],
    BeforeValidator(lambda v: _coerce_tokens_or_strings(v, "prompt")),
]
"""Completion prompt: text, batch of texts, token array or batch of token arrays."""

EmbeddingInput = Annotated[
    Union[str, list[str], list[int], list[list[int]]],
    BeforeValidator(lambda v: _coerce_tokens_or_strings(v, "input")),
]
"""Embedding input: same shapes as Prompt."""

Stop = Annotated[
    Union[str, list[str]],
    BeforeValidator(lambda v: _coerce_strings(v, "stop")),
]
"""Stop sequence(s)."""

ModerationInput = Annotated[
    Union[str, list[str]],
    BeforeValidator(lambda v: _coerce_strings(v, "input")),
]
"""Moderation input: a text or a batch of texts."""


class InputSource(BaseModel):
    """Where upload bytes come from.

    Exactly one of ``path`` or ``content`` is set. The default source is an
    empty file with an empty name.
    """

    model_config = ConfigDict(frozen=True)

    path: Path | None = None
    filename: str = ""
    content: bytes | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> InputSource:
        path = Path(path)
        return cls(path=path, filename=path.name)

    @classmethod
    def from_bytes(cls, filename: str, content: bytes | bytearray | memoryview) -> InputSource:
        return cls(filename=filename, content=bytes(content))

    @property
    def is_empty(self) -> bool:
        return self.path is None and not self.content and not self.filename


def _default_source() -> InputSource:
    return InputSource(content=b"")


class _FileLike(BaseModel):
    """Upload input wrapping an :class:`InputSource`."""

    model_config = ConfigDict(frozen=True)

    source: InputSource = Field(default_factory=_default_source)

    @classmethod
    def from_path(cls, path: str | Path) -> Any:
        return cls(source=InputSource.from_path(path))

    @classmethod
    def from_bytes(cls, filename: str, content: bytes | bytearray | memoryview) -> Any:
        return cls(source=InputSource.from_bytes(filename, content))

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Accept an instance, an InputSource, or a filesystem path."""
        if isinstance(value, cls):
            return value
        if isinstance(value, InputSource):
            return cls(source=value)
        if isinstance(value, (str, Path)):
            return cls.from_path(value)
        return value


class AudioInput(_FileLike):
    """Audio file for transcription or translation."""


class FileInput(_FileLike):
    """File for the files endpoint."""


class ImageInput(_FileLike):
    """Image (or mask) for image edits and variations."""


AudioFile = Annotated[AudioInput, BeforeValidator(AudioInput.coerce)]
UploadFile = Annotated[FileInput, BeforeValidator(FileInput.coerce)]
ImageFile = Annotated[ImageInput, BeforeValidator(ImageInput.coerce)]
