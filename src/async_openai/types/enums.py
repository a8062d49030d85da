"""
Enumerations with fixed wire representations.

``str(member)`` renders the exact string sent to the API, which is also
what multipart form fields use.
"""

from __future__ import annotations

from enum import Enum


class _WireEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class Role(_WireEnum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    FUNCTION = "function"


class ImageSize(_WireEnum):
    """Image sizes accepted by image generation."""

    S256X256 = "256x256"
    S512X512 = "512x512"
    S1024X1024 = "1024x1024"
    S1792X1024 = "1792x1024"
    S1024X1792 = "1024x1792"


class DallE2ImageSize(_WireEnum):
    """Image sizes accepted by image edits and variations."""

    S256X256 = "256x256"
    S512X512 = "512x512"
    S1024X1024 = "1024x1024"


class ImageModel(_WireEnum):
    """Well-known image models. Any other model name is passed as a plain str."""

    DALL_E_2 = "dall-e-2"
    DALL_E_3 = "dall-e-3"


class ResponseFormat(_WireEnum):
    """How generated images are returned."""

    URL = "url"
    B64_JSON = "b64_json"


class AudioResponseFormat(_WireEnum):
    """Output format of transcriptions and translations."""

    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class TimestampGranularity(_WireEnum):
    WORD = "word"
    SEGMENT = "segment"


class ChatCompletionToolType(_WireEnum):
    FUNCTION = "function"


class SpeechResponseFormat(_WireEnum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"
