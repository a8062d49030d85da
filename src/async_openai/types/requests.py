"""
JSON request bodies for the non-chat endpoints.

Only commonly used fields are declared; any other keyword is forwarded to the
API untouched.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from async_openai.types.base import RequestModel
from async_openai.types.enums import (
    ImageModel,
    ImageSize,
    ResponseFormat,
    SpeechResponseFormat,
)
from async_openai.types.inputs import EmbeddingInput, ModerationInput, Prompt, Stop


class CreateCompletionRequest(RequestModel):
    """Body of ``POST /completions``."""

    model: str
    prompt: Prompt = ""
    suffix: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    stream: bool | None = None
    logprobs: int | None = None
    echo: bool | None = None
    stop: Stop | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    best_of: int | None = None
    logit_bias: dict[str, int] | None = None
    seed: int | None = None
    user: str | None = None


class CreateEmbeddingRequest(RequestModel):
    """Body of ``POST /embeddings``."""

    model: str
    input: EmbeddingInput = ""
    encoding_format: Literal["float", "base64"] | None = None
    dimensions: int | None = None
    user: str | None = None


class CreateModerationRequest(RequestModel):
    """Body of ``POST /moderations``."""

    input: ModerationInput = ""
    model: str | None = None


class CreateImageRequest(RequestModel):
    """Body of ``POST /images/generations``."""

    prompt: str
    model: Union[ImageModel, str, None] = None
    n: int | None = None
    quality: Literal["standard", "hd"] | None = None
    response_format: ResponseFormat | None = None
    size: ImageSize | None = None
    style: Literal["vivid", "natural"] | None = None
    user: str | None = None


class CreateSpeechRequest(RequestModel):
    """Body of ``POST /audio/speech``."""

    model: str
    input: str
    voice: str
    response_format: SpeechResponseFormat | None = None
    speed: float | None = None


class CreateFineTuningJobRequest(RequestModel):
    """Body of ``POST /fine_tuning/jobs``."""

    model: str
    training_file: str
    hyperparameters: dict[str, Any] | None = None
    suffix: str | None = None
    validation_file: str | None = None


class CreateAssistantRequest(RequestModel):
    """Body of ``POST /assistants``."""

    model: str
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    tools: list[dict[str, Any]] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, Any] | None = None


class CreateAssistantFileRequest(RequestModel):
    file_id: str


class CreateMessageRequest(RequestModel):
    """Body of ``POST /threads/{thread_id}/messages``."""

    role: Literal["user"] = "user"
    content: str
    file_ids: list[str] | None = None
    metadata: dict[str, Any] | None = None


class CreateThreadRequest(RequestModel):
    """Body of ``POST /threads``."""

    messages: list[CreateMessageRequest] | None = None
    metadata: dict[str, Any] | None = None


class CreateRunRequest(RequestModel):
    """Body of ``POST /threads/{thread_id}/runs``."""

    assistant_id: str
    model: str | None = None
    instructions: str | None = None
    additional_instructions: str | None = None
    tools: list[dict[str, Any]] | None = None
    metadata: dict[str, Any] | None = None


class CreateThreadAndRunRequest(RequestModel):
    """Body of ``POST /threads/runs``."""

    assistant_id: str
    thread: CreateThreadRequest | None = None
    model: str | None = None
    instructions: str | None = None
    tools: list[dict[str, Any]] | None = None
    metadata: dict[str, Any] | None = None


class ToolOutput(BaseModel):
    tool_call_id: str
    output: str


class SubmitToolOutputsRequest(RequestModel):
    """Body of ``POST /threads/{thread_id}/runs/{run_id}/submit_tool_outputs``."""

    tool_outputs: list[ToolOutput] = Field(default_factory=list)


class ModifyRequest(RequestModel):
    """Body of the ``modify`` endpoints (assistants, threads, messages, runs).

    Every field is optional and passed through as given.
    """

    metadata: dict[str, Any] | None = None
