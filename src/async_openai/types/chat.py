"""
Chat completion request types.

Provides message, content part and tool types with the same conveniences
the API itself accepts: a plain string works wherever a text part, an image
URL, a function name or a named tool choice is expected.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from async_openai.types.base import RequestModel
from async_openai.types.enums import Role
from async_openai.types.inputs import Stop


class ImageUrl(BaseModel):
    """Image reference: an https URL or a ``data:`` URL."""

    url: str
    detail: Literal["auto", "low", "high"] = "auto"

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls(url=value)
        return value


class ContentPartText(BaseModel):
    type: Literal["text"] = "text"
    text: str

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls(text=value)
        return value


class ContentPartImage(BaseModel):
    type: Literal["image_url"] = "image_url"
    image_url: Annotated[ImageUrl, BeforeValidator(ImageUrl.coerce)]


def _coerce_part(value: Any) -> Any:
    if isinstance(value, str):
        return ContentPartText(text=value)
    if isinstance(value, ImageUrl):
        return ContentPartImage(image_url=value)
    return value


ContentPart = Annotated[
    Union[ContentPartText, ContentPartImage],
    BeforeValidator(_coerce_part),
]

UserMessageContent = Union[str, list[ContentPart]]


class FunctionName(BaseModel):
    name: str

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls(name=value)
        return value


class FunctionCall(BaseModel):
    """A function call produced by the model (and echoed back in history)."""

    name: str
    arguments: str


class MessageToolCall(BaseModel):
    id: str
    type: Literal["function"] = "function"
    function: FunctionCall


class _Message(BaseModel):
    model_config = ConfigDict(extra="allow")


class SystemMessage(_Message):
    role: Literal["system"] = "system"
    content: str
    name: str | None = None


class UserMessage(_Message):
    role: Literal["user"] = "user"
    content: UserMessageContent = ""
    name: str | None = None


class AssistantMessage(_Message):
    role: Literal["assistant"] = "assistant"
    content: str | None = None
    name: str | None = None
    tool_calls: list[MessageToolCall] | None = None
    function_call: FunctionCall | None = None


class ToolMessage(_Message):
    role: Literal["tool"] = "tool"
    content: str
    tool_call_id: str


class FunctionMessage(_Message):
    role: Literal["function"] = "function"
    content: str | None = None
    name: str


ChatCompletionRequestMessage = Annotated[
    Union[SystemMessage, UserMessage, AssistantMessage, ToolMessage, FunctionMessage],
    Field(discriminator="role"),
]

_MESSAGE_TYPES: dict[str, type[_Message]] = {
    Role.SYSTEM.value: SystemMessage,
    Role.USER.value: UserMessage,
    Role.ASSISTANT.value: AssistantMessage,
    Role.TOOL.value: ToolMessage,
    Role.FUNCTION.value: FunctionMessage,
}


def message(role: Role | str, content: Any = None, **fields: Any) -> _Message:
    """Build the message type matching ``role``.

    Example:
        >>> message(Role.USER, "Hello!")
        UserMessage(role='user', content='Hello!', name=None)
    """
    key = role.value if isinstance(role, Role) else str(role)
    try:
        cls = _MESSAGE_TYPES[key]
    except KeyError:
        raise ValueError(f"Unknown message role '{role}'") from None
    if content is not None:
        fields["content"] = content
    return cls(**fields)


class FunctionObject(BaseModel):
    name: str
    description: str | None = None
    parameters: dict[str, Any] | None = None


class ChatCompletionTool(BaseModel):
    type: Literal["function"] = "function"
    function: FunctionObject


class ChatCompletionFunctions(BaseModel):
    """Legacy ``functions`` entry. A ``(name, parameters)`` tuple is accepted."""

    name: str
    description: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, tuple) and len(value) == 2:
            return cls(name=value[0], parameters=value[1])
        return value


class ChatCompletionNamedToolChoice(BaseModel):
    type: Literal["function"] = "function"
    function: Annotated[FunctionName, BeforeValidator(FunctionName.coerce)]


def _coerce_tool_choice(value: Any) -> Any:
    if isinstance(value, str) and value not in ("auto", "none", "required"):
        return ChatCompletionNamedToolChoice(function=FunctionName(name=value))
    return value


def _coerce_function_call(value: Any) -> Any:
    if isinstance(value, str) and value not in ("auto", "none"):
        return FunctionName(name=value)
    return value


ChatCompletionToolChoiceOption = Annotated[
    Union[Literal["auto", "none", "required"], ChatCompletionNamedToolChoice],
    BeforeValidator(_coerce_tool_choice),
]
"""``"auto"``, ``"none"``, ``"required"``, or any other string naming a function."""

ChatCompletionFunctionCall = Annotated[
    Union[Literal["auto", "none"], FunctionName],
    BeforeValidator(_coerce_function_call),
]
"""``"auto"``, ``"none"``, or any other string naming a function."""


class ResponseFormatType(BaseModel):
    type: Literal["text", "json_object"] = "text"


class CreateChatCompletionRequest(RequestModel):
    """Body of ``POST /chat/completions``."""

    model: str
    messages: list[ChatCompletionRequestMessage]
    frequency_penalty: float | None = None
    logit_bias: dict[str, int] | None = None
    logprobs: bool | None = None
    top_logprobs: int | None = None
    max_tokens: int | None = None
    n: int | None = None
    presence_penalty: float | None = None
    response_format: ResponseFormatType | None = None
    seed: int | None = None
    stop: Stop | None = None
    stream: bool | None = None
    temperature: float | None = None
    top_p: float | None = None
    tools: list[ChatCompletionTool] | None = None
    tool_choice: ChatCompletionToolChoiceOption | None = None
    user: str | None = None
    functions: list[Annotated[ChatCompletionFunctions, BeforeValidator(ChatCompletionFunctions.coerce)]] | None = None
    function_call: ChatCompletionFunctionCall | None = None
