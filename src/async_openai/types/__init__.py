"""
Request and response types.

Request types are pydantic models; responses are returned as
:class:`ApiObject` views over the JSON the API sent back.
"""

from async_openai.types.base import ApiObject, RequestModel
from async_openai.types.chat import (
    AssistantMessage,
    ChatCompletionFunctionCall,
    ChatCompletionFunctions,
    ChatCompletionNamedToolChoice,
    ChatCompletionRequestMessage,
    ChatCompletionTool,
    ChatCompletionToolChoiceOption,
    ContentPart,
    ContentPartImage,
    ContentPartText,
    CreateChatCompletionRequest,
    FunctionCall,
    FunctionMessage,
    FunctionName,
    FunctionObject,
    ImageUrl,
    MessageToolCall,
    ResponseFormatType,
    SystemMessage,
    ToolMessage,
    UserMessage,
    message,
)
from async_openai.types.enums import (
    AudioResponseFormat,
    ChatCompletionToolType,
    DallE2ImageSize,
    ImageModel,
    ImageSize,
    ResponseFormat,
    Role,
    SpeechResponseFormat,
    TimestampGranularity,
)
from async_openai.types.inputs import (
    AudioInput,
    EmbeddingInput,
    FileInput,
    ImageInput,
    InputSource,
    ModerationInput,
    Prompt,
    Stop,
)
from async_openai.types.multipart import (
    CreateFileRequest,
    CreateImageEditRequest,
    CreateImageVariationRequest,
    CreateTranscriptionRequest,
    CreateTranslationRequest,
    MultipartRequest,
)
from async_openai.types.requests import (
    CreateAssistantFileRequest,
    CreateAssistantRequest,
    CreateCompletionRequest,
    CreateEmbeddingRequest,
    CreateFineTuningJobRequest,
    CreateImageRequest,
    CreateMessageRequest,
    CreateModerationRequest,
    CreateRunRequest,
    CreateSpeechRequest,
    CreateThreadAndRunRequest,
    CreateThreadRequest,
    ModifyRequest,
    SubmitToolOutputsRequest,
    ToolOutput,
)

__all__ = [
    "ApiObject",
    "AssistantMessage",
    "AudioInput",
    "AudioResponseFormat",
    "ChatCompletionFunctionCall",
    "ChatCompletionFunctions",
    "ChatCompletionNamedToolChoice",
    "ChatCompletionRequestMessage",
    "ChatCompletionTool",
    "ChatCompletionToolChoiceOption",
    "ChatCompletionToolType",
    "ContentPart",
    "ContentPartImage",
    "ContentPartText",
    "CreateAssistantFileRequest",
    "CreateAssistantRequest",
    "CreateChatCompletionRequest",
    "CreateCompletionRequest",
    "CreateEmbeddingRequest",
    "CreateFileRequest",
    "CreateFineTuningJobRequest",
    "CreateImageEditRequest",
    "CreateImageRequest",
    "CreateImageVariationRequest",
    "CreateMessageRequest",
    "CreateModerationRequest",
    "CreateRunRequest",
    "CreateSpeechRequest",
    "CreateThreadAndRunRequest",
    "CreateThreadRequest",
    "CreateTranscriptionRequest",
    "CreateTranslationRequest",
    "DallE2ImageSize",
    "EmbeddingInput",
    "FileInput",
    "FunctionCall",
    "FunctionMessage",
    "FunctionName",
    "FunctionObject",
    "ImageInput",
    "ImageModel",
    "ImageSize",
    "ImageUrl",
    "InputSource",
    "MessageToolCall",
    "ModerationInput",
    "ModifyRequest",
    "MultipartRequest",
    "Prompt",
    "RequestModel",
    "ResponseFormat",
    "ResponseFormatType",
    "Role",
    "SpeechResponseFormat",
    "Stop",
    "SubmitToolOutputsRequest",
    "SystemMessage",
    "TimestampGranularity",
    "ToolMessage",
    "ToolOutput",
    "UserMessage",
    "message",
]
