"""Wire payload models (pydantic).

Re-exports every request/response shape so callers can import from
``flexai.models`` directly.
"""

from .base import WireModel
from .listing import ListResponse, Model, Permission
from .chat import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    Choice,
    ChoiceDelta,
    ChunkChoice,
    Message,
    Usage,
)
from .audio import SpeechRequest, TranscriptionRequest, TranslationRequest
from .image import ImageData, ImageGenerationRequest, ImageResponse

__all__ = [
    "WireModel",
    "ListResponse",
    "Model",
    "Permission",
    "Usage",
    "Message",
    "ChatCompletionRequest",
    "Choice",
    "ChatCompletionResponse",
    "ChoiceDelta",
    "ChunkChoice",
    "ChatCompletionChunk",
    "SpeechRequest",
    "TranscriptionRequest",
    "TranslationRequest",
    "ImageGenerationRequest",
    "ImageData",
    "ImageResponse",
]
