"""The closed set of API operations.

Each operation is its own frozen dataclass carrying only the data it needs;
``FlexAIEndpoint`` is their union. Path, verb and body are derived from the
fields with no I/O and no failure modes. Query items are always empty for
this API family.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote

from ..models import (
    ChatCompletionRequest,
    ImageGenerationRequest,
    SpeechRequest,
    TranscriptionRequest,
    TranslationRequest,
)
from .descriptor import HTTPMethod, QueryItems


def _model_path(model_id: str) -> str:
    # keep the id inside a single path segment
    return f"models/{quote(model_id, safe=':')}"


@dataclass(frozen=True)
class ListModels:
    @property
    def path(self) -> str:
        return "models"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.GET

    @property
    def body(self) -> None:
        return None

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class RetrieveModel:
    id: str

    @property
    def path(self) -> str:
        return _model_path(self.id)

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.GET

    @property
    def body(self) -> None:
        return None

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class DeleteModel:
    id: str

    @property
    def path(self) -> str:
        return _model_path(self.id)

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.DELETE

    @property
    def body(self) -> None:
        return None

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class CreateChatCompletion:
    request: ChatCompletionRequest

    @property
    def path(self) -> str:
        return "chat/completions"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def body(self) -> ChatCompletionRequest:
        return self.request

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class CreateSpeech:
    request: SpeechRequest

    @property
    def path(self) -> str:
        return "audio/speech"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def body(self) -> SpeechRequest:
        return self.request

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class CreateTranscription:
    request: TranscriptionRequest

    @property
    def path(self) -> str:
        return "audio/transcriptions"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def body(self) -> TranscriptionRequest:
        return self.request

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class CreateTranslation:
    request: TranslationRequest

    @property
    def path(self) -> str:
        return "audio/translations"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def body(self) -> TranslationRequest:
        return self.request

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class CreateImage:
    request: ImageGenerationRequest

    @property
    def path(self) -> str:
        return "images/generations"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def body(self) -> ImageGenerationRequest:
        return self.request

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class CreateImageEdit:
    request: ImageGenerationRequest

    @property
    def path(self) -> str:
        return "images/edits"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def body(self) -> ImageGenerationRequest:
        return self.request

    @property
    def query_items(self) -> QueryItems:
        return ()


@dataclass(frozen=True)
class CreateImageVariation:
    request: ImageGenerationRequest

    @property
    def path(self) -> str:
        return "images/variations"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def body(self) -> ImageGenerationRequest:
        return self.request

    @property
    def query_items(self) -> QueryItems:
        return ()


FlexAIEndpoint = Union[
    ListModels,
    RetrieveModel,
    DeleteModel,
    CreateChatCompletion,
    CreateSpeech,
    CreateTranscription,
    CreateTranslation,
    CreateImage,
    CreateImageEdit,
    CreateImageVariation,
]


__all__ = [
    "FlexAIEndpoint",
    "ListModels",
    "RetrieveModel",
    "DeleteModel",
    "CreateChatCompletion",
    "CreateSpeech",
    "CreateTranscription",
    "CreateTranslation",
    "CreateImage",
    "CreateImageEdit",
    "CreateImageVariation",
]
