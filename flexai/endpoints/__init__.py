"""Endpoint descriptors: the closed set of API operations and their wire shape."""

from .descriptor import (
    Endpoint,
    HTTPMethod,
    QueryItems,
    RequestDescriptor,
    describe,
    normalize_query,
)
from .variants import (
    CreateChatCompletion,
    CreateImage,
    CreateImageEdit,
    CreateImageVariation,
    CreateSpeech,
    CreateTranscription,
    CreateTranslation,
    DeleteModel,
    FlexAIEndpoint,
    ListModels,
    RetrieveModel,
)

__all__ = [
    "Endpoint",
    "HTTPMethod",
    "QueryItems",
    "RequestDescriptor",
    "describe",
    "normalize_query",
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
