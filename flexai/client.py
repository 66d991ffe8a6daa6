"""High-level client: one coroutine per API operation.

Each method builds the matching endpoint variant and hands it to the
``Dispatcher`` with the right decode type. The client adds no behavior of its
own beyond forcing ``stream=True`` on streaming chat requests.

Example::

    async with FlexAIClient(api_key="sk-...", base_url="https://api.example.com/v1") as client:
        models = await client.list_models()
        reply = await client.create_chat_completion(
            ChatCompletionRequest(model="gpt-4o-mini", messages=[Message(role="user", content="Hi")])
        )
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import httpx

from .base.cancellation import CancellationToken
from .base.timeouts import TimeoutConfig
from .config.defaults import DEFAULT_BASE_URL
from .dispatch import Dispatcher, DropCallback, SessionContext, StreamSummary
from .endpoints import (
    CreateChatCompletion,
    CreateImage,
    CreateImageEdit,
    CreateImageVariation,
    CreateSpeech,
    CreateTranscription,
    CreateTranslation,
    DeleteModel,
    ListModels,
    RetrieveModel,
)
from .models import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ImageGenerationRequest,
    ImageResponse,
    ListResponse,
    Model,
    SpeechRequest,
    TranscriptionRequest,
    TranslationRequest,
)


class FlexAIClient:
    """Async client for an OpenAI-compatible API.

    Parameters:
        api_key: Bearer credential sent with every request.
        base_url: API root, e.g. ``https://api.openai.com/v1``.
        transport: Optional ``httpx`` transport (tests, proxies).
        timeouts: Optional transport deadlines.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeouts: Optional[TimeoutConfig] = None,
    ) -> None:
        self._dispatcher = Dispatcher(
            SessionContext(api_key=api_key, base_url=base_url),
            transport=transport,
            timeouts=timeouts,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "FlexAIClient":
        """Build a client from ``FLEXAI_API_KEY`` and ``FLEXAI_BASE_URL``.

        Raises:
            ValueError: No API key is configured.
        """
        session = SessionContext.from_env()
        return cls(session.api_key, session.base_url, **kwargs)

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def aclose(self) -> None:
        await self._dispatcher.aclose()

    async def __aenter__(self) -> "FlexAIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ---- Models ----
    async def list_models(self) -> ListResponse[Model]:
        return await self._dispatcher.send(ListModels(), ListResponse[Model])

    async def retrieve_model(self, id: str) -> Model:
        return await self._dispatcher.send(RetrieveModel(id=id), Model)

    async def delete_model(self, id: str) -> Model:
        return await self._dispatcher.send(DeleteModel(id=id), Model)

    # ---- Chat ----
    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        return await self._dispatcher.send(CreateChatCompletion(request=request), ChatCompletionResponse)

    async def create_streaming_chat_completion(
        self,
        request: ChatCompletionRequest,
        on_receive: Callable[[ChatCompletionChunk], Any],
        *,
        cancel_token: Optional[CancellationToken] = None,
        on_drop: Optional[DropCallback] = None,
    ) -> StreamSummary:
        """Stream a chat completion, calling ``on_receive`` once per chunk.

        The request is copied with ``stream=True``; the caller's object is not
        modified. Frames that do not decode as ``ChatCompletionChunk`` (for
        instance the ``[DONE]`` sentinel) are skipped.
        """
        streaming_request = request.model_copy(update={"stream": True})
        return await self._dispatcher.stream(
            CreateChatCompletion(request=streaming_request),
            ChatCompletionChunk,
            on_receive,
            cancel_token=cancel_token,
            on_drop=on_drop,
        )

    # ---- Audio ----
    async def create_speech(self, request: SpeechRequest) -> bytes:
        return await self._dispatcher.send(CreateSpeech(request=request), bytes)

    async def create_transcription(self, request: TranscriptionRequest) -> str:
        return await self._dispatcher.send(CreateTranscription(request=request), str)

    async def create_translation(self, request: TranslationRequest) -> str:
        return await self._dispatcher.send(CreateTranslation(request=request), str)

    # ---- Images ----
    async def create_image(self, request: ImageGenerationRequest) -> ImageResponse:
        return await self._dispatcher.send(CreateImage(request=request), ImageResponse)

    async def create_image_edit(self, request: ImageGenerationRequest) -> ImageResponse:
        return await self._dispatcher.send(CreateImageEdit(request=request), ImageResponse)

    async def create_image_variation(self, request: ImageGenerationRequest) -> ImageResponse:
        return await self._dispatcher.send(CreateImageVariation(request=request), ImageResponse)


__all__ = ["FlexAIClient"]
