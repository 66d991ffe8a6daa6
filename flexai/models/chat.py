"""Chat completion payloads.

Requests are built by callers; responses and streamed chunks are decoded by
the dispatcher. ``Message.id`` is a local identity for UI bookkeeping and is
never sent to or expected from the server.
"""

from __future__ import annotations

from typing import Dict, List, Optional
from uuid import UUID, uuid4

from pydantic import Field

from .base import WireModel


class Usage(WireModel):
    """Token accounting returned with completions."""

    prompt_tokens: int
    completion_tokens: Optional[int] = None
    total_tokens: int


class Message(WireModel):
    id: UUID = Field(default_factory=uuid4, exclude=True)
    role: str
    content: Optional[str] = None
    name: Optional[str] = None


class ChatCompletionRequest(WireModel):
    """Body of ``POST chat/completions``.

    Unset optional parameters are left out of the JSON body so that server
    defaults apply.
    """

    model: str
    messages: List[Message]
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop: Optional[List[str]] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None


class Choice(WireModel):
    index: int
    message: Message
    finish_reason: Optional[str] = None


class ChatCompletionResponse(WireModel):
    id: str
    object: str
    created: int
    model: str
    choices: List[Choice]
    usage: Optional[Usage] = None

    @property
    def text(self) -> Optional[str]:
        """Content of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content


class ChoiceDelta(WireModel):
    role: Optional[str] = None
    content: Optional[str] = None


class ChunkChoice(WireModel):
    index: int
    delta: ChoiceDelta = Field(default_factory=ChoiceDelta)
    finish_reason: Optional[str] = None


class ChatCompletionChunk(WireModel):
    """One streamed ``chat.completion.chunk`` event."""

    id: str
    object: str
    created: int = 0
    model: str
    choices: List[ChunkChoice]
    usage: Optional[Usage] = None

    @property
    def text(self) -> Optional[str]:
        """Delta content of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].delta.content


__all__ = [
    "Usage",
    "Message",
    "ChatCompletionRequest",
    "Choice",
    "ChatCompletionResponse",
    "ChoiceDelta",
    "ChunkChoice",
    "ChatCompletionChunk",
]
