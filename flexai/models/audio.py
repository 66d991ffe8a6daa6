"""Audio payloads: speech synthesis, transcription and translation requests.

Speech returns raw audio bytes and transcription/translation return plain
text, so there are no response models here.
"""

from __future__ import annotations

from typing import Optional

from .base import WireModel


class SpeechRequest(WireModel):
    model: str
    input: str
    voice: str
    response_format: Optional[str] = None
    speed: Optional[float] = None


class TranscriptionRequest(WireModel):
    """``file`` holds the audio bytes; it is base64-encoded in the JSON body."""

    file: bytes
    model: str
    prompt: Optional[str] = None
    response_format: Optional[str] = None
    temperature: Optional[float] = None
    language: Optional[str] = None


class TranslationRequest(WireModel):
    file: bytes
    model: str
    prompt: Optional[str] = None
    response_format: Optional[str] = None
    temperature: Optional[float] = None


__all__ = ["SpeechRequest", "TranscriptionRequest", "TranslationRequest"]
