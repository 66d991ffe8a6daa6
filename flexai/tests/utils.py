"""Shared helpers for tests: fake response bodies and constants."""

from __future__ import annotations

import asyncio
from typing import List

import httpx

BASE_URL = "https://api.test.com/v1"
API_KEY = "test-key"


class RecordingStream(httpx.AsyncByteStream):
    """Response body yielding ``chunks`` and remembering whether it was closed.

    When ``hang`` is set, iteration blocks forever after the last chunk, like a
    server that keeps the connection open without sending anything.
    """

    def __init__(self, chunks: List[bytes], *, hang: bool = False) -> None:
        self._chunks = chunks
        self._hang = hang
        self.closed = False
        self.yielded = 0

    async def __aiter__(self):
        for chunk in self._chunks:
            self.yielded += 1
            yield chunk
        if self._hang:
            await asyncio.Event().wait()

    async def aclose(self) -> None:
        self.closed = True


def sse_body(*lines: str) -> List[bytes]:
    """Encode ``lines`` as newline-terminated chunks, one chunk per line."""
    return [f"{line}\n".encode("utf-8") for line in lines]
