"""Tests for ``Dispatcher.stream`` frame handling.

Focus on the lenient decode policy: prefixed lines that fail to decode are
skipped (and counted), non-prefixed lines are ignored, decoded frames reach
the callback once each, in order.
"""
from __future__ import annotations

import asyncio
from typing import List

import httpx
import pytest
from pydantic import BaseModel

from flexai.base.errors import HTTPError, InvalidURL
from flexai.endpoints import CreateChatCompletion, ListModels
from flexai.models import ChatCompletionRequest, Message

from .utils import RecordingStream, sse_body


class Frame(BaseModel):
    a: int


CHAT = ChatCompletionRequest(model="gpt-4", messages=[Message(role="user", content="Hi")], stream=True)


def test_mixed_lines_deliver_only_decodable_frames(make_dispatcher):
    body = RecordingStream(sse_body('data: {"a":1}', "not a frame", 'data: {"a":2}', "data: not-json"))
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))
    received: List[Frame] = []
    dropped: List[str] = []

    summary = asyncio.run(
        dispatcher.stream(
            ListModels(),
            Frame,
            received.append,
            on_drop=lambda payload, exc: dropped.append(payload),
        )
    )

    assert [f.a for f in received] == [1, 2]
    assert dropped == ["not-json"]
    assert (summary.delivered, summary.dropped, summary.ignored, summary.cancelled) == (2, 1, 1, False)
    assert body.closed


def test_frames_arrive_in_order_and_callback_runs_before_next_read(make_dispatcher):
    body = RecordingStream(sse_body(*(f'data: {{"a":{i}}}' for i in range(5))))
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))
    seen = []

    def on_frame(frame: Frame) -> None:
        # one chunk per line: the callback for frame i runs before chunk i+1 is pulled
        seen.append((frame.a, body.yielded))

    asyncio.run(dispatcher.stream(ListModels(), Frame, on_frame))

    assert [a for a, _ in seen] == [0, 1, 2, 3, 4]
    assert all(yielded <= a + 2 for a, yielded in seen)


def test_async_callback_is_awaited_sequentially(make_dispatcher):
    body = RecordingStream(sse_body('data: {"a":1}', 'data: {"a":2}', 'data: {"a":3}'))
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))
    events: List[str] = []

    async def on_frame(frame: Frame) -> None:
        events.append(f"start-{frame.a}")
        await asyncio.sleep(0)
        events.append(f"end-{frame.a}")

    asyncio.run(dispatcher.stream(ListModels(), Frame, on_frame))

    assert events == ["start-1", "end-1", "start-2", "end-2", "start-3", "end-3"]


def test_done_sentinel_and_blank_lines_are_not_errors(make_dispatcher):
    body = RecordingStream(sse_body('data: {"a":1}', "", ": keep-alive", "data: [DONE]"))
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))
    received: List[Frame] = []

    summary = asyncio.run(dispatcher.stream(ListModels(), Frame, received.append))

    assert [f.a for f in received] == [1]
    assert summary.dropped == 1
    assert summary.ignored == 2


def test_prefix_requires_the_space(make_dispatcher):
    body = RecordingStream(sse_body('data:{"a":1}', 'data: {"a":2}'))
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))
    received: List[Frame] = []

    asyncio.run(dispatcher.stream(ListModels(), Frame, received.append))

    assert [f.a for f in received] == [2]


def test_lines_split_across_chunks_are_reassembled(make_dispatcher):
    body = RecordingStream([b'data: {"a"', b':1}\r\ndata: {"a":', b"2}\n"])
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))
    received: List[Frame] = []

    asyncio.run(dispatcher.stream(ListModels(), Frame, received.append))

    assert [f.a for f in received] == [1, 2]


def test_stream_sends_body_and_accept_header(make_dispatcher, requests_seen):
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=RecordingStream([])))

    summary = asyncio.run(dispatcher.stream(CreateChatCompletion(request=CHAT), Frame, lambda f: None))

    assert summary.delivered == 0
    request = requests_seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v1/chat/completions"
    assert request.headers["accept"] == "text/event-stream"
    assert b'"stream":true' in request.content


def test_non_2xx_stream_raises_with_body(make_dispatcher):
    body = RecordingStream([b'{"error":"bad key"}'])
    dispatcher = make_dispatcher(lambda request: httpx.Response(401, stream=body))
    received: List[Frame] = []

    with pytest.raises(HTTPError) as info:
        asyncio.run(dispatcher.stream(ListModels(), Frame, received.append))

    assert info.value.status_code == 401
    assert info.value.body == b'{"error":"bad key"}'
    assert received == []
    assert body.closed


def test_stream_invalid_base_url(make_dispatcher, requests_seen):
    dispatcher = make_dispatcher(lambda request: httpx.Response(200), base_url="nope")
    with pytest.raises(InvalidURL):
        asyncio.run(dispatcher.stream(ListModels(), Frame, lambda f: None))
    assert requests_seen == []


def test_callback_errors_abort_the_stream(make_dispatcher):
    body = RecordingStream(sse_body('data: {"a":1}', 'data: {"a":2}'))
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))

    def on_frame(frame: Frame) -> None:
        raise RuntimeError("consumer failed")

    with pytest.raises(RuntimeError, match="consumer failed"):
        asyncio.run(dispatcher.stream(ListModels(), Frame, on_frame))
    assert body.closed


def test_read_failure_mid_stream_propagates(make_dispatcher):
    class BrokenStream(RecordingStream):
        async def __aiter__(self):
            yield b'data: {"a":1}\n'
            raise httpx.ReadError("connection reset")

    body = BrokenStream([])
    dispatcher = make_dispatcher(lambda request: httpx.Response(200, stream=body))
    received: List[Frame] = []

    with pytest.raises(httpx.ReadError):
        asyncio.run(dispatcher.stream(ListModels(), Frame, received.append))
    assert [f.a for f in received] == [1]
    assert body.closed
