"""Wire-shape tests for the pydantic payload models."""

from __future__ import annotations

import json

from pydantic import TypeAdapter

from flexai.models import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ImageGenerationRequest,
    ListResponse,
    Message,
    Model,
    TranscriptionRequest,
)


def test_chat_request_omits_unset_fields_and_message_id():
    request = ChatCompletionRequest(
        model="gpt-4",
        messages=[Message(role="user", content="Hello")],
        max_tokens=100,
        top_p=0.5,
    )
    body = json.loads(request.to_wire())
    assert body == {
        "model": "gpt-4",
        "messages": [{"role": "user", "content": "Hello"}],
        "top_p": 0.5,
        "max_tokens": 100,
    }


def test_message_ids_are_local_and_unique():
    a = Message(role="user", content="x")
    b = Message(role="user", content="x")
    assert a.id != b.id
    decoded = Message.model_validate_json('{"role": "assistant", "content": "hi"}')
    assert decoded.id is not None


def test_list_response_defaults():
    payload = '{"object": "list", "data": [{"id": "m", "object": "model", "owned_by": "me", "created": null}], "has_more": null}'
    listing = TypeAdapter(ListResponse[Model]).validate_json(payload)
    assert listing.has_more is False
    assert listing.first_id is None
    assert listing.data[0].created == 0
    assert listing.data[0].permission == []


def test_model_ignores_unknown_fields():
    model = Model.model_validate_json('{"id": "m", "object": "model", "owned_by": "me", "new_field": 1}')
    assert model.id == "m"
    assert not hasattr(model, "new_field")


def test_chunk_text_reads_first_delta():
    chunk = ChatCompletionChunk.model_validate_json(
        '{"id": "c", "object": "chat.completion.chunk", "model": "gpt-4",'
        ' "choices": [{"index": 0, "delta": {"role": "assistant", "content": "Hi"}}]}'
    )
    assert chunk.text == "Hi"
    empty = ChatCompletionChunk.model_validate_json('{"id": "c", "object": "x", "model": "m", "choices": []}')
    assert empty.text is None


def test_transcription_file_travels_as_base64():
    request = TranscriptionRequest(file=b"\x00\x01\x02", model="whisper-1", language="fr")
    body = json.loads(request.to_wire())
    assert body == {"file": "AAEC", "model": "whisper-1", "language": "fr"}


def test_image_request_snake_case_keys():
    request = ImageGenerationRequest(prompt="A sunset", n=2, size="512x512", response_format="b64_json")
    body = json.loads(request.to_wire())
    assert body == {"prompt": "A sunset", "n": 2, "size": "512x512", "response_format": "b64_json"}
