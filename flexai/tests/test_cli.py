"""CLI tests driving ``flexai.cli.main`` against a mocked transport."""

from __future__ import annotations

import json

import httpx
import pytest

from flexai.cli import main
from flexai.cli.cli_parser import build_parser

MODELS = {
    "object": "list",
    "data": [
        {"id": "gpt-4", "object": "model", "owned_by": "openai"},
        {"id": "whisper-1", "object": "model", "owned_by": "openai"},
    ],
}


@pytest.fixture()
def api_key(monkeypatch):
    monkeypatch.setenv("FLEXAI_API_KEY", "sk-cli")
    monkeypatch.setenv("FLEXAI_BASE_URL", "https://cli.test/v1")


def _chunk(content: str) -> str:
    payload = {"id": "c", "object": "chat.completion.chunk", "model": "m", "choices": [{"index": 0, "delta": {"content": content}}]}
    return "data: " + json.dumps(payload) + "\n"


def test_parser_stream_flags():
    parser = build_parser()
    assert parser.parse_args(["chat", "--prompt", "hi"]).stream is False
    assert parser.parse_args(["chat", "--prompt", "hi", "--stream"]).stream is True
    assert parser.parse_args(["chat", "--prompt", "hi", "--stream", "no"]).stream is False
    assert parser.parse_args(["chat", "--prompt", "hi", "--no-stream"]).stream is False


def test_models_lists_ids(api_key, capsys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=MODELS)

    assert main(["models"], transport=httpx.MockTransport(handler)) == 0
    assert capsys.readouterr().out.splitlines() == ["gpt-4", "whisper-1"]
    assert str(seen[0].url) == "https://cli.test/v1/models"
    assert seen[0].headers["Authorization"] == "Bearer sk-cli"


def test_base_url_flag_overrides_env(api_key, capsys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=MODELS)

    assert main(["--base-url", "https://flag.test/v9", "models", "--json"], transport=httpx.MockTransport(handler)) == 0
    assert json.loads(capsys.readouterr().out)["data"][0]["id"] == "gpt-4"
    assert seen[0].url.host == "flag.test"


def test_chat_non_streaming(api_key, capsys):
    reply = {
        "id": "r",
        "object": "chat.completion",
        "created": 1,
        "model": "m",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": "Hi back"}}],
    }
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=reply)

    code = main(["chat", "--prompt", "Hi", "--system", "Be brief", "--model", "m"], transport=httpx.MockTransport(handler))
    assert code == 0
    assert capsys.readouterr().out == "Hi back\n"
    body = json.loads(seen[0].content)
    assert [m["role"] for m in body["messages"]] == ["system", "user"]
    assert "stream" not in body


def test_chat_streaming_writes_deltas(api_key, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        text = _chunk("Hel") + _chunk("lo") + "data: [DONE]\n"
        return httpx.Response(200, content=text.encode("utf-8"))

    assert main(["chat", "--prompt", "Hi", "--stream"], transport=httpx.MockTransport(handler)) == 0
    assert capsys.readouterr().out == "Hello\n"


def test_http_error_is_reported_as_json(api_key, capsys):
    transport = httpx.MockTransport(lambda r: httpx.Response(401, text='{"error": "bad key"}'))
    assert main(["models"], transport=transport) == 1
    err = capsys.readouterr().err.strip().splitlines()[-1]
    data = json.loads(err)
    assert data["error"] == "auth"
    assert data["type"] == "HTTPError"
    assert data["status"] == 401
    assert data["body"] == '{"error": "bad key"}'


def test_missing_key_fails_cleanly(capsys):
    assert main(["models"], transport=httpx.MockTransport(lambda r: httpx.Response(200))) == 1
    data = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert data["type"] == "ValueError"


def test_chat_model_defaults_to_configured_value():
    from flexai.config import defaults

    args = build_parser().parse_args(["chat", "--prompt", "hi"])
    assert args.model == defaults.DEFAULT_CHAT_MODEL
    assert not hasattr(defaults, "DEFAULT_SPEECH_MODEL")
