"""CLI subcommand handlers.

Handlers are coroutines taking the parsed arguments and an open
``FlexAIClient``; they write results to stdout and return an exit code.
Failures are reported by ``cli.main`` as a JSON object on stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

from ..base.errors import HTTPError, classify_exception
from ..client import FlexAIClient
from ..models import ChatCompletionChunk, ChatCompletionRequest, Message


async def run_models(args: argparse.Namespace, client: FlexAIClient) -> int:
    listing = await client.list_models()
    if args.json:
        print(listing.model_dump_json(indent=2))
    else:
        for model in listing.data:
            print(model.id)
    return 0


def _chat_request(args: argparse.Namespace) -> ChatCompletionRequest:
    messages: List[Message] = []
    if args.system:
        messages.append(Message(role="system", content=args.system))
    messages.append(Message(role="user", content=args.prompt))
    return ChatCompletionRequest(model=args.model, messages=messages, temperature=args.temperature)


async def run_chat(args: argparse.Namespace, client: FlexAIClient) -> int:
    request = _chat_request(args)
    if not args.stream:
        response = await client.create_chat_completion(request)
        print(response.text or "")
        return 0

    def _print_delta(chunk: ChatCompletionChunk) -> None:
        if chunk.text:
            sys.stdout.write(chunk.text)
            sys.stdout.flush()

    await client.create_streaming_chat_completion(request, _print_delta)
    sys.stdout.write("\n")
    return 0


def error_payload(exc: BaseException) -> str:
    """Render a failure as the JSON line printed to stderr."""
    data = {"error": classify_exception(exc).value, "type": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, HTTPError):
        data["status"] = exc.status_code
        data["body"] = exc.text
    return json.dumps(data, ensure_ascii=False)


HANDLERS = {
    "models": run_models,
    "chat": run_chat,
}

__all__ = ["run_models", "run_chat", "error_payload", "HANDLERS"]
