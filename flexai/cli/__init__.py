"""flexai command-line interface.

Usage::

    flexai models
    flexai chat --prompt "Hello" --stream

Credentials come from ``FLEXAI_API_KEY`` (or ``OPENAI_API_KEY``).
"""

from __future__ import annotations

import asyncio
import sys
from typing import Optional, Sequence

import httpx

from ..base.errors import APIError
from ..client import FlexAIClient
from ..dispatch import SessionContext
from .cli_actions import HANDLERS, error_payload
from .cli_parser import build_parser


async def _run(args, transport: Optional[httpx.AsyncBaseTransport]) -> int:
    session = SessionContext.from_env(base_url=args.base_url)
    async with FlexAIClient(session.api_key, session.base_url, transport=transport) as client:
        return await HANDLERS[args.cmd](args, client)


def main(argv: Optional[Sequence[str]] = None, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    """Parse ``argv`` and run the selected subcommand; returns the exit code."""
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(_run(args, transport))
    except (APIError, httpx.HTTPError, ValueError) as e:
        print(error_payload(e), file=sys.stderr)
        return 1


__all__ = ["main"]
