"""CLI parser construction for flexai.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..config.defaults import DEFAULT_CHAT_MODEL


def _str2bool(v: str | None) -> bool:
    """Best-effort conversion of common truthy/falsey strings to bool.

    ``None`` (flag given without a value) maps to ``True``.
    """
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream``/``--no-stream`` flags to a parser.

    ``--stream`` accepts an optional boolean (``--stream``, ``--stream false``);
    ``--no-stream`` is an explicit negation alias.
    """
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=False)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``models`` and ``chat`` subcommands."""
    p = argparse.ArgumentParser(prog="flexai", description="Command-line access to an OpenAI-compatible API")
    p.add_argument("--base-url", default=None, help="API root (defaults to FLEXAI_BASE_URL)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_models = sub.add_parser("models", help="List available models")
    p_models.add_argument("--json", action="store_true", help="Print the raw listing as JSON")

    p_chat = sub.add_parser("chat", help="Send a single-turn chat completion")
    p_chat.add_argument("--model", default=DEFAULT_CHAT_MODEL)
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", default=None, help="Optional system message")
    p_chat.add_argument("--temperature", type=float, default=None)
    add_stream_flags(p_chat)

    return p


__all__ = ["build_parser", "add_stream_flags"]
