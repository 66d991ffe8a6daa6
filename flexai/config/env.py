"""flexai.config.env
=================

Environment variable mapping and helpers for client credentials.

Purpose
-------
- Single source of truth for the environment variable names the client reads
  (canonical name first, aliases after it).
- Small lookup helpers that never raise; callers decide what a missing value
  means.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Tuple

from .defaults import DEFAULT_BASE_URL

# Ordered candidates, canonical first.
API_KEY_ENV_VARS: Tuple[str, ...] = ("FLEXAI_API_KEY", "OPENAI_API_KEY")
BASE_URL_ENV_VARS: Tuple[str, ...] = ("FLEXAI_BASE_URL", "OPENAI_BASE_URL")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def _first_set(names: Iterable[str]) -> Tuple[Optional[str], Optional[str]]:
    for name in names:
        val = os.getenv(name)
        if val and val.strip():
            return val.strip(), name
    return None, None


def resolve_api_key() -> Tuple[Optional[str], Optional[str]]:
    """Return ``(api_key, env_var_name)`` from the first non-empty candidate.

    Returns ``(None, None)`` when no candidate is set.
    """
    return _first_set(API_KEY_ENV_VARS)


def resolve_base_url(default: str = DEFAULT_BASE_URL) -> str:
    """Return the configured base URL, or ``default`` when none is set."""
    val, _ = _first_set(BASE_URL_ENV_VARS)
    return val or default


__all__ = [
    "API_KEY_ENV_VARS",
    "BASE_URL_ENV_VARS",
    "is_placeholder",
    "resolve_api_key",
    "resolve_base_url",
]
