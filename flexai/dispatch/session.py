"""Immutable session context shared by every call of one client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..base.logging import get_logger, log_event
from ..config.defaults import DEFAULT_BASE_URL, MISSING_API_KEY_ERROR
from ..config.env import is_placeholder, resolve_api_key, resolve_base_url


@dataclass(frozen=True)
class SessionContext:
    """Base URL and bearer credential.

    Frozen after construction, so it can be shared by concurrent calls
    without locking. The API key is excluded from ``repr``.
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    def headers(self) -> Dict[str, str]:
        """Headers attached to every request."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    @classmethod
    def from_env(cls, *, base_url: Optional[str] = None) -> "SessionContext":
        """Build a context from ``FLEXAI_API_KEY`` / ``FLEXAI_BASE_URL``.

        Raises:
            ValueError: No API key is configured.
        """
        api_key, env_name = resolve_api_key()
        if not api_key:
            raise ValueError(MISSING_API_KEY_ERROR)
        if is_placeholder(api_key):
            log_event(get_logger("flexai.config"), "config.placeholder_key", level=logging.WARNING, env_var=env_name)
        return cls(api_key=api_key, base_url=base_url or resolve_base_url())


__all__ = ["SessionContext"]
