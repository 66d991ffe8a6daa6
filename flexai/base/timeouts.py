"""Transport timeout configuration.

The dispatch layer never enforces its own deadline: a call suspends until the
transport returns a response or fails. The deadlines that do exist belong to
the ``httpx`` client, and this module is the single place they come from.

Key Components
--------------
TimeoutConfig
    Frozen dataclass capturing the four ``httpx`` timeout phases in seconds.
    ``None`` disables a phase.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and whenever the relevant variables change. Supported
    environment variables (all optional):
        FLEXAI_TIMEOUT_CONNECT_SECONDS
        FLEXAI_TIMEOUT_READ_SECONDS
        FLEXAI_TIMEOUT_WRITE_SECONDS
        FLEXAI_TIMEOUT_POOL_SECONDS

Values that are missing, unparsable, or not positive fall back to defaults.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

_ENV_VARS = (
    "FLEXAI_TIMEOUT_CONNECT_SECONDS",
    "FLEXAI_TIMEOUT_READ_SECONDS",
    "FLEXAI_TIMEOUT_WRITE_SECONDS",
    "FLEXAI_TIMEOUT_POOL_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized transport timeout values (seconds).

    Attributes:
        connect_seconds: Establishing the TCP/TLS connection.
        read_seconds: Waiting for the next chunk of the response body. For
            streams this bounds the gap between frames, not the whole stream.
        write_seconds: Sending the request body.
        pool_seconds: Waiting for a free connection from the pool.
    """

    connect_seconds: Optional[float] = 10.0
    read_seconds: Optional[float] = 120.0
    write_seconds: Optional[float] = 60.0
    pool_seconds: Optional[float] = 10.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_seconds,
            read=self.read_seconds,
            write=self.write_seconds,
            pool=self.pool_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float | None) -> float | None:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_VARS)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_seconds=_parse_env_float("FLEXAI_TIMEOUT_CONNECT_SECONDS", defaults.connect_seconds),
        read_seconds=_parse_env_float("FLEXAI_TIMEOUT_READ_SECONDS", defaults.read_seconds),
        write_seconds=_parse_env_float("FLEXAI_TIMEOUT_WRITE_SECONDS", defaults.write_seconds),
        pool_seconds=_parse_env_float("FLEXAI_TIMEOUT_POOL_SECONDS", defaults.pool_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
