"""Construction of the ``httpx.AsyncClient`` owned by a dispatcher.

Purpose:
    Keep transport setup in one place: default headers from the session,
    timeouts from :func:`get_timeout_config`, and an optional injected
    transport (``httpx.MockTransport`` in tests, a custom
    ``httpx.AsyncHTTPTransport`` for proxies or retries at the socket level).

Lifecycle:
    The returned client holds the connection pool reused by every call of the
    dispatcher that created it. Whoever creates it closes it with
    ``await client.aclose()``; ``Dispatcher`` does this in ``aclose``.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config


def build_async_client(
    headers: Mapping[str, str],
    *,
    timeouts: Optional[TimeoutConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` carrying ``headers`` on every request.

    Parameters:
        headers: Default headers (authorization, content type).
        timeouts: Transport deadlines; defaults to ``get_timeout_config()``.
        transport: Optional transport override.

    Returns:
        A client that must be closed by the caller.
    """
    cfg = timeouts or get_timeout_config()
    return httpx.AsyncClient(
        headers=dict(headers),
        timeout=cfg.to_httpx(),
        transport=transport,
        follow_redirects=False,
    )


__all__ = ["build_async_client"]
