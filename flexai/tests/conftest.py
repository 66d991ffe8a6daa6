"""Pytest fixtures for the flexai test suite.

Transports are faked with ``httpx.MockTransport`` so no test touches the
network. ``make_dispatcher`` returns a dispatcher whose requests are answered
by a handler and recorded in ``requests_seen``.
"""

from __future__ import annotations

from typing import Callable, Iterator, List

import httpx
import pytest

from flexai.base import timeouts as timeouts_mod
from flexai.dispatch import Dispatcher, SessionContext

from .utils import API_KEY, BASE_URL


@pytest.fixture()
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture()
def make_dispatcher(requests_seen) -> Iterator[Callable[..., Dispatcher]]:
    """Factory building a dispatcher answered by ``handler``."""

    def _factory(handler: Callable[[httpx.Request], httpx.Response], *, base_url: str = BASE_URL) -> Dispatcher:
        def _recording(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return Dispatcher(
            SessionContext(api_key=API_KEY, base_url=base_url),
            transport=httpx.MockTransport(_recording),
        )

    yield _factory


@pytest.fixture(autouse=True)
def reset_timeout_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop the cached timeout config so env overrides never leak between tests."""
    monkeypatch.setattr(timeouts_mod, "_CACHED", None)
    monkeypatch.setattr(timeouts_mod, "_ENV_GUARD", None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FLEXAI_API_KEY", "OPENAI_API_KEY", "FLEXAI_BASE_URL", "OPENAI_BASE_URL", "FLEXAI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
