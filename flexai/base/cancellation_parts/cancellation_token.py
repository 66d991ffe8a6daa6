"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used to stop a streaming call early.
The token may be cancelled from a frame callback, from another task, or from
another thread; the dispatcher registers a callback on it so a read that is
blocked waiting for the server is interrupted as well.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List

from .state import State


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Thread-safe. Child tokens inherit cancellation when the parent is
    cancelled. Callbacks registered with :meth:`add_callback` run exactly once,
    on the thread that calls :meth:`cancel`.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation; idempotent, cascades to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            callbacks = list(self._state.callbacks)
            self._state.callbacks.clear()
            children = list(self._children)
        for cb in callbacks:
            cb()
        for child in children:
            child.cancel(reason)

    def add_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Run ``callback`` on cancellation and return a function removing it.

        If the token is already cancelled the callback runs immediately.
        """
        with self._lock:
            run_now = self._state.cancelled
            if not run_now:
                self._state.callbacks.append(callback)
        if run_now:
            callback()

        def _remove() -> None:
            with self._lock:
                if callback in self._state.callbacks:
                    self._state.callbacks.remove(callback)

        return _remove

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
