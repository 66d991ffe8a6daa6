"""
Base exception type for every failure raised by the dispatch layer.

Concrete failures (`InvalidURL`, `HTTPError`, ...) subclass `APIError` so
callers can catch the whole family with one clause while still branching on
the precise type or on the normalized `code`.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode


class APIError(Exception):
    """Root of the client error taxonomy.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        cause: Optional original exception for diagnostics.
    """

    default_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str = "", *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def code(self) -> ErrorCode:
        return self.default_code

    @property
    def retryable(self) -> bool:
        """Hint for caller-side retry logic; this package never retries."""
        return False

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code.value}: {self.message}" if self.message else self.code.value


__all__ = ["APIError"]
