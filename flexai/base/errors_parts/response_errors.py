"""
Failures raised after a request was sent: unclassifiable responses, non-2xx
statuses, and bodies that do not parse into the requested type.
"""
from __future__ import annotations

from typing import Optional

from .api_error import APIError
from .classification import code_for_status, is_retryable
from .error_code import ErrorCode


class InvalidResponse(APIError):
    """The transport produced no response carrying a usable status code."""

    default_code = ErrorCode.INVALID_RESPONSE


class HTTPError(APIError):
    """A response arrived with a status outside ``200..299``.

    The body is kept exactly as received. It is diagnostic text (often JSON)
    and is never parsed by this package.

    Attributes:
        status_code: HTTP status returned by the server.
        body: Raw response body bytes.
    """

    def __init__(self, status_code: int, body: bytes = b"", *, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"HTTP {status_code}", cause=cause)
        self.status_code = status_code
        self.body = body

    @property
    def code(self) -> ErrorCode:
        return code_for_status(self.status_code)

    @property
    def retryable(self) -> bool:
        return is_retryable(self.code)

    @property
    def text(self) -> str:
        """Body decoded for display; undecodable bytes are replaced."""
        return self.body.decode("utf-8", errors="replace")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"HTTPError(status_code={self.status_code!r}, body={self.body!r})"


class DecodingError(APIError):
    """A successful response body could not be parsed into the target type."""

    default_code = ErrorCode.DECODING


__all__ = ["InvalidResponse", "HTTPError", "DecodingError"]
