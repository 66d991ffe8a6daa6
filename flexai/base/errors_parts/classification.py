"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction and status-to-code mapping so that both
`HTTPError` instances and foreign exceptions (``httpx`` transport errors,
timeouts) can be reported under one taxonomy in logs.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from .api_error import APIError
from .error_code import ErrorCode


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

_RETRYABLE_CODES = frozenset(
    {
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.TRANSIENT,
        ErrorCode.UNAVAILABLE,
        ErrorCode.SERVER_ERROR,
    }
)


def code_for_status(status_code: int) -> ErrorCode:
    """Return the normalized code for an HTTP status.

    Statuses without an explicit mapping fall back to ``SERVER_ERROR`` for the
    5xx range and to the generic ``HTTP`` code otherwise.
    """
    if status_code in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status_code]
    if 500 <= status_code < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.HTTP


def is_retryable(code: ErrorCode) -> bool:
    return code in _RETRYABLE_CODES


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. APIError passthrough.
        2. Cancellation and timeout exceptions.
        3. HTTP status mapping.
        4. ``httpx`` transport failures as ``TRANSIENT``.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, APIError):
        return exc.code
    if isinstance(exc, asyncio.CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "code_for_status",
    "is_retryable",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
