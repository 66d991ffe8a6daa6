"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `APIError`. Values are
lowercase snake_case and are considered a stable public contract for logging
and for callers that branch on failure categories.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    INVALID_URL = "invalid_url"
    INVALID_RESPONSE = "invalid_response"
    ENCODING = "encoding"
    DECODING = "decoding"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    HTTP = "http"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
