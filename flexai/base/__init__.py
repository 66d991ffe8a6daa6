"""
Base Package

Cross-cutting building blocks shared by the endpoint and dispatch layers:
error taxonomy, structured logging, transport timeouts, HTTP client
construction and cooperative cancellation.
"""

from .cancellation import CancellationToken
from .errors import (
    APIError,
    DecodingError,
    EncodingError,
    ErrorCode,
    HTTPError,
    InvalidResponse,
    InvalidURL,
    classify_exception,
)
from .logging import LogContext, configure_logger, get_logger, log_event
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "CancellationToken",
    "APIError",
    "DecodingError",
    "EncodingError",
    "ErrorCode",
    "HTTPError",
    "InvalidResponse",
    "InvalidURL",
    "classify_exception",
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "TimeoutConfig",
    "get_timeout_config",
]
