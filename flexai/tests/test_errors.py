"""Unit tests for the error taxonomy and exception classification."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from flexai.base.errors import (
    APIError,
    DecodingError,
    EncodingError,
    ErrorCode,
    HTTPError,
    InvalidResponse,
    InvalidURL,
    classify_exception,
    code_for_status,
)


@pytest.mark.parametrize(
    "status,code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (408, ErrorCode.TIMEOUT),
        (409, ErrorCode.CONFLICT),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (502, ErrorCode.TRANSIENT),
        (503, ErrorCode.UNAVAILABLE),
        (507, ErrorCode.SERVER_ERROR),
        (302, ErrorCode.HTTP),
        (418, ErrorCode.HTTP),
    ],
)
def test_code_for_status(status, code):
    assert code_for_status(status) is code


def test_http_error_keeps_body_verbatim():
    err = HTTPError(429, b'{"error":"slow down"}')
    assert err.status_code == 429
    assert err.body == b'{"error":"slow down"}'
    assert err.text == '{"error":"slow down"}'
    assert err.code is ErrorCode.RATE_LIMIT
    assert err.retryable is True
    assert isinstance(err, APIError)


def test_http_error_text_replaces_invalid_utf8():
    err = HTTPError(400, b"bad \xff byte")
    assert err.text == "bad � byte"
    assert err.retryable is False


@pytest.mark.parametrize(
    "exc,code",
    [
        (InvalidURL("x"), ErrorCode.INVALID_URL),
        (EncodingError("x"), ErrorCode.ENCODING),
        (DecodingError("x"), ErrorCode.DECODING),
        (InvalidResponse("x"), ErrorCode.INVALID_RESPONSE),
        (HTTPError(401), ErrorCode.AUTH),
        (asyncio.CancelledError(), ErrorCode.CANCELLED),
        (TimeoutError(), ErrorCode.TIMEOUT),
        (httpx.ReadTimeout("slow"), ErrorCode.TIMEOUT),
        (httpx.ConnectError("refused"), ErrorCode.TRANSIENT),
        (RuntimeError("boom"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc, code):
    assert classify_exception(exc) is code


def test_classify_uses_response_status_attribute():
    class _Resp:
        status_code = 404

    class _Foreign(Exception):
        response = _Resp()

    assert classify_exception(_Foreign()) is ErrorCode.NOT_FOUND


def test_api_error_keeps_cause():
    root = ValueError("root")
    err = DecodingError("bad body", cause=root)
    assert err.cause is root
    assert err.message == "bad body"
    assert err.retryable is False
