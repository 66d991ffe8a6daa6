"""Dispatcher: executes endpoint descriptors over HTTP.

Summary:
- ``send`` performs one request and decodes the whole body as the target type.
- ``stream`` performs one request and decodes each ``data: `` line of the body
  as it arrives, handing every decoded frame to a callback in arrival order.

Errors:
- ``InvalidURL`` / ``EncodingError`` before any I/O.
- ``InvalidResponse`` when the transport yields no classifiable status.
- ``HTTPError`` for statuses outside ``200..299`` (raw body preserved).
- ``DecodingError`` when a ``send`` body does not parse. In ``stream`` an
  undecodable frame is skipped, counted, and reported to ``on_drop`` only.
- Other ``httpx`` transport failures propagate unchanged. Nothing is retried.

Timeouts are the transport's (see ``flexai.base.timeouts``); this module adds
none. The dispatcher keeps no per-call state: the only long-lived objects are
the immutable ``SessionContext`` and the ``httpx.AsyncClient`` connection pool.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from typing import Any, Awaitable, Callable, Optional, Type, TypeVar, Union

import httpx

from ..base.cancellation import CancellationToken
from ..base.errors import HTTPError, InvalidResponse, classify_exception
from ..base.http import build_async_client
from ..base.logging import LogContext, get_logger, log_event
from ..base.timeouts import TimeoutConfig
from ..config.defaults import EVENT_STREAM_MEDIA_TYPE
from ..endpoints import Endpoint, RequestDescriptor, describe
from .codec import decode_body, decode_frame, encode_body
from .frames import StreamSummary, frame_payload
from .session import SessionContext
from .urls import build_url

T = TypeVar("T")

FrameCallback = Callable[[T], Union[None, Awaitable[None]]]
DropCallback = Callable[[str, Exception], None]


class Dispatcher:
    """Sends endpoint descriptors and decodes their responses.

    Parameters:
        session: Base URL and credential, shared read-only by every call.
        client: Optional pre-built ``httpx.AsyncClient``. It must already carry
            the session headers; the dispatcher will not close it.
        transport: Optional transport for the client the dispatcher builds
            itself (ignored when ``client`` is given).
        timeouts: Transport deadlines for the built client.

    The dispatcher is an async context manager; leaving the block closes the
    client it owns.
    """

    def __init__(
        self,
        session: SessionContext,
        *,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeouts: Optional[TimeoutConfig] = None,
    ) -> None:
        self._session = session
        self._owns_client = client is None
        self._client = client or build_async_client(session.headers(), timeouts=timeouts, transport=transport)
        self._logger = get_logger("flexai.dispatch")

    @property
    def session(self) -> SessionContext:
        return self._session

    async def aclose(self) -> None:
        """Close the owned HTTP client; a no-op for injected clients."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Dispatcher":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ---- request building ----
    def _build_request(self, descriptor: RequestDescriptor, *, streaming: bool = False) -> httpx.Request:
        url = build_url(self._session.base_url, descriptor.path, descriptor.query_items)
        content = encode_body(descriptor.body)
        headers = {"Accept": EVENT_STREAM_MEDIA_TYPE} if streaming else None
        return self._client.build_request(descriptor.method.value, url, content=content, headers=headers)

    @staticmethod
    def _context(descriptor: RequestDescriptor) -> LogContext:
        return LogContext(endpoint=descriptor.name, method=descriptor.method.value, path=descriptor.path)

    @staticmethod
    def _check_status(response: httpx.Response) -> None:
        status = response.status_code
        if not isinstance(status, int) or not 100 <= status < 600:
            raise InvalidResponse(f"unclassifiable status {status!r}")

    def _log_failure(self, ctx: LogContext, exc: BaseException, started: float) -> None:
        log_event(
            self._logger,
            "request.error",
            ctx,
            level=logging.WARNING,
            error_code=classify_exception(exc).value,
            error_type=type(exc).__name__,
            status=getattr(exc, "status_code", None),
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
        )

    # ---- non-streaming ----
    async def send(self, endpoint: Endpoint, target: Type[T]) -> T:
        """Execute ``endpoint`` once and decode the full body as ``target``.

        Parameters:
            endpoint: An endpoint variant or a ``RequestDescriptor``.
            target: Decode type (pydantic model, ``bytes``, ``str``, or any
                type ``pydantic.TypeAdapter`` accepts).

        Returns:
            The decoded body.

        Raises:
            InvalidURL, EncodingError, InvalidResponse, HTTPError,
            DecodingError, or the underlying ``httpx`` transport error.
        """
        descriptor = describe(endpoint)
        ctx = self._context(descriptor)
        started = time.perf_counter()
        try:
            request = self._build_request(descriptor)
            log_event(self._logger, "request.start", ctx, level=logging.DEBUG)
            try:
                response = await self._client.send(request)
            except httpx.RemoteProtocolError as e:
                raise InvalidResponse(f"no valid response: {e}", cause=e) from e
            self._check_status(response)
            if not response.is_success:
                raise HTTPError(response.status_code, response.content)
            value = decode_body(response.content, target)
        except Exception as e:
            self._log_failure(ctx, e, started)
            raise
        log_event(
            self._logger,
            "request.end",
            ctx,
            status=response.status_code,
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return value

    # ---- streaming ----
    async def stream(
        self,
        endpoint: Endpoint,
        target: Type[T],
        on_frame: FrameCallback,
        *,
        cancel_token: Optional[CancellationToken] = None,
        on_drop: Optional[DropCallback] = None,
    ) -> StreamSummary:
        """Execute ``endpoint`` and deliver each decoded frame to ``on_frame``.

        Lines are read one at a time in arrival order. A line starting with
        ``"data: "`` is decoded as ``target``; on success ``on_frame`` runs
        (and is awaited if it returns an awaitable) before the next line is
        read. Undecodable frames are skipped and reported to ``on_drop``.
        Other lines are ignored. Returns when the server closes the stream.

        Cancellation:
            - ``cancel_token``: once cancelled (from the callback, another task
              or another thread) no further frame is delivered, the response is
              closed, and the call returns normally with ``cancelled=True``. A
              read blocked on the server is interrupted; a callback already
              running is left to finish and counts as delivered.
            - Cancelling the enclosing task closes the response and raises
              ``asyncio.CancelledError`` as usual.

        Returns:
            ``StreamSummary`` with delivered/dropped/ignored counts.

        Raises:
            Same request/status errors as ``send`` (never ``DecodingError``);
            read failures mid-stream propagate as ``httpx`` errors.
        """
        descriptor = describe(endpoint)
        ctx = self._context(descriptor)
        summary = StreamSummary()
        started = time.perf_counter()

        if cancel_token is not None and cancel_token.cancelled:
            summary.cancelled = True
            return summary

        task = asyncio.current_task()
        loop = asyncio.get_running_loop()
        # True only while suspended on the next line; callbacks are never interrupted
        active = False

        def _interrupt_if_reading() -> None:
            if active and task is not None:
                task.cancel()

        def _on_cancel() -> None:
            loop.call_soon_threadsafe(_interrupt_if_reading)

        remove_callback = cancel_token.add_callback(_on_cancel) if cancel_token is not None else None
        try:
            request = self._build_request(descriptor, streaming=True)
            log_event(self._logger, "stream.start", ctx)
            try:
                response = await self._client.send(request, stream=True)
            except httpx.RemoteProtocolError as e:
                raise InvalidResponse(f"no valid response: {e}", cause=e) from e
            lines = None
            try:
                self._check_status(response)
                if not response.is_success:
                    body = await response.aread()
                    raise HTTPError(response.status_code, body)
                lines = response.aiter_lines()
                while not (cancel_token is not None and cancel_token.cancelled):
                    active = True
                    try:
                        line = await lines.__anext__()
                    except StopAsyncIteration:
                        break
                    finally:
                        active = False
                    payload = frame_payload(line)
                    if payload is None:
                        summary.ignored += 1
                        continue
                    try:
                        value = decode_frame(payload, target)
                    except Exception as e:
                        summary.dropped += 1
                        self._report_drop(ctx, payload, e, on_drop)
                        continue
                    result = on_frame(value)
                    if inspect.isawaitable(result):
                        await result
                    summary.delivered += 1
                if cancel_token is not None and cancel_token.cancelled:
                    summary.cancelled = True
            finally:
                active = False
                if lines is not None:
                    await lines.aclose()
                await response.aclose()
        except asyncio.CancelledError:
            if cancel_token is None or not cancel_token.cancelled or task is None:
                raise
            task.uncancel()
            summary.cancelled = True
        except Exception as e:
            self._log_failure(ctx, e, started)
            raise
        finally:
            active = False
            if remove_callback is not None:
                remove_callback()

        log_event(
            self._logger,
            "stream.end",
            ctx,
            delivered=summary.delivered,
            dropped=summary.dropped,
            ignored=summary.ignored,
            cancelled=summary.cancelled,
            total_duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return summary

    def _report_drop(
        self,
        ctx: LogContext,
        payload: str,
        exc: Exception,
        on_drop: Optional[DropCallback],
    ) -> None:
        log_event(
            self._logger,
            "stream.frame_dropped",
            ctx,
            level=logging.DEBUG,
            error_type=type(exc).__name__,
            payload_len=len(payload),
        )
        if on_drop is not None:
            on_drop(payload, exc)


__all__ = ["Dispatcher", "FrameCallback", "DropCallback"]
