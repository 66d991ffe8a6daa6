"""Request dispatch: session context, URL/body codecs and the dispatcher."""

from .session import SessionContext
from .frames import StreamSummary, frame_payload
from .codec import decode_body, decode_frame, encode_body
from .urls import build_url
from .dispatcher import Dispatcher, DropCallback, FrameCallback

__all__ = [
    "SessionContext",
    "StreamSummary",
    "frame_payload",
    "decode_body",
    "decode_frame",
    "encode_body",
    "build_url",
    "Dispatcher",
    "DropCallback",
    "FrameCallback",
]
