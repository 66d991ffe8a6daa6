"""Wire-level request description shared by every endpoint variant.

``Endpoint`` is the structural contract the dispatcher consumes; every
variant in :mod:`flexai.endpoints.variants` satisfies it without inheriting
from anything. ``RequestDescriptor`` is a frozen snapshot of that contract,
handy for logging and for ad-hoc endpoints not covered by the closed set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

QueryItems = Tuple[Tuple[str, str], ...]


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
    PUT = "PUT"
    PATCH = "PATCH"


@runtime_checkable
class Endpoint(Protocol):
    """Anything that can describe one API call."""

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> HTTPMethod: ...

    @property
    def body(self) -> Optional[Any]: ...

    @property
    def query_items(self) -> QueryItems: ...


@dataclass(frozen=True)
class RequestDescriptor:
    """Resolved wire shape of one call.

    Attributes:
        path: Relative path without a leading slash.
        method: HTTP verb.
        body: Serializable payload, present only for mutating calls.
        query_items: Ordered ``(name, value)`` pairs appended to the URL.
        name: Name of the variant that produced the descriptor (for logs).
    """

    path: str
    method: HTTPMethod
    body: Optional[Any] = None
    query_items: QueryItems = ()
    name: Optional[str] = None


def describe(endpoint: Endpoint) -> RequestDescriptor:
    """Return the ``RequestDescriptor`` for ``endpoint``.

    Pure function of its input: the same variant always yields an equal
    descriptor. A ``RequestDescriptor`` is returned unchanged.
    """
    if isinstance(endpoint, RequestDescriptor):
        return endpoint
    return RequestDescriptor(
        path=endpoint.path,
        method=endpoint.method,
        body=endpoint.body,
        query_items=tuple(endpoint.query_items),
        name=type(endpoint).__name__,
    )


def normalize_query(items: Optional[Sequence[Tuple[str, Any]]]) -> QueryItems:
    """Coerce ``(name, value)`` pairs to strings, preserving order."""
    if not items:
        return ()
    return tuple((str(k), str(v)) for k, v in items)


__all__ = [
    "HTTPMethod",
    "Endpoint",
    "QueryItems",
    "RequestDescriptor",
    "describe",
    "normalize_query",
]
