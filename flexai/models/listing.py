"""Model listing payloads.

``ListResponse`` is the paginated envelope shared by listing endpoints;
``Model`` and ``Permission`` describe entries of ``GET models``.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import Field, field_validator

from .base import WireModel

T = TypeVar("T")


class ListResponse(WireModel, Generic[T]):
    """Paginated list envelope ``{object, data, has_more, first_id, last_id}``.

    ``has_more`` defaults to ``False`` when the server omits it or sends null.
    """

    object: str
    data: List[T]
    has_more: bool = False
    first_id: Optional[str] = None
    last_id: Optional[str] = None

    @field_validator("has_more", mode="before")
    @classmethod
    def _null_has_more(cls, value):
        return False if value is None else value


class Permission(WireModel):
    id: str
    object: str
    created: int
    allow_create_engine: bool
    allow_sampling: bool
    allow_logprobs: bool
    allow_search_indices: bool
    allow_view: bool
    allow_fine_tuning: bool
    organization: str
    group: Optional[str] = None
    is_blocking: bool


class Model(WireModel):
    """A model entry. ``created`` and ``permission`` are optional on the wire."""

    id: str
    object: str
    created: int = 0
    owned_by: str
    permission: List[Permission] = Field(default_factory=list)
    root: Optional[str] = None
    parent: Optional[str] = None

    @field_validator("created", mode="before")
    @classmethod
    def _null_created(cls, value):
        return 0 if value is None else value

    @field_validator("permission", mode="before")
    @classmethod
    def _null_permission(cls, value):
        return [] if value is None else value


__all__ = ["ListResponse", "Model", "Permission"]
