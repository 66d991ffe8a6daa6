"""URL composition for descriptors."""

from __future__ import annotations

import httpx

from ..base.errors import InvalidURL
from ..endpoints import QueryItems


def build_url(base_url: str, path: str, query_items: QueryItems = ()) -> httpx.URL:
    """Join ``base_url`` and the relative ``path``, then append query items.

    The base URL keeps its own path and query (``https://host/v1?api-version=2``
    + ``models`` gives ``https://host/v1/models?api-version=2``). Query items
    are appended after the base URL's own parameters.

    Raises:
        InvalidURL: The base URL lacks an http(s) scheme or a host, or httpx
            rejects the composed URL.
    """
    try:
        base = httpx.URL(base_url)
        if base.scheme not in ("http", "https") or not base.host:
            raise InvalidURL(f"base URL must be an absolute http(s) URL: {base_url!r}")
        base_path = base.raw_path.split(b"?", 1)[0].decode("ascii")
        url = base.copy_with(path=f"{base_path.rstrip('/')}/{path.lstrip('/')}")
        if query_items:
            url = url.copy_merge_params(list(query_items))
        return url
    except InvalidURL:
        raise
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidURL(f"cannot build URL from {base_url!r} and {path!r}: {e}", cause=e) from e


__all__ = ["build_url"]
