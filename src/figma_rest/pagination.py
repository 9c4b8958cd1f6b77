"""Figma API - Cursor pagination.

Team library listings (components, component sets, styles) are paged with
integer ``after`` / ``before`` cursors returned in ``meta.cursor``.
"""
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, Optional

from .errors import ConfigError

DEFAULT_PAGE_SIZE = 30


def page_params(
    page_size: Optional[int] = None,
    after: Optional[int] = None,
    before: Optional[int] = None,
) -> dict:
    """Query parameters for one page of a team listing."""
    if after is not None and before is not None:
        raise ConfigError("after and before are mutually exclusive")
    if page_size is not None and page_size < 1:
        raise ConfigError(f"page_size must be >= 1, got {page_size}")
    return {"page_size": page_size, "after": after, "before": before}


async def iter_team_items(
    fetch_page: Callable[..., Awaitable[Any]],
    items_key: str,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> AsyncIterator[dict]:
    """Yield every item of a paged team listing.

    Args:
        fetch_page: Async callable accepting ``page_size`` and ``after``
        items_key: Key of the item list inside ``meta``
        page_size: Number of items per request

    Follows ``meta.cursor.after`` until the cursor is missing or zero, or a page
    comes back empty.
    """
    after: Optional[int] = None
    while True:
        page = await fetch_page(page_size=page_size, after=after)
        meta = page.get("meta") or {}
        items = meta.get(items_key) or []
        for item in items:
            yield item

        cursor = (meta.get("cursor") or {}).get("after")
        # 0 would be dropped from the query string, restarting at page one
        if not items or not cursor or cursor == after:
            return
        after = cursor
