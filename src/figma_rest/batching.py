"""Figma API - Batched requests.

Splits a long list of node ids into fixed-size chunks, issues one request
per chunk concurrently and merges the per-id results.

The ``/images`` endpoint limits how many ids fit in one call, so image
export goes through :func:`batch_fetch`. The result keeps the
single-request envelope (``{"images": {...}}``), so callers do not need to
know whether batching happened.
"""
import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Optional

from .config import IMAGE_CHUNK_SIZE
from .errors import ConfigError, TransportError

logger = logging.getLogger(__name__)

CHUNK_SIZE = IMAGE_CHUNK_SIZE

ChunkRequest = Callable[[list[str], dict], Awaitable[Mapping[str, Any]]]


def _validate(ids: Any, chunk_size: Any) -> None:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ConfigError(f"chunk_size must be an integer, got {chunk_size!r}")
    if chunk_size < 1:
        raise ConfigError(f"chunk_size must be >= 1, got {chunk_size}")
    if isinstance(ids, (str, bytes)) or not isinstance(ids, Sequence):
        raise ConfigError(f"ids must be a sequence of strings, got {type(ids).__name__}")
    for position, node_id in enumerate(ids):
        if not isinstance(node_id, str):
            raise ConfigError(
                f"ids must contain only strings, got {node_id!r} at position {position}"
            )


def chunk_ids(ids: Sequence[str], chunk_size: int = CHUNK_SIZE) -> list[list[str]]:
    """Partition ids into consecutive chunks of at most ``chunk_size``.

    Order and duplicates are preserved; only the last chunk may be shorter.

    Raises:
        ConfigError: chunk_size < 1 or ids is not a sequence of strings
    """
    _validate(ids, chunk_size)
    return [list(ids[i:i + chunk_size]) for i in range(0, len(ids), chunk_size)]


def merge_images(results: Sequence[Mapping[str, Any]]) -> dict[str, Optional[str]]:
    """Merge chunk results in chunk order.

    A later chunk overwrites an earlier one for the same id.

    Raises:
        TransportError: a result has no ``images`` mapping
    """
    merged: dict[str, Optional[str]] = {}
    for index, result in enumerate(results):
        images = result.get("images") if isinstance(result, Mapping) else None
        if not isinstance(images, Mapping):
            raise TransportError(
                f"Malformed response for chunk {index}: missing 'images' mapping",
                body=result,
            )
        merged.update(images)
    return merged


async def batch_fetch(
    ids: Sequence[str],
    chunk_size: int = CHUNK_SIZE,
    request: Optional[ChunkRequest] = None,
    shared_params: Optional[dict] = None,
) -> dict:
    """Fetch ids in concurrent chunks and merge the results.

    Every chunk request is started before any is awaited, and all of them
    settle before the merge. If any chunk fails, its exception is re-raised
    as is (the earliest chunk's when several fail) and nothing is merged.
    In-flight siblings are not cancelled.

    Args:
        ids: Node ids, possibly with duplicates
        chunk_size: Max ids per request
        request: Async callable ``(chunk, shared_params) -> {"images": {...}}``
        shared_params: Parameters passed unchanged to every chunk request

    Returns:
        ``{"images": {id: url_or_none}}``
    """
    if request is None:
        raise ConfigError("request callable is required")
    chunks = chunk_ids(ids, chunk_size)
    if not chunks:
        return {"images": {}}

    params = dict(shared_params or {})
    logger.debug(
        "batch_fetch_dispatch",
        extra={"total_ids": len(ids), "chunk_size": chunk_size, "chunks": len(chunks)},
    )

    outcomes = await asyncio.gather(
        *(request(chunk, params) for chunk in chunks),
        return_exceptions=True,
    )

    failures = [
        (index, outcome)
        for index, outcome in enumerate(outcomes)
        if isinstance(outcome, BaseException)
    ]
    for index, error in failures:
        logger.warning(
            "batch_fetch_chunk_failed",
            extra={"chunk_index": index, "error_type": type(error).__name__, "error_message": str(error)},
        )
    if failures:
        raise failures[0][1]

    return {"images": merge_images(outcomes)}
