"""Figma API - File Methods.

Methods for working with Figma files, nodes and rendered images.
"""
from typing import Optional, List

from .batching import CHUNK_SIZE, batch_fetch
from .client import FigmaClient
from .errors import ConfigError
from .types import (
    GetFileNodesResult,
    GetFileResult,
    GetImageFillsResult,
    GetImageResult,
    GetVersionsResult,
)

IMAGE_FORMATS = ("jpg", "png", "svg", "pdf")


async def get_file(
    client: FigmaClient,
    file_key: str,
    version: Optional[str] = None,
    ids: Optional[List[str]] = None,
    depth: Optional[int] = None,
    geometry: Optional[str] = None,
    plugin_data: Optional[str] = None,
    branch_data: Optional[bool] = None
) -> GetFileResult:
    """Get a Figma file by key.

    Args:
        client: Figma client
        file_key: The file key (from URL)
        version: Specific version ID
        ids: Only return these nodes, their children and their ancestors
        depth: Depth of node tree to return
        geometry: Include path data ("paths")
        plugin_data: Plugin data to include
        branch_data: Include branch metadata

    Returns:
        File document data
    """
    params = {
        "version": version,
        "ids": ids,
        "depth": depth,
        "geometry": geometry,
        "plugin_data": plugin_data,
        "branch_data": branch_data,
    }
    return await client.get(f"files/{file_key}", params=params)


async def get_file_nodes(
    client: FigmaClient,
    file_key: str,
    ids: List[str],
    version: Optional[str] = None,
    depth: Optional[int] = None,
    geometry: Optional[str] = None,
    plugin_data: Optional[str] = None
) -> GetFileNodesResult:
    """Get specific nodes from a Figma file.

    Args:
        client: Figma client
        file_key: The file key
        ids: List of node IDs to retrieve
        version: Specific version ID
        depth: Depth of node tree
        geometry: Include path data
        plugin_data: Plugin data to include

    Returns:
        Requested nodes keyed by node ID (``None`` for unknown IDs)
    """
    if not ids:
        raise ConfigError("ids must contain at least one node ID")
    params = {
        "ids": ids,
        "version": version,
        "depth": depth,
        "geometry": geometry,
        "plugin_data": plugin_data,
    }
    return await client.get(f"files/{file_key}/nodes", params=params)


async def get_images(
    client: FigmaClient,
    file_key: str,
    ids: List[str],
    scale: Optional[float] = None,
    format: str = "png",
    svg_include_id: Optional[bool] = None,
    svg_simplify_stroke: Optional[bool] = None,
    use_absolute_bounds: Optional[bool] = None,
    version: Optional[str] = None,
    chunk_size: int = CHUNK_SIZE
) -> GetImageResult:
    """Render images from a Figma file.

    Long id lists are split into requests of ``chunk_size`` ids sent
    concurrently; the merged result has the same shape as a single call.

    Args:
        client: Figma client
        file_key: The file key
        ids: Node IDs to render
        scale: Scale factor (0.01-4)
        format: Image format (jpg, png, svg, pdf)
        svg_include_id: Include node IDs in SVG
        svg_simplify_stroke: Simplify strokes in SVG
        use_absolute_bounds: Use absolute bounds
        version: Specific version
        chunk_size: Max node IDs per request

    Returns:
        Dict with image URLs keyed by node ID (``None`` when rendering failed)
    """
    if format not in IMAGE_FORMATS:
        raise ConfigError(f"format must be one of {', '.join(IMAGE_FORMATS)}, got {format!r}")
    if scale is not None and not 0.01 <= scale <= 4:
        raise ConfigError(f"scale must be between 0.01 and 4, got {scale}")

    # False is dropped by the query encoder, so send booleans as strings
    def flag(value: Optional[bool]) -> Optional[str]:
        return None if value is None else str(value).lower()

    shared_params = {
        "scale": scale,
        "format": format,
        "svg_include_id": flag(svg_include_id),
        "svg_simplify_stroke": flag(svg_simplify_stroke),
        "use_absolute_bounds": flag(use_absolute_bounds),
        "version": version,
    }

    async def request_chunk(chunk: List[str], params: dict) -> GetImageResult:
        return await client.get(f"images/{file_key}", params={"ids": chunk, **params})

    return await batch_fetch(ids, chunk_size, request_chunk, shared_params)


async def get_image_fills(client: FigmaClient, file_key: str) -> GetImageFillsResult:
    """Get image fills in a Figma file.

    Args:
        client: Figma client
        file_key: The file key

    Returns:
        Dict with image fill URLs keyed by image ref
    """
    return await client.get(f"files/{file_key}/images")


async def get_file_versions(client: FigmaClient, file_key: str) -> GetVersionsResult:
    """Get version history of a Figma file."""
    return await client.get(f"files/{file_key}/versions")
