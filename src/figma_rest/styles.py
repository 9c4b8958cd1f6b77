"""Figma API - Style Methods."""
from collections.abc import AsyncIterator
from functools import partial
from typing import Optional

from .client import FigmaClient
from .pagination import DEFAULT_PAGE_SIZE, iter_team_items, page_params
from .types import GetFileStylesResult, GetStyleResult, GetTeamStylesResult, StyleMetadata


async def get_team_styles(
    client: FigmaClient,
    team_id: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    after: Optional[int] = None,
    before: Optional[int] = None
) -> GetTeamStylesResult:
    """Get styles in a team library.

    Args:
        client: Figma client
        team_id: Team ID
        page_size: Number of results
        after: Cursor to start after (exclusive with before)
        before: Cursor to start before (exclusive with after)

    Returns:
        Styles and the cursor of the next page
    """
    params = page_params(page_size, after, before)
    return await client.get(f"teams/{team_id}/styles", params=params)


async def get_file_styles(client: FigmaClient, file_key: str) -> GetFileStylesResult:
    """Get styles in a file.

    Args:
        client: Figma client
        file_key: The file key

    Returns:
        List of styles with metadata
    """
    return await client.get(f"files/{file_key}/styles")


async def get_style(client: FigmaClient, style_key: str) -> GetStyleResult:
    """Get a style by key."""
    return await client.get(f"styles/{style_key}")


def iter_team_styles(
    client: FigmaClient,
    team_id: str,
    page_size: int = DEFAULT_PAGE_SIZE
) -> AsyncIterator[StyleMetadata]:
    """Iterate over every published style of a team."""
    fetch = partial(get_team_styles, client, team_id)
    return iter_team_items(fetch, "styles", page_size)
