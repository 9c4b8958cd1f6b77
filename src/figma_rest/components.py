"""Figma API - Component Methods.

Methods for working with components and component sets.
"""
from collections.abc import AsyncIterator
from functools import partial
from typing import Optional

from .client import FigmaClient
from .pagination import DEFAULT_PAGE_SIZE, iter_team_items, page_params
from .types import (
    ComponentMetadata,
    ComponentSetMetadata,
    GetComponentResult,
    GetComponentSetResult,
    GetFileComponentSetsResult,
    GetFileComponentsResult,
    GetTeamComponentSetsResult,
    GetTeamComponentsResult,
)


async def get_team_components(
    client: FigmaClient,
    team_id: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    after: Optional[int] = None,
    before: Optional[int] = None
) -> GetTeamComponentsResult:
    """Get components in a team library.

    Args:
        client: Figma client
        team_id: Team ID
        page_size: Number of results
        after: Cursor to start after (exclusive with before)
        before: Cursor to start before (exclusive with after)

    Returns:
        Components and the cursor of the next page
    """
    params = page_params(page_size, after, before)
    return await client.get(f"teams/{team_id}/components", params=params)


async def get_file_components(client: FigmaClient, file_key: str) -> GetFileComponentsResult:
    """Get components in a file."""
    return await client.get(f"files/{file_key}/components")


async def get_component(client: FigmaClient, component_key: str) -> GetComponentResult:
    """Get a component by key."""
    return await client.get(f"components/{component_key}")


async def get_team_component_sets(
    client: FigmaClient,
    team_id: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    after: Optional[int] = None,
    before: Optional[int] = None
) -> GetTeamComponentSetsResult:
    """Get component sets in a team library.

    Args:
        client: Figma client
        team_id: Team ID
        page_size: Number of results
        after: Cursor to start after (exclusive with before)
        before: Cursor to start before (exclusive with after)

    Returns:
        Component sets and the cursor of the next page
    """
    params = page_params(page_size, after, before)
    return await client.get(f"teams/{team_id}/component_sets", params=params)


async def get_file_component_sets(client: FigmaClient, file_key: str) -> GetFileComponentSetsResult:
    """Get component sets in a file."""
    return await client.get(f"files/{file_key}/component_sets")


async def get_component_set(client: FigmaClient, component_set_key: str) -> GetComponentSetResult:
    """Get a component set by key."""
    return await client.get(f"component_sets/{component_set_key}")


def iter_team_components(
    client: FigmaClient,
    team_id: str,
    page_size: int = DEFAULT_PAGE_SIZE
) -> AsyncIterator[ComponentMetadata]:
    """Iterate over every published component of a team."""
    fetch = partial(get_team_components, client, team_id)
    return iter_team_items(fetch, "components", page_size)


def iter_team_component_sets(
    client: FigmaClient,
    team_id: str,
    page_size: int = DEFAULT_PAGE_SIZE
) -> AsyncIterator[ComponentSetMetadata]:
    """Iterate over every published component set of a team."""
    fetch = partial(get_team_component_sets, client, team_id)
    return iter_team_items(fetch, "component_sets", page_size)
