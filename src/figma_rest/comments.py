"""Figma API - Comment Methods."""
from typing import Optional

from .client import FigmaClient
from .errors import ConfigError
from .types import Comment, GetCommentsResult


async def get_comments(client: FigmaClient, file_key: str, as_md: bool = False) -> GetCommentsResult:
    """Get comments in a Figma file.

    Args:
        client: Figma client
        file_key: The file key
        as_md: Return comments as markdown

    Returns:
        List of comments
    """
    return await client.get(f"files/{file_key}/comments", params={"as_md": as_md})


async def post_comment(
    client: FigmaClient,
    file_key: str,
    message: str,
    client_meta: Optional[dict] = None,
    comment_id: Optional[str] = None
) -> Comment:
    """Add a comment to a Figma file.

    Args:
        client: Figma client
        file_key: The file key
        message: Comment text
        client_meta: Position metadata (x, y, node_id, node_offset)
        comment_id: Root comment ID when replying

    Returns:
        Created comment data
    """
    if not message:
        raise ConfigError("message must not be empty")

    data: dict = {"message": message}
    if client_meta:
        data["client_meta"] = client_meta
    if comment_id:
        data["comment_id"] = comment_id

    return await client.post(f"files/{file_key}/comments", json_data=data)


async def delete_comment(client: FigmaClient, file_key: str, comment_id: str) -> dict:
    """Delete a comment from a Figma file.

    Returns:
        Empty dict on success
    """
    return await client.delete(f"files/{file_key}/comments/{comment_id}")
