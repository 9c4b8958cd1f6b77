"""Figma API - User Methods."""
from .client import FigmaClient
from .types import User


async def get_user_me(client: FigmaClient) -> User:
    """Get the user the token belongs to, including their email."""
    return await client.get("me")
