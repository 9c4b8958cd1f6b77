"""Figma API - Configuration.

Connection settings and API constants.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError


API_DOMAIN = "https://api.figma.com"
API_VER = "v1"
API_BASE = f"{API_DOMAIN}/{API_VER}/"

DEFAULT_TIMEOUT = 30.0

# Max node ids per /images request
IMAGE_CHUNK_SIZE = 50


@dataclass
class FigmaConfig:
    """Configuration for a Figma API client."""
    personal_access_token: Optional[str] = None
    oauth_token: Optional[str] = None
    base_url: str = API_BASE
    timeout: float = DEFAULT_TIMEOUT


def load_config(env_file: Optional[str] = None) -> FigmaConfig:
    """Build a configuration from the environment.

    Reads ``.env`` from the working directory or its parents first (or
    ``env_file`` when given), then:

    - ``FIGMA_API_KEY``: personal access token
    - ``FIGMA_OAUTH_TOKEN``: OAuth access token, used when no personal token is set
    - ``FIGMA_API_BASE``: base URL override
    - ``FIGMA_TIMEOUT``: request timeout in seconds

    Raises:
        ConfigError: no token is set or the timeout is not a number
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    api_key = os.getenv("FIGMA_API_KEY")
    oauth_token = os.getenv("FIGMA_OAUTH_TOKEN")
    if not api_key and not oauth_token:
        raise ConfigError("FIGMA_API_KEY or FIGMA_OAUTH_TOKEN environment variable is required")

    raw_timeout = os.getenv("FIGMA_TIMEOUT")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"FIGMA_TIMEOUT must be a number, got {raw_timeout!r}") from e

    return FigmaConfig(
        personal_access_token=api_key or None,
        oauth_token=None if api_key else oauth_token,
        base_url=os.getenv("FIGMA_API_BASE") or API_BASE,
        timeout=timeout,
    )
