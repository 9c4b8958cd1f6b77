"""Figma REST API Client.

Async, typed bindings for the public Figma REST endpoints.
"""

# Base client
from .client import FigmaClient
from .config import (
    API_BASE,
    IMAGE_CHUNK_SIZE,
    FigmaConfig,
    load_config,
)
from .errors import ConfigError, FigmaError, TransportError
from .query import to_query_params
from .batching import batch_fetch, chunk_ids, merge_images
from .types import Failure, Success, decode_response

# File methods
from .files import (
    get_file,
    get_file_nodes,
    get_images,
    get_image_fills,
    get_file_versions,
)

# Comment methods
from .comments import (
    get_comments,
    post_comment,
    delete_comment,
)

# Team and project methods
from .teams import (
    get_team_projects,
    get_project_files,
)

# Component methods
from .components import (
    get_team_components,
    get_file_components,
    get_component,
    get_team_component_sets,
    get_file_component_sets,
    get_component_set,
    iter_team_components,
    iter_team_component_sets,
)

# Style methods
from .styles import (
    get_team_styles,
    get_file_styles,
    get_style,
    iter_team_styles,
)

# User methods
from .users import get_user_me


__all__ = [
    # Client
    "FigmaClient",
    "FigmaConfig",
    "load_config",
    "API_BASE",
    "IMAGE_CHUNK_SIZE",
    # Errors
    "FigmaError",
    "ConfigError",
    "TransportError",
    # Core
    "to_query_params",
    "batch_fetch",
    "chunk_ids",
    "merge_images",
    "Success",
    "Failure",
    "decode_response",
    # Files
    "get_file",
    "get_file_nodes",
    "get_images",
    "get_image_fills",
    "get_file_versions",
    # Comments
    "get_comments",
    "post_comment",
    "delete_comment",
    # Teams
    "get_team_projects",
    "get_project_files",
    # Components
    "get_team_components",
    "get_file_components",
    "get_component",
    "get_team_component_sets",
    "get_file_component_sets",
    "get_component_set",
    "iter_team_components",
    "iter_team_component_sets",
    # Styles
    "get_team_styles",
    "get_file_styles",
    "get_style",
    "iter_team_styles",
    # Users
    "get_user_me",
]
