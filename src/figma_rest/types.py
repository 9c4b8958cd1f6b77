"""Figma API - Response types.

TypedDicts for the response envelopes and metadata records, plus the
``Success`` / ``Failure`` tags every raw HTTP response is decoded into.
Node trees (``document``, ``components`` etc.) stay plain dicts.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, NoReturn, Optional, TypedDict, Union

import httpx

from .errors import TransportError


# Decoded responses

@dataclass(frozen=True)
class Success:
    """A 2xx response with a well-formed JSON body."""
    payload: Any


@dataclass(frozen=True)
class Failure:
    """A response that must not reach the caller as data."""
    status: int
    message: str
    body: Any = None

    def raise_error(self) -> NoReturn:
        raise TransportError(self.message, status=self.status, body=self.body)


Result = Union[Success, Failure]


def _error_message(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    for key in ("err", "message"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def decode_response(response: httpx.Response) -> Result:
    """Decode a raw response into ``Success`` or ``Failure``.

    Some endpoints answer 200 with ``{"error": true, "status": 4xx}`` or an
    ``err`` string; those are failures too. An empty 2xx body (DELETE
    endpoints) decodes to ``Success({})``.
    """
    status = response.status_code
    text = response.text

    if status >= 400:
        try:
            payload = response.json()
        except ValueError:
            payload = text
        message = _error_message(payload) or text or response.reason_phrase
        return Failure(status=status, message=f"HTTP {status}: {message}", body=payload)

    if not text.strip():
        return Success({})

    try:
        payload = response.json()
    except ValueError:
        return Failure(status=status, message="Malformed JSON body", body=text)

    if isinstance(payload, dict):
        embedded = payload.get("status")
        embedded = embedded if isinstance(embedded, int) else status
        if payload.get("error") is True:
            message = _error_message(payload) or "Request failed"
            return Failure(status=embedded, message=f"HTTP {embedded}: {message}", body=payload)
        if payload.get("err") and embedded >= 400:
            return Failure(status=embedded, message=f"HTTP {embedded}: {payload['err']}", body=payload)

    return Success(payload)


# Shared records

class User(TypedDict, total=False):
    id: str
    handle: str
    img_url: str
    # Only present on /v1/me
    email: str


class Comment(TypedDict, total=False):
    id: str
    client_meta: Dict[str, Any]
    file_key: str
    parent_id: str
    user: User
    created_at: str
    resolved_at: Optional[str]
    order_id: Optional[int]
    message: str


class Version(TypedDict):
    id: str
    created_at: str
    label: str
    description: str
    user: User


class Project(TypedDict):
    id: int
    name: str


class BaseFile(TypedDict):
    key: str
    name: str
    thumbnail_url: str
    last_modified: str


class ProjectFile(BaseFile, total=False):
    branches: List[BaseFile]


class ComponentMetadata(TypedDict, total=False):
    key: str
    file_key: str
    node_id: str
    thumbnail_url: str
    name: str
    description: str
    created_at: str
    updated_at: str
    user: User
    containing_frame: Dict[str, Any]
    containing_page: Dict[str, Any]


class ComponentSetMetadata(ComponentMetadata, total=False):
    pass


class StyleMetadata(TypedDict, total=False):
    key: str
    file_key: str
    node_id: str
    style_type: str
    thumbnail_url: str
    name: str
    description: str
    created_at: str
    updated_at: str
    sort_position: str
    user: User


# Files

class GetFileResult(TypedDict, total=False):
    name: str
    role: str
    lastModified: str
    editorType: str
    thumbnailUrl: str
    version: str
    document: Dict[str, Any]
    components: Dict[str, Any]
    componentSets: Dict[str, Any]
    schemaVersion: int
    styles: Dict[str, Any]
    mainFileKey: str
    branches: List[ProjectFile]


class GetFileNodesResult(TypedDict, total=False):
    name: str
    lastModified: str
    thumbnailUrl: str
    version: str
    err: Optional[str]
    nodes: Dict[str, Optional[Dict[str, Any]]]


class GetImageResult(TypedDict, total=False):
    err: Optional[str]
    # node id -> rendered image url
    images: Dict[str, Optional[str]]
    status: int


class _ImageFillsMeta(TypedDict):
    images: Dict[str, str]


class GetImageFillsResult(TypedDict, total=False):
    err: Union[str, bool]
    meta: _ImageFillsMeta
    status: int


class GetVersionsResult(TypedDict):
    versions: List[Version]


# Comments

class GetCommentsResult(TypedDict):
    comments: List[Comment]


# Projects

class GetTeamProjectsResult(TypedDict, total=False):
    name: str
    projects: List[Project]


class GetProjectFilesResult(TypedDict, total=False):
    name: str
    files: List[ProjectFile]


# Components and styles

class GetTeamComponentsResult(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, Any]


class GetFileComponentsResult(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, Any]


class GetComponentResult(TypedDict, total=False):
    status: int
    error: bool
    meta: ComponentMetadata


class GetTeamComponentSetsResult(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, Any]


class GetFileComponentSetsResult(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, Any]


class GetComponentSetResult(TypedDict, total=False):
    status: int
    error: bool
    meta: ComponentSetMetadata


class GetTeamStylesResult(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, Any]


class GetFileStylesResult(TypedDict, total=False):
    status: int
    error: bool
    meta: Dict[str, Any]


class GetStyleResult(TypedDict, total=False):
    status: int
    error: bool
    meta: StyleMetadata
