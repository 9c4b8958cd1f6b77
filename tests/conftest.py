"""Pytest configuration - loads .env and provides mock-transport clients."""

import json
from pathlib import Path

import httpx
import pytest
from dotenv import load_dotenv

from figma_rest import FigmaClient

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays routes.

    ``routes`` maps a URL path (e.g. ``/v1/me``) to either a JSON-able
    payload or a callable ``(request) -> httpx.Response``.
    """

    def __init__(self, routes: dict | None = None):
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"status": 404, "err": "Not found"})
        if callable(route):
            return route(request)
        return httpx.Response(200, content=json.dumps(route).encode(),
                              headers={"Content-Type": "application/json"})


@pytest.fixture
def make_client():
    """Build a FigmaClient whose network is a RecordingHandler."""

    def _make(routes: dict | None = None, **kwargs) -> tuple[FigmaClient, RecordingHandler]:
        handler = RecordingHandler(routes)
        kwargs.setdefault("personal_access_token", "test-token")
        client = FigmaClient(transport=httpx.MockTransport(handler), **kwargs)
        return client, handler

    return _make
