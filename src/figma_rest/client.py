"""Figma API Base Client.

Provides the async HTTP client every endpoint function goes through.
"""
import logging
from typing import Any, Optional

import httpx

from .config import API_BASE, DEFAULT_TIMEOUT, FigmaConfig, load_config
from .errors import ConfigError, TransportError
from .query import to_query_params
from .types import Failure, decode_response

logger = logging.getLogger(__name__)


class FigmaClient:
    """Async client for the Figma REST API.

    Authenticate with either a personal access token (sent as
    ``X-Figma-Token``) or an OAuth access token (sent as a bearer token).

        async with FigmaClient(personal_access_token="...") as client:
            data = await get_file(client, "FILE_KEY")
    """

    def __init__(
        self,
        personal_access_token: Optional[str] = None,
        oauth_token: Optional[str] = None,
        *,
        base_url: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if bool(personal_access_token) == bool(oauth_token):
            raise ConfigError("Exactly one of personal_access_token or oauth_token is required")

        if personal_access_token:
            headers = {"X-Figma-Token": personal_access_token}
        else:
            headers = {"Authorization": f"Bearer {oauth_token}"}

        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: FigmaConfig, **kwargs: Any) -> "FigmaClient":
        return cls(
            personal_access_token=config.personal_access_token,
            oauth_token=config.oauth_token,
            base_url=config.base_url,
            timeout=config.timeout,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs: Any) -> "FigmaClient":
        """Create a client from ``FIGMA_API_KEY`` / ``FIGMA_OAUTH_TOKEN``."""
        return cls.from_config(load_config(env_file), **kwargs)

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        json_data: Optional[dict] = None,
    ) -> Any:
        """Make a request to the Figma API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: Path relative to the base URL (e.g. ``files/{file_key}``)
            params: Query parameters; falsy values are dropped
            json_data: JSON body for POST requests

        Returns:
            Decoded JSON body

        Raises:
            TransportError: network failure, error status or malformed body
        """
        url = endpoint.lstrip("/")
        query = to_query_params(params)
        if query:
            url = f"{url}?{query}"

        logger.debug("figma_request", extra={"method": method, "endpoint": url})
        try:
            response = await self._http.request(method, url, json=json_data)
        except httpx.HTTPError as e:
            logger.warning(
                "figma_request_failed",
                extra={"method": method, "endpoint": url, "error_type": type(e).__name__},
            )
            raise TransportError(f"{method} {url} failed: {e}") from e

        result = decode_response(response)
        if isinstance(result, Failure):
            logger.warning(
                "figma_request_failed",
                extra={"method": method, "endpoint": url, "status": result.status},
            )
            result.raise_error()
        return result.payload

    # Convenience methods
    async def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """GET request to Figma API."""
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json_data: dict, params: Optional[dict] = None) -> Any:
        """POST request to Figma API."""
        return await self.request("POST", endpoint, params=params, json_data=json_data)

    async def delete(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """DELETE request to Figma API."""
        return await self.request("DELETE", endpoint, params=params)
