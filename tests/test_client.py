"""Unit tests for FigmaClient."""

import json

import httpx
import pytest

from figma_rest import ConfigError, FigmaClient, FigmaConfig, TransportError, load_config


class TestClientAuth:
    """Test token handling."""

    def test_requires_exactly_one_token(self):
        with pytest.raises(ConfigError):
            FigmaClient()
        with pytest.raises(ConfigError):
            FigmaClient(personal_access_token="a", oauth_token="b")

    @pytest.mark.asyncio
    async def test_personal_token_header(self, make_client):
        client, handler = make_client({"/v1/me": {"id": "1"}})
        async with client:
            await client.get("me")
        request = handler.requests[0]
        assert request.headers["X-Figma-Token"] == "test-token"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_oauth_token_header(self, make_client):
        client, handler = make_client({"/v1/me": {"id": "1"}}, personal_access_token=None, oauth_token="oauth")
        async with client:
            await client.get("me")
        request = handler.requests[0]
        assert request.headers["Authorization"] == "Bearer oauth"
        assert "X-Figma-Token" not in request.headers


class TestClientRequest:
    """Test request building and error decoding."""

    @pytest.mark.asyncio
    async def test_url_and_query(self, make_client):
        client, handler = make_client({"/v1/files/abc/nodes": {"nodes": {}}})
        async with client:
            await client.get("/files/abc/nodes", params={"ids": ["1:2", "3:4"], "depth": None})
        url = handler.requests[0].url
        assert url.host == "api.figma.com"
        assert url.path == "/v1/files/abc/nodes"
        assert url.query == b"ids=1%3A2%2C3%3A4"

    @pytest.mark.asyncio
    async def test_custom_base_url(self, make_client):
        client, handler = make_client({"/api/v1/me": {}}, base_url="https://figma.local/api/v1")
        async with client:
            await client.get("me")
        assert str(handler.requests[0].url) == "https://figma.local/api/v1/me"

    @pytest.mark.asyncio
    async def test_post_sends_json(self, make_client):
        client, handler = make_client({"/v1/files/abc/comments": {"id": "c1"}})
        async with client:
            result = await client.post("files/abc/comments", json_data={"message": "hi"})
        assert result == {"id": "c1"}
        request = handler.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {"message": "hi"}

    @pytest.mark.asyncio
    async def test_error_status_raises(self, make_client):
        client, _ = make_client({
            "/v1/files/abc": lambda request: httpx.Response(403, json={"status": 403, "err": "Invalid token"}),
        })
        async with client:
            with pytest.raises(TransportError) as exc_info:
                await client.get("files/abc")
        assert exc_info.value.status == 403
        assert "Invalid token" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_network_error_raises(self, make_client):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client({"/v1/me": fail})
        async with client:
            with pytest.raises(TransportError) as exc_info:
                await client.get("me")
        assert exc_info.value.status == 0
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestConfig:
    """Test environment configuration."""

    def test_load_config_personal_token(self, monkeypatch):
        monkeypatch.setenv("FIGMA_API_KEY", "pat")
        monkeypatch.setenv("FIGMA_OAUTH_TOKEN", "oauth")
        monkeypatch.setenv("FIGMA_TIMEOUT", "5")
        config = load_config()
        assert config.personal_access_token == "pat"
        assert config.oauth_token is None
        assert config.timeout == 5.0

    def test_load_config_oauth_token(self, monkeypatch):
        monkeypatch.setenv("FIGMA_API_KEY", "")
        monkeypatch.setenv("FIGMA_OAUTH_TOKEN", "oauth")
        config = load_config()
        assert config.personal_access_token is None
        assert config.oauth_token == "oauth"

    def test_load_config_requires_token(self, monkeypatch):
        monkeypatch.setenv("FIGMA_API_KEY", "")
        monkeypatch.setenv("FIGMA_OAUTH_TOKEN", "")
        with pytest.raises(ConfigError):
            load_config()

    def test_load_config_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("FIGMA_API_KEY", "pat")
        monkeypatch.setenv("FIGMA_TIMEOUT", "soon")
        with pytest.raises(ConfigError):
            load_config()

    @pytest.mark.asyncio
    async def test_from_config(self):
        config = FigmaConfig(oauth_token="oauth", base_url="https://example.test/v1", timeout=3.0)
        async with FigmaClient.from_config(config) as client:
            assert client.base_url == "https://example.test/v1/"
            assert client.timeout == 3.0

    def test_load_config_reads_dotenv_from_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("FIGMA_API_KEY=from-cwd\n")
        monkeypatch.chdir(tmp_path)
        for name in ("FIGMA_API_KEY", "FIGMA_OAUTH_TOKEN"):
            # setenv first so teardown also removes values loaded from .env
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)
        config = load_config()
        assert config.personal_access_token == "from-cwd"
        assert config.oauth_token is None
