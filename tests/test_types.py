"""Unit tests for response decoding."""

import httpx
import pytest

from figma_rest import Failure, Success, TransportError, decode_response


class TestDecodeResponse:
    """Test decode_response."""

    def test_success(self):
        result = decode_response(httpx.Response(200, json={"images": {"1:2": "url"}}))
        assert result == Success({"images": {"1:2": "url"}})

    def test_empty_body_is_success(self):
        assert decode_response(httpx.Response(200, content=b"")) == Success({})

    def test_error_status_uses_err_field(self):
        result = decode_response(httpx.Response(403, json={"status": 403, "err": "Invalid token"}))
        assert isinstance(result, Failure)
        assert result.status == 403
        assert result.message == "HTTP 403: Invalid token"
        assert result.body == {"status": 403, "err": "Invalid token"}

    def test_error_status_with_text_body(self):
        result = decode_response(httpx.Response(502, text="Bad gateway"))
        assert isinstance(result, Failure)
        assert result.message == "HTTP 502: Bad gateway"

    def test_malformed_json(self):
        result = decode_response(httpx.Response(200, text="<html>"))
        assert isinstance(result, Failure)
        assert result.status == 200
        assert result.body == "<html>"

    def test_embedded_error_flag(self):
        payload = {"status": 404, "error": True, "message": "Not found"}
        result = decode_response(httpx.Response(200, json=payload))
        assert result == Failure(status=404, message="HTTP 404: Not found", body=payload)

    def test_null_err_is_success(self):
        payload = {"err": None, "images": {"1:2": None}}
        assert decode_response(httpx.Response(200, json=payload)) == Success(payload)

    def test_raise_error(self):
        failure = Failure(status=429, message="HTTP 429: Rate limited", body={"status": 429})
        with pytest.raises(TransportError) as exc_info:
            failure.raise_error()
        assert exc_info.value.status == 429
        assert exc_info.value.body == {"status": 429}
        assert exc_info.value.to_dict() == {"error": "HTTP 429: Rate limited", "status": 429}
