"""Tests for vector_store.http_client."""

import io
from urllib.error import HTTPError, URLError

import pytest
from unittest.mock import MagicMock, patch

from vector_store.http_client import send


def _response(status: int, body: bytes) -> MagicMock:
    resp = MagicMock()
    resp.status = status
    resp.read.return_value = body
    resp.__enter__.return_value = resp
    return resp


def test_send_returns_status_and_text():
    with patch("vector_store.http_client.request.urlopen", return_value=_response(200, b'{"ok": 1}')) as urlopen:
        assert send("https://kv.example.com/k", method="PUT", body="{}") == (200, '{"ok": 1}')
    req = urlopen.call_args.args[0]
    assert req.get_method() == "PUT"
    assert req.data == b"{}"


def test_send_returns_http_error_status():
    error = HTTPError("https://kv.example.com/k", 404, "Not Found", {}, io.BytesIO(b"missing"))
    with patch("vector_store.http_client.request.urlopen", side_effect=error):
        assert send("https://kv.example.com/k") == (404, "missing")


def test_send_unreachable_host():
    with patch("vector_store.http_client.request.urlopen", side_effect=URLError("refused")):
        with pytest.raises(ConnectionError, match="Cannot reach"):
            send("https://kv.example.com/k")
