"""Tests for page sources (file + HTTP) and the scheme registry.

Mocking strategy:
- ``requests.get`` is patched where the HTTP source looks it up, so no real
  network calls are made.
- File sources read from pytest's ``tmp_path``.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from config import FetchConfig
from page_source.adapters import get_source
from page_source.adapters.file import FilePageSource
from page_source.adapters.web import HttpPageSource
from page_source.base import PageUnavailableError


_HTML = "<html><head><title>Saved page</title></head><body><p>Hello there</p></body></html>"

_FETCH = FetchConfig(timeout=5, user_agent="TestAgent/1.0")


def _response(text: str = _HTML, url: str = "https://example.com/final", status: int = 200):
    response = MagicMock()
    response.text = text
    response.url = url
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status} Error")
    return response


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("target, source_class", [
    ("https://example.com/", HttpPageSource),
    ("HTTP://example.com/", HttpPageSource),
    ("file:///tmp/page.html", FilePageSource),
    ("saved/page.html", FilePageSource),
])
def test_get_source_by_scheme(target, source_class):
    source = get_source(target, _FETCH)
    assert isinstance(source, source_class)
    assert source.target == target


def test_get_source_unknown_scheme():
    with pytest.raises(ValueError, match="Unsupported scheme: ftp"):
        get_source("ftp://example.com/", _FETCH)


# ---------------------------------------------------------------------------
# File source
# ---------------------------------------------------------------------------

def test_file_source_reads_path(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(_HTML, encoding="utf-8")

    document = FilePageSource(str(page), _FETCH).load()

    assert document.title == "Saved page"
    assert document.url == page.resolve().as_uri()


def test_file_source_reads_file_uri(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(_HTML, encoding="utf-8")

    document = FilePageSource(page.resolve().as_uri(), _FETCH).load()

    assert document.title == "Saved page"


def test_file_source_replaces_undecodable_bytes(tmp_path):
    page = tmp_path / "latin1.html"
    page.write_bytes(b"<title>Caf\xe9</title>")

    document = FilePageSource(str(page), _FETCH).load()

    assert document.title == "Caf\ufffd"


def test_file_source_missing_file(tmp_path):
    with pytest.raises(PageUnavailableError) as exc_info:
        FilePageSource(str(tmp_path / "missing.html"), _FETCH).load()

    assert exc_info.value.target.endswith("missing.html")


# ---------------------------------------------------------------------------
# HTTP source
# ---------------------------------------------------------------------------

def test_http_source_fetches_with_config():
    with patch("page_source.adapters.web.requests.get", return_value=_response()) as mock_get:
        document = HttpPageSource("https://example.com/start", _FETCH).load()

    mock_get.assert_called_once_with(
        "https://example.com/start",
        timeout=5,
        headers={"User-Agent": "TestAgent/1.0"},
    )
    assert document.title == "Saved page"
    assert document.url == "https://example.com/final"


def test_http_source_timeout():
    with patch(
        "page_source.adapters.web.requests.get",
        side_effect=requests.exceptions.Timeout(),
    ):
        with pytest.raises(PageUnavailableError, match="Timeout after 5"):
            HttpPageSource("https://example.com/", _FETCH).load()


def test_http_source_connection_error():
    with patch(
        "page_source.adapters.web.requests.get",
        side_effect=requests.exceptions.ConnectionError("Name or service not known"),
    ):
        with pytest.raises(PageUnavailableError, match="Name or service not known"):
            HttpPageSource("https://nowhere.invalid/", _FETCH).load()


def test_http_source_error_status():
    with patch("page_source.adapters.web.requests.get", return_value=_response(status=404)):
        with pytest.raises(PageUnavailableError, match="404"):
            HttpPageSource("https://example.com/gone", _FETCH).load()
