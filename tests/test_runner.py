"""Tests for the analyze request/response runner."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from config import Config
from page_source.runner import (
    AnalysisRunner,
    AnalyzeError,
    AnalyzeRequest,
    AnalyzeResponse,
    RESTRICTED,
    UNREACHABLE,
    UNSUPPORTED,
)


_HTML = """\
<html><head><title>Saved product page</title></head>
<body><h1>Oak chair</h1><p>A sturdy chair.</p></body></html>
"""


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(_HTML, encoding="utf-8")
    return path


@pytest.fixture
def engine():
    return MagicMock()


# ---------------------------------------------------------------------------
# Refused targets never reach the engine
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("target", [
    "chrome://extensions",
    "chrome-extension://abc/popup.html",
    "edge://settings",
    "about:blank",
    "",
    "   ",
])
def test_restricted_targets(target, engine):
    result = AnalysisRunner(Config(), engine=engine).handle(AnalyzeRequest(target=target))

    assert isinstance(result, AnalyzeError)
    assert result.kind == RESTRICTED
    assert result.message == "This page cannot be analyzed (restricted URL)."
    engine.analyze.assert_not_called()


def test_custom_restricted_prefixes(engine, page):
    config = Config(restricted_url_prefixes=[str(page.parent)])

    result = AnalysisRunner(config, engine=engine).handle(AnalyzeRequest(target=str(page)))

    assert isinstance(result, AnalyzeError)
    assert result.kind == RESTRICTED


def test_unsupported_scheme(engine):
    result = AnalysisRunner(Config(), engine=engine).handle(
        AnalyzeRequest(target="ftp://example.com/index.html")
    )

    assert isinstance(result, AnalyzeError)
    assert result.kind == UNSUPPORTED
    assert "ftp" in result.message
    engine.analyze.assert_not_called()


def test_unreachable_target(engine, tmp_path):
    target = str(tmp_path / "missing.html")

    result = AnalysisRunner(Config(), engine=engine).handle(AnalyzeRequest(target=target))

    assert isinstance(result, AnalyzeError)
    assert result.kind == UNREACHABLE
    assert result.message.startswith("Could not reach analyzer on this page.")
    assert result.target == target
    engine.analyze.assert_not_called()


# ---------------------------------------------------------------------------
# Successful analysis
# ---------------------------------------------------------------------------

def test_successful_analysis(page):
    result = AnalysisRunner(Config()).handle(AnalyzeRequest(target=str(page)))

    assert isinstance(result, AnalyzeResponse)
    report = result.report
    assert report.url == page.resolve().as_uri()
    assert report.items["title"].status == "good"
    assert report.items["headings"].badge == "H1×1"
    assert 0 <= report.total <= 100


def test_engine_called_once_per_request(page, engine):
    AnalysisRunner(Config(), engine=engine).handle(AnalyzeRequest(target=str(page)))

    engine.analyze.assert_called_once()
