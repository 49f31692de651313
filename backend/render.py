"""Text rendering of analysis reports and errors."""

from typing import Callable

from page_source.runner import AnalyzeError
from seo_scorer.signals import AnalysisReport, SIGNAL_NAMES

SIGNAL_LABELS = {
    "title": "Page Title",
    "meta_description": "Meta Description",
    "meta_keywords": "Meta Keywords (optional)",
    "headings": "Headings (H1–H6)",
    "images": "Image Alt Attributes",
    "canonical": "Canonical Tag",
    "robots": "Robots Meta Tag",
    "structured_data": "Structured Data (JSON-LD)",
    "word_count": "Word Count",
}


def render_report(report: AnalysisReport, echo: Callable[[str], None]) -> None:
    """Write the report header and one row per signal.

    Args:
        report: Analysis to display.
        echo: Receives each output line.
    """
    echo(report.url or "(unknown URL)")
    echo(f"Score: {report.total}/100")
    echo(report.summary)
    echo(f"Updated {report.generated_at.strftime('%H:%M:%S')}")
    echo("")

    width = max(len(label) for label in SIGNAL_LABELS.values())
    for name in SIGNAL_NAMES:
        item = report.items[name]
        echo(f"[{item.status.upper():<4}] {SIGNAL_LABELS[name]:<{width}}  {item.badge}")
        echo(f"       {item.detail}")


def render_error(error: AnalyzeError, echo: Callable[[str], None]) -> None:
    if error.target:
        echo(error.target)
    echo(f"Error: {error.message}")
    echo("Could not analyze.")
