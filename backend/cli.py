"""SEO Signal Score CLI.

Usage:
    seo-score analyze https://example.com/
    seo-score analyze saved_page.html --json
    seo-score signals
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from config import Config, load_config
from page_source.runner import AnalysisRunner, AnalyzeError, AnalyzeRequest
from render import render_error, render_report
from seo_scorer.scorers import MAX_POINTS
from seo_scorer.signals import SIGNAL_NAMES

app = typer.Typer(
    name="seo-score",
    help="Heuristic on-page SEO score for a URL or saved HTML file.",
    no_args_is_help=True,
)


def _setup_logging(config: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("analyze")
def analyze(
    target: str = typer.Argument(..., help="URL or path of the page to analyze."),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="YAML configuration file."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Analyze one page and print its score and per-signal rows."""
    config = load_config(config_path) if config_path else Config()
    _setup_logging(config)

    result = AnalysisRunner(config).handle(AnalyzeRequest(target=target))

    if isinstance(result, AnalyzeError):
        render_error(result, typer.echo)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.report.to_dict(), indent=2, ensure_ascii=False))
    else:
        render_report(result.report, typer.echo)


@app.command("signals")
def signals() -> None:
    """List the scored signals and their maximum points."""
    for name in SIGNAL_NAMES:
        typer.echo(f"{name:<18} {MAX_POINTS[name]:>3}")
    typer.echo(f"{'total':<18} {sum(MAX_POINTS.values()):>3}")


if __name__ == "__main__":
    app()
