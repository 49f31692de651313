"""
Analysis runner with failure isolation.

Handles one analyze request at a time: loads the target page and hands it
to the scoring engine. Load failures become a typed error response and never
reach the engine.
"""

from dataclasses import dataclass
from typing import Optional, Union
import logging

from config import Config
from page_source.adapters import get_source
from page_source.base import PageUnavailableError
from seo_scorer.engine import ScoringEngine
from seo_scorer.signals import AnalysisReport

logger = logging.getLogger(__name__)

RESTRICTED = "restricted"
UNSUPPORTED = "unsupported"
UNREACHABLE = "unreachable"


@dataclass
class AnalyzeRequest:
    """Request to analyze one page."""
    target: str


@dataclass
class AnalyzeResponse:
    """Successful analysis."""
    report: AnalysisReport


@dataclass
class AnalyzeError:
    """Failure to load the target; carries no score."""
    kind: str  # 'restricted', 'unsupported' or 'unreachable'
    message: str
    target: Optional[str] = None


class AnalysisRunner:
    """
    Runs analyze requests against page sources and the scoring engine.

    Features:
    - Restricted targets are refused before any load
    - Unknown schemes and load failures become AnalyzeError
    - The engine runs exactly once per successfully loaded page
    """

    def __init__(self, config: Config, engine: Optional[ScoringEngine] = None):
        """
        Initialize analysis runner.

        Args:
            config: Config object with fetch settings and restricted prefixes
            engine: ScoringEngine instance (default: a new one)
        """
        self.config = config
        self.engine = engine or ScoringEngine()

    def is_restricted(self, target: str) -> bool:
        return not target or any(
            target.startswith(prefix) for prefix in self.config.restricted_url_prefixes
        )

    def handle(self, request: AnalyzeRequest) -> Union[AnalyzeResponse, AnalyzeError]:
        """
        Load the requested page and analyze it.

        Args:
            request: AnalyzeRequest with the target URL or path

        Returns:
            AnalyzeResponse with the report, or AnalyzeError if the page
            could not be loaded
        """
        target = request.target.strip()

        if self.is_restricted(target):
            logger.warning(f"[{target or '(empty)'}] Refused restricted target")
            return AnalyzeError(
                kind=RESTRICTED,
                message="This page cannot be analyzed (restricted URL).",
                target=target,
            )

        try:
            source = get_source(target, self.config.fetch)
        except ValueError as e:
            logger.warning(f"[{target}] {e}")
            return AnalyzeError(kind=UNSUPPORTED, message=str(e), target=target)

        try:
            document = source.load()
        except PageUnavailableError as e:
            logger.error(f"[{target}] Error: {e.reason}")
            return AnalyzeError(
                kind=UNREACHABLE,
                message=f"Could not reach analyzer on this page. {e.reason}",
                target=target,
            )

        report = self.engine.analyze(document)
        logger.info(f"[{report.url}] score={report.total}")
        return AnalyzeResponse(report=report)
