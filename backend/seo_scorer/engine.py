"""
Scoring engine for SEO signal analysis.
Runs every scorer over the extracted signals, totals the points and
generates the summary line.
"""

import logging
from typing import Dict, Optional
from .document import PageDocument
from .extractor import SignalExtractor
from .scorers import SCORERS
from .signals import AnalysisReport, ExtractedSignals, SignalResult, GOOD, BAD

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Calculates the SEO score and report for a page document."""

    def __init__(self, extractor: Optional[SignalExtractor] = None):
        """
        Initialize scoring engine.

        Args:
            extractor: SignalExtractor instance (default: a new one)
        """
        self.extractor = extractor or SignalExtractor()

    def analyze(self, document: PageDocument) -> AnalysisReport:
        """
        Extract, score and summarize one document.

        Args:
            document: Parsed page

        Returns:
            AnalysisReport ready to hand to a renderer
        """
        raw = self.extractor.extract_all(document)
        items = self.score_signals(raw)

        # Clamp to 0-100 range
        total = max(0, min(100, sum(item.points for item in items.values())))

        report = AnalysisReport(
            generated_at=document.now(),
            url=document.url,
            total=total,
            items=items,
            raw=raw,
        )
        report.summary = self._generate_summary(items, total)

        logger.debug(f"Analyzed {document.url or '(unknown URL)'}: score={total}")
        return report

    def score_signals(self, raw: ExtractedSignals) -> Dict[str, SignalResult]:
        """
        Apply each scorer to its extracted value, in report order.

        Args:
            raw: Extracted signals

        Returns:
            SignalResult per signal name
        """
        return {name: scorer(getattr(raw, name)) for name, scorer in SCORERS}

    def _generate_summary(self, items: Dict[str, SignalResult], total: int) -> str:
        """
        Generate the one-line recap.

        Args:
            items: Scored signals
            total: Clamped total score

        Returns:
            Score sentence followed by optional Strong and Check clauses
        """
        strengths = [
            label for name, label in [
                ("title", "title"),
                ("meta_description", "meta description"),
                ("canonical", "canonical"),
                ("structured_data", "structured data"),
            ]
            if items[name].status == GOOD
        ]

        issues = []
        if items["headings"].status != GOOD:
            issues.append("headings")
        if items["images"].status != GOOD:
            issues.append("image alts")
        # Robots is only an issue when actively blocking
        if items["robots"].status == BAD:
            issues.append("robots (noindex/nofollow)")
        if items["word_count"].status != GOOD:
            issues.append("content length")

        parts = [f"SEO score: {total}/100."]
        if strengths:
            parts.append(f"Strong: {', '.join(strengths)}.")
        if issues:
            parts.append(f"Check: {', '.join(issues)}.")

        return " ".join(parts)


def analyze(document: PageDocument) -> AnalysisReport:
    """Analyze a document with a default engine."""
    return ScoringEngine().analyze(document)
