"""
Signal dataclasses for SEO scoring.
Raw observations extracted from a page, per-signal scoring results,
and the assembled analysis report.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, Optional

GOOD = "good"
WARN = "warn"
BAD = "bad"

# Report order; also the field names on ExtractedSignals
SIGNAL_NAMES = (
    "title",
    "meta_description",
    "meta_keywords",
    "headings",
    "images",
    "canonical",
    "robots",
    "structured_data",
    "word_count",
)


@dataclass
class SignalResult:
    """Scored outcome for one signal."""
    points: int  # 0 to the signal's maximum
    status: str  # good, warn, bad
    badge: str  # short display label
    detail: str


@dataclass
class ImageStats:
    """Alt-text coverage for images with a usable src."""
    total: int = 0
    with_alt: int = 0
    without_alt: int = 0


@dataclass
class StructuredDataStats:
    """JSON-LD block counts."""
    count: int = 0
    parsed_count: int = 0
    parse_errors: int = 0


def empty_heading_counts() -> Dict[str, int]:
    return {f"h{level}": 0 for level in range(1, 7)}


@dataclass
class ExtractedSignals:
    """Raw, whitespace-normalized observations from a document."""
    title: str = ""
    meta_description: str = ""
    meta_keywords: str = ""
    headings: Dict[str, int] = field(default_factory=empty_heading_counts)
    images: ImageStats = field(default_factory=ImageStats)
    canonical: str = ""
    robots: str = ""
    structured_data: StructuredDataStats = field(default_factory=StructuredDataStats)
    word_count: int = 0


@dataclass
class AnalysisReport:
    """Full analysis of one document."""
    generated_at: datetime
    url: Optional[str]
    total: int  # clamped 0-100
    items: Dict[str, SignalResult]
    raw: ExtractedSignals
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the report to plain JSON-compatible data.

        Returns:
            Dictionary with page, score, raw, items and summary keys
        """
        return {
            "generated_at": self.generated_at.isoformat(),
            "page": {"url": self.url},
            "score": {"total": self.total},
            "raw": asdict(self.raw),
            "items": {name: asdict(result) for name, result in self.items.items()},
            "summary": self.summary,
        }
