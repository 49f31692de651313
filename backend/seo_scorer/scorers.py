"""
Per-signal scoring functions.
Each scorer maps one extracted value to a SignalResult using fixed thresholds.
"""

import re
from typing import Callable, Dict, List, Tuple, Any
from .signals import (
    SignalResult,
    ImageStats,
    StructuredDataStats,
    GOOD,
    WARN,
    BAD,
)

# Maximum points per signal; sums to 99
MAX_POINTS: Dict[str, int] = {
    "title": 20,
    "meta_description": 20,
    "meta_keywords": 3,
    "headings": 15,
    "images": 10,
    "canonical": 5,
    "robots": 6,
    "structured_data": 10,
    "word_count": 10,
}

TITLE_MIN, TITLE_MAX = 10, 60
DESCRIPTION_MIN, DESCRIPTION_MAX = 50, 160
ALT_GOOD_RATIO = 0.9
ALT_FAIR_RATIO = 0.6
WORDS_GOOD = 300
WORDS_FAIR = 150
ROBOTS_BLOCKING_TERMS = ("noindex", "nofollow")

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


def score_title(title: str) -> SignalResult:
    if not title:
        return SignalResult(0, BAD, "Missing", "No <title> found.")

    length = len(title)
    if TITLE_MIN <= length <= TITLE_MAX:
        return SignalResult(
            20, GOOD, f"{length} chars",
            f"Present and within recommended length ({length} chars).",
        )

    if length < TITLE_MIN:
        detail = f"Present but very short ({length} chars)."
    else:
        detail = f"Present but long ({length} chars)."
    return SignalResult(12, WARN, f"{length} chars", detail)


def score_meta_description(description: str) -> SignalResult:
    if not description:
        return SignalResult(0, BAD, "Missing", "No meta description found.")

    length = len(description)
    if DESCRIPTION_MIN <= length <= DESCRIPTION_MAX:
        return SignalResult(
            20, GOOD, f"{length} chars",
            f"Present and within recommended length ({length} chars).",
        )

    if length < DESCRIPTION_MIN:
        detail = f"Present but short ({length} chars)."
    else:
        detail = f"Present but long ({length} chars)."
    return SignalResult(12, WARN, f"{length} chars", detail)


def score_meta_keywords(keywords: str) -> SignalResult:
    # Optional tag, absence is not penalized as a failure
    if not keywords:
        return SignalResult(
            0, WARN, "Not set",
            "Meta keywords are optional and often ignored.",
        )

    return SignalResult(
        3, GOOD, "Present",
        f"Present ({len(keywords)} chars). Note: often ignored by search engines.",
    )


def score_headings(counts: Dict[str, int]) -> SignalResult:
    """
    Score heading structure; exactly one H1 is ideal.

    Args:
        counts: Heading counts keyed h1..h6

    Returns:
        SignalResult whose detail ends with a per-level breakdown
    """
    h1 = counts.get("h1", 0)
    total = sum(counts.values())
    breakdown = ", ".join(
        f"H{level}:{counts.get(f'h{level}', 0)}" for level in range(1, 7)
    )

    if total == 0:
        result = SignalResult(0, BAD, "None", "No headings found (H1–H6).")
    elif h1 == 1:
        result = SignalResult(
            15, GOOD, f"H1×{h1}",
            f"Headings present. H1 count is ideal (1). Total headings: {total}.",
        )
    elif h1 == 0:
        result = SignalResult(
            7, WARN, "No H1",
            f"Headings found but missing H1. Total headings: {total}.",
        )
    else:
        result = SignalResult(
            7, WARN, f"H1×{h1}",
            f"Multiple H1s found ({h1}). Total headings: {total}.",
        )

    result.detail = f"{result.detail} ({breakdown})"
    return result


def score_images(images: ImageStats) -> SignalResult:
    """
    Score alt-text coverage.

    A page without images gets neutral partial credit.

    Args:
        images: Alt coverage stats

    Returns:
        SignalResult with the rounded coverage percentage as badge
    """
    if images.total == 0:
        return SignalResult(6, WARN, "No images", "No images detected on the page.")

    ratio = images.with_alt / images.total
    # Round half up
    pct = int(ratio * 100 + 0.5)
    coverage = f"{images.with_alt}/{images.total} images have alt text ({pct}%)."

    if ratio >= ALT_GOOD_RATIO:
        return SignalResult(10, GOOD, f"{pct}%", coverage)

    missing = f"{coverage} {images.without_alt} missing."
    if ratio >= ALT_FAIR_RATIO:
        return SignalResult(6, WARN, f"{pct}%", missing)

    return SignalResult(2, BAD, f"{pct}%", missing)


def score_canonical(href: str) -> SignalResult:
    if not href:
        return SignalResult(0, WARN, "Missing", "No canonical link tag found.")

    if _ABSOLUTE_URL.match(href) or href.startswith("/"):
        return SignalResult(5, GOOD, "Present", f"Canonical present: {href}")

    return SignalResult(
        3, WARN, "Present", f"Canonical present but looks unusual: {href}"
    )


def score_robots(robots: str) -> SignalResult:
    """
    Score the robots meta directive.

    Any "noindex" or "nofollow" substring counts as blocking; the directive
    grammar is not parsed further.

    Args:
        robots: Robots meta content

    Returns:
        SignalResult, bad when blocking
    """
    if not robots:
        return SignalResult(
            6, GOOD, "Not set", "No robots meta tag found (often fine)."
        )

    value = robots.lower()
    if any(term in value for term in ROBOTS_BLOCKING_TERMS):
        return SignalResult(
            0, BAD, "Blocking", f'Robots meta may prevent indexing: "{robots}"'
        )

    return SignalResult(6, GOOD, "OK", f'Robots meta: "{robots}"')


def score_structured_data(stats: StructuredDataStats) -> SignalResult:
    if stats.count == 0:
        return SignalResult(0, WARN, "None", "No JSON-LD structured data found.")

    if stats.parsed_count > 0 and stats.parse_errors == 0:
        plural = "" if stats.parsed_count == 1 else "s"
        return SignalResult(
            10, GOOD, f"{stats.parsed_count} block{plural}",
            f"Found {stats.count} JSON-LD script tag(s); "
            f"{stats.parsed_count} parsed successfully.",
        )

    return SignalResult(
        5, WARN, "Partial",
        f"Found {stats.count} JSON-LD script tag(s); {stats.parsed_count} parsed; "
        f"{stats.parse_errors} parse error(s).",
    )


def score_word_count(words: int) -> SignalResult:
    if words == 0:
        return SignalResult(0, BAD, "0", "No body text detected.")

    if words >= WORDS_GOOD:
        return SignalResult(
            10, GOOD, str(words), f"Good amount of content ({words} words)."
        )

    if words >= WORDS_FAIR:
        return SignalResult(
            6, WARN, str(words),
            f"Some content ({words} words); consider adding more.",
        )

    return SignalResult(2, WARN, str(words), f"Thin content ({words} words).")


# Ordered signal name -> scorer table; names match ExtractedSignals fields
SCORERS: List[Tuple[str, Callable[[Any], SignalResult]]] = [
    ("title", score_title),
    ("meta_description", score_meta_description),
    ("meta_keywords", score_meta_keywords),
    ("headings", score_headings),
    ("images", score_images),
    ("canonical", score_canonical),
    ("robots", score_robots),
    ("structured_data", score_structured_data),
    ("word_count", score_word_count),
]
