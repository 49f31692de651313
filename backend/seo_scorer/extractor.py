"""
Signal extraction module for SEO scoring.
Reads on-page signals from a parsed document without modifying it.
"""

import copy
import json
import re
import logging
from typing import Dict
from .document import PageDocument
from .signals import ExtractedSignals, ImageStats, StructuredDataStats

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
# Maximal runs of Unicode letters/digits
_WORD = re.compile(r"[^\W_]+")

JSON_LD_TYPE = "application/ld+json"
INVISIBLE_TAGS = ["script", "style", "noscript", "template", "svg"]


def normalize_space(text) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE.sub(" ", text or "").strip()


def _reject_constant(name: str):
    """NaN and Infinity are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


class SignalExtractor:
    """Extracts raw SEO signals from a page document."""

    def extract_all(self, document: PageDocument) -> ExtractedSignals:
        """
        Read all nine signals from a document.

        Args:
            document: Parsed page

        Returns:
            ExtractedSignals with normalized values
        """
        return ExtractedSignals(
            title=self.extract_title(document),
            meta_description=self.extract_meta_content(document, "description"),
            meta_keywords=self.extract_meta_content(document, "keywords"),
            headings=self.extract_heading_counts(document),
            images=self.extract_image_alt_stats(document),
            canonical=self.extract_canonical_href(document),
            robots=self.extract_meta_content(document, "robots"),
            structured_data=self.extract_structured_data(document),
            word_count=self.extract_word_count(document),
        )

    def extract_title(self, document: PageDocument) -> str:
        return normalize_space(document.title)

    def extract_meta_content(self, document: PageDocument, name: str) -> str:
        """
        Read the content attribute of the first meta tag with a given name.

        Args:
            document: Parsed page
            name: Value of the meta tag's name attribute

        Returns:
            Normalized content, or empty string if no tag matches
        """
        meta = document.find("meta", {"name": name})
        if meta is None:
            return ""
        return normalize_space(meta.get("content"))

    def extract_canonical_href(self, document: PageDocument) -> str:
        """Href of the first <link> whose rel is exactly "canonical"."""
        for link in document.find_all("link"):
            rel = link.get("rel")
            # rel is parsed as a multi-valued attribute
            if isinstance(rel, list):
                rel = " ".join(rel)
            if rel == "canonical":
                return normalize_space(link.get("href"))
        return ""

    def extract_structured_data(self, document: PageDocument) -> StructuredDataStats:
        """
        Count JSON-LD blocks and how many of them parse.

        Blocks that are empty after normalization are skipped entirely.
        A block that fails to parse is counted as a parse error.

        Args:
            document: Parsed page

        Returns:
            StructuredDataStats with count, parsed_count and parse_errors
        """
        stats = StructuredDataStats()

        for script in document.find_all("script", {"type": JSON_LD_TYPE}):
            raw = normalize_space(script.get_text())
            if not raw:
                continue

            stats.count += 1
            try:
                # Object or array
                json.loads(raw, parse_constant=_reject_constant)
                stats.parsed_count += 1
            except (ValueError, RecursionError) as e:
                logger.debug(f"Invalid JSON-LD block: {e}")
                stats.parse_errors += 1

        return stats

    def extract_heading_counts(self, document: PageDocument) -> Dict[str, int]:
        return {
            f"h{level}": len(document.find_all(f"h{level}"))
            for level in range(1, 7)
        }

    def extract_image_alt_stats(self, document: PageDocument) -> ImageStats:
        """
        Measure alt-text coverage among images that have a usable src.

        Images without a src (tracking placeholders, lazy-load stubs) are
        left out of both counts.

        Args:
            document: Parsed page

        Returns:
            ImageStats with total, with_alt and without_alt
        """
        relevant = [
            img for img in document.find_all("img")
            if normalize_space(img.get("src"))
        ]
        with_alt = sum(1 for img in relevant if normalize_space(img.get("alt")))

        return ImageStats(
            total=len(relevant),
            with_alt=with_alt,
            without_alt=len(relevant) - with_alt,
        )

    def extract_word_count(self, document: PageDocument) -> int:
        """
        Count words in the visible body text.

        Script, style, noscript, template and svg subtrees are removed from
        a copy of the body before reading its text.

        Args:
            document: Parsed page

        Returns:
            Number of letter/digit runs, 0 if the page has no body
        """
        body = document.body
        if body is None:
            return 0

        clone = copy.copy(body)
        for tag in clone.find_all(INVISIBLE_TAGS):
            tag.extract()

        # Text nodes join without separators, so inline markup stays inside its word
        text = normalize_space(clone.get_text())
        if not text:
            return 0

        return len(_WORD.findall(text))
