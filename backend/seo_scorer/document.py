"""
Read-only document handle consumed by the signal extractor.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from bs4 import BeautifulSoup, Tag


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PageDocument:
    """
    Parsed page exposing the title, element queries, URL and a time source.

    The extractor only reads from the parsed tree; anything that needs to
    strip elements works on a copy.
    """

    def __init__(
        self,
        soup: BeautifulSoup,
        url: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize document handle.

        Args:
            soup: Parsed HTML tree
            url: Address the page was loaded from
            clock: Callable returning the current time (default: UTC now)
        """
        self._soup = soup
        self.url = url
        self._clock = clock or utc_now

    @classmethod
    def from_html(
        cls,
        html: str,
        url: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None
    ) -> "PageDocument":
        """Parse an HTML string into a document handle."""
        return cls(BeautifulSoup(html, "html.parser"), url=url, clock=clock)

    @property
    def title(self) -> str:
        """Text of the first HTML <title> element, or empty string."""
        # Titles inside inline svg label the graphic, not the page
        for title_elem in self._soup.find_all("title"):
            if title_elem.find_parent("svg") is None:
                return title_elem.get_text()
        return ""

    @property
    def body(self) -> Optional[Tag]:
        return self._soup.body

    def find(self, tag: str, attrs: Optional[Dict[str, str]] = None) -> Optional[Tag]:
        """First element with the given tag name and attribute values."""
        return self._soup.find(tag, attrs=attrs or {})

    def find_all(self, tag: str, attrs: Optional[Dict[str, str]] = None) -> List[Tag]:
        """All elements with the given tag name and attribute values."""
        return self._soup.find_all(tag, attrs=attrs or {})

    def now(self) -> datetime:
        return self._clock()
