"""
Base source interface for loading pages to analyze.

Every source MUST:
1. Return a PageDocument whose url is the address the HTML was actually read from
2. Raise PageUnavailableError for any fetch or read failure (runner handles it)
3. Never hand a partially loaded page to the scorer
"""

from abc import ABC, abstractmethod
import logging

from config import FetchConfig
from seo_scorer.document import PageDocument

logger = logging.getLogger(__name__)


class PageUnavailableError(Exception):
    """Raised when a page cannot be loaded."""

    def __init__(self, target: str, reason: str):
        super().__init__(f"{target}: {reason}")
        self.target = target
        self.reason = reason


class BasePageSource(ABC):
    """
    Abstract base class for page sources.

    Each source is responsible for turning one target (URL or path) into a
    parsed document.
    """

    def __init__(self, target: str, fetch_config: FetchConfig):
        """
        Initialize source for a single target.

        Args:
            target: URL or filesystem path to load
            fetch_config: FetchConfig with timeout and user agent
        """
        self.target = target
        self.fetch_config = fetch_config
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def load(self) -> PageDocument:
        """
        Load and parse the target page.

        Returns:
            PageDocument for the loaded HTML

        Raises:
            PageUnavailableError: If the page cannot be fetched or read
        """
        raise NotImplementedError
