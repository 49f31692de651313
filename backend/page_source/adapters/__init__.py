"""
Page source registry.

This module maps URL schemes to page sources.
Use get_source() to retrieve a source instance for a target.
"""

from typing import Dict, Type
from urllib.parse import urlparse
from config import FetchConfig
from page_source.base import BasePageSource
from page_source.adapters.web import HttpPageSource
from page_source.adapters.file import FilePageSource


# Registry of available sources
# Maps URL scheme to source class; bare paths have an empty scheme
SOURCES: Dict[str, Type[BasePageSource]] = {
    "http": HttpPageSource,
    "https": HttpPageSource,
    "file": FilePageSource,
    "": FilePageSource,
}


def get_source(target: str, fetch_config: FetchConfig) -> BasePageSource:
    """
    Get source instance for a target.

    Args:
        target: URL or filesystem path
        fetch_config: FetchConfig passed through to the source

    Returns:
        Instantiated source for the target

    Raises:
        ValueError: If the target's scheme is not registered
    """
    scheme = urlparse(target).scheme.lower()
    source_class = SOURCES.get(scheme)
    if not source_class:
        raise ValueError(
            f"Unsupported scheme: {scheme}. "
            f"Available schemes: {', '.join(s for s in SOURCES if s)}"
        )
    return source_class(target, fetch_config)
