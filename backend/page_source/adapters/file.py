"""
File source for analyzing saved HTML pages.
"""

from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname
from page_source.base import BasePageSource, PageUnavailableError
from seo_scorer.document import PageDocument


class FilePageSource(BasePageSource):
    """Source for file:// URLs and plain filesystem paths."""

    def _path(self) -> Path:
        if self.target.startswith("file:"):
            return Path(url2pathname(urlparse(self.target).path))
        return Path(self.target)

    def load(self) -> PageDocument:
        """
        Read the HTML file as UTF-8, replacing undecodable bytes.

        Returns:
            PageDocument addressed by the file's file:// URI

        Raises:
            PageUnavailableError: If the file is missing or unreadable
        """
        path = self._path().resolve()
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            self.logger.error(f"Error reading {path}: {e}")
            raise PageUnavailableError(self.target, e.strerror or str(e))

        self.logger.info(f"Read {path} ({len(html)} chars)")
        return PageDocument.from_html(html, url=path.as_uri())
