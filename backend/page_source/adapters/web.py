"""
HTTP source for fetching live pages.
"""

import requests
from page_source.base import BasePageSource, PageUnavailableError
from seo_scorer.document import PageDocument


class HttpPageSource(BasePageSource):
    """Source for http and https URLs."""

    def load(self) -> PageDocument:
        """
        Fetch the page with a GET request.

        Returns:
            PageDocument addressed by the final URL after redirects

        Raises:
            PageUnavailableError: On timeout, connection error or non-2xx status
        """
        try:
            response = requests.get(
                self.target,
                timeout=self.fetch_config.timeout,
                headers={'User-Agent': self.fetch_config.user_agent}
            )
            response.raise_for_status()
        except requests.exceptions.Timeout:
            self.logger.error(f"Timeout fetching {self.target}")
            raise PageUnavailableError(
                self.target, f"Timeout after {self.fetch_config.timeout}s"
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request error fetching {self.target}: {e}")
            raise PageUnavailableError(self.target, str(e))

        self.logger.info(
            f"Fetched {response.url} ({response.status_code}, {len(response.text)} chars)"
        )
        return PageDocument.from_html(response.text, url=response.url)
