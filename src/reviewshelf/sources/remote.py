"""Review source served over HTTP (directory listing + raw file fetch)"""

import logging
from urllib.parse import quote

import requests

from reviewshelf.sources.base import ReviewSource
from reviewshelf.sources.listing import extract_markdown_links


logger = logging.getLogger(__name__)


class HttpSource(ReviewSource):
    def __init__(self, base_url: str, timeout: float = 10.0, session=None):
        self.base_url = base_url.rstrip('/') + '/'
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, url: str) -> str | None:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Error fetching %s: %s", url, e)
            return None
        if not response.ok:
            logger.warning("Error fetching %s: %s", url, response.status_code)
            return None
        if 'charset' not in response.headers.get('Content-Type', ''):
            response.encoding = 'utf-8'
        return response.text

    def list_filenames(self) -> set[str]:
        html = self._get(self.base_url)
        if html is None:
            return set()
        return extract_markdown_links(html)

    def fetch(self, filename: str) -> str | None:
        if not filename:
            return None
        return self._get(self.base_url + quote(filename, safe=''))
