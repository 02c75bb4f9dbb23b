"""Extract .md filenames from a web server's directory-listing HTML"""

import re
from urllib.parse import unquote

from bs4 import BeautifulSoup

from reviewshelf.sources.base import is_document_name


HREF_RE = re.compile(r'href="([^"]+\.md)"', re.IGNORECASE)


def _basename(href: str) -> str:
    """Last path segment of the decoded href; '' for Windows-style paths."""
    name = unquote(href.split('?')[0].split('#')[0]).split('/')[-1]
    return '' if '\\' in name else name


def _anchor_links(html: str) -> list[str]:
    soup = BeautifulSoup(html, 'html.parser')
    return [a['href'] for a in soup.find_all('a', href=True) if is_document_name(a['href'])]


def _regex_links(html: str) -> list[str]:
    return HREF_RE.findall(html)


def extract_markdown_links(html: str) -> set[str]:
    """Union of anchor hrefs found by BeautifulSoup and raw href="...md" matches, as bare filenames."""
    hrefs = _anchor_links(html) + _regex_links(html)
    return {name for name in map(_basename, hrefs) if name}
