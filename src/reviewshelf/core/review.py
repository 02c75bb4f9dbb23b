"""Detail view: header metadata plus rendered body for a single review"""

import logging

from reviewshelf.core.frontmatter import parse_front_matter, split_front_matter
from reviewshelf.core.i18n import TEXT, message, resolve_locale
from reviewshelf.core.markdown import render_markdown
from reviewshelf.core.models import ReviewPage
from reviewshelf.core.utils.filename import infer_date, infer_title
from reviewshelf.sources.base import ReviewSource


logger = logging.getLogger(__name__)


class ReviewPageError(Exception):
    """A detail view that cannot be shown; str(error) is the localized message."""


def _meta_line(meta: dict[str, str], lang: str) -> str:
    parts = []
    if meta.get('author'):
        parts.append(meta['author'])
    if meta.get('publication_year'):
        parts.append(TEXT[lang]['published'](meta['publication_year']))
    return ' · '.join(parts)


def build_review_page(filename: str, text: str, lang: str = 'ko') -> ReviewPage:
    """Render one review. Title and date fall back to the filename and may end up empty."""
    lang = resolve_locale(lang)
    doc = split_front_matter(text)
    meta = parse_front_matter(doc.front_matter)
    return ReviewPage(
        filename=filename,
        title=meta.get('title') or infer_title(filename),
        date=meta.get('date') or infer_date(filename),
        author=meta.get('author', ''),
        publication_year=meta.get('publication_year', ''),
        meta_line=_meta_line(meta, lang),
        html=render_markdown(doc.body),
    )


def load_review_page(source: ReviewSource, filename: str | None, lang: str = 'ko') -> ReviewPage:
    """Fetch and render filename; raises ReviewPageError when it is missing or unavailable."""
    if not filename:
        raise ReviewPageError(message('missing_file', lang))
    text = source.fetch(filename)
    if text is None:
        logger.warning("Review %s is unavailable", filename)
        raise ReviewPageError(message('load_failed', lang))
    return build_review_page(filename, text, lang)
