"""Pipeline step functions: list, show and build orchestration over a review source"""

import logging
from pathlib import Path

from reviewshelf.config import Settings
from reviewshelf.core.catalog import build_catalog, fetch_documents, load_catalog
from reviewshelf.core.export import write_site
from reviewshelf.core.models import ReviewPage, ReviewRecord
from reviewshelf.core.review import build_review_page, load_review_page
from reviewshelf.sources.factory import open_source


logger = logging.getLogger(__name__)


def run_list(settings: Settings) -> list[ReviewRecord]:
    """Return the sorted catalog for settings.source."""
    source = open_source(settings.source, timeout=settings.timeout)
    return load_catalog(source, settings.max_workers)


def run_show(settings: Settings, filename: str | None) -> ReviewPage:
    """Render a single review; raises ReviewPageError with a localized message."""
    source = open_source(settings.source, timeout=settings.timeout)
    return load_review_page(source, filename, settings.lang)


def run_build(settings: Settings) -> tuple[list[ReviewRecord], list[Path]]:
    """Fetch every document once, then write the list page and one page per catalog record.

    Returns (records, written_paths).
    """
    source = open_source(settings.source, timeout=settings.timeout)
    documents = fetch_documents(source, settings.max_workers)
    records = build_catalog(documents)

    texts = dict(documents)
    pages = [build_review_page(r.source_filename, texts[r.source_filename], settings.lang) for r in records]
    written = write_site(records, pages, Path(settings.output_dir), settings.lang, settings.site_title)
    logger.info("Built %d review page(s) into %s", len(pages), settings.output_dir)
    return records, written
