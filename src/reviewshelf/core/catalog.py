"""Review catalog: normalize documents into records and order them newest first"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Iterable, Optional

from reviewshelf.core.dates import parse_date
from reviewshelf.core.frontmatter import read_metadata
from reviewshelf.core.models import ReviewRecord
from reviewshelf.core.utils.filename import infer_date, infer_permalink, infer_title
from reviewshelf.sources.base import ReviewSource


logger = logging.getLogger(__name__)


def resolve_record(filename: str, text: Optional[str]) -> Optional[ReviewRecord]:
    """Merge front matter with filename inference; None unless title, date and permalink are all set."""
    if not filename or text is None:
        return None
    meta = read_metadata(text)
    title = meta.get('title') or infer_title(filename)
    date_value = meta.get('date') or infer_date(filename)
    permalink = meta.get('permalink') or infer_permalink(filename)
    if not (title and date_value and permalink):
        logger.debug("Excluding %s: missing title, date or permalink", filename)
        return None
    return ReviewRecord(title=title, date=date_value, permalink=permalink, source_filename=filename)


def _sort_key(record: ReviewRecord) -> tuple[bool, date, str]:
    parsed = parse_date(record.date)
    return parsed is not None, parsed or date.min, record.date


def sort_records(records: Iterable[ReviewRecord]) -> list[ReviewRecord]:
    """Newest first; records with unparseable dates follow, by raw date string descending."""
    return sorted(records, key=_sort_key, reverse=True)


def build_catalog(documents: Iterable[tuple[str, Optional[str]]]) -> list[ReviewRecord]:
    """Build the sorted list view from (filename, text) pairs; text None means unavailable."""
    records = [resolve_record(filename, text) for filename, text in documents]
    return sort_records(r for r in records if r is not None)


def fetch_documents(source: ReviewSource, max_workers: int = 8) -> list[tuple[str, Optional[str]]]:
    """Fetch every listed document in parallel; unavailable documents come back as (filename, None)."""
    filenames = sorted(source.list_filenames())
    if not filenames:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        texts = list(pool.map(source.fetch, filenames))
    return list(zip(filenames, texts))


def load_catalog(source: ReviewSource, max_workers: int = 8) -> list[ReviewRecord]:
    """List, fetch and resolve documents from source; sorting waits for every fetch."""
    documents = fetch_documents(source, max_workers)
    catalog = build_catalog(documents)
    logger.info("Catalog: %d of %d document(s) listed", len(catalog), len(documents))
    return catalog
