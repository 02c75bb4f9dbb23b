"""Static site export: render list and detail pages through Jinja2 templates"""

import logging
from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

from reviewshelf.core.dates import format_relative_date
from reviewshelf.core.i18n import message, resolve_locale
from reviewshelf.core.models import ReviewPage, ReviewRecord
from reviewshelf.core.utils.filename import strip_extension


logger = logging.getLogger(__name__)


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
INDEX_FILE = "index.html"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
    )


def page_name(filename: str) -> str:
    """Output file name of a review page: '2024-01-15_x.md' -> '2024-01-15_x.html'."""
    return f"{strip_extension(filename)}.html"


def render_index(records: list[ReviewRecord], lang: str = 'ko', site_title: str = "Reviews", today=None) -> str:
    """List page: one entry per record with its relative date, or the localized empty message."""
    lang = resolve_locale(lang)
    entries = [
        {
            "title": r.title,
            "href": quote(page_name(r.source_filename)),
            "relative_date": format_relative_date(r.date, lang, today=today),
        }
        for r in records
    ]
    return _environment().get_template(INDEX_FILE).render(
        lang=lang, site_title=site_title, entries=entries, empty_message=message('empty', lang),
    )


def render_review(page: ReviewPage, lang: str = 'ko', site_title: str = "Reviews") -> str:
    """Detail page; page.html is inserted as-is since the renderer already escaped it."""
    return _environment().get_template("review.html").render(
        lang=resolve_locale(lang), site_title=site_title, page=page, index_href=INDEX_FILE,
    )


def write_site(
    records: list[ReviewRecord],
    pages: list[ReviewPage],
    output_dir: Path,
    lang: str = 'ko',
    site_title: str = "Reviews",
    ) -> list[Path]:
    """Write index.html plus one page per review into output_dir. Returns the written paths.

    Pages whose file name would land outside output_dir are skipped.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_root = output_dir.resolve()
    index_path = output_dir / INDEX_FILE
    index_path.write_text(render_index(records, lang, site_title), encoding='utf-8')
    written = [index_path]
    for page in pages:
        path = output_dir / page_name(page.filename)
        if path.resolve().parent != output_root:
            logger.warning("Skipping %s: page would be written outside %s", page.filename, output_root)
            continue
        path.write_text(render_review(page, lang, site_title), encoding='utf-8')
        written.append(path)
    return written
