"""Date parsing and calendar-day relative phrasing ("3일 전", "2 weeks ago")"""

import re
from datetime import date, datetime

from reviewshelf.core.i18n import TEXT, resolve_locale


COMPACT_RE = re.compile(r'^\d{8}$')

# Tried in order after datetime.fromisoformat; '.' and '/' are already '-'.
DATE_FORMATS = (
    '%Y-%m-%d',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%b %d, %Y',
    '%B %d, %Y',
    '%d %b %Y',
    '%d %B %Y',
)


def _parse_formats(candidate: str) -> date | None:
    try:
        return datetime.fromisoformat(candidate).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(candidate, fmt).date()
        except ValueError:
            continue
    return None


def parse_date(value) -> date | None:
    """Parse ISO dates and datetimes, '2024.01.15', '2024/1/5', 'Jan 15, 2024' or '20240115'; None if unparseable."""
    cleaned = str(value).strip()
    parsed = _parse_formats(cleaned.replace('.', '-').replace('/', '-'))
    if parsed is None and COMPACT_RE.match(cleaned):
        parsed = _parse_formats(f"{cleaned[:4]}-{cleaned[4:6]}-{cleaned[6:8]}")
    return parsed


def _relative(n: int, unit: str, lang: str) -> str:
    return TEXT[lang][unit](n)


def format_relative_date(value, lang: str = 'ko', today: date | None = None) -> str:
    """Phrase value relative to today by whole calendar days.

    Buckets: today (<= 0 days), days (< 7), weeks (days // 7 < 4),
    months (days // 30 < 12), years (days // 365). Month and year lengths
    are flat 30/365 day constants. Empty values give '', unparseable values
    are returned unchanged.
    """
    if not value:
        return ''
    target = parse_date(value)
    if target is None:
        return value
    lang = resolve_locale(lang)
    today = today or date.today()

    diff_days = (today - target).days
    if diff_days <= 0:
        return TEXT[lang]['today']
    if diff_days < 7:
        return _relative(diff_days, 'day', lang)
    weeks = diff_days // 7
    if weeks < 4:
        return _relative(weeks, 'week', lang)
    months = diff_days // 30
    if months < 12:
        return _relative(months, 'month', lang)
    return _relative(diff_days // 365, 'year', lang)
