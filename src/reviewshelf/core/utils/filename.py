"""Best-effort title, date and permalink inference from review filenames"""

import re


DOC_EXTENSION_RE = re.compile(r'\.md$', re.IGNORECASE)
DATED_NAME_RE = re.compile(r'^(?:\d{4}-\d{2}-\d{2}|\d{8})[-_](.+)$')
ISO_DATE_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})')
COMPACT_DATE_RE = re.compile(r'^(\d{8})')
TOKEN_SPLIT_RE = re.compile(r'[_-]')
NON_DATE_CHARS_RE = re.compile(r'[^0-9-]')


def strip_extension(filename: str) -> str:
    return DOC_EXTENSION_RE.sub('', filename)


def _slug(filename: str) -> str:
    base = strip_extension(filename)
    m = DATED_NAME_RE.match(base)
    if m:
        return m.group(1)
    return '_'.join(base.split('_')[1:]) or base


def infer_title(filename: str) -> str:
    """'2024-01-15_my-review.md' -> 'my-review'; names without a date token lose their first '_' token."""
    return _slug(filename)


def infer_permalink(filename: str) -> str:
    return _slug(filename)


def infer_date(filename: str) -> str:
    """Leading YYYY-MM-DD, else leading YYYYMMDD, else the first token reduced to digits and dashes.

    The precedence is fixed; existing filenames depend on it. May return ''.
    """
    base = strip_extension(filename).replace('_', '-')
    m = ISO_DATE_RE.match(base)
    if m:
        return m.group(1)
    m = COMPACT_DATE_RE.match(base)
    if m:
        return m.group(1)
    token = TOKEN_SPLIT_RE.split(filename)[0]
    return NON_DATE_CHARS_RE.sub('', token)
