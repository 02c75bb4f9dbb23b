"""Localized phrases for relative dates and user-facing messages (ko, en)"""


DEFAULT_LOCALE = 'ko'

TEXT: dict[str, dict] = {
    'ko': {
        'today': '오늘',
        'day': lambda n: f"{n}일 전",
        'week': lambda n: f"{n}주 전",
        'month': lambda n: f"{n}달 전",
        'year': lambda n: f"{n}년 전",
        'published': lambda year: f"출간 {year}",
        'empty': '서평이 아직 없어요.',
        'missing_file': '파일을 찾을 수 없어요.',
        'load_failed': '리뷰를 불러오지 못했어요.',
    },
    'en': {
        'today': 'Today',
        'day': lambda n: f"{n} days ago",
        'week': lambda n: f"{n} weeks ago",
        'month': lambda n: f"{n} months ago",
        'year': lambda n: f"{n} years ago",
        'published': lambda year: f"Published {year}",
        'empty': 'No reviews yet.',
        'missing_file': 'Could not find the review file.',
        'load_failed': 'Could not load the review.',
    },
}


def resolve_locale(tag: str | None) -> str:
    """'en', 'en-US', 'EN_gb' -> 'en'; anything else (including None) -> 'ko'."""
    if tag and tag.strip().lower().startswith('en'):
        return 'en'
    return DEFAULT_LOCALE


def message(key: str, lang: str | None = None) -> str:
    return TEXT[resolve_locale(lang)][key]
