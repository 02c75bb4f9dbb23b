"""Root test configuration: sample review documents and an in-memory source"""

import logging
from pathlib import Path

import pytest

from reviewshelf.log import LOGGER_NAME
from reviewshelf.sources.base import ReviewSource


REVIEW_WITH_FM = """\
---
title: "데미안"
date: 2024-03-01
permalink: demian
author: 헤르만 헤세
publication_year: 1919
---
# 첫 문장

새는 알에서 나오려고 **투쟁**한다.

- 성장
- 자아
"""

REVIEW_NO_FM = """\
# Notes

Plain body without front matter.
"""

REVIEW_TITLE_ONLY = """\
---
title: Only a title
---
Body.
"""

SAMPLE_REVIEWS = {
    "2024-03-01_demian.md": REVIEW_WITH_FM,
    "2024-01-01_first.md": REVIEW_NO_FM,
    "20240201-compact.md": REVIEW_NO_FM,
    "notes.md": REVIEW_TITLE_ONLY,
}


class MemorySource(ReviewSource):
    """Dict-backed source; filenames mapped to None simulate fetch failures."""

    def __init__(self, docs: dict):
        self.docs = dict(docs)
        self.fetched: list[str] = []

    def list_filenames(self) -> set[str]:
        return set(self.docs)

    def fetch(self, filename: str):
        self.fetched.append(filename)
        return self.docs.get(filename)


@pytest.fixture(name="memory_source")
def memory_source_fixture():
    return MemorySource(SAMPLE_REVIEWS)


@pytest.fixture(name="reviews_dir")
def reviews_dir_fixture(tmp_path) -> Path:
    """A directory of sample reviews plus a non-markdown file that must be ignored."""
    root = tmp_path / "reviews"
    root.mkdir()
    for name, text in SAMPLE_REVIEWS.items():
        (root / name).write_text(text, encoding="utf-8")
    (root / "cover.png").write_bytes(b"\x89PNG")
    return root


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no REVIEWSHELF_* env vars."""
    monkeypatch.chdir(tmp_path)
    for name in ("SOURCE", "LANG", "OUTPUT_DIR", "MAX_WORKERS", "TIMEOUT", "SITE_TITLE"):
        monkeypatch.delenv(f"REVIEWSHELF_{name}", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by CLI invocations; they hold the runner's closed stderr."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
