"""Unit tests for core/pipeline.py"""

import pytest

from reviewshelf.config import Settings
from reviewshelf.core import pipeline
from reviewshelf.core.pipeline import run_build, run_list, run_show
from reviewshelf.core.review import ReviewPageError


@pytest.fixture(name="settings")
def settings_fixture(reviews_dir, tmp_path):
    return Settings(source=str(reviews_dir), output_dir=str(tmp_path / "dist"), max_workers=2)


def test_run_list(settings):
    """Records are listed newest first; undated documents are dropped."""
    assert [r.permalink for r in run_list(settings)] == ["demian", "compact", "first"]


def test_run_list_uses_load_catalog(settings, memory_source, monkeypatch):
    """list goes through load_catalog with the configured worker count."""
    calls = []

    def fake_load_catalog(source, max_workers):
        calls.append((source, max_workers))
        return []

    monkeypatch.setattr(pipeline, "open_source", lambda location, timeout: memory_source)
    monkeypatch.setattr(pipeline, "load_catalog", fake_load_catalog)
    assert run_list(settings) == []
    assert calls == [(memory_source, 2)]


def test_run_list_missing_source(tmp_path):
    """A missing review directory is an empty list, not an error."""
    assert run_list(Settings(source=str(tmp_path / "nope"))) == []


def test_run_show(settings):
    """A single review renders with its header."""
    page = run_show(settings, "2024-03-01_demian.md")
    assert page.title == "데미안"
    assert "<h1>" in page.html


def test_run_show_missing(settings):
    """An unknown filename raises the localized load error."""
    with pytest.raises(ReviewPageError):
        run_show(settings, "nope.md")


def test_run_build_writes_site(settings, tmp_path):
    """build writes the index plus a page per listed review."""
    records, written = run_build(settings)
    dist = tmp_path / "dist"
    assert len(records) == 3
    assert sorted(p.name for p in written) == sorted([
        "index.html", "2024-03-01_demian.html", "20240201-compact.html", "2024-01-01_first.html",
    ])
    index = (dist / "index.html").read_text(encoding="utf-8")
    assert index.index("데미안") < index.index("compact") < index.index("first")
    assert not (dist / "notes.html").exists()


def test_run_build_never_writes_outside_output_dir(settings, memory_source, monkeypatch, tmp_path):
    """A listed name that climbs out of the output directory produces no file there."""
    memory_source.docs = {
        "../../escaped.md": "---\ntitle: Escaped\ndate: 2024-05-01\npermalink: escaped\n---\nbody\n",
        "2024-01-01_first.md": "# First\n",
    }
    monkeypatch.setattr(pipeline, "open_source", lambda location, timeout: memory_source)
    records, written = run_build(settings)
    dist = (tmp_path / "dist").resolve()
    assert len(records) == 2
    assert all(p.resolve().parent == dist for p in written)
    assert not (tmp_path.parent / "escaped.html").exists()
