"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from reviewshelf.config import Settings, load_config
from reviewshelf.core.dates import format_relative_date
from reviewshelf.core.i18n import message
from reviewshelf.core.pipeline import run_build, run_list, run_show
from reviewshelf.core.review import ReviewPageError


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


SourceOpt = Annotated[Optional[str], typer.Option("--source", help="Review directory or listing URL")]
LangOpt = Annotated[Optional[str], typer.Option("--lang", help="Page language (en* = English, else Korean)")]
WorkersOpt = Annotated[Optional[int], typer.Option("--workers", help="Parallel document fetches")]


def list_cmd(
    source: SourceOpt = None,
    lang: LangOpt = None,
    workers: WorkersOpt = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print records as JSON")] = False,
    ):
    """List reviews newest first with their relative dates."""
    settings = _settings(overrides={"source": source, "lang": lang, "max_workers": workers})
    records = run_list(settings)

    if as_json:
        typer.echo(json.dumps([r.model_dump() for r in records], indent=2, ensure_ascii=False))
        return
    if not records:
        typer.echo(message('empty', settings.lang))
        return
    for r in records:
        typer.echo(f"{r.title}  {format_relative_date(r.date, settings.lang)}  {r.url}")


def show_cmd(
    filename: Annotated[str, typer.Argument(help="Review filename, e.g. 2024-01-15_my-review.md")] = "",
    source: SourceOpt = None,
    lang: LangOpt = None,
    out: Annotated[Optional[Path], typer.Option("--out", help="Write the rendered HTML body to this file")] = None,
    ):
    """Render a single review to HTML."""
    settings = _settings(overrides={"source": source, "lang": lang})
    try:
        page = run_show(settings, filename)
    except ReviewPageError as e:
        _fail(str(e))

    if out is not None:
        out.write_text(page.html, encoding="utf-8")
        typer.echo(f"  {page.filename} -> {out}")
        return
    for value in (page.title, page.date, page.meta_line):
        if value:
            typer.echo(value)
    typer.echo("")
    typer.echo(page.html)


def build_cmd(
    source: SourceOpt = None,
    lang: LangOpt = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    workers: WorkersOpt = None,
    ):
    """Write index.html and one HTML page per review."""
    settings = _settings(overrides={
        "source": source, "lang": lang, "output_dir": out, "max_workers": workers,
    })
    try:
        records, written = run_build(settings)
    except OSError as e:
        _fail("Build failed", e)
    for path in written:
        typer.echo(f"  {path}")
    typer.echo(f"Built {len(records)} review(s) to {settings.output_dir}/")
