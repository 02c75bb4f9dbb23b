"""Integration tests for the list, show and build commands"""

import json

from typer.testing import CliRunner

from reviewshelf.cli.cli import app


runner = CliRunner()


def test_list_cmd(reviews_dir):
    """list prints one line per review, newest first."""
    result = runner.invoke(app, ["list", "--source", str(reviews_dir)])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("데미안")
    assert "review.html?file=2024-03-01_demian.md" in lines[0]


def test_list_cmd_json(reviews_dir):
    """--json dumps the records including their detail URL."""
    result = runner.invoke(app, ["list", "--source", str(reviews_dir), "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [d["permalink"] for d in data] == ["demian", "compact", "first"]
    assert data[0]["url"] == "review.html?file=2024-03-01_demian.md"


def test_list_cmd_empty(tmp_path):
    """An empty source prints the localized empty message."""
    (tmp_path / "empty").mkdir()
    result = runner.invoke(app, ["list", "--source", str(tmp_path / "empty"), "--lang", "en"])
    assert result.exit_code == 0
    assert "No reviews yet." in result.output


def test_show_cmd(reviews_dir):
    """show prints the header and rendered HTML."""
    result = runner.invoke(app, ["show", "2024-03-01_demian.md", "--source", str(reviews_dir)])
    assert result.exit_code == 0, result.output
    assert "헤르만 헤세 · 출간 1919" in result.output
    assert "<strong>투쟁</strong>" in result.output


def test_show_cmd_out_file(reviews_dir, tmp_path):
    """--out writes the rendered body to a file."""
    out = tmp_path / "demian.html"
    result = runner.invoke(app, ["show", "2024-03-01_demian.md", "--source", str(reviews_dir), "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8").startswith("<h1>")


def test_show_cmd_missing_filename(reviews_dir):
    """Omitting the filename fails with the localized error."""
    result = runner.invoke(app, ["show", "--source", str(reviews_dir), "--lang", "en"])
    assert result.exit_code == 1
    assert "Could not find the review file." in result.output


def test_show_cmd_unavailable(reviews_dir):
    """An unknown filename fails with the load error."""
    result = runner.invoke(app, ["show", "missing.md", "--source", str(reviews_dir)])
    assert result.exit_code == 1
    assert "리뷰를 불러오지 못했어요." in result.output


def test_build_cmd(reviews_dir, tmp_path):
    """build produces index.html and one page per review."""
    out = tmp_path / "site"
    result = runner.invoke(app, ["-v", "build", "--source", str(reviews_dir), "--out-dir", str(out)])
    assert result.exit_code == 0, result.output
    assert (out / "index.html").exists()
    assert len(list(out.glob("*.html"))) == 4
    assert "Built 3 review(s)" in result.output


def test_invalid_config(tmp_path):
    """A broken config.yaml is reported and exits 1."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output
