"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from mdsite.cli.app import EXIT_FATAL, EXIT_PAGE_FAILURES, app
from tests.conftest import write_markdown

runner = CliRunner()


@pytest.fixture(autouse=True)
def bundled_templates(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["MDSITE_TEMPLATE_DIR", "MDSITE_BASE_TEMPLATE", "MDSITE_PATH_LAYOUT"]:
        monkeypatch.delenv(name, raising=False)


def test_build_writes_pages(content_root: Path, output_root: Path) -> None:
    write_markdown(content_root / "hello.md", "# Hello\n\nThis is a test.")

    result = runner.invoke(
        app, ["build", "--content", str(content_root), "--output", str(output_root)]
    )

    assert result.exit_code == 0, result.output
    page = (output_root / "hello.html").read_text(encoding="utf-8")
    assert "<h1>Hello</h1>" in page
    assert "<title>Untitled</title>" in page


def test_build_defaults_to_content_and_output_in_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    write_markdown(tmp_path / "content" / "a" / "page.md", "text")

    result = runner.invoke(app, ["build"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "output" / "page.html").is_file()


def test_page_failure_sets_exit_code(
    content_root: Path, output_root: Path
) -> None:
    write_markdown(content_root / "a.md", "a")
    write_markdown(content_root / "b.md", "b")
    output_root.mkdir()
    (output_root / "a.html").mkdir()

    result = runner.invoke(
        app, ["build", "--content", str(content_root), "--output", str(output_root)]
    )

    assert result.exit_code == EXIT_PAGE_FAILURES
    assert (output_root / "b.html").is_file()


def test_template_load_failure_is_fatal(
    content_root: Path,
    output_root: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    write_markdown(content_root / "a.md", "a")
    monkeypatch.setenv("MDSITE_TEMPLATE_DIR", str(tmp_path / "missing"))

    result = runner.invoke(
        app, ["build", "--content", str(content_root), "--output", str(output_root)]
    )

    assert result.exit_code == EXIT_FATAL
    assert not output_root.exists()
