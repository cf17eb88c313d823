"""Tests for writing rendered pages."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from mdsite.core.errors import DirectoryCreateError, WriteError
from mdsite.core.models import FailureKind, RenderedPage
from mdsite.rendering.io import atomic_write_text, ensure_directory, write_page


def test_write_page_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "out" / "nested" / "page.html"

    written = write_page(RenderedPage(html="<p>hi</p>", destination=target))

    assert written == target
    assert target.read_text(encoding="utf-8") == "<p>hi</p>"


def test_write_page_overwrites_existing(tmp_path: Path) -> None:
    target = tmp_path / "page.html"
    target.write_text("old", encoding="utf-8")

    write_page(RenderedPage(html="new", destination=target))

    assert target.read_text(encoding="utf-8") == "new"


def test_write_leaves_no_temporary_files(tmp_path: Path) -> None:
    atomic_write_text(tmp_path / "page.html", "x")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["page.html"]


def test_ensure_directory_is_idempotent(tmp_path: Path) -> None:
    ensure_directory(tmp_path / "a" / "b")
    ensure_directory(tmp_path / "a" / "b")

    assert (tmp_path / "a" / "b").is_dir()


def test_parent_is_a_file_raises_directory_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")

    with pytest.raises(DirectoryCreateError) as excinfo:
        write_page(RenderedPage(html="x", destination=blocker / "page.html"))

    assert excinfo.value.kind is FailureKind.DIRECTORY
    assert isinstance(excinfo.value, WriteError)


def test_destination_is_a_directory_raises_write_error(tmp_path: Path) -> None:
    target = tmp_path / "page.html"
    target.mkdir()

    with pytest.raises(WriteError) as excinfo:
        write_page(RenderedPage(html="x", destination=target))

    assert excinfo.value.kind is FailureKind.WRITE


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_read_only_directory_raises_write_error(tmp_path: Path) -> None:
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0o555)
    try:
        with pytest.raises(WriteError):
            write_page(RenderedPage(html="x", destination=locked / "page.html"))
    finally:
        locked.chmod(0o755)
