"""Shared pytest fixtures: temporary site trees and configurations."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from mdsite.core.models import SiteConfiguration
from mdsite.rendering.engine import TemplateRenderer

BASE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>{{ title }}</title></head>
<body>
{{ content }}
</body>
</html>
"""


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    return tmp_path / "output"


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "base.html").write_text(BASE_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def make_config(
    content_root: Path, output_root: Path, template_dir: Path
) -> Callable[..., SiteConfiguration]:
    """Build a SiteConfiguration for the temporary site, with overrides."""

    def _make(**overrides) -> SiteConfiguration:
        values = {
            "content_root": content_root,
            "output_root": output_root,
            "template_glob_or_dir": str(template_dir),
            "base_template_name": "base.html",
        }
        values.update(overrides)
        return SiteConfiguration(**values)

    return _make


@pytest.fixture
def renderer(template_dir: Path) -> TemplateRenderer:
    return TemplateRenderer(template_dir)


def write_markdown(path: Path, text: str) -> Path:
    """Create a Markdown file, including any missing parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
