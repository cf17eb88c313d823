"""Source file discovery and reading."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from ..core.errors import SourceReadError
from ..core.models import SourceDocument

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def _is_markdown_file(entry: os.DirEntry[str]) -> bool:
    # Path("x/.md").suffix is empty, so a bare ".md" dotfile never matches.
    if Path(entry.name).suffix != MARKDOWN_SUFFIX:
        return False
    return entry.is_file(follow_symlinks=False)


def iter_markdown_files(content_root: Path) -> Iterator[Path]:
    """Lazily yield every Markdown file under a content root.

    Only regular files with a case-sensitive ``.md`` suffix are yielded.
    Symlinks are neither yielded nor followed. Entries that fail during
    traversal are skipped so one unreadable subtree cannot abort a build.
    Names within a directory are visited in sorted order.

    Args:
        content_root: Directory to scan recursively

    Yields:
        Paths of Markdown source files
    """
    try:
        with os.scandir(content_root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.debug(f"Skipping unreadable directory {content_root}: {exc}")
        return

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from iter_markdown_files(Path(entry.path))
            elif _is_markdown_file(entry):
                yield Path(entry.path)
        except OSError as exc:
            logger.debug(f"Skipping {entry.path}: {exc}")


def read_source(path: Path) -> SourceDocument:
    """Read a source document.

    Raises:
        SourceReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(str(exc), path) from exc
    return SourceDocument(path=path, text=text)
