"""File I/O operations for rendered pages."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..core.errors import DirectoryCreateError, WriteError
from ..core.models import RenderedPage

logger = logging.getLogger(__name__)


def ensure_directory(directory: Path) -> None:
    """Create a directory and any missing parents; idempotent.

    Raises:
        DirectoryCreateError: If the directory cannot be created
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(
            f"Cannot create directory {directory}: {exc}", directory
        ) from exc


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    ensure_directory(path.parent)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)

    Raises:
        DirectoryCreateError: If the parent directory cannot be created
        WriteError: If the file cannot be written
    """
    ensure_parent(path)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}", path) from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}", path) from exc
    finally:
        if os.path.exists(tmp_name):
            try:
                os.remove(tmp_name)
            except OSError as exc:
                logger.debug(f"Could not remove temporary file {tmp_name}: {exc}")


def write_page(page: RenderedPage, mode: int = 0o644) -> Path:
    """Persist a rendered page, overwriting any existing file.

    Returns:
        The destination path written
    """
    atomic_write_text(page.destination, page.html, mode=mode)
    return page.destination
