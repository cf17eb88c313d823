"""Error taxonomy for a site build.

Fatal errors abort the run before any page is processed. Page errors are
raised by a single file's processing and stop only that file.
"""

from __future__ import annotations

from pathlib import Path

from .models import FailureKind


class MdsiteError(Exception):
    """Base class for all mdsite errors."""


class FatalConfigurationError(MdsiteError):
    """Raised when the run cannot start at all."""


class TemplateLoadError(FatalConfigurationError):
    """Raised when the template set cannot be loaded or parsed."""


class PageError(MdsiteError):
    """Raised when a single source file cannot be turned into a page."""

    kind: FailureKind

    def __init__(self, detail: str, path: Path | None = None) -> None:
        super().__init__(f"{path}: {detail}" if path is not None else detail)
        self.path = path
        self.detail = detail


class SourceReadError(PageError):
    """Raised when a source document cannot be read."""

    kind = FailureKind.READ


class RenderError(PageError):
    """Raised when a template reference is invalid for a render call."""

    kind = FailureKind.RENDER


class WriteError(PageError):
    """Raised when a rendered page cannot be written."""

    kind = FailureKind.WRITE


class DirectoryCreateError(WriteError):
    """Raised when the destination directory cannot be created."""

    kind = FailureKind.DIRECTORY
