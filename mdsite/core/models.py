"""Domain models for a site build: configuration, documents, outcomes."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class PathLayout(str, Enum):
    """How source paths map onto the output root."""

    FLAT = "flat"
    MIRROR = "mirror"


class TitleSource(str, Enum):
    """Where a page's title comes from."""

    FIXED = "fixed"
    FIRST_HEADING = "first_heading"


class OutcomeStatus(str, Enum):
    WRITTEN = "written"
    FAILED = "failed"


class FailureKind(str, Enum):
    READ = "read"
    RENDER = "render"
    WRITE = "write"
    DIRECTORY = "directory"


class SiteConfiguration(BaseModel):
    """Resolved configuration for one build run."""

    model_config = ConfigDict(frozen=True)

    content_root: Path = Field(..., description="Directory scanned for Markdown")
    output_root: Path = Field(..., description="Directory receiving HTML pages")
    template_glob_or_dir: str = Field(
        ..., description="Template directory or glob pattern of template files"
    )
    base_template_name: str = Field(..., description="Template wrapping each page")
    path_layout: PathLayout = Field(default=PathLayout.FLAT)
    title_source: TitleSource = Field(default=TitleSource.FIXED)
    default_title: str = Field(default="Untitled", description="Fixed page title")
    file_mode: int = Field(default=0o644, description="File permissions (octal)")


class SourceDocument(BaseModel):
    """A discovered Markdown file and its raw text."""

    path: Path
    text: str


class RenderedPage(BaseModel):
    """A fully rendered HTML document and where it goes."""

    html: str
    destination: Path


class ConversionOutcome(BaseModel):
    """Result of processing one source file."""

    source: Path
    status: OutcomeStatus
    destination: Path | None = None
    failure: FailureKind | None = None
    detail: str | None = None

    @classmethod
    def written(cls, source: Path, destination: Path) -> ConversionOutcome:
        return cls(source=source, status=OutcomeStatus.WRITTEN, destination=destination)

    @classmethod
    def failed(
        cls,
        source: Path,
        failure: FailureKind,
        detail: str,
        destination: Path | None = None,
    ) -> ConversionOutcome:
        return cls(
            source=source,
            status=OutcomeStatus.FAILED,
            destination=destination,
            failure=failure,
            detail=detail,
        )

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.WRITTEN


class RunSummary(BaseModel):
    """Aggregated outcomes of a build run."""

    outcomes: list[ConversionOutcome] = Field(default_factory=list)
    collisions: list[Path] = Field(
        default_factory=list, description="Destinations written more than once"
    )

    @property
    def discovered(self) -> int:
        return len(self.outcomes)

    @property
    def written(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failures(self) -> list[ConversionOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return self.failed == 0
