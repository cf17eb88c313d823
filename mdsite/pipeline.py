"""Site build pipeline.

Each discovered source moves through

    Discovered -> Read -> Converted -> Rendered -> PathMapped -> Written

and any stage may end that file in ``Failed`` without touching the others.
Page errors are caught in :func:`process_file` and turned into outcomes;
only a template load failure, raised by :func:`load_renderer` before any
file is read, stops the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .content.converter import MarkdownConverter, extract_title
from .content.discovery import iter_markdown_files, read_source
from .core.errors import DirectoryCreateError, PageError, WriteError
from .core.models import (
    ConversionOutcome,
    RenderedPage,
    RunSummary,
    SiteConfiguration,
    TitleSource,
)
from .rendering.engine import TemplateRenderer
from .rendering.io import ensure_directory, write_page
from .rendering.paths import destination

logger = logging.getLogger(__name__)


def load_renderer(config: SiteConfiguration) -> TemplateRenderer:
    """Load the run's template set.

    Raises:
        TemplateLoadError: If the templates cannot be loaded
    """
    renderer = TemplateRenderer(config.template_glob_or_dir)
    logger.info(
        f"Loaded templates from {config.template_glob_or_dir}: "
        f"{', '.join(renderer.template_names)}"
    )
    return renderer


def page_title(config: SiteConfiguration, text: str) -> str:
    if config.title_source is TitleSource.FIRST_HEADING:
        return extract_title(text) or config.default_title
    return config.default_title


def process_file(
    source: Path,
    config: SiteConfiguration,
    renderer: TemplateRenderer,
    converter: MarkdownConverter,
) -> ConversionOutcome:
    """Turn one source file into a written page.

    Never raises for per-file problems; they are returned as a failed outcome.
    """
    target: Path | None = None
    try:
        document = read_source(source)
        logger.debug(f"Read {source}")

        fragment = converter.convert(document.text)
        logger.debug(f"Converted {source}")

        html = renderer.render(
            config.base_template_name,
            page_title(config, document.text),
            fragment,
        )
        logger.debug(f"Rendered {source}")

        try:
            target = destination(
                source, config.content_root, config.output_root, config.path_layout
            )
        except ValueError as exc:
            raise WriteError(f"No destination for {source}: {exc}", source) from exc
        logger.debug(f"Mapped {source} → {target}")

        write_page(RenderedPage(html=html, destination=target), mode=config.file_mode)
    except PageError as exc:
        logger.error(f"Failed {source} ({exc.kind.value}): {exc.detail}")
        return ConversionOutcome.failed(source, exc.kind, exc.detail, target)

    logger.info(f"Wrote {source} → {target}")
    return ConversionOutcome.written(source, target)


def build_site(
    config: SiteConfiguration,
    renderer: TemplateRenderer,
    sources: Iterable[Path] | None = None,
) -> RunSummary:
    """Build every page of a site in one pass.

    Args:
        config: Run configuration
        renderer: Template set loaded once for the run
        sources: Source files to process; discovered under
            ``config.content_root`` when omitted

    Returns:
        Summary of every file's outcome
    """
    logger.info(f"Building site: {config.content_root} → {config.output_root}")

    try:
        ensure_directory(config.output_root)
    except DirectoryCreateError as exc:
        logger.error(f"Cannot create output root: {exc.detail}")

    if sources is None:
        sources = iter_markdown_files(config.content_root)

    converter = MarkdownConverter()
    summary = RunSummary()
    written_by: dict[Path, Path] = {}

    for source in sources:
        outcome = process_file(source, config, renderer, converter)
        summary.outcomes.append(outcome)
        if not outcome.ok or outcome.destination is None:
            continue
        previous = written_by.get(outcome.destination)
        if previous is not None:
            logger.warning(
                f"{outcome.destination} overwritten: {source} replaces {previous}"
            )
            if outcome.destination not in summary.collisions:
                summary.collisions.append(outcome.destination)
        written_by[outcome.destination] = source

    logger.info(
        f"Build complete: {summary.written} written, {summary.failed} failed, "
        f"{summary.discovered} discovered"
    )
    return summary
