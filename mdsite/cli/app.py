"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import FatalConfigurationError
from ..core.settings import Settings
from ..pipeline import build_site, load_renderer

logger = logging.getLogger(__name__)

EXIT_PAGE_FAILURES = 1
EXIT_FATAL = 2

app = typer.Typer(
    name="mdsite",
    help="Convert a tree of Markdown documents into HTML pages.",
)


@app.callback()
def _root() -> None:
    """Markdown to HTML site builder."""


@app.command()
def build(
    content_root: Annotated[
        Optional[Path],
        typer.Option(
            "--content",
            help="Directory scanned for Markdown files (default: ./content).",
            metavar="DIR",
        ),
    ] = None,
    output_root: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            help="Directory receiving HTML pages (default: ./output).",
            metavar="DIR",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Build HTML pages from every Markdown file under the content root."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    config = Settings().site_configuration(
        content_root=content_root, output_root=output_root
    )
    logger.debug(f"Config: {config}")

    try:
        renderer = load_renderer(config)
    except FatalConfigurationError as exc:
        logger.error(f"Aborting: {exc}")
        raise typer.Exit(code=EXIT_FATAL) from exc

    summary = build_site(config, renderer)

    if not summary.ok:
        for outcome in summary.failures:
            logger.debug(f"  {outcome.failure.value}: {outcome.source}")
        raise typer.Exit(code=EXIT_PAGE_FAILURES)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
