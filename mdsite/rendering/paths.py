"""Source to destination path mapping."""

from __future__ import annotations

from pathlib import Path

from ..core.models import PathLayout

HTML_SUFFIX = ".html"


def destination(
    source_path: Path,
    content_root: Path,
    output_root: Path,
    layout: PathLayout = PathLayout.FLAT,
) -> Path:
    """Compute where a source document's page is written.

    ``flat`` places every page directly under ``output_root`` using the
    source's base name, so ``content/a/b/hello.md`` becomes
    ``output/hello.html``. ``mirror`` keeps the path relative to
    ``content_root``, giving ``output/a/b/hello.html``.

    Raises:
        ValueError: In ``mirror`` layout, if the source is not under
            ``content_root``
    """
    source_path = Path(source_path)
    if PathLayout(layout) is PathLayout.MIRROR:
        relative = source_path.relative_to(content_root)
        return Path(output_root) / relative.with_suffix(HTML_SUFFIX)
    return Path(output_root) / f"{source_path.stem}{HTML_SUFFIX}"
