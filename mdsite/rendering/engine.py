"""Template rendering engine."""

from __future__ import annotations

import glob
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)
from markupsafe import Markup

from ..core.errors import RenderError, TemplateLoadError

logger = logging.getLogger(__name__)

_GLOB_CHARS = frozenset("*?[")

TEMPLATE_EXTENSIONS = frozenset(
    {".html", ".htm", ".xhtml", ".xml", ".jinja", ".jinja2", ".j2"}
)


def _is_glob(location: str) -> bool:
    # An existing directory wins, even if its name contains glob characters
    if Path(location).is_dir():
        return False
    return any(ch in _GLOB_CHARS for ch in location)


def _is_template_name(name: str) -> bool:
    """Skip hidden files and non-template files such as images."""
    parts = name.split("/")
    if any(part.startswith(".") for part in parts):
        return False
    return Path(parts[-1]).suffix.lower() in TEMPLATE_EXTENSIONS


def _glob_loader(pattern: str) -> DictLoader:
    """Read every file matching a glob pattern into an in-memory loader.

    Templates are addressed by base name.
    """
    sources: dict[str, str] = {}
    for match in sorted(glob.glob(pattern, recursive=True)):
        path = Path(match)
        if not path.is_file():
            continue
        try:
            sources[path.name] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateLoadError(f"Cannot read template {path}: {exc}") from exc
    if not sources:
        raise TemplateLoadError(f"No templates match: {pattern}")
    return DictLoader(sources)


def _directory_loader(location: str) -> FileSystemLoader:
    directory = Path(location)
    if not directory.exists():
        raise TemplateLoadError(f"Template location not found: {directory}")
    if not directory.is_dir():
        raise TemplateLoadError(f"Template location is not a directory: {directory}")
    return FileSystemLoader(str(directory))


def build_environment(loader: BaseLoader) -> Environment:
    """Create the Jinja2 environment shared by every render in a run."""
    return Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=True,
        auto_reload=False,
        cache_size=-1,
        keep_trailing_newline=True,
    )


class TemplateRenderer:
    """Load a set of page templates once and render pages against it.

    ``location`` is either a directory or a glob pattern. In a directory,
    every non-hidden file with a template extension is loaded and named by
    its path relative to the directory; a glob loads every matching file,
    named by base name. All templates are compiled on construction,
    so syntax errors surface here rather than mid-run.

    Raises:
        TemplateLoadError: If the location is missing, empty, unreadable or
            holds a template with a syntax error
    """

    def __init__(self, location: str | Path) -> None:
        self.location = str(location)
        loader = (
            _glob_loader(self.location)
            if _is_glob(self.location)
            else _directory_loader(self.location)
        )
        self.environment = build_environment(loader)
        self._templates: Mapping[str, Template] = MappingProxyType(self._compile_all())
        logger.debug(
            f"Loaded {len(self._templates)} template(s) from {self.location}"
        )

    def _compile_all(self) -> dict[str, Template]:
        try:
            names = self.environment.list_templates(filter_func=_is_template_name)
        except OSError as exc:
            raise TemplateLoadError(
                f"Cannot list templates in {self.location}: {exc}"
            ) from exc
        if not names:
            raise TemplateLoadError(f"No templates found in {self.location}")

        templates: dict[str, Template] = {}
        for name in names:
            try:
                templates[name] = self.environment.get_template(name)
            except TemplateSyntaxError as exc:
                raise TemplateLoadError(
                    f"Syntax error in template {name} line {exc.lineno}: {exc.message}"
                ) from exc
            except (OSError, UnicodeDecodeError, TemplateError) as exc:
                raise TemplateLoadError(f"Cannot load template {name}: {exc}") from exc
        return templates

    @property
    def template_names(self) -> list[str]:
        return sorted(self._templates)

    def render(self, template_name: str, title: str, content_html: str) -> str:
        """Bind a title and an HTML fragment into a named template.

        ``title`` is escaped; ``content_html`` is inserted as-is since it is
        already HTML.

        Raises:
            RenderError: If the template is unknown, references an
                undefined name or missing template, or fails while running
        """
        template = self._templates.get(template_name)
        if template is None:
            raise RenderError(f"Template not found: {template_name}")

        try:
            return template.render(title=title, content=Markup(content_html))
        except TemplateNotFound as exc:
            raise RenderError(
                f"Template {template_name} references missing template {exc.name}"
            ) from exc
        except TemplateError as exc:
            raise RenderError(f"Cannot render template {template_name}: {exc}") from exc
        except Exception as exc:
            raise RenderError(
                f"Template {template_name} failed: {type(exc).__name__}: {exc}"
            ) from exc
