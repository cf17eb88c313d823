from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import PathLayout, SiteConfiguration, TitleSource

BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MDSITE_", case_sensitive=False)

    content_root: Path = Path("content")
    output_root: Path = Path("output")
    template_dir: str = str(BUNDLED_TEMPLATE_DIR)
    base_template: str = "base.html"
    path_layout: PathLayout = PathLayout.FLAT
    title_source: TitleSource = TitleSource.FIXED
    default_title: str = "Untitled"
    file_mode: int = 0o644

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_file_mode(cls, value: Any) -> Any:
        """Read string modes as octal, so ``0644`` means ``0o644``."""
        if isinstance(value, str):
            try:
                return int(value.strip(), 8)
            except ValueError as e:
                raise ValueError(f"Invalid octal mode: {value!r}") from e
        return value

    def site_configuration(self, **overrides: Any) -> SiteConfiguration:
        """Build the immutable run configuration, applying non-None overrides."""
        values: dict[str, Any] = {
            "content_root": self.content_root,
            "output_root": self.output_root,
            "template_glob_or_dir": self.template_dir,
            "base_template_name": self.base_template,
            "path_layout": self.path_layout,
            "title_source": self.title_source,
            "default_title": self.default_title,
            "file_mode": self.file_mode,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SiteConfiguration(**values)
