"""Settings for locating and rendering page templates."""

from __future__ import annotations

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .io_utils import read_yaml, warn

DEFAULT_CONFIG_NAME = "uitree.yaml"
BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates"


class UIConfig(BaseModel):
    """Template search paths and rendering toggles."""

    template_paths: List[Path] = Field(
        default_factory=lambda: [Path("."), Path("templates")],
        alias="templatePaths",
        description="Directories searched for templates, in priority order.",
    )
    homepage: str = Field(
        "index.html", description="Template rendered when a page names none."
    )
    dynamic_reload: bool = Field(
        False,
        alias="dynamicReload",
        description="Rebuild the template environment on every render.",
    )
    template_pattern: str = Field(
        "*.html",
        alias="templatePattern",
        description="Filename pattern of templates listed from the search paths.",
    )
    verbose: bool = Field(False, description="Report settings and template discovery.")

    model_config = ConfigDict(populate_by_name=True)

    def with_template_paths(self, *paths: str | Path) -> "UIConfig":
        """Return a copy with ``paths`` (made absolute) appended to the search list."""

        extra = [Path(path).resolve() for path in paths]
        return self.model_copy(update={"template_paths": [*self.template_paths, *extra]})

    def search_paths(self) -> list[Path]:
        """Configured directories followed by the bundled templates directory."""

        return [*self.template_paths, BUNDLED_TEMPLATES_DIR]

    def discover_templates(self) -> list[str]:
        """Names of templates matching ``template_pattern`` across the search paths."""

        names: list[str] = []
        for directory in self.search_paths():
            if not directory.is_dir():
                if self.verbose:
                    warn(f"Template path not found: {directory}")
                continue
            for path in sorted(directory.glob(self.template_pattern)):
                if path.is_file() and path.name not in names:
                    names.append(path.name)
        return names

    def describe(self) -> list[str]:
        lines = []
        for index, (key, value) in enumerate(self.model_dump(by_alias=True).items(), start=1):
            if isinstance(value, list):
                value = ";".join(str(item) for item in value)
            lines.append(f"{index}) {key}: {value}")
        return lines


def load_config(path: Path | None = None) -> UIConfig:
    """Load settings from YAML, falling back to defaults when the file is absent."""

    config_path = path or Path(DEFAULT_CONFIG_NAME)
    if not config_path.exists():
        if path is not None:
            warn(f"Config file not found: {config_path}; using defaults.")
        return UIConfig()

    try:
        data = read_yaml(config_path) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed config file {config_path}", exc) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {config_path} is not valid UTF-8", exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    try:
        config = UIConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {config_path}", exc) from exc

    # Relative template paths are resolved against the config file location.
    base = config_path.parent
    resolved = [p if p.is_absolute() else (base / p) for p in config.template_paths]
    return config.model_copy(update={"template_paths": resolved})


__all__ = ["BUNDLED_TEMPLATES_DIR", "DEFAULT_CONFIG_NAME", "UIConfig", "load_config"]
