"""Pages: element trees plus page data rendered through Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import jinja2
from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    select_autoescape,
)

from .config import UIConfig
from .content_types import input_html_type, is_input
from .contracts import HTMLElement
from .errors import TemplateError
from .io_utils import warn, write_text

PAGE_TITLE = "Title"
PAGE_NAV = "Nav"
PAGE_DATA = "Data"


def strip_whitespace(value: str) -> str:
    return str(value).strip("\n\t")


def _is_element(value: Any) -> bool:
    return isinstance(value, HTMLElement)


class Page:
    """A titled page with arbitrary template data and an optional navigation tree.

    Templates see every ``page_data`` key as a variable, so the title is
    ``{{ Title }}``, the navigation element ``{{ Nav }}`` and the payload set
    with ``set_data`` is ``{{ Data }}``.
    """

    def __init__(self, config: UIConfig, title: str, default_template: str = "") -> None:
        self.config = config
        self.default_template = default_template
        self.page_data: dict[str, Any] = {PAGE_TITLE: title}
        self._templates: dict[str, str] = {}
        self._env: Environment | None = None

    def set_title(self, title: str) -> "Page":
        self.page_data[PAGE_TITLE] = title
        return self

    @property
    def title(self) -> str:
        return self.page_data[PAGE_TITLE]

    def set_data(self, value: Any) -> "Page":
        self.page_data[PAGE_DATA] = value
        return self

    def add_page_data(self, values: Mapping[str, Any]) -> "Page":
        self.page_data.update(values)
        return self

    def add_navigation(self, element: HTMLElement) -> "Page":
        self.page_data[PAGE_NAV] = element
        return self

    @property
    def navigation(self) -> HTMLElement | None:
        return self.page_data.get(PAGE_NAV)

    def add_template(self, name: str, source: str) -> "Page":
        """Register an in-memory template; it shadows files of the same name."""

        try:
            self.jinja_env().parse(source)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateError(f"Error adding template {name!r} to page {self.title!r}", exc) from exc
        self._templates[name] = source
        self._env = None
        return self

    def jinja_env(self) -> Environment:
        """Return the template environment, rebuilding it when reload is on."""

        if self._env is not None and not self.config.dynamic_reload:
            return self._env

        search_paths = [str(path) for path in self.config.search_paths()]
        if self.config.verbose:
            warn(f"Template search paths: {';'.join(search_paths)}")
        env = Environment(
            loader=ChoiceLoader([DictLoader(self._templates), FileSystemLoader(search_paths)]),
            autoescape=select_autoescape(["html", "jinja"], default=True),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
            auto_reload=self.config.dynamic_reload,
        )
        env.filters["strip_whitespace"] = strip_whitespace
        env.filters["input_type"] = input_html_type
        env.tests["input"] = is_input
        env.tests["element"] = _is_element
        self._env = env
        return env

    def resolve_template(self, template_name: str = "") -> str:
        return template_name or self.default_template or self.config.homepage

    def render(self, template_name: str = "") -> str:
        """Render the page with its data.

        The template is ``template_name`` when given, else the page default,
        else the configured homepage.
        """

        name = self.resolve_template(template_name)
        try:
            template = self.jinja_env().get_template(name)
            return template.render(**self.page_data)
        except jinja2.TemplateError as exc:
            raise TemplateError(f"Error rendering template {name!r}", exc) from exc

    def write(self, path: Path, template_name: str = "") -> Path:
        return write_text(path, self.render(template_name))


__all__ = ["PAGE_DATA", "PAGE_NAV", "PAGE_TITLE", "Page", "strip_whitespace"]
