"""Capability contracts consumed by templates.

Each contract is a structural ``Protocol``: anything exposing the listed
members satisfies it, no inheritance required. ``HTMLElement`` is the union
of all of them and is what the page layer walks when rendering.

Example::

    from uitree.contracts import HTMLElement
    from uitree.element import Element

    assert isinstance(Element("menu"), HTMLElement)
"""

from __future__ import annotations

from typing import Iterable, Mapping, Protocol, TypeVar, runtime_checkable

from markupsafe import Markup

E = TypeVar("E", bound="HTMLElement")


@runtime_checkable
class Identity(Protocol):
    @property
    def id(self) -> str: ...

    def set_id(self: E, value: str) -> E: ...


@runtime_checkable
class Text(Protocol):
    @property
    def text(self) -> str: ...

    def set_text(self: E, value: str) -> E: ...


@runtime_checkable
class Class(Protocol):
    @property
    def css_class(self) -> str: ...

    def add_css_class(self: E, token: str) -> E: ...

    def remove_css_class(self: E, token: str) -> E: ...


@runtime_checkable
class Attributes(Protocol):
    @property
    def attributes(self) -> Markup: ...

    def get_attribute(self, key: str) -> str: ...

    def add_attribute(self: E, key: str, value: str) -> E: ...

    def add_attribute_map(self: E, mapping: Mapping[str, str] | None) -> E: ...

    def remove_attribute(self: E, key: str) -> E: ...


@runtime_checkable
class Children(Protocol):
    def children(self) -> list[HTMLElement]: ...

    def children_by_order(self) -> list[HTMLElement]: ...

    def child_count(self) -> int: ...

    def add_child(self: E, node: HTMLElement) -> E: ...

    def add_children(self: E, nodes: Iterable[HTMLElement]) -> E: ...

    def set_child_order(self: E, this_id: str, before_id: str) -> E: ...

    def get_child_by_id(self, child_id: str) -> HTMLElement | None: ...

    def search_children_by_id(self, child_id: str) -> HTMLElement | None: ...


@runtime_checkable
class HTMLElement(Identity, Text, Class, Attributes, Children, Protocol):
    """Everything a template may ask of an element."""

    @property
    def content_type(self) -> str: ...

    def set_content_type(self: E, value: str) -> E: ...

    def get_content_by_type(self, content_type: str) -> list[HTMLElement]: ...


__all__ = ["Attributes", "Children", "Class", "HTMLElement", "Identity", "Text"]
