"""Element tree nodes handed to templates for rendering."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from markupsafe import Markup

from .attributes import AttributeMap
from .contracts import HTMLElement
from .ids import IdGenerator, RandomIdGenerator

_default_id_generator: IdGenerator = RandomIdGenerator()


def set_default_id_generator(generator: IdGenerator) -> IdGenerator:
    """Replace the module-wide id generator and return the previous one."""

    global _default_id_generator
    previous = _default_id_generator
    _default_id_generator = generator
    return previous


def default_id_generator() -> IdGenerator:
    """Return the id generator used by elements created without one."""

    return _default_id_generator


class Element:
    """A labeled node with text, CSS classes, attributes and ordered children.

    Children are kept twice: a mapping keyed by child id for lookup, and a
    list of ids giving display order. Every mutation keeps the two views in
    step, so the order list is always a permutation of the mapping's keys.

    Setters return the element itself so calls can be chained::

        menu = Element("menu", "main").add_css_class("nav")
        menu.add_child(Element("link", "home", text="Home").add_attribute("href", "/"))
    """

    def __init__(
        self,
        content_type: str = "",
        element_id: str = "",
        css_class: str = "",
        text: str = "",
        *,
        attributes: Mapping[str, str] | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._content_type = content_type
        self._id = element_id
        self._css_class = css_class
        self._text = text
        self._attrs = AttributeMap().update_from(attributes)
        self._children: dict[str, HTMLElement] = {}
        self._child_order: list[str] = []
        self._id_generator = id_generator

    def __repr__(self) -> str:
        return (
            f"Element(content_type={self._content_type!r}, id={self._id!r}, "
            f"children={len(self._children)})"
        )

    # Identity

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> "Element":
        self._id = value
        return self

    # Text

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, value: str) -> "Element":
        self._text = value
        return self

    # Content type

    @property
    def content_type(self) -> str:
        return self._content_type

    def set_content_type(self, value: str) -> "Element":
        self._content_type = value
        return self

    # Class

    @property
    def css_class(self) -> str:
        return self._css_class

    def add_css_class(self, token: str) -> "Element":
        """Append each whitespace-separated token that is not already present."""

        tokens = self._css_class.split()
        for name in token.split():
            if name not in tokens:
                tokens.append(name)
        self._css_class = " ".join(tokens)
        return self

    def remove_css_class(self, token: str) -> "Element":
        """Remove every occurrence of each token. Matching is by whole token."""

        removed = set(token.split())
        self._css_class = " ".join(name for name in self._css_class.split() if name not in removed)
        return self

    # Attributes

    @property
    def attributes(self) -> Markup:
        """Rendered ``key="value"`` fragment, e.g. ``dir="ltr" draggable="true"``."""

        return self._attrs.render()

    @property
    def attribute_map(self) -> AttributeMap:
        return self._attrs

    def get_attribute(self, key: str) -> str:
        return self._attrs.get(key, "")

    def add_attribute(self, key: str, value: str) -> "Element":
        self._attrs[key] = value
        return self

    def add_attribute_map(self, mapping: Mapping[str, str] | None) -> "Element":
        self._attrs.update_from(mapping)
        return self

    def remove_attribute(self, key: str) -> "Element":
        self._attrs.pop(key, None)
        return self

    # Children

    def children(self) -> list[HTMLElement]:
        """Return the children. Use ``children_by_order`` when order matters."""

        return list(self._children.values())

    def children_by_order(self) -> list[HTMLElement]:
        return [self._children[child_id] for child_id in self._child_order]

    def child_count(self) -> int:
        return len(self._children)

    def add_child(self, node: HTMLElement) -> "Element":
        """Attach ``node``, generating ``<content_type>#<n>`` when it has no id.

        A child whose id is already taken replaces the existing child and
        inherits its position in the display order.
        """

        if not node.id:
            generate = self._id_generator or _default_id_generator
            node.set_id(generate(node.content_type))
        child_id = node.id
        if child_id not in self._children:
            self._child_order.append(child_id)
        self._children[child_id] = node
        return self

    def add_children(self, nodes: Iterable[HTMLElement]) -> "Element":
        for node in nodes:
            self.add_child(node)
        return self

    def remove_child(self, child_id: str) -> HTMLElement | None:
        """Detach a direct child and return it, or None if there is none."""

        node = self._children.pop(child_id, None)
        if node is not None:
            self._child_order.remove(child_id)
        return node

    def get_child_by_id(self, child_id: str) -> HTMLElement | None:
        return self._children.get(child_id)

    def search_children_by_id(self, child_id: str) -> HTMLElement | None:
        """Depth-first search of this element and its descendants."""

        return search_by_id(self, child_id)

    def get_content_by_type(self, content_type: str) -> list[HTMLElement]:
        """Direct children with the given content type, in display order."""

        return [node for node in self.children_by_order() if node.content_type == content_type]

    def set_child_order(self, this_id: str, before_id: str) -> "Element":
        """Move ``this_id`` so it sits immediately before ``before_id``.

        Unknown ids, or moving a child before itself, leave the order as is.
        """

        if this_id == before_id:
            return self
        if this_id not in self._children or before_id not in self._children:
            return self
        self._child_order.remove(this_id)
        self._child_order.insert(self._child_order.index(before_id), this_id)
        return self

    def order_is_consistent(self) -> bool:
        """True when the order list is a permutation of the child ids."""

        return len(self._child_order) == len(set(self._child_order)) and set(
            self._child_order
        ) == set(self._children)

    def walk(self) -> Iterator[tuple[int, HTMLElement]]:
        """Yield ``(depth, element)`` pairs in pre-order, self first."""

        return walk_tree(self)


def search_by_id(node: HTMLElement, target_id: str) -> HTMLElement | None:
    if node.id == target_id:
        return node
    for child in node.children_by_order():
        found = search_by_id(child, target_id)
        if found is not None:
            return found
    return None


def walk_tree(node: HTMLElement, depth: int = 0) -> Iterator[tuple[int, HTMLElement]]:
    yield depth, node
    for child in node.children_by_order():
        yield from walk_tree(child, depth + 1)


__all__ = [
    "Element",
    "default_id_generator",
    "search_by_id",
    "set_default_id_generator",
    "walk_tree",
]
