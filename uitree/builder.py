"""Build element trees from JSON (or YAML) element documents.

Document shape::

    {"text": "A", "id": "button1", "type": "button", "class": "btn-primary",
     "attributes": {"href": "/"}, "children": [...]}

Every field is optional. ``children`` is built recursively and its list order
becomes the display order of the resulting element.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .element import Element
from .errors import DeserializationError
from .ids import IdGenerator
from .io_utils import stable_json_dumps

YAML_SUFFIXES = {".yaml", ".yml"}


class ElementDocument(BaseModel):
    """Serialized form of one element and its subtree."""

    text: str = Field("", description="Label or content of the element.")
    id: str = Field("", description="Element id; generated from the type when empty.")
    content_type: str = Field(
        "", alias="type", description="Content type, e.g. link, menu or text_input."
    )
    css_class: str = Field("", alias="class", description="Space separated CSS classes.")
    attributes: Optional[Dict[str, str]] = Field(
        default_factory=dict, description="Additional tag attributes."
    )
    children: Optional[List["ElementDocument"]] = Field(
        default_factory=list, description="Child documents in display order."
    )

    model_config = ConfigDict(populate_by_name=True)


def _build(doc: ElementDocument, id_generator: IdGenerator | None) -> Element:
    element = Element(
        doc.content_type,
        doc.id,
        doc.css_class,
        doc.text,
        attributes=doc.attributes,
        id_generator=id_generator,
    )
    for child_doc in doc.children or []:
        element.add_child(_build(child_doc, id_generator))
    return element


def element_from_document(data: Any, *, id_generator: IdGenerator | None = None) -> Element:
    """Validate an already decoded document and build its element tree."""

    try:
        doc = ElementDocument.model_validate(data)
        return _build(doc, id_generator)
    except ValidationError as exc:
        raise DeserializationError("Invalid element document", exc) from exc
    except RecursionError as exc:
        raise DeserializationError("Element document is nested too deeply", exc) from exc


def element_from_json(text: str | bytes, *, id_generator: IdGenerator | None = None) -> Element:
    """Parse a JSON element document."""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError("Malformed element JSON", exc) from exc
    except UnicodeDecodeError as exc:
        raise DeserializationError("Element JSON is not valid UTF-8", exc) from exc
    except RecursionError as exc:
        raise DeserializationError("Element JSON is nested too deeply", exc) from exc
    return element_from_document(data, id_generator=id_generator)


def load_element(path: Path, *, id_generator: IdGenerator | None = None) -> Element:
    """Read an element document from a ``.json``, ``.yaml`` or ``.yml`` file."""

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DeserializationError(f"Element document {path} is not valid UTF-8", exc) from exc
    if path.suffix.lower() not in YAML_SUFFIXES:
        return element_from_json(raw, id_generator=id_generator)
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise DeserializationError(f"Malformed element YAML in {path}", exc) from exc
    except RecursionError as exc:
        raise DeserializationError(f"Element YAML in {path} is nested too deeply", exc) from exc
    return element_from_document(data if data is not None else {}, id_generator=id_generator)


def document_from_element(element: Element) -> ElementDocument:
    return ElementDocument(
        text=element.text,
        id=element.id,
        content_type=element.content_type,
        css_class=element.css_class,
        attributes=dict(element.attribute_map),
        children=[document_from_element(child) for child in element.children_by_order()],
    )


def _prune(data: dict) -> dict:
    pruned = {}
    for key, value in data.items():
        if not value:
            continue
        if key == "children":
            value = [_prune(child) for child in value]
        pruned[key] = value
    return pruned


def element_to_document(element: Element) -> dict:
    """Dump a tree to the document shape, leaving out empty fields."""

    return _prune(document_from_element(element).model_dump(by_alias=True))


def element_to_json(element: Element) -> str:
    return stable_json_dumps(element_to_document(element))


__all__ = [
    "ElementDocument",
    "document_from_element",
    "element_from_document",
    "element_from_json",
    "element_to_document",
    "element_to_json",
    "load_element",
]
