"""Ad-hoc HTML attributes attached to an element."""

from __future__ import annotations

import html
from typing import Mapping

from markupsafe import Markup


class AttributeMap(dict):
    """Key/value store of tag attributes.

    Rendering follows insertion order, so a map built from the same
    sequence of ``add`` calls always produces the same fragment::

        AttributeMap(dir="ltr", draggable="true").render()
        # Markup('dir="ltr" draggable="true"')
    """

    def update_from(self, other: Mapping[str, str] | None) -> "AttributeMap":
        if other:
            for key, value in other.items():
                self[key] = value
        return self

    def render(self) -> Markup:
        """Return the ``key="value"`` fragment for use inside a start tag."""

        parts = [f'{name}="{html.escape(value, quote=True)}"' for name, value in self.items()]
        return Markup(" ".join(parts))

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return str(self.render())


__all__ = ["AttributeMap"]
