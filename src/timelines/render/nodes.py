"""A minimal element tree used as the live (interactive) render target.

`Node` plays the role a DOM element plays in a browser: renderers create
children with :meth:`Node.create_div` / :meth:`Node.create_span`, assign text
with :meth:`Node.set_text`, and prose renderers inject already-rendered
markup with :meth:`Node.append_markup`.

Text is stored verbatim and escaped only when the tree is serialized, so no
entry text can change the structure of the tree or of its HTML form.

Serialization
-------------
- ``outer_html()`` / ``inner_html()``: HTML strings (same escaping as the
  static renderer, so both outputs can be compared byte for byte).
- ``to_dict()``: JSON-friendly nested dicts for the HTTP API.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .escaping import escape_html, open_tag


@dataclass(frozen=True)
class Markup:
    """A chunk of trusted, already-rendered HTML inserted into the tree."""

    html: str


Child = Union["Node", Markup]


@dataclass
class Node:
    """An element with a tag, CSS classes, attributes, text and children."""

    tag: str = "div"
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    text: str | None = None
    children: list[Child] = field(default_factory=list)

    # ----- Construction ------------------------------------------------------
    def create_el(
        self,
        tag: str,
        cls: str | None = None,
        attrs: Mapping[str, str] | None = None,
    ) -> Node:
        """Create a child element, append it and return it."""
        child = Node(tag=tag, classes=cls.split() if cls else [], attrs=dict(attrs or {}))
        self.children.append(child)
        return child

    def create_div(self, cls: str | None = None, attrs: Mapping[str, str] | None = None) -> Node:
        return self.create_el("div", cls, attrs)

    def create_span(self, cls: str | None = None, attrs: Mapping[str, str] | None = None) -> Node:
        return self.create_el("span", cls, attrs)

    def set_text(self, text: str) -> Node:
        """Replace all content of this node with plain `text`."""
        self.children.clear()
        self.text = text
        return self

    def append_markup(self, html: str) -> None:
        """Append raw, trusted HTML (used by prose renderers)."""
        self.children.append(Markup(html))

    def empty(self) -> None:
        """Remove all text and children."""
        self.text = None
        self.children.clear()

    # ----- Classes -----------------------------------------------------------
    def has_class(self, cls: str) -> bool:
        return cls in self.classes

    def add_class(self, cls: str) -> None:
        if cls not in self.classes:
            self.classes.append(cls)

    def remove_class(self, cls: str) -> None:
        if cls in self.classes:
            self.classes.remove(cls)

    def toggle_class(self, cls: str, force: bool) -> None:
        """Add `cls` when `force` is true, remove it otherwise."""
        if force:
            self.add_class(cls)
        else:
            self.remove_class(cls)

    # ----- Queries -----------------------------------------------------------
    def iter_nodes(self) -> Iterator[Node]:
        """Yield this node and all descendant nodes, depth-first, in order."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter_nodes()

    def find_all(self, cls: str) -> list[Node]:
        """Return every node (including self) carrying the class `cls`."""
        return [node for node in self.iter_nodes() if node.has_class(cls)]

    def find(self, cls: str) -> Node | None:
        found = self.find_all(cls)
        return found[0] if found else None

    # ----- Serialization -----------------------------------------------------
    def inner_html(self) -> str:
        parts: list[str] = []
        if self.text is not None:
            parts.append(escape_html(self.text))
        for child in self.children:
            parts.append(child.html if isinstance(child, Markup) else child.outer_html())
        return "".join(parts)

    def outer_html(self) -> str:
        return f"{open_tag(self.tag, self.classes, self.attrs)}{self.inner_html()}</{self.tag}>"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe nested representation of the tree."""
        payload: dict[str, Any] = {"tag": self.tag, "classes": list(self.classes)}
        if self.attrs:
            payload["attrs"] = dict(self.attrs)
        if self.text is not None:
            payload["text"] = self.text
        if self.children:
            payload["children"] = [
                {"markup": child.html} if isinstance(child, Markup) else child.to_dict()
                for child in self.children
            ]
        return payload


__all__ = ["Child", "Markup", "Node"]
