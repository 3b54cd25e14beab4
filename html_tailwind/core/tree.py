from __future__ import annotations

"""Host consumption interface for resolved node trees.

A host instantiates a tree through :meth:`NodeTree.apply` with a visitor. For
each node the matching ``enter_*`` method runs first, then ``exit``; the
visitor decides itself when and how to recurse into ``node.children`` (via
``child.accept(visitor)``), so the host keeps control of its own parenting.
:class:`NodeVisitor` recurses by default.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from html_tailwind.core.models import (
    Button,
    Color,
    Container,
    Edges,
    GridTrack,
    Image,
    Node,
    Style,
    Text,
    Val,
)

__all__ = ["NodeVisitor", "NodeTree", "iter_nodes", "node_kind", "tree_to_dict", "style_to_dict"]


class NodeVisitor:
    """Base visitor whose ``enter_*`` methods visit children in order."""

    def enter_container(self, node: Container) -> Any:
        self.visit_children(node)

    def enter_text(self, node: Text) -> Any:
        self.visit_children(node)

    def enter_image(self, node: Image) -> Any:
        self.visit_children(node)

    def enter_button(self, node: Button) -> Any:
        self.visit_children(node)

    def exit(self, node: Node) -> None:
        pass

    def visit_children(self, node: Node) -> None:
        for child in node.children:
            child.accept(self)


@dataclass(frozen=True)
class NodeTree:
    """A fully resolved document, ready for handoff to the host."""

    root: Node
    source: Optional[str] = None

    def apply(self, visitor: Any) -> Any:
        """Dispatch *visitor* on the root node and return its result."""
        return self.root.accept(visitor)

    def iter_nodes(self) -> Iterator[Node]:
        return iter_nodes(self.root)

    def find(self, node_id: str) -> Optional[Node]:
        """Return the first node (pre-order) whose id is *node_id*."""
        for node in self.iter_nodes():
            if node.id == node_id:
                return node
        return None


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield *node* and its descendants in pre-order."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)


def node_kind(node: Node) -> str:
    if isinstance(node, Container):
        return "container"
    if isinstance(node, Text):
        return "text"
    if isinstance(node, Image):
        return "image"
    if isinstance(node, Button):
        return "button"
    raise TypeError(f"Unknown node type: {type(node).__name__}")


# ---------------------------------------------------------------------------
# Plain-data views (CLI dumps, debugging)
# ---------------------------------------------------------------------------

_DEFAULT_STYLE = Style()


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (Val, GridTrack)):
        return str(value)
    if isinstance(value, Color):
        return value.to_hex()
    if isinstance(value, Edges):
        return {edge.name: str(getattr(value, edge.name)) for edge in fields(value)}
    if isinstance(value, tuple):
        return [_plain(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def style_to_dict(style: Style) -> Dict[str, Any]:
    """Return the fields of *style* that differ from the defaults."""
    return {
        f.name: _plain(getattr(style, f.name))
        for f in fields(style)
        if getattr(style, f.name) != getattr(_DEFAULT_STYLE, f.name)
    }


def tree_to_dict(node: Node) -> Dict[str, Any]:
    """Return a JSON/YAML friendly view of *node* and its descendants."""
    data: Dict[str, Any] = {"type": node_kind(node)}
    if node.id is not None:
        data["id"] = node.id
    if node.classes:
        data["classes"] = node.classes
    if isinstance(node, Image):
        data["src"] = node.src
        data["image"] = _plain(node.image)
    elif node.content is not None:
        data["content"] = node.content
    style = style_to_dict(node.style)
    if style:
        data["style"] = style
    children: List[Dict[str, Any]] = [tree_to_dict(child) for child in node.children]
    if children:
        data["children"] = children
    return data
