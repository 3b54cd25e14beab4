from __future__ import annotations

"""Resource resolution pass.

Second traversal over a converted tree: fills every node's ``style.font``
from the document's font table and turns image ``src`` paths into loader
handles. The pass builds a new tree and never mutates its input, so running
it twice with the same inputs yields equal trees.
"""

from dataclasses import replace
import logging
from typing import Optional

from html_tailwind.core.loader import FontTable, ResourceLoader
from html_tailwind.core.models import Button, Container, Image, Node, Text

__all__ = ["resolve_tree"]

logger = logging.getLogger(__name__)


def resolve_tree(node: Node, loader: ResourceLoader, fonts: Optional[FontTable] = None,
                 source: Optional[str] = None) -> Node:
    """Return *node* with fonts and image handles resolved, pre-order.

    A node's style keeps its named font when ``font_name`` is set and known
    to *fonts*; otherwise it inherits the document's default font. An image
    without ``src`` resolves to ``None`` instead of failing.
    """
    fonts = fonts if fonts is not None else FontTable()
    style = node.style.with_font(fonts.select(node.style.font_name))

    if isinstance(node, Image):
        handle = loader.load_resource(node.src) if node.src else None
        if handle is None:
            logger.debug("Image %r resolved to no handle (%s)", node.id, source or "<memory>")
        children = tuple(resolve_tree(child, loader, fonts, source) for child in node.children)
        return replace(node, style=style, children=children, image=handle)

    if isinstance(node, (Container, Text, Button)):
        children = tuple(resolve_tree(child, loader, fonts, source) for child in node.children)
        return replace(node, style=style, children=children)

    raise TypeError(f"Unknown node type: {type(node).__name__}")
