"""Top-level package for html_tailwind.

Turns HTML/XML documents annotated with Tailwind-style utility classes into
typed node trees for a host rendering layer. Front-ends should only depend on
the public API exposed here rather than importing internal modules directly.
"""

from .core.converter import convert, load  # re-export for convenience
from .core.exceptions import (
    DocumentLoadError,
    UnsupportedTagError,
    UnsupportedClassToken,
)
from .core.markers import MarkerRegistry
from .core.models import Button, Container, Image, Style, Text
from .core.style_resolver import StyleResolver, resolve_style
from .core.tree import NodeTree, NodeVisitor

__version__ = "0.1.0"

__all__: list[str] = [
    "convert",
    "load",
    "DocumentLoadError",
    "UnsupportedTagError",
    "UnsupportedClassToken",
    "MarkerRegistry",
    "Button",
    "Container",
    "Image",
    "Style",
    "Text",
    "StyleResolver",
    "resolve_style",
    "NodeTree",
    "NodeVisitor",
]
