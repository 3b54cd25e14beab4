from __future__ import annotations

"""Markup to node tree conversion.

This package holds the conversion pipeline that turns document bytes into a
resolved :class:`~html_tailwind.core.tree.NodeTree`. It runs in two
synchronous passes:

1. Conversion: parse the markup, scan ``<font>`` declarations, build the
   typed node tree with resolved styles
2. Resolution: fill font and image handles through the host's loader

Key modules:
- node_converter: element to node variants, document shape
- fonts: head ``<font>`` scan
- resolution: resource resolution pass
"""

import logging
from typing import Optional

from html_tailwind.core.exceptions import DocumentIOError
from html_tailwind.core.loader import ResourceLoader
from html_tailwind.core.parser.markup import parse_markup
from html_tailwind.core.style_resolver import StyleResolver
from html_tailwind.core.tree import NodeTree

from .fonts import scan_fonts
from .node_converter import DocumentParts, ROOT_TAGS, TAG_VARIANTS, convert_node, locate_document_parts
from .resolution import resolve_tree

__all__ = [
    "convert",
    "load",
    "convert_node",
    "locate_document_parts",
    "scan_fonts",
    "resolve_tree",
    "DocumentParts",
    "ROOT_TAGS",
    "TAG_VARIANTS",
]

logger = logging.getLogger(__name__)


def convert(data: bytes, loader: ResourceLoader, resolver: Optional[StyleResolver] = None,
            source: Optional[str] = None) -> NodeTree:
    """Convert document *data* into a resolved node tree.

    Args:
        data: Raw document bytes (UTF-8)
        loader: Collaborator issuing handles for font and image paths
        resolver: Style resolver to use; the built-in grammar when omitted
        source: Document name used in log messages and errors

    Returns:
        NodeTree whose nodes carry resolved styles and resource handles

    Raises:
        EncodingError: If *data* is not valid UTF-8
        MarkupSyntaxError: If the markup is not well-formed
        UnsupportedTagError: If an unrecognized element appears where a
            node is expected
        MissingRootError: If the document has no root content element
    """
    resolver = resolver or StyleResolver()
    logger.debug("Converting document %s (%d bytes)", source or "<memory>", len(data))

    document_root = parse_markup(data, source)
    parts = locate_document_parts(document_root, source)
    fonts = scan_fonts(parts.head, loader, source)
    unresolved = convert_node(parts.root, resolver, source)
    resolved = resolve_tree(unresolved, loader, fonts, source)

    logger.info("Converted document %s", source or "<memory>")
    return NodeTree(root=resolved, source=source)


def load(loader: ResourceLoader, resolver: Optional[StyleResolver] = None,
         source: Optional[str] = None) -> NodeTree:
    """Read the document bytes from *loader* and convert them.

    Raises:
        DocumentIOError: If the loader cannot read the document bytes
        DocumentLoadError: Any other fatal error raised by :func:`convert`
    """
    try:
        data = loader.read_all_bytes()
    except OSError as exc:
        raise DocumentIOError(f"Could not read document: {exc}", source, cause=exc) from exc
    return convert(data, loader, resolver, source)
