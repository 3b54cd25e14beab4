from __future__ import annotations

"""Markup node converter.

Turns lxml elements into the closed node variant set of
:mod:`html_tailwind.core.models` and locates the parts of a document
(optional head, single root element). Structural problems are fatal: an
unrecognized tag or a non-element handed to the converter raises
:class:`~html_tailwind.core.exceptions.UnsupportedTagError`.
"""

from dataclasses import dataclass
import logging
from typing import Dict, Optional, Type

from lxml import etree as ET  # type: ignore

from html_tailwind.core.exceptions import MissingResourceSource, MissingRootError, UnsupportedTagError
from html_tailwind.core.models import Button, Container, Image, Node, Text
from html_tailwind.core.parser.markup import attribute, element_text, is_element, local_name
from html_tailwind.core.style_resolver import StyleResolver

__all__ = [
    "TAG_VARIANTS",
    "ROOT_TAGS",
    "DocumentParts",
    "convert_node",
    "locate_document_parts",
]

logger = logging.getLogger(__name__)

TAG_VARIANTS: Dict[str, Type[Node]] = {
    "div": Container,
    "p": Text,
    "span": Text,
    "img": Image,
    "button": Button,
}

# Elements allowed as the document's single root node
ROOT_TAGS = ("div", "button", "span", "p")

_default_resolver = StyleResolver()


def _describe(node: ET._Element) -> str:
    tag = getattr(node, "tag", None)
    if tag is ET.Comment:
        return "#comment"
    if tag is ET.ProcessingInstruction:
        return "#processing-instruction"
    if tag is ET.Entity:
        return "#entity"
    return repr(node)


def convert_node(element: ET._Element, resolver: Optional[StyleResolver] = None,
                 source: Optional[str] = None) -> Node:
    """Convert *element* and its element descendants into a node.

    Styles are resolved as each node is built; resource handles are left
    empty for :func:`~html_tailwind.core.converter.resolution.resolve_tree`.

    Raises:
        UnsupportedTagError: If *element* or any descendant element is not
            one of ``div``, ``p``, ``span``, ``img``, ``button``, or if
            *element* is not an element at all
    """
    resolver = resolver or _default_resolver

    tag = local_name(element)
    if tag is None:
        raise UnsupportedTagError(_describe(element), source)
    variant = TAG_VARIANTS.get(tag)
    if variant is None:
        raise UnsupportedTagError(tag, source)

    classes = attribute(element, "class") or ""
    node_id = attribute(element, "id")
    style = resolver.resolve(classes, source)
    # Comments and PIs between elements are skipped; text becomes content
    children = tuple(
        convert_node(child, resolver, source) for child in element if is_element(child)
    )

    if variant is Image:
        src = (attribute(element, "src") or "").strip() or None
        if src is None:
            logger.warning("%s", MissingResourceSource("img", "src", source))
        return Image(id=node_id, classes=classes, style=style, children=children, src=src)

    return variant(
        id=node_id,
        classes=classes,
        style=style,
        children=children,
        content=element_text(element),
    )


@dataclass(frozen=True)
class DocumentParts:
    """The elements of a parsed document the pipeline cares about."""

    root: ET._Element
    head: Optional[ET._Element] = None


def locate_document_parts(document_root: ET._Element,
                          source: Optional[str] = None) -> DocumentParts:
    """Find the root content element and optional ``<head>`` of a document.

    Two shapes are accepted: a bare content element (``div``, ``button``,
    ``span``, ``p``) or ``<html>`` holding an optional ``<head>`` and a
    ``<body>`` whose first content element becomes the root.

    Raises:
        UnsupportedTagError: For any other top-level element, or an element
            outside the recognized tag set directly inside ``<body>``
        MissingRootError: If ``<html>`` has no body or the body no root
    """
    tag = local_name(document_root)
    if tag in ROOT_TAGS:
        return DocumentParts(root=document_root)
    if tag != "html":
        raise UnsupportedTagError(tag or _describe(document_root), source)

    head: Optional[ET._Element] = None
    body: Optional[ET._Element] = None
    for child in document_root:
        name = local_name(child)
        if name == "head" and head is None:
            head = child
        elif name == "body" and body is None:
            body = child

    if body is None:
        raise MissingRootError("Document has no <body> element", source)

    root: Optional[ET._Element] = None
    for child in body:
        name = local_name(child)
        if name is None:
            continue
        if name not in TAG_VARIANTS:
            raise UnsupportedTagError(name, source)
        if name not in ROOT_TAGS:
            logger.warning("Ignoring <%s> directly inside <body>: not a root element", name)
            continue
        if root is None:
            root = child
        else:
            logger.warning("Ignoring additional <%s> inside <body>: document already has a root", name)

    if root is None:
        raise MissingRootError("Document <body> holds no content element", source)

    return DocumentParts(root=root, head=head)
