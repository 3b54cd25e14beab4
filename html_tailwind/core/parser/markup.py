from __future__ import annotations

"""Bytes to lxml element tree, plus small element accessors.

The markup tokenizer is lxml; this module only maps its failures onto the
fatal error kinds of :mod:`html_tailwind.core.exceptions` and offers the few
element helpers the converter needs.
"""

import logging
from typing import Optional

from lxml import etree as ET  # type: ignore

from html_tailwind.core.exceptions import EncodingError, MarkupSyntaxError

__all__ = [
    "decode_document",
    "parse_markup",
    "is_element",
    "local_name",
    "element_text",
    "attribute",
]

logger = logging.getLogger(__name__)


def decode_document(data: bytes, source: Optional[str] = None) -> str:
    """Return *data* decoded as UTF-8 or raise :class:`EncodingError`."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(f"UTF-8 decode error: {exc}", source, cause=exc) from exc


def _make_parser() -> ET.XMLParser:
    # Internal DTD entities expand into text; external ones and the network stay off
    return ET.XMLParser(resolve_entities="internal", no_network=True, load_dtd=False)


def parse_markup(data: bytes, source: Optional[str] = None) -> ET._Element:
    """Parse *data* into an lxml tree and return its root element.

    Raises:
        EncodingError: If *data* is not valid UTF-8
        MarkupSyntaxError: If the document is not well-formed
    """
    decode_document(data, source)
    try:
        root = ET.fromstring(data, _make_parser())
    except ET.XMLSyntaxError as exc:
        line = getattr(exc, "lineno", None)
        column = getattr(exc, "offset", None)
        raise MarkupSyntaxError(
            f"XML parse error: {exc}", source, line=line, column=column, cause=exc
        ) from exc
    logger.debug("Parsed markup root <%s>", local_name(root))
    return root


def is_element(node: object) -> bool:
    """Return True for element nodes (comments and PIs have a callable tag)."""
    return isinstance(getattr(node, "tag", None), str)


def local_name(node: ET._Element) -> Optional[str]:
    """Return the lower-cased, namespace-free tag name, or ``None`` for non-elements."""
    if not is_element(node):
        return None
    return ET.QName(node).localname.lower()


def element_text(node: ET._Element) -> Optional[str]:
    """Return the node's direct text trimmed, or ``None`` when blank."""
    text = node.text
    if text is None:
        return None
    text = text.strip()
    return text or None


def attribute(node: ET._Element, name: str) -> Optional[str]:
    """Return attribute *name* matched by local name, ignoring namespaces."""
    value = node.get(name)
    if value is not None:
        return value
    for key, candidate in node.attrib.items():
        if ET.QName(key).localname == name:
            return candidate
    return None
