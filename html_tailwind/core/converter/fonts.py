from __future__ import annotations

"""Scan ``<font>`` declarations of a document head into a :class:`FontTable`."""

import logging
from typing import Optional

from lxml import etree as ET  # type: ignore

from html_tailwind.core.exceptions import MissingResourceSource
from html_tailwind.core.loader import FontTable, ResourceLoader
from html_tailwind.core.parser.markup import attribute, local_name

__all__ = ["scan_fonts"]

logger = logging.getLogger(__name__)


def scan_fonts(head: Optional[ET._Element], loader: ResourceLoader,
               source: Optional[str] = None) -> FontTable:
    """Return the font table declared by the children of *head*.

    ``<font name="..." src="...">`` loads *src* through *loader*. A missing
    ``name`` or ``name="default"`` selects the default-font slot. Fonts
    without ``src`` are skipped; other head children are ignored.
    """
    table = FontTable()
    if head is None:
        return table

    for child in head:
        if local_name(child) != "font":
            continue
        src = (attribute(child, "src") or "").strip()
        if not src:
            logger.warning("%s", MissingResourceSource("font", "src", source))
            continue
        name = attribute(child, "name")
        table.declare(name, loader.load_resource(src))
        logger.debug("Declared font %r -> %s", name or "default", src)

    return table
