from __future__ import annotations

"""Markup parsing helpers.

Wraps lxml so that malformed input surfaces as html_tailwind error kinds.
"""

from .markup import parse_markup, decode_document, local_name, element_text, attribute, is_element  # noqa: F401

__all__: list[str] = [
    "parse_markup",
    "decode_document",
    "local_name",
    "element_text",
    "attribute",
    "is_element",
]
