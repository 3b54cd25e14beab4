from __future__ import annotations

"""Resolve a ``class`` attribute into a :class:`Style`.

Resolution is a pure function of the token sequence: tokens are looked up in a
:class:`~html_tailwind.core.grammar.GrammarTable` in document order and each
assignment overwrites the previous value of its field (last token wins).
Edge groups are resolved edge by edge, so ``border-t-4 border-x-2`` keeps the
top edge at 4px while setting left and right to 2px.

Unrecognized tokens never abort resolution. Each one becomes an
:class:`~html_tailwind.core.exceptions.UnsupportedClassToken` signal, logged
at WARNING level and dropped.
"""

from dataclasses import replace
import logging
from typing import Any, Dict, List, Optional, Tuple

from html_tailwind.core.exceptions import UnsupportedClassToken
from html_tailwind.core.grammar import DEFAULT_GRAMMAR, EDGE_GROUPS, GrammarTable
from html_tailwind.core.models import Style

__all__ = ["StyleResolver", "resolve_style"]

logger = logging.getLogger(__name__)

_DEFAULT_STYLE = Style()


class StyleResolver:
    """Turns class strings into :class:`Style` records using one grammar table."""

    def __init__(self, grammar: Optional[GrammarTable] = None) -> None:
        self.grammar = grammar if grammar is not None else DEFAULT_GRAMMAR

    def resolve(self, classes: Optional[str], source: Optional[str] = None) -> Style:
        """Return the style for *classes*, logging unsupported tokens."""
        style, _ = self.resolve_with_diagnostics(classes, source)
        return style

    def resolve_with_diagnostics(
        self, classes: Optional[str], source: Optional[str] = None
    ) -> Tuple[Style, List[UnsupportedClassToken]]:
        """Return the style for *classes* and the signals for dropped tokens."""
        values: Dict[str, Any] = {}
        dropped: List[UnsupportedClassToken] = []

        for token in (classes or "").split():
            assignments = self.grammar.lookup(token)
            if assignments is None:
                signal = UnsupportedClassToken(token, source)
                logger.warning("%s", signal)
                dropped.append(signal)
                continue
            for path, value in assignments:
                values[path] = value

        return _build_style(values), dropped


def _build_style(values: Dict[str, Any]) -> Style:
    """Fold accumulated field assignments over the default style."""
    if not values:
        return _DEFAULT_STYLE

    fields: Dict[str, Any] = {}
    edges: Dict[str, Dict[str, Any]] = {}
    for path, value in values.items():
        group, _, edge = path.partition(".")
        if edge:
            edges.setdefault(group, {})[edge] = value
        else:
            fields[path] = value

    for group in EDGE_GROUPS:
        if group in edges:
            fields[group] = replace(getattr(_DEFAULT_STYLE, group), **edges[group])

    return replace(_DEFAULT_STYLE, **fields)


_default_resolver = StyleResolver()


def resolve_style(classes: Optional[str]) -> Style:
    """Resolve *classes* with the built-in grammar."""
    return _default_resolver.resolve(classes)
