from __future__ import annotations

"""Utility-class grammar table.

Maps a single class token to the style field assignments it stands for. The
table holds two kinds of rules:

* literal rules, an exact ``token -> assignments`` mapping
  (``flex-col``, ``place-items-center``, ``w-full``...);
* pattern rules, anchored regular expressions whose captured payload
  (pixel length, hex colour, signed integer, grid track list) is turned into
  assignments by a handler.

An assignment is a ``(field_path, value)`` pair. Plain paths name a
:class:`~html_tailwind.core.models.Style` field (``"display"``); dotted paths
name one edge of an edge group (``"margin.left"``) so that partial-edge
shorthands only touch the edges they name.

The table is immutable once built. :data:`DEFAULT_GRAMMAR` is constructed at
import time and shared read-only by every resolver.
"""

from dataclasses import dataclass
from types import MappingProxyType
import re
from typing import Any, Callable, Dict, Iterable, Mapping, Match, Optional, Pattern, Tuple

from html_tailwind.core.models import (
    AlignContent,
    AlignItems,
    AlignSelf,
    BLACK,
    Color,
    Display,
    FlexDirection,
    GridTrack,
    JustifyContent,
    JustifyItems,
    JustifySelf,
    PositionType,
    TRANSPARENT,
    Val,
    Visibility,
    WHITE,
)

__all__ = [
    "Assignment",
    "Assignments",
    "PatternRule",
    "GrammarTable",
    "build_default_grammar",
    "DEFAULT_GRAMMAR",
    "EDGE_GROUPS",
]

Assignment = Tuple[str, Any]
Assignments = Tuple[Assignment, ...]

# Style fields resolved edge by edge
EDGE_GROUPS = ("padding", "margin", "border")

# Tailwind spacing scale: one step is 0.25rem, with 1rem = 16px
_SPACING_STEP_PX = 4

# Upper bound on the number of columns one grid token may declare
_MAX_GRID_TRACKS = 256

_EDGE_SUFFIXES: Dict[str, Tuple[str, ...]] = {
    "": ("left", "right", "top", "bottom"),
    "t": ("top",),
    "r": ("right",),
    "b": ("bottom",),
    "l": ("left",),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
}

_SIZE_PREFIXES: Dict[str, Tuple[str, ...]] = {
    "w": ("width",),
    "h": ("height",),
    "min-w": ("min_width",),
    "min-h": ("min_height",),
    "max-w": ("max_width",),
    "max-h": ("max_height",),
    "size": ("width", "height"),
}

_COLOR_PREFIXES: Dict[str, str] = {
    "bg": "background_color",
    "text": "text_color",
    "border": "border_color",
}

_NAMED_COLORS: Dict[str, Color] = {
    "transparent": TRANSPARENT,
    "white": WHITE,
    "black": BLACK,
}


@dataclass(frozen=True)
class PatternRule:
    """An anchored pattern and the handler that turns a match into assignments.

    A handler may return ``None`` to reject a token its pattern matched
    syntactically (e.g. a zero denominator); the token is then unsupported.
    """

    name: str
    pattern: Pattern[str]
    handler: Callable[[Match[str]], Optional[Assignments]]

    def apply(self, token: str) -> Optional[Assignments]:
        match = self.pattern.fullmatch(token)
        if match is None:
            return None
        return self.handler(match)


class GrammarTable:
    """Immutable set of literal and pattern rules."""

    def __init__(self, literals: Mapping[str, Assignments],
                 patterns: Iterable[PatternRule]) -> None:
        self._literals: Mapping[str, Assignments] = MappingProxyType(dict(literals))
        self._patterns: Tuple[PatternRule, ...] = tuple(patterns)

    @property
    def literals(self) -> Mapping[str, Assignments]:
        return self._literals

    @property
    def patterns(self) -> Tuple[PatternRule, ...]:
        return self._patterns

    def lookup(self, token: str) -> Optional[Assignments]:
        """Return the assignments *token* stands for, or ``None``.

        Literal rules win over pattern rules; pattern rules are tried in table
        order and the first one accepting the token wins.
        """
        literal = self._literals.get(token)
        if literal is not None:
            return literal
        for rule in self._patterns:
            assignments = rule.apply(token)
            if assignments is not None:
                return assignments
        return None

    def extend(self, literals: Optional[Mapping[str, Assignments]] = None,
               patterns: Iterable[PatternRule] = ()) -> "GrammarTable":
        """Return a new table with extra rules taking precedence over these."""
        merged = dict(self._literals)
        merged.update(literals or {})
        return GrammarTable(merged, tuple(patterns) + self._patterns)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.lookup(token) is not None

    def __repr__(self) -> str:
        return f"GrammarTable(literals={len(self._literals)}, patterns={len(self._patterns)})"


# ---------------------------------------------------------------------------
# Literal rules
# ---------------------------------------------------------------------------


def _literal_rules() -> Dict[str, Assignments]:
    rules: Dict[str, Assignments] = {
        "visible": (("visibility", Visibility.VISIBLE),),
        "invisible": (("visibility", Visibility.HIDDEN),),

        "relative": (("position", PositionType.RELATIVE),),
        "absolute": (("position", PositionType.ABSOLUTE),),

        "block": (("display", Display.BLOCK),),
        "flex": (("display", Display.FLEX),),
        "grid": (("display", Display.GRID),),
        "hidden": (("display", Display.NONE),),

        "flex-row": (("flex_direction", FlexDirection.ROW),),
        "flex-col": (("flex_direction", FlexDirection.COLUMN),),
        "flex-row-reverse": (("flex_direction", FlexDirection.ROW_REVERSE),),
        "flex-col-reverse": (("flex_direction", FlexDirection.COLUMN_REVERSE),),

        "justify-start": (("justify_content", JustifyContent.FLEX_START),),
        "justify-center": (("justify_content", JustifyContent.CENTER),),
        "justify-end": (("justify_content", JustifyContent.FLEX_END),),
        "justify-between": (("justify_content", JustifyContent.SPACE_BETWEEN),),
        "justify-around": (("justify_content", JustifyContent.SPACE_AROUND),),
        "justify-evenly": (("justify_content", JustifyContent.SPACE_EVENLY),),
        "justify-stretch": (("justify_content", JustifyContent.STRETCH),),
        "justify-normal": (("justify_content", JustifyContent.DEFAULT),),

        "justify-items-start": (("justify_items", JustifyItems.START),),
        "justify-items-end": (("justify_items", JustifyItems.END),),
        "justify-items-center": (("justify_items", JustifyItems.CENTER),),
        "justify-items-stretch": (("justify_items", JustifyItems.STRETCH),),
        "justify-items-normal": (("justify_items", JustifyItems.DEFAULT),),

        "justify-self-auto": (("justify_self", JustifySelf.AUTO),),
        "justify-self-start": (("justify_self", JustifySelf.START),),
        "justify-self-end": (("justify_self", JustifySelf.END),),
        "justify-self-center": (("justify_self", JustifySelf.CENTER),),
        "justify-self-stretch": (("justify_self", JustifySelf.STRETCH),),

        "content-normal": (("align_content", AlignContent.DEFAULT),),
        "content-center": (("align_content", AlignContent.CENTER),),
        "content-start": (("align_content", AlignContent.FLEX_START),),
        "content-end": (("align_content", AlignContent.FLEX_END),),
        "content-between": (("align_content", AlignContent.SPACE_BETWEEN),),
        "content-around": (("align_content", AlignContent.SPACE_AROUND),),
        "content-evenly": (("align_content", AlignContent.SPACE_EVENLY),),
        "content-stretch": (("align_content", AlignContent.STRETCH),),

        "items-start": (("align_items", AlignItems.FLEX_START),),
        "items-end": (("align_items", AlignItems.FLEX_END),),
        "items-center": (("align_items", AlignItems.CENTER),),
        "items-stretch": (("align_items", AlignItems.STRETCH),),
        "items-baseline": (("align_items", AlignItems.BASELINE),),

        "self-auto": (("align_self", AlignSelf.AUTO),),
        "self-start": (("align_self", AlignSelf.FLEX_START),),
        "self-end": (("align_self", AlignSelf.FLEX_END),),
        "self-center": (("align_self", AlignSelf.CENTER),),
        "self-stretch": (("align_self", AlignSelf.STRETCH),),
        "self-baseline": (("align_self", AlignSelf.BASELINE),),

        "grid-cols-none": (("grid_template_columns", ()),),
    }

    # place-* shorthands set an align/justify pair in one go
    place_content = {
        "center": (AlignContent.CENTER, JustifyContent.CENTER),
        "start": (AlignContent.FLEX_START, JustifyContent.FLEX_START),
        "end": (AlignContent.FLEX_END, JustifyContent.FLEX_END),
        "between": (AlignContent.SPACE_BETWEEN, JustifyContent.SPACE_BETWEEN),
        "around": (AlignContent.SPACE_AROUND, JustifyContent.SPACE_AROUND),
        "evenly": (AlignContent.SPACE_EVENLY, JustifyContent.SPACE_EVENLY),
        "stretch": (AlignContent.STRETCH, JustifyContent.STRETCH),
    }
    for suffix, (align, justify) in place_content.items():
        rules[f"place-content-{suffix}"] = (("align_content", align), ("justify_content", justify))

    place_items = {
        "start": (AlignItems.FLEX_START, JustifyItems.START),
        "end": (AlignItems.FLEX_END, JustifyItems.END),
        "center": (AlignItems.CENTER, JustifyItems.CENTER),
        "stretch": (AlignItems.STRETCH, JustifyItems.STRETCH),
        "baseline": (AlignItems.BASELINE, JustifyItems.BASELINE),
    }
    for suffix, (align, justify) in place_items.items():
        rules[f"place-items-{suffix}"] = (("align_items", align), ("justify_items", justify))

    place_self = {
        "auto": (AlignSelf.AUTO, JustifySelf.AUTO),
        "start": (AlignSelf.FLEX_START, JustifySelf.START),
        "end": (AlignSelf.FLEX_END, JustifySelf.END),
        "center": (AlignSelf.CENTER, JustifySelf.CENTER),
        "stretch": (AlignSelf.STRETCH, JustifySelf.STRETCH),
    }
    for suffix, (align, justify) in place_self.items():
        rules[f"place-self-{suffix}"] = (("align_self", align), ("justify_self", justify))

    return rules


# ---------------------------------------------------------------------------
# Pattern rules
# ---------------------------------------------------------------------------

_PX = r"\[(?P<px>[0-9]+)px\]"
_PERCENT = r"\[(?P<percent>[0-9]+(?:\.[0-9]+)?)%\]"
_FRACTION = r"(?P<num>[0-9]+)/(?P<den>[0-9]+)"
_SCALE = r"(?P<scale>[0-9]+)"


def _edge_paths(group: str, suffix: str) -> Tuple[str, ...]:
    return tuple(f"{group}.{edge}" for edge in _EDGE_SUFFIXES[suffix])


def _length_from_match(match: Match[str]) -> Optional[Val]:
    """Turn the captured length groups of *match* into a :class:`Val`."""
    groups = match.groupdict()
    if groups.get("px") is not None:
        return Val.px(int(groups["px"]))
    if groups.get("percent") is not None:
        return Val.percent(float(groups["percent"]))
    if groups.get("num") is not None:
        denominator = int(groups["den"])
        if denominator == 0:
            return None
        return Val.percent(int(groups["num"]) * 100.0 / denominator)
    if groups.get("scale") is not None:
        return Val.px(int(groups["scale"]) * _SPACING_STEP_PX)
    keyword = groups.get("keyword")
    if keyword == "full":
        return Val.percent(100)
    if keyword == "auto":
        return Val.auto()
    return None


def _size(match: Match[str]) -> Optional[Assignments]:
    value = _length_from_match(match)
    if value is None:
        return None
    return tuple((path, value) for path in _SIZE_PREFIXES[match.group("prefix")])


def _spacing(group: str) -> Callable[[Match[str]], Optional[Assignments]]:
    def handler(match: Match[str]) -> Optional[Assignments]:
        value = _length_from_match(match)
        if value is None:
            return None
        return tuple((path, value) for path in _edge_paths(group, match.group("edge")))
    return handler


def _border_width(match: Match[str]) -> Optional[Assignments]:
    edge = match.group("edge") or ""
    if match.group("px") is not None:
        value = Val.px(int(match.group("px")))
    elif match.group("width") is not None:
        value = Val.px(int(match.group("width")))
    else:
        # bare ``border`` / ``border-t`` is one pixel wide
        value = Val.px(1)
    return tuple((path, value) for path in _edge_paths("border", edge))


def _hex_color(match: Match[str]) -> Optional[Assignments]:
    return ((_COLOR_PREFIXES[match.group("prefix")], Color.from_hex(match.group("hex"))),)


def _named_color(match: Match[str]) -> Optional[Assignments]:
    return ((_COLOR_PREFIXES[match.group("prefix")], _NAMED_COLORS[match.group("name")]),)


def _z_index(match: Match[str]) -> Optional[Assignments]:
    value = int(match.group("value"))
    if match.group("sign"):
        value = -value
    return (("z_index", value),)


def _grid_repeat(match: Match[str]) -> Optional[Assignments]:
    count = int(match.group("count"))
    if count > _MAX_GRID_TRACKS:
        return None
    return (("grid_template_columns", tuple(GridTrack.auto() for _ in range(count))),)


_TRACK_PATTERN = re.compile(r"(?P<value>[0-9]+)(?P<unit>fr|px)|auto")


def _grid_tracks(match: Match[str]) -> Optional[Assignments]:
    tracks = []
    for part in match.group("tracks").split("_"):
        track = _TRACK_PATTERN.fullmatch(part)
        if track is None:
            return None
        if part == "auto":
            tracks.append(GridTrack.auto())
        elif track.group("unit") == "fr":
            tracks.append(GridTrack.fr(int(track.group("value"))))
        else:
            tracks.append(GridTrack.px(int(track.group("value"))))
    if len(tracks) > _MAX_GRID_TRACKS:
        return None
    return (("grid_template_columns", tuple(tracks)),)


def _pattern_rules() -> Tuple[PatternRule, ...]:
    size_prefix = "|".join(sorted((re.escape(p) for p in _SIZE_PREFIXES), key=len, reverse=True))
    color_prefix = "|".join(_COLOR_PREFIXES)
    named = "|".join(_NAMED_COLORS)
    return (
        PatternRule(
            "size",
            re.compile(
                rf"(?P<prefix>{size_prefix})-"
                rf"(?:{_PX}|{_PERCENT}|{_FRACTION}|{_SCALE}|(?P<keyword>full|auto))"
            ),
            _size,
        ),
        PatternRule(
            "padding",
            re.compile(rf"p(?P<edge>[trblxy]?)-(?:{_PX}|{_SCALE})"),
            _spacing("padding"),
        ),
        PatternRule(
            "margin",
            re.compile(rf"m(?P<edge>[trblxy]?)-(?:{_PX}|{_SCALE}|(?P<keyword>auto))"),
            _spacing("margin"),
        ),
        PatternRule(
            "border-width",
            re.compile(rf"border(?:-(?P<edge>[trblxy]))?(?:-(?:{_PX}|(?P<width>[0-9]+)))?"),
            _border_width,
        ),
        PatternRule(
            "hex-color",
            re.compile(rf"(?P<prefix>{color_prefix})-\[#(?P<hex>[0-9a-fA-F]{{6}}(?:[0-9a-fA-F]{{2}})?)\]"),
            _hex_color,
        ),
        PatternRule(
            "named-color",
            re.compile(rf"(?P<prefix>{color_prefix})-(?P<name>{named})"),
            _named_color,
        ),
        PatternRule(
            "z-index",
            re.compile(r"(?P<sign>-)?z-(?P<value>[0-9]+)"),
            _z_index,
        ),
        PatternRule(
            "grid-cols-repeat",
            re.compile(r"grid-cols-(?P<count>[0-9]+)"),
            _grid_repeat,
        ),
        PatternRule(
            "grid-cols-tracks",
            re.compile(r"grid-cols-\[(?P<tracks>[^\]\s]+)\]"),
            _grid_tracks,
        ),
    )


def build_default_grammar() -> GrammarTable:
    """Construct the built-in utility-class grammar."""
    return GrammarTable(_literal_rules(), _pattern_rules())


DEFAULT_GRAMMAR = build_default_grammar()
