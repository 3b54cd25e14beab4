from __future__ import annotations

"""Shared data structures used across the html_tailwind core.

This module is intentionally free of parsing and I/O code so that the
contained objects can be reused in any context (unit-tests, CLI, host
integrations, etc.). Everything here is immutable: a :class:`Style` or a node
is built once and replaced, never patched.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Tuple, Union

__all__ = [
    "Visibility",
    "PositionType",
    "Display",
    "FlexDirection",
    "JustifyContent",
    "JustifyItems",
    "JustifySelf",
    "AlignContent",
    "AlignItems",
    "AlignSelf",
    "Unit",
    "Val",
    "Edges",
    "Color",
    "TrackKind",
    "GridTrack",
    "Style",
    "Container",
    "Text",
    "Image",
    "Button",
    "Node",
    "NODE_TYPES",
]


# ---------------------------------------------------------------------------
# Enumerated style values
# ---------------------------------------------------------------------------


class Visibility(Enum):
    INHERITED = "inherited"
    VISIBLE = "visible"
    HIDDEN = "hidden"


class PositionType(Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class Display(Enum):
    BLOCK = "block"
    FLEX = "flex"
    GRID = "grid"
    NONE = "none"


class FlexDirection(Enum):
    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row-reverse"
    COLUMN_REVERSE = "column-reverse"


class JustifyContent(Enum):
    DEFAULT = "default"
    START = "start"
    END = "end"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    STRETCH = "stretch"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class JustifyItems(Enum):
    DEFAULT = "default"
    START = "start"
    END = "end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class JustifySelf(Enum):
    AUTO = "auto"
    START = "start"
    END = "end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class AlignContent(Enum):
    DEFAULT = "default"
    START = "start"
    END = "end"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    STRETCH = "stretch"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class AlignItems(Enum):
    DEFAULT = "default"
    START = "start"
    END = "end"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class AlignSelf(Enum):
    AUTO = "auto"
    START = "start"
    END = "end"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


# ---------------------------------------------------------------------------
# Parametric values
# ---------------------------------------------------------------------------


class Unit(Enum):
    AUTO = "auto"
    PX = "px"
    PERCENT = "percent"


@dataclass(frozen=True)
class Val:
    """A declared length: ``auto``, a percentage or a pixel length."""

    unit: Unit = Unit.AUTO
    value: float = 0.0

    @classmethod
    def auto(cls) -> "Val":
        return cls(Unit.AUTO, 0.0)

    @classmethod
    def px(cls, value: float) -> "Val":
        return cls(Unit.PX, float(value))

    @classmethod
    def percent(cls, value: float) -> "Val":
        return cls(Unit.PERCENT, float(value))

    def __str__(self) -> str:
        if self.unit is Unit.AUTO:
            return "auto"
        if self.unit is Unit.PERCENT:
            return f"{self.value:g}%"
        return f"{self.value:g}px"


_ZERO = Val.px(0)


@dataclass(frozen=True)
class Edges:
    """Per-edge lengths for padding, margin and border thickness."""

    left: Val = _ZERO
    right: Val = _ZERO
    top: Val = _ZERO
    bottom: Val = _ZERO


@dataclass(frozen=True)
class Color:
    """An sRGB colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, digits: str) -> "Color":
        """Build a colour from ``RRGGBB`` or ``RRGGBBAA`` hex digits."""
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected 6 or 8 hex digits, got {digits!r}")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


class TrackKind(Enum):
    AUTO = "auto"
    PX = "px"
    FR = "fr"


@dataclass(frozen=True)
class GridTrack:
    """One column track of a grid template."""

    kind: TrackKind = TrackKind.AUTO
    value: float = 0.0

    @classmethod
    def auto(cls) -> "GridTrack":
        return cls(TrackKind.AUTO, 0.0)

    @classmethod
    def px(cls, value: float) -> "GridTrack":
        return cls(TrackKind.PX, float(value))

    @classmethod
    def fr(cls, value: float) -> "GridTrack":
        return cls(TrackKind.FR, float(value))

    def __str__(self) -> str:
        if self.kind is TrackKind.AUTO:
            return "auto"
        return f"{self.value:g}{self.kind.value}"


# ---------------------------------------------------------------------------
# Style record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Style:
    """Field-complete visual/layout description of one node.

    Every field has a default, so ``Style()`` is the style of an element with
    an empty ``class`` attribute. ``font`` stays ``None`` until the resolution
    pass fills it in; ``font_name`` selects a named font when set.
    """

    visibility: Visibility = Visibility.INHERITED
    position: PositionType = PositionType.RELATIVE
    display: Display = Display.BLOCK
    flex_direction: FlexDirection = FlexDirection.ROW
    justify_content: JustifyContent = JustifyContent.DEFAULT
    justify_items: JustifyItems = JustifyItems.DEFAULT
    justify_self: JustifySelf = JustifySelf.AUTO
    align_content: AlignContent = AlignContent.DEFAULT
    align_items: AlignItems = AlignItems.DEFAULT
    align_self: AlignSelf = AlignSelf.AUTO
    width: Val = Val.auto()
    height: Val = Val.auto()
    min_width: Val = Val.auto()
    min_height: Val = Val.auto()
    max_width: Val = Val.auto()
    max_height: Val = Val.auto()
    border: Edges = Edges()
    border_color: Color = TRANSPARENT
    background_color: Color = TRANSPARENT
    padding: Edges = Edges()
    margin: Edges = Edges()
    text_color: Color = WHITE
    z_index: int = 0
    grid_template_columns: Tuple[GridTrack, ...] = ()
    font_name: Optional[str] = None
    font: Any = None

    def with_font(self, font: Any) -> "Style":
        return replace(self, font=font)


# ---------------------------------------------------------------------------
# Node variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _NodeBase:
    id: Optional[str] = None
    classes: str = ""
    style: Style = field(default_factory=Style)
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Container(_NodeBase):
    """``<div>``: a layout box with optional text content."""

    content: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        result = visitor.enter_container(self)
        visitor.exit(self)
        return result


@dataclass(frozen=True)
class Text(_NodeBase):
    """``<p>`` / ``<span>``: a text-bearing node."""

    content: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        result = visitor.enter_text(self)
        visitor.exit(self)
        return result


@dataclass(frozen=True)
class Image(_NodeBase):
    """``<img>``: ``src`` is the declared path, ``image`` the resolved handle."""

    src: Optional[str] = None
    image: Any = None

    def accept(self, visitor: Any) -> Any:
        result = visitor.enter_image(self)
        visitor.exit(self)
        return result


@dataclass(frozen=True)
class Button(_NodeBase):
    """``<button>``: an interactive text-bearing container."""

    content: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        result = visitor.enter_button(self)
        visitor.exit(self)
        return result


Node = Union[Container, Text, Image, Button]

NODE_TYPES = (Container, Text, Image, Button)
