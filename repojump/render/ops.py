"""Terminal draw instructions produced by the renderer.

A frame is a plain list of these values. Keeping them as data separates
layout decisions (``render``) from escape-sequence encoding (``render.ansi``)
and lets tests assert on frames without parsing ANSI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..theme import Color, NamedColor, Rgb


class Attribute(Enum):
    BOLD = "bold"
    RESET = "reset"


class CursorShape(Enum):
    DEFAULT = "default"
    STEADY_BLOCK = "steady_block"
    STEADY_UNDERSCORE = "steady_underscore"
    STEADY_BAR = "steady_bar"


@dataclass(frozen=True)
class ClearScreen:
    pass


@dataclass(frozen=True)
class MoveTo:
    x: int
    y: int


@dataclass(frozen=True)
class SetForeground:
    color: Color


@dataclass(frozen=True)
class SetBackground:
    color: Color


@dataclass(frozen=True)
class SetAttribute:
    attribute: Attribute


@dataclass(frozen=True)
class ResetStyle:
    pass


@dataclass(frozen=True)
class Print:
    text: str


@dataclass(frozen=True)
class ShowCursor:
    pass


@dataclass(frozen=True)
class HideCursor:
    pass


@dataclass(frozen=True)
class SetCursorShape:
    shape: CursorShape


DrawOp = (
    ClearScreen
    | MoveTo
    | SetForeground
    | SetBackground
    | SetAttribute
    | ResetStyle
    | Print
    | ShowCursor
    | HideCursor
    | SetCursorShape
)

__all__ = [
    "Attribute",
    "ClearScreen",
    "Color",
    "CursorShape",
    "DrawOp",
    "HideCursor",
    "MoveTo",
    "NamedColor",
    "Print",
    "ResetStyle",
    "Rgb",
    "SetAttribute",
    "SetBackground",
    "SetCursorShape",
    "SetForeground",
    "ShowCursor",
]
