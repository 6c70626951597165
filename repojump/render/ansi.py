"""ANSI encoding of draw ops and frame output.

``encode`` is pure; ``FrameWriter`` pushes one encoded frame per call so the
terminal never sees half a frame from us.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from ..errors import ErrorKind, SessionError
from ..theme import Color, NamedColor, Rgb
from .ops import (
    Attribute,
    ClearScreen,
    CursorShape,
    DrawOp,
    HideCursor,
    MoveTo,
    Print,
    ResetStyle,
    SetAttribute,
    SetBackground,
    SetCursorShape,
    SetForeground,
    ShowCursor,
)

CSI = "\x1b["

_NAMED_FOREGROUND = {
    NamedColor.WHITE: "97",
    NamedColor.DARK_GREY: "90",
}
_NAMED_BACKGROUND = {
    NamedColor.WHITE: "107",
    NamedColor.DARK_GREY: "100",
}
_CURSOR_SHAPES = {
    CursorShape.DEFAULT: 0,
    CursorShape.STEADY_BLOCK: 2,
    CursorShape.STEADY_UNDERSCORE: 4,
    CursorShape.STEADY_BAR: 6,
}


def color_sgr(color: Color, *, background: bool = False) -> str:
    """Return the SGR parameter string selecting ``color``."""
    if isinstance(color, Rgb):
        prefix = "48" if background else "38"
        return f"{prefix};2;{color.r};{color.g};{color.b}"
    table = _NAMED_BACKGROUND if background else _NAMED_FOREGROUND
    return table[color]


def encode_op(op: DrawOp, *, no_color: bool = False) -> str:
    if isinstance(op, Print):
        return op.text
    if isinstance(op, MoveTo):
        return f"{CSI}{op.y + 1};{op.x + 1}H"
    if isinstance(op, ClearScreen):
        return f"{CSI}2J"
    if isinstance(op, ShowCursor):
        return f"{CSI}?25h"
    if isinstance(op, HideCursor):
        return f"{CSI}?25l"
    if isinstance(op, SetCursorShape):
        return f"{CSI}{_CURSOR_SHAPES[op.shape]} q"
    if no_color:
        return ""
    if isinstance(op, SetForeground):
        return f"{CSI}{color_sgr(op.color)}m"
    if isinstance(op, SetBackground):
        return f"{CSI}{color_sgr(op.color, background=True)}m"
    if isinstance(op, SetAttribute):
        return f"{CSI}1m" if op.attribute == Attribute.BOLD else f"{CSI}0m"
    if isinstance(op, ResetStyle):
        return f"{CSI}0m"
    raise TypeError(f"unsupported draw op: {op!r}")


def encode(ops: Iterable[DrawOp], *, no_color: bool = False) -> str:
    """Encode a whole frame into one escape-sequence string."""
    return "".join(encode_op(op, no_color=no_color) for op in ops)


class FrameWriter:
    """Write encoded frames to a text stream, one flush per frame."""

    def __init__(self, stream: TextIO, *, no_color: bool = False) -> None:
        self.stream = stream
        self.no_color = no_color

    def write_frame(self, ops: Iterable[DrawOp]) -> None:
        payload = encode(ops, no_color=self.no_color)
        try:
            self.stream.write(payload)
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise SessionError(ErrorKind.STDOUT_WRITE_ERROR, str(exc)) from exc


__all__ = ["FrameWriter", "color_sgr", "encode", "encode_op"]
