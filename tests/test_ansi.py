"""Tests for ANSI encoding of draw ops and frame writing."""

from __future__ import annotations

import io
import unittest

from repojump.errors import ErrorKind, SessionError
from repojump.render.ansi import FrameWriter, color_sgr, encode, encode_op
from repojump.render.ops import (
    Attribute,
    ClearScreen,
    CursorShape,
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
from repojump.theme import PINK, NamedColor, Rgb


class EncodeTests(unittest.TestCase):
    def test_cursor_and_screen_ops(self) -> None:
        self.assertEqual(encode_op(ClearScreen()), "\x1b[2J")
        self.assertEqual(encode_op(MoveTo(0, 0)), "\x1b[1;1H")
        self.assertEqual(encode_op(MoveTo(4, 2)), "\x1b[3;5H")
        self.assertEqual(encode_op(ShowCursor()), "\x1b[?25h")
        self.assertEqual(encode_op(HideCursor()), "\x1b[?25l")
        self.assertEqual(encode_op(SetCursorShape(CursorShape.STEADY_UNDERSCORE)), "\x1b[4 q")

    def test_truecolor_and_named_colors(self) -> None:
        self.assertEqual(color_sgr(Rgb(1, 2, 3)), "38;2;1;2;3")
        self.assertEqual(color_sgr(Rgb(1, 2, 3), background=True), "48;2;1;2;3")
        self.assertEqual(encode_op(SetForeground(PINK)), "\x1b[38;2;255;25;94m")
        self.assertEqual(encode_op(SetForeground(NamedColor.DARK_GREY)), "\x1b[90m")
        self.assertEqual(encode_op(SetBackground(NamedColor.WHITE)), "\x1b[107m")

    def test_attributes(self) -> None:
        self.assertEqual(encode_op(SetAttribute(Attribute.BOLD)), "\x1b[1m")
        self.assertEqual(encode_op(SetAttribute(Attribute.RESET)), "\x1b[0m")
        self.assertEqual(encode_op(ResetStyle()), "\x1b[0m")

    def test_no_color_drops_styling_but_keeps_layout(self) -> None:
        ops = [
            MoveTo(1, 1),
            SetForeground(PINK),
            SetAttribute(Attribute.BOLD),
            Print("repo"),
            ResetStyle(),
        ]

        self.assertEqual(encode(ops, no_color=True), "\x1b[2;2Hrepo")
        self.assertEqual(encode(ops), "\x1b[2;2H\x1b[38;2;255;25;94m\x1b[1mrepo\x1b[0m")

    def test_unknown_op_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            encode_op("not an op")  # type: ignore[arg-type]


class FrameWriterTests(unittest.TestCase):
    def test_writes_whole_frame(self) -> None:
        stream = io.StringIO()

        FrameWriter(stream).write_frame([ClearScreen(), Print("hi")])

        self.assertEqual(stream.getvalue(), "\x1b[2Jhi")

    def test_write_failure_is_stdout_write_error(self) -> None:
        stream = io.StringIO()
        stream.close()

        with self.assertRaises(SessionError) as ctx:
            FrameWriter(stream).write_frame([Print("hi")])

        self.assertEqual(ctx.exception.kind, ErrorKind.STDOUT_WRITE_ERROR)


if __name__ == "__main__":
    unittest.main()
