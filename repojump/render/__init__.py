"""Frame layout for the repository picker.

``build_frame`` turns a ``RenderState`` snapshot and terminal dimensions into
draw ops. It never mutates state and never truncates layout to fit: a draw
position outside the terminal raises ``SessionError`` so a too-small terminal
fails loudly instead of producing a garbled frame.

Layout::

    row 0   header bar
    row 1   ╭──────╮
    row 2   │ 🔎 keyword │
    row 3   ╰──────╯
    row 4   Escape hint (right aligned)
    row 5+  results
"""

from __future__ import annotations

from ..errors import ErrorKind, SessionError
from ..matcher import Match
from ..state import EscapeBehavior, RenderState, clamp_selection
from ..theme import (
    BACKGROUND_PINK,
    BOTTOM_LEFT_CORNER,
    BOTTOM_RIGHT_CORNER,
    CLEAR_HINT,
    EXIT_HINT,
    HEADER,
    HORIZONTAL_LINE,
    LIGHTER_PINK,
    NO_MATCHES,
    PINK,
    SEARCH_ICON,
    SELECTED_MARKER,
    TOP_LEFT_CORNER,
    TOP_RIGHT_CORNER,
    UNSELECTED_MARKER,
    VERTICAL_LINE,
    NamedColor,
)
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
from .text import clip_segments, clip_text, display_width, tail_text

HEADER_ROW = 0
BOX_TOP_ROW = 1
PROMPT_ROW = 2
BOX_BOTTOM_ROW = 3
HINT_ROW = 4
RESULTS_TOP_ROW = 5
PROMPT_PREFIX = f" {SEARCH_ICON} "
PROMPT_TEXT_COLUMN = 1 + display_width(PROMPT_PREFIX)
# " » " plus one leading and two trailing columns.
RESULT_CHROME_COLS = 6


def safe_repeat(text: str, count: int) -> str:
    """Repeat ``text``; a negative count means the terminal is too narrow."""
    if count < 0:
        raise SessionError(ErrorKind.NOT_ENOUGH_TERMINAL_WIDTH, f"needs {-count} more columns")
    return text * count


def safe_move_to(ops: list[DrawOp], x: int, y: int, width: int, height: int) -> None:
    """Append a bounds-checked cursor move."""
    if x < 0 or x >= width:
        raise SessionError(ErrorKind.NOT_ENOUGH_TERMINAL_WIDTH, f"column {x} outside width {width}")
    if y < 0 or y >= height:
        raise SessionError(ErrorKind.NOT_ENOUGH_TERMINAL_HEIGHT, f"row {y} outside height {height}")
    ops.append(MoveTo(x, y))


def split_by_matched(name: str, matched: Match) -> tuple[str, str, str]:
    """Split ``name`` into text before, inside, and after the matched span."""
    start = max(0, min(matched.start, len(name)))
    end = max(start, min(matched.end, len(name)))
    return name[:start], name[start:end], name[end:]


def list_start(selected_index: int, result_count: int, visible_rows: int) -> int:
    """First visible result row such that the selection stays on screen."""
    if visible_rows <= 0 or result_count <= visible_rows:
        return 0
    return max(0, min(selected_index - visible_rows + 1, result_count - visible_rows))


def _header(ops: list[DrawOp], width: int, height: int, header: str) -> None:
    text = f" {header}"
    padding = safe_repeat(" ", width - display_width(text))
    safe_move_to(ops, 0, HEADER_ROW, width, height)
    ops.extend(
        [
            SetBackground(PINK),
            SetForeground(NamedColor.WHITE),
            SetAttribute(Attribute.BOLD),
            Print(text + padding),
            ResetStyle(),
        ]
    )


def _escape_hint(ops: list[DrawOp], state: RenderState, width: int, height: int) -> None:
    hint = CLEAR_HINT if state.escape_behavior == EscapeBehavior.CLEAR else EXIT_HINT
    safe_move_to(ops, width - display_width(hint), HINT_ROW, width, height)
    ops.extend([SetForeground(NamedColor.DARK_GREY), Print(hint), ResetStyle()])


def _search_box(ops: list[DrawOp], visible_keyword: str, width: int, height: int) -> None:
    horizontal_line = safe_repeat(HORIZONTAL_LINE, width - 2)

    safe_move_to(ops, 0, BOX_TOP_ROW, width, height)
    ops.extend(
        [
            SetForeground(LIGHTER_PINK),
            Print(TOP_LEFT_CORNER + horizontal_line + TOP_RIGHT_CORNER),
            ResetStyle(),
        ]
    )

    safe_move_to(ops, 0, PROMPT_ROW, width, height)
    ops.extend(
        [
            SetForeground(LIGHTER_PINK),
            Print(VERTICAL_LINE),
            ResetStyle(),
            Print(PROMPT_PREFIX),
            Print(visible_keyword),
        ]
    )
    safe_move_to(ops, width - 1, PROMPT_ROW, width, height)
    ops.extend([SetForeground(LIGHTER_PINK), Print(VERTICAL_LINE), ResetStyle()])

    safe_move_to(ops, 0, BOX_BOTTOM_ROW, width, height)
    ops.extend(
        [
            SetForeground(LIGHTER_PINK),
            Print(BOTTOM_LEFT_CORNER + horizontal_line + BOTTOM_RIGHT_CORNER),
            ResetStyle(),
        ]
    )


def _results(ops: list[DrawOp], state: RenderState, width: int, height: int) -> None:
    visible_rows = height - RESULTS_TOP_ROW
    if visible_rows <= 0:
        return

    if not state.results:
        if state.keyword:
            safe_move_to(ops, 0, RESULTS_TOP_ROW, width, height)
            ops.extend(
                [
                    SetForeground(NamedColor.DARK_GREY),
                    Print(clip_text(f"   {NO_MATCHES}", width)),
                    ResetStyle(),
                ]
            )
        return

    selected = clamp_selection(state.selected_index, len(state.results))
    start = list_start(selected, len(state.results), visible_rows)
    name_cols = width - RESULT_CHROME_COLS
    for row, found in enumerate(state.results[start : start + visible_rows]):
        before, bold, after = clip_segments(
            list(split_by_matched(found.repo.name, found.matched)),
            name_cols,
        )
        safe_move_to(ops, 0, RESULTS_TOP_ROW + row, width, height)
        if start + row == selected:
            ops.extend(
                [
                    Print(" "),
                    SetBackground(BACKGROUND_PINK),
                    SetForeground(NamedColor.WHITE),
                    Print(f" {SELECTED_MARKER} "),
                    Print(before),
                    SetAttribute(Attribute.BOLD),
                    Print(bold),
                    SetAttribute(Attribute.RESET),
                    SetBackground(BACKGROUND_PINK),
                    SetForeground(NamedColor.WHITE),
                    Print(after),
                    Print("  "),
                    ResetStyle(),
                ]
            )
        else:
            ops.extend(
                [
                    Print(" "),
                    SetForeground(LIGHTER_PINK),
                    Print(f" {UNSELECTED_MARKER} "),
                    ResetStyle(),
                    SetForeground(NamedColor.WHITE),
                    Print(before),
                    SetAttribute(Attribute.BOLD),
                    Print(bold),
                    SetAttribute(Attribute.RESET),
                    Print(after),
                    ResetStyle(),
                ]
            )


def build_frame(state: RenderState, width: int, height: int, *, header: str = HEADER) -> list[DrawOp]:
    """Lay out one complete frame for ``state`` on a ``width`` x ``height`` terminal."""
    ops: list[DrawOp] = [ClearScreen()]
    _header(ops, width, height, header)
    _escape_hint(ops, state, width, height)

    visible_keyword = tail_text(state.keyword, width - PROMPT_TEXT_COLUMN - 2)
    _search_box(ops, visible_keyword, width, height)
    _results(ops, state, width, height)

    cursor_x = min(PROMPT_TEXT_COLUMN + display_width(visible_keyword), width - 1)
    safe_move_to(ops, cursor_x, PROMPT_ROW, width, height)
    ops.append(ShowCursor() if state.cursor_visible else HideCursor())
    ops.append(SetCursorShape(CursorShape.STEADY_UNDERSCORE))
    return ops


__all__ = [
    "PROMPT_ROW",
    "PROMPT_TEXT_COLUMN",
    "RESULTS_TOP_ROW",
    "build_frame",
    "list_start",
    "safe_move_to",
    "safe_repeat",
    "split_by_matched",
]
