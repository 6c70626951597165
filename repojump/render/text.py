"""Display-width measurement and clipping for plain frame text.

Frame text never contains escape sequences (styling is carried by draw ops),
so these helpers only deal with wide and combining characters.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters (including most emoji) consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns from the left."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def tail_text(text: str, max_cols: int) -> str:
    """Keep the rightmost part of ``text`` that fits in ``max_cols`` columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in reversed(text):
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(reversed(out))


def clip_segments(segments: list[str], max_cols: int) -> list[str]:
    """Clip consecutive segments so their joined width fits ``max_cols``.

    Segment boundaries are kept; segments past the limit become empty.
    """
    out: list[str] = []
    remaining = max(0, max_cols)
    for segment in segments:
        clipped = clip_text(segment, remaining)
        out.append(clipped)
        if clipped != segment:
            remaining = 0
        else:
            remaining -= display_width(clipped)
    return out


__all__ = [
    "char_display_width",
    "clip_segments",
    "clip_text",
    "display_width",
    "tail_text",
]
