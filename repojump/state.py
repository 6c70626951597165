"""Render state shared between session workers and the renderer."""

from __future__ import annotations

import contextlib
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from enum import Enum

from .search import FoundRepo


class EscapeBehavior(Enum):
    CLEAR = "clear"
    EXIT = "exit"


def escape_behavior_for(keyword: str) -> EscapeBehavior:
    return EscapeBehavior.EXIT if not keyword else EscapeBehavior.CLEAR


def clamp_selection(selected_index: int, result_count: int) -> int:
    """Clamp ``selected_index`` into ``[0, result_count - 1]`` (``0`` when empty)."""
    if result_count <= 0:
        return 0
    return max(0, min(selected_index, result_count - 1))


@dataclass
class RenderState:
    keyword: str = ""
    escape_behavior: EscapeBehavior = EscapeBehavior.EXIT
    results: list[FoundRepo] = field(default_factory=list)
    selected_index: int = 0
    cursor_visible: bool = False

    def selected_result(self) -> FoundRepo | None:
        if not self.results:
            return None
        return self.results[clamp_selection(self.selected_index, len(self.results))]


class SharedRenderState:
    """Mutex-guarded ``RenderState``.

    Writers hold the lock only for the mutation itself and must emit a change
    event afterwards; the renderer works on ``snapshot()`` copies.
    """

    def __init__(self, initial: RenderState | None = None) -> None:
        self._lock = threading.Lock()
        self._state = initial if initial is not None else RenderState()

    @contextlib.contextmanager
    def write(self) -> Iterator[RenderState]:
        with self._lock:
            yield self._state

    def snapshot(self) -> RenderState:
        with self._lock:
            return replace(self._state, results=list(self._state.results))


__all__ = [
    "EscapeBehavior",
    "RenderState",
    "SharedRenderState",
    "clamp_selection",
    "escape_behavior_for",
]
