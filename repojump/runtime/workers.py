"""Session worker threads.

Three workers mutate the shared render state, each confined to its fields:

- key input: keyword edits, selection moves, and session termination
- keyword change: escape behavior, search results, selection clamping
- cursor blinker: cursor visibility

Every mutation is followed by an event on the bounded event channel. All
workers poll the shared stop token at each suspension point and return once
it is set.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Full, Queue

from ..errors import ErrorKind, SessionError
from ..logging import get_logger
from ..search import SearchIndex
from ..state import EscapeBehavior, SharedRenderState, clamp_selection, escape_behavior_for
from .events import (
    KEYWORD_CHANGED,
    STATE_CHANGED,
    Aborted,
    Failed,
    Finished,
    Selected,
    SessionEvent,
)

POLL_SECONDS = 0.05
CURSOR_BLINK_SECONDS = 0.5

KeySource = Callable[[int], str]
SizeSource = Callable[[], tuple[int, int]]

logger = get_logger(__name__)


@dataclass(frozen=True)
class WorkerContext:
    """Handles every worker shares: state, event channel, and stop token."""

    state: SharedRenderState
    events: Queue[SessionEvent]
    stop: threading.Event

    def emit(self, event: SessionEvent) -> bool:
        """Put ``event`` on the channel; ``False`` if the session stopped first."""
        while not self.stop.is_set():
            try:
                self.events.put(event, timeout=POLL_SECONDS)
                return True
            except Full:
                continue
        return False


def _is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def handle_key(ctx: WorkerContext, key: str) -> bool:
    """Apply one decoded key. Returns ``False`` once the session is finished."""
    if key == "CTRL_C":
        ctx.emit(Finished(Aborted()))
        return False

    if key == "ESC":
        with ctx.state.write() as state:
            behavior = state.escape_behavior
            if behavior == EscapeBehavior.CLEAR:
                state.keyword = ""
        if behavior == EscapeBehavior.EXIT:
            ctx.emit(Finished(Aborted()))
            return False
        return ctx.emit(KEYWORD_CHANGED)

    if key in {"ENTER_CR", "ENTER_LF"}:
        with ctx.state.write() as state:
            found = state.selected_result()
        if found is None:
            return True
        ctx.emit(Finished(Selected(found.repo)))
        return False

    if key in {"UP", "CTRL_P"}:
        with ctx.state.write() as state:
            if state.selected_index <= 0:
                return True
            state.selected_index -= 1
        return ctx.emit(STATE_CHANGED)

    if key in {"DOWN", "CTRL_N"}:
        with ctx.state.write() as state:
            if state.selected_index >= len(state.results) - 1:
                return True
            state.selected_index += 1
        return ctx.emit(STATE_CHANGED)

    if key == "BACKSPACE":
        with ctx.state.write() as state:
            state.keyword = state.keyword[:-1]
        return ctx.emit(KEYWORD_CHANGED)

    if _is_printable(key):
        with ctx.state.write() as state:
            state.keyword += key
        return ctx.emit(KEYWORD_CHANGED)

    return True


def key_input(ctx: WorkerContext, read_key: KeySource, terminal_size: SizeSource) -> None:
    """Own the terminal input stream until the session ends."""
    poll_ms = int(POLL_SECONDS * 1000)
    last_size: tuple[int, int] | None = None
    while not ctx.stop.is_set():
        try:
            key = read_key(poll_ms)
        except (OSError, EOFError) as exc:
            logger.error("terminal input failed", error=str(exc))
            ctx.emit(Finished(Failed(SessionError(ErrorKind.EVENT_READ_ERROR, str(exc)))))
            return

        if not key:
            try:
                size = terminal_size()
            except SessionError:
                # The renderer reports the failure on the next frame.
                size = None
            if size != last_size:
                changed = last_size is not None
                last_size = size
                if changed and not ctx.emit(STATE_CHANGED):
                    return
            continue

        if not handle_key(ctx, key):
            return


def keyword_change(ctx: WorkerContext, index: SearchIndex, keywords: Queue[str]) -> None:
    """Re-run the search for each forwarded keyword, in arrival order."""
    while not ctx.stop.is_set():
        try:
            keyword = keywords.get(timeout=POLL_SECONDS)
        except Empty:
            continue

        with ctx.state.write() as state:
            state.escape_behavior = escape_behavior_for(keyword)
        if not ctx.emit(STATE_CHANGED):
            return

        results = index.search(keyword) if keyword else []
        with ctx.state.write() as state:
            state.results = results
            state.selected_index = clamp_selection(state.selected_index, len(results))
        if not ctx.emit(STATE_CHANGED):
            return


def cursor_blinker(ctx: WorkerContext, interval: float = CURSOR_BLINK_SECONDS) -> None:
    """Toggle cursor visibility every ``interval`` seconds."""
    while not ctx.stop.wait(interval):
        with ctx.state.write() as state:
            state.cursor_visible = not state.cursor_visible
        if not ctx.emit(STATE_CHANGED):
            return


__all__ = [
    "CURSOR_BLINK_SECONDS",
    "KeySource",
    "POLL_SECONDS",
    "SizeSource",
    "WorkerContext",
    "cursor_blinker",
    "handle_key",
    "key_input",
    "keyword_change",
]
