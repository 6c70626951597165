"""Interactive picker session: the coordinator main loop.

The main thread consumes the event channel and is the only place that
renders, so frames are never interleaved. Workers run on daemon threads and
share a stop token; when the loop ends the token is set and every worker is
joined, letting a search in flight run to completion. A worker that crashed
turns the outcome into ``Failed(WORKER_JOIN_ERROR)``.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from queue import Queue

from ..errors import ErrorKind, SessionError
from ..logging import get_logger
from ..render import build_frame
from ..render.ansi import FrameWriter
from ..search import SearchIndex
from ..state import SharedRenderState
from .events import (
    STATE_CHANGED,
    Aborted,
    Failed,
    Finished,
    KeywordChanged,
    Selected,
    SessionEvent,
    SessionOutcome,
    StateChanged,
)
from .workers import (
    CURSOR_BLINK_SECONDS,
    KeySource,
    SizeSource,
    WorkerContext,
    cursor_blinker,
    key_input,
    keyword_change,
)

EVENT_CHANNEL_CAPACITY = 20

logger = get_logger(__name__)


def describe_outcome(outcome: SessionOutcome) -> str:
    if isinstance(outcome, Selected):
        return "selected"
    if isinstance(outcome, Aborted):
        return "aborted"
    return f"failed:{outcome.error.kind.name}"


class Session:
    """One run of the picker UI over a fixed ``SearchIndex``."""

    def __init__(
        self,
        index: SearchIndex,
        *,
        read_key: KeySource,
        terminal_size: SizeSource,
        writer: FrameWriter,
        blink_seconds: float = CURSOR_BLINK_SECONDS,
        state: SharedRenderState | None = None,
    ) -> None:
        self.index = index
        self.state = state if state is not None else SharedRenderState()
        self._read_key = read_key
        self._terminal_size = terminal_size
        self._writer = writer
        self._blink_seconds = blink_seconds
        self._events: Queue[SessionEvent] = Queue(maxsize=EVENT_CHANNEL_CAPACITY)
        self._keywords: Queue[str] = Queue()
        self._stop = threading.Event()
        self._ctx = WorkerContext(state=self.state, events=self._events, stop=self._stop)
        self._crashed: list[str] = []
        self._workers: list[threading.Thread] = []

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def _spawn(self, name: str, target: Callable[..., None], *args: object) -> None:
        def run() -> None:
            try:
                target(self._ctx, *args)
            except Exception:
                logger.exception("session worker crashed", worker=name)
                self._crashed.append(name)
                error = SessionError(ErrorKind.WORKER_JOIN_ERROR, f"{name} worker crashed")
                self._ctx.emit(Finished(Failed(error)))

        worker = threading.Thread(target=run, name=f"repojump-{name}", daemon=True)
        self._workers.append(worker)
        worker.start()

    def render(self) -> None:
        """Draw the current state; raises ``SessionError`` on failure."""
        width, height = self._terminal_size()
        frame = build_frame(self.state.snapshot(), width, height)
        self._writer.write_frame(frame)

    def _consume(self) -> SessionOutcome:
        while True:
            event = self._events.get()
            if isinstance(event, StateChanged):
                try:
                    self.render()
                except SessionError as exc:
                    logger.error("render failed", kind=exc.kind.name, detail=exc.detail)
                    return Failed(exc)
            elif isinstance(event, KeywordChanged):
                self._keywords.put(self.state.snapshot().keyword)
            elif isinstance(event, Finished):
                return event.outcome

    def _join_workers(self) -> None:
        # Workers poll the stop token, so an in-flight search finishes first.
        for worker in self._workers:
            worker.join()

    def run(self) -> SessionOutcome:
        """Run until a worker finishes the session; returns the outcome."""
        logger.info("session started", repos=len(self.index))
        self._events.put(STATE_CHANGED)
        self._spawn("keyword-change", keyword_change, self.index, self._keywords)
        self._spawn("key-input", key_input, self._read_key, self._terminal_size)
        self._spawn("cursor-blinker", cursor_blinker, self._blink_seconds)

        try:
            outcome = self._consume()
        finally:
            self._stop.set()
            self._join_workers()

        if self._crashed and not isinstance(outcome, Failed):
            detail = ", ".join(self._crashed)
            outcome = Failed(SessionError(ErrorKind.WORKER_JOIN_ERROR, detail))
        logger.info("session finished", outcome=describe_outcome(outcome))
        return outcome


def run_session(index: SearchIndex, **kwargs) -> SessionOutcome:
    return Session(index, **kwargs).run()


__all__ = [
    "EVENT_CHANNEL_CAPACITY",
    "Session",
    "describe_outcome",
    "run_session",
]
