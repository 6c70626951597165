"""Terminal bootstrap for the picker session.

Binds the session to the real terminal: raw key reads on stdin, frames on
stderr, and raw-mode/alternate-screen bracketing that is undone even when the
session fails.
"""

from __future__ import annotations

import sys
from typing import TextIO

from ..errors import SessionError
from ..input import read_key
from ..render.ansi import FrameWriter
from ..search import SearchIndex
from ..terminal import TerminalController
from .events import Failed, SessionOutcome
from .session import Session


def run_picker(
    index: SearchIndex,
    *,
    no_color: bool = False,
    stdin: TextIO | None = None,
    stderr: TextIO | None = None,
) -> SessionOutcome:
    """Run the interactive picker on the controlling terminal."""
    stdin = sys.stdin if stdin is None else stdin
    stderr = sys.stderr if stderr is None else stderr
    stdin_fd = stdin.fileno()

    try:
        terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=stderr.fileno())
    except SessionError as exc:
        return Failed(exc)

    session = Session(
        index,
        read_key=lambda timeout_ms: read_key(stdin_fd, timeout_ms),
        terminal_size=terminal.size,
        writer=FrameWriter(stderr, no_color=no_color),
    )
    with terminal.raw_mode():
        return session.run()


__all__ = ["run_picker"]
