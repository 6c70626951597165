"""Terminal control helpers for the picker session.

Owns raw-mode lifecycle, alternate-screen switching, and size queries.
Frames are drawn on the stderr terminal so stdout stays free for the result.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .errors import ErrorKind, SessionError


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors.

        Raises ``SessionError`` when ``stdin_fd`` is not a terminal.
        """
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise SessionError(ErrorKind.TERMINAL_MODE_UNAVAILABLE, str(exc)) from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state."""
        # Show cursor, restore default cursor shape, and leave the alternate screen.
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[0 q\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the output terminal."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as exc:
            raise SessionError(ErrorKind.TERMINAL_SIZE_UNAVAILABLE, str(exc)) from exc
        return size.columns, size.lines

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController"]
