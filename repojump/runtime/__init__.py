"""Interactive session runtime.

Groups the terminal bootstrap (``run_picker``), the coordinator
(``Session``), and the event/outcome types shared with the CLI.
"""

from __future__ import annotations

from .events import Aborted, Failed, Selected, SessionOutcome


def run_picker(*args, **kwargs):
    """Lazily import terminal bootstrap so tests can import outcomes without termios."""
    from .app import run_picker as _run_picker

    return _run_picker(*args, **kwargs)


__all__ = [
    "Aborted",
    "Failed",
    "Selected",
    "SessionOutcome",
    "run_picker",
]
