"""Coordinator events and session outcomes."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import SessionError
from ..scanner import Repo


@dataclass(frozen=True)
class Selected:
    repo: Repo


@dataclass(frozen=True)
class Aborted:
    pass


@dataclass(frozen=True)
class Failed:
    error: SessionError


SessionOutcome = Selected | Aborted | Failed


@dataclass(frozen=True)
class StateChanged:
    """Render state changed; the main loop should redraw."""


@dataclass(frozen=True)
class KeywordChanged:
    """Keyword was edited; the main loop forwards it to the search worker."""


@dataclass(frozen=True)
class Finished:
    outcome: SessionOutcome


SessionEvent = StateChanged | KeywordChanged | Finished

STATE_CHANGED = StateChanged()
KEYWORD_CHANGED = KeywordChanged()

__all__ = [
    "Aborted",
    "Failed",
    "Finished",
    "KEYWORD_CHANGED",
    "KeywordChanged",
    "STATE_CHANGED",
    "Selected",
    "SessionEvent",
    "SessionOutcome",
    "StateChanged",
]
