"""Error types for the interactive session and config loading.

``SessionError`` carries an ``ErrorKind`` so callers can branch on the failure
without parsing messages. Config problems use ``ConfigError`` and are reported
before any terminal state is touched.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Fatal session failure kinds."""

    TERMINAL_SIZE_UNAVAILABLE = "Failed to get terminal size."
    NOT_ENOUGH_TERMINAL_WIDTH = "The terminal width is too narrow."
    NOT_ENOUGH_TERMINAL_HEIGHT = "The terminal height is too narrow."
    EVENT_READ_ERROR = "Failed to read terminal input."
    STDOUT_WRITE_ERROR = "Failed to write to the terminal."
    WORKER_JOIN_ERROR = "Failed to join all workers."
    TERMINAL_MODE_UNAVAILABLE = "Standard input is not an interactive terminal."

    @property
    def message(self) -> str:
        return self.value


class SessionError(Exception):
    """Fatal error that aborts the interactive session."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(kind.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind.message} ({self.detail})"
        return self.kind.message

    def __repr__(self) -> str:
        return f"SessionError({self.kind.name}, {self.detail!r})"


class ConfigErrorKind(Enum):
    FILE_NOT_FOUND = "file_not_found"
    INVALID_FORMAT = "invalid_format"
    UNREADABLE = "unreadable"


class ConfigError(Exception):
    """Config file could not be turned into a list of scan roots."""

    def __init__(self, kind: ConfigErrorKind, path: Path, message: str) -> None:
        self.kind = kind
        self.path = path
        self.message = message
        super().__init__(message)

    @classmethod
    def file_not_found(cls, path: Path) -> ConfigError:
        return cls(ConfigErrorKind.FILE_NOT_FOUND, path, f"config file not found: {path}")

    @classmethod
    def invalid_format(cls, path: Path, reason: str) -> ConfigError:
        return cls(ConfigErrorKind.INVALID_FORMAT, path, f"config file {path} is invalid: {reason}")

    @classmethod
    def unreadable(cls, path: Path, reason: str) -> ConfigError:
        return cls(ConfigErrorKind.UNREADABLE, path, f"config file {path} could not be read: {reason}")


__all__ = [
    "ConfigError",
    "ConfigErrorKind",
    "ErrorKind",
    "SessionError",
]
