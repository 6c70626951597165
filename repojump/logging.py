"""Structured logging for repojump.

The interactive session owns the terminal: frames are drawn on stderr and the
selected path goes to stdout. Log records therefore only ever go to a file
(or nowhere), never to a console stream.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog
from platformdirs import user_log_dir

APP_NAME = "repojump"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# Track the active log file so error messages can point at it.
_log_file_path: Path | None = None


def get_log_file_path() -> Path | None:
    return _log_file_path


def resolve_level(level: str) -> int:
    """Map a level name to a stdlib level, defaulting to INFO."""
    return _LEVEL_MAP.get(str(level).upper(), logging.INFO)


def _create_handler(log_file: Path | None) -> logging.Handler:
    if log_file is None:
        return logging.NullHandler()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_file, mode="a", encoding="utf-8")


def configure_logging(*, level: str = "INFO", log_file: Path | None = DEFAULT_LOG_PATH) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Destination file, or ``None`` to discard records.
    """
    global _log_file_path

    default_level = resolve_level(level)
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(default_level)

    try:
        handler = _create_handler(log_file)
    except OSError:
        # An unwritable log directory must not keep the picker from starting.
        handler = logging.NullHandler()
        log_file = None
    _log_file_path = log_file

    handler.setLevel(default_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=False, pad_event_to=0, pad_level=False),
            ],
            foreign_pre_chain=shared_processors,
        )
    )
    root_logger.addHandler(handler)


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a lazy logger named after the stdlib logger ``name``.

    The name is passed as a factory argument rather than bound, so loggers
    created at import time still follow a later ``configure_logging``.
    """
    if name:
        return structlog.get_logger(name, **initial_values)  # type: ignore[no-any-return]
    return structlog.get_logger(**initial_values)  # type: ignore[no-any-return]


__all__ = [
    "DEFAULT_LOG_PATH",
    "configure_logging",
    "get_log_file_path",
    "get_logger",
    "resolve_level",
]
