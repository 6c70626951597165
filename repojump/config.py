"""YAML config loading.

The config file lists the scan roots whose immediate subdirectories are
offered as repositories::

    repos:
      - ~/src
      - ~/work/checkouts
    directories_only: false
    log_level: INFO

Unlike UI preferences, a broken config is fatal: without roots there is
nothing to pick from, so every problem surfaces as ``ConfigError``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from platformdirs import user_config_dir

from .errors import ConfigError
from .logging import get_logger

APP_NAME = "repojump"
CONFIG_FILENAME = "config.yml"
CONFIG_ENV_VAR = "REPOJUMP_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    repo_paths: list[Path] = field(default_factory=list)
    directories_only: bool = False
    log_level: str = "INFO"


def config_path(override: Path | None = None) -> Path:
    """Resolve config location: explicit override, then env var, then default."""
    if override is not None:
        return override
    from_env = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    return CONFIG_PATH


def expand_root(raw: str) -> Path:
    """Expand ``~`` and environment variables in one configured root."""
    return Path(os.path.expandvars(os.path.expanduser(raw)))


def _parse_repos(path: Path, value: object) -> list[Path]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError.invalid_format(path, "'repos' must be a list of paths")
    roots: list[Path] = []
    for entry in value:
        if not isinstance(entry, str) or not entry.strip():
            raise ConfigError.invalid_format(path, f"'repos' entry {entry!r} is not a path")
        roots.append(expand_root(entry.strip()))
    return roots


def load_config(path: Path | None = None) -> Config:
    """Load and validate the config file.

    Raises ``ConfigError`` when the file is missing, unreadable, not valid
    YAML, or lacks a ``repos`` list.
    """
    target = config_path(path)
    if not target.is_file():
        raise ConfigError.file_not_found(target)
    try:
        text = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError.unreadable(target, str(exc)) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError.invalid_format(target, str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigError.invalid_format(target, "expected a mapping with a 'repos' list")
    if "repos" not in data:
        raise ConfigError.invalid_format(target, "missing 'repos' list")

    repo_paths = _parse_repos(target, data["repos"])

    directories_only = data.get("directories_only", False)
    if not isinstance(directories_only, bool):
        raise ConfigError.invalid_format(target, "'directories_only' must be true or false")

    log_level = data.get("log_level", "INFO")
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        raise ConfigError.invalid_format(target, f"'log_level' must be one of {', '.join(LOG_LEVELS)}")

    logger.info("config loaded", path=str(target), roots=len(repo_paths))
    return Config(
        repo_paths=repo_paths,
        directories_only=directories_only,
        log_level=log_level.upper(),
    )


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_PATH",
    "Config",
    "config_path",
    "expand_root",
    "load_config",
]
