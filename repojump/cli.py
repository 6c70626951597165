"""Command-line front door for repojump.

Loads the config, scans the roots, then hands the index to the interactive
picker. Everything user-facing goes to stderr; only the selected path is
written to stdout, so ``cd "$(repojump)"`` works.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .config import LOG_LEVELS, config_path, load_config
from .errors import ConfigError, ConfigErrorKind
from .logging import DEFAULT_LOG_PATH, configure_logging, get_log_file_path, get_logger
from .runtime import Aborted, Selected, SessionOutcome, run_picker
from .scanner import scan
from .search import SearchIndex
from .theme import ERROR_PREFIX, HEADER, VERTICAL_LINE, WARNING_PREFIX, CliTheme, resolve_cli_theme

EXIT_SELECTED = 0
EXIT_FAILED = 1
EXIT_ABORTED = 130

SHELL_WRAPPERS = {
    "bash": """\
rj() {
  local target
  target="$(command repojump "$@")" || return $?
  [ -n "$target" ] && cd -- "$target"
}
""",
    "zsh": """\
rj() {
  local target
  target="$(command repojump "$@")" || return $?
  [[ -n "$target" ]] && cd -- "$target"
}
""",
    "fish": """\
function rj
    set -l target (command repojump $argv); or return $status
    test -n "$target"; and cd -- $target
end
""",
}

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repojump",
        description="Fuzzy-pick a repository from your configured roots and print its path.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yml (overrides REPOJUMP_CONFIG).")
    parser.add_argument(
        "--log-file",
        default=None,
        help=f"Log file path (default: {DEFAULT_LOG_PATH}). Pass '' to disable logging.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (overrides the config file).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Continue without asking when some roots cannot be read.",
    )
    parser.add_argument(
        "--init",
        choices=sorted(SHELL_WRAPPERS),
        metavar="SHELL",
        help="Print a shell function that cd's into the picked repository (bash, zsh, fish).",
    )
    parser.add_argument("--version", action="version", version=f"repojump {__version__}")
    return parser


def _log_file(raw: str | None) -> Path | None:
    if raw is None:
        return DEFAULT_LOG_PATH
    if not raw.strip():
        return None
    return Path(raw).expanduser()


def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def ask_yes_no(question: str, *, stdin: TextIO, stderr: TextIO) -> bool:
    """Ask until the answer is yes or no. End of input counts as no."""
    while True:
        stderr.write(f"{question} [y/n]: ")
        stderr.flush()
        answer = stdin.readline()
        if not answer:
            stderr.write("\n")
            return False
        normalized = answer.strip().lower()
        if normalized in {"y", "yes"}:
            return True
        if normalized in {"n", "no"}:
            return False


def _print_config_error(error: ConfigError, theme: CliTheme, stderr: TextIO) -> None:
    badge = f"{theme.error_badge}{ERROR_PREFIX}{theme.reset}"
    if error.kind == ConfigErrorKind.FILE_NOT_FOUND:
        stderr.write(f" {badge} {theme.error_text}config.yml not found in your config directory.{theme.reset}\n\n")
        stderr.write(" Run following commands to edit:\n")
        stderr.write(f" {theme.bold}$ mkdir -p \"{error.path.parent}\"{theme.reset}\n")
        stderr.write(f" {theme.bold}$ ${{EDITOR:-vi}} \"{error.path}\"{theme.reset}\n")
        return
    stderr.write(f" {badge} {theme.error_text}{error.message}{theme.reset}\n")
    if error.kind == ConfigErrorKind.INVALID_FORMAT:
        stderr.write(" Please check the file has a 'repos' list in valid YAML format.\n")


def _confirm_missing_roots(
    missing: list[Path],
    *,
    theme: CliTheme,
    assume_yes: bool,
    stdin: TextIO,
    stderr: TextIO,
) -> bool:
    bar = f"{theme.warning_text}{VERTICAL_LINE}{theme.reset}"
    stderr.write(f" {theme.warning_badge}{WARNING_PREFIX}{theme.reset} Following paths are not found:\n")
    for root in missing:
        stderr.write(f" {bar} - {root}\n")
    stderr.write(f" {bar}\n")
    if assume_yes:
        stderr.write("\n")
        return True
    if not ask_yes_no(f" {bar} {theme.bold}Do you want to continue?{theme.reset}", stdin=stdin, stderr=stderr):
        return False
    stderr.write("\n")
    return True


def report_outcome(outcome: SessionOutcome, *, theme: CliTheme, stdout: TextIO, stderr: TextIO) -> int:
    """Print the session outcome and return the process exit code."""
    if isinstance(outcome, Selected):
        path = str(outcome.repo.path)
        stderr.write(f" {theme.accent}Go ahead!{theme.reset} {path}\n")
        stderr.write(f" {theme.dim}Path to repository was written to stdout.{theme.reset}\n\n")
        stdout.write(f"{path}\n")
        stdout.flush()
        return EXIT_SELECTED
    if isinstance(outcome, Aborted):
        stderr.write(f" {theme.dim}Aborting...{theme.reset}\n")
        return EXIT_ABORTED

    error = outcome.error
    stderr.write(
        f" {theme.error_badge}{ERROR_PREFIX}{theme.reset} "
        f"{theme.error_text}{theme.bold}An error occurred while running repojump.{theme.reset}\n"
    )
    stderr.write(f" {theme.bold}{error.kind.name}:{theme.reset} {error}\n")
    log_path = get_log_file_path()
    if log_path is not None:
        stderr.write(f" {theme.dim}See {log_path} for details.{theme.reset}\n")
    return EXIT_FAILED


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run repojump and return the process exit code.

    Exit codes: 0 when a repository was selected, 130 when the user aborted
    (in the picker or at the missing-roots prompt), 1 on any failure.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    args = _build_parser().parse_args(argv)

    if args.init is not None:
        stdout.write(SHELL_WRAPPERS[args.init])
        return EXIT_SELECTED

    no_color = args.no_color or not _stream_is_tty(stderr)
    theme = resolve_cli_theme(no_color=no_color)

    stderr.write(f"\n {theme.accent}{HEADER}{theme.reset}\n\n")

    log_file = _log_file(args.log_file)
    configure_logging(level=args.log_level or "INFO", log_file=log_file)
    try:
        config = load_config(config_path(args.config))
    except ConfigError as exc:
        logger.error("config load failed", kind=exc.kind.name, path=str(exc.path))
        _print_config_error(exc, theme, stderr)
        return EXIT_FAILED
    if args.log_level is None and config.log_level != "INFO":
        configure_logging(level=config.log_level, log_file=log_file)
    logger.info("repojump started", version=__version__, roots=len(config.repo_paths))

    stderr.write(f" {theme.dim}Loading repositories...{theme.reset}\n")
    result = scan(config.repo_paths, directories_only=config.directories_only)
    stderr.write(f" {theme.dim}Finished!{theme.reset}\n\n")
    stderr.flush()

    if result.not_found and not _confirm_missing_roots(
        result.not_found,
        theme=theme,
        assume_yes=args.yes,
        stdin=stdin,
        stderr=stderr,
    ):
        logger.info("aborted at missing roots prompt", missing=len(result.not_found))
        return EXIT_ABORTED

    outcome = run_picker(SearchIndex(result.repos), no_color=no_color)
    return report_outcome(outcome, theme=theme, stdout=stdout, stderr=stderr)


__all__ = ["ask_yes_no", "main", "report_outcome"]
