"""Colors, glyphs, and fixed UI strings.

Frame colors are ``Rgb`` values consumed by the renderer. Messages printed
around the session (banner, warnings, errors) use the ANSI palette in
``CliTheme``, which collapses to empty strings when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import __version__


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int


class NamedColor(Enum):
    WHITE = "white"
    DARK_GREY = "dark_grey"


Color = Rgb | NamedColor

PINK = Rgb(255, 25, 94)
LIGHTER_PINK = Rgb(255, 121, 198)
BACKGROUND_PINK = Rgb(223, 72, 150)

HEADER = f"◇ repojump v{__version__}"
SEARCH_ICON = "🔎"
CLEAR_HINT = "ESC to clear"
EXIT_HINT = "ESC to exit"
NO_MATCHES = "No repositories matched."
SELECTED_MARKER = "»"
UNSELECTED_MARKER = "•"

ERROR_PREFIX = " ✖ERROR "
WARNING_PREFIX = " WARNING! "

VERTICAL_LINE = "│"
HORIZONTAL_LINE = "─"
TOP_LEFT_CORNER = "╭"
TOP_RIGHT_CORNER = "╮"
BOTTOM_LEFT_CORNER = "╰"
BOTTOM_RIGHT_CORNER = "╯"


@dataclass(frozen=True)
class CliTheme:
    """ANSI palette for messages printed outside the interactive frame."""

    reset: str
    bold: str
    dim: str
    accent: str
    error_badge: str
    error_text: str
    warning_badge: str
    warning_text: str


DEFAULT_CLI_THEME = CliTheme(
    reset="\033[0m",
    bold="\033[1m",
    dim="\033[90m",
    accent="\033[1;36m",
    error_badge="\033[1;97;41m",
    error_text="\033[31m",
    warning_badge="\033[1;30;43m",
    warning_text="\033[33m",
)

PLAIN_CLI_THEME = CliTheme(
    reset="",
    bold="",
    dim="",
    accent="",
    error_badge="",
    error_text="",
    warning_badge="",
    warning_text="",
)


def resolve_cli_theme(*, no_color: bool = False) -> CliTheme:
    return PLAIN_CLI_THEME if no_color else DEFAULT_CLI_THEME


__all__ = [
    "BACKGROUND_PINK",
    "CLEAR_HINT",
    "CliTheme",
    "Color",
    "DEFAULT_CLI_THEME",
    "ERROR_PREFIX",
    "EXIT_HINT",
    "HEADER",
    "LIGHTER_PINK",
    "NamedColor",
    "NO_MATCHES",
    "PINK",
    "PLAIN_CLI_THEME",
    "Rgb",
    "SEARCH_ICON",
    "WARNING_PREFIX",
    "resolve_cli_theme",
]
