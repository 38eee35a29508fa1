"""Log level names and ANSI colouring for console output."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Log severities, lowest first."""

    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2
    DPANIC = 3
    PANIC = 4
    FATAL = 5


RED = 1
GREEN = 2
YELLOW = 3
BLUE = 4
MAGENTA = 5
CYAN = 6
GRAY = 7

COLOR_ESCAPE_RESET = "\033[0m"
BOLD_ESCAPE = "\033[1m"

_COLORS = {
    Level.DEBUG: GRAY,
    Level.INFO: GREEN,
    Level.WARN: YELLOW,
    Level.ERROR: MAGENTA,
    Level.FATAL: RED,
    Level.DPANIC: CYAN,
    Level.PANIC: CYAN,
}

_NAMES = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warn",
    Level.ERROR: "error",
    Level.DPANIC: "dpanic",
    Level.PANIC: "panic",
    Level.FATAL: "fatal",
}


def _color_escape(color: int) -> str:
    return f"\033[3{color}m"


def _paint(color: int, text: str) -> str:
    return _color_escape(color) + BOLD_ESCAPE + text + COLOR_ESCAPE_RESET


def colorize_level(level: int, text: str) -> str:
    """Wrap text in the bold colour belonging to the level."""
    return _paint(_COLORS.get(level, GRAY), text)


def level_string(level: int) -> str:
    """Bracketed lower-case level name, such as [info]."""
    name = _NAMES.get(level)
    if name is None:
        return f"[Level({int(level)})]"
    return f"[{name}]"


def level_capital_string(level: int) -> str:
    """Bracketed upper-case level name, such as [INFO]."""
    name = _NAMES.get(level)
    if name is None:
        return f"[LEVEL({int(level)})]"
    return f"[{name.upper()}]"


def colorize_caller(caller_path: str) -> str:
    """Prefix a caller location with "at " and paint it bold blue."""
    return "at " + _paint(BLUE, caller_path)