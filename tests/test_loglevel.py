import pytest

from cmmcore.loglevel import (
    BLUE,
    BOLD_ESCAPE,
    COLOR_ESCAPE_RESET,
    CYAN,
    GRAY,
    GREEN,
    MAGENTA,
    RED,
    YELLOW,
    Level,
    colorize_caller,
    colorize_level,
    level_capital_string,
    level_string,
)


@pytest.mark.parametrize(
    "level,lower,upper",
    [
        (Level.DEBUG, "[debug]", "[DEBUG]"),
        (Level.INFO, "[info]", "[INFO]"),
        (Level.WARN, "[warn]", "[WARN]"),
        (Level.ERROR, "[error]", "[ERROR]"),
        (Level.DPANIC, "[dpanic]", "[DPANIC]"),
        (Level.PANIC, "[panic]", "[PANIC]"),
        (Level.FATAL, "[fatal]", "[FATAL]"),
    ],
)
def test_level_strings(level, lower, upper):
    assert level_string(level) == lower
    assert level_capital_string(level) == upper


def test_unknown_level_strings():
    assert level_string(9) == "[Level(9)]"
    assert level_capital_string(-7) == "[LEVEL(-7)]"


@pytest.mark.parametrize(
    "level,color",
    [
        (Level.DEBUG, GRAY),
        (Level.INFO, GREEN),
        (Level.WARN, YELLOW),
        (Level.ERROR, MAGENTA),
        (Level.FATAL, RED),
        (Level.DPANIC, CYAN),
        (Level.PANIC, CYAN),
        (42, GRAY),
    ],
)
def test_colorize_level(level, color):
    result = colorize_level(level, "msg")
    assert result == f"\033[3{color}m" + BOLD_ESCAPE + "msg" + COLOR_ESCAPE_RESET


def test_colorize_level_keeps_percent_text():
    result = colorize_level(Level.INFO, "100%")
    assert "100%" in result
    assert result.endswith(COLOR_ESCAPE_RESET)


def test_colorize_caller():
    result = colorize_caller("pkg/file.go:12")
    assert result.startswith("at ")
    assert result == "at " + f"\033[3{BLUE}m" + BOLD_ESCAPE + "pkg/file.go:12" + COLOR_ESCAPE_RESET


def test_levels_in_order_name_themselves():
    assert [level_string(level) for level in sorted(Level)] == [
        "[debug]",
        "[info]",
        "[warn]",
        "[error]",
        "[dpanic]",
        "[panic]",
        "[fatal]",
    ]
    assert level_string(0) == "[info]"
    assert level_capital_string(-1) == "[DEBUG]"