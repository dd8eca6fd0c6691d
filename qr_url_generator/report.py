"""Console reporting for the CLI.

Formatting is kept separate from writing so callers (and tests) can swap the
output target without touching terminal state.
"""

import os
import sys
from enum import Enum
from typing import TextIO


class Level(Enum):
    """Severity of a console message."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


_PREFIXES = {
    Level.INFO: "",
    Level.SUCCESS: "✓ ",
    Level.WARNING: "Note: ",
    Level.ERROR: "Error: ",
}

# ANSI SGR colour codes
_COLORS = {
    Level.INFO: "",
    Level.SUCCESS: "\033[32m",
    Level.WARNING: "\033[33m",
    Level.ERROR: "\033[31m",
}
_RESET = "\033[0m"


def format_message(level: Level, message: str, color: bool = False) -> str:
    """Render a message for display, optionally wrapped in ANSI colour codes."""
    text = f"{_PREFIXES[level]}{message}"
    if color and _COLORS[level]:
        return f"{_COLORS[level]}{text}{_RESET}"
    return text


def use_color(stream: TextIO) -> bool:
    """Colour only interactive terminals, and never when NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def report(
    level: Level,
    message: str,
    stream: TextIO | None = None,
    color: bool | None = None,
) -> None:
    """Write a message to the console.

    Warnings and errors go to stderr, everything else to stdout, unless an
    explicit stream is given.
    """
    if stream is None:
        stream = sys.stderr if level in (Level.WARNING, Level.ERROR) else sys.stdout
    if color is None:
        color = use_color(stream)
    text = format_message(level, message, color)
    # Undecodable argv bytes arrive as lone surrogates; escape what the
    # stream cannot encode
    encoding = getattr(stream, "encoding", None) or "utf-8"
    text = text.encode(encoding, errors="backslashreplace").decode(encoding)
    print(text, file=stream)
