"""Terminal styling and the warning and success messages."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    forced = os.environ.get("CLICOLOR_FORCE")
    if forced and forced != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _style(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Render text in bold when the terminal supports colours."""
    return _style(text, _BOLD)


def blue(text: object) -> str:
    """Render text in blue when the terminal supports colours."""
    return _style(text, _BLUE)


def _red(text: object) -> str:
    return _style(text, _RED)


def _green(text: object) -> str:
    return _style(text, _GREEN)


def warn(message: str) -> None:
    """Print a warning line in red."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{_red(symbol)} {_red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{_green(symbol)} {_green(message)}")