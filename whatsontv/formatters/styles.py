"""Text styling strategies.

AnsiStyleService wraps text in SGR escape codes for terminals;
PlainStyleService returns text unchanged (pipes, --no-color, tests).
Neither ever alters the text itself.
"""

import os
import sys

RESET = "\033[0m"

_CODES = {
    "bold": "1",
    "dim": "2",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
}


class AnsiStyleService:
    """StyleService using ANSI escape sequences."""

    def _wrap(self, text: str, *styles: str) -> str:
        codes = ";".join(_CODES[s] for s in styles)
        return f"\033[{codes}m{text}{RESET}"

    def bold(self, text: str) -> str:
        return self._wrap(text, "bold")

    def dim(self, text: str) -> str:
        return self._wrap(text, "dim")

    def green(self, text: str) -> str:
        return self._wrap(text, "green")

    def yellow(self, text: str) -> str:
        return self._wrap(text, "yellow")

    def blue(self, text: str) -> str:
        return self._wrap(text, "blue")

    def magenta(self, text: str) -> str:
        return self._wrap(text, "magenta")

    def cyan(self, text: str) -> str:
        return self._wrap(text, "cyan")

    def red(self, text: str) -> str:
        return self._wrap(text, "red")

    def bold_green(self, text: str) -> str:
        return self._wrap(text, "bold", "green")

    def bold_yellow(self, text: str) -> str:
        return self._wrap(text, "bold", "yellow")

    def bold_blue(self, text: str) -> str:
        return self._wrap(text, "bold", "blue")

    def bold_magenta(self, text: str) -> str:
        return self._wrap(text, "bold", "magenta")

    def bold_cyan(self, text: str) -> str:
        return self._wrap(text, "bold", "cyan")

    def bold_red(self, text: str) -> str:
        return self._wrap(text, "bold", "red")


class PlainStyleService:
    """StyleService that returns text unchanged."""

    def bold(self, text: str) -> str:
        return text

    dim = green = yellow = blue = magenta = cyan = red = bold
    bold_green = bold_yellow = bold_blue = bold_magenta = bold_cyan = bold_red = bold


def create_style_service(color: bool | None = None):
    """Pick a style service.

    Args:
        color: Force color on/off. None enables it only for a TTY stdout
            without NO_COLOR set.
    """
    if color is None:
        color = sys.stdout.isatty() and "NO_COLOR" not in os.environ
    return AnsiStyleService() if color else PlainStyleService()
