"""Interfaces (protocols) for pluggable collaborators.

Implementations:
- OutputSink: ConsoleSink (tests use recording sinks)
- StyleService: AnsiStyleService, PlainStyleService
"""

from typing import Protocol


class OutputSink(Protocol):
    """Destination for ordered output lines."""

    def write(self, line: str) -> None:
        """Emit one line. May raise if the sink is broken."""
        ...

    def write_error(self, message: str) -> None:
        """Emit an error message on the error channel."""
        ...


class StyleService(Protocol):
    """One method per semantic style.

    Implementations may wrap text in escape codes, but never change the
    text itself.
    """

    def bold(self, text: str) -> str: ...

    def dim(self, text: str) -> str: ...

    def green(self, text: str) -> str: ...

    def yellow(self, text: str) -> str: ...

    def blue(self, text: str) -> str: ...

    def magenta(self, text: str) -> str: ...

    def cyan(self, text: str) -> str: ...

    def red(self, text: str) -> str: ...

    def bold_green(self, text: str) -> str: ...

    def bold_yellow(self, text: str) -> str: ...

    def bold_blue(self, text: str) -> str: ...

    def bold_magenta(self, text: str) -> str: ...

    def bold_cyan(self, text: str) -> str: ...

    def bold_red(self, text: str) -> str: ...
