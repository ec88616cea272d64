"""Console output.

Lines go to an OutputSink one at a time. A sink failure on one line is
reported and rendering carries on with the next line.
"""

import logging
import sys

from whatsontv import __version__
from whatsontv.core.interfaces import OutputSink
from whatsontv.core.types import NetworkGroups
from whatsontv.formatters.base import BaseShowFormatter
from whatsontv.outputs.base import BaseOutputService

logger = logging.getLogger(__name__)

APP_NAME = "WhatsOnTV"
RULE_WIDTH = 30
FOOTER_TEXT = "Data provided by TVMaze API (https://api.tvmaze.com)"


class ConsoleSink:
    """OutputSink writing lines to stdout and errors to stderr."""

    def __init__(self, out=None, err=None):
        self._out = out or sys.stdout
        self._err = err or sys.stderr

    def write(self, line: str) -> None:
        self._out.write(f"{line}\n")
        self._out.flush()

    def write_error(self, message: str) -> None:
        self._err.write(f"{message}\n")
        self._err.flush()


class ConsoleOutputService(BaseOutputService[str]):
    """Renders text formatter output to a console sink."""

    def __init__(
        self,
        formatter: BaseShowFormatter[str],
        sink: OutputSink,
        sort_by_time: bool = True,
        version: str = __version__,
    ):
        super().__init__(formatter, sort_by_time)
        self._sink = sink
        self._version = version

    def _emit(self, line: str) -> None:
        try:
            self._sink.write(line)
        except Exception as e:
            logger.warning("[OUTPUT] Failed to write line: %s", e)
            self._report(f"Error: {e}")

    def _report(self, message: str) -> None:
        try:
            self._sink.write_error(message)
        except Exception as e:
            logger.error("[OUTPUT] Failed to report error '%s': %s", message, e)

    def _rule(self) -> str:
        return "=" * RULE_WIDTH

    def render_header(self, date: str) -> None:
        for line in ("", f"{APP_NAME} v{self._version}", self._rule(), f"Shows for {date}", ""):
            self._emit(line)

    def render_content(self, groups: NetworkGroups) -> None:
        try:
            lines = self.format_content(groups)
        except Exception as e:
            logger.error("[OUTPUT] Formatter failed: %s", e, exc_info=True)
            self._report(f"Error: {e}")
            return

        for line in lines:
            self._emit(line)

    def render_footer(self) -> None:
        for line in ("", self._rule(), FOOTER_TEXT):
            self._emit(line)

    def render_no_shows(self) -> None:
        for line in self._formatter.format_no_shows():
            self._emit(line)

    def handle_error(self, error: Exception) -> None:
        self._report(f"Error: {error}")
