"""Output service base.

render() fixes the order - header, content, footer - and each subclass
decides where the formatter's items go.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from whatsontv.consumers.grouping import group_shows_by_network, sort_shows_by_time
from whatsontv.core.types import NetworkGroups, Show
from whatsontv.formatters.base import BaseShowFormatter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseOutputService(ABC, Generic[T]):
    """Template-method renderer over a show formatter."""

    def __init__(self, formatter: BaseShowFormatter[T], sort_by_time: bool = True):
        self._formatter = formatter
        self._sort_by_time = sort_by_time

    def render(self, shows: list[Show], date: str) -> None:
        """Render one day's shows.

        No shows renders only the formatter's no-shows output, with no
        header or footer.
        """
        try:
            if not shows:
                self.render_no_shows()
                return

            ordered = sort_shows_by_time(shows) if self._sort_by_time else list(shows)
            groups = group_shows_by_network(ordered)

            self.render_header(date)
            self.render_content(groups)
            self.render_footer()
        except Exception as e:
            logger.error("[OUTPUT] Rendering failed: %s", e, exc_info=True)
            self.handle_error(e)

    def format_content(self, groups: NetworkGroups) -> list[T]:
        return self._formatter.format_network_groups(groups, self._sort_by_time)

    @abstractmethod
    def render_header(self, date: str) -> None: ...

    @abstractmethod
    def render_content(self, groups: NetworkGroups) -> None: ...

    @abstractmethod
    def render_footer(self) -> None: ...

    @abstractmethod
    def render_no_shows(self) -> None: ...

    @abstractmethod
    def handle_error(self, error: Exception) -> None:
        """Report a rendering failure on the output's own error channel."""
