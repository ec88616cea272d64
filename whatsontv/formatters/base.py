"""Render backend contract.

A formatter turns NetworkGroups into a list of output items: strings for
the text backend, Block Kit dicts for Slack. Subclasses supply per-line
formatting and the header/footer/separator hooks; the traversal order
lives here so every backend renders the same structure.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from whatsontv.consumers.grouping import (
    group_shows_by_show_id,
    sort_episodes_by_number,
    sort_shows_by_time,
)
from whatsontv.core.types import UNKNOWN_NETWORK, UNKNOWN_SHOW, UNKNOWN_TYPE, NetworkGroups, Show

T = TypeVar("T")

NO_SHOWS_MESSAGE = "No shows found for the specified criteria."
NO_SHOWS_ON_NETWORK = "No shows found for this network"
NO_AIRTIME = "N/A"


class BaseShowFormatter(ABC, Generic[T]):
    """Shared traversal for all render backends."""

    # Per-line formatting

    @abstractmethod
    def format_timed_show(self, show: Show) -> T: ...

    @abstractmethod
    def format_untimed_show(self, show: Show) -> T: ...

    @abstractmethod
    def format_multiple_episodes(self, shows: list[Show]) -> list[T]:
        """One collapsed entry for several untimed episodes of one show."""

    # Hooks

    def format_header(self) -> list[T]:
        return []

    def format_footer(self) -> list[T]:
        return []

    @abstractmethod
    def format_network_header(self, network: str) -> list[T]: ...

    @abstractmethod
    def format_network_separator(self) -> list[T]: ...

    @abstractmethod
    def format_empty_network(self, network: str) -> list[T]: ...

    @abstractmethod
    def format_no_shows(self) -> list[T]: ...

    # Traversal

    def format_show(self, show: Show) -> T:
        """Timed or untimed line depending on airtime."""
        if show.has_airtime:
            return self.format_timed_show(show)
        return self.format_untimed_show(show)

    def format_network(self, network: str, shows: list[Show], sort_by_time: bool = True) -> list[T]:
        """Header plus one entry per show id, in the bucket's order.

        A show with several untimed episodes collapses into one entry. If
        any of its episodes is timed, each episode gets its own line in
        time order.
        """
        if not shows:
            return self.format_empty_network(network)

        output = list(self.format_network_header(network))
        ordered = sort_shows_by_time(shows) if sort_by_time else list(shows)

        for episodes in group_shows_by_show_id(ordered).values():
            if len(episodes) == 1:
                output.append(self.format_show(episodes[0]))
            elif not any(e.has_airtime for e in episodes):
                output.extend(self.format_multiple_episodes(sort_episodes_by_number(episodes)))
            else:
                output.extend(self.format_show(e) for e in sort_shows_by_time(episodes))

        return output

    def format_network_groups(self, groups: NetworkGroups, sort_by_time: bool = True) -> list[T]:
        """Render all networks, in mapping order.

        An empty mapping renders only the no-shows output.
        """
        if not groups:
            return self.format_no_shows()

        output = list(self.format_header())
        for index, (network, shows) in enumerate(groups.items()):
            if index > 0:
                output.extend(self.format_network_separator())
            output.extend(self.format_network(network, shows, sort_by_time))
        output.extend(self.format_footer())
        return output

    # Display fallbacks

    @staticmethod
    def display_name(show: Show) -> str:
        return show.name or UNKNOWN_SHOW

    @staticmethod
    def display_network(network: str | None) -> str:
        return network or UNKNOWN_NETWORK

    @staticmethod
    def display_type(show_type: str | None) -> str:
        return show_type or UNKNOWN_TYPE
