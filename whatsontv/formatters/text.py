"""Console text backend.

Fixed-width columns: time, network, type, name, episode. Each column is
padded before styling so escape codes never break alignment.
"""

from whatsontv.core.interfaces import StyleService
from whatsontv.core.types import Show
from whatsontv.formatters.base import NO_AIRTIME, NO_SHOWS_MESSAGE, NO_SHOWS_ON_NETWORK, BaseShowFormatter
from whatsontv.utilities.episodes import format_episode_info, format_episode_ranges

PAD_TIME = 8
PAD_NETWORK = 15
PAD_TYPE = 10
PAD_NAME = 25
PAD_EPISODE = 20


class TextShowFormatter(BaseShowFormatter[str]):
    """Renders shows as aligned, optionally styled, text lines."""

    def __init__(self, style: StyleService):
        self._style = style

    def _line(self, time: str, show: Show, episode_info: str) -> str:
        columns = [
            time.ljust(PAD_TIME),
            self._style.bold_cyan(self.display_network(show.network).ljust(PAD_NETWORK)),
            self._style.magenta(self.display_type(show.type).ljust(PAD_TYPE)),
            self._style.green(self.display_name(show).ljust(PAD_NAME)),
            self._style.yellow(episode_info.ljust(PAD_EPISODE)),
        ]
        return " ".join(columns)

    def format_timed_show(self, show: Show) -> str:
        return self._line(show.airtime or NO_AIRTIME, show, format_episode_info(show))

    def format_untimed_show(self, show: Show) -> str:
        return self._line(NO_AIRTIME, show, format_episode_info(show))

    def format_multiple_episodes(self, shows: list[Show]) -> list[str]:
        if not shows:
            return []
        return [self._line(NO_AIRTIME, shows[0], format_episode_ranges(shows, pad=True))]

    def format_network_header(self, network: str) -> list[str]:
        header = f"{self.display_network(network)}:"
        return [self._style.bold_cyan(header), self._style.dim("-" * len(header))]

    def format_network_separator(self) -> list[str]:
        return [""]

    def format_empty_network(self, network: str) -> list[str]:
        return self.format_network_header(network) + [self._style.dim(NO_SHOWS_ON_NETWORK)]

    def format_no_shows(self) -> list[str]:
        return [NO_SHOWS_MESSAGE]
