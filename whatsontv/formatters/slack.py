"""Slack Block Kit backend."""

from whatsontv.core.types import Show
from whatsontv.formatters.base import NO_AIRTIME, NO_SHOWS_MESSAGE, NO_SHOWS_ON_NETWORK, BaseShowFormatter
from whatsontv.utilities.episodes import format_episode_info, format_episode_ranges
from whatsontv.utilities.time import format_time_with_period

SlackBlock = dict

HEADER_TEXT = "Shows by Network"
FOOTER_TEXT = "_Data provided by TVMaze API_"

DEFAULT_EMOJI = "📺"
TYPE_EMOJIS = {
    "scripted": "📝",
    "reality": "👁",
    "talk": "🎙",
    "documentary": "🎬",
    "variety": "🎭",
    "game": "🎮",
    "news": "📰",
    "sports": "⚽",
}


def get_type_emoji(show_type: str | None) -> str:
    """Emoji for a TVMaze show type, 📺 when unknown."""
    if not show_type:
        return DEFAULT_EMOJI
    return TYPE_EMOJIS.get(show_type.lower(), DEFAULT_EMOJI)


def section(text: str) -> SlackBlock:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def header(text: str) -> SlackBlock:
    return {"type": "header", "text": {"type": "plain_text", "text": text, "emoji": True}}


def divider() -> SlackBlock:
    return {"type": "divider"}


def context(text: str) -> SlackBlock:
    return {"type": "context", "elements": [{"type": "mrkdwn", "text": text}]}


class SlackShowFormatter(BaseShowFormatter[SlackBlock]):
    """Renders shows as Block Kit blocks, one section per line."""

    def _show_line(self, show: Show, episode_info: str, airtime: str) -> SlackBlock:
        emoji = get_type_emoji(show.type)
        return section(f"{emoji} *{self.display_name(show)}* {episode_info} ({airtime})")

    def format_timed_show(self, show: Show) -> SlackBlock:
        return self._show_line(show, format_episode_info(show), format_time_with_period(show.airtime))

    def format_untimed_show(self, show: Show) -> SlackBlock:
        return self._show_line(show, format_episode_info(show), NO_AIRTIME)

    def format_multiple_episodes(self, shows: list[Show]) -> list[SlackBlock]:
        if not shows:
            return []
        return [self._show_line(shows[0], format_episode_ranges(shows, pad=True), NO_AIRTIME)]

    def format_header(self) -> list[SlackBlock]:
        return [header(HEADER_TEXT), divider()]

    def format_footer(self) -> list[SlackBlock]:
        return [context(FOOTER_TEXT)]

    def format_network_header(self, network: str) -> list[SlackBlock]:
        return [header(self.display_network(network))]

    def format_network_separator(self) -> list[SlackBlock]:
        return [divider()]

    def format_empty_network(self, network: str) -> list[SlackBlock]:
        return self.format_network_header(network) + [section(NO_SHOWS_ON_NETWORK)]

    def format_no_shows(self) -> list[SlackBlock]:
        return [section(NO_SHOWS_MESSAGE)]
