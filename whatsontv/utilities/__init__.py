"""Utilities - time parsing, episode ranges, HTTP transport, logging."""

from whatsontv.utilities.episodes import (
    format_episode_info,
    format_episode_ranges,
    parse_episode_ranges,
)
from whatsontv.utilities.http import HttpClient, HttpResponse
from whatsontv.utilities.logging import setup_logging
from whatsontv.utilities.time import (
    format_time_with_period,
    get_today_date,
    is_valid_time,
    normalize_airtime,
    parse_time_to_minutes,
)

__all__ = [
    "HttpClient",
    "HttpResponse",
    "format_episode_info",
    "format_episode_ranges",
    "format_time_with_period",
    "get_today_date",
    "is_valid_time",
    "normalize_airtime",
    "parse_episode_ranges",
    "parse_time_to_minutes",
    "setup_logging",
]
