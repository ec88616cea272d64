"""TVMaze schedule item normalization.

TVMaze returns two shapes of schedule row:

    /schedule      {"airtime": ..., "season": ..., "show": {...}}
    /schedule/web  {"airtime": ..., "season": ..., "_embedded": {"show": {...}}}

Both collapse into one Show here. Nothing downstream knows which feed a
row came from.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from whatsontv.core.types import UNKNOWN_NETWORK, UNKNOWN_SHOW, UNKNOWN_TYPE, Show
from whatsontv.utilities.time import normalize_airtime

logger = logging.getLogger(__name__)

# Home country -> streaming brands whose paired network never gets a
# country-code suffix. Not exhaustive; overridable through config.
DEFAULT_STREAMING_BRANDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "US": (
            "Netflix",
            "Hulu",
            "Prime Video",
            "Amazon",
            "Disney+",
            "HBO Max",
            "Max",
            "Paramount+",
            "Peacock",
            "Apple TV+",
            "YouTube",
            "Tubi",
            "Pluto TV",
            "Roku Channel",
            "Crunchyroll",
            "AMC+",
            "Starz",
            "Showtime",
        ),
    }
)

_LEADING_INT = re.compile(r"^\s*(-?\d+)")
_BRAND_NOISE = re.compile(r"[+\s]")


def streaming_brands_for(country: str, overrides: Mapping[str, Iterable[str]] | None = None) -> tuple[str, ...]:
    """Brand list for a home country, preferring configured overrides."""
    code = (country or "").upper()
    if overrides:
        for key, brands in overrides.items():
            if key.upper() == code:
                return tuple(brands)
    return DEFAULT_STREAMING_BRANDS.get(code, ())


def _normalize_brand(name: str) -> str:
    return _BRAND_NOISE.sub("", name.lower())


def is_streaming_brand(name: str | None, brands: Iterable[str]) -> bool:
    """Heuristic brand membership.

    Names are compared lowercased with '+' and whitespace removed; either
    containing the other counts as a match. Empty names never match.
    """
    if not name:
        return False
    needle = _normalize_brand(name)
    if not needle:
        return False
    for brand in brands:
        candidate = _normalize_brand(brand)
        if candidate and (candidate in needle or needle in candidate):
            return True
    return False


def _to_episode_int(value: Any) -> int:
    """Season/episode number: int or leading-integer string, else 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return 0


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _channel_name(channel: Any) -> str | None:
    if isinstance(channel, Mapping):
        return _text(channel.get("name"))
    return None


def _country_code(channel: Mapping) -> str | None:
    country = channel.get("country")
    if isinstance(country, Mapping):
        return _text(country.get("code"))
    return None


def resolve_network(show_data: Mapping, home_country: str = "US", brands: Iterable[str] = ()) -> str:
    """Display name for where a show airs.

    network wins over webChannel. A foreign network is suffixed with its
    country code ("BBC One (GB)") unless it, or its paired web channel, is
    a home-country streaming brand. Web channels are never suffixed.
    """
    network = show_data.get("network")
    web_channel = show_data.get("webChannel")

    network_name = _channel_name(network)
    if network_name:
        code = _country_code(network)
        if code and code.upper() != (home_country or "").upper():
            brands = tuple(brands)
            web_name = _channel_name(web_channel)
            if not is_streaming_brand(web_name, brands) and not is_streaming_brand(network_name, brands):
                return f"{network_name} ({code})"
        return network_name

    web_name = _channel_name(web_channel)
    if web_name:
        return web_name

    return UNKNOWN_NETWORK


def _extract_show_data(item: Mapping) -> Mapping | None:
    embedded = item.get("_embedded")
    if isinstance(embedded, Mapping) and isinstance(embedded.get("show"), Mapping):
        return embedded["show"]
    if isinstance(item.get("show"), Mapping):
        return item["show"]
    return None


def normalize_schedule_item(item: Any, home_country: str = "US", brands: Iterable[str] = ()) -> Show | None:
    """Convert one raw schedule row (either feed) into a Show.

    Args:
        item: Raw row from /schedule or /schedule/web
        home_country: ISO code of the user's country
        brands: Home-country streaming brands

    Returns:
        Show, or None if the row carries no show data
    """
    if not isinstance(item, Mapping):
        logger.debug("[TVMAZE] Dropping non-object schedule item: %r", type(item).__name__)
        return None

    show_data = _extract_show_data(item)
    if show_data is None:
        logger.debug("[TVMAZE] Dropping schedule item %s without show data", item.get("id"))
        return None

    show_id = show_data.get("id")
    genres = show_data.get("genres")

    return Show(
        id=show_id if isinstance(show_id, int) and not isinstance(show_id, bool) else 0,
        name=_text(show_data.get("name")) or _text(item.get("name")) or UNKNOWN_SHOW,
        type=_text(show_data.get("type")) or UNKNOWN_TYPE,
        language=_text(show_data.get("language")),
        genres=tuple(g for g in genres if isinstance(g, str)) if isinstance(genres, list) else (),
        network=resolve_network(show_data, home_country, brands),
        summary=_text(show_data.get("summary")),
        airtime=normalize_airtime(item.get("airtime")),
        season=_to_episode_int(item.get("season")),
        number=_to_episode_int(item.get("number")),
    )


def transform_schedule(items: Any, home_country: str = "US", brands: Iterable[str] = ()) -> list[Show]:
    """Normalize a raw schedule list, dropping unusable rows."""
    if not isinstance(items, list):
        if items is not None:
            logger.debug("[TVMAZE] Expected a list of schedule items, got %s", type(items).__name__)
        return []

    brands = tuple(brands)
    shows = []
    for item in items:
        show = normalize_schedule_item(item, home_country, brands)
        if show is not None:
            shows.append(show)

    dropped = len(items) - len(shows)
    if dropped:
        logger.debug("[TVMAZE] Dropped %d of %d schedule items", dropped, len(items))
    return shows
