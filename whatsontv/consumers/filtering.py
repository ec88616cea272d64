"""Show filtering.

Dimensions combine with AND; values within one dimension combine with OR.
An empty dimension means "no filter". Filtering only ever removes rows,
it never reorders them.
"""

import logging
import re

from whatsontv.core.types import Show, ShowOptions
from whatsontv.utilities.time import INVALID_TIME, parse_time_to_minutes

logger = logging.getLogger(__name__)

_COUNTRY_SUFFIX = re.compile(r" \([A-Z]{2}\)$")


def strip_country_suffix(network: str) -> str:
    """'BBC One (GB)' -> 'BBC One'."""
    return _COUNTRY_SUFFIX.sub("", network)


def _lowered(values: tuple[str, ...]) -> set[str]:
    return {v.lower() for v in values if v}


def _has_episode_number(show: Show) -> bool:
    return isinstance(show.number, int) and not isinstance(show.number, bool) and show.number > 0


def filter_shows(shows: list[Show], options: ShowOptions) -> list[Show]:
    """Apply every configured filter dimension to a list of shows.

    Rows without a positive episode number are always dropped (specials,
    placeholders). Untimed shows always pass the minimum-airtime check.

    Raises:
        TypeError: If options is None
    """
    if options is None:
        raise TypeError("filter_shows() requires ShowOptions, got None")
    if not shows:
        return []

    types = _lowered(options.types)
    networks = _lowered(options.networks)
    genres = _lowered(options.genres)
    languages = _lowered(options.languages)
    excluded = [name for name in options.exclude_show_names if name]

    min_minutes = INVALID_TIME
    if options.min_airtime:
        min_minutes = parse_time_to_minutes(options.min_airtime)
        if min_minutes == INVALID_TIME:
            logger.warning("[FILTER] Ignoring unparseable minimum airtime '%s'", options.min_airtime)

    result = []
    for show in shows:
        if not _has_episode_number(show):
            continue
        if types and show.type.lower() not in types:
            continue
        if networks and strip_country_suffix(show.network).lower() not in networks:
            continue
        if genres and not any(g.lower() in genres for g in show.genres):
            continue
        if languages and (show.language is None or show.language.lower() not in languages):
            continue
        if min_minutes != INVALID_TIME and show.airtime:
            if parse_time_to_minutes(show.airtime) < min_minutes:
                continue
        if excluded and any(name in show.name for name in excluded):
            continue
        result.append(show)

    if len(result) != len(shows):
        logger.debug("[FILTER] Kept %d of %d shows", len(result), len(shows))
    return result
