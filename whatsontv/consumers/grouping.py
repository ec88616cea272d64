"""Grouping and ordering of shows for rendering."""

from whatsontv.core.types import NetworkGroups, Show
from whatsontv.utilities.time import parse_time_to_minutes


def group_shows_by_network(shows: list[Show]) -> NetworkGroups:
    """Bucket shows by resolved network name, in first-seen network order.

    Suffixed and unsuffixed names ('BBC One' vs 'BBC One (GB)') are
    separate buckets.
    """
    groups: NetworkGroups = {}
    for show in shows:
        groups.setdefault(show.network, []).append(show)
    return groups


def sort_shows_by_time(shows: list[Show]) -> list[Show]:
    """Timed shows by airtime ascending, then untimed shows.

    Stable: equal times and all untimed shows keep their input order.
    Returns a new list.
    """

    def sort_key(show: Show) -> tuple[int, int]:
        if not show.airtime:
            return (1, 0)
        return (0, parse_time_to_minutes(show.airtime))

    return sorted(shows, key=sort_key)


def group_shows_by_show_id(shows: list[Show]) -> dict[int, list[Show]]:
    """Episodes keyed by show id, in first-seen order."""
    groups: dict[int, list[Show]] = {}
    for show in shows:
        groups.setdefault(show.id, []).append(show)
    return groups


def sort_episodes_by_number(shows: list[Show]) -> list[Show]:
    """Episodes by (season, number) ascending."""
    return sorted(shows, key=lambda s: (s.season, s.number))
