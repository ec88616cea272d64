"""Consumers - filtering and grouping over normalized shows."""

from whatsontv.consumers.filtering import filter_shows, strip_country_suffix
from whatsontv.consumers.grouping import (
    group_shows_by_network,
    group_shows_by_show_id,
    sort_episodes_by_number,
    sort_shows_by_time,
)

__all__ = [
    "filter_shows",
    "group_shows_by_network",
    "group_shows_by_show_id",
    "sort_episodes_by_number",
    "sort_shows_by_time",
    "strip_country_suffix",
]
