"""Schedule service layer.

Fetches one day's schedule from the configured TVMaze feeds, normalizes,
deduplicates and filters it. Output layers call this service - never the
TVMaze client directly.

A failed feed degrades to zero items; a run with both feeds down renders
the normal "no shows" output.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from whatsontv.consumers.filtering import filter_shows
from whatsontv.core.errors import HttpError
from whatsontv.core.types import FetchSource, Show, ShowOptions
from whatsontv.providers.tvmaze.client import TVMazeClient
from whatsontv.providers.tvmaze.normalizer import transform_schedule
from whatsontv.utilities.time import get_today_date

logger = logging.getLogger(__name__)


def dedupe_shows(shows: list[Show] | None) -> list[Show]:
    """Drop repeated episodes, keeping the first occurrence.

    Two rows are the same episode when id, season and number all match.
    Order of the survivors is the input order.
    """
    if not isinstance(shows, list):
        return []

    seen: set[str] = set()
    unique = []
    for show in shows:
        key = show.dedupe_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(show)
    return unique


class ScheduleService:
    """Fetch-normalize-dedupe-filter pipeline for one day's schedule."""

    def __init__(self, client: TVMazeClient):
        self._client = client

    def fetch_shows(self, options: ShowOptions) -> list[Show]:
        """Fetch shows matching the given options.

        With FetchSource.ALL both feeds are requested in parallel and the
        results combined network-first before deduplication.

        Args:
            options: Merged show options

        Returns:
            Filtered, deduplicated shows in feed order

        Raises:
            TypeError: If options is None
        """
        if options is None:
            raise TypeError("fetch_shows() requires ShowOptions, got None")

        date = options.date or get_today_date(options.timezone)
        source = FetchSource(options.fetch_source)

        network_rows: list = []
        web_rows: list = []

        if source == FetchSource.ALL:
            with ThreadPoolExecutor(max_workers=2) as executor:
                network_future = executor.submit(
                    self._fetch_feed, "network", self._client.get_network_schedule, date, options.country
                )
                web_future = executor.submit(self._fetch_feed, "web", self._client.get_web_schedule, date)
                network_rows = network_future.result()
                web_rows = web_future.result()
        elif source == FetchSource.NETWORK:
            network_rows = self._fetch_feed("network", self._client.get_network_schedule, date, options.country)
        else:
            web_rows = self._fetch_feed("web", self._client.get_web_schedule, date)

        shows = transform_schedule(network_rows, options.country, options.streaming_brands)
        shows += transform_schedule(web_rows, options.country, options.streaming_brands)

        unique = dedupe_shows(shows)
        filtered = filter_shows(unique, options)
        logger.info(
            "[SCHEDULE] %s: %d rows, %d unique, %d after filters",
            date,
            len(shows),
            len(unique),
            len(filtered),
        )
        return filtered

    def _fetch_feed(self, label: str, fetch: Callable[..., list], *args) -> list:
        try:
            return fetch(*args)
        except HttpError as e:
            logger.warning("[SCHEDULE] Failed to fetch %s schedule: %s", label, e)
        except Exception as e:
            logger.error("[SCHEDULE] Unexpected error fetching %s schedule: %s", label, e, exc_info=True)
        return []
