"""TVMaze API HTTP client.

Handles raw HTTP requests to the TVMaze schedule endpoints.
No data transformation - just fetch and return JSON.
"""

import logging

from whatsontv.utilities.http import HttpClient

logger = logging.getLogger(__name__)

TVMAZE_BASE_URL = "https://api.tvmaze.com"


class TVMazeClient:
    """Low-level TVMaze schedule client."""

    def __init__(self, http: HttpClient | None = None, base_url: str = TVMAZE_BASE_URL):
        self._http = http or HttpClient()
        self._base_url = base_url.rstrip("/")

    def network_schedule_url(self, date: str | None = None, country: str | None = None) -> str:
        """URL for the broadcast schedule (/schedule)."""
        return self._build_url("/schedule", date=date, country=country)

    def web_schedule_url(self, date: str | None = None) -> str:
        """URL for the streaming schedule (/schedule/web)."""
        return self._build_url("/schedule/web", date=date)

    def _build_url(self, path: str, **params: str | None) -> str:
        query = "&".join(f"{key}={value.strip()}" for key, value in params.items() if value and value.strip())
        url = f"{self._base_url}{path}"
        return f"{url}?{query}" if query else url

    def get_network_schedule(self, date: str | None = None, country: str | None = None) -> list:
        """Fetch the broadcast schedule for a date and country.

        Raises:
            HttpError: On transport failure

        Returns:
            Raw schedule rows; [] if the body is not a list
        """
        return self._get_list(self.network_schedule_url(date, country))

    def get_web_schedule(self, date: str | None = None) -> list:
        """Fetch the streaming (web channel) schedule for a date.

        Raises:
            HttpError: On transport failure
        """
        return self._get_list(self.web_schedule_url(date))

    def _get_list(self, url: str) -> list:
        logger.debug("[TVMAZE] GET %s", url)
        response = self._http.get(url)
        if not isinstance(response.data, list):
            logger.warning("[TVMAZE] Unexpected response body from %s", url)
            return []
        return response.data

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
