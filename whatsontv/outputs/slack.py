"""Slack output.

Posts via chat.postMessage. Content blocks are split across messages
because Slack rejects more than 50 blocks in one message.
"""

import logging

from whatsontv.core.errors import SlackError
from whatsontv.core.types import NetworkGroups
from whatsontv.formatters.base import BaseShowFormatter, NO_SHOWS_MESSAGE
from whatsontv.formatters.slack import SlackBlock, header
from whatsontv.outputs.base import BaseOutputService
from whatsontv.utilities.http import HttpClient

logger = logging.getLogger(__name__)

SLACK_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"
MAX_BLOCKS_PER_MESSAGE = 50
DEFAULT_USERNAME = "WhatsOnTV"


class SlackClient:
    """Minimal Slack Web API client for posting messages."""

    def __init__(
        self,
        token: str,
        channel_id: str,
        username: str = DEFAULT_USERNAME,
        icon_emoji: str | None = None,
        http: HttpClient | None = None,
        url: str = SLACK_POST_MESSAGE_URL,
    ):
        self._token = token
        self._channel_id = channel_id
        self._username = username
        self._icon_emoji = icon_emoji
        self._http = http or HttpClient()
        self._url = url

    def post_message(
        self,
        text: str,
        blocks: list[SlackBlock] | None = None,
        channel: str | None = None,
        username: str | None = None,
        icon_emoji: str | None = None,
    ) -> dict:
        """Post one message, filling channel/username/icon defaults.

        Raises:
            HttpError: On transport failure
            SlackError: If Slack answers ok=false
        """
        payload: dict = {
            "channel": channel or self._channel_id,
            "text": text,
            "username": username or self._username,
        }
        icon = icon_emoji or self._icon_emoji
        if icon:
            payload["icon_emoji"] = icon
        if blocks:
            payload["blocks"] = blocks

        response = self._http.post(
            self._url,
            body=payload,
            headers={"Authorization": f"Bearer {self._token}"},
        )

        data = response.data if isinstance(response.data, dict) else {}
        if not data.get("ok"):
            error = data.get("error", "unknown_error")
            raise SlackError(f"Slack rejected message to {payload['channel']}: {error}")

        logger.debug("[SLACK] Posted message to %s (%d blocks)", payload["channel"], len(blocks or []))
        return data

    def close(self) -> None:
        self._http.close()


def chunk_blocks(blocks: list[SlackBlock], size: int = MAX_BLOCKS_PER_MESSAGE) -> list[list[SlackBlock]]:
    """Split blocks into consecutive chunks of at most `size`."""
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [blocks[i : i + size] for i in range(0, len(blocks), size)]


class SlackOutputService(BaseOutputService[SlackBlock]):
    """Renders Slack formatter output as a series of channel messages."""

    def __init__(
        self,
        formatter: BaseShowFormatter[SlackBlock],
        client: SlackClient,
        sort_by_time: bool = True,
        max_blocks: int = MAX_BLOCKS_PER_MESSAGE,
    ):
        super().__init__(formatter, sort_by_time)
        self._client = client
        self._max_blocks = max_blocks

    def render_header(self, date: str) -> None:
        title = f"TV Shows for {date}"
        self._client.post_message(text=title, blocks=[header(f"📺 {title}")])

    def render_content(self, groups: NetworkGroups) -> None:
        blocks = self.format_content(groups)
        for chunk in chunk_blocks(blocks, self._max_blocks):
            self._client.post_message(text="TV Shows by Network", blocks=chunk)

    def render_footer(self) -> None:
        # Footer context block is part of the content blocks
        pass

    def render_no_shows(self) -> None:
        self._client.post_message(text=NO_SHOWS_MESSAGE, blocks=self._formatter.format_no_shows())

    def handle_error(self, error: Exception) -> None:
        try:
            self._client.post_message(text=f"Error fetching TV shows: {error}")
        except Exception as e:
            logger.error("[SLACK] Failed to send error message: %s (original error: %s)", e, error)
