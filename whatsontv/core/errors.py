"""Exception hierarchy.

Partial data never raises: transport failures and malformed items are
absorbed by the pipeline. These exceptions surface from collaborators
(transport, Slack, config loading) and are caught at their call sites.
"""


class WhatsOnTVError(Exception):
    """Base class for all WhatsOnTV errors."""


class HttpError(WhatsOnTVError):
    """Transport-level failure (network error or non-2xx response)."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class SlackError(WhatsOnTVError):
    """Slack API rejected a message (``ok: false``)."""


class ConfigError(WhatsOnTVError):
    """Config file is unreadable, not JSON, or fails validation."""
