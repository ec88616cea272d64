"""Core types and interfaces for WhatsOnTV.

All data structures are dataclasses with attribute access.
"""

from whatsontv.core.errors import ConfigError, HttpError, SlackError, WhatsOnTVError
from whatsontv.core.interfaces import OutputSink, StyleService
from whatsontv.core.types import (
    UNKNOWN_NETWORK,
    UNKNOWN_SHOW,
    UNKNOWN_TYPE,
    FetchSource,
    NetworkGroups,
    Show,
    ShowOptions,
)

__all__ = [
    # Types
    "FetchSource",
    "NetworkGroups",
    "Show",
    "ShowOptions",
    "UNKNOWN_NETWORK",
    "UNKNOWN_SHOW",
    "UNKNOWN_TYPE",
    # Errors
    "ConfigError",
    "HttpError",
    "SlackError",
    "WhatsOnTVError",
    # Interfaces
    "OutputSink",
    "StyleService",
]
