"""Render backends - text lines and Slack Block Kit."""

from whatsontv.formatters.base import NO_SHOWS_MESSAGE, BaseShowFormatter
from whatsontv.formatters.slack import SlackShowFormatter, get_type_emoji
from whatsontv.formatters.styles import AnsiStyleService, PlainStyleService, create_style_service
from whatsontv.formatters.text import TextShowFormatter

__all__ = [
    "NO_SHOWS_MESSAGE",
    "AnsiStyleService",
    "BaseShowFormatter",
    "PlainStyleService",
    "SlackShowFormatter",
    "TextShowFormatter",
    "create_style_service",
    "get_type_emoji",
]
