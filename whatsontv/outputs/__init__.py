"""Output services - console and Slack."""

from whatsontv.outputs.base import BaseOutputService
from whatsontv.outputs.console import ConsoleOutputService, ConsoleSink
from whatsontv.outputs.slack import SlackClient, SlackOutputService, chunk_blocks

__all__ = [
    "BaseOutputService",
    "ConsoleOutputService",
    "ConsoleSink",
    "SlackClient",
    "SlackOutputService",
    "chunk_blocks",
]
