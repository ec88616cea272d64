"""Logging configuration.

Log records go to stderr so that schedule output on stdout stays clean
when piped.
"""

import logging
import os
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = "WARNING"

# Chatty third-party loggers held at WARNING unless debugging
_NOISY_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.environ.get("LOG_LEVEL", DEFAULT_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | int | None = None) -> int:
    """Configure root logging.

    Args:
        level: Level name or number. Falls back to the LOG_LEVEL
            environment variable, then WARNING.

    Returns:
        The numeric level applied
    """
    numeric = _resolve_level(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(level=numeric, handlers=[handler], force=True)

    third_party = logging.DEBUG if numeric <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party)

    return numeric
