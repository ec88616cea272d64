"""Time-of-day utilities.

Single source of truth for parsing schedule times. Airtimes are compared
as minutes since midnight and never shown to the user in that form.

Callers branch on an empty airtime before parsing; an empty or missing
airtime means "no fixed time" and sorts after everything timed.
"""

import logging
import re
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "INVALID_TIME",
    "TBA",
    "format_time_with_period",
    "get_today_date",
    "is_valid_time",
    "normalize_airtime",
    "parse_time_to_minutes",
]

INVALID_TIME = -1
TBA = "TBA"

# Leading hour, optional ":MM", then anything (AM/PM, zone labels, ...)
_TIME_PATTERN = re.compile(r"^\s*(\d{1,2})(?::(\d{1,2}))?(.*)$", re.DOTALL)
_PM_PATTERN = re.compile(r"p\.?m", re.IGNORECASE)
_AM_PATTERN = re.compile(r"a\.?m", re.IGNORECASE)


def parse_time_to_minutes(text: str | None) -> int:
    """Convert a time string to minutes since midnight.

    Accepts "20:00", "8:00", "8:00 PM", "8pm" and bare hours ("20").
    AM/PM is detected case-insensitively anywhere after the numeric part.
    12 AM maps to hour 0; any PM hour below 12 is advanced by 12.

    Args:
        text: Time string

    Returns:
        Minutes since midnight, or INVALID_TIME (-1) if unparseable
        (including "TBA") or out of range
    """
    if not text or not isinstance(text, str):
        return INVALID_TIME

    match = _TIME_PATTERN.match(text)
    if not match:
        return INVALID_TIME

    hours = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) is not None else 0
    rest = match.group(3)

    if _PM_PATTERN.search(rest):
        if hours < 12:
            hours += 12
    elif _AM_PATTERN.search(rest):
        if hours == 12:
            hours = 0

    if not (0 <= hours < 24 and 0 <= minutes < 60):
        return INVALID_TIME
    return hours * 60 + minutes


def is_valid_time(text: str | None) -> bool:
    """Check whether a time string parses to a real time of day."""
    return parse_time_to_minutes(text) != INVALID_TIME


def normalize_airtime(text: str | None) -> str:
    """Canonicalize an airtime to "HH:MM" (24h), or "" if unusable."""
    minutes = parse_time_to_minutes(text)
    if minutes == INVALID_TIME:
        return ""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time_with_period(text: str | None) -> str:
    """Format a time for display (e.g., '20:00' -> '8:00 PM').

    Returns:
        12-hour time with AM/PM, or 'TBA' when missing or unparseable
    """
    minutes = parse_time_to_minutes(text)
    if minutes == INVALID_TIME:
        return TBA

    hours, mins = divmod(minutes, 60)
    period = "PM" if hours >= 12 else "AM"
    hour12 = hours % 12 or 12
    return f"{hour12}:{mins:02d} {period}"


def get_today_date(timezone: str | None = None) -> str:
    """Today's date as YYYY-MM-DD.

    Args:
        timezone: Optional IANA timezone name (e.g., 'America/New_York').
            Unknown names fall back to the machine's local date.
    """
    if timezone:
        try:
            return datetime.now(ZoneInfo(timezone)).date().isoformat()
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("[TIME] Unknown timezone '%s', using local date", timezone)
    return date.today().isoformat()
