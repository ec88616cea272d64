"""Episode tags and episode-range collapsing.

Used when several same-day episodes of one show render as a single line:

    S1E1, S1E2, S1E3, S1E5  ->  "S1E1-3, S1E5"

The text backend renders padded tags ("S01E01-03"); grouped summaries
use the unpadded form.
"""

import re
from collections.abc import Iterable

from whatsontv.core.types import Show

__all__ = [
    "format_episode_info",
    "format_episode_ranges",
    "parse_episode_ranges",
]

EpisodeRef = Show | tuple[int, int]

_RANGE_TOKEN = re.compile(r"^S(\d+)E(\d+)(?:-(\d+))?$", re.IGNORECASE)


def _num(value: int, pad: bool) -> str:
    return f"{value:02d}" if pad else str(value)


def format_episode_info(show: Show | None, pad: bool = True) -> str:
    """Format a single episode tag (e.g., 'S01E05').

    Unknown (zero) season or episode numbers are left out; if both are
    unknown the tag is empty.
    """
    if show is None:
        return ""

    has_season = show.season > 0
    has_episode = show.number > 0
    if not has_season and not has_episode:
        return ""

    result = ""
    if has_season:
        result += f"S{_num(show.season, pad)}"
    if has_episode:
        result += f"E{_num(show.number, pad)}"
    return result


def _as_pair(episode: EpisodeRef) -> tuple[int, int]:
    if isinstance(episode, Show):
        return (episode.season, episode.number)
    season, number = episode
    return (int(season), int(number))


def _format_run(season: int, first: int, last: int, pad: bool) -> str:
    tag = f"S{_num(season, pad)}E{_num(first, pad)}"
    if last != first:
        tag += f"-{_num(last, pad)}"
    return tag


def format_episode_ranges(episodes: Iterable[EpisodeRef], pad: bool = False) -> str:
    """Collapse episodes of one show into a compact range description.

    Episodes are sorted by (season, number). Consecutive numbers within a
    season collapse to 'S{season}E{first}-{last}'; gaps are listed
    individually. Seasons are processed in order and joined with ', '.

    Args:
        episodes: Shows or (season, number) pairs, all from the same show
        pad: Zero-pad numbers to two digits ('S01E01-03')

    Returns:
        Range string, or '' for no episodes
    """
    pairs = sorted(set(_as_pair(e) for e in episodes))
    if not pairs:
        return ""

    parts: list[str] = []
    run_season, run_first = pairs[0]
    run_last = run_first

    for season, number in pairs[1:]:
        if season == run_season and number == run_last + 1:
            run_last = number
            continue
        parts.append(_format_run(run_season, run_first, run_last, pad))
        run_season, run_first, run_last = season, number, number

    parts.append(_format_run(run_season, run_first, run_last, pad))
    return ", ".join(parts)


def parse_episode_ranges(text: str) -> list[tuple[int, int]]:
    """Expand a range string back into sorted (season, number) pairs.

    Inverse of format_episode_ranges; accepts padded and unpadded tags.

    Raises:
        ValueError: If a token is not an episode tag or range
    """
    if not text or not text.strip():
        return []

    pairs: set[tuple[int, int]] = set()
    for token in text.split(","):
        token = token.strip()
        match = _RANGE_TOKEN.match(token)
        if not match:
            raise ValueError(f"Not an episode range: {token!r}")
        season = int(match.group(1))
        first = int(match.group(2))
        last = int(match.group(3)) if match.group(3) else first
        if last < first:
            raise ValueError(f"Descending episode range: {token!r}")
        pairs.update((season, n) for n in range(first, last + 1))

    return sorted(pairs)
