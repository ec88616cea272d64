"""Core data types for WhatsOnTV.

All data structures are pure dataclasses with attribute access.
A Show is built once by the schedule normalizer and never mutated;
filtering and grouping select and re-bucket, they never edit.
"""

from dataclasses import dataclass, field
from enum import Enum

UNKNOWN_SHOW = "Unknown Show"
UNKNOWN_TYPE = "Unknown Type"
UNKNOWN_NETWORK = "Unknown Network"


class FetchSource(str, Enum):
    """Which TVMaze schedule feeds to pull."""

    NETWORK = "network"  # /schedule (broadcast and cable)
    WEB = "web"  # /schedule/web (streaming)
    ALL = "all"  # both, fetched in parallel


@dataclass(frozen=True)
class Show:
    """One scheduled episode, normalized from either TVMaze feed."""

    id: int
    name: str
    type: str = UNKNOWN_TYPE
    language: str | None = None
    genres: tuple[str, ...] = ()
    network: str = UNKNOWN_NETWORK
    summary: str | None = None
    airtime: str = ""  # "HH:MM" 24h, or "" for no fixed time
    season: int = 0  # 0 = unknown
    number: int = 0  # 0 = unknown

    @property
    def has_airtime(self) -> bool:
        return bool(self.airtime)

    @property
    def dedupe_key(self) -> str:
        """Identity across feeds: the same episode of the same show."""
        return f"{self.id}-{self.season}-{self.number}"


# Network display name -> shows, in first-seen network order
NetworkGroups = dict[str, list[Show]]


@dataclass(frozen=True)
class ShowOptions:
    """Already-merged pipeline options.

    Empty tuples mean "no filter on this dimension", not "exclude everything".
    """

    date: str = ""  # YYYY-MM-DD, "" = today
    country: str = "US"
    types: tuple[str, ...] = ()
    networks: tuple[str, ...] = ()
    genres: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    min_airtime: str = ""  # "HH:MM", "" = no minimum
    exclude_show_names: tuple[str, ...] = ()
    fetch_source: FetchSource = FetchSource.ALL
    timezone: str | None = None  # IANA name used to resolve "today"

    # Home-country streaming brands that suppress the "(CC)" network suffix
    streaming_brands: tuple[str, ...] = field(default=(), repr=False)
