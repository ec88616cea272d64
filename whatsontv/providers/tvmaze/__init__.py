"""TVMaze provider.

Fetches the broadcast (/schedule) and streaming (/schedule/web) feeds and
normalizes both into Show records.
"""

from whatsontv.providers.tvmaze.client import TVMazeClient
from whatsontv.providers.tvmaze.normalizer import (
    DEFAULT_STREAMING_BRANDS,
    is_streaming_brand,
    normalize_schedule_item,
    streaming_brands_for,
    transform_schedule,
)

__all__ = [
    "DEFAULT_STREAMING_BRANDS",
    "TVMazeClient",
    "is_streaming_brand",
    "normalize_schedule_item",
    "streaming_brands_for",
    "transform_schedule",
]
