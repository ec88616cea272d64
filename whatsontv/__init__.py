"""WhatsOnTV - daily TV and streaming schedule from the TVMaze API."""

__version__ = "1.0.0"
