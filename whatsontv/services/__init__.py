"""Service layer - the fetch pipeline consumed by the output layer."""

from whatsontv.services.schedule import ScheduleService, dedupe_shows

__all__ = ["ScheduleService", "dedupe_shows"]
