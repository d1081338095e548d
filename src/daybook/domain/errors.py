from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Event


class DaybookError(Exception):
    """Base class for errors raised by the calendar core."""


class InvalidEventError(DaybookError, ValueError):
    """Raised when event fields cannot form a valid event."""


class OverlapError(DaybookError):
    def __init__(self, event: "Event", conflict: "Event") -> None:
        super().__init__(
            f"Event times overlap: {event.start_time}-{event.end_time} conflicts with "
            f"'{conflict.name}' ({conflict.start_time}-{conflict.end_time}) on {event.date.isoformat()}"
        )
        self.event = event
        self.conflict = conflict


class EventNotFoundError(DaybookError, LookupError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f"No event with id {event_id!r}")
        self.event_id = event_id


class MalformedStorageError(DaybookError):
    """Raised by repositories when persisted data cannot be parsed."""
