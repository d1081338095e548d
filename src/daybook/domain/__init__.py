"""Domain models for the month calendar."""

from __future__ import annotations

from .enums import EventCategory
from .errors import (
    DaybookError,
    EventNotFoundError,
    InvalidEventError,
    MalformedStorageError,
    OverlapError,
)
from .models import Event, as_day

__all__ = [
    "DaybookError",
    "Event",
    "EventCategory",
    "EventNotFoundError",
    "InvalidEventError",
    "MalformedStorageError",
    "OverlapError",
    "as_day",
]
