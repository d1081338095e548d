"""Calendar grid arithmetic and the event store."""

from .calendar_grid import (
    MONTH_NAMES,
    WEEKDAY_LABELS,
    CalendarCell,
    build_month_grid,
    long_date,
    month_end,
    month_name,
    month_start,
    month_title,
    next_month,
    prev_month,
    week_end,
    week_start,
)
from .event_store import EventStore

__all__ = [
    "MONTH_NAMES",
    "WEEKDAY_LABELS",
    "CalendarCell",
    "EventStore",
    "build_month_grid",
    "long_date",
    "month_end",
    "month_name",
    "month_start",
    "month_title",
    "next_month",
    "prev_month",
    "week_end",
    "week_start",
]
