"""Application services orchestrating storage, calendar state, and export."""

from __future__ import annotations

from .calendar import CalendarService
from .context import ServiceContext
from .export import FileExporter, export_filename, format_event_line, format_events_csv

__all__ = [
    "CalendarService",
    "FileExporter",
    "ServiceContext",
    "export_filename",
    "format_event_line",
    "format_events_csv",
]
