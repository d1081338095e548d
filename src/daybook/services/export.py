from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable

from ..core import long_date, month_name
from ..domain import Event, as_day

logger = logging.getLogger(__name__)

MISSING_DESCRIPTION = "N/A"


def format_event_line(event: Event) -> str:
    fields = [
        event.name,
        event.start_time,
        event.end_time,
        event.description or MISSING_DESCRIPTION,
        event.category.value,
        long_date(event.date),
    ]
    return ",".join(fields)


def format_events_csv(events: Iterable[Event]) -> str:
    """One comma-separated line per event, no header row."""

    return "\n".join(format_event_line(event) for event in events)


def export_filename(reference_month: date) -> str:
    day = as_day(reference_month)
    return f"events-{month_name(day)}-{day.year}.csv"


@dataclass(slots=True)
class FileExporter:
    directory: Path

    def write(self, filename: str, content: str) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / filename
        target.write_text(content, encoding="utf-8")
        logger.info("Exported %d bytes to %s", len(content.encode("utf-8")), target)
        return target
