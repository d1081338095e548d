from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from ..core import (
    CalendarCell,
    EventStore,
    build_month_grid,
    month_start,
    month_title,
    next_month,
    prev_month,
)
from ..domain import Event, EventCategory, InvalidEventError, as_day
from .context import ServiceContext
from .export import export_filename, format_events_csv

logger = logging.getLogger(__name__)


class CalendarService:
    """Presentation-facing state: which month is shown and which day is picked."""

    def __init__(self, context: ServiceContext, *, today: Optional[date] = None) -> None:
        self.context = context
        self._today = as_day(today) if today is not None else None
        self._reference_month = month_start(self.today)
        self._selected_day: Optional[date] = None

    @property
    def store(self) -> EventStore:
        return self.context.store

    @property
    def today(self) -> date:
        return self._today or date.today()

    @property
    def reference_month(self) -> date:
        return self._reference_month

    @property
    def selected_day(self) -> Optional[date]:
        return self._selected_day

    # ------------------------------------------------------------------ navigation

    def show_previous_month(self) -> date:
        self._reference_month = prev_month(self._reference_month)
        return self._reference_month

    def show_next_month(self) -> date:
        self._reference_month = next_month(self._reference_month)
        return self._reference_month

    def show_month(self, day: date) -> date:
        self._reference_month = month_start(day)
        return self._reference_month

    def select_day(self, day: date) -> date:
        self._selected_day = as_day(day)
        return self._selected_day

    def clear_selection(self) -> None:
        self._selected_day = None

    # ------------------------------------------------------------------ rendering

    def title(self) -> str:
        return month_title(self._reference_month)

    def visible_weeks(self) -> List[List[CalendarCell]]:
        return build_month_grid(self._reference_month, self._selected_day, today=self.today)

    def busy_days(self) -> set[date]:
        return self.store.days_with_events(self._reference_month)

    def events_for_selected_day(self) -> List[Event]:
        if self._selected_day is None:
            return []
        return self.store.events_for_day(self._selected_day)

    # ------------------------------------------------------------------ mutations

    def create_event(
        self,
        name: str,
        start_time: str,
        end_time: str,
        *,
        description: str = "",
        category: EventCategory = EventCategory.WORK,
        day: Optional[date] = None,
    ) -> Event:
        target_day = day or self._selected_day
        if target_day is None:
            raise InvalidEventError("Select a day before adding an event.")
        event = Event(
            name=name,
            start_time=start_time,
            end_time=end_time,
            date=target_day,
            category=category,
            description=description,
        )
        return self.store.add(event)

    def edit_event(
        self,
        event_id: str,
        *,
        name: str,
        start_time: str,
        end_time: str,
        description: str = "",
        category: EventCategory = EventCategory.WORK,
    ) -> Event:
        current = self.store.get(event_id)
        updated = current.replace(
            name=name,
            start_time=start_time,
            end_time=end_time,
            description=description,
            category=category,
        )
        return self.store.update(event_id, updated)

    def remove_event(self, event_id: str) -> Event:
        return self.store.delete(event_id)

    def export_csv(self) -> Path:
        content = format_events_csv(self.store.events)
        filename = export_filename(self._reference_month)
        assert self.context.exporter is not None
        path = self.context.exporter.write(filename, content)
        logger.info("Exported %d events for %s", len(self.store), self.title())
        return path
