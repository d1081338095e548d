from __future__ import annotations

import logging
from datetime import date
from typing import Iterator, List, Optional, Set

from ..data.repositories import EventRepository
from ..domain import Event, EventNotFoundError, OverlapError, as_day
from .calendar_grid import month_end, month_start

logger = logging.getLogger(__name__)


class EventStore:
    """Owns the event list and keeps same-day events from overlapping."""

    def __init__(self, repository: EventRepository) -> None:
        self._repository = repository
        self._events: List[Event] = []
        for event in repository.load():
            conflict = self.find_conflict(event)
            if conflict is not None:
                logger.warning(
                    "Dropping stored event %r on %s: overlaps %r", event.name, event.date, conflict.name
                )
                continue
            self._events.append(event)
        logger.debug("Event store loaded with %d events", len(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    # ------------------------------------------------------------------ queries

    def get(self, event_id: str) -> Event:
        return self._events[self._position(event_id)]

    def events_for_day(self, day: date) -> List[Event]:
        target = as_day(day)
        return [event for event in self._events if event.date == target]

    def days_with_events(self, reference_month: date) -> Set[date]:
        first = month_start(reference_month)
        last = month_end(reference_month)
        return {event.date for event in self._events if first <= event.date <= last}

    def find_conflict(self, candidate: Event, *, ignore_id: Optional[str] = None) -> Optional[Event]:
        for existing in self._events:
            if ignore_id is not None and existing.id == ignore_id:
                continue
            if candidate.overlaps(existing):
                return existing
        return None

    # ------------------------------------------------------------------ mutations

    def add(self, event: Event) -> Event:
        conflict = self.find_conflict(event)
        if conflict is not None:
            logger.info("Rejected event %r on %s: overlaps %r", event.name, event.date, conflict.name)
            raise OverlapError(event, conflict)
        self._events.append(event)
        logger.debug("Added event %s on %s", event.id, event.date)
        self._persist()
        return event

    def update(self, event_id: str, updated: Event) -> Event:
        position = self._position(event_id)
        return self._replace_at(position, updated)

    def delete(self, event_id: str) -> Event:
        position = self._position(event_id)
        return self._remove_at(position)

    def update_at(self, index: int, updated: Event) -> Event:
        self._check_index(index)
        return self._replace_at(index, updated)

    def delete_at(self, index: int) -> Event:
        self._check_index(index)
        return self._remove_at(index)

    # ------------------------------------------------------------------ internals

    def _replace_at(self, position: int, updated: Event) -> Event:
        current = self._events[position]
        if updated.id != current.id:
            updated = updated.replace(id=current.id)
        conflict = self.find_conflict(updated, ignore_id=current.id)
        if conflict is not None:
            logger.info("Rejected update of %s: overlaps %r", current.id, conflict.name)
            raise OverlapError(updated, conflict)
        self._events[position] = updated
        logger.debug("Updated event %s", current.id)
        self._persist()
        return updated

    def _remove_at(self, position: int) -> Event:
        removed = self._events.pop(position)
        logger.debug("Deleted event %s", removed.id)
        self._persist()
        return removed

    def _position(self, event_id: str) -> int:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        raise EventNotFoundError(event_id)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._events):
            raise IndexError(f"Event index {index} out of range (0..{len(self._events) - 1})")

    def _persist(self) -> None:
        self._repository.save(list(self._events))


__all__ = ["EventStore"]
