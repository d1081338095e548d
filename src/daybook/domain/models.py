from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Dict
from uuid import uuid4

from .enums import EventCategory
from .errors import InvalidEventError

_TIME_PATTERN = re.compile(r"([01]\d|2[0-3]):[0-5]\d")


def _new_id() -> str:
    return uuid4().hex


def as_day(value: Any) -> date:
    """Reduce a ``date``/``datetime`` to its calendar day."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {value!r}")


def _parse_date(value: Any) -> date:
    if isinstance(value, (date, datetime)):
        return as_day(value)
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return date.fromisoformat(text)
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        # Aware timestamps were written from local midnight; read them back in local time.
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
        return parsed.date()
    raise ValueError(f"Unsupported date value: {value!r}")


def _field(record: Dict[str, Any], key: str, legacy_key: str) -> Any:
    # Records written by the browser widget use camelCase time keys.
    if key in record:
        return record[key]
    return record[legacy_key]


def _parse_category(value: Any) -> EventCategory:
    if isinstance(value, EventCategory):
        return value
    try:
        return EventCategory(str(value).lower())
    except ValueError as exc:
        raise InvalidEventError(f"Unknown category: {value!r}") from exc


@dataclass(slots=True)
class Event:
    name: str
    start_time: str
    end_time: str
    date: date
    category: EventCategory = EventCategory.WORK
    description: str = ""
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidEventError(f"Event name must be text, got {self.name!r}.")
        self.name = self.name.strip()
        if not self.name:
            raise InvalidEventError("Event name is required.")
        for label, value in (("start", self.start_time), ("end", self.end_time)):
            if not isinstance(value, str) or not _TIME_PATTERN.fullmatch(value):
                raise InvalidEventError(f"Invalid {label} time {value!r}; expected HH:MM.")
        if self.start_time >= self.end_time:
            raise InvalidEventError(
                f"Start time {self.start_time} must be before end time {self.end_time}."
            )
        self.date = as_day(self.date)
        self.category = _parse_category(self.category)
        if self.description is None:
            self.description = ""
        elif not isinstance(self.description, str):
            raise InvalidEventError(f"Event description must be text, got {self.description!r}.")

    def overlaps(self, other: "Event") -> bool:
        """Half-open ``[start, end)`` intersection on the same calendar day."""

        if self.date != other.date:
            return False
        return self.start_time < other.end_time and self.end_time > other.start_time

    def replace(self, **changes: Any) -> "Event":
        values = {
            "id": self.id,
            "name": self.name,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "date": self.date,
            "category": self.category,
            "description": self.description,
        }
        values.update(changes)
        return Event(**values)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Event":
        return cls(
            id=str(record.get("id") or _new_id()),
            name=record["name"],
            start_time=_field(record, "start_time", "startTime"),
            end_time=_field(record, "end_time", "endTime"),
            date=_parse_date(record["date"]),
            category=_parse_category(record.get("category") or EventCategory.WORK),
            description=record.get("description"),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "description": self.description,
            "category": self.category.value,
            "date": datetime.combine(self.date, time.min).isoformat(),
        }
