from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Protocol

import orjson

from ...domain import Event, MalformedStorageError

logger = logging.getLogger(__name__)


class EventRepository(Protocol):
    def load(self) -> List[Event]: ...

    def save(self, events: Iterable[Event]) -> None: ...


class InMemoryEventRepository:
    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: List[Event] = list(events)

    def load(self) -> List[Event]:
        return list(self._events)

    def save(self, events: Iterable[Event]) -> None:
        self._events = list(events)


class JsonEventRepository:
    """Stores the full event list as one JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[Event]:
        if not self._path.exists():
            logger.debug("No event file at %s; starting empty", self._path)
            return []
        try:
            events = self._decode(self._path.read_bytes())
        except MalformedStorageError as exc:
            logger.warning("Ignoring unreadable event file %s: %s", self._path, exc)
            return []
        except OSError as exc:
            logger.warning("Could not read event file %s: %s", self._path, exc)
            return []
        logger.debug("Loaded %d events from %s", len(events), self._path)
        return events

    def save(self, events: Iterable[Event]) -> None:
        records = [event.to_record() for event in events]
        payload = orjson.dumps({"events": records}, option=orjson.OPT_INDENT_2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(payload + b"\n")
        except OSError:
            logger.exception("Failed to write %d events to %s", len(records), self._path)
            return
        logger.debug("Saved %d events to %s", len(records), self._path)

    @staticmethod
    def _decode(raw: bytes) -> List[Event]:
        if not raw.strip():
            return []
        try:
            data: Any = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise MalformedStorageError(f"invalid JSON: {exc}") from exc

        records = data.get("events") if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise MalformedStorageError("expected a list of event records")

        events: List[Event] = []
        for position, record in enumerate(records):
            if not isinstance(record, dict):
                raise MalformedStorageError(f"record {position} is not an object")
            try:
                events.append(Event.from_record(record))
            except (KeyError, TypeError, ValueError) as exc:
                raise MalformedStorageError(f"record {position}: {exc}") from exc
        return events


__all__ = ["EventRepository", "InMemoryEventRepository", "JsonEventRepository"]
