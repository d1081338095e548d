"""
Pytest configuration and shared fixtures.
Provides event factories, a recording repository, and isolated settings.
"""

from datetime import date
from typing import Iterable, List

import pytest

from daybook.config import get_settings
from daybook.domain import Event, EventCategory


class RecordingRepository:
    """In-memory persistence collaborator that counts its calls."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self.stored: List[Event] = list(events)
        self.load_calls = 0
        self.saves: List[List[Event]] = []

    def load(self) -> List[Event]:
        self.load_calls += 1
        return list(self.stored)

    def save(self, events: Iterable[Event]) -> None:
        snapshot = list(events)
        self.saves.append(snapshot)
        self.stored = snapshot


@pytest.fixture
def day():
    """A fixed calendar day used across tests."""
    return date(2024, 3, 5)


@pytest.fixture
def other_day():
    return date(2024, 3, 6)


@pytest.fixture
def make_event(day):
    """Factory for valid events on the fixed day."""

    def _make(name="Standup", start="09:00", end="10:00", *, on=None, category=EventCategory.WORK, description=""):
        return Event(
            name=name,
            start_time=start,
            end_time=end,
            date=on or day,
            category=category,
            description=description,
        )

    return _make


@pytest.fixture
def repository():
    return RecordingRepository()


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Settings pointing every path at a temporary directory."""
    monkeypatch.setenv("DAYBOOK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DAYBOOK_EXPORT_DIR", str(tmp_path / "exports"))
    monkeypatch.setenv("DAYBOOK_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("DAYBOOK_EVENTS_FILE", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
