"""
Tests for the JSON file repository, including recovery from malformed data.
"""

import logging
from datetime import date

import orjson
import pytest

from daybook.core import EventStore
from daybook.data import InMemoryEventRepository, JsonEventRepository
from daybook.domain import EventCategory


@pytest.fixture
def events_path(tmp_path):
    return tmp_path / "store" / "events.json"


class TestRoundTrip:
    def test_save_then_load(self, events_path, make_event, other_day):
        events = [
            make_event("Standup", "09:00", "09:15", description="Daily sync"),
            make_event("Gym", "18:00", "19:30", on=other_day, category=EventCategory.PERSONAL),
        ]
        repository = JsonEventRepository(events_path)

        repository.save(events)
        loaded = JsonEventRepository(events_path).load()

        assert loaded == events

    def test_file_format_is_self_describing(self, events_path, make_event):
        event = make_event("Standup", "09:00", "09:15")
        JsonEventRepository(events_path).save([event])

        document = orjson.loads(events_path.read_bytes())

        assert document == {"events": [event.to_record()]}
        assert document["events"][0]["date"] == "2024-03-05T00:00:00"

    def test_store_persists_through_repository(self, events_path, make_event):
        store = EventStore(JsonEventRepository(events_path))
        added = store.add(make_event())

        reopened = EventStore(JsonEventRepository(events_path))

        assert reopened.events == [added]

    def test_accepts_bare_list_and_missing_ids(self, events_path):
        events_path.parent.mkdir(parents=True)
        events_path.write_bytes(
            orjson.dumps(
                [
                    {
                        "name": "Imported",
                        "start_time": "10:00",
                        "end_time": "11:00",
                        "category": "others",
                        "date": "2024-03-05T12:00:00.000Z",
                    }
                ]
            )
        )

        loaded = JsonEventRepository(events_path).load()

        assert len(loaded) == 1
        assert loaded[0].date == date(2024, 3, 5)
        assert loaded[0].description == ""
        assert loaded[0].id

    def test_loads_file_written_by_browser_widget(self, events_path):
        """Records keyed startTime/endTime with UTC timestamps and no ids."""
        events_path.parent.mkdir(parents=True)
        events_path.write_bytes(
            orjson.dumps(
                [
                    {
                        "name": "Standup",
                        "startTime": "09:00",
                        "endTime": "10:00",
                        "description": "",
                        "category": "work",
                        "date": "2024-03-05T12:00:00.000Z",
                    },
                    {
                        "name": "Gym",
                        "startTime": "18:00",
                        "endTime": "19:00",
                        "category": "personal",
                        "date": "2024-03-06T12:00:00.000Z",
                    },
                ]
            )
        )

        loaded = JsonEventRepository(events_path).load()

        assert [(event.name, event.start_time, event.end_time, event.date) for event in loaded] == [
            ("Standup", "09:00", "10:00", date(2024, 3, 5)),
            ("Gym", "18:00", "19:00", date(2024, 3, 6)),
        ]
        assert loaded[1].category is EventCategory.PERSONAL

    def test_store_drops_overlapping_stored_event(self, events_path):
        events_path.parent.mkdir(parents=True)
        records = [
            {"name": "A", "start_time": "09:00", "end_time": "12:00", "category": "work", "date": "2024-03-05"},
            {"name": "B", "start_time": "10:00", "end_time": "11:00", "category": "work", "date": "2024-03-05"},
        ]
        events_path.write_bytes(orjson.dumps({"events": records}))

        store = EventStore(JsonEventRepository(events_path))

        assert [event.name for event in store.events_for_day(date(2024, 3, 5))] == ["A"]


class TestRecovery:
    def test_missing_file(self, events_path):
        assert JsonEventRepository(events_path).load() == []

    def test_empty_file(self, events_path):
        events_path.parent.mkdir(parents=True)
        events_path.write_bytes(b"")

        assert JsonEventRepository(events_path).load() == []

    @pytest.mark.parametrize(
        "payload",
        [
            b"{not json",
            b'{"events": 42}',
            b'"just a string"',
            b'{"events": ["nope"]}',
            b'{"events": [{"name": "No times", "date": "2024-03-05"}]}',
            b'{"events": [{"name": "Bad", "start_time": "11:00", "end_time": "10:00", "date": "2024-03-05"}]}',
            b'{"events": [{"name": "Bad", "start_time": "09:00", "end_time": "10:00", "date": "yesterday"}]}',
            b'{"events": [{"name": "Bad", "start_time": "09:00", "end_time": "10:00", "date": "2024-03-05", "description": 5}]}',
            b'{"events": [{"name": null, "start_time": "09:00", "end_time": "10:00", "date": "2024-03-05"}]}',
        ],
    )
    def test_malformed_data_falls_back_to_empty(self, events_path, payload, caplog):
        events_path.parent.mkdir(parents=True)
        events_path.write_bytes(payload)

        with caplog.at_level(logging.WARNING, logger="daybook.data.repositories.events"):
            loaded = JsonEventRepository(events_path).load()

        assert loaded == []
        assert "Ignoring unreadable event file" in caplog.text

    def test_store_starts_empty_on_malformed_file(self, events_path, make_event):
        events_path.parent.mkdir(parents=True)
        events_path.write_bytes(b"[[[")

        store = EventStore(JsonEventRepository(events_path))
        store.add(make_event())

        assert len(JsonEventRepository(events_path).load()) == 1

    def test_write_failure_is_logged_not_raised(self, tmp_path, make_event, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("file in the way")
        repository = JsonEventRepository(blocker / "events.json")

        with caplog.at_level(logging.ERROR, logger="daybook.data.repositories.events"):
            repository.save([make_event()])

        assert "Failed to write" in caplog.text


class TestInMemory:
    def test_round_trip(self, make_event):
        repository = InMemoryEventRepository()
        event = make_event()

        repository.save([event])

        assert repository.load() == [event]
