"""Shared fixtures for the NoteCal Bridge tests."""

import copy

import pytest


class FakeCalendar:
    """In-memory stand-in for a calendar backend that records every call."""

    def __init__(self, events=None, delete_result=True):
        # {(calendar_id, event_id): event}
        self.events = {key: copy.deepcopy(value) for key, value in (events or {}).items()}
        self.delete_result = delete_result
        self.calls = []
        self._next_id = 1

    async def get_event(self, calendar_id, event_id):
        self.calls.append(("get", calendar_id, event_id))
        event = self.events.get((calendar_id, event_id))
        return copy.deepcopy(event) if event else None

    async def insert_event(self, calendar_id, body):
        self.calls.append(("insert", calendar_id, body))
        event_id = f"evt{self._next_id}"
        self._next_id += 1
        event = dict(body, id=event_id, htmlLink=f"https://calendar.example/{event_id}")
        self.events[(calendar_id, event_id)] = event
        return copy.deepcopy(event)

    async def update_event(self, calendar_id, event_id, body):
        self.calls.append(("update", calendar_id, event_id, copy.deepcopy(body)))
        self.events[(calendar_id, event_id)] = copy.deepcopy(body)
        return copy.deepcopy(body)

    async def move_event(self, from_calendar_id, event_id, to_calendar_id):
        self.calls.append(("move", from_calendar_id, event_id, to_calendar_id))
        event = self.events.pop((from_calendar_id, event_id))
        event["organizer"] = {"email": to_calendar_id}
        self.events[(to_calendar_id, event_id)] = event
        return copy.deepcopy(event)

    async def delete_event(self, calendar_id, event_id):
        self.calls.append(("delete", calendar_id, event_id))
        self.events.pop((calendar_id, event_id), None)
        return self.delete_result

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def stored_event():
    return {
        "id": "abc",
        "htmlLink": "https://calendar.example/abc",
        "summary": "Team sync",
        "description": "Weekly sync",
        "location": "Room 1",
        "start": {"dateTime": "2025-06-18T08:00:00", "timeZone": "Etc/UTC"},
        "end": {"dateTime": "2025-06-18T09:00:00", "timeZone": "Etc/UTC"},
    }


@pytest.fixture
def fake_calendar(stored_event):
    return FakeCalendar(events={("work", "abc"): stored_event})


@pytest.fixture
def make_calendar():
    """Factory for FakeCalendar instances with custom contents."""
    return FakeCalendar
