"""Interface definition for calendar backends.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

EventRecord = Dict[str, Any]


class EventNotFoundError(LookupError):
    """Raised when an event to update does not exist in the source calendar."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")


@runtime_checkable
class CalendarInterface(Protocol):
    """A protocol for the calendar operations the event service needs.

    Events are plain dicts in the backend's own shape (Google Calendar event
    resources). Errors raised by the backend propagate to the caller.
    """

    async def get_event(self, calendar_id: str, event_id: str) -> Optional[EventRecord]:
        """Fetches an event, or None if it does not exist."""
        ...

    async def insert_event(self, calendar_id: str, body: EventRecord) -> EventRecord:
        """Creates an event and returns the stored record."""
        ...

    async def update_event(self, calendar_id: str, event_id: str, body: EventRecord) -> EventRecord:
        """Replaces an event with body and returns the stored record."""
        ...

    async def move_event(self, from_calendar_id: str, event_id: str, to_calendar_id: str) -> EventRecord:
        """Moves an event to another calendar and returns the moved record."""
        ...

    async def delete_event(self, calendar_id: str, event_id: str) -> bool:
        """Deletes an event. Returns False if the backend reports it could not."""
        ...
