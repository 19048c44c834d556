"""Formats calendar events as paste text for the note app.

Each selected field becomes a ``field::value`` line. Fields whose value is
empty are left out entirely.
"""

from typing import Any, Callable, Dict, Iterable, Optional

from notecal.features.event_models import FieldToReturn, OutputProperty
from notecal.interfaces.calendar_interface import EventRecord

Accessor = Callable[[EventRecord, str], Any]


def _event_property(name: str) -> Accessor:
    return lambda event, calendar_id: event.get(name)


def _time_point(name: str) -> Accessor:
    def accessor(event: EventRecord, calendar_id: str) -> Optional[str]:
        point = event.get(name) or {}
        return point.get("dateTime") or point.get("date")
    return accessor


ACCESSORS: Dict[OutputProperty, Accessor] = {
    OutputProperty.ID: _event_property("id"),
    OutputProperty.HTML_LINK: _event_property("htmlLink"),
    OutputProperty.SUMMARY: _event_property("summary"),
    OutputProperty.DESCRIPTION: _event_property("description"),
    OutputProperty.LOCATION: _event_property("location"),
    OutputProperty.STATUS: _event_property("status"),
    OutputProperty.CREATED: _event_property("created"),
    OutputProperty.UPDATED: _event_property("updated"),
    OutputProperty.ICAL_UID: _event_property("iCalUID"),
    OutputProperty.START: _time_point("start"),
    OutputProperty.END: _time_point("end"),
    OutputProperty.CALENDAR_ID: lambda event, calendar_id: calendar_id,
}


def build_paste(
    event: EventRecord,
    calendar_id: str,
    fields_to_return: Iterable[FieldToReturn],
) -> str:
    """Converts a calendar event into paste text.

    Args:
        event: The event resource returned by the calendar backend.
        calendar_id: The calendar the event now lives in. Used for the
                     synthetic ``calendarId`` property.
        fields_to_return: Ordered selection of ``(display name, property)``
                          pairs.

    Returns:
        The ``field::value`` lines joined by newlines, in selection order.
        Empty values are skipped without leaving blank lines.
    """
    lines = []
    for selected in fields_to_return:
        value = ACCESSORS[selected.property](event, calendar_id)
        if value:
            lines.append(f"{selected.field}::{value}")
    return "\n".join(lines)


def build_summary(name: str, prefix: Optional[str] = None, suffix: Optional[str] = None) -> str:
    """Joins prefix, name and suffix into an event title, trimming the result."""
    return f"{prefix or ''}{name}{suffix or ''}".strip()
