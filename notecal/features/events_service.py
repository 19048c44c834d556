"""Service layer for creating, updating and deleting calendar events.

Requests arrive already validated. Dates are turned into calendar time
points, changes are merged into the fetched event, and the result is
returned as paste text for the note app.
"""

import logging
from typing import Optional

from notecal.features.event_models import (
    DEFAULT_OPTIONS,
    DEFAULT_TIME_ZONE,
    EventData,
    EventOptions,
    PartialEventData,
)
from notecal.features.event_time import build_event_time_range
from notecal.features.paste_output import build_paste, build_summary
from notecal.interfaces.calendar_interface import CalendarInterface, EventNotFoundError, EventRecord

logger = logging.getLogger(__name__)


async def create_event(
    calendar: CalendarInterface,
    calendar_id: str,
    data: EventData,
    options: EventOptions = DEFAULT_OPTIONS,
) -> str:
    """Creates a new event and returns it as paste text.

    Args:
        calendar: The calendar backend.
        calendar_id: Calendar the event is created in.
        data: Validated event data (name, date, description, time zone,
              location).
        options: Title prefix/suffix and the fields to return.

    Returns:
        Paste text for the created event.
    """
    time_range = build_event_time_range(data.date, data.time_zone)
    body = {
        'summary': build_summary(data.name, options.prefix, options.suffix),
        'description': data.description,
        'location': data.location,
        'start': time_range.start.to_google(),
        'end': time_range.end.to_google(),
    }

    logger.debug(f"Creating event in calendar {calendar_id}: {body}")
    event = await calendar.insert_event(calendar_id, body)
    logger.info(f"Created event {event.get('id')} in calendar {calendar_id}")

    return build_paste(event, calendar_id, options.resolved_fields())


def merge_event_changes(
    event: EventRecord,
    data: PartialEventData,
    default_time_zone: str = DEFAULT_TIME_ZONE,
) -> EventRecord:
    """Applies the supplied fields of data on top of a copy of event.

    Text fields are only written when sent and different. A new date is
    rebuilt in full, then start and end are each replaced only if they
    changed, so moving just the end keeps the stored start untouched.
    """
    merged = dict(event)

    if data.name is not None and data.name != event.get('summary'):
        merged['summary'] = data.name
    if data.description is not None and data.description != event.get('description'):
        merged['description'] = data.description
    if data.location is not None and data.location != event.get('location'):
        merged['location'] = data.location

    if data.date is not None:
        time_range = build_event_time_range(data.date, data.time_zone or default_time_zone)
        if not time_range.start.matches(event.get('start')):
            merged['start'] = time_range.start.to_google()
        if not time_range.end.matches(event.get('end')):
            merged['end'] = time_range.end.to_google()

    return merged


async def update_event(
    calendar: CalendarInterface,
    from_calendar_id: str,
    event_id: str,
    data: PartialEventData,
    options: EventOptions = DEFAULT_OPTIONS,
    to_calendar_id: Optional[str] = None,
    default_time_zone: str = DEFAULT_TIME_ZONE,
) -> str:
    """Updates an event, optionally moving it to another calendar first.

    Only fields present in data are changed. When nothing was sent and no
    move is requested, the event is only fetched and reported back.

    Args:
        calendar: The calendar backend.
        from_calendar_id: Calendar the event currently lives in.
        event_id: The event to update.
        data: Sparse set of changes.
        options: Fields to return in the paste text.
        to_calendar_id: If given and different from from_calendar_id, the event
                        is moved there before the changes are applied.
        default_time_zone: Time zone used for a new date when data has none.

    Returns:
        Paste text for the final event, reported from the calendar now
        holding it.

    Raises:
        EventNotFoundError: If the event does not exist in from_calendar_id.
    """
    current_calendar_id = from_calendar_id
    event = await calendar.get_event(current_calendar_id, event_id)

    if not event:
        logger.warning(f"Event {event_id} not found in calendar {from_calendar_id}")
        raise EventNotFoundError(event_id)

    if to_calendar_id and to_calendar_id != from_calendar_id:
        event = await calendar.move_event(from_calendar_id, event_id, to_calendar_id)
        current_calendar_id = to_calendar_id
        logger.info(f"Moved event {event_id} from {from_calendar_id} to {to_calendar_id}")

    if data.model_fields_set:
        merged = merge_event_changes(event, data, default_time_zone)
        logger.debug(f"Updating event {event_id} in calendar {current_calendar_id}: {merged}")
        event = await calendar.update_event(current_calendar_id, event_id, merged)
        logger.info(f"Updated event {event_id} ({', '.join(sorted(data.model_fields_set))})")
    else:
        logger.debug(f"No fields to update for event {event_id}")

    return build_paste(event, current_calendar_id, options.resolved_fields())


async def delete_event(calendar: CalendarInterface, calendar_id: str, event_id: str) -> bool:
    """Deletes an event.

    Returns:
        Whether the backend reported the event as deleted.
    """
    deleted = await calendar.delete_event(calendar_id, event_id)
    if deleted:
        logger.info(f"Deleted event {event_id} from calendar {calendar_id}")
    else:
        logger.warning(f"Calendar {calendar_id} did not delete event {event_id}")
    return deleted
