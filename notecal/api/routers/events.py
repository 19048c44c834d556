"""API Router for calendar events."""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from googleapiclient.errors import HttpError

from notecal.api.models import CreateEventRequest, UpdateEventRequest
from notecal.core.config import Settings, get_settings
from notecal.core.dependencies import get_calendar_client
from notecal.features import events_service
from notecal.features.event_models import DEFAULT_OPTIONS
from notecal.features.event_time import EventTimeError
from notecal.interfaces.calendar_interface import CalendarInterface, EventNotFoundError

logger = logging.getLogger(__name__)
router = APIRouter()

def _google_error_message(error: HttpError) -> str:
    """Pulls the human readable message out of a Google API error body."""
    error_content = error.content.decode('utf-8') if isinstance(error.content, bytes) else str(error.content)
    try:
        error_json = json.loads(error_content)
        return error_json.get("error", {}).get("message") or error_content[:200]
    except (ValueError, AttributeError):
        return error_content[:200] or "Google API error"

def _backend_failure(action: str, error: Exception) -> HTTPException:
    if isinstance(error, HttpError):
        logger.error(f"Google API HttpError while trying to {action}: {error}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Google Calendar error while trying to {action}: {_google_error_message(error)}"
        )
    logger.error(f"Internal error while trying to {action}: {error}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Internal error while trying to {action}: {error}"
    )

@router.post("", response_class=PlainTextResponse)
async def create_event_endpoint(
    request: CreateEventRequest,
    to: str = Query(..., min_length=1, description="Calendar ID to create the event in."),
    calendar: CalendarInterface = Depends(get_calendar_client),
):
    """Creates an event and returns it as paste text."""
    logger.info(f"Received request to create event '{request.data.name}' in calendar {to}")
    try:
        return await events_service.create_event(
            calendar, to, request.data, request.options or DEFAULT_OPTIONS
        )
    except (HttpError, EventTimeError) as e:
        raise _backend_failure("create the event", e)

@router.put("/{event_id}", response_class=PlainTextResponse)
async def update_event_endpoint(
    event_id: str,
    request: UpdateEventRequest,
    from_calendar_id: str = Query(..., alias="from", min_length=1, description="Calendar ID the event is in."),
    to_calendar_id: Optional[str] = Query(None, alias="to", min_length=1, description="Calendar ID to move the event to."),
    calendar: CalendarInterface = Depends(get_calendar_client),
    settings: Settings = Depends(get_settings),
):
    """Updates an event (and optionally moves it) and returns it as paste text."""
    logger.info(f"Received request to update event {event_id} in calendar {from_calendar_id}")
    try:
        return await events_service.update_event(
            calendar,
            from_calendar_id,
            event_id,
            request.data,
            request.options or DEFAULT_OPTIONS,
            to_calendar_id=to_calendar_id,
            default_time_zone=settings.default_time_zone,
        )
    except EventNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (HttpError, EventTimeError) as e:
        raise _backend_failure(f"update event {event_id}", e)

@router.post("/{event_id}/delete", response_class=PlainTextResponse)
async def delete_event_endpoint(
    event_id: str,
    from_calendar_id: str = Query(..., alias="from", min_length=1, description="Calendar ID the event is in."),
    calendar: CalendarInterface = Depends(get_calendar_client),
):
    """Deletes an event and reports the outcome as text."""
    logger.info(f"Received request to delete event {event_id} from calendar {from_calendar_id}")
    try:
        success = await events_service.delete_event(calendar, from_calendar_id, event_id)
    except HttpError as e:
        raise _backend_failure(f"delete event {event_id}", e)

    if success:
        return f"Event deleted successfully: {event_id}"
    return f"Failed to delete event: {event_id}"
