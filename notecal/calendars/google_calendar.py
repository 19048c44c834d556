"""Google Calendar implementation of the CalendarInterface."""

import logging
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build, Resource
from googleapiclient.errors import HttpError

from notecal.interfaces.calendar_interface import CalendarInterface, EventRecord

logger = logging.getLogger(__name__)

# Google answers 410 Gone for events that were already deleted
NOT_FOUND_STATUSES = (404, 410)

def is_not_found(error: HttpError) -> bool:
    return getattr(error.resp, 'status', None) in NOT_FOUND_STATUSES

class GoogleCalendarClient(CalendarInterface):
    """Calls the Google Calendar v3 API.

    The Google client is blocking, so every request runs in a worker
    thread. HttpErrors other than "not found" propagate unchanged.
    """

    def __init__(self, credentials: Optional[Credentials] = None, service: Optional[Resource] = None):
        """Initializes the client.

        Args:
            credentials: Authorized Google credentials. Ignored if service is given.
            service: A prebuilt Calendar API resource.
        """
        if service is None:
            if credentials is None:
                raise ValueError("GoogleCalendarClient needs credentials or a service.")
            service = build('calendar', 'v3', credentials=credentials, cache_discovery=False)
        self.service = service

    async def _execute(self, request: Any) -> Any:
        return await run_in_threadpool(request.execute)

    async def get_event(self, calendar_id: str, event_id: str) -> Optional[EventRecord]:
        try:
            return await self._execute(
                self.service.events().get(calendarId=calendar_id, eventId=event_id)
            )
        except HttpError as error:
            if is_not_found(error):
                logger.info(f"Google Calendar event {event_id} not found in {calendar_id}")
                return None
            raise

    async def insert_event(self, calendar_id: str, body: EventRecord) -> EventRecord:
        created_event = await self._execute(
            self.service.events().insert(calendarId=calendar_id, body=body)
        )
        logger.debug(f"Google Calendar event created. ID: {created_event.get('id')}, Link: {created_event.get('htmlLink')}")
        return created_event

    async def update_event(self, calendar_id: str, event_id: str, body: EventRecord) -> EventRecord:
        return await self._execute(
            self.service.events().update(calendarId=calendar_id, eventId=event_id, body=body)
        )

    async def move_event(self, from_calendar_id: str, event_id: str, to_calendar_id: str) -> EventRecord:
        return await self._execute(
            self.service.events().move(calendarId=from_calendar_id, eventId=event_id, destination=to_calendar_id)
        )

    async def delete_event(self, calendar_id: str, event_id: str) -> bool:
        try:
            await self._execute(
                self.service.events().delete(calendarId=calendar_id, eventId=event_id)
            )
        except HttpError as error:
            if is_not_found(error):
                logger.warning(f"Could not delete Google Calendar event {event_id}: {error}")
                return False
            raise
        return True
