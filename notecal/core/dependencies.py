"""Dependencies module for NoteCal Bridge.

This module defines FastAPI dependencies used throughout the application.
"""

import logging

from fastapi import Depends, HTTPException, status

from notecal.core.config import Settings, get_settings
from notecal.calendars.google_calendar import GoogleCalendarClient
from notecal.calendars.google_credentials import load_google_credentials
from notecal.interfaces.calendar_interface import CalendarInterface

logger = logging.getLogger(__name__)

def get_calendar_client(settings: Settings = Depends(get_settings)) -> CalendarInterface:
    """Provides a Google Calendar client for the current request.

    Built per request so refreshed tokens are always picked up.

    Raises:
        HTTPException: 401 if no usable Google credentials are stored.
    """
    credentials = load_google_credentials(settings)
    if credentials is None:
        logger.warning("Google OAuth credentials unavailable; rejecting request.")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed"
        )
    return GoogleCalendarClient(credentials=credentials)
