"""Pydantic models for API request bodies.
"""

from typing import Optional

from pydantic import BaseModel, Field

from notecal.features.event_models import EventData, EventOptions, PartialEventData

class CreateEventRequest(BaseModel):
    """Request body for creating an event."""
    data: EventData
    options: Optional[EventOptions] = Field(default=None, description="Title prefix/suffix and fields to return.")

class UpdateEventRequest(BaseModel):
    """Request body for updating an event. Only the fields sent in data change."""
    data: PartialEventData
    options: Optional[EventOptions] = Field(default=None, description="Title prefix/suffix and fields to return.")
