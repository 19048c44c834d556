"""Pydantic models for event payloads and paste output options."""

from enum import Enum
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

from notecal.features.date_notation import DateInfo, parse_date_notation

DEFAULT_TIME_ZONE = "Etc/UTC"
MAX_LOCATION_LENGTH = 1024


def _validate_time_zone(value: str) -> str:
    if not value:
        raise ValueError("Time zone cannot be empty")
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError("Invalid timezone format") from exc
    return value


def _coerce_date(value):
    # Already parsed values (e.g. built in code) pass straight through
    if isinstance(value, DateInfo):
        return value
    if not isinstance(value, str):
        raise ValueError("Date value must be a string")
    if not value:
        raise ValueError("Date value cannot be empty")
    return parse_date_notation(value)


class EventData(BaseModel):
    """Full event payload used when creating an event."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    date: DateInfo
    description: str = ""
    time_zone: str = Field(default=DEFAULT_TIME_ZONE, alias="timeZone")
    location: str = Field(default="", max_length=MAX_LOCATION_LENGTH)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return _coerce_date(value)

    @field_validator("time_zone")
    @classmethod
    def check_time_zone(cls, value: str) -> str:
        return _validate_time_zone(value)


class PartialEventData(BaseModel):
    """Sparse event payload used when updating an event.

    No defaults are applied; ``model_fields_set`` tells which fields the
    caller actually sent.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1)
    date: Optional[DateInfo] = None
    description: Optional[str] = None
    time_zone: Optional[str] = Field(default=None, alias="timeZone")
    location: Optional[str] = Field(default=None, max_length=MAX_LOCATION_LENGTH)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        if value is None:
            return None
        return _coerce_date(value)

    @field_validator("time_zone")
    @classmethod
    def check_time_zone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _validate_time_zone(value)


class OutputProperty(str, Enum):
    """Event properties that can be written into paste output."""

    ID = "id"
    HTML_LINK = "htmlLink"
    SUMMARY = "summary"
    DESCRIPTION = "description"
    LOCATION = "location"
    STATUS = "status"
    CREATED = "created"
    UPDATED = "updated"
    ICAL_UID = "iCalUID"
    START = "start"
    END = "end"
    CALENDAR_ID = "calendarId"


class FieldToReturn(BaseModel):
    field: str
    property: OutputProperty


DEFAULT_FIELDS_TO_RETURN: List[FieldToReturn] = [
    FieldToReturn(field="Event URL", property=OutputProperty.HTML_LINK),
    FieldToReturn(field="Event ID", property=OutputProperty.ID),
    FieldToReturn(field="Synced Calendar ID", property=OutputProperty.CALENDAR_ID),
]


class EventOptions(BaseModel):
    """Title decoration and output field selection."""

    model_config = ConfigDict(populate_by_name=True)

    prefix: Optional[str] = None
    suffix: Optional[str] = None
    fields_to_return: Optional[List[FieldToReturn]] = Field(default=None, alias="fieldsToReturn")

    def resolved_fields(self) -> List[FieldToReturn]:
        """The selected fields, or the defaults when none were given."""
        if self.fields_to_return is None:
            return list(DEFAULT_FIELDS_TO_RETURN)
        return self.fields_to_return


DEFAULT_OPTIONS = EventOptions()
