"""Builds calendar start/end time points from parsed date notation."""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from notecal.features.date_notation import DATE_PATTERN, DATE_TIME_PATTERN, DateInfo

logger = logging.getLogger(__name__)

SECONDS_SUFFIX = ":00"


class EventTimeError(RuntimeError):
    """A token reached the time builder without matching a known shape.

    The notation parser only lets valid tokens through, so this points to a
    bug rather than bad user input.
    """


class AllDayTime(BaseModel):
    """A time point with no time of day."""

    model_config = ConfigDict(frozen=True)

    date: str
    time_zone: str

    def to_google(self) -> Dict[str, str]:
        return {"date": self.date, "timeZone": self.time_zone}

    def matches(self, raw: Optional[Dict[str, Any]]) -> bool:
        """True if a backend start/end object holds the same date."""
        if not raw:
            return False
        return raw.get("date") == self.date and raw.get("dateTime") is None


class TimedTime(BaseModel):
    """A time point with a minute precision time and a time zone."""

    model_config = ConfigDict(frozen=True)

    date_time: str
    time_zone: str

    def to_google(self) -> Dict[str, str]:
        return {"dateTime": self.date_time, "timeZone": self.time_zone}

    def matches(self, raw: Optional[Dict[str, Any]]) -> bool:
        """True if a backend start/end object holds the same date-time."""
        if not raw:
            return False
        return raw.get("dateTime") == self.date_time and raw.get("date") is None


EventTimePoint = Union[AllDayTime, TimedTime]


class EventTimeRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: EventTimePoint
    end: EventTimePoint


def build_event_time_point(token: str, time_zone: str) -> EventTimePoint:
    """Turns a single date token into a time point.

    Args:
        token: ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM``.
        time_zone: IANA time zone attached to the point.

    Returns:
        A TimedTime with seconds appended for date-time tokens, otherwise an
        AllDayTime.

    Raises:
        EventTimeError: If the token matches neither shape.
    """
    if DATE_TIME_PATTERN.fullmatch(token):
        return TimedTime(date_time=f"{token}{SECONDS_SUFFIX}", time_zone=time_zone)
    if DATE_PATTERN.fullmatch(token):
        return AllDayTime(date=token, time_zone=time_zone)
    logger.error(f"Date token '{token}' reached the time builder without matching a known shape.")
    raise EventTimeError(f"Invalid date/time format: {token}")


def build_event_time_range(date_info: DateInfo, time_zone: str) -> EventTimeRange:
    """Builds the start/end pair for an event.

    Without an end token the end is the start (a point-in-time event).
    Mixed ranges (timed start, all-day end or the reverse) are kept as-is.
    """
    start = build_event_time_point(date_info.start, time_zone)
    end = build_event_time_point(date_info.end, time_zone) if date_info.end else start
    return EventTimeRange(start=start, end=end)
