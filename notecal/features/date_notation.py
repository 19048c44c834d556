"""Parsing for the note app's inline date notation.

A date notation looks like ``[[date:2025-06-18]]``. The content between the
brackets holds one token, or two tokens separated by ``/``. Each token is
either a plain date (``YYYY-MM-DD``) or a date with a minute precision time
(``YYYY-MM-DDTHH:MM``), which gives five accepted shapes:

    [[date:2025-06-18]]                          single date
    [[date:2025-06-18T08:00]]                    single date with time
    [[date:2025-06-18/2025-06-19]]               date range
    [[date:2025-06-18T08:00/2025-06-19]]         start time with end date
    [[date:2025-06-18T08:00/2025-06-19T08:00]]   full date-time range

Checking a value (``is_date_notation``) and splitting it
(``extract_date_info``) are separate steps; ``parse_date_notation`` runs both.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

NOTATION_PREFIX = "[[date:"
NOTATION_SUFFIX = "]]"
RANGE_SEPARATOR = "/"

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
DATE_TIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}", re.ASCII)

_NOTATION_PATTERN = re.compile(r"\[\[date:(.+)\]\]")

EXPECTED_FORMATS = "\n".join([
    "Expected formats:",
    '  - "[[date:YYYY-MM-DD]]" => Single date',
    '  - "[[date:YYYY-MM-DDTHH:MM]]" => Single date with time',
    '  - "[[date:YYYY-MM-DD/YYYY-MM-DD]]" => Date range',
    '  - "[[date:YYYY-MM-DDTHH:MM/YYYY-MM-DD]]" => Start time with end date',
    '  - "[[date:YYYY-MM-DDTHH:MM/YYYY-MM-DDTHH:MM]]" => Full date-time range',
    '  Example: "[[date:2025-01-15]]" or "[[date:2025-01-15T09:30/2025-01-16T17:00]]"',
])


class DateNotationError(ValueError):
    """Raised when a value is not a well-formed date notation."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'Invalid date format: "{value}". {EXPECTED_FORMATS}')


class DateInfo(BaseModel):
    """Start and optional end token taken from a date notation."""

    model_config = ConfigDict(frozen=True)

    original: str
    start: str
    end: Optional[str] = None


def is_date_token(token: str) -> bool:
    """True if token is a plain date or a date with time."""
    return bool(DATE_PATTERN.fullmatch(token) or DATE_TIME_PATTERN.fullmatch(token))


def is_date_notation(value: str) -> bool:
    """Checks whether value is a well-formed date notation.

    Args:
        value: Any string.

    Returns:
        True only if the prefix and suffix are present, the content is not
        blank, and every token in it (one, or two around the first ``/``)
        is a valid date token. A range with one bad endpoint is rejected.
    """
    if not value.startswith(NOTATION_PREFIX) or not value.endswith(NOTATION_SUFFIX):
        return False

    match = _NOTATION_PATTERN.fullmatch(value)
    if not match:
        return False

    content = match.group(1)
    if not content.strip():
        return False

    if RANGE_SEPARATOR not in content:
        return is_date_token(content)

    start_part, _, end_part = content.partition(RANGE_SEPARATOR)
    if not start_part or not end_part:
        return False

    return is_date_token(start_part) and is_date_token(end_part)


def extract_date_info(value: str) -> DateInfo:
    """Splits an already validated notation into its start and end tokens.

    No validation happens here; call ``is_date_notation`` first.
    """
    content = value[len(NOTATION_PREFIX):-len(NOTATION_SUFFIX)]

    if RANGE_SEPARATOR not in content:
        return DateInfo(original=value, start=content)

    start_part, _, end_part = content.partition(RANGE_SEPARATOR)
    return DateInfo(original=value, start=start_part, end=end_part)


def parse_date_notation(value: str) -> DateInfo:
    """Validates and splits a date notation.

    Raises:
        DateNotationError: If the value is not one of the five accepted shapes.
    """
    if not is_date_notation(value):
        raise DateNotationError(value)
    return extract_date_info(value)
