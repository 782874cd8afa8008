import datetime
import logging
import re
from typing import Any

from shiftpay.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_minutes_of_day(value: Any, field_name: str = "time") -> int:
    """Parse a shift time and return minutes since midnight.

    Handles:
    1) str times: "HH:MM" (one-digit hour accepted, "9:30")
    2) datetime.time objects (seconds are ignored)
    3) anything else, non-numeric parts or out-of-range values raise
       InvalidInputError (logged first, never a silent 0/NaN)
    """
    if isinstance(value, datetime.time):
        return value.hour * 60 + value.minute

    if isinstance(value, str):
        s = value.strip()
        match = _HHMM_RE.match(s)
        if not match:
            logger.error("Shift %s is not in HH:MM format. value=%r", field_name, value)
            raise InvalidInputError(f"Invalid {field_name} format: {value!r} (expected HH:MM)")

        hours, minutes = int(match.group(1)), int(match.group(2))
        if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
            logger.error("Shift %s out of range. value=%r", field_name, value)
            raise InvalidInputError(f"Invalid {field_name}: {value!r} (hour 0-23, minute 0-59)")
        return hours * 60 + minutes

    logger.error("Unsupported %s type. type=%s value=%r", field_name, type(value).__name__, value)
    raise InvalidInputError(f"Unsupported {field_name} type: {type(value).__name__}")


def as_date(value: Any, field_name: str = "date") -> datetime.date:
    """Truncate a date or datetime to its calendar date.

    Aware datetimes keep their own wall-clock date; no timezone conversion
    is done anywhere in the engine.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value

    logger.error("Unsupported %s type. type=%s value=%r", field_name, type(value).__name__, value)
    raise InvalidInputError(f"Unsupported {field_name} type: {type(value).__name__}")
