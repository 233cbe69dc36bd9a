"""
Serial date conversions (1900 date system).

A serial is the number of days since 1899-12-30 with the time of day as fraction.
The format treats 1900 as a leap year, so 1900-02-29 (serial 60) exists and every
serial below 60 is one day off against the real calendar.
"""

from __future__ import annotations

__all__ = [
    "FIRST_ALLOWED_DATE",
    "FIRST_VALID_DATE",
    "LAST_ALLOWED_DATE",
    "MAX_SERIAL_DATE",
    "MIN_SERIAL_DATE",
    "ROOT_DATE",
    "from_serial",
    "to_serial_datetime",
    "to_serial_time",
]

import math
from datetime import date, datetime, timedelta

from .errors import FormatError

MIN_SERIAL_DATE = 0.0
MAX_SERIAL_DATE = 2958465.999988426
"9999-12-31 23:59:59"

ROOT_DATE = datetime(1899, 12, 30)
FIRST_ALLOWED_DATE = datetime(1900, 1, 1)
LAST_ALLOWED_DATE = datetime(9999, 12, 31, 23, 59, 59)
FIRST_VALID_DATE = datetime(1900, 3, 1)
"First date unaffected by the phantom 1900-02-29"

MS_PER_DAY = 86_400_000


def from_serial(serial: float) -> datetime:
    """Serial -> datetime, rounded to milliseconds"""
    if serial < 60:
        serial += 1
    return ROOT_DATE + timedelta(milliseconds=round(serial * MS_PER_DAY))


def to_serial_datetime(value: datetime | date, skip_check: bool = False) -> float:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if not skip_check and (value < FIRST_ALLOWED_DATE or value > LAST_ALLOWED_DATE):
        raise FormatError(
            "The date is not in a valid range. Dates before 1900-01-01 or after 9999-12-31 are not allowed."
        )
    if value < FIRST_VALID_DATE:
        value -= timedelta(days=1)
    seconds = value.second + value.minute * 60 + value.hour * 3600
    days = math.floor((value - ROOT_DATE) / timedelta(days=1))
    return seconds / 86400 + days


def to_serial_time(value: timedelta) -> float:
    return value.days + value.seconds / 86400
