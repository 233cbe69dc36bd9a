"""
Text parsing helpers of the coercion pipeline.

Every `try_*` function returns None when the text does not parse, never raises.
"""

from __future__ import annotations

__all__ = [
    "SharedStringTable",
    "get_double_value",
    "try_parse_bool",
    "try_parse_date",
    "try_parse_float",
    "try_parse_int",
    "try_parse_number",
    "try_parse_time",
]

import math
import re
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

import pyarrow as pa
import pyarrow.lib

from ..dates import FIRST_ALLOWED_DATE, LAST_ALLOWED_DATE

if TYPE_CHECKING:
    from typing import Iterable

re_int = re.compile(r"[+-]?\d+")
re_float = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
re_time = re.compile(r"(?:(\d+)\.)?(\d{1,2}):(\d{1,2})(?::(\d{1,2})(?:\.(\d+))?)?")

INT64_MIN = -(2**63)
UINT64_MAX = 2**64 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def try_parse_bool(text: str | None) -> bool | None:
    """`0`, `1`, `true` and `false` (any case)"""
    if text is None:
        return None
    text = text.strip()
    if text == "0":
        return False
    if text == "1":
        return True
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def try_parse_int(text: str, bits: int = 64) -> int | None:
    """Integer that fits the signed (or, for 64 bits, unsigned) range of `bits`"""
    text = text.strip()
    if not re_int.fullmatch(text):
        return None
    value = int(text)
    if bits == 32:
        return value if INT32_MIN <= value <= INT32_MAX else None
    return value if INT64_MIN <= value <= UINT64_MAX else None


def try_parse_float(text: str) -> float | None:
    text = text.strip()
    if not re_float.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value) or math.isnan(value):
        return None
    return value


def try_parse_number(text: str | None) -> int | float | None:
    """Narrowest exact number: 64-bit integers stay `int`, the rest becomes `float`"""
    if not text:
        return None
    value = try_parse_int(text)
    if value is not None:
        return value
    return try_parse_float(text)


def get_double_value(text: str | None) -> float | None:
    if not text:
        return None
    return try_parse_float(text)


def try_parse_date(text: str, date_format: str | None = None) -> datetime | None:
    """ISO date (or `date_format` when given) inside 1900-01-01 .. 9999-12-31"""
    text = text.strip()
    try:
        if date_format:
            value = datetime.strptime(text, date_format)  # noqa: DTZ007
        else:
            value = datetime.fromisoformat(text)
    except ValueError:
        return None
    if value.tzinfo is not None:
        value = value.replace(tzinfo=None)
    if value < FIRST_ALLOWED_DATE or value > LAST_ALLOWED_DATE:
        return None
    return value


def try_parse_time(text: str, time_format: str | None = None) -> timedelta | None:
    """`[d.]hh:mm[:ss[.fff]]`, or `time_format` when given"""
    text = text.strip()
    if time_format:
        try:
            parsed = datetime.strptime(text, time_format)  # noqa: DTZ007
        except ValueError:
            return None
        return timedelta(
            hours=parsed.hour, minutes=parsed.minute, seconds=parsed.second, microseconds=parsed.microsecond
        )
    m = re_time.fullmatch(text)
    if m is None:
        return None
    days, hours, minutes, seconds, fraction = m.groups()
    hours, minutes = int(hours), int(minutes)
    seconds = int(seconds) if seconds else 0
    if hours > 23 or minutes > 59 or seconds > 59:
        return None
    return timedelta(
        days=int(days) if days else 0,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=int(fraction[:6].ljust(6, "0")) if fraction else 0,
    )


class SharedStringTable:
    """
    Ordered shared strings of a workbook, stored as one `large_string` array.

    Missing entries (empty `<si/>`) are kept as nulls so indices stay aligned.
    """

    __slots__ = ("_strings",)

    def __init__(self, strings: Iterable[str | None] = ()) -> None:
        builder = pyarrow.lib.StringBuilder()
        for s in strings:
            builder.append(s)
        self._strings: pa.LargeStringArray = builder.finish().cast("large_string")

    @classmethod
    def from_array(cls, strings: pa.Array) -> SharedStringTable:
        table = cls.__new__(cls)
        table._strings = strings.cast("large_string")
        return table

    @property
    def array(self) -> pa.LargeStringArray:
        return self._strings

    def lookup(self, raw: str) -> str | None:
        """String at the index written in `raw`; None if `raw` is no valid index"""
        index = try_parse_int(raw, 32)
        if index is None or index < 0 or index >= len(self._strings):
            return None
        value = self._strings[index].as_py()
        return "" if value is None else value

    def __getitem__(self, index: int) -> str | None:
        return self._strings[index].as_py()

    def __len__(self) -> int:
        return len(self._strings)
