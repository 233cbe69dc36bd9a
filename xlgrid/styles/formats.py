"""
Number format classification.

Built-in formats are recognised by id. Custom format codes are classified by the
date/time placeholders they contain, ignoring quoted text and bracketed
sections other than elapsed-time markers (`[h]`, `[mm]`, `[ss]`).
"""

from __future__ import annotations

__all__ = [
    "BUILTIN_FORMATS",
    "DATE_FORMAT_IDS",
    "TIME_FORMAT_IDS",
    "classify_format_code",
    "is_date_format",
    "is_time_format",
    "temporal_kind",
]

import re
from typing import TYPE_CHECKING

from ..core import cached

if TYPE_CHECKING:
    from typing import Literal

    from .records import NumberFormat

BUILTIN_FORMATS = {
    0x00: "General",
    0x01: "0",
    0x02: "0.00",
    0x03: "#,##0",
    0x04: "#,##0.00",
    0x09: "0%",
    0x0A: "0.00%",
    0x0B: "0.00E+00",
    0x0C: "# ?/?",
    0x0D: "# ??/??",
    # date formats:
    0x0E: "mm-dd-yy",
    0x0F: "d-mmm-yy",
    0x10: "d-mmm",
    0x11: "mmm-yy",
    # time formats:
    0x12: "h:mm AM/PM",
    0x13: "h:mm:ss AM/PM",
    0x14: "h:mm",
    0x15: "h:mm:ss",
    # datetime format
    0x16: "m/d/yy h:mm",
    0x25: "#,##0 ;(#,##0)",
    0x26: "#,##0 ;[Red](#,##0)",
    0x27: "#,##0.00;(#,##0.00)",
    0x28: "#,##0.00;[Red](#,##0.00)",
    # duration formats
    0x2D: "mm:ss",
    0x2E: "[h]:mm:ss",
    0x2F: "mmss.0",
    0x30: "##0.0E+0",
    0x31: "@",
}

DATE_FORMAT_IDS = frozenset((14, 15, 16, 17, 22))
TIME_FORMAT_IDS = frozenset((18, 19, 20, 21, 45, 46, 47))

re_dt = re.compile(r"(?<!\\)[dmhysDMHYS]")
re_xt = re.compile(r'(?:"[^"]*")|(?:\[(?!(?:hh?|mm?|ss?)\])[^\]]*\])')

re_date = re.compile(r"[ydYD]")
re_time = re.compile(r"[hsHS]")
re_span = re.compile(r"(?i)\[hh?\](:mm(:ss(\.0*)?)?)?|\[mm?\](:ss(\.0*)?)?|\[ss?\](\.0*)?")


def is_date_format(number: int) -> bool:
    return number in DATE_FORMAT_IDS


def is_time_format(number: int) -> bool:
    return number in TIME_FORMAT_IDS


@cached
def classify_format_code(code: str) -> Literal["td", "dt", "d", "t", "i", "f", None]:
    """
    `td` - duration, `dt` - date and time, `d` - date, `t` - time,
    `i` - integer, `f` - float, `None` - anything else
    """
    f, *_ = code.split(";", 1)
    if f == "0":
        return "i"
    if ".00" in f:
        return "f"
    if re_dt.search(f := re_xt.sub("", f)):
        if re_span.search(f):
            return "td"
        if re_time.search(f):
            return "dt" if re_date.search(f) else "t"
        if re_date.search(f):
            return "d"
    return None


def temporal_kind(number_format: NumberFormat) -> Literal["date", "time", None]:
    """How a numeric value rendered with this format must be read back"""
    if number_format.is_custom:
        kind = classify_format_code(number_format.custom_format_code)
        if kind in ("d", "dt"):
            return "date"
        if kind in ("t", "td"):
            return "time"
        return None
    if is_date_format(number_format.number):
        return "date"
    if is_time_format(number_format.number):
        return "time"
    return None
