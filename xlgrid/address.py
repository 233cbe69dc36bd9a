"""
Cell addresses and rectangular ranges.

Addresses are 0-based `(column, row)` pairs with a referencing mode (`$` markers).
Column letters use bijective base-26: `A`..`Z`, `AA`..`ZZ`, `AAA`..`XFD`.
"""

from __future__ import annotations

__all__ = [
    "Address",
    "AddressScope",
    "AddressType",
    "Range",
    "enumerate_range",
    "get_address_scope",
    "parse_address",
    "resolve_address",
    "resolve_column",
    "resolve_column_address",
    "resolve_range",
    "validate_column_number",
    "validate_row_number",
]

import re
from enum import IntEnum
from typing import TYPE_CHECKING

from .constants import MAX_COLUMN_NUMBER, MAX_ROW_NUMBER, MIN_COLUMN_NUMBER, MIN_ROW_NUMBER
from .core import RANGE_WARN_SIZE, perf_warning
from .errors import FormatError, RangeError

if TYPE_CHECKING:
    from typing import Iterator

    from typing_extensions import Self, TypeAlias

    AddressLike: TypeAlias = "Address | str"

re_address = re.compile(r"(\$?)([A-Z]{1,3})(\$?)([0-9]{1,7})")

ROW_SPAN = MAX_ROW_NUMBER + 1


class AddressType(IntEnum):
    DEFAULT = 0
    "A1"
    FIXED_ROW = 1
    "A$1"
    FIXED_COLUMN = 2
    "$A1"
    FIXED_ROW_AND_COLUMN = 3
    "$A$1"


class AddressScope(IntEnum):
    SINGLE_ADDRESS = 0
    RANGE = 1
    INVALID = 2


def validate_column_number(column: int) -> int:
    if column < MIN_COLUMN_NUMBER or column > MAX_COLUMN_NUMBER:
        raise RangeError(
            f"The column number ({column}) is out of range. "
            f"Range is from {MIN_COLUMN_NUMBER} to {MAX_COLUMN_NUMBER} ({MAX_COLUMN_NUMBER + 1} columns)."
        )
    return column


def validate_row_number(row: int) -> int:
    if row < MIN_ROW_NUMBER or row > MAX_ROW_NUMBER:
        raise RangeError(
            f"The row number ({row}) is out of range. "
            f"Range is from {MIN_ROW_NUMBER} to {MAX_ROW_NUMBER} ({MAX_ROW_NUMBER + 1} rows)."
        )
    return row


def resolve_column_address(column: int) -> str:
    """0 -> `A`, 25 -> `Z`, 26 -> `AA`, 701 -> `ZZ`, 702 -> `AAA`"""
    validate_column_number(column)
    letters = []
    n = column + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(chr(65 + rem))
    return "".join(reversed(letters))


def resolve_column(letters: str) -> int:
    """Inverse of `resolve_column_address`: `A` -> 0, `AA` -> 26"""
    if not letters:
        raise RangeError("The column address cannot be empty")
    result = 0
    for ch in letters.upper():
        code = ord(ch) - 64
        if code < 1 or code > 26:
            raise FormatError(f"The column address '{letters}' contains the invalid character '{ch}'")
        result = result * 26 + code
    return validate_column_number(result - 1)


def resolve_address(column: int, row: int, type: AddressType = AddressType.DEFAULT) -> str:  # noqa: A002
    validate_row_number(row)
    col = resolve_column_address(column)
    if type in (AddressType.FIXED_COLUMN, AddressType.FIXED_ROW_AND_COLUMN):
        col = "$" + col
    row_str = str(row + 1)
    if type in (AddressType.FIXED_ROW, AddressType.FIXED_ROW_AND_COLUMN):
        row_str = "$" + row_str
    return col + row_str


def parse_address(text: str) -> Address:
    """Parse `B3`, `$B3`, `B$3` or `$B$3` (case-insensitive)"""
    if not text:
        raise FormatError("The cell address is empty and could not be resolved")
    m = re_address.fullmatch(text.upper())
    if m is None:
        raise FormatError(f"The format of the cell address '{text}' is malformed")
    fix_col, letters, fix_row, digits = m.groups()
    column = resolve_column(letters)
    row = validate_row_number(int(digits) - 1)
    if fix_col and fix_row:
        type_ = AddressType.FIXED_ROW_AND_COLUMN
    elif fix_col:
        type_ = AddressType.FIXED_COLUMN
    elif fix_row:
        type_ = AddressType.FIXED_ROW
    else:
        type_ = AddressType.DEFAULT
    return Address(column, row, type_)


def resolve_range(text: str) -> Range:
    """Parse `A1:C3`; a single address yields a range of one cell"""
    if not text:
        raise FormatError("The cell range is empty and could not be resolved")
    if ":" not in text:
        address = parse_address(text)
        return Range(address, address)
    parts = text.split(":")
    if len(parts) != 2:
        raise FormatError(f"The cell range ({text}) is malformed and could not be resolved")
    return Range(parse_address(parts[0]), parse_address(parts[1]))


def enumerate_range(rng: Range) -> Iterator[Address]:
    """
    Lazily yield every address of the range: columns in the outer loop, rows in the inner one.

    The range is not bounded, so `A1:XFD1048576` yields 17 billion addresses.
    """
    size = rng.size
    if size > RANGE_WARN_SIZE:
        perf_warning(f"Enumerating {size} addresses of the range {rng}")

    def gen() -> Iterator[Address]:
        for column in range(rng.min_column, rng.max_column + 1):
            for row in range(rng.min_row, rng.max_row + 1):
                yield Address(column, row)

    return gen()


def get_address_scope(expr: str) -> AddressScope:
    try:
        parse_address(expr)
        return AddressScope.SINGLE_ADDRESS
    except (FormatError, RangeError):
        pass
    try:
        resolve_range(expr)
        return AddressScope.RANGE
    except (FormatError, RangeError):
        return AddressScope.INVALID


class Address:
    """Immutable cell coordinate. Equal only if column, row and referencing mode match"""

    __slots__ = ("_column", "_row", "_type")

    def __init__(self, column: int, row: int, type: AddressType = AddressType.DEFAULT) -> None:  # noqa: A002
        self._column = validate_column_number(column)
        self._row = validate_row_number(row)
        self._type = AddressType(type)

    @classmethod
    def parse(cls, text: str) -> Address:
        return parse_address(text)

    @property
    def column(self) -> int:
        return self._column

    @property
    def row(self) -> int:
        return self._row

    @property
    def type(self) -> AddressType:
        return self._type

    @property
    def sort_key(self) -> int:
        return self._column * ROW_SPAN + self._row

    def get_address(self) -> str:
        return resolve_address(self._column, self._row, self._type)

    def get_column(self) -> str:
        return resolve_column_address(self._column)

    def with_type(self, type: AddressType) -> Address:  # noqa: A002
        return Address(self._column, self._row, type)

    def copy(self) -> Address:
        return Address(self._column, self._row, self._type)

    def compare_to(self, other: Address) -> int:
        a, b = self.sort_key, other.sort_key
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._column == other._column and self._row == other._row and self._type == other._type

    def __hash__(self) -> int:
        return hash((self._column, self._row, self._type))

    def __lt__(self, other: Address) -> bool:
        return self.sort_key < other.sort_key

    def __le__(self, other: Address) -> bool:
        return self.sort_key <= other.sort_key

    def __gt__(self, other: Address) -> bool:
        return self.sort_key > other.sort_key

    def __ge__(self, other: Address) -> bool:
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        return self.get_address()

    def __repr__(self) -> str:
        return f"Address({self.get_address()!r})"


class Range:
    """Pair of addresses, the one with the smaller ordering key always first"""

    __slots__ = ("_end", "_start")

    def __init__(self, start: AddressLike, end: AddressLike) -> None:
        if isinstance(start, str):
            start = parse_address(start)
        if isinstance(end, str):
            end = parse_address(end)
        if start < end:
            self._start, self._end = start, end
        else:
            self._start, self._end = end, start

    @classmethod
    def parse(cls, text: str) -> Range:
        return resolve_range(text)

    @classmethod
    def from_coordinates(cls, start_column: int, start_row: int, end_column: int, end_row: int) -> Self:
        return cls(Address(start_column, start_row), Address(end_column, end_row))

    @property
    def start(self) -> Address:
        return self._start

    @property
    def end(self) -> Address:
        return self._end

    @property
    def min_column(self) -> int:
        return min(self._start.column, self._end.column)

    @property
    def max_column(self) -> int:
        return max(self._start.column, self._end.column)

    @property
    def min_row(self) -> int:
        return min(self._start.row, self._end.row)

    @property
    def max_row(self) -> int:
        return max(self._start.row, self._end.row)

    @property
    def size(self) -> int:
        return (self.max_column - self.min_column + 1) * (self.max_row - self.min_row + 1)

    def contains(self, other: Range | Address) -> bool:
        if isinstance(other, Address):
            return self.min_column <= other.column <= self.max_column and self.min_row <= other.row <= self.max_row
        return (
            self.min_column <= other.min_column
            and other.max_column <= self.max_column
            and self.min_row <= other.min_row
            and other.max_row <= self.max_row
        )

    def overlaps(self, other: Range) -> bool:
        return (
            self.min_column <= other.max_column
            and other.min_column <= self.max_column
            and self.min_row <= other.max_row
            and other.min_row <= self.max_row
        )

    def addresses(self) -> Iterator[Address]:
        return enumerate_range(self)

    def copy(self) -> Range:
        return Range(self._start.copy(), self._end.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __str__(self) -> str:
        return f"{self._start}:{self._end}"

    def __repr__(self) -> str:
        return f"Range({str(self)!r})"
