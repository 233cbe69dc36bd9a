from __future__ import annotations

__all__ = ["ColumnType", "GlobalType", "ImportOptions"]

from enum import IntEnum

from ..address import resolve_column


class ColumnType(IntEnum):
    """Type forced on every value of one column"""

    NUMERIC = 0
    "int or float, whatever fits"
    DOUBLE = 1
    DECIMAL = 2
    DATE = 3
    TIME = 4
    BOOL = 5
    STRING = 6


class GlobalType(IntEnum):
    DEFAULT = 0
    ALL_NUMBERS_TO_DOUBLE = 1
    ALL_NUMBERS_TO_DECIMAL = 2
    ALL_NUMBERS_TO_INT = 3
    EVERYTHING_TO_STRING = 4


class ImportOptions:
    """
    Overrides applied to imported values.

    Overrides only touch rows from `enforcing_start_row` (0-based) on, so header
    rows keep their natural types. Column types apply first, then the global
    type, then the flags.
    """

    __slots__ = (
        "enforced_column_types",
        "global_enforcing_type",
        "enforce_date_times_as_numbers",
        "enforce_empty_values_as_string",
        "enforcing_start_row",
        "date_format",
        "time_format",
    )

    def __init__(
        self,
        *,
        global_enforcing_type: GlobalType = GlobalType.DEFAULT,
        enforce_date_times_as_numbers: bool = False,
        enforce_empty_values_as_string: bool = False,
        enforcing_start_row: int = 0,
        date_format: str = "%Y-%m-%d %H:%M:%S",
        time_format: str = "%H:%M:%S",
    ) -> None:
        self.enforced_column_types: dict[int, ColumnType] = {}
        self.global_enforcing_type = global_enforcing_type
        self.enforce_date_times_as_numbers = enforce_date_times_as_numbers
        self.enforce_empty_values_as_string = enforce_empty_values_as_string
        self.enforcing_start_row = enforcing_start_row
        self.date_format = date_format
        "strftime/strptime pattern used to render and parse dates"
        self.time_format = time_format
        "strftime/strptime pattern used to render and parse times of day"

    def add_enforced_column(self, column: int | str, column_type: ColumnType) -> None:
        number = resolve_column(column) if isinstance(column, str) else column
        self.enforced_column_types[number] = ColumnType(column_type)
