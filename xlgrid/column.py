from __future__ import annotations

__all__ = ["Column"]

from typing import TYPE_CHECKING

from .address import resolve_column, resolve_column_address, validate_column_number
from .constants import DEFAULT_COLUMN_WIDTH, MAX_COLUMN_WIDTH, MIN_COLUMN_WIDTH
from .errors import RangeError

WIDTH_TOLERANCE = 0.0001

if TYPE_CHECKING:
    from .styles.records import Style


class Column:
    """Sparse override of a worksheet column"""

    __slots__ = ("_number", "_width", "hidden", "has_auto_filter", "default_style")

    def __init__(self, number: int | str) -> None:
        self._number = resolve_column(number) if isinstance(number, str) else validate_column_number(number)
        self._width = DEFAULT_COLUMN_WIDTH
        self.hidden = False
        self.has_auto_filter = False
        self.default_style: Style | None = None

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, number: int) -> None:
        self._number = validate_column_number(number)

    @property
    def column_address(self) -> str:
        return resolve_column_address(self._number)

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, width: float) -> None:
        if width < MIN_COLUMN_WIDTH or width > MAX_COLUMN_WIDTH:
            raise RangeError(
                f"The passed column width ({width}) is out of range ({MIN_COLUMN_WIDTH} to {MAX_COLUMN_WIDTH})"
            )
        self._width = width

    @property
    def is_default(self) -> bool:
        """Carries nothing worth keeping"""
        return (
            not self.has_auto_filter
            and not self.hidden
            and abs(self._width - DEFAULT_COLUMN_WIDTH) <= WIDTH_TOLERANCE
            and self.default_style is None
        )

    def copy(self) -> Column:
        col = Column(self._number)
        col._width = self._width
        col.hidden = self.hidden
        col.has_auto_filter = self.has_auto_filter
        col.default_style = self.default_style
        return col

    def __repr__(self) -> str:
        return f"Column({self.column_address}, width={self._width}, hidden={self.hidden})"
