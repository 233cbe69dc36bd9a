from __future__ import annotations

__all__ = ["Cell", "CellType", "convert_array", "resolve_type"]

import numbers
from datetime import date, time, timedelta
from decimal import Decimal
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from .address import Address, AddressType, parse_address, resolve_address
from .core import replace
from .errors import StyleError
from .styles.basic import BasicStyles
from .styles.records import Style

if TYPE_CHECKING:
    from typing import Iterable


class CellType(IntEnum):
    STRING = 0
    NUMBER = 1
    DATE = 2
    TIME = 3
    BOOL = 4
    FORMULA = 5
    "Value is the formula text, never reclassified"
    EMPTY = 6
    "Value is always None"
    DEFAULT = 7
    "Resolve the type from the value"


def resolve_type(value: Any) -> CellType:
    """Type tag of a native value"""
    if value is None:
        return CellType.EMPTY
    if isinstance(value, bool):
        return CellType.BOOL
    if isinstance(value, (numbers.Real, Decimal)):
        return CellType.NUMBER
    if isinstance(value, date):
        return CellType.DATE
    if isinstance(value, (timedelta, time)):
        return CellType.TIME
    return CellType.STRING


class Cell:
    """
    Single cell of a worksheet.

    The value and the type tag are kept consistent: assigning a value resolves the
    type (unless the cell holds a formula), and an EMPTY cell never holds a value.
    """

    __slots__ = ("_column", "_row", "_address_type", "_type", "_value", "_style")

    def __init__(
        self,
        value: Any = None,
        type: CellType = CellType.DEFAULT,  # noqa: A002
        address: Address | str | None = None,
        style: Style | None = None,
    ) -> None:
        if address is None:
            address = Address(0, 0)
        elif isinstance(address, str):
            address = parse_address(address)
        self._column = address.column
        self._row = address.row
        self._address_type = address.type
        self._style = style
        self._type = CellType(type)
        self._value = None if self._type == CellType.EMPTY else value
        if self._type == CellType.DEFAULT:
            self.resolve_cell_type()
        else:
            self._apply_temporal_style()

    @property
    def column_number(self) -> int:
        return self._column

    @property
    def row_number(self) -> int:
        return self._row

    @property
    def address_type(self) -> AddressType:
        return self._address_type

    @property
    def address(self) -> Address:
        return Address(self._column, self._row, self._address_type)

    @address.setter
    def address(self, address: Address | str) -> None:
        if isinstance(address, str):
            address = parse_address(address)
        self._column = address.column
        self._row = address.row
        self._address_type = address.type

    @property
    def cell_address(self) -> str:
        return resolve_address(self._column, self._row, self._address_type)

    @property
    def key(self) -> str:
        """Storage key inside a worksheet, without referencing markers"""
        return resolve_address(self._column, self._row)

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value
        self.resolve_cell_type()

    @property
    def data_type(self) -> CellType:
        return self._type

    @data_type.setter
    def data_type(self, type: CellType) -> None:  # noqa: A002
        self._type = CellType(type)
        if self._type == CellType.EMPTY:
            self._value = None

    @property
    def cell_style(self) -> Style | None:
        return self._style

    def resolve_cell_type(self) -> None:
        if self._value is None:
            self._type = CellType.EMPTY
            return
        if self._type == CellType.FORMULA:
            return
        self._type = resolve_type(self._value)
        if self._type == CellType.STRING and not isinstance(self._value, str):
            self._value = str(self._value)
        self._apply_temporal_style()

    def _apply_temporal_style(self) -> None:
        if self._style is not None:
            return
        if self._type == CellType.DATE:
            self._style = BasicStyles.date_format()
        elif self._type == CellType.TIME:
            self._style = BasicStyles.time_format()

    def set_style(self, style: Style | None) -> Style:
        if style is None:
            raise StyleError("No style to assign was defined")
        self._style = style
        return style

    def remove_style(self) -> None:
        self._style = None

    def set_cell_locked_state(self, is_locked: bool, is_hidden: bool) -> None:
        """Set the protection flags, keeping every other style attribute"""
        style = self._style if self._style is not None else Style()
        xf = replace(style.cell_xf, locked=is_locked, hidden=is_hidden)
        self._style = replace(style, cell_xf=xf)

    def copy(self) -> Cell:
        cell = Cell.__new__(Cell)
        cell._column = self._column
        cell._row = self._row
        cell._address_type = self._address_type
        cell._type = self._type
        cell._value = self._value
        cell._style = self._style
        return cell

    def compare_to(self, other: Cell) -> int:
        a, b = (self._row, self._column), (other._row, other._column)
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        if (self._column, self._row, self._address_type) != (other._column, other._row, other._address_type):
            return False
        if self._style is not None and other._style is not None and self._style != other._style:
            return False
        if self._type != other._type:
            return False
        if self._value is not None and other._value is not None:
            return bool(self._value == other._value)
        return True

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Cell) -> bool:
        return (self._row, self._column) < (other._row, other._column)

    def __repr__(self) -> str:
        return f"Cell({self.cell_address}: {self._type.name} {self._value!r})"


def convert_array(values: Iterable[Any]) -> list[Cell]:
    """Cells from native values; prebuilt cells are taken as they are"""
    return [value if isinstance(value, Cell) else Cell(value) for value in values]
