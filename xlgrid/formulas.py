"""
Builders of common formula cells.

Every builder returns a FORMULA cell at `A1`; `Worksheet.add_cell` moves it to
its final address. Formulas are text only, nothing is evaluated.

```python
ws.add_cell(BasicFormulas.sum("A1:A10"), "A11")
ws.add_cell(BasicFormulas.vlookup(42, "D1:F20", 2, True, range_sheet=prices), "B1")
```
"""

from __future__ import annotations

__all__ = ["BasicFormulas", "sheet_prefix"]

import re
from decimal import Decimal
from typing import TYPE_CHECKING, Union

from .address import Address, Range, parse_address, resolve_range
from .cell import Cell, CellType
from .errors import FormatError

if TYPE_CHECKING:
    from typing_extensions import TypeAlias

    from .worksheet import Worksheet

    RangeLike: TypeAlias = "Range | str"
    AddressLike: TypeAlias = "Address | str"
    Lookup: TypeAlias = Union[int, float, Decimal, Address, str]

re_plain_sheet_name = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")


def sheet_prefix(worksheet: Worksheet | None) -> str:
    """`Data!`, `'My Data'!` for names that need quoting, empty without a worksheet"""
    if worksheet is None:
        return ""
    name = worksheet.sheet_name
    if re_plain_sheet_name.fullmatch(name):
        return f"{name}!"
    escaped = name.replace("'", "''")
    return f"'{escaped}'!"


def _to_range(rng: RangeLike) -> Range:
    return resolve_range(rng) if isinstance(rng, str) else rng


def _to_address(address: AddressLike) -> Address:
    return parse_address(address) if isinstance(address, str) else address


def _format_number(number: int | float | Decimal) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def _basic_formula(name: str, rng: Range, sheet: Worksheet | None, post_arg: str | None = None) -> Cell:
    ref = str(rng.start) if rng.start == rng.end else str(rng)
    tail = "" if post_arg is None else f",{post_arg}"
    return Cell(f"{name}({sheet_prefix(sheet)}{ref}{tail})", CellType.FORMULA)


class BasicFormulas:
    """`sheet` arguments reference another worksheet; None means the sheet the cell is added to"""

    @staticmethod
    def sum(rng: RangeLike, sheet: Worksheet | None = None) -> Cell:
        return _basic_formula("SUM", _to_range(rng), sheet)

    @staticmethod
    def average(rng: RangeLike, sheet: Worksheet | None = None) -> Cell:
        return _basic_formula("AVERAGE", _to_range(rng), sheet)

    @staticmethod
    def min(rng: RangeLike, sheet: Worksheet | None = None) -> Cell:
        return _basic_formula("MIN", _to_range(rng), sheet)

    @staticmethod
    def max(rng: RangeLike, sheet: Worksheet | None = None) -> Cell:
        return _basic_formula("MAX", _to_range(rng), sheet)

    @staticmethod
    def median(rng: RangeLike, sheet: Worksheet | None = None) -> Cell:
        return _basic_formula("MEDIAN", _to_range(rng), sheet)

    @staticmethod
    def round(address: AddressLike, decimals: int, sheet: Worksheet | None = None) -> Cell:
        a = _to_address(address)
        return _basic_formula("ROUND", Range(a, a), sheet, str(decimals))

    @staticmethod
    def floor(address: AddressLike, decimals: int, sheet: Worksheet | None = None) -> Cell:
        """Round towards zero (`ROUNDDOWN`)"""
        a = _to_address(address)
        return _basic_formula("ROUNDDOWN", Range(a, a), sheet, str(decimals))

    @staticmethod
    def ceil(address: AddressLike, decimals: int, sheet: Worksheet | None = None) -> Cell:
        """Round away from zero (`ROUNDUP`)"""
        a = _to_address(address)
        return _basic_formula("ROUNDUP", Range(a, a), sheet, str(decimals))

    @staticmethod
    def vlookup(
        lookup: Lookup,
        rng: RangeLike,
        column_index: int,
        exact_match: bool,
        lookup_sheet: Worksheet | None = None,
        range_sheet: Worksheet | None = None,
    ) -> Cell:
        """
        `VLOOKUP` of a number or of the value of a cell.

        Parameters
        ----------
        lookup : int | float | Decimal | Address | str
            Number to look up, or the address of the cell holding the lookup value
        rng : Range | str
            Lookup matrix
        column_index : int
            1-based column of the matrix to return
        exact_match : bool
            Only exact matches (the fourth `VLOOKUP` argument)
        lookup_sheet, range_sheet : Worksheet, optional
            Worksheets of the lookup cell and of the matrix

        Raises
        ------
        FormatError
            The lookup is neither a number nor a cell address

        """
        if isinstance(lookup, bool):
            raise FormatError(f"The lookup value can only be a cell address or a number. '{lookup}' is not valid")
        if isinstance(lookup, (int, float, Decimal)):
            arg1 = _format_number(lookup)
        elif isinstance(lookup, (Address, str)):
            arg1 = f"{sheet_prefix(lookup_sheet)}{_to_address(lookup)}"
        else:
            raise FormatError(f"The lookup value can only be a cell address or a number. '{lookup}' is not valid")
        arg2 = f"{sheet_prefix(range_sheet)}{_to_range(rng)}"
        arg4 = "TRUE" if exact_match else "FALSE"
        return Cell(f"VLOOKUP({arg1},{arg2},{column_index},{arg4})", CellType.FORMULA)
