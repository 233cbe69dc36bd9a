"""
Tabular view of a worksheet as a `pyarrow.Table`.

```python
tbl = worksheet_to_arrow(ws, header=True)
tbl.column("Amount").type  # double
```
"""

from __future__ import annotations

__all__ = ["worksheet_to_arrow"]

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import pyarrow as pa

from .address import resolve_column_address
from .cell import CellType

if TYPE_CHECKING:
    from .cell import Cell
    from .worksheet import Worksheet

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


def _kind(cell: Cell) -> str | None:
    value = cell.value
    if value is None or value == "":
        return None
    if cell.data_type == CellType.FORMULA or isinstance(value, str):
        return "s"
    if isinstance(value, bool):
        return "b"
    if isinstance(value, int):
        return "i" if INT64_MIN <= value <= INT64_MAX else "f"
    if isinstance(value, (float, Decimal)):
        return "f"
    if isinstance(value, date):
        return "d"
    if isinstance(value, timedelta):
        return "t"
    return "s"


def _to_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _make_array(values: list[Any], kinds: set[str]) -> pa.Array:
    if kinds == {"b"}:
        return pa.array(values, pa.bool_())
    if kinds == {"i"}:
        return pa.array(values, pa.int64())
    if kinds and kinds <= {"i", "f"}:
        return pa.array([None if v is None else float(v) for v in values], pa.float64())
    if kinds == {"d"}:
        values = [v if v is None or isinstance(v, datetime) else datetime(v.year, v.month, v.day) for v in values]
        return pa.array(values, pa.timestamp("ms"))
    if kinds == {"t"}:
        return pa.array(values, pa.duration("ms"))
    return pa.array([_to_text(v) for v in values], pa.large_string())


def _make_header(cells: list[Cell | None]) -> list[str]:
    hdrs = [text if cell is not None and (text := _to_text(cell.value)) else "Unnamed" for cell in cells]

    result_hdrs: list[str] = []

    for hdr in hdrs:
        n = hdr
        i = 1
        while n in result_hdrs:
            n = f"{hdr}.{i}"
            i += 1

        result_hdrs.append(n)

    return result_hdrs


def worksheet_to_arrow(worksheet: Worksheet, header: bool = False) -> pa.Table:  # noqa: FBT001
    """
    One column per worksheet column that holds data, rows from the first to the last data row.

    Parameters
    ----------
    worksheet : Worksheet
        Source worksheet
    header : bool, optional
        Take column names from the first data row, by default False (names are column letters)

    Returns
    -------
    pa.Table
        Columns where every non-empty cell has the same kind get a typed array
        (bool, int64, float64, timestamp[ms], duration[ms]); mixed columns are large strings.

    """
    grid: dict[int, dict[int, Cell]] = {}
    for cell in worksheet.cells.values():
        if _kind(cell) is not None:
            grid.setdefault(cell.column_number, {})[cell.row_number] = cell

    if not grid:
        return pa.table({})

    numbers = sorted(grid)
    first_row = min(min(rows) for rows in grid.values())
    last_row = max(max(rows) for rows in grid.values())

    if header:
        names = _make_header([grid[n].get(first_row) for n in numbers])
        first_row += 1
    else:
        names = [resolve_column_address(n) for n in numbers]

    arrays = []
    for n in numbers:
        rows = grid[n]
        values: list[Any] = []
        kinds: set[str] = set()
        for r in range(first_row, last_row + 1):
            cell = rows.get(r)
            kind = _kind(cell) if cell is not None else None
            if kind is None:
                values.append(None)
                continue
            kinds.add(kind)
            values.append(cell.value)  # type: ignore[union-attr]
        arrays.append(_make_array(values, kinds))

    return pa.Table.from_arrays(arrays, names=names)
