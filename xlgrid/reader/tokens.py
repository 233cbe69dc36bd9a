"""
Raw tokens handed over by a worksheet part reader.

Everything here is still text as found in the XML: the coercion pipeline turns it into typed cells.
"""

from __future__ import annotations

__all__ = ["ColumnFormat", "RawCell", "RowFormat", "SheetViewData", "WorkbookData", "WorksheetData"]

from typing import TYPE_CHECKING

from ..core import as_dataclass

if TYPE_CHECKING:
    from ..styles.records import Style


@as_dataclass(readonly=True)
class RawCell:
    """`<c r="B3" t="s" s="4"><v>12</v></c>`"""

    address: str
    "`r` attribute"
    type_code: str | None = None
    "`t` attribute: b, s, str, inlineStr, n, e, or absent"
    style_index: int | None = None
    "`s` attribute"
    raw: str = ""
    "Text of `<v>`, `<is>` or `<f>`"


@as_dataclass(readonly=True)
class RowFormat:
    row: int
    "0-based row index"
    height: float | None = None
    hidden: bool = False


@as_dataclass(readonly=True)
class ColumnFormat:
    """`<col min=".." max="..">`, 0-based and inclusive"""

    min_column: int
    max_column: int
    width: float | None = None
    hidden: bool = False
    style_index: int | None = None


@as_dataclass(readonly=True)
class SheetViewData:
    selected_ranges: tuple[str, ...] = ()
    "`sqref` of the selection, already split on spaces"
    zoom: int | None = None
    view_type: int = 0
    show_grid_lines: bool = True
    show_row_column_headers: bool = True
    show_ruler: bool = True
    split_columns: int | None = None
    split_rows: int | None = None
    frozen: bool = False
    top_left_cell: str | None = None
    active_pane: int | None = None


@as_dataclass(readonly=True)
class WorksheetData:
    """Everything read from one worksheet part"""

    name: str
    cells: tuple[RawCell, ...] = ()
    rows: tuple[RowFormat, ...] = ()
    columns: tuple[ColumnFormat, ...] = ()
    merged_ranges: tuple[str, ...] = ()
    auto_filter: str | None = None
    view: SheetViewData = SheetViewData()
    hidden: bool = False
    default_column_width: float | None = None
    default_row_height: float | None = None
    protection_hash: str | None = None
    protection_values: tuple[int, ...] = ()
    "Allowed `SheetProtectionValue`s; the sheet is protected if this or the hash is set"


@as_dataclass(readonly=True)
class WorkbookData:
    """Worksheets plus the workbook-wide parts they refer to"""

    sheets: tuple[WorksheetData, ...] = ()
    shared_strings: tuple[str | None, ...] = ()
    styles: tuple[Style, ...] = ()
    "Resolved `cellXfs`, position is the style index"
    selected_sheet: int = 0
    hidden: bool = False
    protected: bool = False
    lock_windows: bool = False
    lock_structure: bool = False
    protection_hash: str | None = None
