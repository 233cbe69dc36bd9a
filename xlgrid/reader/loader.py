"""
Building worksheets and workbooks from the parts an XML reader extracted.

```python
data = WorkbookData(
    sheets=(WorksheetData("Sheet1", cells=(RawCell("A1", "s", None, "0"),)),),
    shared_strings=("hello",),
)
wb = load_workbook(data)
```
"""

from __future__ import annotations

__all__ = ["WorkbookLoader", "WorksheetLoader", "load_workbook", "load_worksheet"]

import logging
from typing import TYPE_CHECKING

from ..constants import DEFAULT_COLUMN_WIDTH
from ..workbook import WorkbookBuilder
from ..worksheet import SheetProtectionValue, SheetViewType, Worksheet, WorksheetPane
from .coercion import ValueCoercion
from .style_table import StyleTable

if TYPE_CHECKING:
    from typing import Sequence

    from ..styles.records import Style
    from ..workbook import Workbook
    from .options import ImportOptions
    from .parsing import SharedStringTable
    from .tokens import ColumnFormat, SheetViewData, WorkbookData, WorksheetData

logger = logging.getLogger(__name__)


class WorksheetLoader:
    """Applies `WorksheetData` bundles to worksheets, one coercion pipeline for all of them"""

    __slots__ = ("coercion",)

    def __init__(self, coercion: ValueCoercion) -> None:
        self.coercion = coercion

    def load(self, data: WorksheetData, worksheet: Worksheet | None = None) -> Worksheet:
        ws = worksheet if worksheet is not None else Worksheet(data.name)

        if data.default_column_width is not None:
            ws.default_column_width = data.default_column_width
        if data.default_row_height is not None:
            ws.default_row_height = data.default_row_height

        for token in data.cells:
            cell = self.coercion.resolve(token)
            ws.add_cell(cell, cell.address)
        ws.set_current_cell_address(0, 0)

        for row in data.rows:
            if row.height is not None:
                ws.set_row_height(row.row, row.height)
            if row.hidden:
                ws.add_hidden_row(row.row)

        for col in data.columns:
            self._apply_column(ws, col)

        for ref in data.merged_ranges:
            ws.merge_cells(ref)
        if data.auto_filter:
            ws.set_auto_filter(data.auto_filter)

        self._apply_view(ws, data.view)
        self._apply_protection(ws, data)
        ws.hidden = data.hidden

        logger.debug(
            "loaded worksheet '%s': %d cells, %d merged ranges", ws.sheet_name, len(ws.cells), len(ws.merged_cells)
        )
        return ws

    def _apply_column(self, ws: Worksheet, col: ColumnFormat) -> None:
        style = self.coercion.styles.get(col.style_index)
        for number in range(col.min_column, col.max_column + 1):
            if col.width is not None and col.width != DEFAULT_COLUMN_WIDTH:
                ws.set_column_width(number, col.width)
            if col.hidden:
                ws.add_hidden_column(number)
            if style is not None:
                ws.set_column_default_style(number, style)

    @staticmethod
    def _apply_view(ws: Worksheet, view: SheetViewData) -> None:
        ws.view_type = SheetViewType(view.view_type)
        if view.zoom is not None:
            ws.set_zoom_factor(ws.view_type, view.zoom)
        ws.show_grid_lines = view.show_grid_lines
        ws.show_row_column_headers = view.show_row_column_headers
        ws.show_ruler = view.show_ruler
        for ref in view.selected_ranges:
            ws.add_selected_cells(ref)

        if view.split_columns is None and view.split_rows is None:
            return
        top_left = view.top_left_cell or "A1"
        pane = WorksheetPane(view.active_pane) if view.active_pane is not None else None
        if view.frozen:
            ws.set_split(view.split_columns, view.split_rows, True, top_left, pane)
        else:
            ws.set_split_size(view.split_columns, view.split_rows, top_left, pane)

    @staticmethod
    def _apply_protection(ws: Worksheet, data: WorksheetData) -> None:
        if not data.protection_hash and not data.protection_values:
            return
        for value in data.protection_values:
            ws.add_allowed_action_on_sheet_protection(SheetProtectionValue(value))
        ws.sheet_protection_password.set_password_hash(data.protection_hash)
        ws.use_sheet_protection = True


class WorkbookLoader:
    """
    Assembles a workbook through `WorkbookBuilder`.

    Worksheets are added in file order, hidden flags and the selection can be in
    any state until everything is in place; the workbook is validated once at the end.
    """

    __slots__ = ("options",)

    def __init__(self, options: ImportOptions | None = None) -> None:
        self.options = options

    def load(self, data: WorkbookData) -> Workbook:
        coercion = ValueCoercion(data.shared_strings, StyleTable(data.styles), self.options)
        sheets = WorksheetLoader(coercion)
        builder = WorkbookBuilder()
        for sheet in data.sheets:
            sheets.load(sheet, builder.add_worksheet(sheet.name))
        if data.sheets:
            builder.select(data.selected_sheet)
        builder.set_workbook_protection(data.protected, data.lock_windows, data.lock_structure, data.protection_hash)
        builder.workbook.hidden = data.hidden
        wb = builder.build()
        logger.debug("loaded workbook: %d worksheets, %d styles", len(wb.worksheets), wb.styles.count)
        return wb


def load_worksheet(
    data: WorksheetData,
    shared_strings: SharedStringTable | Sequence[str | None] | None = None,
    styles: StyleTable | Sequence[Style] | None = None,
    options: ImportOptions | None = None,
) -> Worksheet:
    """Detached worksheet from one worksheet part"""
    if styles is not None and not isinstance(styles, StyleTable):
        styles = StyleTable(styles)
    return WorksheetLoader(ValueCoercion(shared_strings, styles, options)).load(data)


def load_workbook(data: WorkbookData, options: ImportOptions | None = None) -> Workbook:
    return WorkbookLoader(options).load(data)
