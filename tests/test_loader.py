# ruff: noqa:S101, PLR2004
from datetime import datetime

import pytest

from xlgrid.address import Address, resolve_range
from xlgrid.cell import CellType
from xlgrid.errors import WorksheetError
from xlgrid.reader import (
    ColumnFormat,
    ColumnType,
    ImportOptions,
    RawCell,
    RowFormat,
    SheetViewData,
    WorkbookData,
    WorksheetData,
    load_workbook,
    load_worksheet,
)
from xlgrid.styles import BasicStyles, Style
from xlgrid.worksheet import SheetProtectionValue, WorksheetPane

STYLES = (Style(), BasicStyles.date_format(), BasicStyles.bold())


def sample() -> WorkbookData:
    data = WorksheetData(
        "Data",
        cells=(
            RawCell("A1", "s", None, "0"),
            RawCell("B1", None, 1, "45292"),
            RawCell("A2", None, None, "12.5"),
            RawCell("B2", None, 2, "7"),
        ),
        rows=(RowFormat(1, height=30.0), RowFormat(3, hidden=True)),
        columns=(ColumnFormat(0, 1, width=20.0), ColumnFormat(3, 3, hidden=True, style_index=2)),
        merged_ranges=("C1:D1",),
        auto_filter="A1:B1",
        view=SheetViewData(
            selected_ranges=("A1:B2",),
            zoom=150,
            split_rows=1,
            frozen=True,
            top_left_cell="A2",
            active_pane=2,
        ),
        protection_hash="CEBA",
        protection_values=(int(SheetProtectionValue.SORT),),
    )
    hidden = WorksheetData("Hidden", hidden=True)
    return WorkbookData(sheets=(data, hidden), shared_strings=("hello",), styles=STYLES)


def test_load_workbook_cells() -> None:
    wb = load_workbook(sample())
    assert [ws.sheet_name for ws in wb] == ["Data", "Hidden"]
    ws = wb.get_worksheet("Data")
    assert ws.get_cell("A1").value == "hello"
    assert ws.get_cell("B1").value == datetime(2024, 1, 1)
    assert ws.get_cell("B1").data_type == CellType.DATE
    assert ws.get_cell("A2").value == 12.5
    assert ws.get_cell("B2").cell_style is wb.styles.get(BasicStyles.bold())
    assert BasicStyles.date_format() in wb.styles
    assert (ws.current_column_number, ws.current_row_number) == (0, 0)


def test_load_workbook_layout() -> None:
    ws = load_workbook(sample()).get_worksheet("Data")
    assert ws.row_heights == {1: 30.0}
    assert ws.hidden_rows == {3}
    assert ws.columns[0].width == 20.0
    assert ws.columns[1].width == 20.0
    assert ws.columns[3].hidden
    assert ws.columns[3].default_style == BasicStyles.bold()
    assert set(ws.merged_cells) == {"C1:D1"}
    assert ws.auto_filter_range == resolve_range("A1:B2")


def test_load_workbook_view_and_protection() -> None:
    ws = load_workbook(sample()).get_worksheet("Data")
    assert ws.zoom_factor == 150
    assert ws.selected_cells == [resolve_range("A1:B2")]
    assert ws.freeze_split_panes
    assert ws.pane_split_address == Address(0, 1)
    assert ws.pane_split_top_left_cell == Address(0, 1)
    assert ws.active_pane == WorksheetPane.BOTTOM_LEFT
    assert ws.use_sheet_protection
    assert SheetProtectionValue.SORT in ws.sheet_protection_values
    assert ws.sheet_protection_password.password_hash == "CEBA"
    assert ws.sheet_protection_password.password is None


def test_load_workbook_selection() -> None:
    wb = load_workbook(sample())
    assert wb.get_worksheet("Hidden").hidden
    assert wb.selected_worksheet == 0
    assert wb.current_worksheet.sheet_name == "Data"


def test_selected_hidden_sheet_is_rejected() -> None:
    data = WorkbookData(sheets=(WorksheetData("A", hidden=True), WorksheetData("B")))
    with pytest.raises(WorksheetError):
        load_workbook(data)


def test_workbook_needs_a_sheet() -> None:
    with pytest.raises(WorksheetError):
        load_workbook(WorkbookData())


def test_workbook_protection() -> None:
    data = WorkbookData(
        sheets=(WorksheetData("A"),), protected=True, lock_structure=True, protection_hash="83af"
    )
    wb = load_workbook(data)
    assert wb.use_workbook_protection
    assert wb.workbook_protection_password.password_hash == "83AF"


def test_load_workbook_with_options() -> None:
    options = ImportOptions()
    options.add_enforced_column("A", ColumnType.STRING)
    ws = load_workbook(sample(), options).get_worksheet("Data")
    assert ws.get_cell("A2").value == "12.5"


def test_load_detached_worksheet() -> None:
    data = WorksheetData(
        "Loose",
        cells=(RawCell("A1", None, 1, "1"), RawCell("A2", "s", None, "1")),
        default_column_width=12.0,
    )
    ws = load_worksheet(data, shared_strings=["a", "b"], styles=list(STYLES))
    assert ws.workbook is None
    assert ws.get_cell("A1").value == datetime(1900, 1, 1)
    assert ws.get_cell("A2").value == "b"
    assert ws.default_column_width == 12.0
    assert BasicStyles.date_format() in ws.styles
