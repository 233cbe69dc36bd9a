# ruff: noqa:S101, PLR2004
from datetime import datetime

import pytest

from xlgrid.address import Address, Range, resolve_range
from xlgrid.cell import Cell, CellType
from xlgrid.errors import FormatError, RangeError, StyleError, WorksheetError
from xlgrid.styles import BasicStyles, Font, Style
from xlgrid.workbook import Workbook
from xlgrid.worksheet import (
    CellDirection,
    SheetProtectionValue,
    SheetViewType,
    Worksheet,
    WorksheetPane,
    sanitize_worksheet_name,
)


def test_cursor_column_to_column() -> None:
    ws = Worksheet("S")
    for v in ("a", "b", "c"):
        ws.add_next_cell(v)
    assert [c.cell_address for c in ws.sorted_cells()] == ["A1", "B1", "C1"]
    assert (ws.current_column_number, ws.current_row_number) == (3, 0)


def test_cursor_row_to_row() -> None:
    ws = Worksheet("S")
    ws.current_cell_direction = CellDirection.ROW_TO_ROW
    ws.add_next_cell(1)
    ws.add_next_cell(2)
    assert ws.get_cell("A2").value == 2
    assert (ws.current_column_number, ws.current_row_number) == (0, 2)


def test_cursor_disabled() -> None:
    ws = Worksheet("S")
    ws.current_cell_direction = CellDirection.DISABLED
    ws.set_current_cell_address("C3")
    for v in range(5):
        ws.add_next_cell(v)
    assert len(ws.cells) == 1
    assert ws.get_cell("C3").value == 4
    assert (ws.current_column_number, ws.current_row_number) == (2, 2)


def test_explicit_address_moves_cursor() -> None:
    ws = Worksheet("S")
    ws.add_cell("x", "C5")
    assert (ws.current_column_number, ws.current_row_number) == (3, 4)
    ws.add_next_cell("y")
    assert ws.get_cell(3, 4).value == "y"
    ws.add_cell("z", Address(0, 9))
    assert ws.has_cell("A10")


def test_go_to_next() -> None:
    ws = Worksheet("S")
    ws.set_current_cell_address(4, 4)
    ws.go_to_next_row()
    assert (ws.current_column_number, ws.current_row_number) == (0, 5)
    ws.set_current_cell_address(4, 4)
    ws.go_to_next_column(2, keep_row_position=True)
    assert (ws.current_column_number, ws.current_row_number) == (6, 4)
    with pytest.raises(RangeError):
        ws.go_to_next_row(2_000_000)


def test_cells_keyed_without_markers() -> None:
    ws = Worksheet("S")
    ws.add_cell(1, "$B$2")
    ws.add_cell(2, "B2")
    assert list(ws.cells) == ["B2"]
    assert ws.get_cell("B2").value == 2


def test_formula_cells() -> None:
    ws = Worksheet("S")
    ws.add_next_cell_formula("SUM(B1:B3)")
    ws.add_cell_formula("A1*2", "D4")
    assert ws.get_cell("A1").data_type == CellType.FORMULA
    assert ws.get_cell("D4").value == "A1*2"


def test_prebuilt_cell_gets_target_address() -> None:
    ws = Worksheet("S")
    ws.add_cell(Cell("v", address="Z99"), "B2")
    assert ws.get_cell("B2").cell_address == "B2"


def test_add_cell_range() -> None:
    ws = Worksheet("S")
    ws.add_cell_range([1, 2, 3, 4], "A1:B2")
    assert [ws.get_cell(a).value for a in ("A1", "A2", "B1", "B2")] == [1, 2, 3, 4]
    with pytest.raises(RangeError):
        ws.add_cell_range([1, 2], "A1", "C1")


def test_get_and_remove_cell() -> None:
    ws = Worksheet("S")
    ws.add_cell(1, "A1")
    with pytest.raises(WorksheetError):
        ws.get_cell("B7")
    assert ws.remove_cell("A1")
    assert not ws.remove_cell("A1")


def test_rows_and_columns() -> None:
    ws = Worksheet("S")
    ws.add_cell_range(["a", "b", "c", "d"], "A1:B2")
    assert [c.value for c in ws.get_row(1)] == ["b", "d"]
    assert [c.value for c in ws.get_column("B")] == ["c", "d"]


def test_active_style_and_explicit_style() -> None:
    wb = Workbook("S")
    ws = wb.current_worksheet
    ws.set_active_style(Style(font=Font(bold=True, size=20.0)))
    ws.add_next_cell(1, style=Style(font=Font(size=8.0)))
    style = ws.get_cell("A1").cell_style
    assert style.font.bold
    assert style.font.size == 8.0

    ws.clear_active_style()
    ws.add_next_cell(2)
    assert ws.get_cell("B1").cell_style is None


def test_styles_are_shared_through_the_workbook() -> None:
    wb = Workbook("S")
    ws = wb.current_worksheet
    ws.add_cell(1, "A1", style=BasicStyles.bold())
    ws.add_cell(2, "A2", style=Style(font=Font(bold=True)))
    assert ws.get_cell("A1").cell_style is ws.get_cell("A2").cell_style
    assert wb.styles.count == 1
    assert ws.styles is wb.styles


def test_set_style_on_range() -> None:
    ws = Worksheet("S")
    ws.add_cell("x", "A1")
    ws.set_style("A1:B1", BasicStyles.italic())
    assert ws.get_cell("A1").cell_style == BasicStyles.italic()
    assert ws.get_cell("B1").data_type == CellType.EMPTY
    assert ws.get_cell("B1").cell_style == BasicStyles.italic()
    ws.set_style("A1", None)
    assert ws.get_cell("A1").cell_style is None
    with pytest.raises(FormatError):
        ws.set_style("nope", BasicStyles.bold())


def test_date_cell_is_styled() -> None:
    ws = Worksheet("S")
    ws.add_next_cell(datetime(2024, 1, 1))
    assert ws.get_cell("A1").cell_style == BasicStyles.date_format()
    assert BasicStyles.date_format() in ws.styles


def test_merge_exclusivity() -> None:
    ws = Worksheet("S")
    assert ws.merge_cells("A1:B2") == "A1:B2"
    with pytest.raises(RangeError):
        ws.merge_cells("B2:C3")
    assert ws.merge_cells(Range("D4", "C3")) == "C3:D4"
    assert set(ws.merged_cells) == {"A1:B2", "C3:D4"}


def test_remove_merged_cells() -> None:
    ws = Worksheet("S")
    ws.merge_cells("A1", "B2")
    ws.remove_merged_cells("a1:b2")
    assert ws.merged_cells == {}
    with pytest.raises(RangeError):
        ws.remove_merged_cells("A1:B2")


def test_resolve_merged_cells() -> None:
    ws = Worksheet("S")
    ws.add_cell("title", "A1")
    ws.add_cell("hidden", "B1", style=BasicStyles.bold())
    ws.merge_cells("A1:B2")
    ws.resolve_merged_cells()
    assert ws.get_cell("A1").value == "title"
    b1 = ws.get_cell("B1")
    assert b1.data_type == CellType.EMPTY
    assert b1.value is None
    assert b1.cell_style.font.bold
    assert b1.cell_style.cell_xf.force_apply_alignment
    assert ws.get_cell("B2").cell_style == BasicStyles.merge_cell_style()


def test_auto_filter() -> None:
    ws = Worksheet("S")
    ws.add_cell_range(["a", "b", "c"], "A1:C1")
    ws.add_cell(5, "B5")
    ws.set_auto_filter("A", "C")
    assert ws.auto_filter_range == resolve_range("A1:C5")
    assert all(ws.columns[n].has_auto_filter for n in (0, 1, 2))

    ws.remove_auto_filter()
    assert ws.auto_filter_range is None
    assert ws.columns == {}


def test_auto_filter_from_range() -> None:
    ws = Worksheet("S")
    ws.set_auto_filter("B1:D1")
    assert ws.auto_filter_range == resolve_range("B1:D1")
    assert set(ws.columns) == {1, 2, 3}


def test_column_width_and_compaction() -> None:
    ws = Worksheet("S")
    ws.set_column_width("B", 20.0)
    assert ws.columns[1].width == 20.0
    ws.set_column_width(1, 10.0)
    assert ws.columns == {}
    with pytest.raises(RangeError):
        ws.set_column_width(0, 256.0)


def test_hidden_columns_and_rows() -> None:
    ws = Worksheet("S")
    ws.add_hidden_column("C")
    assert ws.columns[2].hidden
    ws.remove_hidden_column("C")
    assert 2 not in ws.columns

    ws.add_hidden_row(3)
    ws.set_row_height(4, 30.0)
    assert ws.hidden_rows == {3}
    assert ws.row_heights == {4: 30.0}
    with pytest.raises(RangeError):
        ws.set_row_height(4, 410.0)
    ws.remove_hidden_row(3)
    ws.remove_row_height(4)
    assert not ws.hidden_rows
    assert not ws.row_heights


def test_column_default_style() -> None:
    wb = Workbook("S")
    ws = wb.current_worksheet
    registered = ws.set_column_default_style("A", BasicStyles.bold())
    assert ws.columns[0].default_style is registered
    assert BasicStyles.bold() in wb.styles
    ws.set_column_default_style("A", None)
    assert ws.columns == {}


def test_default_dimensions() -> None:
    ws = Worksheet("S")
    ws.default_column_width = 12.5
    ws.default_row_height = 20.0
    assert ws.default_column_width == 12.5
    with pytest.raises(RangeError):
        ws.default_column_width = -1.0
    with pytest.raises(RangeError):
        ws.default_row_height = 500.0


def test_boundaries() -> None:
    ws = Worksheet("S")
    assert ws.get_first_column_number() == -1
    assert ws.get_last_data_cell_address() is None

    ws.add_cell(None, "B2")
    ws.add_cell("x", "C5")
    ws.set_row_height(9, 20.0)
    assert ws.get_first_column_number() == 1
    assert ws.get_first_data_column_number() == 2
    assert ws.get_last_row_number() == 9
    assert ws.get_last_data_row_number() == 4
    assert ws.get_first_cell_address() == Address(1, 1)
    assert ws.get_last_data_cell_address() == Address(2, 4)


def test_search_and_replace() -> None:
    ws = Worksheet("S")
    ws.add_cell(True, "A1")
    ws.add_cell(1, "A2")
    ws.add_cell(1, "A3")
    assert ws.first_cell_by_value(1).cell_address == "A2"
    assert [c.cell_address for c in ws.cells_by_value(True)] == ["A1"]
    assert ws.first_or_default_cell(lambda c: c.row_number == 2).cell_address == "A3"
    assert ws.first_cell_by_value("missing") is None
    assert ws.replace_cell_value(1, "one") == 2
    assert ws.get_cell("A3").data_type == CellType.STRING


def test_insert_row() -> None:
    ws = Worksheet("S")
    ws.add_cell("head", "A1", style=BasicStyles.bold())
    ws.add_cell("body", "A2")
    ws.insert_row(0, 2)
    assert ws.get_cell("A4").value == "body"
    for key in ("A2", "A3"):
        cell = ws.get_cell(key)
        assert cell.data_type == CellType.EMPTY
        assert cell.cell_style == BasicStyles.bold()


def test_insert_column() -> None:
    ws = Worksheet("S")
    ws.add_cell("left", "A1")
    ws.add_cell("right", "B1")
    ws.insert_column("A", 1)
    assert ws.get_cell("C1").value == "right"
    assert ws.get_cell("B1").data_type == CellType.EMPTY


def test_insert_past_last_row_keeps_cells() -> None:
    ws = Worksheet("S")
    ws.add_cell("top", "A1")
    ws.add_cell("bottom", "A1048575")
    with pytest.raises(RangeError):
        ws.insert_row(0, 2)
    assert ws.get_cell("A1").value == "top"
    assert ws.get_cell("A1048575").value == "bottom"
    assert len(ws.cells) == 2


def test_insert_past_last_column_keeps_cells() -> None:
    ws = Worksheet("S")
    ws.add_cell("edge", "XFC1")
    with pytest.raises(RangeError):
        ws.insert_column("XFC", 2)
    with pytest.raises(RangeError):
        ws.insert_column("A", 2)
    assert ws.get_cell("XFC1").value == "edge"
    assert len(ws.cells) == 1


def test_lookup_ignores_reference_markers() -> None:
    ws = Worksheet("S")
    ws.add_cell("x", "A1")
    assert ws.has_cell("$A$1")
    assert ws.get_cell("A$1").value == "x"
    assert ws.get_cell(Address.parse("$A1")).value == "x"
    assert ws.remove_cell("$A$1")
    assert not ws.has_cell("A1")


def test_merged_range_key_ignores_reference_markers() -> None:
    ws = Worksheet("S")
    assert ws.merge_cells("$A$1:$B$2") == "A1:B2"
    with pytest.raises(RangeError):
        ws.merge_cells("B2:C3")
    ws.remove_merged_cells("A1:B2")
    assert ws.merged_cells == {}
    ws.merge_cells("C3:D4")
    ws.remove_merged_cells("$C$3:D$4")
    assert ws.merged_cells == {}


def test_selection() -> None:
    ws = Worksheet("S")
    ws.add_selected_cells("A1:B2")
    ws.add_selected_cells("C1:C2")
    assert ws.selected_cells == [resolve_range("A1:C2")]
    ws.remove_selected_cells("B1:B2")
    covered = {a.get_address() for rng in ws.selected_cells for a in rng.addresses()}
    assert covered == {"A1", "A2", "C1", "C2"}
    ws.clear_selected_cells()
    assert ws.selected_cells == []


def test_sheet_protection() -> None:
    ws = Worksheet("S")
    ws.add_allowed_action_on_sheet_protection(SheetProtectionValue.SELECT_LOCKED_CELLS)
    assert ws.use_sheet_protection
    assert SheetProtectionValue.SELECT_UNLOCKED_CELLS in ws.sheet_protection_values
    ws.remove_allowed_action_on_sheet_protection(SheetProtectionValue.SELECT_LOCKED_CELLS)
    assert ws.sheet_protection_values == [SheetProtectionValue.SELECT_UNLOCKED_CELLS]
    ws.set_sheet_protection_password("x")
    assert ws.sheet_protection_password.password_hash == "CEBA"


def test_sheet_name_validation() -> None:
    for name in ("", "a" * 32, "a[b", "a]b", "a*b", "a?b", "a/b", "a\\b"):
        with pytest.raises(FormatError):
            Worksheet(name)
    assert Worksheet("a" * 31).sheet_name == "a" * 31


def test_sanitize_name() -> None:
    assert sanitize_worksheet_name("a[b]*") == "a_b__"
    assert sanitize_worksheet_name(None) == "Sheet1"
    assert sanitize_worksheet_name("x" * 40) == "x" * 31

    wb = Workbook("Sheet1")
    wb.add_worksheet("Data")
    # suffix only on collision
    assert sanitize_worksheet_name("Other", wb) == "Other"
    assert sanitize_worksheet_name("Sheet1", wb) == "Sheet2"
    assert sanitize_worksheet_name("Data", wb) == "Data1"


def test_sanitize_long_name_keeps_length() -> None:
    wb = Workbook("b" * 31)
    name = sanitize_worksheet_name("b" * 31, wb)
    assert len(name) == 31
    assert name == "b" * 30 + "1"


def test_freeze_split_validation() -> None:
    ws = Worksheet("S")
    with pytest.raises(WorksheetError):
        ws.set_split(2, None, True, "A1")
    with pytest.raises(WorksheetError):
        ws.set_horizontal_split(3, True, "A2")
    ws.set_split(2, 3, True, "C4", WorksheetPane.BOTTOM_RIGHT)
    assert ws.pane_split_address == Address(2, 3)
    assert ws.freeze_split_panes
    ws.set_vertical_split(2, False, "A1")
    assert not ws.freeze_split_panes
    ws.reset_split()
    assert ws.pane_split_address is None
    assert ws.pane_split_top_left_cell is None


def test_split_size() -> None:
    ws = Worksheet("S")
    ws.set_split_size(20.0, None, "D1")
    assert ws.pane_split_left_width == 20.0
    assert ws.pane_split_address is None
    assert ws.pane_split_top_left_cell == Address(3, 0)


def test_zoom() -> None:
    ws = Worksheet("S")
    assert ws.zoom_factor == 100
    with pytest.raises(WorksheetError):
        ws.set_zoom_factor(SheetViewType.NORMAL, 5)
    with pytest.raises(WorksheetError):
        ws.zoom_factor = 401
    ws.zoom_factor = 0
    assert ws.zoom_factors[SheetViewType.NORMAL] == 0
    ws.view_type = SheetViewType.PAGE_LAYOUT
    assert ws.zoom_factor == 100


def test_copy_is_independent() -> None:
    wb = Workbook("S")
    ws = wb.current_worksheet
    ws.add_cell("x", "A1", style=BasicStyles.bold())
    ws.merge_cells("B1:C1")
    copy = ws.copy()
    assert copy.workbook is None
    assert copy.sheet_name == "S"
    copy.get_cell("A1").value = "changed"
    copy.merge_cells("D1:E1")
    assert ws.get_cell("A1").value == "x"
    assert "D1:E1" not in ws.merged_cells
    assert BasicStyles.bold() in copy.styles
    assert copy.styles is not wb.styles


def test_hidden_selected_sheet() -> None:
    wb = Workbook("S")
    with pytest.raises(WorksheetError):
        wb.current_worksheet.hidden = True


def test_set_style_requires_style_on_cell() -> None:
    with pytest.raises(StyleError):
        Cell(1).set_style(None)
