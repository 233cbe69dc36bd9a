# ruff: noqa:S101, PLR2004
from decimal import Decimal

import pytest

from xlgrid.address import Address, Range
from xlgrid.cell import CellType
from xlgrid.errors import FormatError
from xlgrid.formulas import BasicFormulas, sheet_prefix
from xlgrid.worksheet import Worksheet


def test_range_functions() -> None:
    assert BasicFormulas.sum("A1:A10").value == "SUM(A1:A10)"
    assert BasicFormulas.average(Range("B2", "C4")).value == "AVERAGE(B2:C4)"
    assert BasicFormulas.min("A1:B2").value == "MIN(A1:B2)"
    assert BasicFormulas.max("A1:B2").value == "MAX(A1:B2)"
    assert BasicFormulas.median("$A$1:$A$9").value == "MEDIAN($A$1:$A$9)"


def test_single_cell_range_collapses_to_address() -> None:
    assert BasicFormulas.sum("C3:C3").value == "SUM(C3)"


def test_builders_return_formula_cells() -> None:
    cell = BasicFormulas.max("A1:A3")
    assert cell.data_type == CellType.FORMULA
    assert cell.cell_address == "A1"


def test_rounding_functions() -> None:
    assert BasicFormulas.round("A1", 2).value == "ROUND(A1,2)"
    assert BasicFormulas.floor(Address(1, 1), 0).value == "ROUNDDOWN(B2,0)"
    assert BasicFormulas.ceil("$C$3", -1).value == "ROUNDUP($C$3,-1)"


def test_other_worksheet_prefix() -> None:
    data = Worksheet("Data")
    assert BasicFormulas.sum("A1:A4", data).value == "SUM(Data!A1:A4)"
    assert BasicFormulas.round("B1", 1, sheet=data).value == "ROUND(Data!B1,1)"


def test_sheet_prefix_quoting() -> None:
    assert sheet_prefix(None) == ""
    assert sheet_prefix(Worksheet("Sheet1")) == "Sheet1!"
    assert sheet_prefix(Worksheet("Q1 Sales")) == "'Q1 Sales'!"
    assert sheet_prefix(Worksheet("Bob's")) == "'Bob''s'!"


def test_vlookup_numeric() -> None:
    assert BasicFormulas.vlookup(42, "D1:F20", 2, True).value == "VLOOKUP(42,D1:F20,2,TRUE)"
    assert BasicFormulas.vlookup(2.5, "D1:F20", 3, False).value == "VLOOKUP(2.5,D1:F20,3,FALSE)"
    assert BasicFormulas.vlookup(7.0, "D1:F20", 1, True).value == "VLOOKUP(7,D1:F20,1,TRUE)"
    assert BasicFormulas.vlookup(Decimal("0.1"), "D1:F20", 1, True).value == "VLOOKUP(0.1,D1:F20,1,TRUE)"


def test_vlookup_address_and_sheets() -> None:
    inputs = Worksheet("Inputs")
    prices = Worksheet("Price List")
    cell = BasicFormulas.vlookup("A2", "A1:C10", 3, False, lookup_sheet=inputs, range_sheet=prices)
    assert cell.value == "VLOOKUP(Inputs!A2,'Price List'!A1:C10,3,FALSE)"
    assert cell.data_type == CellType.FORMULA


def test_vlookup_rejects_other_values() -> None:
    with pytest.raises(FormatError):
        BasicFormulas.vlookup(True, "A1:B2", 1, True)
    with pytest.raises(FormatError):
        BasicFormulas.vlookup(None, "A1:B2", 1, True)  # type: ignore[arg-type]
    with pytest.raises(FormatError):
        BasicFormulas.vlookup("not an address", "A1:B2", 1, True)


def test_formula_cell_added_to_worksheet() -> None:
    ws = Worksheet("S")
    for v in (1, 2, 3):
        ws.add_next_cell(v)
    ws.add_cell(BasicFormulas.sum("A1:C1"), "D1")
    cell = ws.get_cell("D1")
    assert cell.value == "SUM(A1:C1)"
    assert cell.data_type == CellType.FORMULA
