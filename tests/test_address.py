# ruff: noqa:S101, PLR2004
import pytest

import xlgrid.address
import xlgrid.core
from xlgrid.address import (
    Address,
    AddressScope,
    AddressType,
    Range,
    get_address_scope,
    parse_address,
    resolve_address,
    resolve_column,
    resolve_column_address,
    resolve_range,
)
from xlgrid.errors import FormatError, RangeError


def test_column_letters() -> None:
    pairs = {0: "A", 25: "Z", 26: "AA", 701: "ZZ", 702: "AAA", 16383: "XFD"}
    for number, letters in pairs.items():
        assert resolve_column_address(number) == letters
        assert resolve_column(letters) == number
    assert resolve_column("xfd") == 16383


def test_column_out_of_bounds() -> None:
    with pytest.raises(RangeError):
        resolve_column_address(16384)
    with pytest.raises(RangeError):
        resolve_column_address(-1)
    with pytest.raises(RangeError):
        resolve_column("XFE")
    with pytest.raises(FormatError):
        resolve_column("A1")


def test_resolve_address_markers() -> None:
    assert resolve_address(1, 2) == "B3"
    assert resolve_address(1, 2, AddressType.FIXED_ROW) == "B$3"
    assert resolve_address(1, 2, AddressType.FIXED_COLUMN) == "$B3"
    assert resolve_address(1, 2, AddressType.FIXED_ROW_AND_COLUMN) == "$B$3"


def test_parse_address() -> None:
    a = parse_address("$b$3")
    assert (a.column, a.row, a.type) == (1, 2, AddressType.FIXED_ROW_AND_COLUMN)
    assert parse_address("C10") == Address(2, 9)
    for type_ in AddressType:
        text = resolve_address(300, 70000, type_)
        assert parse_address(text) == Address(300, 70000, type_)


def test_parse_address_errors() -> None:
    for text in ("", "3B", "A1:B2", "AAAA1", "B-3"):
        with pytest.raises(FormatError):
            parse_address(text)
    with pytest.raises(RangeError):
        parse_address("A0")
    with pytest.raises(RangeError):
        parse_address("A1048577")


def test_address_equality_includes_type() -> None:
    assert Address(0, 0) == Address(0, 0)
    assert Address(0, 0) != Address(0, 0, AddressType.FIXED_ROW)
    assert len({Address(0, 0), Address(0, 0), Address(0, 0, AddressType.FIXED_COLUMN)}) == 2


def test_address_ordering() -> None:
    # column-major
    assert parse_address("A2") < parse_address("B1")
    assert parse_address("B1").compare_to(parse_address("A2")) == 1
    assert parse_address("C3").compare_to(parse_address("C3")) == 0
    assert sorted([parse_address("B1"), parse_address("A9"), parse_address("A1")]) == [
        Address(0, 0),
        Address(0, 8),
        Address(1, 0),
    ]


def test_address_text() -> None:
    a = Address(27, 4, AddressType.FIXED_COLUMN)
    assert str(a) == "$AB5"
    assert a.get_column() == "AB"
    assert a.with_type(AddressType.DEFAULT).get_address() == "AB5"
    assert repr(a) == "Address('$AB5')"


def test_range_normalization() -> None:
    rng = Range("B2", "A1")
    assert rng.start == Address(0, 0)
    assert rng.end == Address(1, 1)
    assert str(rng) == "A1:B2"
    assert Range("A1", "B2") == rng
    assert resolve_range("b2:a1") == rng


def test_range_geometry() -> None:
    rng = resolve_range("B2:D5")
    assert (rng.min_column, rng.max_column, rng.min_row, rng.max_row) == (1, 3, 1, 4)
    assert rng.size == 12
    assert rng.contains(parse_address("C3"))
    assert not rng.contains(parse_address("A1"))
    assert rng.contains(resolve_range("C3:D4"))
    assert not rng.contains(resolve_range("C3:E4"))
    assert rng.overlaps(resolve_range("D5:F9"))
    assert not rng.overlaps(resolve_range("E1:F9"))


def test_single_address_range() -> None:
    rng = resolve_range("C7")
    assert rng.size == 1
    assert rng.start == rng.end == Address(2, 6)


def test_range_errors() -> None:
    with pytest.raises(FormatError):
        resolve_range("")
    with pytest.raises(FormatError):
        resolve_range("A1:B2:C3")
    with pytest.raises(FormatError):
        resolve_range("A1:")


def test_enumerate_range_order() -> None:
    addresses = [a.get_address() for a in Range("A1", "B2").addresses()]
    assert addresses == ["A1", "A2", "B1", "B2"]


def test_enumerate_range_is_lazy() -> None:
    it = Range("A1", "XFD1048576").addresses()
    assert next(it) == Address(0, 0)
    assert next(it) == Address(0, 1)


def test_enumerate_range_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(xlgrid.core, "PERFORMANCE_WARNINGS", True)
    monkeypatch.setattr(xlgrid.address, "RANGE_WARN_SIZE", 3)
    with pytest.warns(UserWarning):
        list(Range("A1", "B2").addresses())


def test_address_scope() -> None:
    assert get_address_scope("A1") == AddressScope.SINGLE_ADDRESS
    assert get_address_scope("$A$1") == AddressScope.SINGLE_ADDRESS
    assert get_address_scope("A1:C3") == AddressScope.RANGE
    assert get_address_scope("nonsense") == AddressScope.INVALID
    assert get_address_scope("A1:ZZZZ1") == AddressScope.INVALID
