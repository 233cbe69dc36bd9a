# ruff: noqa:S101, PLR2004
from datetime import date, datetime, timedelta

import pytest

from xlgrid.dates import from_serial, to_serial_datetime, to_serial_time
from xlgrid.errors import FormatError


def test_from_serial() -> None:
    assert from_serial(45292) == datetime(2024, 1, 1)
    assert from_serial(45292.5) == datetime(2024, 1, 1, 12)
    assert from_serial(1) == datetime(1900, 1, 1)
    assert from_serial(61) == datetime(1900, 3, 1)


def test_from_serial_fraction_of_day() -> None:
    assert from_serial(0.25) == datetime(1899, 12, 31, 6)


def test_to_serial_datetime() -> None:
    assert to_serial_datetime(datetime(2024, 1, 1)) == 45292.0
    assert to_serial_datetime(datetime(2024, 1, 1, 12)) == 45292.5
    assert to_serial_datetime(date(2024, 1, 2)) == 45293.0
    # before the phantom 1900-02-29
    assert to_serial_datetime(datetime(1900, 1, 1)) == 1.0
    assert to_serial_datetime(datetime(1900, 3, 1)) == 61.0


def test_to_serial_datetime_range() -> None:
    with pytest.raises(FormatError):
        to_serial_datetime(datetime(1899, 6, 1))
    assert to_serial_datetime(datetime(1899, 12, 31), skip_check=True) == 0.0


def test_to_serial_time() -> None:
    assert to_serial_time(timedelta(hours=6)) == 0.25
    assert to_serial_time(timedelta(days=2, hours=12)) == 2.5
