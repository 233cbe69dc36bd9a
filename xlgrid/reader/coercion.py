"""
Typed values from raw worksheet tokens.

`ValueCoercion.resolve` decides the value of one `<c>` element: the type code and
the style index select how the text is read, then `ImportOptions` may force
other types on the result.
"""

from __future__ import annotations

__all__ = ["ValueCoercion"]

from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from ..address import parse_address
from ..cell import Cell, CellType, resolve_type
from ..dates import (
    FIRST_ALLOWED_DATE,
    LAST_ALLOWED_DATE,
    MAX_SERIAL_DATE,
    MIN_SERIAL_DATE,
    from_serial,
    to_serial_datetime,
    to_serial_time,
)
from .options import ColumnType, GlobalType, ImportOptions
from .parsing import (
    INT32_MAX,
    INT32_MIN,
    SharedStringTable,
    get_double_value,
    try_parse_bool,
    try_parse_date,
    try_parse_int,
    try_parse_number,
    try_parse_time,
)
from .style_table import StyleTable

if TYPE_CHECKING:
    from typing import Sequence

    from .tokens import RawCell

DECIMAL_MAX = 79228162514264337593543950335
"Largest value a 96-bit decimal holds"

_UNTYPED = (None, "", "n")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _float_to_decimal(value: float) -> Decimal:
    """Decimal of the shortest text that reads back as `value` (`1.1`, not the binary expansion)"""
    return Decimal(repr(value))


def _time_of_serial(serial: float) -> timedelta:
    moment = from_serial(serial)
    return timedelta(days=int(serial), hours=moment.hour, minutes=moment.minute, seconds=moment.second)


class ValueCoercion:
    """
    Raw token -> `Cell`.

    One instance serves a whole workbook: the shared strings and the style table
    are workbook-wide, the options are whatever the caller passed to the load.
    """

    __slots__ = ("shared_strings", "styles", "options")

    def __init__(
        self,
        shared_strings: SharedStringTable | Sequence[str | None] | None = None,
        styles: StyleTable | None = None,
        options: ImportOptions | None = None,
    ) -> None:
        if shared_strings is None:
            shared_strings = SharedStringTable()
        elif not isinstance(shared_strings, SharedStringTable):
            shared_strings = SharedStringTable(shared_strings)
        self.shared_strings: SharedStringTable = shared_strings
        self.styles = styles if styles is not None else StyleTable()
        self.options = options

    def resolve(self, token: RawCell) -> Cell:
        address = parse_address(token.address)
        raw = token.raw
        code = token.type_code
        cell_type = CellType.DEFAULT
        value: Any

        if code == "b":
            value = try_parse_bool(raw)
            if value is not None:
                cell_type = CellType.BOOL
            else:
                value = try_parse_number(raw)
                if value is not None:
                    cell_type = CellType.NUMBER
        elif code == "s":
            cell_type = CellType.STRING
            value = self.shared_strings.lookup(raw)
            if value is None:
                value = raw
        elif code == "str":
            cell_type = CellType.FORMULA
            value = raw
        elif code == "inlineStr":
            cell_type = CellType.STRING
            value = raw
        elif code in _UNTYPED and self.styles.is_date_style(token.style_index):
            value, cell_type = self._get_date_time_value(raw, CellType.DATE)
        elif code in _UNTYPED and self.styles.is_time_style(token.style_index):
            value, cell_type = self._get_date_time_value(raw, CellType.TIME)
        else:
            cell_type = CellType.NUMBER
            value = try_parse_number(raw)

        if value is None:
            if raw == "":
                cell_type = CellType.EMPTY
            else:
                cell_type = CellType.STRING
                value = raw

        options = self.options
        if options is not None and address.row >= options.enforcing_start_row:
            value = self._enforce_column_type(value, cell_type, address.column, options)
            value = self._enforce_global_type(value, options)
            value = self._enforce_flags(value, options)
            cell_type = CellType.FORMULA if cell_type == CellType.FORMULA else resolve_type(value)

        # serials below 1 land on 1899-12-31 before the day-zero fix
        if cell_type == CellType.DATE and isinstance(value, datetime) and value < FIRST_ALLOWED_DATE:
            value += timedelta(days=1)

        return Cell(value, cell_type, address, style=self.styles.get(token.style_index))

    def _get_date_time_value(self, raw: str, kind: CellType) -> tuple[Any, CellType]:
        serial = get_double_value(raw)
        if serial is None:
            return raw, CellType.STRING
        if kind == CellType.DATE:
            out_of_range = serial < MIN_SERIAL_DATE or serial > MAX_SERIAL_DATE
        else:
            out_of_range = serial < 0.0 or serial > MAX_SERIAL_DATE
        if out_of_range:
            return try_parse_number(raw), CellType.NUMBER
        if kind == CellType.TIME:
            return _time_of_serial(serial), CellType.TIME
        moment = from_serial(serial)
        if serial < 1.0:
            moment += timedelta(days=1)
        return moment, CellType.DATE

    # region overrides

    def _enforce_column_type(self, value: Any, cell_type: CellType, column: int, options: ImportOptions) -> Any:
        column_type = options.enforced_column_types.get(column)
        if column_type is None or cell_type == CellType.FORMULA:
            return value
        if column_type == ColumnType.NUMERIC:
            return self.get_numeric_value(value, resolve_type(value))
        if column_type == ColumnType.DECIMAL:
            return self.to_decimal(value)
        if column_type == ColumnType.DOUBLE:
            return self.to_double(value)
        if column_type == ColumnType.DATE:
            return self.to_date(value)
        if column_type == ColumnType.TIME:
            return self.to_time(value)
        if column_type == ColumnType.BOOL:
            return self.to_bool(value)
        return self.to_string(value)

    def _enforce_global_type(self, value: Any, options: ImportOptions) -> Any:
        target = options.global_enforcing_type
        if target == GlobalType.EVERYTHING_TO_STRING:
            return self.to_string(value)
        if target == GlobalType.ALL_NUMBERS_TO_DOUBLE:
            converted = self.to_double(value)
        elif target == GlobalType.ALL_NUMBERS_TO_DECIMAL:
            converted = self.to_decimal(value)
        elif target == GlobalType.ALL_NUMBERS_TO_INT:
            converted = self.to_int(value)
        else:
            return value
        return value if converted is None else converted

    def _enforce_flags(self, value: Any, options: ImportOptions) -> Any:
        if options.enforce_date_times_as_numbers:
            if isinstance(value, datetime):
                value = to_serial_datetime(value, skip_check=True)
            elif isinstance(value, timedelta):
                value = to_serial_time(value)
        if options.enforce_empty_values_as_string and value is None:
            return ""
        return value

    # endregion

    # region converters

    def _parse_date(self, text: str) -> datetime | None:
        value = try_parse_date(text)
        if value is None and self.options is not None and self.options.date_format:
            value = try_parse_date(text, self.options.date_format)
        return value

    def _parse_time(self, text: str) -> timedelta | None:
        value = try_parse_time(text)
        if value is None and self.options is not None and self.options.time_format:
            value = try_parse_time(text, self.options.time_format)
        return value

    def to_decimal(self, value: Any) -> Any:
        """Decimal if the value has a numeric reading"""
        if isinstance(value, float):
            return _float_to_decimal(value)
        if isinstance(value, bool):
            return Decimal(1) if value else Decimal(0)
        if isinstance(value, int):
            return Decimal(value) if -DECIMAL_MAX <= value <= DECIMAL_MAX else value
        if isinstance(value, datetime):
            return _float_to_decimal(to_serial_datetime(value, skip_check=True))
        if isinstance(value, timedelta):
            return _float_to_decimal(to_serial_time(value))
        if isinstance(value, str):
            if try_parse_number(value) is not None:
                try:
                    return Decimal(value.strip())
                except InvalidOperation:
                    pass
            moment = self._parse_date(value)
            if moment is not None:
                return _float_to_decimal(to_serial_datetime(moment))
            duration = self._parse_time(value)
            if duration is not None:
                return _float_to_decimal(to_serial_time(duration))
        return value

    def to_double(self, value: Any) -> Any:
        converted = self.to_decimal(value)
        if isinstance(converted, Decimal):
            return float(converted)
        return converted

    def to_int(self, value: Any) -> int | None:
        """None if the value has no 32-bit integer reading"""
        if isinstance(value, bool):
            return 1 if value else 0
        if isinstance(value, int):
            return value
        if isinstance(value, datetime):
            return round(to_serial_datetime(value, skip_check=True))
        if isinstance(value, timedelta):
            return round(to_serial_time(value))
        if isinstance(value, (float, Decimal)):
            if INT32_MIN < value < INT32_MAX:
                return round(value)
            return None
        if isinstance(value, str):
            return try_parse_int(value, 32)
        return None

    def to_bool(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if _is_number(value):
            if value == 0:
                return False
            if value == 1:
                return True
        elif isinstance(value, str):
            parsed = try_parse_bool(value)
            if parsed is not None:
                return parsed
        return value

    def _date_from_double(self, value: Any) -> Any:
        serial = self.to_double(value)
        if isinstance(serial, float) and MIN_SERIAL_DATE <= serial < MAX_SERIAL_DATE:
            moment = from_serial(serial)
            if FIRST_ALLOWED_DATE <= moment <= LAST_ALLOWED_DATE:
                return moment
        return value

    def _time_from_double(self, value: Any) -> Any:
        serial = self.to_double(value)
        if isinstance(serial, float) and MIN_SERIAL_DATE <= serial <= MAX_SERIAL_DATE:
            return _time_of_serial(serial)
        return value

    def to_date(self, value: Any) -> Any:
        if isinstance(value, datetime):
            return value
        if isinstance(value, timedelta):
            seconds = value.seconds
            return datetime(1899, 12, 31, seconds // 3600, seconds // 60 % 60, seconds % 60)
        if _is_number(value):
            return self._date_from_double(value)
        if isinstance(value, str):
            moment = self._parse_date(value)
            return moment if moment is not None else self._date_from_double(value)
        return value

    def to_time(self, value: Any) -> Any:
        if isinstance(value, timedelta):
            return value
        if isinstance(value, datetime) or _is_number(value):
            return self._time_from_double(value)
        if isinstance(value, str):
            duration = self._parse_time(value)
            return duration if duration is not None else self._time_from_double(value)
        return value

    def to_string(self, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.strftime(self.options.date_format if self.options is not None else "%Y-%m-%d %H:%M:%S")
        if isinstance(value, timedelta):
            return self._format_time(value)
        return str(value)

    def _format_time(self, value: timedelta) -> str:
        time_format = self.options.time_format if self.options is not None else "%H:%M:%S"
        text = (datetime.min + timedelta(seconds=value.seconds, microseconds=value.microseconds)).strftime(time_format)
        return f"{value.days}.{text}" if value.days else text

    def get_numeric_value(self, value: Any, cell_type: CellType) -> Any:
        """Numeric reading of a value of the given type; the value itself if there is none"""
        if value is None:
            return None
        if cell_type == CellType.STRING:
            text = str(value)
            number = try_parse_number(text)
            if number is not None:
                return number
            moment = self._parse_date(text)
            if moment is not None:
                return to_serial_datetime(moment)
            duration = self._parse_time(text)
            if duration is not None:
                return to_serial_time(duration)
            flag = self.to_bool(value)
            if isinstance(flag, bool):
                return 1 if flag else 0
            return value
        if cell_type == CellType.DATE:
            return to_serial_datetime(value, skip_check=True)
        if cell_type == CellType.TIME:
            return to_serial_time(value)
        if cell_type == CellType.BOOL:
            return 1 if value else 0
        return value

    # endregion
