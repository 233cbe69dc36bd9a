"""
Worksheet: sparse cell grid with a write cursor, merged ranges, column and row
overrides, selection, protection and view state.

Cells are stored in insertion order under their plain address (`"B3"`), whatever
referencing markers the cell address carries.
"""

from __future__ import annotations

__all__ = [
    "CellDirection",
    "SheetProtectionValue",
    "SheetViewType",
    "Worksheet",
    "WorksheetPane",
    "sanitize_worksheet_name",
]

import logging
import re
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from .address import (
    Address,
    AddressScope,
    Range,
    get_address_scope,
    parse_address,
    resolve_address,
    resolve_column,
    resolve_range,
    validate_column_number,
    validate_row_number,
)
from .cell import Cell, CellType
from .column import Column
from .constants import (
    AUTO_ZOOM_FACTOR,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_ROW_HEIGHT,
    FORBIDDEN_SHEET_NAME_CHARS,
    MAX_COLUMN_WIDTH,
    MAX_ROW_HEIGHT,
    MAX_WORKSHEET_NAME_LENGTH,
    MAX_ZOOM_FACTOR,
    MIN_COLUMN_WIDTH,
    MIN_ROW_HEIGHT,
    MIN_ZOOM_FACTOR,
)
from .core import replace
from .errors import FormatError, RangeError, WorksheetError
from .password import LegacyPassword, PasswordType
from .ranges import merge_range, subtract_range
from .styles.basic import BasicStyles
from .styles.repository import StyleRepository

if TYPE_CHECKING:
    from typing import Callable, Iterable

    from typing_extensions import TypeAlias

    from .styles.records import Style
    from .workbook import Workbook

    CellRef: TypeAlias = "Address | str | int"
    RangeRef: TypeAlias = "Range | Address | str"

logger = logging.getLogger(__name__)

re_numbered_name = re.compile(r"^(.*?)(\d{1,31})$")


class CellDirection(IntEnum):
    COLUMN_TO_COLUMN = 0
    "Next cell is in the next column (same row)"
    ROW_TO_ROW = 1
    "Next cell is in the next row (same column)"
    DISABLED = 2
    "The cursor does not move"


class SheetProtectionValue(IntEnum):
    """Actions allowed on a protected worksheet"""

    OBJECTS = 0
    SCENARIOS = 1
    FORMAT_CELLS = 2
    FORMAT_COLUMNS = 3
    FORMAT_ROWS = 4
    INSERT_COLUMNS = 5
    INSERT_ROWS = 6
    INSERT_HYPERLINKS = 7
    DELETE_COLUMNS = 8
    DELETE_ROWS = 9
    SELECT_LOCKED_CELLS = 10
    SORT = 11
    AUTO_FILTER = 12
    PIVOT_TABLES = 13
    SELECT_UNLOCKED_CELLS = 14


class WorksheetPane(IntEnum):
    BOTTOM_RIGHT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    TOP_LEFT = 3


class SheetViewType(IntEnum):
    NORMAL = 0
    PAGE_BREAK_PREVIEW = 1
    PAGE_LAYOUT = 2


def _has_data(cell: Cell) -> bool:
    return cell.value is not None and str(cell.value) != ""


def _same_value(a: Any, b: Any) -> bool:
    # True == 1 must not match
    return isinstance(a, bool) == isinstance(b, bool) and bool(a == b)


def _to_address(ref: CellRef, row: int | None = None) -> Address:
    if isinstance(ref, Address):
        return ref
    if isinstance(ref, str):
        return parse_address(ref)
    if row is None:
        raise WorksheetError("A row number is required together with a column number")
    return Address(ref, row)


def _to_key(ref: CellRef, row: int | None = None) -> str:
    address = _to_address(ref, row)
    return resolve_address(address.column, address.row)


def _plain_range(rng: Range) -> Range:
    return Range.from_coordinates(rng.min_column, rng.min_row, rng.max_column, rng.max_row)


def _to_range(ref: RangeRef, end: Address | str | None = None) -> Range:
    if end is not None:
        return Range(ref, end)  # type: ignore[arg-type]
    if isinstance(ref, Range):
        return ref
    if isinstance(ref, Address):
        return Range(ref, ref)
    return resolve_range(ref)


def _to_column_number(column: int | str) -> int:
    return resolve_column(column) if isinstance(column, str) else validate_column_number(column)


def _validate_sheet_name(name: str) -> None:
    if not name:
        raise FormatError("The sheet name must be between 1 and 31 characters")
    if len(name) > MAX_WORKSHEET_NAME_LENGTH:
        raise FormatError(f"The sheet name must be between 1 and 31 characters, '{name}' has {len(name)}")
    if FORBIDDEN_SHEET_NAME_CHARS.intersection(name):
        raise FormatError(f"The sheet name '{name}' must not contain the characters [ ] * ? / \\")


def sanitize_worksheet_name(name: str | None, workbook: Workbook | None = None) -> str:
    """
    Make `name` a valid worksheet name that is not used in `workbook` yet.

    Forbidden characters become `_`, the name is cut to 31 characters, and a
    numeric suffix is added (or incremented) only if the name is already taken.
    """
    if not name:
        name = "Sheet1"
    name = "".join("_" if ch in FORBIDDEN_SHEET_NAME_CHARS else ch for ch in name[:MAX_WORKSHEET_NAME_LENGTH])
    return _get_unused_name(name, workbook)


def _get_unused_name(name: str, workbook: Workbook | None) -> str:
    if workbook is None:
        return name
    taken = {ws.sheet_name for ws in workbook.worksheets}
    if name not in taken:
        return name
    m = re_numbered_name.match(name)
    if m is None:
        prefix, number = name, 1
    else:
        prefix, number = m.group(1), int(m.group(2))
    while True:
        suffix = str(number)
        if len(prefix) + len(suffix) > MAX_WORKSHEET_NAME_LENGTH:
            prefix = prefix[: MAX_WORKSHEET_NAME_LENGTH - len(suffix)]
        candidate = prefix + suffix
        if candidate not in taken:
            return candidate
        number += 1


class Worksheet:
    __slots__ = (
        "_name",
        "sheet_id",
        "_workbook",
        "_styles",
        "cells",
        "columns",
        "row_heights",
        "hidden_rows",
        "merged_cells",
        "selected_cells",
        "auto_filter_range",
        "_current_column",
        "_current_row",
        "current_cell_direction",
        "_default_column_width",
        "_default_row_height",
        "active_style",
        "use_active_style",
        "_hidden",
        "use_sheet_protection",
        "sheet_protection_values",
        "sheet_protection_password",
        "pane_split_left_width",
        "pane_split_top_height",
        "freeze_split_panes",
        "pane_split_address",
        "pane_split_top_left_cell",
        "active_pane",
        "_view_type",
        "zoom_factors",
        "show_grid_lines",
        "show_row_column_headers",
        "show_ruler",
    )

    def __init__(self, name: str | None = None, sheet_id: int = 0, workbook: Workbook | None = None) -> None:
        self._name = ""
        self.sheet_id = sheet_id
        self._workbook = workbook
        self._styles = StyleRepository()

        self.cells: dict[str, Cell] = {}
        self.columns: dict[int, Column] = {}
        self.row_heights: dict[int, float] = {}
        self.hidden_rows: set[int] = set()
        self.merged_cells: dict[str, Range] = {}
        self.selected_cells: list[Range] = []
        self.auto_filter_range: Range | None = None

        self._current_column = 0
        self._current_row = 0
        self.current_cell_direction = CellDirection.COLUMN_TO_COLUMN
        self._default_column_width = DEFAULT_COLUMN_WIDTH
        self._default_row_height = DEFAULT_ROW_HEIGHT

        self.active_style: Style | None = None
        self.use_active_style = False
        self._hidden = False

        self.use_sheet_protection = False
        self.sheet_protection_values: list[SheetProtectionValue] = []
        self.sheet_protection_password = LegacyPassword(PasswordType.WORKSHEET_PROTECTION)

        self.pane_split_left_width: float | None = None
        self.pane_split_top_height: float | None = None
        self.freeze_split_panes: bool | None = None
        self.pane_split_address: Address | None = None
        self.pane_split_top_left_cell: Address | None = None
        self.active_pane: WorksheetPane | None = None

        self._view_type = SheetViewType.NORMAL
        self.zoom_factors: dict[SheetViewType, int] = {SheetViewType.NORMAL: 100}
        self.show_grid_lines = True
        self.show_row_column_headers = True
        self.show_ruler = True

        if name is not None:
            self.set_sheet_name(name)

    # region properties

    @property
    def sheet_name(self) -> str:
        return self._name

    @property
    def workbook(self) -> Workbook | None:
        return self._workbook

    @workbook.setter
    def workbook(self, workbook: Workbook | None) -> None:
        self._workbook = workbook
        self._adopt_styles(self.styles)

    @property
    def styles(self) -> StyleRepository:
        """Repository of the owning workbook, or a private one while detached"""
        return self._workbook.styles if self._workbook is not None else self._styles

    @property
    def hidden(self) -> bool:
        return self._hidden

    @hidden.setter
    def hidden(self, hidden: bool) -> None:
        self._hidden = hidden
        if self._workbook is not None:
            self._workbook.validate_worksheets()

    @property
    def current_column_number(self) -> int:
        return self._current_column

    @current_column_number.setter
    def current_column_number(self, column: int) -> None:
        self._current_column = validate_column_number(column)

    @property
    def current_row_number(self) -> int:
        return self._current_row

    @current_row_number.setter
    def current_row_number(self, row: int) -> None:
        self._current_row = validate_row_number(row)

    @property
    def default_column_width(self) -> float:
        return self._default_column_width

    @default_column_width.setter
    def default_column_width(self, width: float) -> None:
        if width < MIN_COLUMN_WIDTH or width > MAX_COLUMN_WIDTH:
            raise RangeError(f"The passed default column width is out of range ({MIN_COLUMN_WIDTH} to {MAX_COLUMN_WIDTH})")
        self._default_column_width = width

    @property
    def default_row_height(self) -> float:
        return self._default_row_height

    @default_row_height.setter
    def default_row_height(self, height: float) -> None:
        if height < MIN_ROW_HEIGHT or height > MAX_ROW_HEIGHT:
            raise RangeError(f"The passed default row height is out of range ({MIN_ROW_HEIGHT} to {MAX_ROW_HEIGHT})")
        self._default_row_height = height

    @property
    def view_type(self) -> SheetViewType:
        return self._view_type

    @view_type.setter
    def view_type(self, view_type: SheetViewType) -> None:
        self._view_type = SheetViewType(view_type)
        self.set_zoom_factor(view_type, 100)

    @property
    def zoom_factor(self) -> int:
        return self.zoom_factors[self._view_type]

    @zoom_factor.setter
    def zoom_factor(self, factor: int) -> None:
        self.set_zoom_factor(self._view_type, factor)

    # endregion

    # region styles

    def _register_style(self, style: Style) -> Style:
        return self.styles.add_style(style)

    def _adopt_styles(self, repository: StyleRepository) -> None:
        """Re-register every style of the worksheet in `repository`"""
        for cell in self.cells.values():
            if cell.cell_style is not None:
                cell.set_style(repository.add_style(cell.cell_style))
        for col in self.columns.values():
            if col.default_style is not None:
                col.default_style = repository.add_style(col.default_style)
        if self.active_style is not None:
            self.active_style = repository.add_style(self.active_style)

    def set_active_style(self, style: Style | None) -> None:
        """Style appended to every cell added from now on; None disables it"""
        self.use_active_style = style is not None
        self.active_style = self._register_style(style) if style is not None else None

    def clear_active_style(self) -> None:
        self.use_active_style = False
        self.active_style = None

    def set_style(self, target: RangeRef, style: Style | None) -> None:
        """Apply `style` to every cell of the target, creating missing cells. None removes styles"""
        if isinstance(target, str):
            scope = get_address_scope(target)
            if scope == AddressScope.SINGLE_ADDRESS:
                rng = _to_range(parse_address(target))
            elif scope == AddressScope.RANGE:
                rng = resolve_range(target)
            else:
                raise FormatError(f"The passed address or range '{target}' is not valid")
        else:
            rng = _to_range(target)

        registered = self._register_style(style) if style is not None else None
        for address in rng.addresses():
            cell = self.cells.get(address.get_address())
            if cell is not None:
                if registered is None:
                    cell.remove_style()
                else:
                    cell.set_style(registered)
            elif registered is not None:
                self.add_cell(None, address, style=registered)

    # endregion

    # region cell insertion

    def _cast_value(self, value: Any, column: int, row: int) -> Cell:
        if isinstance(value, Cell):
            value.address = Address(column, row, value.address_type)
            return value
        return Cell(value, CellType.DEFAULT, Address(column, row))

    def _add_next_cell(self, cell: Cell, incremental: bool, style: Style | None) -> None:
        merged = cell.cell_style
        if self.use_active_style and self.active_style is not None:
            merged = self.active_style if merged is None else merged.append(self.active_style)
        if style is not None:
            merged = style if merged is None else merged.append(style)
        if merged is not None:
            cell.set_style(self._register_style(merged))

        self.cells[cell.key] = cell

        if incremental:
            if self.current_cell_direction == CellDirection.COLUMN_TO_COLUMN:
                self._current_column += 1
            elif self.current_cell_direction == CellDirection.ROW_TO_ROW:
                self._current_row += 1
        elif self.current_cell_direction == CellDirection.COLUMN_TO_COLUMN:
            self._current_column = cell.column_number + 1
            self._current_row = cell.row_number
        elif self.current_cell_direction == CellDirection.ROW_TO_ROW:
            self._current_column = cell.column_number
            self._current_row = cell.row_number + 1

    def add_next_cell(self, value: Any, style: Style | None = None) -> None:
        """Add a value (or a prebuilt cell) at the cursor and advance the cursor"""
        self._add_next_cell(self._cast_value(value, self._current_column, self._current_row), True, style)

    def add_next_cell_formula(self, formula: str, style: Style | None = None) -> None:
        cell = Cell(formula, CellType.FORMULA, Address(self._current_column, self._current_row))
        self._add_next_cell(cell, True, style)

    def add_cell(self, value: Any, column: CellRef, row: int | None = None, style: Style | None = None) -> None:
        """
        Add a value at an explicit address: `add_cell(v, 2, 5)`, `add_cell(v, "C6")`
        or `add_cell(v, Address(2, 5))`. The cursor moves just past the new cell.
        """
        address = _to_address(column, row)
        self._add_next_cell(self._cast_value(value, address.column, address.row), False, style)

    def add_cell_formula(self, formula: str, column: CellRef, row: int | None = None, style: Style | None = None) -> None:
        address = _to_address(column, row)
        cell = Cell(formula, CellType.FORMULA, Address(address.column, address.row, address.type))
        self._add_next_cell(cell, False, style)

    def add_cell_range(self, values: Iterable[Any], target: RangeRef, end: Address | str | None = None, style: Style | None = None) -> None:
        """Fill a range column by column; the number of values must match the range size"""
        rng = _to_range(target, end)
        values = list(values)
        if len(values) != rng.size:
            raise RangeError(f"The number of passed values ({len(values)}) differs from the number of cells ({rng.size}) in {rng}")
        for value, address in zip(values, rng.addresses()):
            self._add_next_cell(self._cast_value(value, address.column, address.row), False, style)

    def remove_cell(self, column: CellRef, row: int | None = None) -> bool:
        return self.cells.pop(_to_key(column, row), None) is not None

    def has_cell(self, column: CellRef, row: int | None = None) -> bool:
        return _to_key(column, row) in self.cells

    def get_cell(self, column: CellRef, row: int | None = None) -> Cell:
        key = _to_key(column, row)
        try:
            return self.cells[key]
        except KeyError:
            raise WorksheetError(f"The cell with the address {key} does not exist in this worksheet") from None

    def sorted_cells(self) -> list[Cell]:
        return sorted(self.cells.values())

    def get_row(self, row: int) -> list[Cell]:
        return sorted((c for c in self.cells.values() if c.row_number == row), key=lambda c: c.column_number)

    def get_column(self, column: int | str) -> list[Cell]:
        number = _to_column_number(column)
        return sorted((c for c in self.cells.values() if c.column_number == number), key=lambda c: c.row_number)

    # endregion

    # region search

    def first_cell_by_value(self, value: Any) -> Cell | None:
        return next((c for c in self.cells.values() if _same_value(c.value, value)), None)

    def first_or_default_cell(self, predicate: Callable[[Cell], bool] | None = None) -> Cell | None:
        return next((c for c in self.cells.values() if predicate is None or predicate(c)), None)

    def cells_by_value(self, value: Any) -> list[Cell]:
        return [c for c in self.cells.values() if _same_value(c.value, value)]

    def replace_cell_value(self, old_value: Any, new_value: Any) -> int:
        """Replace every occurrence of `old_value`, return the number of changed cells"""
        count = 0
        for cell in self.cells.values():
            if _same_value(cell.value, old_value):
                cell.value = new_value
                count += 1
        return count

    # endregion

    # region cursor

    def set_current_cell_address(self, column: CellRef, row: int | None = None) -> None:
        address = _to_address(column, row)
        self._current_column = address.column
        self._current_row = address.row

    def go_to_next_column(self, number: int = 1, keep_row_position: bool = False) -> None:
        self._current_column = validate_column_number(self._current_column + number)
        if not keep_row_position:
            self._current_row = 0

    def go_to_next_row(self, number: int = 1, keep_column_position: bool = False) -> None:
        self._current_row = validate_row_number(self._current_row + number)
        if not keep_column_position:
            self._current_column = 0

    # endregion

    # region boundaries

    def _boundary(self, column: bool, first: bool, data_only: bool) -> int:
        if column:
            numbers = [c.column_number for c in self.cells.values() if not data_only or _has_data(c)]
            if not data_only:
                numbers.extend(self.columns)
        else:
            numbers = [c.row_number for c in self.cells.values() if not data_only or _has_data(c)]
            if not data_only:
                numbers.extend(self.row_heights)
                numbers.extend(self.hidden_rows)
        if not numbers:
            return -1
        return min(numbers) if first else max(numbers)

    def get_first_column_number(self) -> int:
        return self._boundary(column=True, first=True, data_only=False)

    def get_first_data_column_number(self) -> int:
        return self._boundary(column=True, first=True, data_only=True)

    def get_last_column_number(self) -> int:
        return self._boundary(column=True, first=False, data_only=False)

    def get_last_data_column_number(self) -> int:
        return self._boundary(column=True, first=False, data_only=True)

    def get_first_row_number(self) -> int:
        return self._boundary(column=False, first=True, data_only=False)

    def get_first_data_row_number(self) -> int:
        return self._boundary(column=False, first=True, data_only=True)

    def get_last_row_number(self) -> int:
        return self._boundary(column=False, first=False, data_only=False)

    def get_last_data_row_number(self) -> int:
        return self._boundary(column=False, first=False, data_only=True)

    def _corner(self, first: bool, data_only: bool) -> Address | None:
        column = self._boundary(column=True, first=first, data_only=data_only)
        row = self._boundary(column=False, first=first, data_only=data_only)
        if column < 0 or row < 0:
            return None
        return Address(column, row)

    def get_first_cell_address(self) -> Address | None:
        return self._corner(first=True, data_only=False)

    def get_first_data_cell_address(self) -> Address | None:
        return self._corner(first=True, data_only=True)

    def get_last_cell_address(self) -> Address | None:
        return self._corner(first=False, data_only=False)

    def get_last_data_cell_address(self) -> Address | None:
        return self._corner(first=False, data_only=True)

    # endregion

    # region merged cells

    def merge_cells(self, target: RangeRef, end: Address | str | None = None) -> str:
        """Register a merged range; it must not intersect any existing one"""
        rng = _plain_range(_to_range(target, end))
        for key, existing in self.merged_cells.items():
            if existing.overlaps(rng):
                raise RangeError(f"The passed range {rng} contains cells that are already in the merged range {key}")
        key = str(rng)
        self.merged_cells[key] = rng
        return key

    def remove_merged_cells(self, target: RangeRef) -> None:
        key = str(_plain_range(_to_range(target.upper() if isinstance(target, str) else target)))
        try:
            rng = self.merged_cells.pop(key)
        except KeyError:
            raise RangeError(f"The cell range {key} was not found in the list of merged cell ranges") from None
        merge_style = BasicStyles.merge_cell_style()
        for address in rng.addresses():
            cell = self.cells.get(address.get_address())
            if cell is None:
                continue
            if cell.cell_style == merge_style:
                cell.remove_style()
            cell.resolve_cell_type()

    def resolve_merged_cells(self) -> None:
        """Turn every cell of a merged range but the first into an EMPTY cell with the merge style"""
        merge_style = BasicStyles.merge_cell_style()
        force = merge_style.cell_xf.force_apply_alignment
        for rng in self.merged_cells.values():
            for pos, address in enumerate(rng.addresses()):
                key = address.get_address()
                cell = self.cells.get(key)
                if cell is None:
                    cell = Cell(None, CellType.EMPTY, address)
                    self.cells[key] = cell
                if pos == 0:
                    continue
                cell.data_type = CellType.EMPTY
                style = cell.cell_style
                if style is None:
                    cell.set_style(self._register_style(merge_style))
                else:
                    mixed = replace(style, cell_xf=replace(style.cell_xf, force_apply_alignment=force))
                    cell.set_style(self._register_style(mixed))
        logger.debug("resolved %d merged ranges in '%s'", len(self.merged_cells), self._name)

    # endregion

    # region auto filter and columns

    def set_auto_filter(self, start: int | str | Range, end: int | str | None = None) -> None:
        """`set_auto_filter(0, 2)`, `set_auto_filter("A", "C")` or `set_auto_filter("A1:C1")`"""
        if isinstance(start, Range) or (isinstance(start, str) and end is None):
            rng = _to_range(start)
            first, last = rng.min_column, rng.max_column
        else:
            if end is None:
                raise WorksheetError("The end column of the auto filter is missing")
            first, last = sorted((_to_column_number(start), _to_column_number(end)))
        self.auto_filter_range = Range.from_coordinates(first, 0, last, 0)
        self.recalculate_auto_filter()
        self.recalculate_columns()

    def remove_auto_filter(self) -> None:
        self.auto_filter_range = None
        for col in self.columns.values():
            col.has_auto_filter = False
        self.recalculate_columns()

    def recalculate_auto_filter(self) -> None:
        """Extend the filter down to the last occupied row of its columns"""
        if self.auto_filter_range is None:
            return
        start, end = self.auto_filter_range.min_column, self.auto_filter_range.max_column
        end_row = 0
        for cell in self.cells.values():
            if start <= cell.column_number <= end and cell.row_number > end_row:
                end_row = cell.row_number
        for number in range(start, end + 1):
            self._get_or_create_column(number).has_auto_filter = True
        self.auto_filter_range = Range.from_coordinates(start, 0, end, end_row)

    def recalculate_columns(self) -> None:
        """Drop column overrides that carry nothing"""
        for number in [n for n, col in self.columns.items() if col.is_default]:
            del self.columns[number]

    def _get_or_create_column(self, number: int) -> Column:
        col = self.columns.get(number)
        if col is None:
            col = self.columns[number] = Column(number)
        return col

    def set_column_width(self, column: int | str, width: float) -> None:
        number = _to_column_number(column)
        if width < MIN_COLUMN_WIDTH or width > MAX_COLUMN_WIDTH:
            raise RangeError(f"The column width ({width}) is out of range ({MIN_COLUMN_WIDTH} to {MAX_COLUMN_WIDTH})")
        self._get_or_create_column(number).width = width
        self.recalculate_columns()

    def _set_column_hidden_state(self, column: int | str, state: bool) -> None:
        number = _to_column_number(column)
        if state:
            self._get_or_create_column(number).hidden = True
        elif number in self.columns:
            self.columns[number].hidden = False
        self.recalculate_columns()

    def add_hidden_column(self, column: int | str) -> None:
        self._set_column_hidden_state(column, True)

    def remove_hidden_column(self, column: int | str) -> None:
        self._set_column_hidden_state(column, False)

    def set_column_default_style(self, column: int | str, style: Style | None) -> Style | None:
        number = _to_column_number(column)
        registered = self._register_style(style) if style is not None else None
        if registered is not None:
            self._get_or_create_column(number).default_style = registered
        elif number in self.columns:
            self.columns[number].default_style = None
        self.recalculate_columns()
        return registered

    def reset_column(self, column: int | str) -> None:
        """Remove a column override; columns of an auto filter are only unhidden and reset to the default width"""
        number = _to_column_number(column)
        col = self.columns.get(number)
        if col is None:
            return
        if col.has_auto_filter:
            col.hidden = False
            col.width = DEFAULT_COLUMN_WIDTH
        else:
            del self.columns[number]

    # endregion

    # region rows

    def set_row_height(self, row: int, height: float) -> None:
        validate_row_number(row)
        if height < MIN_ROW_HEIGHT or height > MAX_ROW_HEIGHT:
            raise RangeError(f"The row height ({height}) is out of range ({MIN_ROW_HEIGHT} to {MAX_ROW_HEIGHT})")
        self.row_heights[row] = height

    def remove_row_height(self, row: int) -> None:
        self.row_heights.pop(row, None)

    def add_hidden_row(self, row: int) -> None:
        self.hidden_rows.add(validate_row_number(row))

    def remove_hidden_row(self, row: int) -> None:
        self.hidden_rows.discard(row)

    # endregion

    # region insertion of rows and columns

    def _shift(self, moving: list[Cell], column_delta: int, row_delta: int) -> None:
        # every target address is validated before the grid changes
        shifted = []
        for cell in moving:
            new = cell.copy()
            new.address = Address(cell.column_number + column_delta, cell.row_number + row_delta, cell.address_type)
            shifted.append(new)
        for cell in moving:
            del self.cells[cell.key]
        for cell in shifted:
            self.cells[cell.key] = cell

    def insert_row(self, row: int, count: int) -> None:
        """
        Insert `count` rows below `row`. Cells further down move, the new rows get
        EMPTY cells styled like the cells of `row`. Formulas are not rewritten.
        """
        validate_row_number(row)
        created = [
            Cell(None, CellType.EMPTY, Address(cell.column_number, row + offset), style=cell.cell_style)
            for cell in self.get_row(row)
            for offset in range(1, count + 1)
        ]
        self._shift([c for c in self.cells.values() if c.row_number > row], 0, count)
        for new in created:
            self.cells[new.key] = new
        logger.debug("inserted %d rows after row %d in '%s'", count, row, self._name)

    def insert_column(self, column: int | str, count: int) -> None:
        """
        Insert `count` columns right of `column`. Cells further right move, the new
        columns get EMPTY cells styled like the cells of `column`. Formulas are not rewritten.
        """
        number = _to_column_number(column)
        created = [
            Cell(None, CellType.EMPTY, Address(number + offset, cell.row_number), style=cell.cell_style)
            for cell in self.get_column(number)
            for offset in range(1, count + 1)
        ]
        self._shift([c for c in self.cells.values() if c.column_number > number], count, 0)
        for new in created:
            self.cells[new.key] = new
        logger.debug("inserted %d columns after column %d in '%s'", count, number, self._name)

    # endregion

    # region selection

    def add_selected_cells(self, target: RangeRef, end: Address | str | None = None) -> None:
        self.selected_cells = merge_range(self.selected_cells, _to_range(target, end))

    def remove_selected_cells(self, target: RangeRef, end: Address | str | None = None) -> None:
        self.selected_cells = subtract_range(self.selected_cells, _to_range(target, end))

    def clear_selected_cells(self) -> None:
        self.selected_cells = []

    # endregion

    # region protection

    def add_allowed_action_on_sheet_protection(self, value: SheetProtectionValue) -> None:
        if value not in self.sheet_protection_values:
            self.sheet_protection_values.append(value)
        if (
            value == SheetProtectionValue.SELECT_LOCKED_CELLS
            and SheetProtectionValue.SELECT_UNLOCKED_CELLS not in self.sheet_protection_values
        ):
            self.sheet_protection_values.append(SheetProtectionValue.SELECT_UNLOCKED_CELLS)
        self.use_sheet_protection = True

    def remove_allowed_action_on_sheet_protection(self, value: SheetProtectionValue) -> None:
        if value in self.sheet_protection_values:
            self.sheet_protection_values.remove(value)

    def set_sheet_protection_password(self, password: str | None) -> None:
        self.sheet_protection_password.set_password(password)
        if password:
            self.use_sheet_protection = True

    # endregion

    # region name

    def set_sheet_name(self, name: str, sanitize: bool = False) -> None:
        if sanitize:
            self._name = ""
            self._name = sanitize_worksheet_name(name, self._workbook)
            return
        _validate_sheet_name(name)
        self._name = name

    # endregion

    # region view

    def set_split(
        self,
        columns_from_left: int | None,
        rows_from_top: int | None,
        freeze: bool,
        top_left_cell: Address | str,
        active_pane: WorksheetPane | None = None,
    ) -> None:
        """Split (or freeze) the view after a number of columns and/or rows"""
        top_left = _to_address(top_left_cell)
        if freeze:
            if columns_from_left is not None and top_left.column < columns_from_left:
                raise WorksheetError(
                    f"The column number {top_left.column} is not valid for a frozen, vertical split "
                    f"with the split pane column number {columns_from_left}"
                )
            if rows_from_top is not None and top_left.row < rows_from_top:
                raise WorksheetError(
                    f"The row number {top_left.row} is not valid for a frozen, horizontal split "
                    f"with the split pane row number {rows_from_top}"
                )
        self.pane_split_left_width = None
        self.pane_split_top_height = None
        self.freeze_split_panes = freeze
        self.pane_split_address = Address(columns_from_left or 0, rows_from_top or 0)
        self.pane_split_top_left_cell = top_left
        self.active_pane = active_pane

    def set_split_size(
        self,
        left_pane_width: float | None,
        top_pane_height: float | None,
        top_left_cell: Address | str,
        active_pane: WorksheetPane | None = None,
    ) -> None:
        """Split the view at a size given in characters (width) and points (height)"""
        self.pane_split_left_width = left_pane_width
        self.pane_split_top_height = top_pane_height
        self.freeze_split_panes = None
        self.pane_split_address = None
        self.pane_split_top_left_cell = _to_address(top_left_cell)
        self.active_pane = active_pane

    def set_horizontal_split(
        self, rows_from_top: int, freeze: bool, top_left_cell: Address | str, active_pane: WorksheetPane | None = None
    ) -> None:
        self.set_split(None, rows_from_top, freeze, top_left_cell, active_pane)

    def set_vertical_split(
        self, columns_from_left: int, freeze: bool, top_left_cell: Address | str, active_pane: WorksheetPane | None = None
    ) -> None:
        self.set_split(columns_from_left, None, freeze, top_left_cell, active_pane)

    def reset_split(self) -> None:
        self.pane_split_left_width = None
        self.pane_split_top_height = None
        self.freeze_split_panes = None
        self.pane_split_address = None
        self.pane_split_top_left_cell = None
        self.active_pane = None

    def set_zoom_factor(self, view_type: SheetViewType, factor: int) -> None:
        if factor != AUTO_ZOOM_FACTOR and not MIN_ZOOM_FACTOR <= factor <= MAX_ZOOM_FACTOR:
            raise WorksheetError(
                f"The zoom factor {factor} is not valid. Valid are values between "
                f"{MIN_ZOOM_FACTOR} and {MAX_ZOOM_FACTOR}, or {AUTO_ZOOM_FACTOR} (automatic)"
            )
        self.zoom_factors[SheetViewType(view_type)] = factor

    # endregion

    def copy(self) -> Worksheet:
        """Deep copy without id and workbook; styles are shared"""
        ws = Worksheet()
        ws._name = self._name
        for key, cell in self.cells.items():
            ws.cells[key] = cell.copy()
        ws.columns = {number: col.copy() for number, col in self.columns.items()}
        ws.row_heights = dict(self.row_heights)
        ws.hidden_rows = set(self.hidden_rows)
        ws.merged_cells = {key: rng.copy() for key, rng in self.merged_cells.items()}
        ws.selected_cells = [rng.copy() for rng in self.selected_cells]
        ws.auto_filter_range = self.auto_filter_range.copy() if self.auto_filter_range is not None else None

        ws._current_column = self._current_column
        ws._current_row = self._current_row
        ws.current_cell_direction = self.current_cell_direction
        ws._default_column_width = self._default_column_width
        ws._default_row_height = self._default_row_height
        ws.active_style = self.active_style
        ws.use_active_style = self.use_active_style
        ws._hidden = self._hidden

        ws.use_sheet_protection = self.use_sheet_protection
        ws.sheet_protection_values = list(self.sheet_protection_values)
        ws.sheet_protection_password.copy_from(self.sheet_protection_password)

        ws.pane_split_left_width = self.pane_split_left_width
        ws.pane_split_top_height = self.pane_split_top_height
        ws.freeze_split_panes = self.freeze_split_panes
        ws.pane_split_address = self.pane_split_address
        ws.pane_split_top_left_cell = self.pane_split_top_left_cell
        ws.active_pane = self.active_pane

        ws._view_type = self._view_type
        ws.zoom_factors = dict(self.zoom_factors)
        ws.show_grid_lines = self.show_grid_lines
        ws.show_row_column_headers = self.show_row_column_headers
        ws.show_ruler = self.show_ruler

        ws._adopt_styles(ws._styles)
        return ws

    def __repr__(self) -> str:
        return f"Worksheet({self._name!r}, id={self.sheet_id}, cells={len(self.cells)})"
