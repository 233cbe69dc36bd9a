from __future__ import annotations

__all__ = ["Workbook", "WorkbookBuilder", "copy_worksheet_to"]

import logging
from typing import TYPE_CHECKING

from .errors import RangeError, WorksheetError
from .password import LegacyPassword, PasswordType
from .styles.repository import StyleRepository
from .worksheet import Worksheet, sanitize_worksheet_name

if TYPE_CHECKING:
    from typing import Iterator

    from typing_extensions import TypeAlias

    WorksheetRef: TypeAlias = "Worksheet | int | str"

logger = logging.getLogger(__name__)


def copy_worksheet_to(
    source: Worksheet, new_name: str, target: Workbook, sanitize: bool = True
) -> Worksheet:
    """Add a copy of `source` named `new_name` to `target`; the current worksheet of `target` is kept"""
    copy = source.copy()
    copy.set_sheet_name(new_name)
    current = target.current_worksheet
    target.add_worksheet(copy, sanitize=sanitize)
    if current is not None:
        target.set_current_worksheet(current)
    return copy


class Workbook:
    """
    Ordered collection of worksheets.

    `current_worksheet` is the one sequential edits go to, `selected_worksheet`
    is the index of the tab shown when the file is opened. The workbook owns the
    style repository shared by all of its worksheets.
    """

    __slots__ = (
        "worksheets",
        "_current",
        "_selected",
        "styles",
        "hidden",
        "use_workbook_protection",
        "lock_windows_if_protected",
        "lock_structure_if_protected",
        "workbook_protection_password",
        "_importing",
    )

    def __init__(self, sheet_name: str | None = None, sanitize: bool = False) -> None:
        self.worksheets: list[Worksheet] = []
        self._current: Worksheet | None = None
        self._selected = 0
        self.styles = StyleRepository()
        self.hidden = False
        self.use_workbook_protection = False
        self.lock_windows_if_protected = False
        self.lock_structure_if_protected = False
        self.workbook_protection_password = LegacyPassword(PasswordType.WORKBOOK_PROTECTION)
        self._importing = False
        if sheet_name is not None:
            self.add_worksheet(sheet_name, sanitize=sanitize)

    @property
    def current_worksheet(self) -> Worksheet | None:
        return self._current

    @property
    def selected_worksheet(self) -> int:
        return self._selected

    def _next_id(self) -> int:
        return max((ws.sheet_id for ws in self.worksheets), default=0) + 1

    def _exists(self, name: str) -> bool:
        return any(ws.sheet_name == name for ws in self.worksheets)

    def _index_of(self, ref: WorksheetRef) -> int:
        if isinstance(ref, Worksheet):
            for i, ws in enumerate(self.worksheets):
                if ws is ref:
                    return i
            raise WorksheetError("The passed worksheet object is not in the worksheet collection")
        if isinstance(ref, str):
            for i, ws in enumerate(self.worksheets):
                if ws.sheet_name == ref:
                    return i
            raise WorksheetError(f"No worksheet with the name '{ref}' was found in this workbook")
        if ref < 0 or ref >= len(self.worksheets):
            raise RangeError(f"The worksheet index {ref} is out of range")
        return ref

    def add_worksheet(self, worksheet: Worksheet | str, sanitize: bool = False) -> Worksheet:
        """Append a worksheet (or a new one with the given name) and make it the current one"""
        if isinstance(worksheet, str):
            name = sanitize_worksheet_name(worksheet, self) if sanitize else worksheet
            if self._exists(name):
                raise WorksheetError(f"The worksheet with the name '{name}' already exists")
            ws = Worksheet(name, self._next_id(), self)
        else:
            ws = worksheet
            if sanitize:
                ws.set_sheet_name(sanitize_worksheet_name(ws.sheet_name, self))
            else:
                if not ws.sheet_name:
                    raise WorksheetError("The name of the passed worksheet is empty")
                if self._exists(ws.sheet_name):
                    raise WorksheetError(f"The worksheet with the name '{ws.sheet_name}' already exists")
            ws.sheet_id = self._next_id()
            ws.workbook = self
        self.worksheets.append(ws)
        self._current = ws
        logger.debug("added worksheet '%s' (id %d)", ws.sheet_name, ws.sheet_id)
        return ws

    def remove_worksheet(self, ref: int | str) -> None:
        if isinstance(ref, int) and (ref < 0 or ref >= len(self.worksheets)):
            raise WorksheetError(f"The worksheet index {ref} is out of range")
        index = self._index_of(ref)
        removed = self.worksheets.pop(index)
        reset_current = removed is self._current
        removed.workbook = None
        if self.worksheets:
            for i, ws in enumerate(self.worksheets):
                ws.sheet_id = i + 1
            if reset_current:
                self._current = self.worksheets[-1]
            if self._selected == index or self._selected > len(self.worksheets) - 1:
                self._selected = len(self.worksheets) - 1
        else:
            self._current = None
            self._selected = 0
        self.validate_worksheets()

    def get_worksheet(self, ref: int | str) -> Worksheet:
        return self.worksheets[self._index_of(ref)]

    def set_current_worksheet(self, ref: WorksheetRef) -> Worksheet:
        self._current = self.worksheets[self._index_of(ref)]
        return self._current

    def set_selected_worksheet(self, ref: WorksheetRef) -> None:
        self._selected = self._index_of(ref)
        self.validate_worksheets()

    def validate_worksheets(self) -> None:
        """At least one worksheet, and the selected one is not hidden. Deferred while a builder assembles the workbook"""
        if self._importing:
            return
        if not self.worksheets:
            raise WorksheetError("The workbook must contain at least one worksheet")
        if self._selected < len(self.worksheets) and self.worksheets[self._selected].hidden:
            raise WorksheetError(
                f"The worksheet with the index {self._selected} cannot be set as selected, since it is set hidden"
            )

    def copy_worksheet_into_this(self, source: WorksheetRef, new_name: str, sanitize: bool = True) -> Worksheet:
        return copy_worksheet_to(self._resolve_source(source), new_name, self, sanitize)

    def copy_worksheet_to(self, source: WorksheetRef, new_name: str, target: Workbook, sanitize: bool = True) -> Worksheet:
        return copy_worksheet_to(self._resolve_source(source), new_name, target, sanitize)

    def _resolve_source(self, source: WorksheetRef) -> Worksheet:
        return source if isinstance(source, Worksheet) else self.get_worksheet(source)

    def set_workbook_protection(
        self, state: bool, protect_windows: bool, protect_structure: bool, password: str | None = None
    ) -> None:
        self.lock_windows_if_protected = protect_windows
        self.lock_structure_if_protected = protect_structure
        self.workbook_protection_password.set_password(password)
        self.use_workbook_protection = state if protect_windows or protect_structure else False

    def resolve_merged_cells(self) -> None:
        for ws in self.worksheets:
            ws.resolve_merged_cells()

    def __iter__(self) -> Iterator[Worksheet]:
        return iter(self.worksheets)

    def __len__(self) -> int:
        return len(self.worksheets)

    def __repr__(self) -> str:
        return f"Workbook({[ws.sheet_name for ws in self.worksheets]!r}, selected={self._selected})"


class WorkbookBuilder:
    """
    Assembles a workbook whose consistency checks can only pass once it is complete
    (worksheets added in any order, selection set before or after hiding).
    `build` validates once and hands the workbook out.
    """

    __slots__ = ("_workbook",)

    def __init__(self) -> None:
        self._workbook: Workbook | None = Workbook()
        self._workbook._importing = True

    @property
    def workbook(self) -> Workbook:
        if self._workbook is None:
            raise WorksheetError("The workbook was already built")
        return self._workbook

    def add_worksheet(self, worksheet: Worksheet | str, sanitize: bool = False) -> Worksheet:
        return self.workbook.add_worksheet(worksheet, sanitize=sanitize)

    def select(self, index: int) -> None:
        wb = self.workbook
        wb._selected = wb._index_of(index)

    def set_workbook_protection(
        self, state: bool, protect_windows: bool, protect_structure: bool, password_hash: str | None = None
    ) -> None:
        wb = self.workbook
        wb.set_workbook_protection(state, protect_windows, protect_structure)
        wb.workbook_protection_password.set_password_hash(password_hash)

    def build(self) -> Workbook:
        wb = self.workbook
        wb._importing = False
        self._workbook = None
        wb.validate_worksheets()
        if wb.worksheets:
            wb._current = wb.worksheets[wb._selected]
        logger.debug("built workbook with %d worksheets", len(wb.worksheets))
        return wb
