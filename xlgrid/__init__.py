from .address import Address, AddressScope, AddressType, Range, parse_address, resolve_address, resolve_range
from .arrow import worksheet_to_arrow
from .cell import Cell, CellType
from .column import Column
from .errors import FormatError, RangeError, StyleError, WorksheetError, XlGridError
from .formulas import BasicFormulas
from .password import LegacyPassword, PasswordType, generate_legacy_password_hash
from .reader import ImportOptions, load_workbook, load_worksheet
from .styles import BasicStyles, Style, StyleRepository
from .workbook import Workbook, WorkbookBuilder
from .worksheet import CellDirection, SheetProtectionValue, SheetViewType, Worksheet, WorksheetPane

__all__ = [
    "Address",
    "AddressScope",
    "AddressType",
    "BasicFormulas",
    "BasicStyles",
    "Cell",
    "CellDirection",
    "CellType",
    "Column",
    "FormatError",
    "ImportOptions",
    "LegacyPassword",
    "PasswordType",
    "Range",
    "RangeError",
    "SheetProtectionValue",
    "SheetViewType",
    "Style",
    "StyleError",
    "StyleRepository",
    "Workbook",
    "WorkbookBuilder",
    "Worksheet",
    "WorksheetError",
    "WorksheetPane",
    "XlGridError",
    "generate_legacy_password_hash",
    "load_workbook",
    "load_worksheet",
    "parse_address",
    "resolve_address",
    "resolve_range",
    "worksheet_to_arrow",
]
