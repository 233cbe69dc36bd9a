from .coercion import ValueCoercion
from .loader import WorkbookLoader, WorksheetLoader, load_workbook, load_worksheet
from .options import ColumnType, GlobalType, ImportOptions
from .parsing import SharedStringTable
from .style_table import StyleTable
from .tokens import ColumnFormat, RawCell, RowFormat, SheetViewData, WorkbookData, WorksheetData

__all__ = [
    "ColumnFormat",
    "ColumnType",
    "GlobalType",
    "ImportOptions",
    "RawCell",
    "RowFormat",
    "SharedStringTable",
    "SheetViewData",
    "StyleTable",
    "ValueCoercion",
    "WorkbookData",
    "WorkbookLoader",
    "WorksheetData",
    "WorksheetLoader",
    "load_workbook",
    "load_worksheet",
]
