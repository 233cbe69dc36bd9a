"""
Fixed bounds of the worksheet grid and default dimensions.

Columns are 0-based (0 -> `A`, 16383 -> `XFD`), rows are 0-based (0 -> `1`, 1048575 -> `1048576`).
Widths are given in characters, heights in points.
"""

__all__ = [
    "AUTO_ZOOM_FACTOR",
    "DEFAULT_COLUMN_WIDTH",
    "DEFAULT_ROW_HEIGHT",
    "FORBIDDEN_SHEET_NAME_CHARS",
    "MAX_COLUMN_NUMBER",
    "MAX_COLUMN_WIDTH",
    "MAX_ROW_HEIGHT",
    "MAX_ROW_NUMBER",
    "MAX_WORKSHEET_NAME_LENGTH",
    "MAX_ZOOM_FACTOR",
    "MIN_COLUMN_NUMBER",
    "MIN_COLUMN_WIDTH",
    "MIN_ROW_HEIGHT",
    "MIN_ROW_NUMBER",
    "MIN_ZOOM_FACTOR",
]

MIN_COLUMN_NUMBER = 0
MAX_COLUMN_NUMBER = 16383
MIN_ROW_NUMBER = 0
MAX_ROW_NUMBER = 1048575

DEFAULT_COLUMN_WIDTH = 10.0
DEFAULT_ROW_HEIGHT = 15.0
MIN_COLUMN_WIDTH = 0.0
MAX_COLUMN_WIDTH = 255.0
MIN_ROW_HEIGHT = 0.0
MAX_ROW_HEIGHT = 409.5

AUTO_ZOOM_FACTOR = 0
MIN_ZOOM_FACTOR = 10
MAX_ZOOM_FACTOR = 400

MAX_WORKSHEET_NAME_LENGTH = 31
FORBIDDEN_SHEET_NAME_CHARS = frozenset("[]*?/\\")
