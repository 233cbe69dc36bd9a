from __future__ import annotations

__all__ = ["FormatError", "RangeError", "StyleError", "WorksheetError", "XlGridError"]


class XlGridError(Exception):
    """Base class of every error raised by the document model"""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class FormatError(XlGridError, ValueError):
    """Malformed address, range, worksheet name or value"""


class RangeError(XlGridError, IndexError):
    """Coordinate, dimension or index out of the allowed bounds, or overlapping merged ranges"""


class WorksheetError(XlGridError):
    """Invalid worksheet name, reference or view/selection state"""


class StyleError(XlGridError):
    """Missing or invalid style"""
