from .basic import BasicStyles
from .formats import BUILTIN_FORMATS, classify_format_code, is_date_format, is_time_format, temporal_kind
from .records import (
    Border,
    BorderStyle,
    CellXf,
    Fill,
    Font,
    HAlign,
    NumberFormat,
    PatternValue,
    ReadingOrder,
    Style,
    StyleComponent,
    TextBreak,
    UnderlineValue,
    VAlign,
    VerticalTextAlign,
)
from .repository import StyleRepository

__all__ = [
    "BUILTIN_FORMATS",
    "BasicStyles",
    "Border",
    "BorderStyle",
    "CellXf",
    "Fill",
    "Font",
    "HAlign",
    "NumberFormat",
    "PatternValue",
    "ReadingOrder",
    "Style",
    "StyleComponent",
    "StyleRepository",
    "TextBreak",
    "UnderlineValue",
    "VAlign",
    "VerticalTextAlign",
    "classify_format_code",
    "is_date_format",
    "is_time_format",
    "temporal_kind",
]
