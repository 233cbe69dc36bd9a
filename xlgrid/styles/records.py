from __future__ import annotations

__all__ = [
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
    "TextBreak",
    "UnderlineValue",
    "VAlign",
    "VerticalTextAlign",
]

from enum import IntEnum
from typing import TYPE_CHECKING, Union

from ..core import as_dataclass, record_fields, replace
from ..errors import StyleError

if TYPE_CHECKING:
    from typing_extensions import TypeAlias


class UnderlineValue(IntEnum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2
    SINGLE_ACCOUNTING = 3
    DOUBLE_ACCOUNTING = 4


class VerticalTextAlign(IntEnum):
    NONE = 0
    SUBSCRIPT = 1
    SUPERSCRIPT = 2


class BorderStyle(IntEnum):
    NONE = 0
    HAIR = 1
    DOTTED = 2
    DASH_DOT_DOT = 3
    DASH_DOT = 4
    DASHED = 5
    THIN = 6
    MEDIUM_DASH_DOT_DOT = 7
    SLANT_DASH_DOT = 8
    MEDIUM_DASH_DOT = 9
    MEDIUM_DASHED = 10
    MEDIUM = 11
    THICK = 12
    DOUBLE = 13


class PatternValue(IntEnum):
    NONE = 0
    SOLID = 1
    DARK_GRAY = 2
    MEDIUM_GRAY = 3
    LIGHT_GRAY = 4
    GRAY_0625 = 5
    GRAY_125 = 6


class HAlign(IntEnum):
    GENERAL = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3
    FILL = 4
    JUSTIFY = 5
    CENTER_ACROSS_SELECTION = 6
    DISTRIBUTED = 7


class VAlign(IntEnum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2
    JUSTIFY = 3
    DISTRIBUTED = 4


class ReadingOrder(IntEnum):
    CONTEXT_DEPENDENT = 0
    LEFT_TO_RIGHT = 1
    RIGHT_TO_LEFT = 2


class TextBreak(IntEnum):
    NONE = 0
    WRAP_TEXT = 1
    SHRINK_TO_FIT = 2


@as_dataclass(readonly=True, hashable=True)
class Font:
    bold: bool = False
    italic: bool = False
    underline: UnderlineValue = UnderlineValue.NONE
    strike: bool = False
    size: float = 11.0
    name: str = "Calibri"
    color: str = ""
    "ARGB hex value, empty for automatic"
    vertical_align: VerticalTextAlign = VerticalTextAlign.NONE


@as_dataclass(readonly=True, hashable=True)
class Border:
    left_style: BorderStyle = BorderStyle.NONE
    right_style: BorderStyle = BorderStyle.NONE
    top_style: BorderStyle = BorderStyle.NONE
    bottom_style: BorderStyle = BorderStyle.NONE
    diagonal_style: BorderStyle = BorderStyle.NONE
    left_color: str = ""
    right_color: str = ""
    top_color: str = ""
    bottom_color: str = ""
    diagonal_color: str = ""
    diagonal_up: bool = False
    diagonal_down: bool = False


@as_dataclass(readonly=True, hashable=True)
class Fill:
    pattern: PatternValue = PatternValue.NONE
    foreground_color: str = ""
    background_color: str = ""


@as_dataclass(readonly=True, hashable=True)
class NumberFormat:
    number: int = 0
    "Built-in format id (0 is `General`)"
    custom_format_code: str = ""
    "Overrides `number` when not empty"

    @property
    def is_custom(self) -> bool:
        return bool(self.custom_format_code)


@as_dataclass(readonly=True, hashable=True)
class CellXf:
    horizontal_align: HAlign = HAlign.GENERAL
    vertical_align: VAlign = VAlign.BOTTOM
    text_break: TextBreak = TextBreak.NONE
    text_direction: ReadingOrder = ReadingOrder.CONTEXT_DEPENDENT
    text_rotation: int = 0
    "-90..90 degrees"
    indent: int = 0
    locked: bool = False
    hidden: bool = False
    force_apply_alignment: bool = False

    def check(self) -> CellXf:
        if not -90 <= self.text_rotation <= 90:
            raise StyleError(f"The rotation value ({self.text_rotation}°) is out of range. Range is from -90 to +90°")
        if self.indent < 0:
            raise StyleError(f"The indentation value '{self.indent}' is not valid. It must be >= 0")
        return self


StyleComponent: TypeAlias = Union[Font, Border, Fill, NumberFormat, CellXf]

COMPONENTS = {
    Font: "font",
    Border: "border",
    Fill: "fill",
    NumberFormat: "number_format",
    CellXf: "cell_xf",
}


def _merge_component(base: StyleComponent, top: StyleComponent) -> StyleComponent:
    """Overwrite the fields of `base` that `top` sets to a non-default value"""
    cls = type(top)
    default = cls()
    changes = {name: getattr(top, name) for name in record_fields(cls) if getattr(top, name) != getattr(default, name)}
    if not changes:
        return base
    return replace(base, **changes)


@as_dataclass(readonly=True, hashable=True)
class Style:
    """
    Immutable composite style of a cell or column.

    Equal styles are interchangeable, `StyleRepository` keeps a single canonical instance of each.
    """

    font: Font = Font()
    border: Border = Border()
    fill: Fill = Fill()
    number_format: NumberFormat = NumberFormat()
    cell_xf: CellXf = CellXf()
    name: str = ""

    def append(self, other: Style | StyleComponent) -> Style:
        """
        Combine two styles. Every field of `other` that differs from its default
        overwrites the same field of this style; other fields are kept.
        """
        if isinstance(other, Style):
            parts = {attr: getattr(other, attr) for attr in COMPONENTS.values()}
        else:
            try:
                parts = {COMPONENTS[type(other)]: other}
            except KeyError:
                raise StyleError(f"Cannot append {type(other).__name__} to a style") from None

        changes = {}
        for attr, part in parts.items():
            base = getattr(self, attr)
            merged = _merge_component(base, part)
            if merged is not base:
                changes[attr] = merged

        return replace(self, **changes) if changes else self

    def with_component(self, component: StyleComponent) -> Style:
        """Replace one sub-record as a whole"""
        return replace(self, **{COMPONENTS[type(component)]: component})
