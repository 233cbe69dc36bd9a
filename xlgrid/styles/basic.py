from __future__ import annotations

__all__ = ["BasicStyles"]

from ..core import cached
from .records import Border, BorderStyle, CellXf, Fill, Font, NumberFormat, PatternValue, Style, UnderlineValue


class BasicStyles:
    """Frequently used predefined styles"""

    @staticmethod
    @cached
    def bold() -> Style:
        return Style(font=Font(bold=True))

    @staticmethod
    @cached
    def italic() -> Style:
        return Style(font=Font(italic=True))

    @staticmethod
    @cached
    def bold_italic() -> Style:
        return Style(font=Font(bold=True, italic=True))

    @staticmethod
    @cached
    def underline() -> Style:
        return Style(font=Font(underline=UnderlineValue.SINGLE))

    @staticmethod
    @cached
    def double_underline() -> Style:
        return Style(font=Font(underline=UnderlineValue.DOUBLE))

    @staticmethod
    @cached
    def strike() -> Style:
        return Style(font=Font(strike=True))

    @staticmethod
    @cached
    def date_format() -> Style:
        """Built-in format 14 (`mm-dd-yy`)"""
        return Style(number_format=NumberFormat(number=14))

    @staticmethod
    @cached
    def time_format() -> Style:
        """Built-in format 21 (`h:mm:ss`)"""
        return Style(number_format=NumberFormat(number=21))

    @staticmethod
    @cached
    def round_format() -> Style:
        """Built-in format 1 (`0`)"""
        return Style(number_format=NumberFormat(number=1))

    @staticmethod
    @cached
    def border_frame() -> Style:
        return Style(
            border=Border(
                left_style=BorderStyle.THIN,
                right_style=BorderStyle.THIN,
                top_style=BorderStyle.THIN,
                bottom_style=BorderStyle.THIN,
            )
        )

    @staticmethod
    @cached
    def border_frame_header() -> Style:
        return Style(
            font=Font(bold=True),
            border=Border(
                left_style=BorderStyle.THIN,
                right_style=BorderStyle.THIN,
                top_style=BorderStyle.THIN,
                bottom_style=BorderStyle.MEDIUM,
            ),
        )

    @staticmethod
    @cached
    def dotted_fill() -> Style:
        """12.5% gray pattern"""
        return Style(fill=Fill(pattern=PatternValue.GRAY_125))

    @staticmethod
    @cached
    def merge_cell_style() -> Style:
        return Style(cell_xf=CellXf(force_apply_alignment=True))

    @staticmethod
    def color_fill(rgb: str) -> Style:
        return Style(fill=Fill(pattern=PatternValue.SOLID, foreground_color=rgb.upper()))

    @staticmethod
    def font(name: str, size: float = 11.0, bold: bool = False) -> Style:
        return Style(font=Font(name=name, size=size, bold=bold))
