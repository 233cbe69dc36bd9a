from __future__ import annotations

__all__ = ["StyleRepository"]

import logging
from typing import TYPE_CHECKING

from ..errors import StyleError

if TYPE_CHECKING:
    from typing import Iterator

    from .records import Style

logger = logging.getLogger(__name__)


class StyleRepository:
    """
    Content-addressed store of styles.

    `add_style` returns the canonical instance for any structurally equal style.
    Entries are never evicted; indices follow insertion order and are stable
    until `flush`. One repository belongs to one workbook.
    """

    __slots__ = ("_styles",)

    def __init__(self) -> None:
        self._styles: dict[Style, tuple[int, Style]] = {}

    def add_style(self, style: Style | None) -> Style:
        if style is None:
            raise StyleError("No style was defined")
        try:
            return self._styles[style][1]
        except KeyError:
            pass
        style.cell_xf.check()
        index = len(self._styles)
        self._styles[style] = (index, style)
        logger.debug("registered style #%d", index)
        return style

    def index_of(self, style: Style) -> int:
        try:
            return self._styles[style][0]
        except KeyError:
            raise StyleError("The style is not registered in this repository") from None

    def get(self, style: Style) -> Style | None:
        entry = self._styles.get(style)
        return entry[1] if entry is not None else None

    @property
    def count(self) -> int:
        return len(self._styles)

    def flush(self) -> None:
        self._styles.clear()

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, style: object) -> bool:
        return style in self._styles

    def __iter__(self) -> Iterator[Style]:
        for _, style in self._styles.values():
            yield style
