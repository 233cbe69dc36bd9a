from __future__ import annotations

__all__ = ["StyleTable"]

import logging
from typing import TYPE_CHECKING

from ..styles.formats import temporal_kind

if TYPE_CHECKING:
    from typing import Iterable

    from ..styles.records import Style

logger = logging.getLogger(__name__)


class StyleTable:
    """
    Resolved `cellXfs` of a workbook: style index -> `Style`.

    Indices whose number format renders a date or a time of day are collected
    up front, numbers stored in such cells are serials.
    """

    __slots__ = ("_styles", "date_indices", "time_indices")

    def __init__(self, styles: Iterable[Style] = ()) -> None:
        self._styles: list[Style] = list(styles)
        date_indices: set[int] = set()
        time_indices: set[int] = set()
        for i, style in enumerate(self._styles):
            kind = temporal_kind(style.number_format)
            if kind == "date":
                date_indices.add(i)
            elif kind == "time":
                time_indices.add(i)
        self.date_indices = frozenset(date_indices)
        self.time_indices = frozenset(time_indices)
        logger.debug(
            "style table: %d styles, %d date styles, %d time styles",
            len(self._styles),
            len(self.date_indices),
            len(self.time_indices),
        )

    def get(self, index: int | None) -> Style | None:
        if index is None or index < 0 or index >= len(self._styles):
            return None
        return self._styles[index]

    def is_date_style(self, index: int | None) -> bool:
        return index in self.date_indices

    def is_time_style(self, index: int | None) -> bool:
        return index in self.time_indices

    def __len__(self) -> int:
        return len(self._styles)
