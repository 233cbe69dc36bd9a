"""
Algebra over sets of ranges, used to keep worksheet selections minimal.

Both operations slice the involved ranges into uniform rectangles along every
distinct boundary and then glue neighbours back together, so the result covers
exactly the same cells with as few ranges as possible.
"""

from __future__ import annotations

__all__ = ["RangeMergeStrategy", "merge_range", "subtract_range"]

from enum import IntEnum
from typing import TYPE_CHECKING

from .address import Range

if TYPE_CHECKING:
    from typing import Iterable


class RangeMergeStrategy(IntEnum):
    NO_MERGE = 0
    MERGE_COLUMNS = 1
    "Join vertically first (ranges spanning identical columns)"
    MERGE_ROWS = 2
    "Join horizontally first (ranges spanning identical rows)"


def merge_range(
    ranges: Iterable[Range],
    new_range: Range,
    strategy: RangeMergeStrategy = RangeMergeStrategy.MERGE_COLUMNS,
) -> list[Range]:
    result: list[Range] = []
    candidates = [new_range]
    for rng in ranges:
        if _is_merge_candidate(new_range, rng, strategy):
            candidates.append(rng)
        else:
            result.append(rng)
    sliced = _slice(candidates)
    if strategy == RangeMergeStrategy.NO_MERGE:
        return result + sliced
    first, second = _order(strategy)
    result.extend(_merge_adjacent(sliced, first))
    return _merge_adjacent(result, second)


def subtract_range(
    ranges: Iterable[Range],
    removed: Range,
    strategy: RangeMergeStrategy = RangeMergeStrategy.MERGE_COLUMNS,
) -> list[Range]:
    pieces: list[Range] = []
    for rng in ranges:
        if rng.overlaps(removed):
            pieces.extend(_subtract_rect(rng, removed))
        else:
            pieces.append(rng)
    sliced = _slice(pieces)
    if strategy == RangeMergeStrategy.NO_MERGE:
        return sliced
    first, second = _order(strategy)
    return _merge_adjacent(_merge_adjacent(sliced, first), second)


def _order(strategy: RangeMergeStrategy) -> tuple[RangeMergeStrategy, RangeMergeStrategy]:
    if strategy == RangeMergeStrategy.MERGE_COLUMNS:
        return RangeMergeStrategy.MERGE_COLUMNS, RangeMergeStrategy.MERGE_ROWS
    return RangeMergeStrategy.MERGE_ROWS, RangeMergeStrategy.MERGE_COLUMNS


def _is_merge_candidate(a: Range, b: Range, strategy: RangeMergeStrategy) -> bool:
    if a.overlaps(b):
        return True
    if strategy == RangeMergeStrategy.MERGE_COLUMNS:
        return (
            a.min_column == b.min_column
            and a.max_column == b.max_column
            and (a.max_row + 1 == b.min_row or b.max_row + 1 == a.min_row)
        )
    if strategy == RangeMergeStrategy.MERGE_ROWS:
        return (
            a.min_row == b.min_row
            and a.max_row == b.max_row
            and (a.max_column + 1 == b.min_column or b.max_column + 1 == a.min_column)
        )
    return False


def _slice(ranges: list[Range]) -> list[Range]:
    """Cut the ranges along every distinct boundary, keep the pieces covered by any of them"""
    cols: set[int] = set()
    rows: set[int] = set()
    for rng in ranges:
        cols.update((rng.min_column, rng.max_column + 1))
        rows.update((rng.min_row, rng.max_row + 1))
    sorted_cols = sorted(cols)
    sorted_rows = sorted(rows)

    sliced = []
    for r0, r1 in zip(sorted_rows, sorted_rows[1:]):
        for c0, c1 in zip(sorted_cols, sorted_cols[1:]):
            piece = Range.from_coordinates(c0, r0, c1 - 1, r1 - 1)
            if any(rng.contains(piece) for rng in ranges):
                sliced.append(piece)
    return sliced


def _subtract_rect(original: Range, removed: Range) -> list[Range]:
    left, top, right, bottom = original.min_column, original.min_row, original.max_column, original.max_row
    i_left = max(left, removed.min_column)
    i_top = max(top, removed.min_row)
    i_right = min(right, removed.max_column)
    i_bottom = min(bottom, removed.max_row)

    pieces = []
    if top < i_top:
        pieces.append(Range.from_coordinates(left, top, right, i_top - 1))
    if i_bottom < bottom:
        pieces.append(Range.from_coordinates(left, i_bottom + 1, right, bottom))
    if left < i_left:
        pieces.append(Range.from_coordinates(left, i_top, i_left - 1, i_bottom))
    if i_right < right:
        pieces.append(Range.from_coordinates(i_right + 1, i_top, right, i_bottom))
    return pieces


def _merge_adjacent(ranges: list[Range], strategy: RangeMergeStrategy) -> list[Range]:
    if strategy == RangeMergeStrategy.MERGE_COLUMNS:
        group_key = lambda r: (r.min_column, r.max_column)  # noqa: E731
        lo, hi = (lambda r: r.min_row), (lambda r: r.max_row)
    else:
        group_key = lambda r: (r.min_row, r.max_row)  # noqa: E731
        lo, hi = (lambda r: r.min_column), (lambda r: r.max_column)

    merged: list[Range] = []
    # groups keep first-seen order
    groups: dict[tuple[int, int], list[Range]] = {}
    for rng in ranges:
        groups.setdefault(group_key(rng), []).append(rng)

    for (g0, g1), members in groups.items():
        members.sort(key=lo)
        start, stop = lo(members[0]), hi(members[0])
        for rng in members[1:]:
            if stop + 1 >= lo(rng):
                stop = max(stop, hi(rng))
            else:
                merged.append(_build(strategy, g0, g1, start, stop))
                start, stop = lo(rng), hi(rng)
        merged.append(_build(strategy, g0, g1, start, stop))
    return merged


def _build(strategy: RangeMergeStrategy, g0: int, g1: int, start: int, stop: int) -> Range:
    if strategy == RangeMergeStrategy.MERGE_COLUMNS:
        return Range.from_coordinates(g0, start, g1, stop)
    return Range.from_coordinates(start, g0, stop, g1)
