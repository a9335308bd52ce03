"""Immutable surgery on the hue x shade grid.

Rows and the grid itself are tuples.  Every helper returns new tuples only
along the path it touches; untouched rows and cells are the same objects as
before, so a renderer can tell what changed with ``is``.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple, TypeVar

T = TypeVar("T")

Row = Tuple[T, ...]
Grid = Tuple[Tuple[T, ...], ...]
Path = Tuple[int, int]

RANK = 2


def in_range(index: object, size: int) -> bool:
    # bool is an int subclass but never a sensible index
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < size


def in_bounds(grid: Sequence[Sequence[T]], path: Sequence[int]) -> bool:
    if len(path) != RANK:
        return False
    i, j = path
    return in_range(i, len(grid)) and in_range(j, len(grid[i]))


def replace_item(seq: Sequence[T], index: int, updater: Callable[[T], T]) -> Row:
    if not in_range(index, len(seq)):
        raise IndexError(f"index {index!r} out of range for length {len(seq)}")
    items = tuple(seq)
    return items[:index] + (updater(items[index]),) + items[index + 1 :]


def replace_at(grid: Sequence[Sequence[T]], path: Sequence[int], updater: Callable[[T], T]) -> Grid:
    """Replace the cell at ``path = (row, column)`` with ``updater(cell)``.

    Depth is fixed at ``RANK`` (hue, shade); longer or shorter paths are rejected.
    """
    if len(path) != RANK:
        raise IndexError(f"grid path needs {RANK} indices, got {len(path)}")
    i, j = path
    return replace_item(grid, i, lambda row: replace_item(row, j, updater))


def swap_items(seq: Sequence[T], a: int, b: int) -> Row:
    items = list(seq)
    items[a], items[b] = items[b], items[a]
    return tuple(items)


def drop_item(seq: Sequence[T], index: int) -> Row:
    items = tuple(seq)
    return items[:index] + items[index + 1 :]


def append_item(seq: Sequence[T], item: T) -> Row:
    return tuple(seq) + (item,)


def swap_columns(grid: Sequence[Sequence[T]], a: int, b: int) -> Grid:
    return tuple(swap_items(row, a, b) for row in grid)


def drop_column(grid: Sequence[Sequence[T]], index: int) -> Grid:
    return tuple(drop_item(row, index) for row in grid)


def append_column(grid: Sequence[Sequence[T]], cells: Sequence[T]) -> Grid:
    if len(cells) != len(grid):
        raise ValueError(f"column has {len(cells)} cells for {len(grid)} rows")
    return tuple(append_item(row, cell) for row, cell in zip(grid, cells))


__all__ = [
    "append_column",
    "append_item",
    "drop_column",
    "drop_item",
    "in_bounds",
    "in_range",
    "replace_at",
    "replace_item",
    "swap_columns",
    "swap_items",
]
