"""Sudoku cell values, grid coordinates and helpers that work on any grid."""

from __future__ import annotations

import enum
import functools
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional, Tuple, TypeVar

SIZE = 9
BOX = 3

GridIdx = Tuple[int, int]
Placement = Iterable[Tuple[GridIdx, "GridValue"]]

G = TypeVar("G")


@functools.total_ordering
class GridValue(enum.Enum):
    """A digit that can be placed in a sudoku cell."""

    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5
    V6 = 6
    V7 = 7
    V8 = 8
    V9 = 9

    @classmethod
    def from_index(cls, index: int) -> GridValue:
        """Return the value at zero-based position *index* (0 gives V1)."""
        if not _is_int(index) or not 0 <= index < SIZE:
            raise ValueError(f"value index out of range: {index!r}")
        return cls(index + 1)

    @classmethod
    def from_digit(cls, digit: int) -> GridValue:
        """Return the value written as *digit* (1 to 9)."""
        if not _is_int(digit) or not 1 <= digit <= SIZE:
            raise ValueError(f"not a sudoku digit: {digit!r}")
        return cls(digit)

    def index(self) -> int:
        """Zero-based position of this value."""
        return self.value - 1

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GridValue):
            return NotImplemented
        return self.value < other.value


def _is_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def grid_indices() -> Iterator[GridIdx]:
    """Yield every cell index in row-major order."""
    return itertools.product(range(SIZE), range(SIZE))


def check_index(idx: Any) -> GridIdx:
    """Validate a ``(row, column)`` pair and return it as a tuple."""
    try:
        i, j = idx
    except (TypeError, ValueError):
        raise TypeError(f"grid index must be a (row, column) pair: {idx!r}") from None
    if not (_is_int(i) and _is_int(j)):
        raise TypeError(f"grid index parts must be integers: {idx!r}")
    if not (0 <= i < SIZE and 0 <= j < SIZE):
        raise IndexError(f"grid index out of range: {idx!r}")
    return i, j


def to_row_major(idx: GridIdx) -> int:
    """Flat position of *idx* when cells are stored row by row."""
    i, j = check_index(idx)
    return i * SIZE + j


def to_column_major(idx: GridIdx) -> int:
    """Flat position of *idx* when cells are stored column by column."""
    i, j = check_index(idx)
    return j * SIZE + i


def _cell_text(value: Optional[GridValue]) -> str:
    return " " if value is None else str(value)


def render(grid: Any) -> str:
    """Draw *grid* as text: cells split by ``|``, rows by a line of underscores."""
    separator = "\n" + "_" * (SIZE * 2 - 1) + "\n"
    rows = (
        "|".join(_cell_text(grid[(i, j)]) for j in range(SIZE)) for i in range(SIZE)
    )
    return separator.join(rows)


def copy(src: Any, dst: Any) -> None:
    """Copy every cell of *src* into *dst*."""
    for idx in grid_indices():
        dst[idx] = src[idx]


def copy_into(src: Any, factory: Callable[[], G]) -> G:
    """Return a new grid made by *factory* holding the cells of *src*."""
    dst = factory()
    copy(src, dst)
    return dst


def apply(grid: Any, placement: Placement) -> None:
    """Write each ``(index, value)`` pair of *placement* into *grid*."""
    for idx, value in placement:
        grid[idx] = value


def copy_and_apply(src: Any, placement: Placement, factory: Callable[[], G]) -> G:
    """Return a copy of *src* made by *factory* with *placement* written in."""
    dst = copy_into(src, factory)
    apply(dst, placement)
    return dst