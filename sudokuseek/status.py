"""Checking whether a sudoku grid is complete and valid."""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from .grid import BOX, SIZE, GridValue


class InvalidGridError(ValueError):
    """Raised when a row, column or box holds the same value twice."""


class SudokuStatus(enum.Enum):
    """Whether every row, column and box holds each value exactly once."""

    INCOMPLETE = "Incomplete"
    COMPLETE = "Complete"

    @classmethod
    def from_bool(cls, value: bool) -> SudokuStatus:
        return cls.COMPLETE if value else cls.INCOMPLETE

    def __bool__(self) -> bool:
        return self is SudokuStatus.COMPLETE

    def __str__(self) -> str:
        return self.value


def _unit_complete(cells: Iterable[Optional[GridValue]]) -> bool:
    counts = Counter(value for value in cells if value is not None)
    duplicates = sorted(value for value, count in counts.items() if count > 1)
    if duplicates:
        shown = ", ".join(str(value) for value in duplicates)
        raise InvalidGridError(f"value repeated in a unit: {shown}")
    return len(counts) == len(GridValue)


def _units_complete(units: Iterable[Iterable[Optional[GridValue]]]) -> bool:
    # Every unit of the kind is checked so that any repetition is reported.
    complete = True
    for unit in units:
        if not _unit_complete(unit):
            complete = False
    return complete


def _rows(grid: Any) -> Iterator[Iterator[Optional[GridValue]]]:
    return ((grid[(i, j)] for j in range(SIZE)) for i in range(SIZE))


def _columns(grid: Any) -> Iterator[Iterator[Optional[GridValue]]]:
    return ((grid[(i, j)] for i in range(SIZE)) for j in range(SIZE))


def _boxes(grid: Any) -> Iterator[Iterator[Optional[GridValue]]]:
    return (
        (
            grid[(bi * BOX + di, bj * BOX + dj)]
            for di in range(BOX)
            for dj in range(BOX)
        )
        for bi in range(SIZE // BOX)
        for bj in range(SIZE // BOX)
    )


def eval_status(grid: Any) -> SudokuStatus:
    """Return the status of *grid*.

    Rows are checked first, then columns, then boxes; a later kind is only
    checked when every unit of the earlier kinds is complete. Raises
    InvalidGridError when a checked unit repeats a value.
    """
    return SudokuStatus.from_bool(
        _units_complete(_rows(grid))
        and _units_complete(_columns(grid))
        and _units_complete(_boxes(grid))
    )