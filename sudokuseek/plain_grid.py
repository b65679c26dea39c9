"""A simple 9x9 sudoku grid stored as a flat list."""

from __future__ import annotations

from typing import Any, List, Optional

from .grid import SIZE, GridValue, render, to_row_major


class PlainGrid:
    """Sudoku grid indexed by ``(row, column)``; empty cells hold ``None``."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: List[Optional[GridValue]] = [None] * (SIZE * SIZE)

    def __getitem__(self, idx: Any) -> Optional[GridValue]:
        return self._cells[to_row_major(idx)]

    def __setitem__(self, idx: Any, value: Optional[GridValue]) -> None:
        if value is not None and not isinstance(value, GridValue):
            raise TypeError(f"cell value must be a GridValue or None: {value!r}")
        self._cells[to_row_major(idx)] = value

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        digits = "".join("." if v is None else str(v) for v in self._cells)
        return f"PlainGrid({digits!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlainGrid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> PlainGrid:
        """Return an independent copy of this grid."""
        duplicate = PlainGrid()
        duplicate._cells = list(self._cells)
        return duplicate