"""Backtracking solver that always fills the most constrained cell first."""

from __future__ import annotations

from typing import Any, List, Tuple

from .grid import BOX, SIZE, GridIdx, GridValue, copy_into, grid_indices
from .plain_grid import PlainGrid
from .solver import Solver


def _box(idx: GridIdx) -> int:
    i, j = idx
    return (i // BOX) * BOX + j // BOX


class _Constraints:
    """Values already used in each row, column and box, kept as bit masks."""

    def __init__(self) -> None:
        self.rows = [0] * SIZE
        self.cols = [0] * SIZE
        self.boxes = [0] * SIZE

    def _used(self, idx: GridIdx) -> int:
        i, j = idx
        return self.rows[i] | self.cols[j] | self.boxes[_box(idx)]

    def violates(self, idx: GridIdx, value: GridValue) -> bool:
        return bool(self._used(idx) >> value.index() & 1)

    def set(self, idx: GridIdx, value: GridValue) -> None:
        bit = 1 << value.index()
        i, j = idx
        self.rows[i] |= bit
        self.cols[j] |= bit
        self.boxes[_box(idx)] |= bit

    def unset(self, idx: GridIdx, value: GridValue) -> None:
        mask = ~(1 << value.index())
        i, j = idx
        self.rows[i] &= mask
        self.cols[j] &= mask
        self.boxes[_box(idx)] &= mask

    def options(self, idx: GridIdx) -> List[GridValue]:
        used = self._used(idx)
        return [value for value in GridValue if not used >> value.index() & 1]

    def option_count(self, idx: GridIdx) -> int:
        return SIZE - self._used(idx).bit_count()


class GreedySolver(Solver):
    """Depth-first search choosing, at each step, the empty cell with fewest options.

    Ties go to the first such cell in row-major order and candidate values are
    tried in ascending order, so the result is deterministic.
    """

    def solve(self, grid: Any) -> List[Tuple[GridIdx, GridValue]]:
        """Return placements for the empty cells of *grid* in row-major order.

        Raises ValueError when the grid cannot be completed.
        """
        cur = copy_into(grid, PlainGrid)
        constraints = _Constraints()
        for idx in grid_indices():
            value = cur[idx]
            if value is not None:
                constraints.set(idx, value)
        if not self._search(cur, constraints):
            raise ValueError("grid has no solution")
        return [(idx, cur[idx]) for idx in grid_indices() if grid[idx] is None]

    def _search(self, cur: PlainGrid, constraints: _Constraints) -> bool:
        empty = [idx for idx in grid_indices() if cur[idx] is None]
        if not empty:
            return True
        # Every completion must give this cell some value, so failing here
        # means no other cell ordering can succeed either.
        idx = min(empty, key=constraints.option_count)
        for value in constraints.options(idx):
            cur[idx] = value
            constraints.set(idx, value)
            if self._search(cur, constraints):
                return True
            constraints.unset(idx, value)
            cur[idx] = None
        return False