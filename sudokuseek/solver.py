"""Interface shared by sudoku solvers."""

from __future__ import annotations

import abc
from typing import Any, List, Tuple

from .grid import GridIdx, GridValue


class Solver(abc.ABC):
    """A strategy that fills the empty cells of a grid."""

    @abc.abstractmethod
    def solve(self, grid: Any) -> List[Tuple[GridIdx, GridValue]]:
        """Return ``(index, value)`` placements for the empty cells of *grid*."""