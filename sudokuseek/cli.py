"""Command that solves the built-in sample puzzle and prints each stage."""

from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence

from .greedy_solver import GreedySolver
from .grid import GridValue, copy_and_apply
from .plain_grid import PlainGrid
from .status import InvalidGridError, eval_status

_SAMPLE_CLUES = {
    (0, 0): 5, (0, 1): 3, (0, 4): 7,
    (1, 0): 6, (1, 3): 1, (1, 4): 9, (1, 5): 5,
    (2, 7): 6, (2, 2): 8, (2, 1): 9,
    (3, 0): 8, (3, 4): 6, (3, 8): 3,
    (4, 0): 4, (4, 3): 8, (4, 5): 3, (4, 8): 1,
    (5, 0): 7, (5, 4): 2, (5, 8): 6,
    (6, 1): 6, (6, 6): 2, (6, 7): 8,
    (7, 3): 4, (7, 4): 1, (7, 5): 9, (7, 8): 5,
    (8, 4): 8, (8, 7): 7, (8, 8): 9,
}


def sample_grid() -> PlainGrid:
    """Return the built-in sample puzzle."""
    grid = PlainGrid()
    for idx, digit in _SAMPLE_CLUES.items():
        grid[idx] = GridValue.from_digit(digit)
    return grid


def _describe(grid: Any) -> str:
    try:
        return str(eval_status(grid))
    except InvalidGridError as exc:
        return f"Invalid ({exc})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sample puzzle, its status, then the solved grid and its status."""
    parser = argparse.ArgumentParser(
        prog="sudokuseek",
        description="Solve the built-in sample sudoku and print the result.",
    )
    parser.parse_args(argv)

    grid = sample_grid()
    print(grid)
    print(_describe(grid))
    complete = copy_and_apply(grid, GreedySolver().solve(grid), PlainGrid)
    print(_describe(complete))
    print(complete)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())