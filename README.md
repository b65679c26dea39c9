# sudokuseek

A small library for working with 9×9 sudoku grids:

- `sudokuseek.grid`: `GridValue`, the digits 1 to 9, and helpers that work on any grid indexed by `(row, column)` pairs: `grid_indices`, `check_index`, `to_row_major`, `to_column_major`, `render`, `copy`, `copy_into`, `apply` and `copy_and_apply`
- `sudokuseek.plain_grid`: `PlainGrid`, a grid where each cell holds a `GridValue` or `None`
- `sudokuseek.status`: `eval_status`, which tells whether a grid is complete or still incomplete, and raises `InvalidGridError` when it breaks the rules
- `sudokuseek.solver`: `Solver`, the abstract interface for solvers
- `sudokuseek.greedy_solver`: `GreedySolver`, a backtracking solver that always fills the empty cell with the fewest options first

## Installation

```
pip install .
```

## Command line

```
sudokuseek
```

This prints a built-in sample puzzle and its status. It then solves the puzzle and prints the status and the completed grid. The command takes no options apart from `--help`.

## Library use

```python
from sudokuseek.grid import GridValue, copy_and_apply
from sudokuseek.plain_grid import PlainGrid
from sudokuseek.status import eval_status, InvalidGridError
from sudokuseek.greedy_solver import GreedySolver

grid = PlainGrid()
grid[0, 0] = GridValue.from_digit(5)
grid[0, 1] = GridValue.from_digit(3)

print(grid)
print(eval_status(grid))          # Incomplete

placement = GreedySolver().solve(grid)
solved = copy_and_apply(grid, placement, PlainGrid)
print(eval_status(solved))        # Complete
print(solved)
```

`GreedySolver.solve` returns the values it placed as `((row, column), GridValue)` pairs, one for each cell that was empty in the input, in row-major order. It raises `ValueError` when the grid cannot be completed. `copy_and_apply` copies the original grid into a new grid made by the factory you pass, then writes those values into it.

`eval_status` returns `SudokuStatus.COMPLETE` or `SudokuStatus.INCOMPLETE`. A status is truthy only when it is complete. The function raises `InvalidGridError`, a subclass of `ValueError`, if a row, column or 3×3 box that it checks holds the same digit twice. Rows are checked first, then columns, then boxes. A later kind of unit is only checked when every earlier unit is complete.

`render(grid)`, also used by `str(PlainGrid)`, draws cells separated by `|`. Empty cells show as spaces, and rows are separated by a line of underscores.

## What it does not do

The package has no way to read a puzzle from a file or from the command line. The `sudokuseek` command only solves its built-in sample, so other puzzles have to be built in code with `PlainGrid`.

## Running the tests

```
pip install .[test]
pytest
```