"""Sudoku grids, status checking and a most-constrained-first backtracking solver."""

__version__ = "0.1.0"

__all__ = ["grid", "plain_grid", "solver", "status", "greedy_solver", "cli"]