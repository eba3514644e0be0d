"""Sudoku solving by constraint propagation with chronological backtracking."""

from .core import Board, Grid, Possibility
from .solvers import PropagationSolver, SolveResult, SolveStatus

__version__ = "1.0.0"

__all__ = ["Board", "Grid", "Possibility", "PropagationSolver", "SolveResult", "SolveStatus"]
