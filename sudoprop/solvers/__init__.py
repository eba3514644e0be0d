"""Solvers module: the propagation solve driver and its backtracking state."""

from .base_solver import BaseSolver, SolverStats, SolveResult, SolveStatus, to_grid
from .backtracking import GuessFrame, GuessStack, select_guess_cell
from .propagation_solver import PropagationSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolveResult",
    "SolveStatus",
    "to_grid",
    "GuessFrame",
    "GuessStack",
    "select_guess_cell",
    "PropagationSolver",
]
