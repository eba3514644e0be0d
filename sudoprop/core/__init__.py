"""Core module: candidate grid, raw board boundary, validation and errors."""

from .board import Board
from .errors import SolverError, Contradiction, MalformedInput, Unsolvable, GuessLimitExceeded
from .grid import Grid, Possibility, DIGITS, block_of, block_cells
from .validator import is_valid_placement, is_valid_solution, is_consistent, duplicate_givens

__all__ = [
    "Board",
    "Grid",
    "Possibility",
    "DIGITS",
    "block_of",
    "block_cells",
    "SolverError",
    "Contradiction",
    "MalformedInput",
    "Unsolvable",
    "GuessLimitExceeded",
    "is_valid_placement",
    "is_valid_solution",
    "is_consistent",
    "duplicate_givens",
]
