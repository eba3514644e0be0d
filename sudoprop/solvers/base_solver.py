"""Base solver interface and common result types."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Union
import time
import tracemalloc

from ..core.board import Board
from ..core.errors import SolverError
from ..core.grid import Grid


class SolveStatus(Enum):
    """States of the solve driver; SOLVED and FAILED are terminal."""
    PROPAGATING = "propagating"
    STALLED = "stalled"
    GUESSING = "guessing"
    SOLVED = "solved"
    FAILED = "failed"


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    cycles: int = 0

    # Propagation and search metrics
    removed: int = 0
    bootstrap_removed: int = 0
    guesses: int = 0
    rollbacks: int = 0
    max_guess_depth: int = 0
    guess_depth: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "cycles": self.cycles,
            "removed": self.removed,
            "bootstrap_removed": self.bootstrap_removed,
            "guesses": self.guesses,
            "rollbacks": self.rollbacks,
            "max_guess_depth": self.max_guess_depth,
            "guess_depth": self.guess_depth,
            "algorithm": self.algorithm,
            **self.extra
        }


@dataclass
class SolveResult:
    """
    Outcome of one solve.

    `grid` is the solved grid, or the last attempted grid when the solve
    failed; it never aliases the caller's input.
    """
    grid: Grid
    status: SolveStatus
    stats: SolverStats = field(default_factory=SolverStats)
    error: Optional[SolverError] = None

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def cycles(self) -> int:
        return self.stats.cycles

    def to_board(self) -> Board:
        return self.grid.to_board()


Puzzle = Union[Board, Grid, str]


def to_grid(puzzle: Puzzle) -> Grid:
    """Build a fresh candidate grid from any accepted puzzle form."""
    if isinstance(puzzle, Grid):
        return puzzle.copy()
    if isinstance(puzzle, Board):
        return Grid.from_board(puzzle)
    if isinstance(puzzle, str):
        return Grid.from_string(puzzle)
    raise TypeError(f"Cannot solve a {type(puzzle).__name__}")


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = True):
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, puzzle: Puzzle) -> SolveResult:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        Args:
            puzzle: A Board, a candidate Grid or an 81-character string.
                It is never modified.

        Returns:
            The SolveResult, with this run's stats attached.
        """
        self.stats = SolverStats(algorithm=self.name)
        grid = to_grid(puzzle)

        # tracemalloc is process-wide; leave it alone if someone else runs it
        own_tracing = self.track_memory and not tracemalloc.is_tracing()
        if own_tracing:
            tracemalloc.start()

        start_time = time.perf_counter()
        try:
            result = self._solve(grid)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if own_tracing:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

        self.stats.solved = result.solved
        if result.error is not None:
            self.stats.extra["error"] = str(result.error)
        result.stats = self.stats
        return result

    @abstractmethod
    def _solve(self, grid: Grid) -> SolveResult:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            grid: A private copy of the puzzle (can be modified).

        Returns:
            The terminal result; stats are attached by `solve`.
        """
        pass
