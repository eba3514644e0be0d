"""Guess frames, the guess stack and guess-cell selection."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..core.grid import Grid
from ..propagation.ledger import RemovalLedger


@dataclass
class GuessFrame:
    """
    A branch point: a cell, the digits to try there, and the state to
    restore before each try.

    `checkpoint` and `ledger` are private copies taken just before the
    first guess and are never mutated afterwards.
    """
    row: int
    col: int
    candidates: Tuple[int, ...]
    checkpoint: Grid
    ledger: RemovalLedger
    next_index: int = 0

    def has_untried(self) -> bool:
        return self.next_index < len(self.candidates)

    def next_candidate(self) -> int:
        if not self.has_untried():
            raise IndexError(f"no untried candidate left at ({self.row}, {self.col})")
        digit = self.candidates[self.next_index]
        self.next_index += 1
        return digit

    @property
    def tried(self) -> Tuple[int, ...]:
        return self.candidates[:self.next_index]

    @classmethod
    def open(cls, grid: Grid, ledger: RemovalLedger, row: int, col: int) -> GuessFrame:
        """Checkpoint grid and ledger for a guess at (row, col)."""
        return cls(row, col, grid.candidates(row, col), grid.copy(), ledger.copy())


class GuessStack:
    """Chronological stack of open guess frames."""

    def __init__(self):
        self._frames: List[GuessFrame] = []
        self.max_depth = 0

    def push(self, frame: GuessFrame) -> None:
        self._frames.append(frame)
        self.max_depth = max(self.max_depth, len(self._frames))

    def pop(self) -> GuessFrame:
        return self._frames.pop()

    @property
    def top(self) -> GuessFrame:
        return self._frames[-1]

    @property
    def depth(self) -> int:
        return len(self._frames)

    def clear(self) -> None:
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)

    def __iter__(self) -> Iterator[GuessFrame]:
        return iter(self._frames)


def select_guess_cell(grid: Grid, prefer_binary: bool = True) -> Optional[Tuple[int, int]]:
    """
    Pick the cell to guess on.

    The first cell (row-major) with exactly two candidates wins. Failing that,
    the first cell with the fewest candidates. With prefer_binary off, the
    first unsolved cell is returned.

    Returns:
        (row, col), or None if every cell is solved.
    """
    best = None
    best_count = 10
    for row, col in grid.unsolved_cells():
        if not prefer_binary:
            return row, col
        count = len(grid.candidates(row, col))
        if count == 2:
            return row, col
        if count < best_count:
            best, best_count = (row, col), count
    return best
