"""Raw 9x9 Sudoku board: the givens handed to the solver and the digits handed back."""

from __future__ import annotations
import numpy as np
from typing import Dict, List, Optional, Tuple


class Board:
    """
    A 9x9 board of digits, 0 meaning unknown.

    Coordinates are 1-based to match the candidate grid. The values live in a
    numpy int32 array; `grid` exposes it for callers that want array access.
    """

    size = 9
    box_size = 3

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional 9x9 array of digits 0-9. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (self.size, self.size):
                raise ValueError(f"Grid shape must be ({self.size}, {self.size}), got {grid.shape}")
            if grid.min() < 0 or grid.max() > self.size:
                raise ValueError(f"Values must be 0-{self.size}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((self.size, self.size), dtype=np.int32)

    def copy(self) -> Board:
        """Create a deep copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def _check(self, row: int, col: int) -> None:
        if not (1 <= row <= self.size and 1 <= col <= self.size):
            raise ValueError(f"Position must be within 1-{self.size}, got ({row}, {col})")

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        self._check(row, col)
        return int(self.grid[row - 1, col - 1])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self._check(row, col)
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row - 1, col - 1] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.set(row, col, 0)

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.get(row, col) == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row - 1, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col - 1]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = ((row - 1) // self.box_size) * self.box_size
        box_col = ((col - 1) // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                         box_col:box_col + self.box_size].flatten()

    def givens(self) -> Dict[Tuple[int, int], int]:
        """Mapping of every filled cell, {(row, col): digit}."""
        rows, cols = np.nonzero(self.grid)
        return {
            (int(r) + 1, int(c) + 1): int(self.grid[r, c]) for r, c in zip(rows, cols)
        }

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(1, self.size + 1)]
        units += [self.get_col(j) for j in range(1, self.size + 1)]
        units += [
            self.get_box(r, c)
            for r in range(1, self.size + 1, self.box_size)
            for c in range(1, self.size + 1, self.box_size)
        ]
        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to a compact 81-character string, 0 for empty cells."""
        return ''.join(str(int(v)) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> Board:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters: 0 or . for empty, 1-9 for values.
               Whitespace is ignored so multi-line literals can be passed.
        """
        s = ''.join(s.split())
        if len(s) != cls.size * cls.size:
            raise ValueError(f"String length must be {cls.size * cls.size}, got {len(s)}")

        grid = np.zeros((cls.size, cls.size), dtype=np.int32)
        for idx, c in enumerate(s):
            if c in '0.':
                continue
            if c not in '123456789':
                raise ValueError(f"Invalid character {c!r} at position {idx}")
            grid[idx // cls.size, idx % cls.size] = int(c)

        return cls(grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> Board:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    @classmethod
    def from_givens(cls, givens: Dict[Tuple[int, int], int]) -> Board:
        """Create a board from {(row, col): digit}, 1-based."""
        board = cls()
        for (row, col), value in givens.items():
            board.set(row, col, value)
        return board

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Board(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
