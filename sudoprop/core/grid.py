"""Candidate grid: the mutable 9x9 table the propagation engine works on."""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple, TYPE_CHECKING

from .errors import Contradiction

if TYPE_CHECKING:
    from .board import Board


SIZE = 9
BOX_SIZE = 3
DIGITS: Tuple[int, ...] = tuple(range(1, SIZE + 1))

Cell = Tuple[int, int]


class Possibility(NamedTuple):
    """A candidate digit at a cell, 1-based."""
    row: int
    col: int
    digit: int


def _check_index(value: int, name: str) -> None:
    if not 1 <= value <= SIZE:
        raise ValueError(f"{name} must be 1-{SIZE}, got {value}")


def block_of(row: int, col: int) -> Tuple[int, int]:
    """Return the 1-based (block_row, block_col) holding a cell."""
    return (row - 1) // BOX_SIZE + 1, (col - 1) // BOX_SIZE + 1


def block_rows(block_row: int) -> range:
    start = (block_row - 1) * BOX_SIZE + 1
    return range(start, start + BOX_SIZE)


def block_cols(block_col: int) -> range:
    start = (block_col - 1) * BOX_SIZE + 1
    return range(start, start + BOX_SIZE)


def block_cells(block_row: int, block_col: int) -> List[Cell]:
    """The 9 cells of a block in row-major order."""
    return [(r, c) for r in block_rows(block_row) for c in block_cols(block_col)]


class Grid:
    """
    A 9x9 table of per-cell candidate lists.

    Rows and columns are 1-based. Every cell owns its own list, so cells never
    share storage. A cell with one candidate is solved; a cell is never
    allowed to reach zero candidates, removals that would do so raise
    Contradiction before touching the grid.
    """

    def __init__(self):
        self._cells: Dict[Cell, List[int]] = {
            (r, c): list(DIGITS) for r in DIGITS for c in DIGITS
        }

    @classmethod
    def from_givens(cls, givens: Mapping[Cell, int]) -> Grid:
        """
        Build a grid from a mapping of given cells.

        Args:
            givens: {(row, col): digit}, 1-based. Cells not listed are unknown.
        """
        grid = cls()
        for (row, col), digit in givens.items():
            _check_index(row, "row")
            _check_index(col, "col")
            _check_index(digit, "digit")
            grid._cells[(row, col)] = [int(digit)]
        return grid

    @classmethod
    def from_board(cls, board: Board) -> Grid:
        """Build a grid from a raw board; 0 cells start with every digit."""
        return cls.from_givens(board.givens())

    @classmethod
    def from_string(cls, s: str) -> Grid:
        from .board import Board
        return cls.from_board(Board.from_string(s))

    def copy(self) -> Grid:
        """Deep copy; the new grid shares no cell lists with this one."""
        new_grid = Grid.__new__(Grid)
        new_grid._cells = {cell: values[:] for cell, values in self._cells.items()}
        return new_grid

    def candidates(self, row: int, col: int) -> Tuple[int, ...]:
        return tuple(self._cells[(row, col)])

    def has_candidate(self, row: int, col: int, digit: int) -> bool:
        return digit in self._cells[(row, col)]

    def solved_value(self, row: int, col: int) -> Optional[int]:
        """The cell's digit if it has exactly one candidate, else None."""
        values = self._cells[(row, col)]
        return values[0] if len(values) == 1 else None

    def is_solved_cell(self, row: int, col: int) -> bool:
        return len(self._cells[(row, col)]) == 1

    def remove_candidate(self, row: int, col: int, digit: int) -> bool:
        """
        Remove a digit from a cell's candidates.

        Returns:
            True if the digit was removed, False if it was not a candidate.

        Raises:
            Contradiction: if the digit is the cell's only candidate.
        """
        values = self._cells[(row, col)]
        if digit not in values:
            return False
        if len(values) == 1:
            raise Contradiction(Possibility(row, col, digit))
        values.remove(digit)
        return True

    def assign(self, row: int, col: int, digit: int) -> None:
        """Shrink a cell to the single candidate `digit`."""
        if digit not in self._cells[(row, col)]:
            raise Contradiction(
                Possibility(row, col, digit),
                message=f"cannot assign {digit} to ({row}, {col}): not a candidate",
            )
        self._cells[(row, col)] = [digit]

    def set_candidates(self, row: int, col: int, digits: Iterable[int]) -> None:
        """Replace a cell's candidates. Used to build fixtures."""
        _check_index(row, "row")
        _check_index(col, "col")
        values: List[int] = []
        for digit in digits:
            _check_index(digit, "digit")
            if digit not in values:
                values.append(digit)
        if not values:
            raise ValueError(f"cell ({row}, {col}) needs at least one candidate")
        self._cells[(row, col)] = values

    def remaining_unsolved_count(self) -> int:
        """Number of cells with more than one candidate."""
        return sum(1 for values in self._cells.values() if len(values) > 1)

    def candidate_count(self) -> int:
        """Total number of candidates over the grid (81 to 729)."""
        return sum(len(values) for values in self._cells.values())

    def solved_cells(self) -> Iterator[Possibility]:
        """Solved cells in row-major order."""
        for row in DIGITS:
            for col in DIGITS:
                values = self._cells[(row, col)]
                if len(values) == 1:
                    yield Possibility(row, col, values[0])

    def unsolved_cells(self) -> Iterator[Cell]:
        for row in DIGITS:
            for col in DIGITS:
                if len(self._cells[(row, col)]) > 1:
                    yield row, col

    def to_board(self) -> Board:
        """Convert to a raw board; unsolved cells become 0."""
        from .board import Board
        board = Board()
        for row, col, digit in self.solved_cells():
            board.set(row, col, digit)
        return board

    def to_string(self) -> str:
        """81 characters, 0 for unsolved cells."""
        return ''.join(
            str(self.solved_value(row, col) or 0) for row in DIGITS for col in DIGITS
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return all(
            set(values) == set(other._cells[cell]) for cell, values in self._cells.items()
        )

    def __repr__(self) -> str:
        return (f"Grid(unsolved={self.remaining_unsolved_count()}, "
                f"candidates={self.candidate_count()})")
