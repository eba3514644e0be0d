"""Validation utilities for boards and candidate grids."""

from __future__ import annotations
from typing import List, Tuple, TYPE_CHECKING

from .grid import DIGITS, block_of, block_cells

if TYPE_CHECKING:
    from .board import Board
    from .grid import Grid


def is_valid_placement(board: Board, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index, 1-9.
        col: Column index, 1-9.
        value: Value to check (1-9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > board.size:
        return False

    # Check row
    if value in board.get_row(row):
        return False

    # Check column
    if value in board.get_col(col):
        return False

    # Check box
    if value in board.get_box(row, col):
        return False

    return True


def is_valid_solution(puzzle: Board, solution: Board) -> bool:
    """
    Check if a solution is valid for a given puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    for (row, col), value in puzzle.givens().items():
        if solution.get(row, col) != value:
            return False

    return solution.is_solved()


def is_consistent(grid: Grid) -> bool:
    """
    Check the uniqueness invariant of a candidate grid.

    For every solved cell (i, j) = n, no other cell in row i, column j or the
    cell's block may still hold n.
    """
    for row, col, digit in grid.solved_cells():
        peers = {(row, c) for c in DIGITS} | {(r, col) for r in DIGITS}
        peers |= set(block_cells(*block_of(row, col)))
        peers.discard((row, col))
        for r, c in peers:
            if grid.has_candidate(r, c, digit):
                return False
    return True


def duplicate_givens(board: Board) -> List[Tuple[str, int, int]]:
    """
    List digits given more than once in the same unit.

    Returns:
        (unit, index, digit) triples, where unit is "row", "column" or "box"
        and index is the 1-based unit number (boxes numbered row-major).
    """
    duplicates = []
    for index in DIGITS:
        box_row, box_col = divmod(index - 1, 3)
        units = (
            ("row", board.get_row(index)),
            ("column", board.get_col(index)),
            ("box", board.get_box(box_row * 3 + 1, box_col * 3 + 1)),
        )
        for unit, values in units:
            for digit in DIGITS:
                if int((values == digit).sum()) > 1:
                    duplicates.append((unit, index, digit))
    return duplicates
