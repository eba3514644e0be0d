"""
Elimination rules.

Each rule is a pure function of the grid: it reports which candidates are
ruled out by a fact and leaves the removal to the caller. Only candidates
still present in the grid are reported, so an already-resolved digit yields
an empty list rather than an error.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from ..core.grid import DIGITS, Cell, Grid, Possibility, block_of, block_rows, block_cols, block_cells


class Alignment(Enum):
    """Line shared by every cell of a candidate list."""
    ROW = "row"
    COLUMN = "column"
    NONE = "none"


@dataclass
class BlockScan:
    """Cells of a block that still admit a digit."""
    cells: List[Cell]
    solved: bool


def row_column_eliminations(grid: Grid, row: int, col: int, digit: int) -> List[Possibility]:
    """
    Given (row, col) = digit, no other cell in that row or column may hold digit.

    Returns:
        Up to 16 possibilities: column peers first, then row peers.
    """
    found = []
    for r in DIGITS:
        if r != row and grid.has_candidate(r, col, digit):
            found.append(Possibility(r, col, digit))
    for c in DIGITS:
        if c != col and grid.has_candidate(row, c, digit):
            found.append(Possibility(row, c, digit))
    return found


def block_eliminations(grid: Grid, row: int, col: int, digit: int) -> List[Possibility]:
    """Given (row, col) = digit, no other cell of its block may hold digit."""
    return [
        Possibility(r, c, digit)
        for r, c in block_cells(*block_of(row, col))
        if (r, c) != (row, col) and grid.has_candidate(r, c, digit)
    ]


def aligned_block_eliminations(grid: Grid, block_index: int, line: int, digit: int,
                               by_row: bool) -> List[Possibility]:
    """
    Locked candidates: exclude digit from a line outside the block that owns it.

    When every remaining occurrence of digit in a block sits on one row, the
    digit must land on that row inside the block, so the two horizontally
    adjacent blocks cannot hold it on that row. Columns work the same way
    with vertically adjacent blocks.

    Args:
        grid: The candidate grid.
        block_index: Block column (1-3) when by_row, block row otherwise.
        line: The row (by_row) or column number, 1-9.
        digit: The aligned digit.
        by_row: True for a row alignment, False for a column alignment.

    Returns:
        Up to 6 possibilities, 3 in each adjacent block.
    """
    inside = block_cols(block_index) if by_row else block_rows(block_index)
    found = []
    for other in DIGITS:
        if other in inside:
            continue
        r, c = (line, other) if by_row else (other, line)
        if grid.has_candidate(r, c, digit):
            found.append(Possibility(r, c, digit))
    return found


def scan_block(grid: Grid, block_row: int, block_col: int, digit: int) -> BlockScan:
    """
    Find where digit can still go inside a block.

    Returns:
        The admitting cells in row-major order, and whether one of them is
        already solved to digit.
    """
    cells = []
    solved = False
    for r, c in block_cells(block_row, block_col):
        if grid.has_candidate(r, c, digit):
            cells.append((r, c))
            if grid.is_solved_cell(r, c):
                solved = True
    return BlockScan(cells, solved)


def check_alignment(cells: Sequence[Tuple[int, int]]) -> Alignment:
    """
    Report the line shared by all cells.

    Rows are checked before columns, so a single cell (or repeated identical
    cells) reports ROW. An empty sequence is NONE.
    """
    if not cells:
        return Alignment.NONE
    first_row, first_col = cells[0]
    if all(r == first_row for r, _ in cells):
        return Alignment.ROW
    if all(c == first_col for _, c in cells):
        return Alignment.COLUMN
    return Alignment.NONE
