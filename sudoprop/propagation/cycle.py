"""
Propagation cycle.

A cycle sweeps every (digit, block) pair once. A digit with a single home in
a block is committed there; a digit whose homes in a block share one line is
removed from that line in the neighbouring blocks. The sweep reports how many
candidates it removed so the driver can tell progress from a stall.
"""

from __future__ import annotations
import logging

from ..core.errors import Contradiction
from ..core.grid import DIGITS, Grid
from .ledger import RemovalLedger
from .rules import (
    Alignment,
    aligned_block_eliminations,
    block_eliminations,
    check_alignment,
    row_column_eliminations,
    scan_block,
)

logger = logging.getLogger(__name__)

BLOCKS = (1, 2, 3)


def apply_solved_fact(grid: Grid, ledger: RemovalLedger, row: int, col: int, digit: int) -> int:
    """Remove digit from every row, column and block peer of (row, col)."""
    ledger.enqueue(row_column_eliminations(grid, row, col, digit))
    ledger.enqueue(block_eliminations(grid, row, col, digit))
    return ledger.flush(grid)


def eliminate_solved(grid: Grid, ledger: RemovalLedger) -> int:
    """
    One redundancy pass: apply the peer eliminations of every solved cell.

    Returns:
        Number of candidates removed.
    """
    count = 0
    for row, col, digit in list(grid.solved_cells()):
        try:
            count += apply_solved_fact(grid, ledger, row, col, digit)
        except Contradiction as exc:
            exc.removed += count
            raise
    return count


def eliminate_solved_to_fixpoint(grid: Grid, ledger: RemovalLedger) -> int:
    """Repeat the redundancy pass until it removes nothing."""
    total = 0
    while True:
        try:
            count = eliminate_solved(grid, ledger)
        except Contradiction as exc:
            exc.removed += total
            raise
        if count == 0:
            return total
        total += count


def run_cycle(grid: Grid, ledger: RemovalLedger, use_aligned_blocks: bool = True) -> int:
    """
    Run one full sweep over all digits and blocks.

    Args:
        grid: The live grid; mutated in place.
        ledger: Queue and removed log of the current attempt.
        use_aligned_blocks: Apply locked-candidate eliminations.

    Returns:
        Candidates removed, counting each newly committed cell once.

    Raises:
        Contradiction: a removal emptied a cell. `removed` holds the cycle's
            count up to that point.
    """
    count = 0
    try:
        for digit in DIGITS:
            for block_row in BLOCKS:
                for block_col in BLOCKS:
                    count += _visit_block(grid, ledger, block_row, block_col, digit,
                                          use_aligned_blocks)
    except Contradiction as exc:
        exc.removed += count
        logger.debug("Cycle aborted by %s after %d removals", exc, exc.removed)
        raise
    logger.debug("Cycle removed %d candidates, %d cells unsolved",
                 count, grid.remaining_unsolved_count())
    return count


def _visit_block(grid: Grid, ledger: RemovalLedger, block_row: int, block_col: int,
                 digit: int, use_aligned_blocks: bool) -> int:
    scan = scan_block(grid, block_row, block_col, digit)

    if not scan.solved and len(scan.cells) == 1:
        row, col = scan.cells[0]
        grid.assign(row, col, digit)
        count = 1
        try:
            count += apply_solved_fact(grid, ledger, row, col, digit)
        except Contradiction as exc:
            exc.removed += count
            raise
        return count

    if not use_aligned_blocks or len(scan.cells) < 2:
        return 0

    alignment = check_alignment(scan.cells)
    if alignment is Alignment.NONE:
        return 0

    row, col = scan.cells[0]
    if alignment is Alignment.ROW:
        found = aligned_block_eliminations(grid, block_col, row, digit, by_row=True)
    else:
        found = aligned_block_eliminations(grid, block_row, col, digit, by_row=False)
    ledger.enqueue(found)
    return ledger.flush(grid)
