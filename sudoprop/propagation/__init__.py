"""Propagation module: elimination rules, removal ledger and the propagation cycle."""

from .rules import (
    Alignment,
    BlockScan,
    row_column_eliminations,
    block_eliminations,
    aligned_block_eliminations,
    scan_block,
    check_alignment,
)
from .ledger import RemovalLedger
from .cycle import apply_solved_fact, eliminate_solved, eliminate_solved_to_fixpoint, run_cycle

__all__ = [
    "Alignment",
    "BlockScan",
    "row_column_eliminations",
    "block_eliminations",
    "aligned_block_eliminations",
    "scan_block",
    "check_alignment",
    "RemovalLedger",
    "apply_solved_fact",
    "eliminate_solved",
    "eliminate_solved_to_fixpoint",
    "run_cycle",
]
