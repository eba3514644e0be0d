"""Per-attempt bookkeeping of pending and applied candidate removals."""

from __future__ import annotations
from typing import Iterable, List, Set

from ..core.errors import Contradiction
from ..core.grid import Grid, Possibility


class RemovalLedger:
    """
    Elimination request queue plus the log of removals already applied.

    The queue is emptied by every flush. The log only grows during an attempt;
    rolling back replaces the whole ledger with the copy stored alongside the
    checkpoint grid.
    """

    def __init__(self, removed: Iterable[Possibility] = ()):
        self.queue: List[Possibility] = []
        self.removed: Set[Possibility] = set(removed)

    def enqueue(self, possibilities: Iterable[Possibility]) -> None:
        self.queue.extend(possibilities)

    def flush(self, grid: Grid) -> int:
        """
        Apply every queued removal to the grid.

        Possibilities already in the log are skipped; newly removed ones are
        recorded. The queue is cleared whether or not the flush succeeds.

        Returns:
            Number of candidates actually removed.

        Raises:
            Contradiction: a queued removal targets a cell's last candidate.
                Its `removed` attribute holds the removals made before it.
        """
        count = 0
        try:
            for possibility in self.queue:
                if possibility in self.removed:
                    continue
                try:
                    removed = grid.remove_candidate(*possibility)
                except Contradiction as exc:
                    exc.removed = count
                    raise
                if removed:
                    self.removed.add(possibility)
                    count += 1
        finally:
            self.queue.clear()
        return count

    def copy(self) -> RemovalLedger:
        """Independent copy of the removed log with an empty queue."""
        return RemovalLedger(self.removed)

    def __len__(self) -> int:
        return len(self.removed)

    def __contains__(self, possibility: object) -> bool:
        return possibility in self.removed

    def __repr__(self) -> str:
        return f"RemovalLedger(pending={len(self.queue)}, removed={len(self.removed)})"
