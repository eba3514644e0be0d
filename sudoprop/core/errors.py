"""Error types raised by the propagation engine."""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Possibility


class SolverError(Exception):
    """Base class for every failure the solve driver can report."""


class Contradiction(SolverError):
    """
    A removal or assignment would leave a cell without candidates.

    Attributes:
        possibility: The (row, col, digit) that triggered the contradiction.
        removed: Candidates removed by the failing step before it aborted.
    """

    def __init__(self, possibility: Optional[Possibility] = None, removed: int = 0,
                 message: Optional[str] = None):
        self.possibility = possibility
        self.removed = removed
        if message is None:
            if possibility is not None:
                message = (f"cannot remove {possibility.digit} from "
                           f"({possibility.row}, {possibility.col}): "
                           f"it is the only candidate left")
            else:
                message = "contradiction"
        super().__init__(message)


class MalformedInput(SolverError):
    """The givens contradict each other before any guess was made."""


class Unsolvable(SolverError):
    """Every candidate of every guess frame was tried and failed."""


class GuessLimitExceeded(SolverError):
    """The solve committed more guesses than the configured cap allows."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"guess limit of {limit} exceeded")
