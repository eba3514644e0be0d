"""Constraint-propagation solver with chronological backtracking."""

from __future__ import annotations
import logging
from typing import Optional

from .base_solver import BaseSolver, SolveResult, SolveStatus
from .backtracking import GuessFrame, GuessStack, select_guess_cell
from ..core.errors import Contradiction, GuessLimitExceeded, MalformedInput, SolverError, Unsolvable
from ..core.grid import Grid
from ..propagation.cycle import apply_solved_fact, eliminate_solved_to_fixpoint, run_cycle
from ..propagation.ledger import RemovalLedger

logger = logging.getLogger(__name__)


class PropagationSolver(BaseSolver):
    """
    Sudoku solver driven by propagation cycles.

    The driver loops over:
    - Propagating: run a cycle; if it removed anything, cascade the
      eliminations of newly solved cells and run another.
    - Stalled: a cycle removed nothing but cells remain unsolved.
    - Guessing: checkpoint the grid, push a guess frame on a binary cell
      (or the smallest unsolved one) and commit its first candidate.

    A contradiction restores the top frame's checkpoint and commits its next
    candidate. Exhausted frames are popped and their parent tried next, so
    backtracking is fully chronological. A contradiction with no frame open
    means the givens are malformed.
    """

    name = "Propagation+Backtracking"

    def __init__(
        self,
        max_guesses: Optional[int] = 100_000,
        use_aligned_blocks: bool = True,
        prefer_binary_cells: bool = True,
        track_memory: bool = True,
    ):
        """
        Initialize the propagation solver.

        Args:
            max_guesses: Fail once this many guesses have been committed.
                None disables the cap.
            use_aligned_blocks: Apply locked-candidate eliminations in cycles.
            prefer_binary_cells: Guess on two-candidate cells first.
            track_memory: Record peak memory with tracemalloc.
        """
        super().__init__(track_memory=track_memory)
        self.max_guesses = max_guesses
        self.use_aligned_blocks = use_aligned_blocks
        self.prefer_binary_cells = prefer_binary_cells
        self.state = SolveStatus.PROPAGATING
        self._grid: Optional[Grid] = None
        self._ledger = RemovalLedger()
        self._stack = GuessStack()

    def _solve(self, grid: Grid) -> SolveResult:
        """Run the state machine until it reaches SOLVED or FAILED."""
        self._grid = grid
        self._ledger = RemovalLedger()
        self._stack = GuessStack()
        self.state = SolveStatus.PROPAGATING

        try:
            self._bootstrap()
            while True:
                try:
                    if self._propagate():
                        continue
                    if self._grid.remaining_unsolved_count() == 0:
                        return self._finish(SolveStatus.SOLVED)
                    self._transition(SolveStatus.STALLED)
                    self._guess()
                except Contradiction as exc:
                    self.stats.removed += exc.removed
                    self._rollback(exc)
        except SolverError as exc:
            logger.warning("Solve failed after %d cycles: %s", self.stats.cycles, exc)
            return self._finish(SolveStatus.FAILED, exc)

    def _bootstrap(self) -> None:
        """Eliminate the peers of every given before the first cycle."""
        try:
            removed = eliminate_solved_to_fixpoint(self._grid, self._ledger)
        except Contradiction as exc:
            raise MalformedInput(f"givens contradict each other: {exc}") from exc
        self.stats.bootstrap_removed = removed
        self.stats.removed += removed
        logger.debug("Bootstrap removed %d candidates", removed)

    def _propagate(self) -> bool:
        """Run one cycle and its cascade. Returns True if anything changed."""
        self._transition(SolveStatus.PROPAGATING)
        self.stats.cycles += 1
        removed = run_cycle(self._grid, self._ledger, self.use_aligned_blocks)
        if removed == 0:
            return False
        self.stats.removed += removed
        self.stats.removed += eliminate_solved_to_fixpoint(self._grid, self._ledger)
        return True

    def _guess(self) -> None:
        """Open a guess frame on the stalled grid and commit its first candidate."""
        self._transition(SolveStatus.GUESSING)
        cell = select_guess_cell(self._grid, self.prefer_binary_cells)
        if cell is None:
            # unreachable: the caller only guesses when cells remain unsolved
            raise Unsolvable("stalled with no unsolved cell")
        frame = GuessFrame.open(self._grid, self._ledger, *cell)
        self._stack.push(frame)
        self.stats.max_guess_depth = self._stack.max_depth
        logger.debug("Stalled at cycle %d, guessing at (%d, %d) among %s (depth %d)",
                     self.stats.cycles, frame.row, frame.col, frame.candidates, len(self._stack))
        self._advance()

    def _rollback(self, exc: Contradiction) -> None:
        """Abandon the current attempt and resume from the newest frame."""
        if not self._stack:
            raise MalformedInput(f"contradiction without an open guess: {exc}") from exc
        self.stats.rollbacks += 1
        frame = self._stack.top
        logger.debug("Rolling back guess at (%d, %d) after %s", frame.row, frame.col, exc)
        self._advance()

    def _advance(self) -> None:
        """
        Commit the next untried candidate of the newest frame.

        Frames with nothing left to try are popped and the parent frame is
        retried, until a candidate commits without contradiction.

        Raises:
            Unsolvable: every frame was exhausted.
            GuessLimitExceeded: the guess cap was reached.
        """
        while self._stack:
            frame = self._stack.top
            if not frame.has_untried():
                self._stack.pop()
                logger.warning("All of %s failed at (%d, %d), backing up to depth %d",
                               frame.candidates, frame.row, frame.col, len(self._stack))
                continue

            digit = frame.next_candidate()
            self._count_guess()
            self._grid = frame.checkpoint.copy()
            self._ledger = frame.ledger.copy()
            try:
                self._grid.assign(frame.row, frame.col, digit)
                removed = apply_solved_fact(self._grid, self._ledger, frame.row, frame.col, digit)
                removed += eliminate_solved_to_fixpoint(self._grid, self._ledger)
            except Contradiction as exc:
                self.stats.rollbacks += 1
                logger.debug("Guess (%d, %d) = %d contradicts immediately: %s",
                             frame.row, frame.col, digit, exc)
                continue
            self.stats.removed += removed
            logger.debug("Committed guess (%d, %d) = %d", frame.row, frame.col, digit)
            return

        raise Unsolvable("every guess led to a contradiction")

    def _count_guess(self) -> None:
        self.stats.guesses += 1
        if self.max_guesses is not None and self.stats.guesses > self.max_guesses:
            raise GuessLimitExceeded(self.max_guesses)

    def _transition(self, state: SolveStatus) -> None:
        if state is not self.state:
            logger.debug("%s -> %s", self.state.value, state.value)
            self.state = state

    def _finish(self, status: SolveStatus, error: Optional[SolverError] = None) -> SolveResult:
        self._transition(status)
        self.stats.guess_depth = len(self._stack)
        self.stats.max_guess_depth = self._stack.max_depth
        if status is SolveStatus.SOLVED:
            logger.debug("Solved in %d cycles with %d guesses", self.stats.cycles, self.stats.guesses)
        return SolveResult(self._grid, status, self.stats, error)
