"""Unit tests for the candidate grid."""

import pytest
from sudoprop.core.board import Board
from sudoprop.core.errors import Contradiction
from sudoprop.core.grid import Grid, Possibility, block_of, block_cells


class TestGrid:
    """Tests for Grid class."""

    def test_new_grid_is_all_unknown(self, empty_grid):
        assert empty_grid.remaining_unsolved_count() == 81
        assert empty_grid.candidate_count() == 729
        assert empty_grid.candidates(1, 1) == tuple(range(1, 10))
        assert list(empty_grid.solved_cells()) == []

    def test_cells_do_not_share_storage(self, empty_grid):
        """Removing from one unknown cell must not affect another."""
        empty_grid.remove_candidate(1, 1, 5)
        assert not empty_grid.has_candidate(1, 1, 5)
        assert empty_grid.has_candidate(1, 2, 5)
        assert empty_grid.has_candidate(9, 9, 5)

    def test_from_givens(self):
        grid = Grid.from_givens({(1, 3): 5, (9, 9): 2})
        assert grid.solved_value(1, 3) == 5
        assert grid.solved_value(9, 9) == 2
        assert grid.solved_value(1, 1) is None
        assert grid.remaining_unsolved_count() == 79

    def test_from_givens_validates(self):
        with pytest.raises(ValueError):
            Grid.from_givens({(0, 1): 5})
        with pytest.raises(ValueError):
            Grid.from_givens({(1, 1): 10})

    def test_remaining_unsolved_count(self, evil_grid):
        assert evil_grid.remaining_unsolved_count() == 55

    def test_solved_value(self, evil_grid):
        assert evil_grid.solved_value(1, 1) is None
        assert evil_grid.solved_value(8, 9) == 2

    def test_remove_candidate(self, evil_grid):
        assert evil_grid.remove_candidate(1, 2, 4) is True
        assert not evil_grid.has_candidate(1, 2, 4)

    def test_remove_absent_candidate_is_noop(self, evil_grid):
        evil_grid.remove_candidate(1, 2, 4)
        assert evil_grid.remove_candidate(1, 2, 4) is False
        assert len(evil_grid.candidates(1, 2)) == 8
        # a solved cell without the digit is also a no-op
        assert evil_grid.remove_candidate(8, 9, 7) is False

    def test_remove_last_candidate_raises(self, evil_grid):
        with pytest.raises(Contradiction) as exc_info:
            evil_grid.remove_candidate(8, 9, 2)
        assert exc_info.value.possibility == Possibility(8, 9, 2)
        # rejected before mutation
        assert evil_grid.solved_value(8, 9) == 2

    def test_assign(self, empty_grid):
        empty_grid.assign(4, 5, 7)
        assert empty_grid.candidates(4, 5) == (7,)
        assert empty_grid.is_solved_cell(4, 5)

    def test_assign_missing_candidate_raises(self, empty_grid):
        empty_grid.remove_candidate(4, 5, 7)
        with pytest.raises(Contradiction):
            empty_grid.assign(4, 5, 7)

    def test_set_candidates(self, empty_grid):
        empty_grid.set_candidates(2, 3, [4, 1, 4])
        assert empty_grid.candidates(2, 3) == (4, 1)
        with pytest.raises(ValueError):
            empty_grid.set_candidates(2, 3, [])
        with pytest.raises(ValueError):
            empty_grid.set_candidates(2, 3, [0])

    def test_copy_is_deep(self, evil_grid):
        copy = evil_grid.copy()
        assert copy == evil_grid

        copy.remove_candidate(1, 1, 1)
        assert evil_grid.has_candidate(1, 1, 1)
        assert copy != evil_grid

    def test_equality_ignores_candidate_order(self, empty_grid):
        other = Grid()
        empty_grid.set_candidates(1, 1, [1, 2])
        other.set_candidates(1, 1, [2, 1])
        assert empty_grid == other

    def test_board_round_trip(self, evil_grid):
        from sudoprop.samples import SAMPLE_PUZZLES
        board = evil_grid.to_board()
        assert isinstance(board, Board)
        assert board.to_string() == SAMPLE_PUZZLES["evil"]
        assert evil_grid.to_string() == SAMPLE_PUZZLES["evil"]
        assert Grid.from_board(board) == evil_grid

    def test_solved_and_unsolved_cells_are_row_major(self, evil_grid):
        solved = list(evil_grid.solved_cells())
        assert solved[0] == Possibility(1, 3, 5)
        assert solved[-1] == Possibility(9, 7, 4)
        assert len(solved) == 26
        assert next(evil_grid.unsolved_cells()) == (1, 1)


class TestBlocks:
    """Tests for block helpers."""

    def test_block_of(self):
        assert block_of(1, 1) == (1, 1)
        assert block_of(4, 2) == (2, 1)
        assert block_of(9, 6) == (3, 2)

    def test_block_cells(self):
        cells = block_cells(2, 3)
        assert len(cells) == 9
        assert cells[0] == (4, 7)
        assert cells[-1] == (6, 9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
