"""Unit tests for the raw board and validation helpers."""

import pytest
import numpy as np
from sudoprop.core.board import Board
from sudoprop.core.grid import Grid
from sudoprop.core.validator import (
    is_valid_placement,
    is_valid_solution,
    is_consistent,
    duplicate_givens,
)


TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestBoard:
    """Tests for Board class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = Board()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_set_and_get_are_one_based(self):
        """Test setting and getting values with 1-based coordinates."""
        board = Board()
        board.set(1, 1, 5)
        assert board.get(1, 1) == 5
        assert board.grid[0, 0] == 5
        assert not board.is_empty(1, 1)

        board.clear(1, 1)
        assert board.is_empty(1, 1)

    def test_rejects_out_of_range(self):
        board = Board()
        with pytest.raises(ValueError):
            board.set(0, 1, 5)
        with pytest.raises(ValueError):
            board.set(1, 10, 5)
        with pytest.raises(ValueError):
            board.set(1, 1, 10)

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Board(np.zeros((4, 4), dtype=np.int32))

    def test_is_valid(self):
        """Test board validation."""
        board = Board()
        assert board.is_valid()  # Empty board is valid

        board.set(1, 1, 5)
        board.set(1, 2, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"
        board = Board.from_string(puzzle_str)
        assert board.get(9, 9) == 9

    def test_from_string_accepts_dots_and_whitespace(self):
        dotted = TEST_PUZZLE.replace("0", ".")
        spaced = "\n".join(TEST_PUZZLE[i:i + 9] for i in range(0, 81, 9))
        assert Board.from_string(dotted) == Board.from_string(TEST_PUZZLE)
        assert Board.from_string(spaced) == Board.from_string(TEST_PUZZLE)

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            Board.from_string("123")
        with pytest.raises(ValueError):
            Board.from_string("x" + "0" * 80)

    def test_from_string_rejects_non_ascii_digits(self):
        """Unicode digits such as Arabic-Indic three are not givens."""
        with pytest.raises(ValueError, match="position 0"):
            Board.from_string("٣" + "0" * 80)

    def test_from_2d_list(self):
        """Test creating board from nested lists."""
        rows = [[int(c) for c in TEST_PUZZLE[i:i + 9]] for i in range(0, 81, 9)]
        board = Board.from_2d_list(rows)
        assert board == Board.from_string(TEST_PUZZLE)
        assert board.get(1, 2) == 3

        with pytest.raises(ValueError):
            Board.from_2d_list(rows[:8])
        with pytest.raises(ValueError):
            Board.from_2d_list([[10] * 9] * 9)

    def test_to_string(self):
        """Test converting board to string."""
        board = Board.from_string(TEST_PUZZLE)
        assert board.to_string() == TEST_PUZZLE

    def test_givens(self):
        board = Board.from_string(TEST_PUZZLE)
        givens = board.givens()
        assert len(givens) == board.count_filled() == 30
        assert givens[(1, 1)] == 5
        assert givens[(9, 9)] == 9
        assert (1, 3) not in givens
        assert Board.from_givens(givens) == board

    def test_copy(self):
        """Test board copy."""
        board = Board()
        board.set(5, 5, 7)
        copy = board.copy()

        assert copy.get(5, 5) == 7

        # Modify copy, original should be unchanged
        copy.set(5, 5, 8)
        assert board.get(5, 5) == 7

    def test_str_renders_boxes(self):
        text = str(Board.from_string(TEST_PUZZLE))
        lines = text.splitlines()
        assert len(lines) == 13
        assert lines[0] == "+-------+-------+-------+"
        assert lines[1] == "| 5 3 . | . 7 . | . . . |"


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = Board()
        board.set(1, 1, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 1, 6, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 6, 1, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 2, 2, 5)

        # Can place different value
        assert is_valid_placement(board, 1, 6, 7)

    def test_is_valid_solution(self):
        puzzle = Board.from_string(TEST_PUZZLE)
        solution = Board.from_string(TEST_SOLUTION)
        assert is_valid_solution(puzzle, solution)

        other = Board.from_string(TEST_SOLUTION)
        other.set(1, 1, 0)
        assert not is_valid_solution(puzzle, other)

    def test_is_consistent(self):
        grid = Grid.from_string(TEST_SOLUTION)
        assert is_consistent(grid)

        grid.set_candidates(1, 3, [4, 5])  # 5 is solved at (1, 1)
        assert not is_consistent(grid)

    def test_duplicate_givens(self):
        board = Board.from_string("55" + TEST_PUZZLE[2:])
        duplicates = duplicate_givens(board)
        assert ("row", 1, 5) in duplicates
        assert ("box", 1, 5) in duplicates
        assert duplicate_givens(Board.from_string(TEST_PUZZLE)) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
