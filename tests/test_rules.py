"""Unit tests for the elimination rules."""

import pytest
from sudoprop.core.grid import Grid, Possibility
from sudoprop.propagation.rules import (
    Alignment,
    aligned_block_eliminations,
    block_eliminations,
    check_alignment,
    row_column_eliminations,
    scan_block,
)


class TestRowColumnEliminations:

    def test_counts_unknown_peers(self, evil_grid):
        """Row 6 has 5 unknown peers, column 9 has 6."""
        found = row_column_eliminations(evil_grid, 6, 9, 8)
        assert len(found) == 11
        assert Possibility(1, 9, 8) in found
        assert Possibility(6, 2, 8) in found
        assert Possibility(4, 9, 8) not in found  # given 6
        assert all(p.digit == 8 for p in found)

    def test_does_not_mutate(self, evil_grid):
        before = evil_grid.copy()
        row_column_eliminations(evil_grid, 6, 9, 8)
        assert evil_grid == before

    def test_full_grid_has_nothing_left(self, empty_grid):
        assert len(row_column_eliminations(empty_grid, 5, 5, 1)) == 16
        for r in range(1, 10):
            empty_grid.set_candidates(r, 5, [2])
        for c in range(1, 10):
            empty_grid.set_candidates(5, c, [2])
        assert row_column_eliminations(empty_grid, 5, 5, 1) == []


class TestBlockEliminations:

    def test_counts_unknown_block_cells(self, evil_grid):
        found = block_eliminations(evil_grid, 4, 2, 8)
        assert sorted(found) == [
            Possibility(4, 1, 8),
            Possibility(5, 1, 8),
            Possibility(5, 2, 8),
            Possibility(6, 2, 8),
            Possibility(6, 3, 8),
        ]

    def test_excludes_the_cell_itself(self, empty_grid):
        found = block_eliminations(empty_grid, 5, 5, 3)
        assert len(found) == 8
        assert Possibility(5, 5, 3) not in found


class TestAlignedBlockEliminations:

    def test_row_alignment(self, evil_grid):
        """Digit 9 locked to row 9 of the bottom-left block."""
        found = aligned_block_eliminations(evil_grid, 1, 9, 9, by_row=True)
        assert sorted(found) == [
            Possibility(9, 4, 9),
            Possibility(9, 5, 9),
            Possibility(9, 8, 9),
            Possibility(9, 9, 9),
        ]

    def test_column_alignment(self, evil_grid):
        """Digit 1 locked to column 1 of the top-left block."""
        found = aligned_block_eliminations(evil_grid, 1, 1, 1, by_row=False)
        assert [p.row for p in found] == [4, 5, 7, 8, 9]
        assert all(p.col == 1 for p in found)

    def test_at_most_six(self, empty_grid):
        found = aligned_block_eliminations(empty_grid, 2, 5, 4, by_row=True)
        assert len(found) == 6
        assert {p.col for p in found} == {1, 2, 3, 7, 8, 9}


class TestScanBlock:

    def test_scan_solved_block(self, evil_grid):
        scan = scan_block(evil_grid, 3, 2, 6)
        assert len(scan.cells) == 6
        assert scan.solved
        assert scan.cells[0] == (7, 5)

    def test_scan_unsolved_block(self, evil_grid):
        scan = scan_block(evil_grid, 1, 1, 1)
        assert not scan.solved
        assert len(scan.cells) == 7  # (1, 3) and (2, 1) are givens

    def test_no_candidates_left(self, empty_grid):
        for r in range(1, 4):
            for c in range(1, 4):
                empty_grid.remove_candidate(r, c, 7)
        scan = scan_block(empty_grid, 1, 1, 7)
        assert scan.cells == []
        assert not scan.solved
        assert check_alignment(scan.cells) is Alignment.NONE


class TestCheckAlignment:

    def test_column(self):
        assert check_alignment([(1, 1), (2, 1), (3, 1)]) is Alignment.COLUMN

    def test_row(self):
        assert check_alignment([(1, 1), (1, 3), (1, 1)]) is Alignment.ROW

    def test_not_aligned(self):
        assert check_alignment([(1, 1), (2, 3)]) is Alignment.NONE

    def test_single_cell_reports_row(self):
        assert check_alignment([(4, 4)]) is Alignment.ROW


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
