"""Shared fixtures for the sudoprop test suite."""

import pytest

from sudoprop.core.grid import Grid
from sudoprop.samples import SAMPLE_PUZZLES


@pytest.fixture
def evil_grid():
    """Candidate grid of the evil sample: 26 givens, every other cell unknown."""
    return Grid.from_string(SAMPLE_PUZZLES["evil"])


@pytest.fixture
def empty_grid():
    return Grid()
