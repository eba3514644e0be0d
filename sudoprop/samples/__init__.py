"""Fixed sample puzzles."""

from .puzzles import SAMPLE_PUZZLES, get_sample, sample_names

__all__ = ["SAMPLE_PUZZLES", "get_sample", "sample_names"]
