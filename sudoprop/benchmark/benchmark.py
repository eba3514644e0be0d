"""Benchmark harness: run solver configurations over the sample puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Dict, Any, Optional
from concurrent.futures import ThreadPoolExecutor, TimeoutError
import functools
import json
import os

from tqdm import tqdm

from ..core.board import Board
from ..core.validator import is_valid_solution
from ..samples import SAMPLE_PUZZLES, get_sample
from ..solvers import BaseSolver, PropagationSolver

SolverFactory = Callable[[], BaseSolver]


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle: str
    algorithm: str
    solved: bool
    valid: bool
    time_seconds: float
    memory_bytes: int
    cycles: int
    guesses: int
    rollbacks: int
    max_guess_depth: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "valid": self.valid,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "cycles": self.cycles,
            "guesses": self.guesses,
            "rollbacks": self.rollbacks,
            "max_guess_depth": self.max_guess_depth,
            **self.extra
        }


class Benchmark:
    """
    Benchmark framework for comparing propagation solver configurations.

    Runs each configuration on each sample puzzle and collects the cycle,
    guess and timing metrics of every run.
    """

    def __init__(
        self,
        solvers: Optional[Dict[str, SolverFactory]] = None,
        puzzles: Optional[Dict[str, Board]] = None,
        repeats: int = 1,
        timeout_seconds: float = 30.0,
    ):
        """
        Initialize the benchmark.

        Args:
            solvers: Dict of name -> zero-argument solver factory, such as a
                     solver class (default: with and without locked-candidate
                     eliminations). Every run gets a fresh solver.
            puzzles: Dict of name -> puzzle board (default: all samples).
            repeats: Runs per puzzle per solver.
            timeout_seconds: Maximum time per puzzle per solver.
        """
        if solvers is None:
            self.solvers = {
                "Propagation": PropagationSolver,
                "Propagation (no aligned blocks)": functools.partial(
                    PropagationSolver, use_aligned_blocks=False),
            }
        else:
            self.solvers = solvers

        if puzzles is None:
            puzzles = {name: get_sample(name) for name in SAMPLE_PUZZLES}
        self.puzzles = puzzles
        self.repeats = repeats
        self.timeout_seconds = timeout_seconds
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        total_tests = len(self.puzzles) * len(self.solvers) * self.repeats
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_name, puzzle in self.puzzles.items():
            for solver_name, factory in self.solvers.items():
                for _ in range(self.repeats):
                    result = self._run_single(puzzle, puzzle_name, solver_name, factory())
                    self.results.append(result)
                    pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: Board,
        puzzle_name: str,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        failed = dict(
            puzzle=puzzle_name,
            algorithm=solver_name,
            solved=False,
            valid=False,
            time_seconds=self.timeout_seconds,
            memory_bytes=0,
            cycles=0,
            guesses=0,
            rollbacks=0,
            max_guess_depth=0,
        )

        # The solve itself is synchronous; the worker only gives us a deadline
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(solver.solve, puzzle)
        try:
            result = future.result(timeout=self.timeout_seconds)
        except TimeoutError:
            return BenchmarkResult(**failed, extra={"error": "Timeout"})
        finally:
            executor.shutdown(wait=False)

        stats = result.stats
        return BenchmarkResult(
            puzzle=puzzle_name,
            algorithm=solver_name,
            solved=stats.solved,
            valid=stats.solved and is_valid_solution(puzzle, result.to_board()),
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            cycles=stats.cycles,
            guesses=stats.guesses,
            rollbacks=stats.rollbacks,
            max_guess_depth=stats.max_guess_depth,
            extra=dict(stats.extra),
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "puzzles": list(self.puzzles),
            "solvers_tested": list(self.solvers),
            "repeats": self.repeats,
            "results_by_algorithm": {},
            "results_by_puzzle": {},
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            summary["results_by_algorithm"][solver_name] = self._aggregate(solver_results)

        for puzzle_name in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle == puzzle_name]
            summary["results_by_puzzle"][puzzle_name] = self._aggregate(puzzle_results)

        return summary

    @staticmethod
    def _aggregate(results: List[BenchmarkResult]) -> Dict[str, Any]:
        if not results:
            return {}
        solved = [r for r in results if r.solved]
        n = len(results)
        return {
            "total_tested": n,
            "total_solved": len(solved),
            "accuracy": len(solved) / n * 100,
            "all_valid": all(r.valid for r in solved),
            "avg_time_seconds": sum(r.time_seconds for r in results) / n,
            "avg_memory_mb": sum(r.memory_bytes for r in results) / n / (1024 * 1024),
            "avg_cycles": sum(r.cycles for r in results) / n,
            "avg_guesses": sum(r.guesses for r in results) / n,
            "max_guess_depth": max(r.max_guess_depth for r in results),
        }

    def save_results(self, output_dir: str) -> str:
        """
        Save raw results and summary to JSON.

        Returns:
            Path of the results file.
        """
        os.makedirs(output_dir, exist_ok=True)

        results_path = os.path.join(output_dir, "benchmark_results.json")
        with open(results_path, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_path = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_path, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        return results_path
