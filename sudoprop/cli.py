"""Command-line interface for the propagation Sudoku solver."""

import argparse
import json
import logging
import sys

from .benchmark import Benchmark
from .core.board import Board
from .core.validator import duplicate_givens
from .samples import SAMPLE_PUZZLES, get_sample
from .solvers import PropagationSolver


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="sudoprop",
        description="Sudoku solver using constraint propagation with backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a sample puzzle
  sudoprop solve --sample evil --verbose

  # Solve a puzzle string
  sudoprop solve --puzzle "530070000600195000..."

  # Benchmark every sample puzzle
  sudoprop benchmark --repeats 5 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--sample", "-s", choices=list(SAMPLE_PUZZLES),
        help="Name of a built-in sample puzzle"
    )
    solve_parser.add_argument(
        "--max-guesses", type=int, default=100_000,
        help="Fail after this many guesses (default: 100000, 0 disables guessing)"
    )
    solve_parser.add_argument(
        "--no-aligned", action="store_true",
        help="Disable locked-candidate (aligned block) eliminations"
    )
    solve_parser.add_argument(
        "--json", action="store_true",
        help="Print the result as JSON"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show solving statistics and debug logging"
    )

    # Samples command
    samples_parser = subparsers.add_parser("samples", help="List the built-in sample puzzles")
    samples_parser.add_argument(
        "--show", action="store_true",
        help="Print each puzzle grid"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark the solver on the samples")
    bench_parser.add_argument(
        "--repeats", "-n", type=int, default=1,
        help="Runs per puzzle per configuration (default: 1)"
    )
    bench_parser.add_argument(
        "--timeout", "-t", type=float, default=30.0,
        help="Seconds allowed per solve (default: 30)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Directory for JSON results"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "solve":
        return cmd_solve(args)
    elif args.command == "samples":
        return cmd_samples(args)
    elif args.command == "benchmark":
        return cmd_benchmark(args)
    return 1


def cmd_solve(args) -> int:
    """Handle the solve command."""
    # Parse puzzle
    try:
        board = get_sample(args.sample) if args.sample else Board.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        return 1

    solver = PropagationSolver(
        max_guesses=args.max_guesses,
        use_aligned_blocks=not args.no_aligned,
    )
    result = solver.solve(board)
    stats = result.stats

    if args.json:
        print(json.dumps({
            "puzzle": board.to_string(),
            "solution": result.grid.to_string(),
            "status": result.status.value,
            **stats.to_dict(),
        }, indent=2))
        return 0 if result.solved else 1

    print("Input puzzle:")
    print(board)
    print()

    if result.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
    else:
        print(f"✗ Failed to solve: {result.error}")
        for unit, index, digit in duplicate_givens(board):
            print(f"  {digit} is given more than once in {unit} {index}")

    if args.verbose:
        print(f"  Cycles: {stats.cycles:,}")
        print(f"  Guesses: {stats.guesses:,} (max depth {stats.max_guess_depth})")
        print(f"  Rollbacks: {stats.rollbacks:,}")
        print(f"  Candidates removed: {stats.removed:,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")

    print(result.to_board())
    return 0 if result.solved else 1


def cmd_samples(args) -> int:
    """Handle the samples command."""
    for name, puzzle in SAMPLE_PUZZLES.items():
        board = get_sample(name)
        print(f"{name}: {puzzle} ({board.count_filled()} clues)")
        if args.show:
            print(board)
            print()
    return 0


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    benchmark = Benchmark(repeats=args.repeats, timeout_seconds=args.timeout)

    print("=" * 60)
    print("SUDOPROP BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {', '.join(benchmark.puzzles)}")
    print(f"Configurations: {', '.join(benchmark.solvers)}")
    print(f"Repeats: {args.repeats}")
    print("=" * 60)

    benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy Configuration:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Cycles: {stats['avg_cycles']:.1f}")
        print(f"  Avg Guesses: {stats['avg_guesses']:.1f}")

    if args.output:
        path = benchmark.save_results(args.output)
        print(f"\nResults saved to {path}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
