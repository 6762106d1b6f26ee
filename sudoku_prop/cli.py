"""Command-line interface for the propagation solver."""

import argparse
import logging
import os
import sys
import time

from .batch import BatchSolver
from .batch.visualizer import Visualizer
from .core.exceptions import Contradiction, MalformedPuzzleError
from .solvers.propagation import parse_grid
from .solver import PropagationSolver, SolveResult


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using constraint propagation and search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a single puzzle
  sudoku-prop solve "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"

  # Solve every puzzle in a file, one per line
  sudoku-prop batch top95.txt

  # Puzzles separated by a marker line, solved on 4 processes
  sudoku-prop batch easy50.txt --separator "========" --workers 4
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a single puzzle")
    solve_parser.add_argument(
        "puzzle", type=str,
        help="Puzzle string (81 cells, 0 or . for blanks)"
    )

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Solve all puzzles in a file")
    batch_parser.add_argument(
        "file", type=str,
        help="Text file with puzzles"
    )
    batch_parser.add_argument(
        "--separator", "-s", type=str, default="\n",
        help="Separator between puzzles (default: newline)"
    )
    batch_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Solutions file (default: input name with .out extension)"
    )
    batch_parser.add_argument(
        "--workers", "-w", type=int, default=1,
        help="Number of worker processes (default: 1)"
    )
    batch_parser.add_argument(
        "--json", type=str, default=None,
        help="Save per-puzzle results and summary to this JSON file"
    )
    batch_parser.add_argument(
        "--charts", type=str, default=None,
        help="Directory for timing charts"
    )
    batch_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "batch":
        cmd_batch(args)


def cmd_solve(args):
    """Handle the solve command."""
    solver = PropagationSolver()
    start_time = time.perf_counter()

    try:
        puzzle = parse_grid(args.puzzle)
    except MalformedPuzzleError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)
    except Contradiction as e:
        result = SolveResult(eliminations=e.eliminations,
                             time_seconds=time.perf_counter() - start_time)
    else:
        print("Input puzzle (after propagation):")
        print(puzzle)
        print()
        result = solver.solve_grid(puzzle, start_time)

    if result.solved:
        print(f"✓ Solved in {result.time_seconds:.4f}s")
        print(result.grid)
    else:
        print("✗ No solution")

    print(f"  Eliminations: {result.eliminations:,}")
    print(f"  Branches: {result.nodes_explored:,}")
    print(f"  Backtracks: {result.backtracks:,}")


def cmd_batch(args):
    """Handle the batch command."""
    if not os.path.isfile(args.file):
        print(f"Error: no such file {args.file}")
        sys.exit(1)

    solver = BatchSolver(workers=args.workers, show_progress=not args.no_progress)
    results = solver.solve_file(args.file, separator=args.separator, output_path=args.output)

    summary = solver.get_summary(args.file)
    print(summary.format())

    if args.json:
        solver.save_results(args.json, args.file)
        print(f"Results saved to {args.json}")

    if args.charts:
        visualizer = Visualizer(results, args.charts)
        charts = visualizer.generate_all()
        print(f"Charts saved to {args.charts}/")
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")


if __name__ == "__main__":
    main()
