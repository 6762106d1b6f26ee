"""Batch solving of puzzle files with timing statistics."""

from __future__ import annotations
import json
import logging
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ..core.exceptions import MalformedPuzzleError
from ..solver import PropagationSolver

log = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Result of solving one puzzle from a batch."""
    puzzle_id: int
    puzzle: str
    solved: bool
    solution: str
    eliminations: int
    nodes_explored: int
    backtracks: int
    time_seconds: float
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "solved": self.solved,
            "solution": self.solution,
            "eliminations": self.eliminations,
            "nodes_explored": self.nodes_explored,
            "backtracks": self.backtracks,
            "time_seconds": self.time_seconds,
            **self.extra
        }


@dataclass
class BatchSummary:
    """Aggregate timing statistics over a batch."""
    solved: int
    total: int
    source: str
    total_seconds: float
    avg_seconds: float
    hz: float
    max_seconds: float
    min_seconds: float
    eliminations: int

    @classmethod
    def from_results(cls, results: List[BatchResult], source: str = "") -> BatchSummary:
        """Summarize a list of results. An empty batch gives all zeros."""
        times = [r.time_seconds for r in results]
        total_seconds = sum(times)
        return cls(
            solved=sum(1 for r in results if r.solved),
            total=len(results),
            source=source,
            total_seconds=total_seconds,
            avg_seconds=total_seconds / len(results) if results else 0.0,
            hz=len(results) / total_seconds if total_seconds > 0 else 0.0,
            max_seconds=max(times, default=0.0),
            min_seconds=min(times, default=0.0),
            eliminations=sum(r.eliminations for r in results),
        )

    def format(self) -> str:
        return (
            f"Solved {self.solved} of {self.total} puzzles from {self.source} "
            f"in {self.total_seconds:f} secs\n"
            f"\t(avg {self.avg_seconds:f} sec ({self.hz:f} Hz) "
            f"max {self.max_seconds:f} secs, min {self.min_seconds:f} secs, "
            f"{self.eliminations} eliminations)"
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def read_puzzles(path: str, separator: str = "\n") -> List[str]:
    """
    Read puzzles from a text file.

    Args:
        path: File to read.
        separator: String that separates puzzles. Empty tokens are dropped.
    """
    if not separator:
        raise ValueError("Separator must not be empty")
    with open(path, "r") as f:
        data = f.read()
    return [token for token in data.split(separator) if token.strip()]


def default_output_path(path: str) -> str:
    """Output file for a puzzle file: same name with '.txt' swapped for '.out'."""
    directory, base = os.path.split(path)
    if base.endswith(".txt"):
        base = base[:-len(".txt")]
    return os.path.join(directory, base + ".out")


def write_solutions(path: str, results: List[BatchResult]) -> None:
    """Write one 81-character solution per line, in puzzle order."""
    with open(path, "w") as f:
        for result in results:
            f.write(result.solution + "\n")


def _solve_one(puzzle_id: int, puzzle: str) -> BatchResult:
    try:
        result = PropagationSolver().solve(puzzle)
    except MalformedPuzzleError as e:
        return BatchResult(
            puzzle_id=puzzle_id,
            puzzle=puzzle,
            solved=False,
            solution='.' * 81,
            eliminations=0,
            nodes_explored=0,
            backtracks=0,
            time_seconds=0.0,
            extra={"error": str(e)}
        )

    return BatchResult(
        puzzle_id=puzzle_id,
        puzzle=puzzle,
        solved=result.solved,
        solution=result.to_string(),
        eliminations=result.eliminations,
        nodes_explored=result.nodes_explored,
        backtracks=result.backtracks,
        time_seconds=result.time_seconds
    )


class BatchSolver:
    """
    Solves a list of puzzles and collects per-puzzle statistics.

    Each puzzle is solved independently, so with `workers > 1` they are
    spread over a process pool. Results always come back in input order.
    """

    def __init__(self, workers: int = 1, show_progress: bool = True):
        """
        Initialize the batch solver.

        Args:
            workers: Number of worker processes. 1 solves in this process.
            show_progress: Show a tqdm progress bar.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers
        self.show_progress = show_progress
        self.results: List[BatchResult] = []

    def solve_all(self, puzzles: List[str]) -> List[BatchResult]:
        """
        Solve every puzzle.

        Returns:
            List of BatchResult objects, one per puzzle.
        """
        ids = list(range(len(puzzles)))
        pbar = tqdm(total=len(puzzles), desc="Solving", disable=not self.show_progress)

        if self.workers == 1:
            results = []
            for puzzle_id, puzzle in zip(ids, puzzles):
                results.append(_solve_one(puzzle_id, puzzle))
                pbar.update(1)
        else:
            results = []
            with ProcessPoolExecutor(max_workers=self.workers) as executor:
                for result in executor.map(_solve_one, ids, puzzles):
                    results.append(result)
                    pbar.update(1)

        pbar.close()

        for result in results:
            if "error" in result.extra:
                log.warning("Puzzle %d skipped: %s", result.puzzle_id, result.extra["error"])

        self.results = results
        return results

    def solve_file(
        self,
        path: str,
        separator: str = "\n",
        output_path: Optional[str] = None
    ) -> List[BatchResult]:
        """
        Solve all puzzles in a file and write the solutions next to it.

        Args:
            path: Puzzle file.
            separator: Puzzle separator.
            output_path: Solutions file (default: `default_output_path(path)`).
        """
        puzzles = read_puzzles(path, separator)
        log.info("Read %d puzzles from %s", len(puzzles), path)

        results = self.solve_all(puzzles)

        output_path = output_path or default_output_path(path)
        write_solutions(output_path, results)
        log.info("Solutions written to %s", output_path)
        return results

    def get_summary(self, source: str = "") -> BatchSummary:
        """Summary statistics of the last run."""
        return BatchSummary.from_results(self.results, source)

    def save_results(self, path: str, source: str = "") -> None:
        """Save per-puzzle results and the summary as JSON."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, "w") as f:
            json.dump({
                "summary": self.get_summary(source).to_dict(),
                "results": [r.to_dict() for r in self.results]
            }, f, indent=2)
