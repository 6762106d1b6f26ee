"""Puzzle-level solving API: parse, search and collect statistics."""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .core.exceptions import Contradiction
from .core.grid import CandidateGrid
from .core.parser import format_grid
from .solvers.propagation import parse_grid
from .solvers.search import SearchStats, is_solved, search

log = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Outcome of solving one puzzle."""
    # None when the puzzle has no solution
    grid: Optional[CandidateGrid] = None
    eliminations: int = 0

    # Search metrics
    nodes_explored: int = 0
    backtracks: int = 0
    time_seconds: float = 0.0

    @property
    def solved(self) -> bool:
        return is_solved(self.grid)

    def to_string(self) -> str:
        """81-character solution, or all dots if there is none."""
        if self.grid is None:
            return '.' * 81
        return format_grid(self.grid)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "solved": self.solved,
            "solution": self.to_string(),
            "eliminations": self.eliminations,
            "nodes_explored": self.nodes_explored,
            "backtracks": self.backtracks,
            "time_seconds": self.time_seconds,
        }


class PropagationSolver:
    """
    Sudoku solver using constraint propagation and depth-first search.

    Clues are assigned one by one with naked- and hidden-single
    propagation; if that does not finish the grid, the solver branches
    on the square with the fewest candidates and backtracks on
    contradiction.
    """

    name = "Propagation+Search"

    def solve(self, text: str) -> SolveResult:
        """
        Solve a puzzle string with timing.

        Args:
            text: 81 grid characters (1-9, 0 or .), other characters ignored.

        Returns:
            SolveResult with the solved grid, or grid None if the puzzle
            has no solution.

        Raises:
            MalformedPuzzleError: If the text is not an 81-cell grid.
        """
        start_time = time.perf_counter()

        try:
            grid = parse_grid(text)
        except Contradiction as e:
            log.debug("clues conflict: %s", e)
            return SolveResult(
                eliminations=e.eliminations,
                time_seconds=time.perf_counter() - start_time,
            )

        return self.solve_grid(grid, start_time)

    def solve_grid(self, grid: CandidateGrid, start_time: Optional[float] = None) -> SolveResult:
        """
        Search from an already parsed grid. The grid is not modified.

        Args:
            grid: Grid returned by `parse_grid`.
            start_time: `time.perf_counter()` value to time from
                (default: now).
        """
        if start_time is None:
            start_time = time.perf_counter()
        stats = SearchStats()

        try:
            solution = search(grid, stats)
            eliminations = solution.eliminations
        except Contradiction as e:
            log.debug("no solution: %s", e)
            solution = None
            eliminations = e.eliminations

        return SolveResult(
            grid=solution,
            eliminations=eliminations,
            nodes_explored=stats.nodes_explored,
            backtracks=stats.backtracks,
            time_seconds=time.perf_counter() - start_time,
        )


def solve(text: str) -> SolveResult:
    """Solve a puzzle string. See `PropagationSolver.solve`."""
    return PropagationSolver().solve(text)
