"""Depth-first search with backtracking over candidate grids."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.exceptions import Contradiction
from ..core.grid import CandidateGrid
from ..core.topology import ALL_DIGITS, SQUARES, UNITS
from .propagation import assign

log = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected while searching."""
    nodes_explored: int = 0
    backtracks: int = 0
    max_depth: int = 0


def is_unit_solved(grid: CandidateGrid, unit: Tuple[str, ...]) -> bool:
    """True if the unit's squares hold 1-9 as singletons, each once."""
    digits = [d for s in unit for d in grid.values[s]]
    return len(digits) == 9 and set(digits) == ALL_DIGITS


def is_solved(grid: Optional[CandidateGrid]) -> bool:
    """True if every unit is solved. A missing grid is never solved."""
    if grid is None:
        return False
    return all(is_unit_solved(grid, unit) for unit in UNITS)


def select_square(grid: CandidateGrid) -> Optional[str]:
    """
    Select the most constrained undetermined square (MRV heuristic).

    Picks the square with the fewest candidates among those with more
    than one; ties go to the earliest square in row-major order.
    """
    best_square = None
    min_candidates = 10

    for square in SQUARES:
        n = len(grid.values[square])
        if 1 < n < min_candidates:
            best_square = square
            min_candidates = n
            if n == 2:
                break

    return best_square


def search(
    grid: CandidateGrid,
    stats: Optional[SearchStats] = None,
    depth: int = 0,
) -> CandidateGrid:
    """
    Search for a solution starting from a propagated grid.

    Each candidate is tried on its own copy of the grid, so a failed
    branch is simply dropped. A grid that is already solved is returned
    as is.

    Args:
        grid: Grid to search from. It is not modified.
        stats: Optional counters to update.
        depth: Current recursion depth.

    Returns:
        A solved grid. Its elimination count includes the work spent in
        branches that were abandoned on the way.

    Raises:
        Contradiction: No candidate of the chosen square leads to a
            solution.
    """
    if stats is None:
        stats = SearchStats()
    stats.max_depth = max(stats.max_depth, depth)

    if is_solved(grid):
        return grid

    square = select_square(grid)
    if square is None:
        raise Contradiction("grid is complete but not a solution",
                            eliminations=grid.eliminations)

    total = grid.eliminations
    for digit in sorted(grid.values[square]):
        stats.nodes_explored += 1
        branch = grid.copy()
        branch.eliminations = total
        log.debug("depth %d: trying %s=%d", depth, square, digit)
        try:
            return search(assign(branch, square, digit), stats, depth + 1)
        except Contradiction as e:
            stats.backtracks += 1
            total = e.eliminations
            log.debug("depth %d: %s=%d failed (%s)", depth, square, digit, e)

    raise Contradiction(f"no candidate of {square} leads to a solution",
                        square=square, eliminations=total)
