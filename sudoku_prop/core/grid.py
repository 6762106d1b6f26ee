"""Candidate grid: the set of still-possible digits for every square."""

from __future__ import annotations
import numpy as np
from typing import Dict, FrozenSet, Optional

from .topology import ALL_DIGITS, SQUARES, position


class CandidateGrid:
    """
    Maps each of the 81 squares to its remaining candidate digits.

    Candidate sets are frozensets, so copying the grid is a shallow dict
    copy and search branches never share mutable state. The grid also
    carries a running count of eliminated candidates.

    Only the propagation engine should change candidate sets; use
    `assign` and `eliminate` from `sudoku_prop.solvers.propagation`.
    """

    def __init__(
        self,
        values: Optional[Dict[str, FrozenSet[int]]] = None,
        eliminations: int = 0,
    ):
        """
        Initialize a grid.

        Args:
            values: Optional square -> candidates mapping. If None, every
                square holds all nine digits.
            eliminations: Starting elimination count.
        """
        if values is None:
            values = {s: ALL_DIGITS for s in SQUARES}
        elif set(values) != set(SQUARES):
            raise ValueError("Grid must define candidates for all 81 squares")
        self.values = values
        self.eliminations = eliminations

    @classmethod
    def new_empty(cls) -> CandidateGrid:
        """A grid with no constraints and a zero elimination count."""
        return cls()

    def copy(self) -> CandidateGrid:
        """Create an independent copy for a search branch."""
        return CandidateGrid(dict(self.values), self.eliminations)

    def candidates(self, square: str) -> FrozenSet[int]:
        """Current candidate set of `square`."""
        return self.values[square]

    def is_assigned(self, square: str) -> bool:
        """True if `square` is down to a single digit."""
        return len(self.values[square]) == 1

    def digit(self, square: str) -> int:
        """The assigned digit of `square`, or 0 if it is not a singleton."""
        cands = self.values[square]
        if len(cands) == 1:
            return next(iter(cands))
        return 0

    def count_assigned(self) -> int:
        """Number of singleton squares."""
        return sum(1 for s in SQUARES if self.is_assigned(s))

    def to_array(self) -> np.ndarray:
        """9x9 array of assigned digits, 0 where undetermined."""
        grid = np.zeros((9, 9), dtype=np.int32)
        for s in SQUARES:
            row, col = position(s)
            grid[row, col] = self.digit(s)
        return grid

    def __str__(self) -> str:
        """Pretty-print the assigned digits."""
        grid = self.to_array()
        lines = []
        horizontal_sep = '+' + ('-' * 7 + '+') * 3

        for i in range(9):
            if i % 3 == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(9):
                val = grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % 3 == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (
            f"CandidateGrid(assigned={self.count_assigned()}, "
            f"eliminations={self.eliminations})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateGrid):
            return False
        return self.values == other.values

    def __hash__(self) -> int:
        return hash(tuple(self.values[s] for s in SQUARES))
