"""Validation utilities for solved grids."""

from __future__ import annotations
import numpy as np
from typing import Optional

from .grid import CandidateGrid
from .parser import clean_grid

_FULL = np.arange(1, 10)


def clues_array(text: str) -> np.ndarray:
    """
    9x9 array of the clues in a puzzle string, 0 for blanks.

    Raises:
        ValueError: If the text does not hold exactly 81 grid characters.
    """
    cells = clean_grid(text)
    if len(cells) != 81:
        raise ValueError(f"String length must be 81, got {len(cells)}")
    values = [0 if c in "0." else int(c) for c in cells]
    return np.array(values, dtype=np.int32).reshape(9, 9)


def _is_permutation(values: np.ndarray) -> bool:
    return np.array_equal(np.sort(values.flatten()), _FULL)


def is_valid_solution(grid: np.ndarray) -> bool:
    """
    Check that every row, column and box of a 9x9 array holds 1-9 once.

    Args:
        grid: Array of digits, e.g. from `CandidateGrid.to_array`.
    """
    if grid.shape != (9, 9):
        return False

    for i in range(9):
        if not _is_permutation(grid[i, :]) or not _is_permutation(grid[:, i]):
            return False

    for box_row in range(0, 9, 3):
        for box_col in range(0, 9, 3):
            if not _is_permutation(grid[box_row:box_row + 3, box_col:box_col + 3]):
                return False

    return True


def validate_solution(puzzle: str, solution: Optional[CandidateGrid]) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle text.
        solution: The solved grid, or None.

    Returns:
        True if solution is complete, valid and keeps every clue.
    """
    if solution is None:
        return False

    clues = clues_array(puzzle)
    solved = solution.to_array()
    given = clues != 0
    if not np.array_equal(clues[given], solved[given]):
        return False

    return is_valid_solution(solved)
