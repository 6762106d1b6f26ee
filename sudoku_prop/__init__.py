"""Sudoku solver using constraint propagation and backtracking search."""

from .core import CandidateGrid, Contradiction, MalformedPuzzleError, format_grid
from .solvers import is_solved, parse_grid
from .solver import PropagationSolver, SolveResult, solve

__version__ = "1.0.0"

__all__ = [
    "CandidateGrid",
    "Contradiction",
    "MalformedPuzzleError",
    "format_grid",
    "parse_grid",
    "is_solved",
    "PropagationSolver",
    "SolveResult",
    "solve",
]
