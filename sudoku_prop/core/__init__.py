"""Core module for grid topology, candidate grids and parsing."""

from .exceptions import Contradiction, MalformedPuzzleError
from .topology import squares, units, units_of, peers_of
from .grid import CandidateGrid
from .parser import clean_grid, format_grid
from .validator import is_valid_solution, validate_solution

__all__ = [
    "Contradiction",
    "MalformedPuzzleError",
    "squares",
    "units",
    "units_of",
    "peers_of",
    "CandidateGrid",
    "clean_grid",
    "format_grid",
    "is_valid_solution",
    "validate_solution",
]
