"""Propagation and search over candidate grids."""

from .propagation import assign, eliminate, parse_grid
from .search import SearchStats, is_solved, search, select_square

__all__ = [
    "assign",
    "eliminate",
    "parse_grid",
    "SearchStats",
    "is_solved",
    "search",
    "select_square",
]
