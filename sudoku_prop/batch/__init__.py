"""Batch module for solving puzzle files."""

from .batch import (
    BatchResult,
    BatchSolver,
    BatchSummary,
    default_output_path,
    read_puzzles,
    write_solutions,
)

__all__ = [
    "BatchResult",
    "BatchSolver",
    "BatchSummary",
    "default_output_path",
    "read_puzzles",
    "write_solutions",
]
