"""Errors raised while parsing and solving puzzles."""

from __future__ import annotations
from typing import Optional


class Contradiction(Exception):
    """
    A grid state that cannot lead to a solution.

    Raised when a square loses its last candidate or a digit has no
    remaining place in a unit. Search catches it and backtracks.

    Attributes:
        square: Square where the contradiction was detected, if known.
        eliminations: Elimination count reached when it was detected.
    """

    def __init__(self, message: str, square: Optional[str] = None, eliminations: int = 0):
        super().__init__(message)
        self.square = square
        self.eliminations = eliminations


class MalformedPuzzleError(ValueError):
    """Puzzle text does not reduce to exactly 81 grid characters."""

    def __init__(self, length: int):
        super().__init__(f"Puzzle must contain 81 cells (1-9, 0 or .), got {length}")
        self.length = length
