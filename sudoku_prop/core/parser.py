"""Cleaning and formatting of 81-character puzzle strings."""

from __future__ import annotations

from .grid import CandidateGrid
from .topology import COLS, SQUARES

GRID_CHARS = frozenset(COLS + "0.")


def clean_grid(text: str) -> str:
    """Drop every character that is not 1-9, 0 or '.'."""
    return ''.join(c for c in text if c in GRID_CHARS)


def format_grid(grid: CandidateGrid) -> str:
    """81-character string of assigned digits, '.' for undetermined squares."""
    chars = []
    for square in SQUARES:
        digit = grid.digit(square)
        chars.append(str(digit) if digit else '.')
    return ''.join(chars)
