"""Constraint propagation: eliminate candidates, assign digits, parse clues."""

from __future__ import annotations
from typing import Iterable

from ..core.exceptions import Contradiction, MalformedPuzzleError
from ..core.grid import CandidateGrid
from ..core.parser import clean_grid
from ..core.topology import ALL_DIGITS, COLS, PEERS, SQUARES, UNITS_OF


def eliminate(grid: CandidateGrid, square: str, digits: Iterable[int]) -> CandidateGrid:
    """
    Remove `digits` from the candidates of `square` and propagate.

    Two rules run recursively until nothing more is forced:
    - Naked single: if `square` is left with one digit, that digit is
      eliminated from all of its peers.
    - Hidden single: if a removed digit now fits in only one square of a
      unit containing `square`, it is assigned there.

    The grid is updated in place; after a contradiction it must be
    discarded.

    Args:
        grid: Grid to update.
        square: Target square.
        digits: Digits to remove. Digits already gone are ignored.

    Returns:
        The same grid, updated.

    Raises:
        Contradiction: A square lost its last candidate or a digit lost
            its last place in a unit.
    """
    old = grid.values[square]
    removed = old.intersection(digits)
    if not removed:
        return grid

    new = old - removed
    if not new:
        raise Contradiction(
            f"removed last candidate from {square}",
            square=square,
            eliminations=grid.eliminations,
        )

    grid.values[square] = new
    grid.eliminations += len(removed)

    if len(new) == 1:
        (last,) = new
        for peer in PEERS[square]:
            eliminate(grid, peer, (last,))

    for unit in UNITS_OF[square]:
        for digit in sorted(removed):
            places = [s for s in unit if digit in grid.values[s]]
            if not places:
                raise Contradiction(
                    f"no place left for {digit} in unit of {square}",
                    square=square,
                    eliminations=grid.eliminations,
                )
            if len(places) == 1:
                assign(grid, places[0], digit)

    return grid


def assign(grid: CandidateGrid, square: str, digit: int) -> CandidateGrid:
    """Force `square` to `digit` by eliminating every other candidate."""
    if digit not in ALL_DIGITS:
        raise ValueError(f"Digit must be 1-9, got {digit}")
    return eliminate(grid, square, ALL_DIGITS - {digit})


def parse_grid(text: str) -> CandidateGrid:
    """
    Build a propagated grid from a puzzle string.

    Characters other than 1-9, 0 and '.' are ignored, so the grid may be
    laid out over several lines or padded with separators. 0 and '.'
    mark blank squares.

    Args:
        text: Puzzle text.

    Returns:
        Grid with every clue assigned and propagated.

    Raises:
        MalformedPuzzleError: Fewer or more than 81 grid characters.
        Contradiction: The clues conflict with each other.
    """
    cells = clean_grid(text)
    if len(cells) != 81:
        raise MalformedPuzzleError(len(cells))

    grid = CandidateGrid.new_empty()
    for square, c in zip(SQUARES, cells):
        if c in COLS:
            assign(grid, square, int(c))
    return grid
