"""Static structure of the 9x9 grid: squares, units and peers."""

from __future__ import annotations
from typing import Dict, FrozenSet, List, Tuple

DIGITS: Tuple[int, ...] = tuple(range(1, 10))
ALL_DIGITS: FrozenSet[int] = frozenset(DIGITS)

ROWS = "ABCDEFGHI"
COLS = "123456789"


def cross(rows: str, cols: str) -> List[str]:
    """Cross product of row letters and column digits, e.g. 'A1'."""
    return [r + c for r in rows for c in cols]


SQUARES: Tuple[str, ...] = tuple(cross(ROWS, COLS))

# Columns first, then rows, then boxes.
UNITS: Tuple[Tuple[str, ...], ...] = tuple(
    [tuple(cross(ROWS, c)) for c in COLS]
    + [tuple(cross(r, COLS)) for r in ROWS]
    + [
        tuple(cross(rs, cs))
        for rs in ("ABC", "DEF", "GHI")
        for cs in ("123", "456", "789")
    ]
)

UNITS_OF: Dict[str, Tuple[Tuple[str, ...], ...]] = {
    s: tuple(u for u in UNITS if s in u) for s in SQUARES
}

_INDEX: Dict[str, int] = {s: i for i, s in enumerate(SQUARES)}


def _peers(square: str) -> Tuple[str, ...]:
    members = {s for unit in UNITS_OF[square] for s in unit}
    members.discard(square)
    return tuple(sorted(members, key=_INDEX.__getitem__))


# Kept in canonical order so propagation visits peers deterministically.
PEERS: Dict[str, Tuple[str, ...]] = {s: _peers(s) for s in SQUARES}


def squares() -> Tuple[str, ...]:
    """The 81 square names in row-major order."""
    return SQUARES


def units() -> Tuple[Tuple[str, ...], ...]:
    """All 27 units: 9 columns, 9 rows, 9 boxes."""
    return UNITS


def units_of(square: str) -> Tuple[Tuple[str, ...], ...]:
    """The three units (column, row, box) containing `square`."""
    return UNITS_OF[square]


def peers_of(square: str) -> Tuple[str, ...]:
    """The 20 other squares sharing a unit with `square`."""
    return PEERS[square]


def square_index(square: str) -> int:
    """Position of `square` in the canonical order."""
    return _INDEX[square]


def position(square: str) -> Tuple[int, int]:
    """Zero-based (row, col) of a square name."""
    return ROWS.index(square[0]), COLS.index(square[1])
