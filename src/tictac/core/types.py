"""Square type alias, line table and coordinate helpers.

Board layout (row-major)::

    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0-8
Line: TypeAlias = tuple[Square, Square, Square]

BOARD_SIZE = 3
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

# Order matters: rows, then columns, then diagonals.
LINES: tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

CENTER: Square = 4
CORNERS: tuple[Square, ...] = (0, 2, 6, 8)
SIDES: tuple[Square, ...] = (1, 3, 5, 7)


def row_of(sq: Square) -> int:
    """Row index 0-2."""
    return sq // BOARD_SIZE


def col_of(sq: Square) -> int:
    """Column index 0-2."""
    return sq % BOARD_SIZE


def make_square(row: int, col: int) -> Square:
    """Create square from row (0-2) and column (0-2)."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Invalid coordinates: ({row}, {col})")
    return row * BOARD_SIZE + col


def is_valid_square(sq: object) -> bool:
    """Check whether *sq* is an integer square index in [0, 9).

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    return isinstance(sq, int) and not isinstance(sq, bool) and 0 <= sq < SQUARE_COUNT
