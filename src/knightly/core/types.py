"""Square type alias and coordinate helpers.

Board layout (row-major, viewed from white's side)::

    row 0:  a8 b8 c8 d8 e8 f8 g8 h8   <- black back rank
    row 1:  a7 ...                  h7
    ...
    row 7:  a1 b1 c1 d1 e1 f1 g1 h1   <- white back rank

A square is a ``(row, col)`` pair; the linear index used by the search is
``row * 8 + col``.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

_FILES = "abcdefgh"


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is a ``(row, col)`` pair inside the board."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    return (
        isinstance(row, int) and isinstance(col, int) and 0 <= row < 8 and 0 <= col < 8
    )


def square_index(sq: Square) -> int:
    """Linear index 0–63, e.g. a8 → 0, h1 → 63."""
    return sq[0] * 8 + sq[1]


def index_square(index: int) -> Square:
    """Inverse of :func:`square_index`."""
    return divmod(index, 8)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return _FILES[col] + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (8 - int(name[1]), _FILES.index(name[0]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
