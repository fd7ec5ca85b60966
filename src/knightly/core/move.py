"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from knightly.core.types import Square, index_square, parse_square, square_index, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable ``(from, to)`` pair.

    Special moves (castling, en passant, promotion) are recognised from the
    board when the move is validated or applied, not stored on the move.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse coordinate text such as ``"e2e4"``."""
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))

    # ── Linear encoding used by the search ───────────────────────────────

    @property
    def indices(self) -> tuple[int, int]:
        return square_index(self.from_sq), square_index(self.to_sq)

    @classmethod
    def from_indices(cls, from_index: int, to_index: int) -> Move:
        return cls(index_square(from_index), index_square(to_index))
