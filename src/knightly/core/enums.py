"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a forward pawn step (white moves toward row 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_row(self) -> int:
        """Row holding this side's king and rooks at the start."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_row(self) -> int:
        """Row holding this side's pawns at the start."""
        return 6 if self == Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """Farthest row from this side, where its pawns promote."""
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS


class GameEndReason(IntEnum):
    """Why a game stopped."""

    NONE = 0
    CHECKMATE = 1
    STALEMATE = 2
    RESIGNATION = 3
