"""Knightly — chess rules engine and lightweight computer opponent.

Library entry points::

    import knightly

    board = knightly.create_initial_board()
    knightly.is_valid_move(board, (6, 4), (4, 4))      # e2-e4 → True
    move = knightly.get_ai_move(board, "hard", knightly.Color.WHITE)
"""

from __future__ import annotations

from knightly.core import (
    Board,
    Color,
    GameContext,
    GameEndReason,
    GameResult,
    Move,
    MoveGenerator,
    PendingPromotion,
    Piece,
    PieceType,
    Rules,
    Square,
    apply_move,
    complete_promotion,
)
from knightly.engine import Difficulty, SearchSettings, get_ai_move

__version__ = "0.1.0"


def create_initial_board() -> Board:
    """Standard starting position."""
    return Board.initial()


def is_valid_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    en_passant: Square | None = None,
) -> bool:
    """Fully legal move check, including castling, en passant and check-safety."""
    return MoveGenerator(board, en_passant).is_valid_move(from_sq, to_sq)


def king_in_check(board: Board, color: Color) -> bool:
    return Rules.is_in_check(board, color)


def is_checkmate(board: Board, color: Color, en_passant: Square | None = None) -> bool:
    return Rules.is_checkmate(board, color, en_passant)


def is_stalemate(board: Board, color: Color, en_passant: Square | None = None) -> bool:
    return Rules.is_stalemate(board, color, en_passant)


__all__ = [
    "Board",
    "Color",
    "Difficulty",
    "GameContext",
    "GameEndReason",
    "GameResult",
    "Move",
    "PendingPromotion",
    "Piece",
    "PieceType",
    "SearchSettings",
    "apply_move",
    "complete_promotion",
    "create_initial_board",
    "get_ai_move",
    "is_checkmate",
    "is_stalemate",
    "is_valid_move",
    "king_in_check",
]
