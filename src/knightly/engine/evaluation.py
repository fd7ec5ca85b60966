"""Material evaluation."""

from __future__ import annotations

from knightly.core.board import Board
from knightly.core.enums import Color, PieceType
from knightly.core.move import Move
from knightly.core.move_generator import MoveGenerator
from knightly.core.types import Square

# The king entry is a sentinel: legal play never captures a king.
PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 1000,
}

MATE_SCORE = float("inf")


def material_balance(board: Board, color: Color) -> int:
    """Sum of piece values, positive for *color* and negative for its opponent."""
    score = 0
    for _sq, piece in board.pieces():
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == color else -value
    return score


def captured_value(board: Board, move: Move, en_passant: Square | None = None) -> int:
    """Value of the piece *move* captures; 0 for a quiet move.

    An en passant capture is worth a pawn even though its destination is empty.
    """
    target = board[move.to_sq]
    if target is not None:
        return PIECE_VALUES[target.piece_type]
    if MoveGenerator(board, en_passant).is_en_passant(move.from_sq, move.to_sq):
        return PIECE_VALUES[PieceType.PAWN]
    return 0
