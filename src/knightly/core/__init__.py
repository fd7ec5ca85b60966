"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from knightly.core import Board, GameContext, MoveGenerator, Rules, apply_move

    board, ctx = Board.initial(), GameContext()
    gen = MoveGenerator(board, ctx.en_passant)
    move = gen.generate_legal_moves(ctx.side_to_move)[0]
    board, ctx = apply_move(board, move, ctx)
    ctx = Rules.assess(board, ctx)
"""

from knightly.core.applier import PROMOTION_CHOICES, apply_move, complete_promotion
from knightly.core.board import Board
from knightly.core.context import GameContext, PendingPromotion
from knightly.core.enums import Color, GameEndReason, GameResult, PieceType
from knightly.core.move import Move
from knightly.core.move_generator import MoveGenerator
from knightly.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from knightly.core.piece import Piece
from knightly.core.rules import Rules
from knightly.core.types import (
    Square,
    index_square,
    is_valid_square,
    parse_square,
    square_index,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "index_square",
    "is_valid_square",
    "parse_square",
    "square_index",
    "square_name",
    # Domain objects
    "Board",
    "GameContext",
    "Move",
    "MoveGenerator",
    "PendingPromotion",
    "Piece",
    "Rules",
    # Move application
    "PROMOTION_CHOICES",
    "apply_move",
    "complete_promotion",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
