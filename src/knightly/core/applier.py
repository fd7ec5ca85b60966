"""Move application: Board + Move + GameContext → next Board and GameContext."""

from __future__ import annotations

from knightly.core.board import Board
from knightly.core.context import GameContext, PendingPromotion
from knightly.core.enums import PieceType
from knightly.core.move import Move
from knightly.core.move_generator import MoveGenerator, castle_rook_squares
from knightly.core.piece import Piece
from knightly.core.types import Square, is_valid_square

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


def apply_move(
    board: Board,
    move: Move,
    context: GameContext,
    *,
    auto_promote: bool = True,
) -> tuple[Board, GameContext] | None:
    """Play *move* on *board* and return the next snapshot and context.

    The move is expected to have passed :meth:`MoveGenerator.is_valid_move`;
    only an empty or off-board source is rejected (``None``).

    With ``auto_promote`` a pawn reaching the far rank becomes a queen.
    Otherwise the pawn is left on its promotion square, the returned context
    carries a :class:`PendingPromotion` and the turn does not pass until
    :func:`complete_promotion` is called.

    Terminal flags on the returned context are reset; refresh them with
    :meth:`Rules.assess <knightly.core.rules.Rules.assess>`.
    """
    from_sq, to_sq = move.from_sq, move.to_sq
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return None
    piece = board[from_sq]
    if piece is None:
        return None

    gen = MoveGenerator(board, context.en_passant)
    changes: dict[Square, Piece | None] = {from_sq: None}

    if gen.is_en_passant(from_sq, to_sq):
        # Captured pawn sits beside the mover: destination file, origin row.
        changes[(from_sq[0], to_sq[1])] = None
    elif gen.is_castling(from_sq, to_sq):
        rook_from, rook_to = castle_rook_squares(from_sq, to_sq)
        rook = board[rook_from]
        if rook is not None and rook.piece_type == PieceType.ROOK:
            changes[rook_from] = None
            changes[rook_to] = rook

    pending: PendingPromotion | None = None
    placed = piece
    if piece.piece_type == PieceType.PAWN and to_sq[0] == piece.color.promotion_row:
        if auto_promote:
            placed = piece.promoted(PieceType.QUEEN)
        else:
            pending = PendingPromotion(to_sq, piece.color)
    changes[to_sq] = placed

    next_en_passant: Square | None = None
    if piece.piece_type == PieceType.PAWN and abs(to_sq[0] - from_sq[0]) == 2:
        next_en_passant = ((from_sq[0] + to_sq[0]) // 2, from_sq[1])

    next_context = GameContext(
        side_to_move=piece.color if pending else piece.color.opposite,
        en_passant=next_en_passant,
        pending_promotion=pending,
    )
    return board.replace(changes), next_context


def complete_promotion(
    board: Board,
    context: GameContext,
    piece_type: PieceType,
) -> tuple[Board, GameContext] | None:
    """Substitute *piece_type* for the pawn awaiting promotion.

    Returns ``None`` when no promotion is pending or *piece_type* is not one
    of :data:`PROMOTION_CHOICES`.
    """
    pending = context.pending_promotion
    if pending is None or piece_type not in PROMOTION_CHOICES:
        return None
    pawn = board[pending.square]
    if pawn is None or pawn.piece_type != PieceType.PAWN or pawn.color != pending.color:
        return None

    next_board = board.replace({pending.square: pawn.promoted(piece_type)})
    next_context = GameContext(side_to_move=pending.color.opposite, en_passant=None)
    return next_board, next_context
