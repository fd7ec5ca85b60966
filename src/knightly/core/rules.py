"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from knightly.core.enums import Color, GameEndReason, GameResult
from knightly.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from knightly.core.board import Board
    from knightly.core.context import GameContext
    from knightly.core.types import Square


class Rules:
    """Stateless terminal-state predicates over a :class:`Board` snapshot.

    Nothing is cached: every call recomputes from the board it is given.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_any_legal_move(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        return MoveGenerator(board, en_passant).has_any_legal_move(color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        gen = MoveGenerator(board, en_passant)
        if not gen.is_in_check(color):
            return False
        return not gen.has_any_legal_move(color)

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> bool:
        gen = MoveGenerator(board, en_passant)
        if gen.is_in_check(color):
            return False
        return not gen.has_any_legal_move(color)

    @staticmethod
    def game_result(
        board: Board, color: Color, en_passant: Square | None = None
    ) -> tuple[GameResult, GameEndReason]:
        """Result with *color* to move."""
        gen = MoveGenerator(board, en_passant)
        if gen.has_any_legal_move(color):
            return GameResult.IN_PROGRESS, GameEndReason.NONE
        if gen.is_in_check(color):
            return GameResult.win_for(color.opposite), GameEndReason.CHECKMATE
        return GameResult.DRAW, GameEndReason.STALEMATE

    @staticmethod
    def assess(board: Board, context: GameContext) -> GameContext:
        """Refresh the check and terminal flags of *context* for the side to move.

        Left untouched while a promotion choice is pending, since the move
        that reached the last rank is not finished yet.
        """
        if context.pending_promotion is not None:
            return context
        color = context.side_to_move
        in_check = Rules.is_in_check(board, color)
        result, reason = Rules.game_result(board, color, context.en_passant)
        return replace(context, in_check=in_check, result=result, end_reason=reason)
