"""GameContext — the caller-owned state threaded alongside each Board."""

from __future__ import annotations

from dataclasses import dataclass, replace

from knightly.core.enums import Color, GameEndReason, GameResult
from knightly.core.types import Square


@dataclass(frozen=True, slots=True)
class PendingPromotion:
    """A pawn standing on its promotion square, waiting for a piece choice."""

    square: Square
    color: Color


@dataclass(frozen=True, slots=True)
class GameContext:
    """Side to move, en passant target, pending promotion and terminal flags.

    The core never stores a context; it receives one and returns a new one.
    """

    side_to_move: Color = Color.WHITE
    en_passant: Square | None = None
    pending_promotion: PendingPromotion | None = None
    in_check: bool = False
    result: GameResult = GameResult.IN_PROGRESS
    end_reason: GameEndReason = GameEndReason.NONE

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    def with_result(
        self, result: GameResult, reason: GameEndReason, *, in_check: bool = False
    ) -> GameContext:
        return replace(self, result=result, end_reason=reason, in_check=in_check)

    def resigned(self, color: Color) -> GameContext:
        """Context after *color* resigns."""
        return self.with_result(
            GameResult.win_for(color.opposite),
            GameEndReason.RESIGNATION,
            in_check=self.in_check,
        )
