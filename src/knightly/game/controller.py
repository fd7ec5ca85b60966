"""GameController — the central orchestrator of a chess game.

Coordinates players, GameState and the core rules in the order
validate → apply → detect terminal state → prompt the next player.
Emits events via simple callbacks so a UI or tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from knightly.core.board import Board
from knightly.core.context import GameContext, PendingPromotion
from knightly.core.enums import Color, GameEndReason, GameResult, PieceType
from knightly.core.move import Move
from knightly.core.types import Square
from knightly.game.interfaces import GamePhase, IGameController, IPlayer
from knightly.game.player import AIPlayer
from knightly.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult, GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]
PromotionCallback = Callable[[PendingPromotion], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, switches turns,
    prompts the computer, notifies listeners.

    Methods are meant to be called from a single thread. A computer move
    computed elsewhere (e.g. by ``EngineWorker``) comes back through
    :meth:`submit_move` on that same thread.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def context(self) -> GameContext:
        return self._state.context

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        context: GameContext | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, context)

        state = self._state
        if not state.is_game_over and state.context.pending_promotion is None:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        self._after_move()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False
        if not self._state.is_legal(move):
            _LOGGER.debug("Rejected move %s for %s", move, self._state.side_to_move)
            return False

        mover = self.current_player
        # Only an interactive mover is asked which piece to promote to.
        auto_promote = mover is None or not mover.is_human
        record = self._state.apply_move(move, auto_promote=auto_promote)
        if record is None:
            return False

        self._emit_move(record)
        self._after_move()
        return True

    def choose_promotion(self, piece_type: PieceType) -> bool:
        if self._state.phase != GamePhase.AWAITING_PROMOTION:
            return False
        if not self._state.complete_promotion(piece_type):
            return False
        self._after_move()
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over()

    # ── Extras ───────────────────────────────────────────────────────────

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Where the side-to-move piece on *sq* may go (for move hints)."""
        return self._state.legal_destinations(sq)

    def play_ai_turn(self) -> bool:
        """Let the computer to move pick and play its move synchronously.

        Returns False when it is not a computer's turn or it has no move.
        """
        cp = self.current_player
        if not isinstance(cp, AIPlayer) or self._state.phase != GamePhase.THINKING:
            return False
        move = cp.choose_move(self._state.board, self._state.context)
        if move is None:
            return False
        return self.submit_move(move)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_move(self) -> None:
        state = self._state
        if state.is_game_over:
            self._emit_game_over()
            return

        pending = state.context.pending_promotion
        if pending is not None:
            self._emit_phase(GamePhase.AWAITING_PROMOTION)
            for cb in self.events.on_promotion_required:
                cb(pending)
            return

        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board, self._state.context)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self) -> None:
        state = self._state
        _LOGGER.info(
            "Game over: %s (%s) after %d plies",
            state.result.name,
            state.end_reason.name,
            state.ply_count,
        )
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(state.result, state.end_reason)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
