"""Game state machine — tracks the current snapshot, phase and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from knightly.core.applier import apply_move, complete_promotion
from knightly.core.board import Board
from knightly.core.context import GameContext
from knightly.core.enums import Color, GameEndReason, GameResult, PieceType
from knightly.core.move import Move
from knightly.core.move_generator import MoveGenerator
from knightly.core.piece import Piece
from knightly.core.rules import Rules
from knightly.core.types import Square
from knightly.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    promotion: PieceType | None = None
    was_check: bool = False


@dataclass
class GameState:
    """Holds the caller-side game data: board, context, phase and history.

    Pure data and logic, independent of threads and UI. Each applied move
    replaces ``board`` and ``context`` with the snapshots returned by the core.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    context: GameContext = field(default_factory=GameContext, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, context: GameContext | None = None) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else Board.initial()
        self.context = Rules.assess(self.board, context or GameContext())
        self.move_history.clear()
        self._update_phase()

    # ── Move application ─────────────────────────────────────────────────

    def is_legal(self, move: Move) -> bool:
        """Legal for the side to move, with no game over or pending promotion."""
        if self.is_game_over or self.context.pending_promotion is not None:
            return False
        piece = self.board[move.from_sq]
        if piece is None or piece.color != self.context.side_to_move:
            return False
        gen = MoveGenerator(self.board, self.context.en_passant)
        return gen.is_valid_move(move.from_sq, move.to_sq)

    def apply_move(self, move: Move, *, auto_promote: bool = True) -> MoveRecord | None:
        """Apply a move and return the history record.

        Caller is responsible for the legality check.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            return None
        captured = self.board[move.to_sq]
        gen = MoveGenerator(self.board, self.context.en_passant)
        if gen.is_en_passant(move.from_sq, move.to_sq):
            captured = self.board[(move.from_sq[0], move.to_sq[1])]

        applied = apply_move(self.board, move, self.context, auto_promote=auto_promote)
        if applied is None:
            return None
        self.board, context = applied
        self.context = Rules.assess(self.board, context)

        placed = self.board[move.to_sq]
        promotion = None
        if placed is not None and placed.piece_type != piece.piece_type:
            promotion = placed.piece_type

        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            promotion=promotion,
            was_check=self.context.in_check,
        )
        self.move_history.append(record)
        self._update_phase()
        return record

    def complete_promotion(self, piece_type: PieceType) -> bool:
        """Finish the pending promotion with *piece_type*."""
        applied = complete_promotion(self.board, self.context, piece_type)
        if applied is None:
            return False
        self.board, context = applied
        self.context = Rules.assess(self.board, context)
        if self.move_history:
            record = self.move_history[-1]
            record.promotion = piece_type
            record.was_check = self.context.in_check
        self._update_phase()
        return True

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.context = self.context.resigned(color)
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.context.side_to_move

    @property
    def result(self) -> GameResult:
        return self.context.result

    @property
    def end_reason(self) -> GameEndReason:
        return self.context.end_reason

    @property
    def is_game_over(self) -> bool:
        return self.context.is_game_over

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        if self.is_game_over or self.context.pending_promotion is not None:
            return []
        gen = MoveGenerator(self.board, self.context.en_passant)
        return gen.generate_legal_moves(self.side_to_move)

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Destinations for the side-to-move piece on *sq* (move hints)."""
        piece = self.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return []
        if self.is_game_over or self.context.pending_promotion is not None:
            return []
        return MoveGenerator(self.board, self.context.en_passant).legal_destinations(sq)

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_phase(self) -> None:
        if self.context.is_game_over:
            self.phase = GamePhase.GAME_OVER
        elif self.context.pending_promotion is not None:
            self.phase = GamePhase.AWAITING_PROMOTION
        else:
            self.phase = GamePhase.AWAITING_MOVE
