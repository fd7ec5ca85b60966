"""Tests for GameState."""

from knightly.core.board import Board
from knightly.core.context import GameContext, PendingPromotion
from knightly.core.enums import Color, GameEndReason, GameResult, PieceType
from knightly.core.move import Move
from knightly.core.notation import board_from_fen
from knightly.core.types import A8, E2, E4, E7, E5
from knightly.game.interfaces import GamePhase
from knightly.game.state import GameState


class TestSetup:
    def test_initial(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.board == Board.initial()
        assert gs.side_to_move == Color.WHITE
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.ply_count == 0
        assert len(gs.legal_moves()) == 20

    def test_reset_clears_history(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(Move(E2, E4))
        gs.setup()
        assert gs.ply_count == 0
        assert gs.board == Board.initial()

    def test_checkmated_position(self) -> None:
        gs = GameState()
        gs.setup(board_from_fen("R2k4/8/3K4/8/8/8/8/8"), GameContext(Color.BLACK))
        assert gs.phase == GamePhase.GAME_OVER
        assert gs.result == GameResult.WHITE_WINS
        assert gs.end_reason == GameEndReason.CHECKMATE
        assert gs.legal_moves() == []


class TestApplyMove:
    def test_records_move(self) -> None:
        gs = GameState()
        gs.setup()
        record = gs.apply_move(Move(E2, E4))
        assert record is not None
        assert record.captured is None
        assert record.promotion is None
        assert not record.was_check
        assert gs.move_history == [record]
        assert gs.side_to_move == Color.BLACK

    def test_is_legal(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.is_legal(Move(E2, E4))
        assert not gs.is_legal(Move(E7, E5))
        assert not gs.is_legal(Move(E2, E5))

    def test_empty_source(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.apply_move(Move(E4, E5)) is None
        assert gs.ply_count == 0


class TestPromotion:
    def test_pending_then_complete(self) -> None:
        gs = GameState()
        gs.setup(board_from_fen("4k3/P7/8/8/8/8/8/4K3"))
        record = gs.apply_move(Move.parse("a7a8"), auto_promote=False)
        assert record is not None and record.promotion is None
        assert gs.phase == GamePhase.AWAITING_PROMOTION
        assert gs.legal_moves() == []
        assert not gs.is_legal(Move.parse("e1e2"))

        assert gs.complete_promotion(PieceType.ROOK)
        assert gs.board[A8] is not None
        assert gs.board[A8].piece_type == PieceType.ROOK
        assert record.promotion == PieceType.ROOK
        assert record.was_check
        assert gs.phase == GamePhase.AWAITING_MOVE

    def test_complete_without_pending(self) -> None:
        gs = GameState()
        gs.setup()
        assert not gs.complete_promotion(PieceType.QUEEN)


    def test_setup_with_pending_promotion(self) -> None:
        gs = GameState()
        ctx = GameContext(pending_promotion=PendingPromotion(A8, Color.WHITE))
        gs.setup(board_from_fen("P3k3/8/8/8/8/8/8/4K3"), ctx)
        assert gs.phase == GamePhase.AWAITING_PROMOTION
        assert gs.complete_promotion(PieceType.KNIGHT)
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.side_to_move == Color.BLACK


class TestResign:
    def test_resign(self) -> None:
        gs = GameState()
        gs.setup()
        gs.resign(Color.BLACK)
        assert gs.is_game_over
        assert gs.result == GameResult.WHITE_WINS
        assert gs.end_reason == GameEndReason.RESIGNATION
        assert gs.phase == GamePhase.GAME_OVER
