"""Tests for the package-level entry points."""

import random

import knightly
from knightly import Color, Difficulty, Move
from knightly.core.notation import board_from_fen


class TestEntryPoints:
    def test_initial_board(self) -> None:
        board = knightly.create_initial_board()
        assert board.find_king(Color.WHITE) == (7, 4)
        assert board.find_king(Color.BLACK) == (0, 4)

    def test_is_valid_move(self) -> None:
        board = knightly.create_initial_board()
        assert knightly.is_valid_move(board, (6, 4), (4, 4))
        assert not knightly.is_valid_move(board, (6, 4), (3, 4))

    def test_is_valid_move_en_passant(self) -> None:
        board = board_from_fen("4k3/8/8/3pP3/8/8/8/4K3")
        assert not knightly.is_valid_move(board, (3, 4), (2, 3))
        assert knightly.is_valid_move(board, (3, 4), (2, 3), (2, 3))

    def test_terminal_predicates(self) -> None:
        mated = board_from_fen("R2k4/8/3K4/8/8/8/8/8")
        stalemated = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        assert knightly.king_in_check(mated, Color.BLACK)
        assert knightly.is_checkmate(mated, Color.BLACK)
        assert not knightly.is_stalemate(mated, Color.BLACK)
        assert knightly.is_stalemate(stalemated, Color.BLACK)
        assert not knightly.is_checkmate(stalemated, Color.BLACK)

    def test_ai_move_defaults_to_black(self) -> None:
        board = knightly.create_initial_board()
        move = knightly.get_ai_move(board, "medium", rng=random.Random(0))
        assert isinstance(move, Move)
        assert board[move.from_sq].color == Color.BLACK

    def test_full_game_loop(self) -> None:
        board, ctx = knightly.create_initial_board(), knightly.GameContext()
        for text in ("f2f3", "e7e5", "g2g4"):
            applied = knightly.apply_move(board, Move.parse(text), ctx)
            assert applied is not None
            board, ctx = applied
        move = knightly.get_ai_move(board, Difficulty.HARD, Color.BLACK, ctx.en_passant)
        assert move == Move.parse("d8h4")
        board, ctx = knightly.apply_move(board, move, ctx)
        assert knightly.is_checkmate(board, Color.WHITE)

    def test_version(self) -> None:
        assert knightly.__version__ == "0.1.0"
