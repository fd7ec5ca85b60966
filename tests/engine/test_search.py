"""Tests for difficulty policies, search settings and material evaluation."""

import random

import pytest

from knightly.core.board import Board
from knightly.core.enums import Color, PieceType
from knightly.core.move import Move
from knightly.core.move_generator import MoveGenerator
from knightly.core.notation import board_from_fen
from knightly.core.types import parse_square
from knightly.engine.evaluation import (
    MATE_SCORE,
    PIECE_VALUES,
    captured_value,
    material_balance,
)
from knightly.engine.move_selectors import (
    GreedyCaptureSelector,
    MinimaxSelector,
    RandomSelector,
    choose_move,
    get_ai_move,
    selector_for,
)
from knightly.engine.search import Difficulty, SearchSettings

# Black to move: Qxd2 wins a rook defended by the king, Qxa5 wins a free knight.
TRADE_OFF = "k7/8/8/N2q4/8/8/3R4/4K3"
BACK_RANK_MATE_IN_ONE = "r5k1/5ppp/8/8/8/8/5PPP/6K1"
CHECKMATED_BLACK = "R2k4/8/3K4/8/8/8/8/8"
STALEMATED_BLACK = "7k/8/5KQ1/8/8/8/8/8"
LONE_BLACK_KING = "7k/8/8/8/8/8/8/K7"


class TestDifficulty:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("easy", Difficulty.EASY),
            ("Medium", Difficulty.MEDIUM),
            (" HARD ", Difficulty.HARD),
            (Difficulty.HARD, Difficulty.HARD),
        ],
    )
    def test_parse(self, text: str, expected: Difficulty) -> None:
        assert Difficulty.parse(text) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown difficulty"):
            Difficulty.parse("grandmaster")

    def test_str(self) -> None:
        assert str(Difficulty.MEDIUM) == "medium"


class TestSearchSettings:
    def test_defaults(self) -> None:
        settings = SearchSettings()
        assert settings.difficulty == Difficulty.MEDIUM
        assert settings.color == Color.BLACK
        assert settings.depth == 2

    def test_rejects_bad_depth(self) -> None:
        with pytest.raises(ValueError):
            SearchSettings(depth=0)

    def test_rejects_plain_string_difficulty(self) -> None:
        with pytest.raises(ValueError):
            SearchSettings(difficulty="hard")  # type: ignore[arg-type]

    def test_rejects_bad_color(self) -> None:
        with pytest.raises(ValueError):
            SearchSettings(color=0)  # type: ignore[arg-type]

    def test_selector_for(self) -> None:
        assert isinstance(selector_for(SearchSettings(Difficulty.EASY)), RandomSelector)
        assert isinstance(
            selector_for(SearchSettings(Difficulty.MEDIUM)), GreedyCaptureSelector
        )
        hard = selector_for(SearchSettings(Difficulty.HARD, depth=3))
        assert isinstance(hard, MinimaxSelector)
        assert hard.depth == 3


class TestEvaluation:
    def test_initial_balance(self, initial_board: Board) -> None:
        assert material_balance(initial_board, Color.WHITE) == 0
        assert material_balance(initial_board, Color.BLACK) == 0

    def test_balance_is_signed(self, initial_board: Board) -> None:
        board = initial_board.replace({parse_square("d8"): None})
        assert material_balance(board, Color.WHITE) == PIECE_VALUES[PieceType.QUEEN]
        assert material_balance(board, Color.BLACK) == -PIECE_VALUES[PieceType.QUEEN]

    def test_captured_value(self) -> None:
        board = board_from_fen(TRADE_OFF)
        assert captured_value(board, Move.parse("d5d2")) == 5
        assert captured_value(board, Move.parse("d5a5")) == 3
        assert captured_value(board, Move.parse("d5d6")) == 0

    def test_en_passant_counts_as_pawn(self) -> None:
        board = board_from_fen("7k/8/8/8/3pP3/8/8/K7")
        move = Move.parse("d4e3")
        assert captured_value(board, move) == 0
        assert captured_value(board, move, parse_square("e3")) == 1


class TestEasy:
    def test_covers_every_legal_move(self) -> None:
        board = board_from_fen(LONE_BLACK_KING)
        legal = set(MoveGenerator(board).generate_legal_moves(Color.BLACK))
        rng = random.Random(1234)
        seen = {
            get_ai_move(board, Difficulty.EASY, Color.BLACK, rng=rng) for _ in range(200)
        }
        assert seen == legal

    def test_result_is_legal(self, initial_board: Board) -> None:
        move = get_ai_move(initial_board, "easy", Color.WHITE, rng=random.Random(5))
        assert move is not None
        assert MoveGenerator(initial_board).is_valid_move(move.from_sq, move.to_sq)


class TestMedium:
    def test_prefers_highest_capture(self) -> None:
        board = board_from_fen(TRADE_OFF)
        for seed in range(10):
            move = get_ai_move(board, "medium", rng=random.Random(seed))
            assert move == Move.parse("d5d2")

    def test_ties_broken_randomly(self) -> None:
        board = board_from_fen("4k3/8/8/R2q3R/8/8/8/4K3")
        rng = random.Random(99)
        seen = {get_ai_move(board, "medium", rng=rng) for _ in range(100)}
        assert seen == {Move.parse("d5a5"), Move.parse("d5h5")}

    def test_takes_en_passant(self) -> None:
        board = board_from_fen("7k/8/8/8/3pP3/8/8/K7")
        move = get_ai_move(
            board, "medium", Color.BLACK, parse_square("e3"), rng=random.Random(3)
        )
        assert move == Move.parse("d4e3")

    def test_no_capture_is_any_legal_move(self) -> None:
        board = board_from_fen(LONE_BLACK_KING)
        legal = MoveGenerator(board).generate_legal_moves(Color.BLACK)
        assert GreedyCaptureSelector(random.Random(0)).select_move(
            board, Color.BLACK
        ) in legal


class TestHard:
    def test_finds_mate_in_one(self) -> None:
        board = board_from_fen(BACK_RANK_MATE_IN_ONE)
        assert get_ai_move(board, "hard") == Move.parse("a8a1")

    def test_avoids_losing_queen(self) -> None:
        board = board_from_fen(TRADE_OFF)
        assert get_ai_move(board, Difficulty.HARD) == Move.parse("d5a5")

    def test_single_ply_is_greedy(self) -> None:
        board = board_from_fen(TRADE_OFF)
        assert MinimaxSelector(1).select_move(board, Color.BLACK) == Move.parse("d5d2")

    def test_choice_scores_at_least_every_other_move(self) -> None:
        board = board_from_fen(TRADE_OFF)
        selector = MinimaxSelector()
        scored = selector.score_moves(board, Color.BLACK)
        chosen = selector.select_move(board, Color.BLACK)
        best = max(value for _move, value in scored)
        assert dict(scored)[chosen] == best

    def test_first_of_equal_moves_wins(self) -> None:
        board = board_from_fen(LONE_BLACK_KING)
        selector = MinimaxSelector()
        first = MoveGenerator(board).generate_legal_moves(Color.BLACK)[0]
        assert selector.select_move(board, Color.BLACK) == first

    def test_plays_white(self, initial_board: Board) -> None:
        move = get_ai_move(initial_board, "hard", Color.WHITE)
        assert move is not None
        assert MoveGenerator(initial_board).is_valid_move(move.from_sq, move.to_sq)

    def test_stalemate_scores_zero(self) -> None:
        # Qb6 leaves the white king on a8 without a move.
        board = board_from_fen("K7/2k5/8/8/8/8/8/1q6")
        stalemating = Move.parse("b1b6")
        scored = dict(MinimaxSelector().score_moves(board, Color.BLACK))
        assert scored[stalemating] == 0
        assert max(scored.values()) == MATE_SCORE
        assert get_ai_move(board, "hard") != stalemating

    def test_mated_maximizer_scores_minus_infinity(self) -> None:
        # Kh8 allows Ra8 mate behind the pawns.
        board = board_from_fen("6k1/5ppp/8/8/8/8/8/R5K1")
        into_mate = Move.parse("g8h8")
        selector = MinimaxSelector(3)
        scored = dict(selector.score_moves(board, Color.BLACK))
        assert scored[into_mate] == -MATE_SCORE
        assert min(scored.values()) == -MATE_SCORE
        assert selector.select_move(board, Color.BLACK) != into_mate

    def test_rejects_zero_depth(self) -> None:
        with pytest.raises(ValueError):
            MinimaxSelector(0)


class TestNoMove:
    @pytest.mark.parametrize("difficulty", list(Difficulty))
    @pytest.mark.parametrize("fen", [CHECKMATED_BLACK, STALEMATED_BLACK])
    def test_returns_none(self, difficulty: Difficulty, fen: str) -> None:
        assert get_ai_move(board_from_fen(fen), difficulty, Color.BLACK) is None

    def test_choose_move_uses_settings_color(self) -> None:
        board = board_from_fen(CHECKMATED_BLACK)
        settings = SearchSettings(Difficulty.EASY, color=Color.WHITE, seed=1)
        move = choose_move(board, settings)
        assert move is not None
        assert board[move.from_sq].color == Color.WHITE
