"""Computer opponent policies: random, greedy capture and fixed-depth minimax."""

from __future__ import annotations

import logging
import random

from knightly.core.applier import apply_move
from knightly.core.board import Board
from knightly.core.context import GameContext
from knightly.core.enums import Color
from knightly.core.move import Move
from knightly.core.move_generator import MoveGenerator
from knightly.core.types import Square
from knightly.engine.evaluation import MATE_SCORE, captured_value, material_balance
from knightly.engine.search import Difficulty, IMoveSelector, SearchSettings

_LOGGER = logging.getLogger(__name__)


class RandomSelector(IMoveSelector):
    """Uniform choice over every legal move."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select_move(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
    ) -> Move | None:
        moves = MoveGenerator(board, en_passant).generate_legal_moves(color)
        if not moves:
            return None
        return self._rng.choice(moves)


class GreedyCaptureSelector(IMoveSelector):
    """Uniform choice among the legal moves capturing the most material.

    With no capture available every move scores 0, so the choice is uniform
    over all legal moves.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select_move(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
    ) -> Move | None:
        moves = MoveGenerator(board, en_passant).generate_legal_moves(color)
        if not moves:
            return None

        best_score = -1
        best_moves: list[Move] = []
        for move in moves:
            score = captured_value(board, move, en_passant)
            if score > best_score:
                best_score = score
                best_moves = [move]
            elif score == best_score:
                best_moves.append(move)
        return self._rng.choice(best_moves)


class MinimaxSelector(IMoveSelector):
    """Plain minimax over material balance, searched to a fixed depth.

    The selecting side is the maximizer. A side left without legal moves
    scores -inf if it is the maximizer in check, +inf if it is the minimizer
    in check, and 0 when stalemated. Among equally valued root moves the
    first one generated wins.
    """

    __slots__ = ("_depth",)

    def __init__(self, depth: int = 2) -> None:
        if depth < 1:
            raise ValueError("Search depth must be >= 1")
        self._depth = depth

    @property
    def depth(self) -> int:
        return self._depth

    def select_move(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
    ) -> Move | None:
        best_move: Move | None = None
        best_value = -MATE_SCORE
        for move, value in self.score_moves(board, color, en_passant):
            if best_move is None or value > best_value:
                best_move = move
                best_value = value
        return best_move

    def score_moves(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
    ) -> list[tuple[Move, float]]:
        """Every legal root move of *color* paired with its minimax value."""
        scored: list[tuple[Move, float]] = []
        for move in MoveGenerator(board, en_passant).generate_legal_moves(color):
            child, child_ep = _play(board, move, color, en_passant)
            value = self._minimax(child, child_ep, self._depth - 1, False, color)
            scored.append((move, value))
        return scored

    def _minimax(
        self,
        board: Board,
        en_passant: Square | None,
        depth: int,
        maximizing: bool,
        ai_color: Color,
    ) -> float:
        if depth == 0:
            return material_balance(board, ai_color)

        side = ai_color if maximizing else ai_color.opposite
        gen = MoveGenerator(board, en_passant)
        moves = gen.generate_legal_moves(side)
        if not moves:
            if gen.is_in_check(side):
                return -MATE_SCORE if maximizing else MATE_SCORE
            return 0

        values = (
            self._minimax(*_play(board, move, side, en_passant), depth - 1, not maximizing, ai_color)
            for move in moves
        )
        return max(values) if maximizing else min(values)


def _play(
    board: Board, move: Move, color: Color, en_passant: Square | None
) -> tuple[Board, Square | None]:
    """Search-side move application: always promotes to a queen."""
    applied = apply_move(board, move, GameContext(color, en_passant), auto_promote=True)
    assert applied is not None
    next_board, next_context = applied
    return next_board, next_context.en_passant


def selector_for(
    settings: SearchSettings, rng: random.Random | None = None
) -> IMoveSelector:
    """Build the selector matching *settings*."""
    if rng is None:
        rng = random.Random(settings.seed)
    if settings.difficulty == Difficulty.EASY:
        return RandomSelector(rng)
    if settings.difficulty == Difficulty.MEDIUM:
        return GreedyCaptureSelector(rng)
    return MinimaxSelector(settings.depth)


def get_ai_move(
    board: Board,
    difficulty: Difficulty | str,
    color: Color = Color.BLACK,
    en_passant: Square | None = None,
    *,
    rng: random.Random | None = None,
) -> Move | None:
    """Pick a move for the computer playing *color*; ``None`` if it has none.

    No checkmate or stalemate diagnosis happens here: the caller is expected
    to have detected terminal positions before asking.
    """
    settings = SearchSettings(difficulty=Difficulty.parse(difficulty), color=color)
    return choose_move(board, settings, en_passant, rng=rng)


def choose_move(
    board: Board,
    settings: SearchSettings,
    en_passant: Square | None = None,
    *,
    rng: random.Random | None = None,
) -> Move | None:
    """Run the selector described by *settings* for ``settings.color``."""
    move = selector_for(settings, rng).select_move(board, settings.color, en_passant)
    if move is None:
        _LOGGER.debug("No legal move for %s (%s)", settings.color, settings.difficulty)
    else:
        _LOGGER.debug("Selected %s for %s (%s)", move, settings.color, settings.difficulty)
    return move
