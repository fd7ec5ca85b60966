"""Concrete player implementations."""

from __future__ import annotations

import random
from dataclasses import replace
from typing import TYPE_CHECKING, Callable

from knightly.core.enums import Color
from knightly.engine.move_selectors import choose_move
from knightly.engine.search import SearchSettings
from knightly.game.interfaces import IPlayer

if TYPE_CHECKING:
    from knightly.core.board import Board
    from knightly.core.context import GameContext
    from knightly.core.move import Move


class HumanPlayer(IPlayer):
    """A human participant whose moves arrive from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board, context: GameContext) -> None:
        pass  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """A computer participant.

    ``request_move`` forwards to ``on_request_move`` when given, which is how
    a UI hands the search to an ``EngineWorker`` running in a ``QThread``.
    :meth:`choose_move` runs the configured policy synchronously.

    Args:
        color: Side the computer plays.
        settings: Difficulty and search configuration; its ``color`` is
            overridden by *color*.
        name: Display name.
        on_request_move: ``(Board, GameContext) -> None`` — called when the
            controller asks the computer to start thinking.
        rng: Random source for the random and greedy policies; seeded from
            ``settings.seed`` when omitted.
    """

    __slots__ = ("_color", "_name", "_settings", "_on_request_move", "_rng")

    def __init__(
        self,
        color: Color,
        settings: SearchSettings | None = None,
        name: str = "Computer",
        on_request_move: Callable[[Board, GameContext], None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._color = color
        self._settings = replace(settings or SearchSettings(), color=color)
        self._name = name
        self._on_request_move = on_request_move
        self._rng = rng if rng is not None else random.Random(self._settings.seed)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    def request_move(self, board: Board, context: GameContext) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board, context)

    def choose_move(self, board: Board, context: GameContext) -> Move | None:
        return choose_move(board, self._settings, context.en_passant, rng=self._rng)
