"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete players.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from knightly.core.enums import Color, PieceType

if TYPE_CHECKING:
    from knightly.core.board import Board
    from knightly.core.context import GameContext
    from knightly.core.move import Move


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    THINKING = auto()  # computer is choosing a move
    GAME_OVER = auto()


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board, context: GameContext) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (moves arrive through the controller).
        For the computer this may hand the search to a worker thread.
        """


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        context: GameContext | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def choose_promotion(self, piece_type: PieceType) -> bool:
        """Finish a pending promotion. Returns True if accepted."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""
