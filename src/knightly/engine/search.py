"""Shared engine settings, difficulty levels and selector protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from knightly.core.enums import Color

if TYPE_CHECKING:
    from knightly.core.board import Board
    from knightly.core.move import Move
    from knightly.core.types import Square


class Difficulty(str, Enum):
    """Computer opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str | Difficulty) -> Difficulty:
        """Accept a member or its case-insensitive name, e.g. ``"Hard"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class SearchSettings:
    """Configuration for the computer opponent.

    Args:
        difficulty: Selection policy.
        color: Side the computer plays.
        depth: Plies searched by the minimax policy (root move included).
        seed: Seed for the random tie-breaking; ``None`` for nondeterministic.
    """

    difficulty: Difficulty = Difficulty.MEDIUM
    color: Color = Color.BLACK
    depth: int = 2
    seed: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.difficulty, Difficulty):
            raise ValueError(f"Invalid difficulty: {self.difficulty!r}")
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid color: {self.color!r}")
        if self.depth < 1:
            raise ValueError("Search depth must be >= 1")


class IMoveSelector(Protocol):
    """Picks a move for *color* on *board*, or ``None`` if it has none."""

    def select_move(
        self,
        board: Board,
        color: Color,
        en_passant: Square | None = None,
    ) -> Move | None: ...
