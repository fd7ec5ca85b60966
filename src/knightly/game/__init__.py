"""Game management layer — controller, players, state machine.

Quick start::

    from knightly.core import Color
    from knightly.engine import Difficulty, SearchSettings
    from knightly.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=AIPlayer(Color.BLACK, SearchSettings(Difficulty.HARD)),
    )
"""

from knightly.game.controller import GameController, GameEvents
from knightly.game.interfaces import GamePhase, IGameController, IPlayer
from knightly.game.player import AIPlayer, HumanPlayer
from knightly.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
