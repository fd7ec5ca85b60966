"""Computer opponent: difficulty policies over the core legality engine.

The Qt worker bridge lives in :mod:`knightly.engine.qt_bridge` and is
imported on demand so headless callers do not load PyQt6.
"""

from knightly.engine.evaluation import PIECE_VALUES, captured_value, material_balance
from knightly.engine.move_selectors import (
    GreedyCaptureSelector,
    MinimaxSelector,
    RandomSelector,
    choose_move,
    get_ai_move,
    selector_for,
)
from knightly.engine.search import Difficulty, IMoveSelector, SearchSettings

__all__ = [
    "Difficulty",
    "GreedyCaptureSelector",
    "IMoveSelector",
    "MinimaxSelector",
    "PIECE_VALUES",
    "RandomSelector",
    "SearchSettings",
    "captured_value",
    "choose_move",
    "get_ai_move",
    "material_balance",
    "selector_for",
]
