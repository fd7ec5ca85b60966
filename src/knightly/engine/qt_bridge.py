"""Qt bridge to run the computer opponent in a worker thread."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from knightly.core.board import Board
from knightly.core.types import is_valid_square
from knightly.engine.move_selectors import choose_move
from knightly.engine.search import SearchSettings

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes computer moves on demand.

    Move it to a ``QThread`` and connect a queued signal to
    :meth:`request_move`; results come back through the signals below.
    """

    best_move_ready = pyqtSignal(int, object)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_settings", "_rng")

    def __init__(self, settings: SearchSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else SearchSettings()
        self._rng = random.Random(self._settings.seed)

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    @pyqtSlot(object, object, int)
    def request_move(
        self, board_obj: object, en_passant: object, request_id: int
    ) -> None:
        """Pick a move on *board_obj* for the configured side and emit it."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return
        if en_passant is not None and not is_valid_square(en_passant):
            self.search_error.emit(request_id, "Engine received invalid en passant square")
            return

        try:
            move = choose_move(board_obj, self._settings, en_passant, rng=self._rng)
        except Exception as exc:
            _LOGGER.exception("Search %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if move is None:
            self.search_no_move.emit(request_id)
            return
        self.best_move_ready.emit(request_id, move)

    @pyqtSlot(object)
    def set_settings(self, settings: object) -> None:
        """Replace the settings used by the next search."""
        if isinstance(settings, SearchSettings):
            self._settings = settings
            self._rng = random.Random(settings.seed)
