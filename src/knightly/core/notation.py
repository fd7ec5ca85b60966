"""Piece-placement parsing and serialization (the board field of FEN)."""

from __future__ import annotations

from knightly.core.board import Board
from knightly.core.piece import Piece

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Parse the placement field of *fen* into a :class:`Board`.

    Only the first whitespace-separated field is read; side to move and the
    other FEN fields belong to the caller's game context.
    """
    parts = fen.split()
    if not parts:
        raise ValueError("Empty FEN")
    placement = parts[0]

    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    squares: list[Piece | None] = [None] * 64
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                squares[row * 8 + col] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    return Board(tuple(squares))


def board_to_fen(board: Board) -> str:
    """Serialise *board* to a FEN placement field."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
