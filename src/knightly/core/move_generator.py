"""Move legality: movement patterns, attack detection and full validation."""

from __future__ import annotations

from knightly.core.board import Board
from knightly.core.enums import Color, PieceType
from knightly.core.move import Move
from knightly.core.piece import Piece
from knightly.core.types import Square, is_valid_square

ALL_SQUARES: tuple[Square, ...] = tuple((row, col) for row in range(8) for col in range(8))

_KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})
_KING_HOME_COL = 4


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def castle_rook_squares(king_from: Square, king_to: Square) -> tuple[Square, Square]:
    """Rook origin and destination for the castle ``king_from → king_to``.

    The rook comes from the corner on the side the king moves toward and
    lands on the square the king passed over.
    """
    row = king_from[0]
    if king_to[1] > king_from[1]:
        return (row, 7), (row, king_to[1] - 1)
    return (row, 0), (row, king_to[1] + 1)


class MoveGenerator:
    """Legality checks bound to one immutable :class:`Board` snapshot.

    The generator keeps no state besides the snapshot and the en passant
    target, so every query is a pure function of its arguments. Simulated
    moves are evaluated on fresh boards built with :meth:`Board.replace`.
    """

    __slots__ = ("_board", "_en_passant")

    def __init__(self, board: Board, en_passant: Square | None = None) -> None:
        self._board = board
        self._en_passant = en_passant

    @property
    def board(self) -> Board:
        return self._board

    # -- Movement patterns -------------------------------------------------

    def is_pseudo_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Does the piece on *from_sq* follow its movement pattern to *to_sq*?

        Ignores whether the move leaves the mover's own king in check and
        knows nothing about castling or en passant.
        """
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return False
        if from_sq == to_sq:
            return False

        board = self._board
        piece = board[from_sq]
        if piece is None:
            return False
        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        d_row = abs(to_sq[0] - from_sq[0])
        d_col = abs(to_sq[1] - from_sq[1])
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            return self._pawn_pattern(piece.color, from_sq, to_sq, target)
        if ptype == PieceType.KNIGHT:
            return (d_row, d_col) in _KNIGHT_DELTAS
        if ptype == PieceType.KING:
            return d_row <= 1 and d_col <= 1
        if ptype == PieceType.ROOK:
            straight = d_row == 0 or d_col == 0
            return straight and self._path_clear(from_sq, to_sq)
        if ptype == PieceType.BISHOP:
            return d_row == d_col and self._path_clear(from_sq, to_sq)
        if ptype == PieceType.QUEEN:
            aligned = d_row == 0 or d_col == 0 or d_row == d_col
            return aligned and self._path_clear(from_sq, to_sq)
        return False

    def _pawn_pattern(
        self,
        color: Color,
        from_sq: Square,
        to_sq: Square,
        target: Piece | None,
    ) -> bool:
        direction = color.pawn_direction
        from_row, from_col = from_sq
        to_row, to_col = to_sq

        if from_col == to_col and target is None:
            if to_row == from_row + direction:
                return True
            return (
                from_row == color.pawn_row
                and to_row == from_row + 2 * direction
                and self._board.is_empty((from_row + direction, from_col))
            )

        # Diagonal step is a capture only; an empty square is never a target.
        return (
            abs(to_col - from_col) == 1
            and to_row == from_row + direction
            and target is not None
        )

    def _path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """No piece strictly between *from_sq* and *to_sq* (aligned squares)."""
        step_row = _sign(to_sq[0] - from_sq[0])
        step_col = _sign(to_sq[1] - from_sq[1])
        row = from_sq[0] + step_row
        col = from_sq[1] + step_col
        board = self._board
        while (row, col) != to_sq:
            if not board.is_empty((row, col)):
                return False
            row += step_row
            col += step_col
        return True

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* reachable by a pseudo-legal move of any *by_color* piece?

        Pawns only count when *sq* is occupied, since their diagonal pattern
        requires a capture target.
        """
        for from_sq, _piece in self._board.pieces(by_color):
            if self.is_pseudo_legal(from_sq, sq):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked? ``False`` when the king is missing."""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Move classification -------------------------------------------------

    def is_castling(self, from_sq: Square, to_sq: Square) -> bool:
        """King moving two files along a single row."""
        piece = self._board[from_sq]
        return (
            piece is not None
            and piece.piece_type == PieceType.KING
            and is_valid_square(to_sq)
            and from_sq[0] == to_sq[0]
            and abs(to_sq[1] - from_sq[1]) == 2
        )

    def is_en_passant(self, from_sq: Square, to_sq: Square) -> bool:
        """Pawn capturing onto the en passant target, removing the pawn behind it."""
        return self._en_passant_capture_square(from_sq, to_sq) is not None

    def _targets_en_passant(self, piece: Piece, to_sq: Square) -> bool:
        return (
            piece.piece_type == PieceType.PAWN
            and self._en_passant is not None
            and to_sq == self._en_passant
            and self._board.is_empty(to_sq)
        )

    def _en_passant_capture_square(
        self, from_sq: Square, to_sq: Square
    ) -> Square | None:
        piece = self._board[from_sq]
        if piece is None or not self._targets_en_passant(piece, to_sq):
            return None

        target_row, target_col = to_sq
        capture_sq = (target_row - piece.color.pawn_direction, target_col)
        if from_sq[0] != capture_sq[0] or abs(from_sq[1] - target_col) != 1:
            return None

        captured = self._board[capture_sq]
        if (
            captured is None
            or captured.piece_type != PieceType.PAWN
            or captured.color == piece.color
        ):
            return None
        return capture_sq

    # -- Full validation ------------------------------------------------------

    def is_valid_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Is ``from_sq → to_sq`` fully legal for the piece standing on *from_sq*?

        Order of evaluation: castling, en passant, normal movement pattern,
        then check-safety on the simulated result.
        """
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return False
        board = self._board
        piece = board[from_sq]
        if piece is None:
            return False

        if self.is_castling(from_sq, to_sq):
            return self._is_valid_castle(piece.color, from_sq, to_sq)

        changes: dict[Square, Piece | None] = {from_sq: None, to_sq: piece}
        if self._targets_en_passant(piece, to_sq):
            capture_sq = self._en_passant_capture_square(from_sq, to_sq)
            if capture_sq is None:
                return False
            changes[capture_sq] = None
        elif not self.is_pseudo_legal(from_sq, to_sq):
            return False

        after = board.replace(changes)
        return not MoveGenerator(after).is_in_check(piece.color)

    def _is_valid_castle(self, color: Color, king_from: Square, king_to: Square) -> bool:
        board = self._board
        row = king_from[0]
        if king_from != (color.home_row, _KING_HOME_COL):
            return False

        rook_from, rook_to = castle_rook_squares(king_from, king_to)
        rook = board[rook_from]
        if rook is None or rook.piece_type != PieceType.ROOK or rook.color != color:
            return False

        if self.is_in_check(color):
            return False

        step = 1 if rook_from[1] > king_from[1] else -1
        for col in range(king_from[1] + step, rook_from[1], step):
            if not board.is_empty((row, col)):
                return False

        opponent = color.opposite
        for col in range(king_from[1] + step, king_to[1] + step, step):
            if self.is_square_attacked((row, col), opponent):
                return False

        after = board.replace(
            {king_from: None, rook_from: None, king_to: board[king_from], rook_to: rook}
        )
        return not MoveGenerator(after).is_in_check(color)

    # -- Enumeration ----------------------------------------------------------

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Every square the piece on *from_sq* may legally move to."""
        if self._board[from_sq] is None:
            return []
        return [to_sq for to_sq in ALL_SQUARES if self.is_valid_move(from_sq, to_sq)]

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*, in row-major source order."""
        moves: list[Move] = []
        append = moves.append
        for from_sq, _piece in self._board.pieces(color):
            for to_sq in ALL_SQUARES:
                if self.is_valid_move(from_sq, to_sq):
                    append(Move(from_sq, to_sq))
        return moves

    def has_any_legal_move(self, color: Color) -> bool:
        """Short-circuits on the first legal move found for *color*."""
        for from_sq, _piece in self._board.pieces(color):
            for to_sq in ALL_SQUARES:
                if self.is_valid_move(from_sq, to_sq):
                    return True
        return False
