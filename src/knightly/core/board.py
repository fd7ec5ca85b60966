"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from knightly.core.enums import Color, PieceType
from knightly.core.piece import Piece
from knightly.core.types import Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square snapshot.

    Every transformation returns a new ``Board``; the receiver is never
    modified, so snapshots can be shared freely between the caller, the
    legality checks and the search.
    """

    __slots__ = ("_squares", "_hash")

    def __init__(self, squares: tuple[Piece | None, ...] | None = None) -> None:
        if squares is None:
            squares = (None,) * 64
        elif len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares: tuple[Piece | None, ...] = tuple(squares)
        self._hash: int | None = None

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        """Piece on *sq*; ``None`` when empty or off the board."""
        if not is_valid_square(sq):
            return None
        return self._squares[sq[0] * 8 + sq[1]]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` pairs in row-major order, optionally by color."""
        for index, piece in enumerate(self._squares):
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield divmod(index, 8), piece

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Transformations ----------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied (``None`` clears a square)."""
        squares = list(self._squares)
        for sq, piece in changes.items():
            if not is_valid_square(sq):
                raise ValueError(f"Square out of range: {sq!r}")
            squares[sq[0] * 8 + sq[1]] = piece
        return Board(tuple(squares))

    def move_piece(self, from_sq: Square, to_sq: Square) -> Board:
        """New board with the piece on *from_sq* relocated to *to_sq*."""
        return self.replace({from_sq: None, to_sq: self[from_sq]})

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        squares: list[Piece | None] = [None] * 64
        for col, pt in enumerate(_BACK_RANK):
            squares[col] = Piece(Color.BLACK, pt)
            squares[8 + col] = Piece(Color.BLACK, PieceType.PAWN)
            squares[48 + col] = Piece(Color.WHITE, PieceType.PAWN)
            squares[56 + col] = Piece(Color.WHITE, pt)
        return cls(tuple(squares))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._squares)
        return self._hash

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self._squares[row * 8 + col]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
