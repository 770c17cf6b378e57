"""Position - piece occupancy of the 64-square board."""

from __future__ import annotations

from collections.abc import Iterable

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import (
    SQUARE_COUNT,
    Square,
    is_valid_square,
    make_square,
    square_name,
)

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


class Position:
    """Fixed-size board of 64 optional pieces.

    The only mutation is :meth:`relocate`; legality is the caller's concern
    (see :mod:`chessrules.core.move_generator`).
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        if squares is None:
            self._squares: list[Piece | None] = self._initial_squares()
            return
        grid = list(squares)
        if len(grid) != SQUARE_COUNT:
            raise ValueError(f"Position needs {SQUARE_COUNT} squares, got {len(grid)}")
        self._squares = grid

    @staticmethod
    def _initial_squares() -> list[Piece | None]:
        grid: list[Piece | None] = [None] * SQUARE_COUNT
        for col, pt in enumerate(_BACK_RANK):
            grid[make_square(0, col)] = Piece(Color.BLACK, pt)
            grid[make_square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            grid[make_square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            grid[make_square(7, col)] = Piece(Color.WHITE, pt)
        return grid

    @staticmethod
    def _check_square(sq: Square) -> None:
        if not is_valid_square(sq):
            raise IndexError(f"Square out of range: {sq}")

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        return cls()

    @classmethod
    def empty(cls) -> Position:
        return cls([None] * SQUARE_COUNT)

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        """Shortcut for :func:`chessrules.core.notation.position_from_fen`."""
        from chessrules.core.notation.fen import position_from_fen

        return position_from_fen(fen)

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        self._check_square(sq)
        return self._squares[sq]

    __getitem__ = piece_at

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    def occupied(self) -> list[Square]:
        """Squares holding a piece, ascending."""
        return [sq for sq, piece in enumerate(self._squares) if piece is not None]

    @property
    def squares(self) -> tuple[Piece | None, ...]:
        return tuple(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def relocate(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Move whatever sits on *from_sq* to *to_sq*.

        No legality check is made. Returns the piece that previously
        occupied *to_sq*, if any.
        """
        self._check_square(from_sq)
        self._check_square(to_sq)
        displaced = self._squares[to_sq]
        self._squares[to_sq] = self._squares[from_sq]
        self._squares[from_sq] = None
        return displaced

    def copy(self) -> Position:
        return Position(self._squares)

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return SQUARE_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self._squares[make_square(row, col)]
                cells.append(str(p) if p else ".")
            rank = square_name(make_square(row, 0))[1]
            rows.append(f"{rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
