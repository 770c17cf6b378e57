"""FEN placement parsing and serialization.

Only the piece-placement field is interpreted. Any further fields (side to
move, castling, en passant, clocks) are accepted and ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce

from chessrules.core.errors import EmptyFenError
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import SQUARE_COUNT, Square, is_on_board, make_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_DIGITS = "0123456789"


@dataclass(frozen=True, slots=True)
class _Cursor:
    """Scan state threaded through the placement fold."""

    row: int = 0
    col: int = 0
    placed: tuple[tuple[Square, Piece], ...] = ()


def _advance(cursor: _Cursor, ch: str) -> _Cursor:
    if ch == "/":
        return _Cursor(cursor.row + 1, 0, cursor.placed)
    if ch in _DIGITS:
        return _Cursor(cursor.row, cursor.col + int(ch), cursor.placed)

    piece = Piece.from_char(ch)
    placed = cursor.placed
    if is_on_board(cursor.row, cursor.col):
        placed += ((make_square(cursor.row, cursor.col), piece),)
    else:
        _LOGGER.warning(
            "Dropping %r outside the board (row %d, col %d)",
            ch,
            cursor.row,
            cursor.col,
        )
    return _Cursor(cursor.row, cursor.col + 1, placed)


def parse_placement(placement: str) -> tuple[Piece | None, ...]:
    """Fold a placement field into an immutable 64-slot grid.

    Rank and file counts are not validated; only unknown characters fail.
    """
    cursor = reduce(_advance, placement, _Cursor())
    grid: list[Piece | None] = [None] * SQUARE_COUNT
    for sq, piece in cursor.placed:
        grid[sq] = piece
    return tuple(grid)


def position_from_fen(fen: str) -> Position:
    """Parse the placement field of a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not parts:
        raise EmptyFenError()
    if len(parts) > 1:
        _LOGGER.debug("Ignoring FEN fields %s", parts[1:])
    return Position(parse_placement(parts[0]))


def position_to_fen(pos: Position) -> str:
    """Serialise the placement field of *pos*, first row first."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.piece_at(make_square(row, col))
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
