"""Pseudo-legal move checking and destination enumeration.

Legality here means "consistent with the moving piece's pattern and path
clearance". Turn order and king safety are not considered.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import (
    SQUARE_COUNT,
    Square,
    col_of,
    is_on_board,
    is_valid_square,
    make_square,
    row_of,
)

if TYPE_CHECKING:
    from chessrules.core.piece import Piece
    from chessrules.core.position import Position


KNIGHT_JUMPS: frozenset[tuple[int, int]] = frozenset({(2, 1), (1, 2)})

# Direction of travel along rows; White starts on rows 6-7 and moves up.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# -- Path clearance ---------------------------------------------------------


def ray_is_clear(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    row_step: int,
    col_step: int,
) -> bool:
    """Whether no piece stands between *from_sq* and *to_sq* on the ray.

    Walks from *from_sq* by ``(row_step, col_step)`` and stops on reaching
    *to_sq*. A walk that would leave the board ends early and counts as
    clear; the destination itself is never inspected.
    """
    if row_step == 0 and col_step == 0:
        raise ValueError("Ray step must move at least one row or column")

    row, col = row_of(from_sq), col_of(from_sq)
    while is_on_board(row + row_step, col + col_step):
        row += row_step
        col += col_step
        sq = make_square(row, col)
        if sq == to_sq:
            break
        if position.piece_at(sq) is not None:
            return False
    return True


def _slide_is_clear(
    position: Position, from_sq: Square, to_sq: Square, row_diff: int, col_diff: int
) -> bool:
    return ray_is_clear(position, from_sq, to_sq, _sign(row_diff), _sign(col_diff))


# -- Piece rules --------------------------------------------------------------
#
# Each rule receives the mover and the (row, col) delta. Universal checks
# (distinct on-board squares, non-empty source, no own-colour target) have
# already passed.

_Rule = Callable[["Position", "Piece", Square, Square, int, int], bool]


def _pawn_rule(
    position: Position,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    row_diff: int,
    col_diff: int,
) -> bool:
    direction = _PAWN_DIRECTION[piece.color]
    target = position.piece_at(to_sq)

    if col_diff == 0 and row_diff == direction:
        return target is None

    if (
        col_diff == 0
        and row_diff == 2 * direction
        and row_of(from_sq) == _PAWN_START_ROW[piece.color]
    ):
        middle = from_sq + (to_sq - from_sq) // 2
        return position.piece_at(middle) is None and target is None

    if abs(col_diff) == 1 and abs(row_diff) == 1:
        return target is not None and target.is_enemy_of(piece)

    return False


def _knight_rule(
    position: Position,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    row_diff: int,
    col_diff: int,
) -> bool:
    return (abs(row_diff), abs(col_diff)) in KNIGHT_JUMPS


def _is_diagonal(row_diff: int, col_diff: int) -> bool:
    return abs(row_diff) == abs(col_diff)


def _is_straight(row_diff: int, col_diff: int) -> bool:
    return row_diff == 0 or col_diff == 0


def _bishop_rule(
    position: Position,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    row_diff: int,
    col_diff: int,
) -> bool:
    return _is_diagonal(row_diff, col_diff) and _slide_is_clear(
        position, from_sq, to_sq, row_diff, col_diff
    )


def _rook_rule(
    position: Position,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    row_diff: int,
    col_diff: int,
) -> bool:
    return _is_straight(row_diff, col_diff) and _slide_is_clear(
        position, from_sq, to_sq, row_diff, col_diff
    )


def _queen_rule(
    position: Position,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    row_diff: int,
    col_diff: int,
) -> bool:
    if not (_is_straight(row_diff, col_diff) or _is_diagonal(row_diff, col_diff)):
        return False
    return _slide_is_clear(position, from_sq, to_sq, row_diff, col_diff)


def _king_rule(
    position: Position,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    row_diff: int,
    col_diff: int,
) -> bool:
    return max(abs(row_diff), abs(col_diff)) == 1


_RULES: dict[PieceType, _Rule] = {
    PieceType.PAWN: _pawn_rule,
    PieceType.KNIGHT: _knight_rule,
    PieceType.BISHOP: _bishop_rule,
    PieceType.ROOK: _rook_rule,
    PieceType.QUEEN: _queen_rule,
    PieceType.KING: _king_rule,
}


# -- Public predicates --------------------------------------------------------


def is_legal_destination(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """Can the piece on *from_sq* move to *to_sq* by its movement rule?

    Returns ``False`` (never raises) for identical or off-board squares and
    for an empty source.
    """
    if from_sq == to_sq or not is_valid_square(from_sq) or not is_valid_square(to_sq):
        return False

    piece = position.piece_at(from_sq)
    if piece is None:
        return False

    target = position.piece_at(to_sq)
    if target is not None and not target.is_enemy_of(piece):
        return False

    row_diff = row_of(to_sq) - row_of(from_sq)
    col_diff = col_of(to_sq) - col_of(from_sq)
    return _RULES[piece.piece_type](position, piece, from_sq, to_sq, row_diff, col_diff)


def legal_destinations(position: Position, from_sq: Square) -> list[Square]:
    """All squares the piece on *from_sq* may move to, ascending."""
    return [
        to_sq
        for to_sq in range(SQUARE_COUNT)
        if is_legal_destination(position, from_sq, to_sq)
    ]


class MoveGenerator:
    """Move queries bound to a single :class:`Position`.

    The generator never mutates the position and keeps no state besides the
    reference, so it is cheap to build per query.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    @property
    def position(self) -> Position:
        return self._pos

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        return is_legal_destination(self._pos, from_sq, to_sq)

    def is_legal_move(self, move: Move) -> bool:
        return is_legal_destination(self._pos, move.from_sq, move.to_sq)

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        return legal_destinations(self._pos, from_sq)

    def generate_moves(self, color: Color | None = None) -> list[Move]:
        """Every pseudo-legal move, ordered by source then destination.

        With *color* set, only that side's pieces are considered.
        """
        moves: list[Move] = []
        for from_sq in self._pos.occupied():
            piece = self._pos.piece_at(from_sq)
            if color is not None and piece is not None and piece.color != color:
                continue
            moves.extend(Move(from_sq, to_sq) for to_sq in self.legal_destinations(from_sq))
        return moves
