"""Core domain layer — board model and pseudo-legal move rules.

Quick start::

    from chessrules.core import STARTING_FEN, legal_destinations, position_from_fen

    pos = position_from_fen(STARTING_FEN)
    print(legal_destinations(pos, 52))  # e2 pawn
"""

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import EmptyFenError, FenError, InvalidSymbolError
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    MoveGenerator,
    is_legal_destination,
    legal_destinations,
    ray_is_clear,
)
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import (
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "EmptyFenError",
    "FenError",
    "InvalidSymbolError",
    # Types / helpers
    "Square",
    "col_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    # Rules
    "is_legal_destination",
    "legal_destinations",
    "ray_is_clear",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
