"""Notation package: FEN placement parsing and serialization."""

from chessrules.core.notation.fen import (
    STARTING_FEN,
    parse_placement,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "parse_placement",
    "position_from_fen",
    "position_to_fen",
]
