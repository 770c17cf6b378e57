"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square

PlaceFn = Callable[..., Position]


@pytest.fixture
def place() -> PlaceFn:
    """Build an otherwise empty position from ``square=(color, type)`` pairs."""

    def _place(*pieces: tuple[Square, Color, PieceType]) -> Position:
        pos = Position.empty()
        grid = list(pos.squares)
        for sq, color, piece_type in pieces:
            grid[sq] = Piece(color, piece_type)
        return Position(grid)

    return _place
