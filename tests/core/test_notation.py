"""Tests for FEN placement parsing and serialization."""

import logging

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import EmptyFenError, FenError, InvalidSymbolError
from chessrules.core.notation import (
    STARTING_FEN,
    parse_placement,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position


class TestFenParsing:
    def test_starting_fen_matches_initial(self) -> None:
        assert position_from_fen(STARTING_FEN) == Position.initial()

    def test_first_rank_listed_is_row_zero(self) -> None:
        pos = position_from_fen("k7/8/8/8/8/8/8/7K w - - 0 1")
        assert pos[0] == Piece(Color.BLACK, PieceType.KING)
        assert pos[63] == Piece(Color.WHITE, PieceType.KING)

    def test_placement_only(self) -> None:
        assert position_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR") == (
            Position.initial()
        )

    def test_other_fields_are_not_interpreted(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/R7 nonsense fields are ignored")
        assert pos[56] == Piece(Color.WHITE, PieceType.ROOK)

    def test_from_fen_classmethod(self) -> None:
        assert Position.from_fen(STARTING_FEN) == Position.initial()

    @pytest.mark.parametrize("fen", ["", "   ", "\t\n"])
    def test_empty_rejected(self, fen: str) -> None:
        with pytest.raises(EmptyFenError):
            position_from_fen(fen)

    def test_invalid_symbol_rejected(self) -> None:
        with pytest.raises(InvalidSymbolError) as exc:
            position_from_fen("rnbqkbnr/pppppppp/8/8/4X3/8/PPPPPPPP/RNBQKBNR w - - 0 1")
        assert exc.value.symbol == "X"

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(FenError, ValueError)
        with pytest.raises(ValueError):
            position_from_fen("8/8/8/8/8/8/8/7? w - - 0 1")

    def test_short_placement_not_validated(self) -> None:
        pos = position_from_fen("4k3")
        assert pos[4] == Piece(Color.BLACK, PieceType.KING)
        assert len(pos.occupied()) == 1

    def test_overlong_rank_drops_off_grid_pieces(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="chessrules.core.notation.fen"):
            grid = parse_placement("8/8/8/8/8/8/8/8/K")
        assert all(piece is None for piece in grid)
        assert "outside the board" in caplog.text

    def test_wide_rank_does_not_wrap(self) -> None:
        grid = parse_placement("9K")
        assert all(piece is None for piece in grid)

    def test_grid_is_immutable(self) -> None:
        grid = parse_placement("8/8")
        assert isinstance(grid, tuple)
        assert len(grid) == 64


class TestFenSerialization:
    def test_starting_placement(self) -> None:
        assert position_to_fen(Position.initial()) == STARTING_FEN.split()[0]

    def test_after_relocation(self) -> None:
        pos = Position.initial()
        pos.relocate(52, 36)
        assert position_to_fen(pos) == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"

    def test_empty_board(self) -> None:
        assert position_to_fen(Position.empty()) == "8/8/8/8/8/8/8/8"
