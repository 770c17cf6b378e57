"""Tests for Position."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import A1, A8, D1, D8, E1, E2, E4, E8, H1, H8


class TestPositionInitial:
    def test_white_king_position(self) -> None:
        pos = Position.initial()
        assert pos[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        pos = Position.initial()
        assert pos[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_queens_on_d_file(self) -> None:
        pos = Position.initial()
        assert pos[D1] == Piece(Color.WHITE, PieceType.QUEEN)
        assert pos[D8] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_black_on_rows_zero_and_one(self) -> None:
        pos = Position.initial()
        for sq in range(0, 16):
            piece = pos[sq]
            assert piece is not None and piece.color == Color.BLACK, f"Square {sq}"
        assert all(pos[sq].piece_type == PieceType.PAWN for sq in range(8, 16))

    def test_white_on_rows_six_and_seven(self) -> None:
        pos = Position.initial()
        for sq in range(48, 64):
            piece = pos[sq]
            assert piece is not None and piece.color == Color.WHITE, f"Square {sq}"
        assert all(pos[sq].piece_type == PieceType.PAWN for sq in range(48, 56))

    def test_empty_middle(self) -> None:
        pos = Position.initial()
        for sq in range(16, 48):
            assert pos[sq] is None

    def test_corners_are_rooks(self) -> None:
        pos = Position.initial()
        for sq in (A1, H1, A8, H8):
            assert pos[sq].piece_type == PieceType.ROOK

    def test_default_constructor_is_initial(self) -> None:
        assert Position() == Position.initial()


class TestPositionAccess:
    def test_always_64_squares(self) -> None:
        assert len(Position.empty()) == 64
        assert len(Position.empty().squares) == 64

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Position([None] * 63)

    @pytest.mark.parametrize("sq", [-1, 64, 100])
    def test_piece_at_out_of_range(self, sq: int) -> None:
        with pytest.raises(IndexError):
            Position.initial().piece_at(sq)

    def test_is_empty(self) -> None:
        pos = Position.initial()
        assert pos.is_empty(E4)
        assert not pos.is_empty(E2)

    def test_occupied_ascending(self) -> None:
        occupied = Position.initial().occupied()
        assert occupied == list(range(16)) + list(range(48, 64))


class TestPositionRelocate:
    def test_relocate_to_empty(self) -> None:
        pos = Position.initial()
        displaced = pos.relocate(E2, E4)
        assert displaced is None
        assert pos[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos[E2] is None

    def test_relocate_overwrites_and_returns_displaced(self) -> None:
        pos = Position.initial()
        displaced = pos.relocate(D1, D8)
        assert displaced == Piece(Color.BLACK, PieceType.QUEEN)
        assert pos[D8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert pos[D1] is None

    def test_relocate_empty_square_clears_destination(self) -> None:
        pos = Position.initial()
        displaced = pos.relocate(E4, E2)
        assert displaced == Piece(Color.WHITE, PieceType.PAWN)
        assert pos[E2] is None

    def test_relocate_out_of_range(self) -> None:
        pos = Position.initial()
        with pytest.raises(IndexError):
            pos.relocate(E2, 64)
        assert pos == Position.initial()


class TestPositionCopy:
    def test_copy_independence(self) -> None:
        pos = Position.initial()
        copy = pos.copy()
        assert pos == copy
        copy.relocate(E2, E4)
        assert pos != copy
        assert pos[E2] == Piece(Color.WHITE, PieceType.PAWN)

    def test_repr_diagram(self) -> None:
        lines = repr(Position.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
