"""Tests for Move and the color helpers it relies on."""

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.piece import Piece


class TestMove:
    def test_of_uses_piece_square(self) -> None:
        piece = Piece(Color.BLACK, 2, 1)
        move = Move.of(piece, 3, 0)
        assert (move.from_row, move.from_col, move.to_row, move.to_col) == (2, 1, 3, 0)
        assert move.piece is piece

    def test_deltas(self) -> None:
        move = Move(5, 4, 3, 2)
        assert move.row_delta == -2
        assert move.col_delta == -2

    def test_capture_flag(self) -> None:
        move = Move(2, 1, 4, 3)
        assert not move.is_capture
        move.captured_pieces.append(Piece(Color.RED, 3, 2))
        assert move.is_capture

    def test_captured_lists_not_shared(self) -> None:
        a, b = Move(2, 1, 3, 0), Move(2, 3, 3, 4)
        a.captured_pieces.append(Piece(Color.RED, 5, 0))
        assert b.captured_pieces == []

    def test_str(self) -> None:
        assert str(Move(2, 1, 3, 0)) == "(2,1)-(3,0)"
        jump = Move(2, 1, 4, 3, captured_pieces=[Piece(Color.RED, 3, 2)])
        assert str(jump) == "(2,1)x(4,3)"


class TestColor:
    def test_opposite(self) -> None:
        assert Color.BLACK.opposite == Color.RED
        assert Color.RED.opposite == Color.BLACK

    def test_forward(self) -> None:
        assert Color.BLACK.forward == 1
        assert Color.RED.forward == -1
