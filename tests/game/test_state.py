"""Tests for game snapshots."""

import dataclasses

import pytest

from checkie.core.enums import Color
from checkie.game.controller import GameController
from checkie.game.state import GameSnapshot, PieceSnapshot


class TestSnapshot:
    def test_row_major_order(self) -> None:
        ctrl = GameController()
        ctrl.new_game(single_player=False)
        snap = ctrl.snapshot("g")
        coords = [(p.row, p.col) for p in snap.pieces]
        assert coords == sorted(coords)
        assert snap.pieces[0] == PieceSnapshot(Color.BLACK, False, 0, 1)
        assert snap.pieces[-1] == PieceSnapshot(Color.RED, False, 7, 6)

    def test_detached_from_board(self) -> None:
        ctrl = GameController()
        ctrl.new_game(single_player=False)
        snap = ctrl.snapshot("g")
        ctrl.submit_move(2, 1, 3, 0)
        assert snap.current_turn == Color.BLACK
        assert PieceSnapshot(Color.BLACK, False, 2, 1) in snap.pieces

    def test_frozen(self) -> None:
        snap = GameSnapshot("g", (), Color.BLACK, False, None, False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.game_over = True  # type: ignore[misc]

    def test_winner_reported_when_over(self, make_board) -> None:
        ctrl = GameController()
        ctrl.new_game(board=make_board((Color.BLACK, 2, 1), (Color.RED, 3, 2)))
        ctrl.submit_move(2, 1, 4, 3)
        snap = ctrl.snapshot("g")
        assert snap.game_over
        assert snap.winner == Color.BLACK
        assert len(snap.pieces) == 1
