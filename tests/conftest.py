"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from checkie.api.main import create_app
from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.rules import TurnRetentionPolicy
from checkie.game.registry import GameRegistry

PieceFields = tuple[Color, int, int] | tuple[Color, int, int, bool]
BoardFactory = Callable[..., Board]


def _make_board(
    *pieces: PieceFields,
    turn: Color = Color.BLACK,
    single_player: bool = False,
    turn_policy: TurnRetentionPolicy | None = None,
) -> Board:
    board = Board(single_player=single_player, current_turn=turn, turn_policy=turn_policy)
    for fields in pieces:
        board.place(Piece(*fields))
    return board


@pytest.fixture
def make_board() -> BoardFactory:
    """Factory for an empty board holding exactly the given pieces, in order."""
    return _make_board


@pytest.fixture
def registry() -> GameRegistry:
    return GameRegistry()


@pytest.fixture
def client(registry: GameRegistry) -> Iterator[TestClient]:
    with TestClient(create_app(registry)) as c:
        yield c
