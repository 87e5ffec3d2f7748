"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.engine import DefaultSelector, IMoveSelector
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move


class HumanPlayer(IPlayer):
    """A human participant; moves come in through the API.

    ``request_move`` returns None because humans choose interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> Move | None:
        return None  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """A computer participant that delegates to a move selector.

    Args:
        color: Side the AI plays.
        name: Display name.
        selector: Move-selection strategy; the greedy selector by default.
    """

    __slots__ = ("_color", "_name", "_selector")

    def __init__(
        self,
        color: Color,
        name: str = "Computer",
        selector: IMoveSelector | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._selector = selector if selector is not None else DefaultSelector()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def selector(self) -> IMoveSelector:
        return self._selector

    def request_move(self, board: Board) -> Move | None:
        return self._selector.generate_move(board, self._color)
