"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs,
not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Color

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a checkers game.

    A pending multi-jump is not a phase of its own: the side to move simply
    does not change.
    """

    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is choosing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> Move | None:
        """Pick a move on *board*.

        Humans return None: their moves arrive through the controller.
        """


class IGameController(ABC):
    """Interface for the single-game orchestrator."""

    @abstractmethod
    def submit_move(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> bool:
        """Submit a move. Returns True if legal and applied."""
