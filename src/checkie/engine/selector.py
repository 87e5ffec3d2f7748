"""Shared move-selection protocol and the validate-then-apply helper."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Color
    from checkie.core.move import Move


class IMoveSelector(Protocol):
    """Protocol for computer opponents used by the game layer."""

    def generate_move(self, board: Board, color: Color) -> Move | None: ...


def apply_move(board: Board, move: Move) -> bool:
    """Apply *move* if legal. Returns False and leaves *board* untouched otherwise."""
    if not board.is_valid_move(move):
        return False
    board.move_piece(move)
    return True
