"""Turn-retention policies: who moves after a move has been applied."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move

# (board after the move, applied move) -> mover keeps the turn?
TurnRetentionPolicy = Callable[["Board", "Move"], bool]


def any_piece_can_capture(board: Board, move: Move) -> bool:
    """The mover keeps the turn while any of its pieces can capture.

    Board-wide check: applies after simple moves too, and lets a different
    piece continue the chain.
    """
    return board.has_any_capture(board.current_turn)


def same_piece_can_capture(board: Board, move: Move) -> bool:
    """Strict multi-jump rule: only the piece that just jumped continues."""
    if not move.is_capture or move.piece is None:
        return False
    return bool(board.capture_moves_for_piece(move.piece))


DEFAULT_TURN_POLICY: TurnRetentionPolicy = any_piece_can_capture
