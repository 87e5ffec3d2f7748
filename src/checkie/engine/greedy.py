"""Greedy move selector: first capture, else first step."""

from __future__ import annotations

import logging

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move

_LOGGER = logging.getLogger(__name__)


class GreedyMoveSelector:
    """Deterministic, stateless opponent.

    Walks the color's roster in order and returns the first capture found.
    Without any capture it returns the first simple move. ``None`` means the
    color has no legal move at all.
    """

    __slots__ = ()

    def generate_move(self, board: Board, color: Color) -> Move | None:
        roster = board.pieces(color)

        for piece in roster:
            captures = board.capture_moves_for_piece(piece)
            if captures:
                return captures[0]

        for piece in roster:
            steps = board.simple_moves_for_piece(piece)
            if steps:
                return steps[0]

        _LOGGER.debug("No legal move for %s", color)
        return None
