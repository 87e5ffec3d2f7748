"""Core domain layer: pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import Board, Move

    board = Board.standard()
    move = Move.of(board.piece_at(2, 1), 3, 0)
    if board.is_valid_move(move):
        board.move_piece(move)
"""

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.rules import (
    DEFAULT_TURN_POLICY,
    TurnRetentionPolicy,
    any_piece_can_capture,
    same_piece_can_capture,
)
from checkie.core.types import (
    BOARD_SIZE,
    DIAGONALS,
    is_dark_square,
    is_on_board,
)

__all__ = [
    # Enums
    "Color",
    # Geometry
    "BOARD_SIZE",
    "DIAGONALS",
    "is_dark_square",
    "is_on_board",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Turn policies
    "DEFAULT_TURN_POLICY",
    "TurnRetentionPolicy",
    "any_piece_can_capture",
    "same_piece_can_capture",
]
