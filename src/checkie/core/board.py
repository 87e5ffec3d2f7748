"""Board - piece placement, rosters, move legality and move application."""

from __future__ import annotations

import logging

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.rules import DEFAULT_TURN_POLICY, TurnRetentionPolicy
from checkie.core.types import (
    BOARD_SIZE,
    DIAGONALS,
    HOME_ROWS,
    dark_squares,
    is_on_board,
)

_LOGGER = logging.getLogger(__name__)


class Board:
    """Mutable 8x8 checkers board with one roster per color.

    A square holds a piece iff the piece's ``(row, col)`` matches the square
    and the piece sits in the roster of its color.
    """

    __slots__ = (
        "_squares",
        "_rosters",
        "current_turn",
        "single_player",
        "_turn_policy",
    )

    def __init__(
        self,
        single_player: bool = False,
        current_turn: Color = Color.BLACK,
        turn_policy: TurnRetentionPolicy | None = None,
    ) -> None:
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._rosters: dict[Color, list[Piece]] = {Color.BLACK: [], Color.RED: []}
        self.current_turn = current_turn
        self.single_player = single_player
        self._turn_policy = turn_policy if turn_policy is not None else DEFAULT_TURN_POLICY

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(
        cls,
        single_player: bool = False,
        turn_policy: TurnRetentionPolicy | None = None,
    ) -> Board:
        """Standard starting position, Black to move."""
        b = cls(single_player=single_player, turn_policy=turn_policy)
        for row, col in dark_squares(0, HOME_ROWS - 1):
            b.place(Piece(Color.BLACK, row, col))
        for row, col in dark_squares(BOARD_SIZE - HOME_ROWS, BOARD_SIZE - 1):
            b.place(Piece(Color.RED, row, col))
        return b

    # -- Element access -----------------------------------------------------

    def piece_at(self, row: int, col: int) -> Piece | None:
        if not is_on_board(row, col):
            return None
        return self._squares[row][col]

    def set_piece_at(self, row: int, col: int, piece: Piece | None) -> None:
        """Replace a square's content. Rosters are left untouched."""
        if not is_on_board(row, col):
            return
        self._squares[row][col] = piece
        if piece is not None:
            piece.row = row
            piece.col = col

    def place(self, piece: Piece) -> bool:
        """Put *piece* on its own square and enlist it in its roster.

        Returns ``False`` and changes nothing when the square is off-board
        or occupied, or when *piece* is already on this board.
        """
        row, col = piece.row, piece.col
        if not is_on_board(row, col) or not self.is_empty(row, col):
            return False
        if any(piece in roster for roster in self._rosters.values()):
            return False
        self.set_piece_at(row, col, piece)
        self._rosters[piece.color].append(piece)
        return True

    def is_empty(self, row: int, col: int) -> bool:
        return self.piece_at(row, col) is None

    # -- Query helpers ------------------------------------------------------

    @property
    def black_pieces(self) -> list[Piece]:
        return self._rosters[Color.BLACK]

    @property
    def red_pieces(self) -> list[Piece]:
        return self._rosters[Color.RED]

    def pieces(self, color: Color) -> list[Piece]:
        """Roster of *color*, in placement order."""
        return self._rosters[color]

    def all_pieces(self) -> list[Piece]:
        """Every piece on the board, row-major."""
        return [p for row in self._squares for p in row if p is not None]

    @property
    def turn_policy(self) -> TurnRetentionPolicy:
        return self._turn_policy

    def is_game_over(self) -> bool:
        return not self.black_pieces or not self.red_pieces

    def winner(self) -> Color | None:
        if not self.black_pieces:
            return Color.RED
        if not self.red_pieces:
            return Color.BLACK
        return None

    # -- Move generation ----------------------------------------------------

    def capture_moves_for_piece(self, piece: Piece) -> list[Move]:
        """Jumps available to *piece*, in fixed diagonal order."""
        moves: list[Move] = []
        for dr, dc in DIAGONALS:
            to_row, to_col = piece.row + 2 * dr, piece.col + 2 * dc
            if not is_on_board(to_row, to_col) or not self.is_empty(to_row, to_col):
                continue
            jumped = self.piece_at(piece.row + dr, piece.col + dc)
            if jumped is None or jumped.color == piece.color:
                continue
            if not piece.is_valid_directional_move(2 * dr):
                continue
            move = Move.of(piece, to_row, to_col)
            move.captured_pieces.append(jumped)
            moves.append(move)
        return moves

    def simple_moves_for_piece(self, piece: Piece) -> list[Move]:
        """One-step moves available to *piece*, in fixed diagonal order."""
        moves: list[Move] = []
        for dr, dc in DIAGONALS:
            to_row, to_col = piece.row + dr, piece.col + dc
            if not is_on_board(to_row, to_col) or not self.is_empty(to_row, to_col):
                continue
            if piece.is_valid_directional_move(dr):
                moves.append(Move.of(piece, to_row, to_col))
        return moves

    def can_capture(self, piece: Piece) -> bool:
        return bool(self.capture_moves_for_piece(piece))

    def has_any_capture(self, color: Color) -> bool:
        """Whether any piece of *color* has a jump (mandatory-capture rule)."""
        return any(self.can_capture(p) for p in self._rosters[color])

    def has_any_move(self, color: Color) -> bool:
        """Whether *color* has at least one jump or step anywhere."""
        return any(
            self.capture_moves_for_piece(p) or self.simple_moves_for_piece(p)
            for p in self._rosters[color]
        )

    # -- Legality -----------------------------------------------------------

    def is_valid_move(self, move: Move) -> bool:
        """Pure legality check for *move* in the current position."""
        piece = move.piece
        if piece is None:
            return False
        if piece.color != self.current_turn:
            return False
        if not is_on_board(move.to_row, move.to_col):
            return False
        if not self.is_empty(move.to_row, move.to_col):
            return False

        row_delta, col_delta = move.row_delta, move.col_delta
        if abs(row_delta) != abs(col_delta):
            return False

        if abs(row_delta) == 1:
            if self.has_any_capture(self.current_turn):
                return False
            return piece.is_valid_directional_move(row_delta)

        if abs(row_delta) == 2:
            jumped = self._jumped_piece(move)
            return (
                jumped is not None
                and jumped.color != piece.color
                and piece.is_valid_directional_move(row_delta)
            )

        return False

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, move: Move) -> None:
        """Apply *move*: relocate, promote, remove captures, hand over the turn.

        Callers validate with :meth:`is_valid_move` first. An empty origin
        square makes this a no-op.
        """
        piece = self.piece_at(move.from_row, move.from_col)
        if piece is None:
            _LOGGER.debug("No piece at origin of %s; ignoring", move)
            return
        if move.piece is None:
            move.piece = piece

        if abs(move.row_delta) == 2:
            jumped = self._jumped_piece(move)
            if (
                jumped is not None
                and jumped.color != piece.color
                and jumped not in move.captured_pieces
            ):
                move.captured_pieces.append(jumped)

        self.set_piece_at(move.from_row, move.from_col, None)
        self.set_piece_at(move.to_row, move.to_col, piece)
        piece.check_for_promotion()

        for captured in move.captured_pieces:
            self._remove(captured)

        if not self._turn_policy(self, move):
            self.current_turn = self.current_turn.opposite

    def copy(self) -> Board:
        """Deep copy: pieces are cloned, the clone shares nothing."""
        b = Board(self.single_player, self.current_turn, self._turn_policy)
        for color in Color:
            for p in self._rosters[color]:
                b.place(Piece(p.color, p.row, p.col, p.king))
        return b

    def _remove(self, piece: Piece) -> None:
        if self.piece_at(piece.row, piece.col) is piece:
            self.set_piece_at(piece.row, piece.col, None)
        roster = self._rosters[piece.color]
        if piece in roster:
            roster.remove(piece)

    def _jumped_piece(self, move: Move) -> Piece | None:
        return self.piece_at(
            move.from_row + move.row_delta // 2,
            move.from_col + move.col_delta // 2,
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.current_turn == other.current_turn
            and self._layout() == other._layout()
        )

    def _layout(self) -> list[tuple[int, int, Color, bool]]:
        return [(p.row, p.col, p.color, p.king) for p in self.all_pieces()]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._squares[row]]
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(c) for c in range(BOARD_SIZE)))
        return "\n".join(rows)
