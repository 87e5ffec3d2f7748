"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color
from checkie.core.types import BOARD_SIZE

_SYMBOLS: dict[tuple[Color, bool], str] = {
    (Color.BLACK, False): "b",
    (Color.BLACK, True): "B",
    (Color.RED, False): "r",
    (Color.RED, True): "R",
}


@dataclass(slots=True, eq=False)
class Piece:
    """A checker on the board.

    Position and king flag are mutated by :class:`~checkie.core.board.Board`
    as moves are applied. Pieces compare by identity so a roster can hold
    two men of the same color without ambiguity.
    """

    color: Color
    row: int
    col: int
    king: bool = False

    # ── Rules ────────────────────────────────────────────────────────────

    def is_valid_directional_move(self, row_delta: int) -> bool:
        """Whether a move changing the row by *row_delta* suits this piece.

        Kings go anywhere. Men step forward only, but may jump in any
        direction.
        """
        if self.king:
            return True
        return row_delta == self.color.forward or abs(row_delta) == 2

    def check_for_promotion(self) -> None:
        """Crown a man that has reached the far row."""
        if self.king:
            return
        if (self.color == Color.RED and self.row == 0) or (
            self.color == Color.BLACK and self.row == BOARD_SIZE - 1
        ):
            self.make_king()

    def make_king(self) -> None:
        self.king = True

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """One-letter symbol: lowercase man, uppercase king."""
        return _SYMBOLS[(self.color, self.king)]

    def __str__(self) -> str:
        return self.symbol
