"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.piece import Piece


@dataclass(slots=True)
class Move:
    """A proposed or executed transition of one piece.

    ``captured_pieces`` is filled either by move generation (capture moves)
    or by :meth:`Board.move_piece` while the move is applied.
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int
    piece: Piece | None = None
    captured_pieces: list[Piece] = field(default_factory=list)

    @classmethod
    def of(cls, piece: Piece, to_row: int, to_col: int) -> Move:
        """Move *piece* from its current square to ``(to_row, to_col)``."""
        return cls(piece.row, piece.col, to_row, to_col, piece)

    @property
    def row_delta(self) -> int:
        return self.to_row - self.from_row

    @property
    def col_delta(self) -> int:
        return self.to_col - self.from_col

    @property
    def is_capture(self) -> bool:
        return bool(self.captured_pieces)

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"({self.from_row},{self.from_col}){sep}({self.to_row},{self.to_col})"
