"""Read-only snapshots of a game, safe to hand out of a session lock."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color


@dataclass(frozen=True, slots=True)
class PieceSnapshot:
    color: Color
    king: bool
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Board contents and status of one game at a point in time."""

    game_id: str
    pieces: tuple[PieceSnapshot, ...]
    current_turn: Color
    game_over: bool
    winner: Color | None
    single_player: bool
