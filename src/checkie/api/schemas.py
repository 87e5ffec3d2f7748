"""Request / response models for the HTTP API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from checkie.game.state import GameSnapshot


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StartGameRequest(_CamelModel):
    """Client request to start a game. Single-player unless told otherwise."""

    single_player: bool = True


class MoveRequest(_CamelModel):
    """A human move: origin and destination squares of one piece."""

    game_id: str
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @field_validator("game_id")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only ids."""
        if not v.strip():
            raise ValueError("gameId must not be blank")
        return v


class GameResponse(_CamelModel):
    game_id: str
    message: str


class PieceView(_CamelModel):
    color: str
    king: bool
    row: int
    col: int


class BoardStateResponse(_CamelModel):
    """Full board contents and status of one game.

    Fields:
        pieces: Every occupied square, row-major.
        current_turn: ``"BLACK"`` or ``"RED"``.
        winner: Set only once the game is over.
    """

    game_id: str
    pieces: list[PieceView]
    current_turn: str
    game_over: bool
    single_player: bool
    winner: str | None = None

    @classmethod
    def from_snapshot(cls, snap: GameSnapshot) -> BoardStateResponse:
        return cls(
            game_id=snap.game_id,
            pieces=[
                PieceView(color=p.color.name, king=p.king, row=p.row, col=p.col)
                for p in snap.pieces
            ],
            current_turn=snap.current_turn.name,
            game_over=snap.game_over,
            winner=snap.winner.name if snap.winner is not None else None,
            single_player=snap.single_player,
        )


class HealthResponse(BaseModel):
    status: str
    games: int
