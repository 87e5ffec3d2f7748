"""
FastAPI application exposing the game registry over HTTP.

Routes:
- POST /api/game/new    start a game, returns its id
- POST /api/game/move   submit a human move (404 unknown game, 400 illegal)
- GET  /api/game/state  full board contents of one game
- GET  /health          liveness check

Handlers are sync (not async): FastAPI runs them in a thread pool, and the
registry serializes moves per game with its own locks.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from checkie import __version__
from checkie.api.schemas import (
    BoardStateResponse,
    GameResponse,
    HealthResponse,
    MoveRequest,
    StartGameRequest,
)
from checkie.game.registry import GameNotFoundError, GameRegistry

_LOGGER = logging.getLogger(__name__)

NEW_GAME_MESSAGE = "New game started successfully"
MOVE_APPLIED_MESSAGE = "Move applied successfully"
ILLEGAL_MOVE_MESSAGE = "Illegal move! Please try again"


def _registry(request: Request) -> GameRegistry:
    return request.app.state.registry


def create_app(registry: GameRegistry | None = None) -> FastAPI:
    """Build the application around *registry* (a fresh one by default)."""
    app = FastAPI(title="Checkie", version=__version__)
    app.state.registry = registry if registry is not None else GameRegistry()

    @app.exception_handler(GameNotFoundError)
    def game_not_found(request: Request, exc: GameNotFoundError) -> JSONResponse:
        body = GameResponse(game_id=exc.game_id, message=str(exc))
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=body.model_dump(by_alias=True),
        )

    @app.post("/api/game/new", response_model=GameResponse)
    def start_new_game(
        request: Request, body: StartGameRequest | None = None
    ) -> GameResponse:
        """Start a game; single-player unless the body says otherwise."""
        single_player = body.single_player if body is not None else True
        game_id = _registry(request).create(single_player=single_player)
        return GameResponse(game_id=game_id, message=NEW_GAME_MESSAGE)

    @app.post(
        "/api/game/move",
        response_model=GameResponse,
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": GameResponse},
            status.HTTP_404_NOT_FOUND: {"model": GameResponse},
        },
    )
    def make_move(request: Request, body: MoveRequest) -> GameResponse | JSONResponse:
        """Validate and apply a human move, then the computer's reply if any."""
        ok = _registry(request).submit_move(
            body.game_id, body.from_row, body.from_col, body.to_row, body.to_col
        )
        if ok:
            return GameResponse(game_id=body.game_id, message=MOVE_APPLIED_MESSAGE)
        rejected = GameResponse(game_id=body.game_id, message=ILLEGAL_MOVE_MESSAGE)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=rejected.model_dump(by_alias=True),
        )

    @app.get(
        "/api/game/state",
        response_model=BoardStateResponse,
        responses={status.HTTP_404_NOT_FOUND: {"model": GameResponse}},
    )
    def board_state(
        request: Request, game_id: Annotated[str, Query(alias="gameId")]
    ) -> BoardStateResponse:
        snap = _registry(request).snapshot(game_id)
        return BoardStateResponse.from_snapshot(snap)

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request) -> HealthResponse:
        return HealthResponse(status="ok", games=len(_registry(request)))

    _LOGGER.debug("Application created")
    return app


app = create_app()
