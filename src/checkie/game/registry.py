"""GameRegistry - in-memory store of running games keyed by opaque ids."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field

from checkie.engine import IMoveSelector
from checkie.game.controller import GameController
from checkie.game.state import GameSnapshot

_LOGGER = logging.getLogger(__name__)


class GameNotFoundError(KeyError):
    """Raised when a game id is unknown to the registry."""

    def __init__(self, game_id: str) -> None:
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game with id '{self.game_id}' not found"


@dataclass(slots=True)
class _Entry:
    controller: GameController
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameRegistry:
    """Thread-safe map of game id to :class:`GameController`.

    Every move sequence on one game (human move plus the computer's reply)
    runs under that game's lock. Different games never contend.

    Games live in memory for the life of the process. Finished games are
    not evicted, so memory grows with the number of games started.
    """

    __slots__ = ("_games", "_lock", "_selector_factory")

    def __init__(self, selector_factory: type[IMoveSelector] | None = None) -> None:
        self._games: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._selector_factory = selector_factory

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def create(self, single_player: bool = True) -> str:
        """Start a new game and return its id."""
        controller = GameController()
        selector = self._selector_factory() if self._selector_factory else None
        controller.new_game(single_player=single_player, selector=selector)
        game_id = str(uuid.uuid4())
        with self._lock:
            self._games[game_id] = _Entry(controller)
        _LOGGER.info("Started game %s (single_player=%s)", game_id, single_player)
        return game_id

    def exists(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self._games

    def get(self, game_id: str) -> GameController:
        return self._entry(game_id).controller

    def submit_move(
        self,
        game_id: str,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
    ) -> bool:
        """Validate and apply a move on *game_id*; False if illegal."""
        entry = self._entry(game_id)
        with entry.lock:
            ok = entry.controller.submit_move(from_row, from_col, to_row, to_col)
        if not ok:
            _LOGGER.info(
                "Rejected move (%d,%d)-(%d,%d) in game %s",
                from_row,
                from_col,
                to_row,
                to_col,
                game_id,
            )
        return ok

    def snapshot(self, game_id: str) -> GameSnapshot:
        entry = self._entry(game_id)
        with entry.lock:
            return entry.controller.snapshot(game_id)

    def _entry(self, game_id: str) -> _Entry:
        with self._lock:
            entry = self._games.get(game_id)
        if entry is None:
            _LOGGER.warning("Unknown game id %s", game_id)
            raise GameNotFoundError(game_id)
        return entry
