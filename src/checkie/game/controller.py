"""GameController - the orchestrator of a single checkers game.

Coordinates: Players, Board, move selector.
Emits events via simple callbacks so the API layer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.rules import TurnRetentionPolicy
from checkie.engine import IMoveSelector, apply_move
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.player import AIPlayer, HumanPlayer
from checkie.game.state import GameSnapshot, PieceSnapshot

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Board], None]
GameOverCallback = Callable[[Color | None], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs one game: validates human moves, answers with the AI in
    single-player mode, detects the end of the game, notifies listeners.

    Thread-safety: none. :class:`~checkie.game.registry.GameRegistry`
    serializes calls per game.
    """

    __slots__ = ("_board", "_players", "_phase", "_blocked", "events")

    def __init__(self) -> None:
        self._board = Board.standard()
        self._players: dict[Color, IPlayer] = {}
        self._phase = GamePhase.AWAITING_MOVE
        # Side left without a legal move; it loses.
        self._blocked: Color | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def single_player(self) -> bool:
        return self._board.single_player

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.current_turn)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    @property
    def is_game_over(self) -> bool:
        return self._board.is_game_over() or self._blocked is not None

    @property
    def winner(self) -> Color | None:
        if self._blocked is not None:
            return self._blocked.opposite
        return self._board.winner()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self,
        single_player: bool = True,
        board: Board | None = None,
        selector: IMoveSelector | None = None,
        turn_policy: TurnRetentionPolicy | None = None,
    ) -> None:
        """Set up a fresh game. Black is always human; Red is the computer
        in single-player mode.

        A prepared *board* replaces the standard layout and carries its own
        ``single_player`` flag.
        """
        if board is None:
            board = Board.standard(single_player, turn_policy)
        self._board = board
        red: IPlayer
        if board.single_player:
            red = AIPlayer(Color.RED, selector=selector)
        else:
            red = HumanPlayer(Color.RED)
        self._players = {Color.BLACK: HumanPlayer(Color.BLACK), Color.RED: red}
        self._blocked = None
        self._set_phase(GamePhase.AWAITING_MOVE)

    def submit_move(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> bool:
        if self.is_game_over:
            return False

        board = self._board
        piece = board.piece_at(from_row, from_col)
        if piece is None or piece.color != board.current_turn:
            return False

        move = Move(from_row, from_col, to_row, to_col, piece)
        if not apply_move(board, move):
            return False
        self._emit_move(move)

        if self._check_game_over():
            return True

        if board.single_player and piece.color == Color.BLACK:
            self._play_computer_turn()
        return True

    def snapshot(self, game_id: str) -> GameSnapshot:
        """Client-facing view of the game; pieces are listed row-major."""
        board = self._board
        return GameSnapshot(
            game_id=game_id,
            pieces=tuple(
                PieceSnapshot(p.color, p.king, p.row, p.col)
                for p in board.all_pieces()
            ),
            current_turn=board.current_turn,
            game_over=self.is_game_over,
            winner=self.winner if self.is_game_over else None,
            single_player=board.single_player,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play_computer_turn(self) -> None:
        """Let the computer move while the turn is its own.

        A multi-jump keeps the turn with Red, so one turn may take several
        applications. This differs from answering each human move with exactly
        one computer move: play continues until the turn leaves Red or the
        game ends.
        """
        board = self._board
        cp = self.current_player
        if cp is None or cp.is_human:
            return

        self._set_phase(GamePhase.THINKING)
        while board.current_turn == cp.color:
            move = cp.request_move(board)
            if move is None:
                _LOGGER.warning("%s has no legal move; passing", cp.name)
                break
            if not apply_move(board, move):
                _LOGGER.warning("%s proposed illegal move %s", cp.name, move)
                break
            self._emit_move(move)
            if self._check_game_over():
                return
        self._set_phase(GamePhase.AWAITING_MOVE)

    def _check_game_over(self) -> bool:
        board = self._board
        if not board.is_game_over():
            side = board.current_turn
            if board.has_any_move(side):
                return False
            self._blocked = side
            _LOGGER.info("%s cannot move", side)
        winner = self.winner
        _LOGGER.info("Game over, winner: %s", winner)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)
        return True

    def _emit_move(self, move: Move) -> None:
        _LOGGER.debug("Applied %s", move)
        for cb in self.events.on_move:
            cb(move, self._board)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
