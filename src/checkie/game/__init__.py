"""Game management layer: controller, players, session registry.

Quick start::

    from checkie.game import GameRegistry

    registry = GameRegistry()
    game_id = registry.create(single_player=True)
    registry.submit_move(game_id, 2, 1, 3, 0)
    print(registry.snapshot(game_id).current_turn)
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.player import AIPlayer, HumanPlayer
from checkie.game.registry import GameNotFoundError, GameRegistry
from checkie.game.state import GameSnapshot, PieceSnapshot

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameNotFoundError",
    "GameRegistry",
    "GameSnapshot",
    "HumanPlayer",
    "PieceSnapshot",
]
