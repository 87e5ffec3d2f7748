"""Computer opponent package: selector protocol and greedy implementation."""

from checkie.engine.greedy import GreedyMoveSelector
from checkie.engine.selector import IMoveSelector, apply_move

DefaultSelector: type[IMoveSelector] = GreedyMoveSelector

__all__ = [
    "DefaultSelector",
    "GreedyMoveSelector",
    "IMoveSelector",
    "apply_move",
]
