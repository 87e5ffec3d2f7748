"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. Black moves first."""

    BLACK = 0
    RED = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a simple move for a man of this color."""
        return 1 if self is Color.BLACK else -1

    def __str__(self) -> str:
        return self.name.lower()
