"""Board geometry constants and coordinate helpers.

Coordinates are ``(row, col)`` pairs with ``(0, 0)`` in Black's back corner.
Black starts on rows 0–2 and moves toward higher rows; Red starts on the last
three rows and moves toward row 0.
"""

from __future__ import annotations

BOARD_SIZE = 8
HOME_ROWS = 3

# Fixed iteration order for move generation.
DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark_square(row: int, col: int) -> bool:
    """Dark squares are the only playable ones: ``row + col`` is odd."""
    return (row + col) % 2 == 1


def dark_squares(from_row: int, to_row: int) -> list[tuple[int, int]]:
    """Dark squares of rows ``from_row..to_row`` inclusive, row-major."""
    return [
        (row, col)
        for row in range(from_row, to_row + 1)
        for col in range(BOARD_SIZE)
        if is_dark_square(row, col)
    ]
