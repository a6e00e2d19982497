"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the board dimensions, the Player and GameStatus
enumerations, the direction vectors used for win detection and the ASCII
board renderer shared by the engine and its interfaces.
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants
HEIGHT = 6
WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player (EMPTY stays EMPTY)."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    TIED = auto()

    @classmethod
    def won_by(cls, player: Player) -> 'GameStatus':
        """Get the winning status for a player."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        elif player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"{player!r} cannot win a game")

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for games in progress or tied."""
        if self == GameStatus.PLAYER_ONE_WIN:
            return Player.ONE
        elif self == GameStatus.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    def is_game_over(self) -> bool:
        """Check if the status is terminal."""
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Directions a winning run can extend in from its first cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); row grows downwards
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid of player values as ASCII art.

    Args:
        grid: 2D array of Player values, row 0 at the top

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    result = [border]
    for row in range(rows):
        cells = [str(Player(int(grid[row, col]))) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Columns past 9 only show their last digit
    result.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(result)
