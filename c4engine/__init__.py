"""
c4engine - Connect Four rules engine

This package provides the Connect Four board, move legality, win and tie
detection, and turn sequencing as a synchronous API, along with a Gymnasium
environment and a console interface that drive it.
"""

from c4engine.game import (GameState, new_game, apply_move, status, cell_at,
                           MoveError, InvalidColumnError, ColumnFullError,
                           GameOverError, OutOfBoundsError)
from c4engine.utils import HEIGHT, WIDTH, Player, GameStatus

# Version number
__version__ = '0.1.0'

__all__ = ['GameState', 'new_game', 'apply_move', 'status', 'cell_at',
           'MoveError', 'InvalidColumnError', 'ColumnFullError', 'GameOverError',
           'OutOfBoundsError', 'HEIGHT', 'WIDTH', 'Player', 'GameStatus']
