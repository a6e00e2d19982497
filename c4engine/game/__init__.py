"""
c4engine.game - Core game mechanics for Connect Four

This package contains the board representation, the move error types and
the game state that sequences turns. The Gymnasium adapter lives in
c4engine.game.env and is not imported here.
"""

from c4engine.game.board import Board
from c4engine.game.errors import (MoveError, InvalidColumnError, ColumnFullError,
                                  GameOverError, OutOfBoundsError)
from c4engine.game.rules import GameState, new_game, apply_move, status, cell_at

__all__ = ['Board', 'GameState', 'new_game', 'apply_move', 'status', 'cell_at',
           'MoveError', 'InvalidColumnError', 'ColumnFullError', 'GameOverError',
           'OutOfBoundsError']
