"""
rules.py - Turn order and end-of-game sequencing for Connect Four

This module provides the GameState class, which owns a Board and is the only
thing allowed to change it, together with the small functional API
(new_game / apply_move / status / cell_at) that presentation layers drive.
"""

import numbers
from typing import List, Optional, Tuple

import numpy as np

from c4engine.debug import debug
from c4engine.game.board import Board
from c4engine.game.errors import ColumnFullError, GameOverError, InvalidColumnError, MoveError
from c4engine.utils import HEIGHT, WIDTH, Player, GameStatus


class GameState:
    """
    A single game of Connect Four.

    Player ONE moves first. Moves are applied in place; a rejected move raises
    a MoveError and leaves the state exactly as it was. Once the status is
    terminal the state refuses further moves, and a new game is needed.
    """

    def __init__(self, height: int = HEIGHT, width: int = WIDTH):
        self._board = Board(height, width)
        self.current_player = Player.ONE
        self.status = GameStatus.IN_PROGRESS
        self.last_move: Optional[Tuple[int, int]] = None
        self.move_count = 0
        debug.debug(f"New {height}x{width} game", "game")

    @property
    def board(self) -> Board:
        """The board owned by this game. Callers must not modify it."""
        return self._board

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def cell_at(self, row: int, col: int) -> Player:
        return self._board.cell_at(row, col)

    def valid_moves(self) -> List[int]:
        """Columns that would currently accept a piece."""
        if self.is_game_over():
            return []
        return [col for col in range(self.width) if self._board.find_drop_row(col) is not None]

    def _is_column_index(self, column) -> bool:
        # bool is an Integral but never a column
        if isinstance(column, bool) or not isinstance(column, numbers.Integral):
            return False
        return 0 <= column < self.width

    def _reject(self, error: MoveError):
        debug.debug(f"Rejected move {error.column!r} for {self.current_player.name}: {error}", "game")
        raise error

    def apply_move(self, column: int) -> 'GameState':
        """
        Drop the current player's piece into a column.

        After the piece lands the mover is checked for four in a row, then the
        board is checked for being full; only when neither ends the game does
        the turn pass to the other player.

        Args:
            column: Column index (0-indexed, left to right)

        Returns:
            This state, updated

        Raises:
            GameOverError: If the game has already finished
            InvalidColumnError: If the column is not on the board
            ColumnFullError: If the column has no empty cell
        """
        if self.is_game_over():
            self._reject(GameOverError(column, self.status))
        if not self._is_column_index(column):
            self._reject(InvalidColumnError(column, self.width))
        column = int(column)
        if self._board.find_drop_row(column) is None:
            self._reject(ColumnFullError(column))

        mover = self.current_player
        row = self._board.drop(column, mover)
        self.last_move = (row, column)
        self.move_count += 1

        if self._board.has_win(mover):
            self.status = GameStatus.won_by(mover)
            debug.info(f"Player {mover.name} wins after move at {self.last_move}", "game")
        elif self._board.is_full():
            self.status = GameStatus.TIED
            debug.info("Game ends in a tie", "game")
        else:
            self.current_player = mover.other()
            debug.debug(f"Switching to player {self.current_player.name}", "game")

        return self

    def winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the winning run, or an empty list if nobody has won."""
        if self.winner is None:
            return []
        return self._board.winning_line(self.winner)

    def get_state(self) -> np.ndarray:
        """Get a copy of the grid as a numpy array."""
        return self._board.get_state()

    def render(self) -> str:
        return self._board.render()

    def __repr__(self) -> str:
        return (f"GameState({self.height}x{self.width}, current_player={self.current_player.name}, "
                f"status={self.status.name}, moves={self.move_count})")


def new_game(height: int = HEIGHT, width: int = WIDTH) -> GameState:
    """Start a game on an empty board with player ONE to move."""
    return GameState(height, width)


def apply_move(state: GameState, column: int) -> GameState:
    """Apply a move to `state`; see GameState.apply_move."""
    return state.apply_move(column)


def status(state: GameState) -> GameStatus:
    """Current status of a game."""
    return state.status


def cell_at(state: GameState, row: int, col: int) -> Player:
    """Contents of one cell of a game's board."""
    return state.cell_at(row, col)
