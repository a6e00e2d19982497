"""
errors.py - Exceptions raised by the Connect Four engine

A MoveError means the move was rejected and the game state is unchanged;
callers can ignore the input and keep going. OutOfBoundsError signals a bad
cell coordinate and indicates a programming error in the caller.
"""

from typing import Any


class MoveError(Exception):
    """Base class for rejected moves."""

    def __init__(self, column: Any, message: str):
        super().__init__(message)
        self.column = column


class InvalidColumnError(MoveError):
    """The column index is not on the board."""

    def __init__(self, column: Any, width: int):
        super().__init__(column, f"Invalid column {column!r}. Must be between 0 and {width - 1}")
        self.width = width


class ColumnFullError(MoveError):
    """The column has no empty cell left."""

    def __init__(self, column: int):
        super().__init__(column, f"Column {column} is full")


class GameOverError(MoveError):
    """A move was submitted after the game reached a terminal status."""

    def __init__(self, column: Any, status):
        super().__init__(column, f"Game is over ({status.name}); start a new game to keep playing")
        self.status = status


class OutOfBoundsError(IndexError):
    """A cell coordinate lies outside the board."""

    def __init__(self, row: Any, col: Any, height: int, width: int):
        super().__init__(f"Cell ({row}, {col}) is outside the {height}x{width} board")
        self.row = row
        self.col = col
