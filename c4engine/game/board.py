"""
board.py - Grid storage, piece placement and win detection for Connect Four

This module implements the Board class, which stores the pieces in a numpy
grid and answers the questions the rules need: where a piece dropped into a
column lands, whether a player owns a run of four, and whether the grid is full.
"""

from typing import List, Optional, Tuple

import numpy as np

from c4engine.debug import debug
from c4engine.game.errors import ColumnFullError, OutOfBoundsError
from c4engine.utils import (HEIGHT, WIDTH, CONNECT_N, Player, DIRECTION_VECTORS,
                            render_board_ascii)


class Board:
    """
    A Connect Four grid of `height` rows by `width` columns.

    Row 0 is the top of the board and row `height - 1` the bottom, so pieces
    fill each column from the highest row index down to 0.
    """

    def __init__(self, height: int = HEIGHT, width: int = WIDTH):
        """
        Create an empty board.

        Args:
            height: Number of rows
            width: Number of columns

        Raises:
            ValueError: If either dimension is smaller than 1
        """
        if height < 1 or width < 1:
            raise ValueError(f"Board dimensions must be positive, got {height}x{width}")

        self.height = height
        self.width = width
        self.grid = np.zeros((height, width), dtype=np.int8)
        debug.trace(f"Created empty {height}x{width} board", "board")

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board(self.height, self.width)
        new_board.grid = self.grid.copy()
        return new_board

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if (row, col) lies on the board."""
        return 0 <= row < self.height and 0 <= col < self.width

    def _require_in_bounds(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.height, self.width)

    def cell_at(self, row: int, col: int) -> Player:
        """
        Get the contents of a cell.

        Raises:
            OutOfBoundsError: If (row, col) is not on the board
        """
        self._require_in_bounds(row, col)
        return Player(int(self.grid[row, col]))

    def is_empty(self, row: int, col: int) -> bool:
        """Check if a cell holds no piece."""
        return self.cell_at(row, col) == Player.EMPTY

    def find_drop_row(self, col: int) -> Optional[int]:
        """
        Find the row a piece dropped into `col` would settle in.

        The column is scanned from the bottom row upwards and the first empty
        row wins, which keeps every column packed from the bottom.

        Returns:
            Row index, or None if the column is full
        """
        self._require_in_bounds(0, col)

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, col] == Player.EMPTY.value:
                return row
        return None

    def column_height(self, col: int) -> int:
        """Number of pieces stacked in a column."""
        drop_row = self.find_drop_row(col)
        if drop_row is None:
            return self.height
        return self.height - 1 - drop_row

    def drop(self, col: int, player: Player) -> int:
        """
        Drop a piece for `player` into a column.

        This does not check turn order; the rules layer does that.

        Returns:
            The row the piece landed in

        Raises:
            OutOfBoundsError: If the column is not on the board
            ColumnFullError: If the column has no empty cell
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot drop an empty piece")

        row = self.find_drop_row(col)
        if row is None:
            raise ColumnFullError(col)

        self.grid[row, col] = player.value
        debug.trace(f"Placed {player.name} at ({row}, {col})", "board")
        return row

    def is_full(self) -> bool:
        """Check if every cell holds a piece."""
        return not np.any(self.grid == Player.EMPTY.value)

    def _run_from(self, row: int, col: int, dr: int, dc: int,
                  player_value: int) -> Optional[List[Tuple[int, int]]]:
        cells = [(row + k * dr, col + k * dc) for k in range(CONNECT_N)]
        for r, c in cells:
            if not self.in_bounds(r, c) or self.grid[r, c] != player_value:
                return None
        return cells

    def winning_line(self, player: Player) -> List[Tuple[int, int]]:
        """
        Find the first run of four cells owned by `player`.

        Every cell is tried as the start of a run in each of the four
        directions (right, down, down-right, down-left).

        Returns:
            The (row, col) cells of the run, or an empty list if there is none
        """
        if player == Player.EMPTY:
            return []

        for row in range(self.height):
            for col in range(self.width):
                if self.grid[row, col] != player.value:
                    continue
                for dr, dc in DIRECTION_VECTORS.values():
                    cells = self._run_from(row, col, dr, dc, player.value)
                    if cells is not None:
                        return cells
        return []

    def has_win(self, player: Player) -> bool:
        """Check if `player` owns four in a row anywhere on the board."""
        return bool(self.winning_line(player))

    def get_state(self) -> np.ndarray:
        """Get a copy of the grid."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
