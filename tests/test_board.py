"""
Test suite for the Connect Four board.

Tests cover:
- Cell queries and bounds checking
- Drop row selection and piece placement
- Win detection in all four directions
- Boards with non-standard dimensions
"""

import numpy as np
import pytest

from c4engine.game.board import Board
from c4engine.game.errors import ColumnFullError, OutOfBoundsError
from c4engine.utils import HEIGHT, WIDTH, Player


def fill_cells(board, cells, player):
    """Write pieces straight into the grid, bypassing gravity."""
    for row, col in cells:
        board.grid[row, col] = player.value


class TestCellQueries:
    """Test reading cells and bounds checks."""

    def test_new_board_is_empty(self):
        """Test a new board has the default size and no pieces."""
        board = Board()

        assert board.grid.shape == (HEIGHT, WIDTH)
        assert np.all(board.grid == Player.EMPTY.value)
        assert board.cell_at(0, 0) == Player.EMPTY
        assert board.is_empty(HEIGHT - 1, WIDTH - 1)

    def test_cell_at_reports_owner(self):
        """Test cell_at returns the player stored in a cell."""
        board = Board()
        board.grid[5, 2] = Player.TWO.value

        assert board.cell_at(5, 2) == Player.TWO
        assert not board.is_empty(5, 2)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (HEIGHT, 0), (0, WIDTH)])
    def test_out_of_bounds(self, row, col):
        """Test coordinates off the board raise OutOfBoundsError."""
        board = Board()

        assert not board.in_bounds(row, col)
        with pytest.raises(OutOfBoundsError):
            board.cell_at(row, col)
        with pytest.raises(OutOfBoundsError):
            board.is_empty(row, col)

    def test_out_of_bounds_is_an_index_error(self):
        """Test OutOfBoundsError can be caught as IndexError."""
        with pytest.raises(IndexError):
            Board().cell_at(HEIGHT, WIDTH)

    @pytest.mark.parametrize("height, width", [(0, 7), (6, 0), (-1, -1)])
    def test_invalid_dimensions(self, height, width):
        """Test boards need at least one row and one column."""
        with pytest.raises(ValueError):
            Board(height, width)

    def test_copy_is_independent(self):
        """Test modifying a copy leaves the original alone."""
        board = Board()
        board.drop(3, Player.ONE)
        clone = board.copy()
        clone.drop(3, Player.TWO)

        assert board.column_height(3) == 1
        assert clone.column_height(3) == 2

    def test_get_state_returns_copy(self):
        """Test the grid handed out cannot change the board."""
        board = Board()
        state = board.get_state()
        state[5, 0] = Player.ONE.value

        assert board.is_empty(5, 0)


class TestDropping:
    """Test where pieces land."""

    def test_empty_column_drops_to_bottom(self):
        """Test the first piece lands in the bottom row."""
        board = Board()

        assert board.find_drop_row(0) == HEIGHT - 1
        assert board.drop(0, Player.ONE) == HEIGHT - 1
        assert board.cell_at(HEIGHT - 1, 0) == Player.ONE

    def test_pieces_stack(self):
        """Test each piece lands on top of the previous one."""
        board = Board()

        rows = [board.drop(4, player) for player in (Player.ONE, Player.TWO, Player.ONE)]

        assert rows == [5, 4, 3]
        assert board.find_drop_row(4) == 2
        assert board.column_height(4) == 3

    def test_drop_row_is_lowest_empty_row(self):
        """Test the drop row is the lowest empty cell for every fill level."""
        board = Board()

        for filled in range(HEIGHT):
            assert board.find_drop_row(6) == HEIGHT - 1 - filled
            board.drop(6, Player.TWO)

        assert board.find_drop_row(6) is None
        assert board.column_height(6) == HEIGHT

    def test_full_column(self):
        """Test dropping into a full column raises and changes nothing."""
        board = Board()
        for i in range(HEIGHT):
            board.drop(2, Player.ONE if i % 2 == 0 else Player.TWO)
        before = board.get_state()

        with pytest.raises(ColumnFullError):
            board.drop(2, Player.ONE)

        np.testing.assert_array_equal(board.grid, before)

    def test_drop_outside_board(self):
        """Test dropping into a column that does not exist."""
        board = Board()

        with pytest.raises(OutOfBoundsError):
            board.find_drop_row(WIDTH)
        with pytest.raises(OutOfBoundsError):
            board.drop(-1, Player.ONE)

    def test_drop_empty_piece(self):
        """Test EMPTY cannot be dropped."""
        with pytest.raises(ValueError):
            Board().drop(0, Player.EMPTY)

    def test_drop_changes_single_cell(self):
        """Test a drop changes exactly the cell at the drop row."""
        board = Board()
        board.drop(1, Player.ONE)
        before = board.get_state()

        row = board.drop(1, Player.TWO)

        changed = np.argwhere(board.grid != before)
        assert changed.tolist() == [[row, 1]]

    def test_is_full(self):
        """Test is_full only holds once every cell has a piece."""
        board = Board()
        assert not board.is_full()

        board.grid[:, :] = Player.ONE.value
        board.grid[0, 3] = Player.EMPTY.value
        assert not board.is_full()

        board.grid[0, 3] = Player.TWO.value
        assert board.is_full()


class TestWinDetection:
    """Test four-in-a-row detection."""

    def test_empty_board_has_no_win(self):
        """Test nobody has won on an empty board."""
        board = Board()

        assert not board.has_win(Player.ONE)
        assert not board.has_win(Player.TWO)
        assert not board.has_win(Player.EMPTY)

    def test_horizontal_win(self):
        """Test four in a row on the bottom row."""
        board = Board()
        fill_cells(board, [(5, 0), (5, 1), (5, 2), (5, 3)], Player.ONE)

        assert board.has_win(Player.ONE)
        assert not board.has_win(Player.TWO)
        assert board.winning_line(Player.ONE) == [(5, 0), (5, 1), (5, 2), (5, 3)]

    def test_vertical_win(self):
        """Test four stacked in one column."""
        board = Board()
        fill_cells(board, [(5, 3), (4, 3), (3, 3), (2, 3)], Player.TWO)

        assert board.has_win(Player.TWO)
        assert board.winning_line(Player.TWO) == [(2, 3), (3, 3), (4, 3), (5, 3)]

    def test_diagonal_down_right_win(self):
        """Test a run going down and to the right."""
        board = Board()
        cells = [(2, 0), (3, 1), (4, 2), (5, 3)]
        fill_cells(board, cells, Player.ONE)

        assert board.has_win(Player.ONE)
        assert board.winning_line(Player.ONE) == cells

    def test_diagonal_down_left_win(self):
        """Test a run going down and to the left."""
        board = Board()
        cells = [(2, 3), (3, 2), (4, 1), (5, 0)]
        fill_cells(board, cells, Player.TWO)

        assert board.has_win(Player.TWO)
        assert board.winning_line(Player.TWO) == cells

    def test_three_in_a_row_is_not_a_win(self):
        """Test three pieces are not enough in any direction."""
        board = Board()
        fill_cells(board, [(5, 0), (5, 1), (5, 2)], Player.ONE)
        fill_cells(board, [(5, 6), (4, 6), (3, 6)], Player.ONE)
        fill_cells(board, [(0, 0), (1, 1), (2, 2)], Player.ONE)

        assert not board.has_win(Player.ONE)
        assert board.winning_line(Player.ONE) == []

    def test_broken_run_is_not_a_win(self):
        """Test four pieces with a gap do not win."""
        board = Board()
        fill_cells(board, [(5, 0), (5, 1), (5, 3), (5, 4)], Player.TWO)
        board.grid[5, 2] = Player.ONE.value

        assert not board.has_win(Player.TWO)

    def test_mixed_owners_do_not_win(self):
        """Test a run shared between both players wins for neither."""
        board = Board()
        fill_cells(board, [(5, 0), (5, 1)], Player.ONE)
        fill_cells(board, [(5, 2), (5, 3)], Player.TWO)

        assert not board.has_win(Player.ONE)
        assert not board.has_win(Player.TWO)

    def test_run_does_not_wrap_around_edges(self):
        """Test runs cannot continue from the last column into the first."""
        board = Board()
        fill_cells(board, [(5, 5), (5, 6), (4, 0), (4, 1)], Player.ONE)

        assert not board.has_win(Player.ONE)

    def test_horizontal_win_under_reflection(self):
        """Test a horizontal run is found when the board is mirrored."""
        board = Board()
        fill_cells(board, [(3, 3), (3, 4), (3, 5), (3, 6)], Player.ONE)
        mirrored = Board()
        mirrored.grid = np.fliplr(board.grid).copy()

        assert board.has_win(Player.ONE)
        assert mirrored.has_win(Player.ONE)
        assert mirrored.winning_line(Player.ONE) == [(3, 0), (3, 1), (3, 2), (3, 3)]

    def test_diagonals_swap_under_reflection(self):
        """Test mirroring a down-right run yields a down-left run."""
        board = Board()
        fill_cells(board, [(1, 1), (2, 2), (3, 3), (4, 4)], Player.TWO)
        mirrored = Board()
        mirrored.grid = np.fliplr(board.grid).copy()

        assert mirrored.winning_line(Player.TWO) == [(1, 5), (2, 4), (3, 3), (4, 2)]

    def test_bent_diagonal_is_not_a_win(self):
        """Test three cells on one diagonal plus one on the other do not win."""
        board = Board()
        fill_cells(board, [(2, 2), (3, 3), (4, 4), (5, 3)], Player.ONE)

        assert not board.has_win(Player.ONE)


class TestOtherDimensions:
    """Test the board logic does not assume a 6x7 grid."""

    def test_small_square_board(self):
        """Test a 4x4 board finds its only diagonal."""
        board = Board(4, 4)
        fill_cells(board, [(0, 3), (1, 2), (2, 1), (3, 0)], Player.ONE)

        assert board.find_drop_row(0) == 2
        assert board.find_drop_row(1) == 3
        assert board.has_win(Player.ONE)

    def test_board_too_small_to_win(self):
        """Test a full 3x3 board never has a run of four."""
        board = Board(3, 3)
        board.grid[:, :] = Player.ONE.value

        assert board.is_full()
        assert not board.has_win(Player.ONE)

    def test_wide_board(self):
        """Test bounds and rendering on a wider board."""
        board = Board(6, 12)
        fill_cells(board, [(5, 8), (5, 9), (5, 10), (5, 11)], Player.TWO)

        assert board.in_bounds(5, 11)
        assert not board.in_bounds(5, 12)
        assert board.has_win(Player.TWO)
        assert board.render().splitlines()[-1] == "|0 1 2 3 4 5 6 7 8 9 0 1|"


class TestRendering:
    """Test the ASCII board."""

    def test_render_shows_pieces(self):
        """Test pieces appear as X and O in the right rows."""
        board = Board()
        board.drop(0, Player.ONE)
        board.drop(6, Player.TWO)

        lines = board.render().splitlines()

        assert len(lines) == HEIGHT + 3
        assert lines[HEIGHT] == "|X           O|"
        assert lines[1] == "|             |"
        assert lines[-1] == "|0 1 2 3 4 5 6|"
        assert str(board) == board.render()
