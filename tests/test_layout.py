import pytest

from canvas_connect4.interfaces.layout import GridLayout
from canvas_connect4.utils import COLS, ROWS


@pytest.fixture
def grid():
    return GridLayout(900, 800)


def test_grid_origin_is_centred(grid):
    assert grid.pitch == 115
    assert grid.grid_x == pytest.approx(97.5)
    assert grid.grid_y == pytest.approx(105)


@pytest.mark.parametrize("screen_col", range(COLS))
def test_column_at_disc_centres(grid, screen_col):
    x, y = grid.cell_center(screen_col, 3)
    assert grid.column_at(x, y) == screen_col


def test_column_boundary_is_right_edge_of_disc(grid):
    right_edge = grid.grid_x + grid.disc_radius
    y = grid.grid_y
    assert grid.column_at(right_edge - 0.01, y) == 0
    assert grid.column_at(right_edge, y) == 1


def test_points_outside_grid_have_no_column(grid):
    x, _ = grid.cell_center(3, 0)
    assert grid.column_at(x, grid.grid_y - grid.disc_radius) is None
    assert grid.column_at(x, grid.grid_y + ROWS * grid.pitch) is None
    assert grid.column_at(5, grid.grid_y) is None
    assert grid.column_at(895, grid.grid_y) is None


def test_board_cells_are_mirrored(grid):
    assert grid.board_column(0) == COLS - 1
    assert grid.board_column(COLS - 1) == 0
    assert grid.screen_cell(0, 0) == (COLS - 1, ROWS - 1)
    assert grid.board_cell_center(6, 5) == grid.cell_center(0, 0)


def test_to_canvas_scales_displayed_size(grid):
    assert grid.to_canvas((450, 400), (450, 400)) == (900, 800)
    assert grid.to_canvas((110, 60), (900, 800), origin=(10, 10)) == (100, 50)
    assert grid.to_canvas((30, 40), (0, 0)) == (30, 40)


def test_board_column_at_is_mirrored(grid):
    x, y = grid.cell_center(0, 2)
    assert grid.column_at(x, y) == 0
    assert grid.board_column_at(x, y) == COLS - 1
    x, y = grid.cell_center(COLS - 1, 2)
    assert grid.board_column_at(x, y) == 0


def test_board_column_at_outside_grid(grid):
    assert grid.board_column_at(5, 5) is None
    assert grid.board_column_at(grid.width - 1, grid.grid_y) is None
