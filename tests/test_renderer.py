import pytest

from canvas_connect4.config import Theme
from canvas_connect4.game.board import Board
from canvas_connect4.interfaces.renderer import render_frame
from canvas_connect4.interfaces.surfaces import ArraySurface
from canvas_connect4.utils import COLS, ROWS


@pytest.fixture
def theme():
    return Theme()


@pytest.fixture
def surface(config):
    return ArraySurface(config.width, config.height)


def blended(under, over):
    alpha = over[3] / 255
    return tuple(round(u * (1 - alpha) + o * alpha) for u, o in zip(under, over[:3]))


def test_empty_board_paints_all_placeholders(surface, session, layout, theme):
    render_frame(surface, session, layout, theme)
    for screen_row in range(ROWS):
        for screen_col in range(COLS):
            assert surface.pixel(*layout.cell_center(screen_col, screen_row)) == theme.empty_cell
    assert surface.pixel(2, 2) == theme.background
    assert surface.texts == []


def test_discs_are_painted_mirrored(surface, session, layout, theme):
    session.play_column(0)
    session.play_column(0)
    render_frame(surface, session, layout, theme)

    assert surface.pixel(*layout.cell_center(COLS - 1, ROWS - 1)) == theme.player_one
    assert surface.pixel(*layout.cell_center(COLS - 1, ROWS - 2)) == theme.player_two
    assert surface.pixel(*layout.cell_center(0, ROWS - 1)) == theme.empty_cell


def test_highlight_marks_next_drop(surface, session, layout, theme, hover):
    session.play_column(4)
    hover(session, 4)
    render_frame(surface, session, layout, theme)

    expected = blended(theme.empty_cell, theme.player_two_highlight)
    actual = surface.pixel(*layout.board_cell_center(4, 1))
    assert all(abs(a - e) <= 1 for a, e in zip(actual, expected))
    assert surface.pixel(*layout.board_cell_center(4, 2)) == theme.empty_cell


def test_no_highlight_over_full_column(surface, session, layout, theme, hover):
    for _ in range(ROWS):
        session.play_column(1)
    hover(session, 1)
    render_frame(surface, session, layout, theme)

    top = layout.board_cell_center(1, ROWS - 1)
    assert surface.pixel(*top) == theme.player_two


def test_no_highlight_without_hover(surface, session, layout, theme):
    render_frame(surface, session, layout, theme)
    for screen_col in range(COLS):
        assert surface.pixel(*layout.cell_center(screen_col, ROWS - 1)) == theme.empty_cell


def test_win_message_and_outline(surface, session, layout, theme):
    for col in (0, 1, 0, 1, 0, 1, 0):
        session.play_column(col)
    render_frame(surface, session, layout, theme)

    assert surface.texts == [("Player 1 wins!", (surface.width / 2 - 140, 50),
                              theme.player_one, theme.font_size)]
    x, y = layout.board_cell_center(0, 0)
    assert surface.pixel(x, y) == theme.player_one
    assert surface.pixel(x + layout.disc_radius - 2, y) == theme.winning_outline


def test_draw_message(surface, session, layout, theme, drawn_grid):
    grid = drawn_grid.copy()
    grid[0, 0] = 0
    session.board = Board.from_grid(grid)
    session.play_column(0)
    render_frame(surface, session, layout, theme)

    assert surface.texts == [("It's a draw!", (surface.width / 2 - 110, 50),
                              theme.draw_text, theme.font_size)]


def test_render_does_not_modify_session(surface, session, layout, hover):
    session.play_column(3)
    hover(session, 5)
    before = (dict(session.board.occupancy), session.board.active_player,
              session.result, session.hovered_column)
    render_frame(surface, session)
    render_frame(surface, session)
    after = (dict(session.board.occupancy), session.board.active_player,
             session.result, session.hovered_column)
    assert before == after
