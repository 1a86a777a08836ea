import os

# pygame must pick the dummy drivers before it is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from canvas_connect4.config import DisplayConfig
from canvas_connect4.debug import DebugLevel, debug
from canvas_connect4.game.session import GameSession
from canvas_connect4.interfaces.layout import GridLayout
from canvas_connect4.utils import COLS, ROWS, Player


def draw_value(col, row):
    """Owner of a cell in a full board with no four-in-a-row (21 discs each)."""
    return Player.ONE.value if col % 2 == ((row + 1) // 2) % 2 else Player.TWO.value


def draw_grid():
    """Numpy grid (row 0 = top) of the drawn position."""
    grid = np.zeros((ROWS, COLS), dtype=int)
    for row in range(ROWS):
        for col in range(COLS):
            grid[ROWS - 1 - row, col] = draw_value(col, row)
    return grid


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def config():
    return DisplayConfig()


@pytest.fixture
def layout(config):
    return GridLayout(config.width, config.height, config.disc_radius, config.spacing)


@pytest.fixture
def session():
    return GameSession()


def hover_board_column(session, column):
    """Move the pointer over a board column."""
    session.hover(column)


@pytest.fixture
def drawn_grid():
    return draw_grid()


@pytest.fixture
def hover():
    return hover_board_column
