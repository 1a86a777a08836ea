"""
utils.py - Rule constants, enumerations and bit layout for canvas-connect4

The board is always 7 columns by 6 rows. Each player's discs are stored as a
42-bit integer with one bit per cell:

    bit_index = col + row * COLS

Bit 0 is the bottom cell of column 0 and every group of 7 consecutive bits is
one row, bottom row first. All 42 bits are cells, so a full board is exactly
FULL_BOARD_MASK.

    row 5 | 35 36 37 38 39 40 41
    row 4 | 28 29 30 31 32 33 34
    row 3 | 21 22 23 24 25 26 27
    row 2 | 14 15 16 17 18 19 20
    row 1 |  7  8  9 10 11 12 13
    row 0 |  0  1  2  3  4  5  6
            c0 c1 c2 c3 c4 c5 c6
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a line to win
CELLS = ROWS * COLS

FULL_BOARD_MASK = (1 << CELLS) - 1

# Cell value used in numpy grids for an empty cell
EMPTY = 0


class Player(Enum):
    """The two players. Values double as cell values in numpy grids."""
    ONE = 1    # First player, red
    TWO = 2    # Second player, yellow

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def label(self) -> str:
        return f"Player {self.value}"


class GameResult(Enum):
    """Enumeration representing the session outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self is not GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or an unfinished game."""
        if self is GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self is GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        return cls.PLAYER_ONE_WIN if player is Player.ONE else cls.PLAYER_TWO_WIN


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a (row, col) cell is on the board.

    Args:
        row: Row index (0 = bottom)
        col: Column index
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def bit_index(col: int, row: int) -> int:
    """Bit position of a cell; row 0 is the bottom row."""
    return col + row * COLS


def cell_mask(col: int, row: int) -> int:
    """Single-bit mask for a cell."""
    return 1 << bit_index(col, row)


def popcount(value: int) -> int:
    return bin(value).count("1")


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a numpy grid (row 0 = top, values EMPTY/1/2) as ASCII art.

    Args:
        grid: ROWS x COLS array of cell values

    Returns:
        ASCII representation of the board
    """
    symbols = {EMPTY: " ", Player.ONE.value: "X", Player.TWO.value: "O"}
    border = "|" + "-" * (COLS * 2 - 1) + "|"

    lines = [border]
    for row in range(ROWS):
        lines.append("|" + " ".join(symbols[int(v)] for v in grid[row]) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(c) for c in range(COLS)) + "|")

    return "\n".join(lines)
