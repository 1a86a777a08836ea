"""
layout.py - Screen geometry for the Connect Four grid

The grid is centred on the canvas. The board is displayed mirrored: board
column 0 (bit layout) is painted on the right edge and board row 0 (bottom)
on the bottom screen row, so board cell (col, row) appears at screen cell
(COLS - 1 - col, ROWS - 1 - row).
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from canvas_connect4.config import DISC_RADIUS, DISTANCE_BETWEEN_CELLS
from canvas_connect4.utils import COLS, ROWS

Point = Tuple[float, float]


@dataclass(frozen=True)
class GridLayout:
    width: int
    height: int
    disc_radius: int = DISC_RADIUS
    spacing: int = DISTANCE_BETWEEN_CELLS

    @property
    def pitch(self) -> int:
        """Distance between the centres of neighbouring cells."""
        return self.disc_radius * 2 + self.spacing

    @property
    def grid_x(self) -> float:
        """Screen x of the centre of screen column 0."""
        return self.disc_radius + (self.width - COLS * self.pitch) / 2

    @property
    def grid_y(self) -> float:
        """Screen y of the centre of screen row 0 (top)."""
        return self.disc_radius + (self.height - ROWS * self.pitch) / 2

    def to_canvas(self, client_pos: Point, displayed_size: Tuple[float, float],
                  origin: Point = (0, 0)) -> Point:
        """
        Convert pointer coordinates into canvas space.

        Args:
            client_pos: Pointer position in display coordinates
            displayed_size: Size the canvas is shown at
            origin: Display position of the canvas's top-left corner

        Returns:
            The position scaled by the intrinsic/displayed size ratio
        """
        shown_w, shown_h = displayed_size
        scale_x = self.width / shown_w if shown_w else 1.0
        scale_y = self.height / shown_h if shown_h else 1.0
        return ((client_pos[0] - origin[0]) * scale_x,
                (client_pos[1] - origin[1]) * scale_y)

    def in_vertical_band(self, y: float) -> bool:
        return self.grid_y - self.disc_radius < y < self.grid_y + ROWS * self.pitch

    def column_at(self, x: float, y: float) -> Optional[int]:
        """
        Screen column under a canvas-space point.

        A column's hit area runs from the right edge of the disc to its left
        up to the right edge of its own disc.

        Returns:
            Screen column 0-6, or None outside the grid
        """
        if not self.in_vertical_band(y):
            return None
        column = math.floor((x - self.grid_x - self.disc_radius) / self.pitch) + 1
        if 0 <= column < COLS:
            return column
        return None

    @staticmethod
    def board_column(screen_column: int) -> int:
        """Bit layout column for a screen column (and vice versa)."""
        return COLS - 1 - screen_column

    def board_column_at(self, x: float, y: float) -> Optional[int]:
        """Board column (bit layout order) under a canvas-space point, or None."""
        column = self.column_at(x, y)
        return None if column is None else self.board_column(column)

    @staticmethod
    def screen_cell(column: int, row: int) -> Tuple[int, int]:
        """Screen (column, row) for a board cell; screen row 0 is the top."""
        return COLS - 1 - column, ROWS - 1 - row

    def cell_center(self, screen_column: int, screen_row: int) -> Point:
        return (screen_column * self.pitch + self.grid_x,
                screen_row * self.pitch + self.grid_y)

    def board_cell_center(self, column: int, row: int) -> Point:
        """Canvas centre of a board cell given in bit layout coordinates."""
        return self.cell_center(*self.screen_cell(column, row))
