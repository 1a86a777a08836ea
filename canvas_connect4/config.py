"""
config.py - Display defaults for canvas-connect4

Rule constants (board size, bit layout) live in canvas_connect4.utils and are
not configurable. Everything here only changes how the board is drawn.
"""

from dataclasses import dataclass, field
from typing import Tuple

Color = Tuple[int, ...]  # RGB or RGBA

CANVAS_WIDTH = 900
CANVAS_HEIGHT = 800
DISC_RADIUS = 50
DISTANCE_BETWEEN_CELLS = 15
FPS = 60
WINDOW_TITLE = "Connect Four"


@dataclass
class Theme:
    background: Color = (0, 0, 0)
    empty_cell: Color = (56, 53, 53)
    player_one: Color = (255, 0, 0)
    player_two: Color = (255, 255, 0)
    # Translucent highlight for the hovered column's next drop
    player_one_highlight: Color = (255, 127, 127, 77)
    player_two_highlight: Color = (255, 255, 0, 77)
    draw_text: Color = (128, 128, 128)
    winning_outline: Color = (255, 255, 255)
    font_size: int = 40


@dataclass
class DisplayConfig:
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    disc_radius: int = DISC_RADIUS
    spacing: int = DISTANCE_BETWEEN_CELLS
    fps: int = FPS
    title: str = WINDOW_TITLE
    theme: Theme = field(default_factory=Theme)
