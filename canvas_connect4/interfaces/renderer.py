"""
renderer.py - Paints one frame of the game onto a RenderSurface

render_frame is called every frame whether or not anything changed. It only
reads the session: empty cells, then discs, then either the drop highlight
(game running) or the end-of-game message.
"""

from typing import Optional

from canvas_connect4.config import Theme
from canvas_connect4.debug import debug
from canvas_connect4.game.bitboard import mask_cells
from canvas_connect4.game.session import GameSession
from canvas_connect4.interfaces.layout import GridLayout
from canvas_connect4.interfaces.surfaces import RenderSurface
from canvas_connect4.utils import COLS, ROWS, Player

# Horizontal offsets from the canvas centre for the end-of-game messages
DRAW_TEXT_OFFSET = 110
WIN_TEXT_OFFSET = 140
MESSAGE_BASELINE = 50


def draw_empty_cells(surface: RenderSurface, layout: GridLayout, theme: Theme) -> None:
    for screen_row in range(ROWS):
        for screen_col in range(COLS):
            surface.fill_circle(layout.cell_center(screen_col, screen_row),
                                layout.disc_radius, theme.empty_cell)


def draw_discs(surface: RenderSurface, session: GameSession, layout: GridLayout,
               theme: Theme) -> None:
    """Paint every placed disc, all of Player.ONE's first."""
    colors = {Player.ONE: theme.player_one, Player.TWO: theme.player_two}
    for player in (Player.ONE, Player.TWO):
        for col, row in mask_cells(session.board.occupancy[player]):
            surface.fill_circle(layout.board_cell_center(col, row),
                                layout.disc_radius, colors[player])


def draw_highlight(surface: RenderSurface, session: GameSession, layout: GridLayout,
                   theme: Theme) -> None:
    cell = session.highlight_cell()
    if cell is None:
        return
    if session.board.active_player is Player.ONE:
        color = theme.player_one_highlight
    else:
        color = theme.player_two_highlight
    surface.fill_circle(layout.board_cell_center(*cell), layout.disc_radius, color)


def draw_result(surface: RenderSurface, session: GameSession, layout: GridLayout,
                theme: Theme) -> None:
    message = session.message()
    if message is None:
        return

    winner = session.winner
    if winner is None:
        color = theme.draw_text
        offset = DRAW_TEXT_OFFSET
    else:
        color = theme.player_one if winner is Player.ONE else theme.player_two
        offset = WIN_TEXT_OFFSET
        mask = session.board.get_winning_mask()
        if mask is not None:
            for col, row in mask_cells(mask):
                surface.outline_circle(layout.board_cell_center(col, row),
                                       layout.disc_radius, theme.winning_outline)

    surface.fill_text(message, (surface.width / 2 - offset, MESSAGE_BASELINE),
                      color, theme.font_size)


def render_frame(surface: RenderSurface, session: GameSession,
                 layout: Optional[GridLayout] = None, theme: Optional[Theme] = None) -> None:
    """
    Paint the complete game state.

    Args:
        surface: Target surface, cleared first
        session: Session to draw; never modified
        layout: Grid geometry, defaults to the standard grid centred on the surface
        theme: Colors and font size, defaults to Theme()
    """
    layout = layout or GridLayout(surface.width, surface.height)
    theme = theme or Theme()

    surface.clear()
    draw_empty_cells(surface, layout, theme)
    draw_discs(surface, session, layout, theme)

    if session.running:
        draw_highlight(surface, session, layout, theme)
    else:
        draw_result(surface, session, layout, theme)

    debug.trace(f"Rendered frame with {session.board.disc_count()} discs", "render")
