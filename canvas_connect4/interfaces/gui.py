"""
gui.py - pygame window and event loop for canvas-connect4

PygameApp owns the window and a GameSession. Each pass of the loop drains the
event queue (pointer motion, clicks, keys), renders a full frame and waits for
the next tick, all on one thread.

Controls: move the mouse over a column and click to drop a disc, R starts a
new game, Esc or closing the window quits.
"""

from typing import Optional

import pygame

from canvas_connect4.config import DisplayConfig
from canvas_connect4.debug import debug
from canvas_connect4.game.session import GameSession
from canvas_connect4.interfaces.layout import GridLayout
from canvas_connect4.interfaces.renderer import render_frame
from canvas_connect4.interfaces.surfaces import PygameSurface


class PygameApp:
    """Interactive two-player game in a pygame window."""

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()
        self.layout = GridLayout(self.config.width, self.config.height,
                                 self.config.disc_radius, self.config.spacing)
        self.session = GameSession()
        self.screen = None
        self.surface: Optional[PygameSurface] = None
        self.clock = None
        self.running = False
        self.frames = 0

    def setup(self) -> None:
        """Initialise pygame and open the window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.config.width, self.config.height))
        pygame.display.set_caption(self.config.title)
        self.surface = PygameSurface(self.screen, self.config.theme.background)
        self.clock = pygame.time.Clock()
        self.running = True
        debug.info(f"Opened {self.config.width}x{self.config.height} window", "gui")

    def _pointer_position(self, event) -> tuple:
        # The window can be shown at a different size than the canvas
        displayed = pygame.display.get_window_size() if pygame.display.get_init() else None
        if not displayed:
            displayed = (self.layout.width, self.layout.height)
        return self.layout.to_canvas(event.pos, displayed)

    def _hover(self, event) -> None:
        self.session.hover(self.layout.board_column_at(*self._pointer_position(event)))

    def handle_event(self, event) -> None:
        """Route one pygame event to the session."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            self._hover(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._hover(event)
            self.session.handle_click()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_r:
                self.session.restart()

    def step(self) -> None:
        """Process pending events and present one frame."""
        for event in pygame.event.get():
            self.handle_event(event)
        if not self.running:
            return

        render_frame(self.surface, self.session, self.layout, self.config.theme)
        pygame.display.flip()
        self.frames += 1
        self.clock.tick(self.config.fps)

    def run(self, max_frames: Optional[int] = None) -> None:
        """
        Run the game loop until the window is closed.

        Args:
            max_frames: Stop after this many frames (for scripted runs)
        """
        if self.screen is None:
            self.setup()

        try:
            while self.running:
                self.step()
                if max_frames is not None and self.frames >= max_frames:
                    debug.debug(f"Stopping after {self.frames} frames", "gui")
                    break
        finally:
            self.running = False
            pygame.quit()
            debug.info(f"Closed window after {self.frames} frames, "
                       f"{self.session.games_played} games finished", "gui")
