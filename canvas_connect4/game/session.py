"""
session.py - Game session controller

GameSession owns the Board for one game together with the session outcome and
the hovered column. Input handlers are the only code that mutates it; the
renderer only reads it. All calls are expected on a single thread (the host's
event loop), so no locking is done here.
"""

from typing import Optional

from canvas_connect4.debug import debug
from canvas_connect4.game.board import Board
from canvas_connect4.utils import COLS, ROWS, GameResult, Player

DRAW_MESSAGE = "It's a draw!"


class GameSession:
    """
    Hot-seat Connect Four session driven by column hover and click input.

    Attributes:
        board: The board for the current game
        result: Session outcome; anything but IN_PROGRESS is terminal
        hovered_column: Board column under the pointer, or None
    """

    def __init__(self):
        self.board = Board()
        self.result = GameResult.IN_PROGRESS
        self.hovered_column: Optional[int] = None
        self.games_played = 0

    @property
    def running(self) -> bool:
        return not self.result.is_game_over()

    @property
    def winner(self) -> Optional[Player]:
        return self.result.winner

    @property
    def is_draw(self) -> bool:
        return self.result is GameResult.DRAW

    def hover(self, column: Optional[int]) -> None:
        """
        Track the board column under the pointer.

        Args:
            column: Board column (bit layout order), or None when the pointer
                is outside the grid; out-of-range columns count as None
        """
        if not self.running:
            return
        if column is not None and not (0 <= column < COLS):
            column = None
        if column != self.hovered_column:
            debug.trace(f"Hovering board column {column}", "session")
        self.hovered_column = column

    def handle_click(self) -> bool:
        """
        Drop a disc in the hovered column for the player to move.

        The turn passes only when a disc was actually placed. After a placement
        the winner is recomputed and the session may end in a win or a draw.

        Returns:
            True if a disc was placed
        """
        if not self.running:
            debug.debug("Click ignored: game is over", "session")
            return False

        column = self.hovered_column
        if column is None:
            debug.debug("Click ignored: pointer is not over a column", "session")
            return False
        return self.play_column(column)

    def play_column(self, column: int) -> bool:
        """
        Drop a disc in a board column (bit layout order) for the player to move.

        Returns:
            True if a disc was placed
        """
        if not self.running:
            debug.debug("Move ignored: game is over", "session")
            return False

        player = self.board.active_player
        if self.board.place_disc(column) is None:
            debug.debug(f"Move ignored: column {column} is not playable", "session")
            return False

        self.board.switch_player()
        self._update_result(player)
        return True

    def _update_result(self, mover: Player) -> None:
        winner = self.board.get_winner()
        if winner is not None:
            self.result = GameResult.win_for(winner)
            debug.info(f"{winner.label} wins after {self.board.disc_count()} discs", "session")
        elif self.board.is_full():
            self.result = GameResult.DRAW
            debug.info("Game ends in a draw", "session")
        else:
            debug.trace(f"{mover.label} moved, {self.board.active_player.label} to play",
                        "session")

        if self.result.is_game_over():
            self.games_played += 1
            self.hovered_column = None

    def restart(self) -> None:
        """Start a new game on a fresh board."""
        debug.info("Starting a new game", "session")
        self.board = Board()
        self.result = GameResult.IN_PROGRESS
        self.hovered_column = None

    def highlight_cell(self):
        """
        Board cell where the next disc would land in the hovered column.

        Returns:
            (column, row) in bit layout coordinates, or None when the game is
            over, no column is hovered, or the hovered column is full
        """
        column = self.hovered_column
        if not self.running or column is None:
            return None
        top = self.board.get_top(column)
        if top is None:
            return None
        return column, ROWS - 1 - top

    def message(self) -> Optional[str]:
        """End-of-game message, or None while the game is running."""
        if self.result is GameResult.DRAW:
            return DRAW_MESSAGE
        if self.winner is not None:
            return f"{self.winner.label} wins!"
        return None
