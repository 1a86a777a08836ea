"""
cli.py - Command-line tools for inspecting the Connect Four engine

This module provides the non-interactive commands behind run.py: analysing a
board position, benchmarking the bitboard engine and renderer, and rendering a
move sequence to a numpy snapshot without opening a window.
"""

import random
from typing import List, Optional

import numpy as np

from canvas_connect4.config import DisplayConfig
from canvas_connect4.debug import debug
from canvas_connect4.game.board import Board
from canvas_connect4.game.session import GameSession
from canvas_connect4.interfaces.layout import GridLayout
from canvas_connect4.interfaces.renderer import render_frame
from canvas_connect4.interfaces.surfaces import ArraySurface
from canvas_connect4.utils import CELLS, COLS, ROWS


def parse_position(position: str) -> Board:
    """
    Build a board from a comma-separated list of 42 cell values.

    Values are given row by row starting with the top row; 0 is empty,
    1 and 2 are the players.

    Raises:
        ValueError: If the string is malformed or the position is impossible
    """
    values = [int(v) for v in position.split(',')]
    if len(values) != CELLS:
        raise ValueError(f"Position string must have {CELLS} values, got {len(values)}")
    return Board.from_grid(np.array(values).reshape(ROWS, COLS))


def parse_moves(moves: str) -> List[int]:
    """Parse a comma-separated list of board columns."""
    if not moves.strip():
        return []
    columns = [int(m) for m in moves.split(',')]
    for col in columns:
        if not (0 <= col < COLS):
            raise ValueError(f"Column must be between 0 and {COLS - 1}, got {col}")
    return columns


class SimpleCLI:
    """Runs the analysis commands selected on the command line."""

    def __init__(self, args, config: Optional[DisplayConfig] = None):
        self.args = args
        self.config = config or DisplayConfig()

    def _layout(self) -> GridLayout:
        return GridLayout(self.config.width, self.config.height,
                          self.config.disc_radius, self.config.spacing)

    def test_position(self) -> None:
        """Print the analysis of the position given with --position."""
        if not self.args.position:
            print("Please provide a position string with --position")
            return

        try:
            board = parse_position(self.args.position)
        except (ValueError, IndexError) as e:
            print(f"Error parsing position: {e}")
            return

        print("Loaded position:")
        print(board.render())

        winner = board.get_winner()
        if winner is not None:
            print(f"\nWin for {winner.label} on cells {board.get_winning_line()}")
        else:
            print("\nNo win detected for any player")

        if board.is_full():
            print("Board is full")
        else:
            print(f"Empty spaces: {CELLS - board.disc_count()}")
            print(f"Next to move: {board.active_player.label}")
        print(f"Valid moves: {board.get_valid_moves()}")

    def snapshot(self) -> Optional[np.ndarray]:
        """
        Play --moves headlessly and save the rendered frame.

        Returns:
            The rendered RGB frame, or None if the moves could not be parsed
        """
        try:
            moves = parse_moves(self.args.moves or "")
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return None

        session = GameSession()
        for i, col in enumerate(moves):
            if not session.play_column(col):
                print(f"Move {i + 1} (column {col}) was not played")

        surface = ArraySurface(self.config.width, self.config.height,
                               self.config.theme.background)
        render_frame(surface, session, self._layout(), self.config.theme)

        print(session.board.render())
        print(session.message() or f"{session.board.active_player.label} to move")

        frame = surface.to_array()
        if self.args.output:
            np.save(self.args.output, frame)
            print(f"Saved {frame.shape[1]}x{frame.shape[0]} frame to {self.args.output}")
        return frame

    def benchmark(self) -> None:
        """Time disc placement, win detection and headless rendering."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} iterations...")

        # Random games through the session controller
        debug.start_timer("games")
        games_played = 0
        total_moves = 0
        for _ in range(max(1, iterations // 10)):
            session = GameSession()
            while session.running:
                session.play_column(random.choice(session.board.get_valid_moves()))
                total_moves += 1
            games_played += 1
        games_time = debug.end_timer("games") or 0.0
        print(f"Played {games_played} games with {total_moves} total moves: "
              f"{games_time:.6f} seconds total, "
              f"{games_time / total_moves * 1000:.6f} ms per move")

        # Win detection on random mid-game boards
        boards = []
        for _ in range(iterations):
            board = Board()
            for _ in range(random.randint(7, 20)):
                valid = board.get_valid_moves()
                board.place_disc(random.choice(valid))
                board.switch_player()
            boards.append(board)

        debug.start_timer("win_check")
        for board in boards:
            board.get_winner()
        win_time = debug.end_timer("win_check") or 0.0
        print(f"Performing {iterations} win checks: {win_time:.6f} seconds total, "
              f"{win_time / max(1, iterations) * 1000:.6f} ms per check")

        # Headless rendering of a mid-game position
        session = GameSession()
        layout = self._layout()
        for col in (3, 3, 2, 4, 4, 1):
            session.play_column(col)
        surface = ArraySurface(self.config.width, self.config.height)
        frames = max(1, iterations // 100)
        debug.start_timer("rendering")
        for _ in range(frames):
            render_frame(surface, session, layout)
        render_time = debug.end_timer("rendering") or 0.0
        print(f"Rendering {frames} frames: {render_time:.6f} seconds total, "
              f"{render_time / frames * 1000:.6f} ms per frame")
