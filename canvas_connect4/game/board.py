"""
board.py - Bitboard representation and core rules for Connect Four

This module implements the Board class, which stores each player's discs as a
42-bit occupancy integer (see canvas_connect4.utils for the bit layout) and
provides disc placement, column queries, and win/full detection against the
precomputed winning-line masks.

The board deliberately knows nothing about turns beyond whose disc goes in
next: flipping the active player and deciding the session outcome are left to
the caller (see canvas_connect4.game.session).
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from canvas_connect4.debug import debug
from canvas_connect4.game.bitboard import WIN_MASKS, mask_cells
from canvas_connect4.utils import (COLS, EMPTY, FULL_BOARD_MASK, ROWS, Player,
                                   cell_mask, popcount, render_board_ascii)


class Board:
    """
    A Connect Four board held as two disjoint 42-bit occupancy sets.

    A Board is created empty with Player.ONE to move and is only ever mutated
    by place_disc and switch_player. Start a new game with a new Board.
    """

    def __init__(self):
        """Initialize an empty board with Player.ONE to move."""
        self.occupancy: Dict[Player, int] = {Player.ONE: 0, Player.TWO: 0}
        self.active_player = Player.ONE
        debug.trace("Initialized empty board", "board")

    @classmethod
    def from_grid(cls, grid, active_player: Optional[Player] = None) -> 'Board':
        """
        Build a board from a numpy grid.

        Args:
            grid: ROWS x COLS array-like, row 0 is the top row, cells hold
                EMPTY, 1 (Player.ONE) or 2 (Player.TWO)
            active_player: Player to move; inferred from the disc counts if None

        Returns:
            A new Board with the same discs

        Raises:
            ValueError: If the grid has the wrong shape, unknown cell values,
                or discs resting above an empty cell
        """
        cells = np.asarray(grid, dtype=int)
        if cells.shape != (ROWS, COLS):
            raise ValueError(f"Grid must have shape ({ROWS}, {COLS}), got {cells.shape}")

        board = cls()
        for col in range(COLS):
            gap = False
            for row in range(ROWS):
                value = int(cells[ROWS - 1 - row, col])
                if value == EMPTY:
                    gap = True
                    continue
                if gap:
                    raise ValueError(f"Floating disc in column {col} at row {row}")
                try:
                    player = Player(value)
                except ValueError:
                    raise ValueError(f"Unknown cell value {value} in column {col}") from None
                board.occupancy[player] |= cell_mask(col, row)

        if active_player is None:
            ones = popcount(board.occupancy[Player.ONE])
            twos = popcount(board.occupancy[Player.TWO])
            active_player = Player.ONE if ones <= twos else Player.TWO
        board.active_player = active_player
        return board

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board instance with the same state
        """
        new_board = Board()
        new_board.occupancy = dict(self.occupancy)
        new_board.active_player = self.active_player
        return new_board

    @property
    def filled(self) -> int:
        """Union of both occupancy sets."""
        return self.occupancy[Player.ONE] | self.occupancy[Player.TWO]

    def _check_column(self, column: int) -> None:
        if not (0 <= column < COLS):
            raise ValueError(f"Column {column} out of range 0-{COLS - 1}")

    def _free_row(self, column: int) -> Optional[int]:
        # Bottom-origin row of the lowest empty cell
        filled = self.filled
        for row in range(ROWS):
            if not filled & cell_mask(column, row):
                return row
        return None

    def get_top(self, column: int) -> Optional[int]:
        """
        Find the row the next disc in a column would land in, counted from the top.

        The value starts at ROWS - 1 for an empty column and goes down by one
        with every disc dropped into it.

        Args:
            column: Column index (0-indexed, bit layout order)

        Returns:
            Row index 5-0 (0 = top) of the next free cell, or None if the
            column already holds ROWS discs

        Raises:
            ValueError: If the column index is out of range
        """
        self._check_column(column)
        row = self._free_row(column)
        return None if row is None else ROWS - 1 - row

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a disc can be dropped in a column.

        Args:
            column: The column to check

        Returns:
            True if the column exists and is not full
        """
        if not (0 <= column < COLS):
            debug.debug(f"Invalid move: column {column} out of bounds", "board")
            return False
        if self.get_top(column) is None:
            debug.debug(f"Invalid move: column {column} is full", "board")
            return False
        return True

    def get_valid_moves(self) -> List[int]:
        """Columns that still accept a disc."""
        return [col for col in range(COLS) if self.get_top(col) is not None]

    def place_disc(self, column: int) -> Optional[int]:
        """
        Drop a disc for the active player into a column.

        The active player is not switched and no win check is made.

        Args:
            column: The column to drop into (0-indexed, bit layout order)

        Returns:
            The row the disc landed in (0 = bottom), or None if nothing was placed because
            the column is full or out of range
        """
        if not self.is_valid_move(column):
            return None

        row = self._free_row(column)
        player = self.active_player
        self.occupancy[player] = (self.occupancy[player] | cell_mask(column, row)) & FULL_BOARD_MASK
        debug.debug(f"{player.label} placed disc at column {column}, row {row}", "board")
        return row

    def switch_player(self) -> Player:
        """Hand the turn to the other player and return them."""
        self.active_player = self.active_player.other()
        debug.trace(f"Switching to {self.active_player.label}", "board")
        return self.active_player

    def is_full(self) -> bool:
        """True when all 42 cells hold a disc."""
        return self.filled == FULL_BOARD_MASK

    def disc_count(self) -> int:
        return popcount(self.filled)

    def owner(self, column: int, row: int) -> Optional[Player]:
        """
        Get the player whose disc occupies a cell.

        Args:
            column: Column index
            row: Row index (0 = bottom)

        Returns:
            The owning player, or None if the cell is empty
        """
        mask = cell_mask(column, row)
        for player in (Player.ONE, Player.TWO):
            if self.occupancy[player] & mask:
                return player
        return None

    def _find_win(self) -> Optional[Tuple[Player, int]]:
        # Player.ONE is always checked before Player.TWO
        for player in (Player.ONE, Player.TWO):
            bits = self.occupancy[player]
            for mask in WIN_MASKS:
                if bits & mask == mask:
                    return player, mask
        return None

    def get_winner(self) -> Optional[Player]:
        """
        Check every winning-line mask against both occupancy sets.

        Returns:
            Player.ONE if any of their lines is complete, else Player.TWO if
            any of theirs is, else None
        """
        found = self._find_win()
        return found[0] if found else None

    def get_winning_mask(self) -> Optional[int]:
        """The first complete winning-line mask, in get_winner order."""
        found = self._find_win()
        return found[1] if found else None

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the cells of the winning line.

        Returns:
            List of (column, row) cells, or an empty list if nobody has won
        """
        mask = self.get_winning_mask()
        return mask_cells(mask) if mask is not None else []

    def get_state(self) -> np.ndarray:
        """
        Get the board as a numpy grid.

        Returns:
            ROWS x COLS int array, row 0 is the top row, cells are EMPTY or
            the owning player's value
        """
        grid = np.full((ROWS, COLS), EMPTY, dtype=int)
        for player in (Player.ONE, Player.TWO):
            bits = self.occupancy[player]
            for col, row in mask_cells(bits):
                grid[ROWS - 1 - row, col] = player.value
        return grid

    def render(self) -> str:
        """Render the board as ASCII art."""
        return render_board_ascii(self.get_state())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"Board(one=0x{self.occupancy[Player.ONE]:011x}, "
                f"two=0x{self.occupancy[Player.TWO]:011x}, "
                f"active={self.active_player.name})")
