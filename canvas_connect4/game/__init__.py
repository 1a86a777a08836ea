"""
canvas_connect4.game - Core game mechanics for Connect Four

This package contains the bitboard board representation, the precomputed
winning-line masks and the game session controller.
"""

from canvas_connect4.game.bitboard import WIN_MASKS, generate_win_masks
from canvas_connect4.game.board import Board
from canvas_connect4.game.session import GameSession

__all__ = ['Board', 'GameSession', 'WIN_MASKS', 'generate_win_masks']
