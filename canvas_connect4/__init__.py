"""
canvas_connect4 - Two-player Connect Four on an interactive canvas

This package provides a bitboard Connect Four engine, a session controller
that turns pointer input into moves, and renderers for a pygame window or a
headless numpy raster.
"""

# Version number
__version__ = '0.1.0'
