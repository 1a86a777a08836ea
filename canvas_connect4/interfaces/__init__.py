"""
canvas_connect4.interfaces - Screen geometry, drawing surfaces and the pygame host

gui is not imported here so that headless rendering never loads pygame.
"""

__all__ = []
