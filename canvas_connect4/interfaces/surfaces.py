"""
surfaces.py - Drawing surfaces the renderer can paint on

The renderer only needs a handful of primitives (clear, filled circle, circle
outline, text), described by the RenderSurface protocol. PygameSurface paints
into a pygame window; ArraySurface paints into a numpy RGB raster so frames can
be produced and inspected without a display.
"""

from typing import Dict, List, Protocol, Tuple

import numpy as np

from canvas_connect4.config import Color

Point = Tuple[float, float]


def split_alpha(color: Color) -> Tuple[Tuple[int, int, int], float]:
    """Split an RGB(A) color into its RGB part and an opacity in [0, 1]."""
    rgb = (int(color[0]), int(color[1]), int(color[2]))
    alpha = color[3] / 255 if len(color) > 3 else 1.0
    return rgb, alpha


class RenderSurface(Protocol):
    width: int
    height: int

    def clear(self) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: Color) -> None: ...

    def outline_circle(self, center: Point, radius: float, color: Color,
                       thickness: int = 4) -> None: ...

    def fill_text(self, text: str, position: Point, color: Color, size: int) -> None: ...


class ArraySurface:
    """
    Software raster backed by a (height, width, 3) uint8 numpy array.

    Circles are rasterised with alpha blending. Text is not rasterised; each
    fill_text call is recorded in ``texts`` as (text, position, color, size).
    """

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)):
        self.width = width
        self.height = height
        self.background, _ = split_alpha(background)
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self.texts: List[Tuple[str, Point, Color, int]] = []
        self._ys, self._xs = np.ogrid[0:height, 0:width]
        self.clear()

    def clear(self) -> None:
        self.pixels[:, :] = self.background
        self.texts = []

    def _distance_sq(self, center: Point) -> np.ndarray:
        cx, cy = center
        return (self._xs + 0.5 - cx) ** 2 + (self._ys + 0.5 - cy) ** 2

    def _blend(self, mask: np.ndarray, color: Color) -> None:
        rgb, alpha = split_alpha(color)
        if alpha >= 1.0:
            self.pixels[mask] = rgb
            return
        region = self.pixels[mask].astype(np.float32)
        blended = region * (1.0 - alpha) + np.array(rgb, dtype=np.float32) * alpha
        self.pixels[mask] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        self._blend(self._distance_sq(center) <= radius ** 2, color)

    def outline_circle(self, center: Point, radius: float, color: Color,
                       thickness: int = 4) -> None:
        dist = self._distance_sq(center)
        inner = max(radius - thickness, 0)
        self._blend((dist <= radius ** 2) & (dist >= inner ** 2), color)

    def fill_text(self, text: str, position: Point, color: Color, size: int) -> None:
        self.texts.append((text, position, color, size))

    def pixel(self, x: float, y: float) -> Tuple[int, int, int]:
        """RGB value of the pixel containing a canvas point."""
        r, g, b = self.pixels[int(y), int(x)]
        return int(r), int(g), int(b)

    def to_array(self) -> np.ndarray:
        return self.pixels.copy()


class PygameSurface:
    """RenderSurface on top of a pygame.Surface (usually the display)."""

    def __init__(self, surface, background: Color = (0, 0, 0), font_name: str = "arial"):
        import pygame

        self._pygame = pygame
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.background, _ = split_alpha(background)
        self.font_name = font_name
        self._fonts: Dict[int, "pygame.font.Font"] = {}

    def clear(self) -> None:
        self.surface.fill(self.background)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        pygame = self._pygame
        rgb, alpha = split_alpha(color)
        if alpha >= 1.0:
            pygame.draw.circle(self.surface, rgb, (round(center[0]), round(center[1])), round(radius))
            return

        # pygame.draw ignores alpha on the display, so blend through an overlay
        size = int(radius * 2) + 2
        overlay = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(overlay, (*rgb, round(alpha * 255)), (size // 2, size // 2), round(radius))
        self.surface.blit(overlay, (round(center[0]) - size // 2, round(center[1]) - size // 2))

    def outline_circle(self, center: Point, radius: float, color: Color,
                       thickness: int = 4) -> None:
        rgb, _ = split_alpha(color)
        self._pygame.draw.circle(self.surface, rgb, (round(center[0]), round(center[1])),
                                 round(radius), thickness)

    def _font(self, size: int):
        font = self._fonts.get(size)
        if font is None:
            if not self._pygame.font.get_init():
                self._pygame.font.init()
            font = self._pygame.font.SysFont(self.font_name, size, bold=True)
            self._fonts[size] = font
        return font

    def fill_text(self, text: str, position: Point, color: Color, size: int) -> None:
        """Draw text with its baseline at position, like a canvas fillText."""
        font = self._font(size)
        rgb, _ = split_alpha(color)
        rendered = font.render(text, True, rgb)
        x, y = position
        self.surface.blit(rendered, (round(x), round(y) - font.get_ascent()))

