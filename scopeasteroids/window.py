"""Window implementation of the vector drawing surface, for debugging without a scope.

Lines are drawn with Bresenham's algorithm. Lines drawn over each other add
their brightness, up to white, and moves draw a dim line as a real beam would.
"""

from __future__ import annotations

from typing import Iterator

import pygame

from .scope import Mode

SIZE = 480
LINE_WIDTH = 1

_MIN_SHADE = 10
_SHADE_RANGE = 245
_MARGIN = 2


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line from (x0, y0) to (x1, y1), both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


class WindowCanvas:
    """Drawing surface that paints vectors onto a square pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.size = min(surface.get_size())
        self.mode = Mode.NORMAL
        self.refresh_rate = 0.0
        self._xmin, self._xmax = 0.0, 1000.0
        self._ymin, self._ymax = 0.0, 1000.0
        self._cursor = (0.0, 0.0)

    def set_scale(
        self, xleft: float, xright: float, ytop: float, ybottom: float, weight: float
    ) -> None:
        """Set the screen edges in drawing coordinates; the weight is not used here."""
        if xleft == xright or ytop == ybottom:
            raise ValueError("screen edges must differ on both axes")
        self._xmin, self._xmax = xleft, xright
        self._ymin, self._ymax = ytop, ybottom

    def move_to(self, x: float, y: float) -> None:
        """Move the cursor, leaving a dim line behind."""
        self.line_to(x, y, 0.0)

    def _pixel(self, value: float, low: float, high: float) -> int:
        n = int((self.size - 2 * _MARGIN) * ((value - low) / (high - low))) + _MARGIN
        return min(max(n, 0), self.size - 1)

    def _plot(self, x: int, y: int, shade: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            return
        bright = min(shade + self.surface.get_at((x, y)).r, 255)
        self.surface.set_at((x, y), (bright, bright, bright))

    def line_to(self, x: float, y: float, weight: float) -> None:
        """Draw a line from the cursor to (x, y) with brightness ``weight`` (0 to 1)."""
        shade = min(max(int(weight * _SHADE_RANGE + _MIN_SHADE), 0), 255)
        cx, cy = self._cursor
        x0 = self._pixel(cx, self._xmin, self._xmax)
        y0 = self._pixel(cy, self._ymin, self._ymax)
        x1 = self._pixel(x, self._xmin, self._xmax)
        y1 = self._pixel(y, self._ymin, self._ymax)

        if self.mode & Mode.FLIP_X:
            x0, x1 = self.size - x0, self.size - x1
        if self.mode & Mode.FLIP_Y:
            y0, y1 = self.size - y0, self.size - y1
        if self.mode & Mode.SWAP_XY:
            x0, y0 = y0, x0
            x1, y1 = y1, x1

        self._cursor = (x, y)

        shallow = abs(x1 - x0) > abs(y1 - y0)
        offsets = [(0, 0)]
        for i in range(1, LINE_WIDTH // 2 + 1):
            offsets += [(0, -i), (0, i)] if shallow else [(-i, 0), (i, 0)]
        for ox, oy in offsets:
            for px, py in bresenham(x0 + ox, y0 + oy, x1 + ox, y1 + oy):
                self._plot(px, py, shade)

    def flip(self, clear: bool = True) -> None:
        """Show what has been drawn; optionally clear the picture afterwards."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
        if clear:
            self.surface.fill((0, 0, 0))

    def set_mode(self, mode: Mode | int) -> None:
        """Set the orientation from the mode bits."""
        self.mode = Mode(int(mode) & 7)