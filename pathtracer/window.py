"""Pixel buffer with simple drawing primitives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from pathtracer.rgb import Rgb


@dataclass(frozen=True)
class Point2D:
    """A position on the window or in texture space."""

    x: float
    y: float

    def as_buffer_index(self, window: Window) -> int:
        """Index of this point in a row-major buffer of ``window``."""
        return max(0, int(window.width * self.y + self.x))


@dataclass
class Window:
    """A width x height buffer of 0xRRGGBB pixels."""

    width: int
    height: int
    buffer: list[int] = field(default_factory=list)
    running_threads: int = 0

    def __post_init__(self) -> None:
        if not self.buffer:
            self.buffer = [0] * (self.width * self.height)

    def dot(self, point: Point2D, color: Rgb) -> None:
        """Set a single pixel; points are one-based and clipped to the window."""
        packed = color.to_int()
        x = int(point.x - 1.0)
        y = int(point.y - 1.0)
        if 0 < x < self.width and 0 < y < self.height:
            self.buffer[y * self.width + x] = packed

    def line(self, p1: Point2D, p2: Point2D, color: Rgb) -> None:
        """Draw a line from ``p1`` up to, but not including, ``p2``."""
        x0, y0 = int(p1.x), int(p1.y)
        x1, y1 = int(p2.x), int(p2.y)
        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while (x0, y0) != (x1, y1):
            self.dot(Point2D(float(x0), float(y0)), color)
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def set_background(self, color: Rgb) -> None:
        """Fill the whole buffer with ``color``."""
        self.buffer = [color.to_int()] * len(self.buffer)

    def set_buffer(self, pixels: Iterable[int]) -> None:
        """Replace the buffer with a copy of ``pixels``."""
        self.buffer = list(pixels)