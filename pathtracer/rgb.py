"""Floating point colour with packing into 0xRRGGBB pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _channel_byte(value: float) -> float:
    clamped = min(max(value, 0.0), 1.0)
    return math.floor(clamped * 255.0 + 0.5)


@dataclass(frozen=True)
class Rgb:
    """An immutable colour whose channels nominally range over [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def to_int(self) -> int:
        """Pack the clamped colour into a 0xRRGGBB integer."""
        if any(math.isnan(c) for c in (self.r, self.g, self.b)):
            return 0
        return int(
            65536 * _channel_byte(self.r)
            + 256 * _channel_byte(self.g)
            + _channel_byte(self.b)
        )

    def mix(self, other: Rgb, t: float) -> Rgb:
        """Linear interpolation between this colour and ``other``."""
        return Rgb(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
        )

    def scale(self, factor: float) -> Rgb:
        return Rgb(self.r * factor, self.g * factor, self.b * factor)

    def sqrt(self) -> Rgb:
        return Rgb(math.sqrt(self.r), math.sqrt(self.g), math.sqrt(self.b))

    def __truediv__(self, factor: float) -> Rgb:
        return Rgb(self.r / factor, self.g / factor, self.b / factor)

    def __add__(self, other: Rgb) -> Rgb:
        return Rgb(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Rgb) -> Rgb:
        return Rgb(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Rgb) -> Rgb:
        return Rgb(self.r * other.r, self.g * other.g, self.b * other.b)