"""Textures and surface materials."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Union

from pathtracer.rgb import Rgb
from pathtracer.window import Point2D


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class SolidColor:
    """A texture of a single colour."""

    color: Rgb

    def pattern_at(self, u: float, v: float) -> Rgb:
        return self.color


@dataclass(frozen=True)
class Checkerboard:
    """Two-colour checker pattern in texture space."""

    color1: Rgb
    color2: Rgb
    size1: float
    size2: float

    def pattern_at(self, u: float, v: float) -> Rgb:
        u_cell = _round_half_away(u * self.size1)
        v_cell = _round_half_away(v * self.size2)
        if math.fmod(u_cell + v_cell, 2.0) == 0.0:
            return self.color1
        return self.color2


Texture = Union[SolidColor, Checkerboard]


class MaterialKind(enum.Enum):
    """How a surface scatters light."""

    DIFFUSE = "diffuse"
    MIRROR = "mirror"


@dataclass(frozen=True)
class Material:
    """Scattering behaviour paired with a surface texture."""

    kind: MaterialKind
    texture: Texture

    def uv_pattern_at(self, point: Point2D) -> Rgb:
        """Colour of the texture at texture coordinate ``point``."""
        return self.texture.pattern_at(point.x, point.y)