"""Pinhole camera generating primary rays."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3
from pathtracer.window import Window


@dataclass(frozen=True)
class Camera:
    """A camera at ``pos`` looking down +z with a vertical field of view."""

    pos: Vec3
    fov: float
    aspect_ratio: float

    def get_ray(self, x: float, y: float, window: Window) -> Ray:
        """Ray through pixel coordinate (x, y) of ``window``."""
        fov_adj = math.tan(math.radians(self.fov) / 2.0)
        sensor_x = (((x + 0.5) / window.width) * 2.0 - 1.0) * self.aspect_ratio * fov_adj
        sensor_y = (1.0 - ((y + 0.5) / window.height) * 2.0) * fov_adj
        return Ray(self.pos, Vec3(sensor_x, sensor_y, 1.0).unit())