"""Rays cast into the scene."""

from __future__ import annotations

from dataclasses import dataclass

from pathtracer.vec3 import Vec3


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` heading along ``direction``."""

    origin: Vec3
    direction: Vec3

    def point_at(self, t: float) -> Vec3:
        """Return the point at parameter ``t`` along the ray."""
        return Vec3(
            self.origin.x + t * self.direction.x,
            self.origin.y + t * self.direction.y,
            self.origin.z + t * self.direction.z,
        )