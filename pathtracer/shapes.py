"""Renderable shapes and the records of rays hitting them."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass
from typing import Optional

from pathtracer.materials import Material
from pathtracer.ray import Ray
from pathtracer.rgb import Rgb
from pathtracer.vec3 import Vec3
from pathtracer.window import Point2D

_EPSILON = 0.0000001


@dataclass(frozen=True)
class HitRecord:
    """Where and how a ray met a shape; ``hit`` is False for a miss."""

    hit: bool = False
    distance: float = -1.0
    closest_point: Vec3 = Vec3()
    normal: Vec3 = Vec3()
    color: Rgb = Rgb()
    shape: Optional[Shape] = None


@dataclass(frozen=True)
class Light:
    """A point light source."""

    pos: Vec3


class Shape(abc.ABC):
    """Something a ray can intersect."""

    material: Material

    @abc.abstractmethod
    def intersection(self, ray: Ray) -> HitRecord:
        """Full intersection test with distance, normal and colour."""

    @abc.abstractmethod
    def trace(self, ray: Ray) -> bool:
        """Cheap test of whether the ray meets the shape."""


def _acos_or_nan(value: float) -> float:
    if -1.0 <= value <= 1.0:
        return math.acos(value)
    return math.nan


@dataclass(frozen=True)
class Sphere(Shape):
    """A sphere centred at ``pos``."""

    pos: Vec3
    radius: float
    material: Material

    def _discriminant(self, ray: Ray) -> tuple[float, float]:
        oc = ray.origin - self.pos
        b = ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        return b, b * b - c

    def intersection(self, ray: Ray) -> HitRecord:
        b, delta = self._discriminant(ray)
        if not delta > 0.0:
            return HitRecord()
        root = math.sqrt(delta)
        t0 = -b - root
        t1 = -b + root
        if t0 < 0.0 or t1 < 0.0:
            return HitRecord()
        distance = min(t0, t1)
        point = ray.point_at(distance)
        return HitRecord(
            hit=True,
            distance=distance,
            closest_point=point,
            normal=(point - self.pos).unit(),
            color=self.uv_color_at(point),
            shape=self,
        )

    def uv_color_at(self, point: Vec3) -> Rgb:
        """Texture colour at ``point`` using a spherical mapping."""
        theta = math.atan2(point.x, point.z)
        radius = point.magnitude()
        ratio = point.y / radius if radius else math.nan
        phi = _acos_or_nan(ratio)
        raw_u = theta / (2.0 / math.pi)
        u = 1.0 - (raw_u + 0.5)
        v = 1.0 - (phi / math.pi)
        return self.material.uv_pattern_at(Point2D(u, v))

    def trace(self, ray: Ray) -> bool:
        _, delta = self._discriminant(ray)
        return delta > 0.0


@dataclass(frozen=True)
class Triangle(Shape):
    """A triangle with vertices ``vec1``, ``vec2`` and ``vec3``."""

    vec1: Vec3
    vec2: Vec3
    vec3: Vec3
    material: Material

    def _solve(self, ray: Ray) -> Optional[float]:
        """Ray parameter of the hit, or None when the ray misses."""
        edge1 = self.vec2 - self.vec1
        edge2 = self.vec3 - self.vec1
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)
        if -_EPSILON < a < _EPSILON:
            return None
        f = 1.0 / a
        s = ray.origin - self.vec1
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None
        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None
        t = f * edge2.dot(q)
        return t if t > _EPSILON else None

    def intersection(self, ray: Ray) -> HitRecord:
        t = self._solve(ray)
        if t is None:
            return HitRecord()
        point = ray.point_at(t)
        edge1 = self.vec2 - self.vec1
        edge2 = self.vec3 - self.vec1
        return HitRecord(
            hit=True,
            distance=t,
            closest_point=point,
            normal=edge1.cross(edge2).unit(),
            color=self.uv_color_at(point),
            shape=self,
        )

    def uv_color_at(self, point: Vec3) -> Rgb:
        """Texture colour at ``point`` projected onto the x/z plane."""
        return self.material.uv_pattern_at(Point2D(point.x, point.z))

    def trace(self, ray: Ray) -> bool:
        return self._solve(ray) is not None


@dataclass(frozen=True)
class Rectangle(Shape):
    """A quadrilateral made of two triangles sharing ``vec1`` and ``vec3``."""

    vec1: Vec3
    vec2: Vec3
    vec3: Vec3
    vec4: Vec3
    material: Material

    def triangles(self) -> tuple[Triangle, Triangle]:
        return (
            Triangle(self.vec1, self.vec2, self.vec3, self.material),
            Triangle(self.vec1, self.vec3, self.vec4, self.material),
        )

    def intersection(self, ray: Ray) -> HitRecord:
        for triangle in self.triangles():
            if triangle.trace(ray):
                return triangle.intersection(ray)
        return HitRecord()

    def trace(self, ray: Ray) -> bool:
        return any(triangle.trace(ray) for triangle in self.triangles())