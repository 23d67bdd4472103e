"""Scene description and the path tracing renderer."""

from __future__ import annotations

import math
import random
import threading
import time
from dataclasses import dataclass, field
from typing import Sequence

from pathtracer.camera import Camera
from pathtracer.materials import MaterialKind
from pathtracer.ray import Ray
from pathtracer.rgb import Rgb
from pathtracer.shapes import HitRecord, Light, Shape
from pathtracer.vec3 import Vec3
from pathtracer.window import Window

_WHITE = Rgb(1.0, 1.0, 1.0)
_SKY_BLUE = Rgb(0.5, 0.7, 1.0)


@dataclass
class Statistics:
    """Render progress shared between worker threads; guard with ``lock``."""

    show_stats: bool = True
    running: bool = True
    average_ray_calc_time: float = 0.0
    average_pixel_calc_time: float = 0.0
    remaining_pixels: int = 0
    running_threads: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


@dataclass
class Scene:
    """A camera looking at a set of shapes under a sky."""

    camera: Camera
    objects: Sequence[Shape] = ()
    lights: Sequence[Light] = ()
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def closest_hit(self, ray: Ray) -> HitRecord:
        """The nearest intersection of ``ray`` with any object."""
        record = HitRecord()
        for shape in self.objects:
            candidate = shape.intersection(ray)
            if candidate.hit and (not record.hit or candidate.distance < record.distance):
                record = candidate
        return record

    def random_in_unit_sphere(self) -> Vec3:
        """A random direction of unit length."""
        angle = self.rng.random() * 2.0 * math.pi
        z = -1.0 + self.rng.random() * 2.0
        r = math.sqrt(1.0 - z * z)
        return Vec3(r * math.cos(angle), r * math.sin(angle), z)

    def random_in_hemisphere(self, normal: Vec3) -> Vec3:
        """A random unit direction on the side of ``normal``."""
        direction = self.random_in_unit_sphere()
        return direction if direction.dot(normal) > 0.0 else -direction

    def ray_trace(self, ray: Ray, recursion_depth: int) -> Rgb:
        """Colour seen along ``ray``, following at most ``recursion_depth`` bounces."""
        if recursion_depth < 0:
            return Rgb()
        record = self.closest_hit(ray)
        if record.hit:
            point, normal = record.closest_point, record.normal
            if record.shape.material.kind is MaterialKind.MIRROR:
                dn = 2.0 * ray.direction.dot(normal)
                reflected = ray.direction - normal.scale(dn)
                return self.ray_trace(Ray(point, reflected.unit()), recursion_depth - 1)
            target = (point + normal + self.random_in_hemisphere(normal)) - point
            bounced = self.ray_trace(Ray(point, target), recursion_depth - 1)
            return record.color * bounced.scale(0.5)
        t = 0.5 * (ray.direction.unit().y + 1.0)
        return _WHITE.scale(1.0 - t) + _SKY_BLUE.scale(t)

    def render(
        self,
        window: Window,
        rows: tuple[int, int],
        samples_per_pixel: int,
        recursion_depth: int,
        statistics: Statistics,
    ) -> None:
        """Render rows ``rows[0]`` up to ``rows[1]`` into ``window``'s buffer."""
        if samples_per_pixel < 1:
            raise ValueError("samples_per_pixel must be at least 1")
        start, stop = rows
        show_stats = statistics.show_stats
        width = window.width
        scale = 1.0 / samples_per_pixel
        ray_time_sum = 0.0
        pixels_done = 0

        for y in range(start, stop):
            for x in range(width):
                pixel_color = Rgb()
                for _ in range(samples_per_pixel):
                    ray_start = time.perf_counter()
                    x_sample, y_sample = float(x), float(y)
                    if samples_per_pixel > 1:
                        x_sample += self.rng.random()
                        y_sample += self.rng.random()
                    ray = self.camera.get_ray(x_sample, y_sample, window)
                    pixel_color = pixel_color + self.ray_trace(ray, recursion_depth)
                    ray_time_sum += time.perf_counter() - ray_start

                window.buffer[y * width + x] = pixel_color.scale(scale).sqrt().to_int()
                pixels_done += 1

                if show_stats:
                    per_pixel = ray_time_sum / pixels_done
                    with statistics.lock:
                        statistics.remaining_pixels -= 1
                        statistics.average_ray_calc_time = (
                            statistics.average_ray_calc_time + per_pixel
                        ) / 2.0
                        statistics.average_pixel_calc_time = (
                            statistics.average_ray_calc_time + per_pixel
                        ) / 2.0

        if show_stats:
            with statistics.lock:
                statistics.running_threads -= 1