import math

import pytest

from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3


RAY = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.5, -1.0, 2.0))


def test_point_at_zero_is_origin():
    assert RAY.point_at(0.0) == RAY.origin


def test_point_at_one_adds_direction():
    assert RAY.point_at(1.0) == RAY.origin + RAY.direction


@pytest.mark.parametrize("t", [-2.0, 0.25, 3.5, 10.0])
def test_point_lies_along_direction(t):
    p = RAY.point_at(t)
    expected = RAY.origin + RAY.direction.scale(t)
    assert math.isclose(p.x, expected.x)
    assert math.isclose(p.y, expected.y)
    assert math.isclose(p.z, expected.z)