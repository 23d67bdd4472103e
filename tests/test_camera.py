import math

from pathtracer.camera import Camera
from pathtracer.vec3 import Vec3
from pathtracer.window import Window

POS = Vec3(0.0, 4.0, -70.0)


def test_ray_starts_at_camera():
    camera = Camera(POS, 30.0, 1.5)
    assert camera.get_ray(10.0, 10.0, Window(40, 30)).origin == POS


def test_centre_ray_points_forward():
    camera = Camera(POS, 60.0, 1.0)
    ray = camera.get_ray(0.5, 0.5, Window(2, 2))
    assert ray.direction == Vec3(0.0, 0.0, 1.0)


def test_directions_are_unit_length():
    camera = Camera(POS, 45.0, 4 / 3)
    window = Window(40, 30)
    for x, y in [(0, 0), (39, 29), (17, 5)]:
        assert math.isclose(camera.get_ray(x, y, window).direction.magnitude(), 1.0)


def test_top_left_points_up_and_left():
    camera = Camera(POS, 45.0, 1.0)
    direction = camera.get_ray(0.0, 0.0, Window(10, 10)).direction
    assert direction.x < 0.0
    assert direction.y > 0.0


def test_wider_fov_spreads_rays():
    window = Window(10, 10)
    narrow = Camera(POS, 20.0, 1.0).get_ray(0.0, 0.0, window).direction
    wide = Camera(POS, 90.0, 1.0).get_ray(0.0, 0.0, window).direction
    assert abs(wide.x) > abs(narrow.x)


def test_opposite_corners_are_mirrored():
    camera = Camera(POS, 30.0, 1.5)
    window = Window(12, 8)
    a = camera.get_ray(0.0, 0.0, window).direction
    b = camera.get_ray(11.0, 7.0, window).direction
    assert math.isclose(a.x, -b.x)
    assert math.isclose(a.y, -b.y)