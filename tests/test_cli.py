import pytest

from pathtracer.cli import build_scene, main, write_ppm
from pathtracer.materials import Checkerboard, MaterialKind
from pathtracer.ray import Ray
from pathtracer.rgb import Rgb
from pathtracer.shapes import Rectangle, Sphere, Triangle
from pathtracer.vec3 import Vec3
from pathtracer.window import Window


def test_build_scene_camera():
    scene = build_scene(1200, 800)
    assert scene.camera.pos == Vec3(0.0, 4.0, -70.0)
    assert scene.camera.fov == 30.0
    assert scene.camera.aspect_ratio == pytest.approx(1200 / 800)


def test_build_scene_objects():
    scene = build_scene(1200, 800)
    assert len(scene.objects) == 11
    assert isinstance(scene.objects[0], Rectangle)
    assert isinstance(scene.objects[0].material.texture, Checkerboard)
    assert sum(isinstance(o, Triangle) for o in scene.objects) == 8
    spheres = [o for o in scene.objects if isinstance(o, Sphere)]
    assert [s.material.kind for s in spheres] == [MaterialKind.MIRROR, MaterialKind.DIFFUSE]
    assert [s.pos for s in spheres] == [Vec3(-7.0, 1.0, 0.0), Vec3(7.0, 1.0, 0.0)]


def test_build_scene_rejects_empty_size():
    with pytest.raises(ValueError):
        build_scene(0, 10)


def test_scene_sky_straight_up():
    scene = build_scene(10, 10)
    color = scene.ray_trace(Ray(Vec3(0.0, 100.0, 0.0), Vec3(0.0, 1.0, 0.0)), 3)
    assert color == Rgb(0.5, 0.7, 1.0)


def test_write_ppm_bytes(tmp_path):
    window = Window(2, 1, buffer=[0xFF0000, 0x00FF00])
    path = tmp_path / "out.ppm"
    write_ppm(window, path)
    assert path.read_bytes() == b"P6\n2 1\n255\n\xff\x00\x00\x00\xff\x00"


def test_write_ppm_rejects_wrong_buffer(tmp_path):
    window = Window(2, 2)
    window.set_buffer([0, 0, 0])
    with pytest.raises(ValueError):
        write_ppm(window, tmp_path / "bad.ppm")


def test_main_renders_image(tmp_path):
    path = tmp_path / "render.ppm"
    code = main([
        "--width", "8", "--height", "6", "--samples", "1", "--depth", "2",
        "--threads", "2", "--output", str(path), "--no-stats",
    ])
    assert code == 0
    data = path.read_bytes()
    header = b"P6\n8 6\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 8 * 6 * 3


def test_main_prints_statistics(tmp_path, capsys):
    path = tmp_path / "stats.ppm"
    main([
        "--width", "4", "--height", "4", "--samples", "1", "--depth", "1",
        "--threads", "1", "--output", str(path),
    ])
    printed = capsys.readouterr().out
    assert "Starting render..." in printed
    assert "Render time" in printed
    assert "Pixels remaining" in printed


def test_main_rejects_too_many_threads(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--height", "2", "--threads", "6", "--output", str(tmp_path / "x.ppm")])
    assert info.value.code == 2