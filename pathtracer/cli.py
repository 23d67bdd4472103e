"""Command line entry point that renders the demo scene to a PPM image."""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
from pathlib import Path
from typing import Sequence, TextIO

from pathtracer.camera import Camera
from pathtracer.materials import Checkerboard, Material, MaterialKind, SolidColor
from pathtracer.progress import progress_bar
from pathtracer.rgb import Rgb
from pathtracer.scene import Scene, Statistics
from pathtracer.shapes import Rectangle, Shape, Sphere, Triangle
from pathtracer.vec3 import Vec3
from pathtracer.window import Window

_CYAN = 36
_YELLOW = 33
_GREEN = 32
_CLEAR_TAIL = "          "

_MAGENTA = Rgb(1.0, 0.0, 1.0)
_YELLOW_RGB = Rgb(1.0, 1.0, 0.0)
_GREEN_RGB = Rgb(0.0, 1.0, 0.0)


def _style(text: object, code: int) -> str:
    return f"\x1b[{code}m{text}\x1b[0m"


def _diffuse(color: Rgb) -> Material:
    return Material(MaterialKind.DIFFUSE, SolidColor(color))


def _octahedron() -> list[Shape]:
    """Eight faces around the point (-19.5, 0, 0)."""
    north = Vec3(-16.0, 0.0, 5.0)
    south = Vec3(-16.0, 0.0, -5.0)
    far_north = Vec3(-23.0, 0.0, 5.0)
    far_south = Vec3(-23.0, 0.0, -5.0)
    faces = [
        (north, south, _MAGENTA, _YELLOW_RGB),
        (north, far_north, _YELLOW_RGB, _MAGENTA),
        (far_north, far_south, _MAGENTA, _YELLOW_RGB),
        (south, far_south, _YELLOW_RGB, _MAGENTA),
    ]
    top = Vec3(-19.5, 5.0, 0.0)
    bottom = Vec3(-19.5, -5.0, 0.0)
    upper = [Triangle(a, top, b, _diffuse(up)) for a, b, up, _ in faces]
    lower = [Triangle(a, bottom, b, _diffuse(down)) for a, b, _, down in faces]
    return upper + lower


def build_scene(width: int, height: int) -> Scene:
    """The demo scene: a checkered floor, an octahedron and two spheres."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    floor = Rectangle(
        Vec3(-30.0, -5.0, -20.0),
        Vec3(-30.0, -5.0, 20.0),
        Vec3(20.0, -5.0, 20.0),
        Vec3(20.0, -5.0, -20.0),
        Material(
            MaterialKind.DIFFUSE,
            Checkerboard(Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0), 0.6, 0.6),
        ),
    )
    mirror_sphere = Sphere(
        Vec3(-7.0, 1.0, 0.0),
        5.0,
        Material(MaterialKind.MIRROR, SolidColor(_GREEN_RGB)),
    )
    diffuse_sphere = Sphere(Vec3(7.0, 1.0, 0.0), 5.0, _diffuse(_GREEN_RGB))
    camera = Camera(pos=Vec3(0.0, 4.0, -70.0), fov=30.0, aspect_ratio=width / height)
    objects: list[Shape] = [floor, *_octahedron(), mirror_sphere, diffuse_sphere]
    return Scene(camera=camera, objects=tuple(objects), lights=())


def write_ppm(window: Window, path: str | os.PathLike[str]) -> None:
    """Write the window's 0xRRGGBB buffer as a binary PPM (P6) image."""
    expected = window.width * window.height
    if len(window.buffer) != expected:
        raise ValueError(
            f"buffer holds {len(window.buffer)} pixels, expected {expected}"
        )
    header = f"P6\n{window.width} {window.height}\n255\n".encode("ascii")
    body = bytearray()
    for pixel in window.buffer:
        body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    Path(path).write_bytes(header + bytes(body))


def _row_ranges(height: int, thread_count: int) -> list[tuple[int, int]]:
    chunk = height // thread_count
    return [
        (i * chunk, height if i == thread_count - 1 else chunk * (i + 1))
        for i in range(thread_count)
    ]


def _print_statistics(
    out: TextIO, statistics: Statistics, total_pixels: int, render_ms: int
) -> None:
    with statistics.lock:
        pixel_time = statistics.average_pixel_calc_time
        ray_time = statistics.average_ray_calc_time
        remaining = statistics.remaining_pixels
        running = statistics.running_threads
    if out.isatty():
        out.write("\x1b[2;1H")
    lines = [
        progress_bar(total_pixels - remaining, total_pixels, 30),
        f"{_style('Average pixel calculation time', _CYAN)} (ms): "
        f"{_style(pixel_time, _YELLOW)}{_CLEAR_TAIL}",
        f"{_style('Average ray calculation time', _CYAN)} (ms): "
        f"{_style(ray_time, _YELLOW)}{_CLEAR_TAIL}",
        f"{_style('Estimated seconds remaining', _CYAN)}: "
        f"{_style(f'{pixel_time * remaining:.2f}', _YELLOW)}{_CLEAR_TAIL}",
        f"{_style('Pixels remaining', _CYAN)}: {_style(remaining, _YELLOW)}{_CLEAR_TAIL}",
        f"{_style('Threads working', _CYAN)}: {_style(running, _YELLOW)}{_CLEAR_TAIL}",
        f"{_style('Render time', _CYAN)}: {_style(f'{render_ms}ms', _GREEN)}",
    ]
    out.write("\n".join(lines) + "\n")
    out.flush()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathtracer", description="Render the demo scene to a PPM image."
    )
    parser.add_argument("--width", type=int, default=1200)
    parser.add_argument("--height", type=int, default=800)
    parser.add_argument("--samples", type=int, default=20, help="samples per pixel")
    parser.add_argument("--depth", type=int, default=100, help="recursion depth")
    parser.add_argument("--threads", type=int, default=6)
    parser.add_argument("--output", default="render.ppm")
    parser.add_argument(
        "--no-stats", dest="show_stats", action="store_false",
        help="do not print render statistics",
    )
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    if args.samples < 1:
        parser.error("samples must be at least 1")
    if args.threads < 1 or args.threads > args.height:
        parser.error("threads must be between 1 and the image height")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Render the demo scene with worker threads and save it."""
    args = _parse_args(argv)
    out = sys.stdout
    width, height = args.width, args.height
    interactive = out.isatty()
    if interactive:
        out.write("\x1b[2J\x1b[H\x1b[?25l")
    out.write(_style("Starting render...", _CYAN) + "\n")
    out.flush()

    started = time.monotonic()
    window = Window(width, height)
    scene = build_scene(width, height)
    statistics = Statistics(
        show_stats=args.show_stats,
        remaining_pixels=width * height,
        running_threads=args.threads,
    )
    workers = [
        threading.Thread(
            target=scene.render,
            args=(window, rows, args.samples, args.depth, statistics),
            daemon=True,
        )
        for rows in _row_ranges(height, args.threads)
    ]
    for worker in workers:
        worker.start()

    try:
        while any(worker.is_alive() for worker in workers):
            time.sleep(0.01)
            if args.show_stats:
                elapsed = int((time.monotonic() - started) * 1000)
                _print_statistics(out, statistics, width * height, elapsed)
        for worker in workers:
            worker.join()
        render_ms = int((time.monotonic() - started) * 1000)
        if args.show_stats:
            _print_statistics(out, statistics, width * height, render_ms)
        else:
            statistics.running = False
        write_ppm(window, args.output)
        out.write(f"{_style('Saved', _CYAN)}: {args.output}\n")
    finally:
        if interactive:
            out.write("\x1b[?25h")
        out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())