# pathtracer

A small path tracer in plain Python with no third-party dependencies.
It renders scenes made of spheres, triangles and rectangles. Each shape
has a diffuse or mirror material and a solid colour or checkerboard
texture. Light comes from a white-to-blue sky gradient.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Rendering the demo scene

```
pathtracer
```

The command builds the demo scene: a checkerboard floor, an octahedron
in magenta and yellow, a mirror sphere and a diffuse sphere. It splits
the image rows among worker threads and renders them with anti-aliasing
(random sub-pixel samples) and gamma correction (square root of the
averaged colour). It writes the result as a binary PPM (P6) image.

While the image renders, the command reprints progress on the terminal
about every 10 ms: a progress bar, average pixel and ray times, an
estimate of the time remaining, the pixels remaining, the threads still
working and the elapsed render time. When the output is a terminal, it
clears the screen at the start and hides the cursor until it finishes.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--width N` | 1200 | image width in pixels |
| `--height N` | 800 | image height in pixels |
| `--samples N` | 20 | samples per pixel (at least 1) |
| `--depth N` | 100 | maximum number of ray bounces |
| `--threads N` | 6 | worker threads, between 1 and the image height |
| `--output PATH` | `render.ppm` | where the image is written |
| `--no-stats` | | do not print progress statistics |

Rendering in pure Python is slow. For a quick look, use something like
`pathtracer --width 120 --height 80 --samples 2 --depth 10`.

## Using it as a library

- `pathtracer.vec3.Vec3` is an immutable 3D vector with `+`, `-`, `*`,
  `/` (component-wise), unary `-`, `dot`, `cross`, `magnitude`,
  `magnitude_squared`, `unit`, `scale`, `mix` and `dist`. In `mix` the
  z component is interpolated from the y components. In `dist` the y
  and z terms use the product of the components, not their difference.
- `pathtracer.rgb.Rgb` is an immutable colour with `+`, `-`, `*`,
  division by a number, `mix`, `scale` and `sqrt`. Its `to_int` method
  clamps each channel to [0, 1] and packs the colour into a `0xRRGGBB`
  integer. A colour with a NaN channel packs to 0.
- `pathtracer.ray.Ray` holds an origin and a direction. `point_at(t)`
  returns the point at parameter `t`.
- `pathtracer.materials` provides the `SolidColor` and `Checkerboard`
  textures, each with `pattern_at(u, v)`. It also provides
  `MaterialKind` (`DIFFUSE`, `MIRROR`) and `Material`, which pairs a
  kind with a texture and gives `uv_pattern_at(point)`.
- `pathtracer.shapes` provides `Sphere`, `Triangle` and `Rectangle`.
  Each has `intersection(ray)`, which returns a `HitRecord`, and
  `trace(ray)`, which returns a bool. A `Rectangle` is two triangles,
  which `triangles()` returns. `Light` holds a position.
- `pathtracer.camera.Camera` turns a pixel coordinate into a primary ray
  with `get_ray(x, y, window)`.
- `pathtracer.window.Window` is the `width * height` buffer of
  `0xRRGGBB` pixels. It has `dot`, `line`, `set_background` and
  `set_buffer`. `dot` takes one-based points and ignores points outside
  the window. `Point2D` gives `as_buffer_index(window)`.
- `pathtracer.scene.Scene` holds a camera, objects and lights, plus a
  `random.Random` that you can seed. It provides `closest_hit`,
  `ray_trace` and `render(window, rows, samples_per_pixel,
  recursion_depth, statistics)`. `render` fills the rows from
  `rows[0]` up to `rows[1]` and updates a shared `Statistics` record
  under its lock.
- `pathtracer.progress.progress_bar(current, maximum, barsize)` returns
  the coloured `[===---] N%` bar.
- `pathtracer.cli.build_scene(width, height)` returns the demo scene.
  `pathtracer.cli.write_ppm(window, path)` saves a window's buffer.
  `pathtracer.cli.main(argv=None)` runs the command.

```python
import random

from pathtracer.cli import build_scene, write_ppm
from pathtracer.scene import Statistics
from pathtracer.window import Window

width, height = 60, 40
scene = build_scene(width, height)
scene.rng = random.Random(1)
window = Window(width, height)
scene.render(window, (0, height), 1, 5, Statistics(show_stats=False))
write_ppm(window, "small.ppm")
```

## What it does not do

- The command does not open a window to show the image while it
  renders. It only writes the finished image to a PPM file.
- Lights can be placed in a scene, but `Scene` does not use them for
  shading. All illumination comes from the sky gradient.
- The scene is fixed. There is no scene file format, and `build_scene`
  always builds the same demo scene.