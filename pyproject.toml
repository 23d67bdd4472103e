[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtracer"
version = "0.1.0"
description = "A small pure-Python path tracer with spheres, triangles, rectangles, mirror and diffuse materials."
requires-python = ">=3.10"
dependencies = []
keywords = ["path tracing", "ray tracing", "rendering", "graphics", "3d", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathtracer = "pathtracer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pathtracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
