"""A small pure-Python path tracer that renders shapes under a sky to PPM images."""

__version__ = "0.1.0"