"""Preview module for render output.

Components:
    canvas: Taichi-backed pixel buffer that the camera writes into
    export: PNG (Pillow) and plain PPM writers

The canvas is the only mutable object in the package; everything upstream
of it is an immutable value.
"""

from .canvas import Canvas, CanvasBoundsError
from .export import canvas_to_ppm, save_canvas, save_png, save_ppm

__all__ = [
    "Canvas",
    "CanvasBoundsError",
    "canvas_to_ppm",
    "save_canvas",
    "save_png",
    "save_ppm",
]
