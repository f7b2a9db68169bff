"""Pixel buffer that rendered colors are written into.

The canvas stores linear RGB colors in a Taichi vector field indexed
``[x, y]`` with ``(0, 0)`` at the top-left corner. Clearing and 8-bit
quantisation run as Taichi kernels; NumPy views are produced on demand for
export and inspection.

Taichi must be initialised (``ti.init(...)``) before a Canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raytracer.core.color import RED
    >>> from raytracer.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, RED)
    >>> canvas.pixel_at(2, 3) == RED
    True
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from raytracer.core.color import BLACK, Color


class CanvasBoundsError(IndexError):
    """Raised when reading or writing a pixel outside the canvas."""


@ti.kernel
def _fill(pixels: ti.template(), red: ti.f32, green: ti.f32, blue: ti.f32):
    for x, y in pixels:
        pixels[x, y] = ti.Vector([red, green, blue])


@ti.kernel
def _quantize(pixels: ti.template(), out: ti.template()):
    # out is indexed [row, column, channel] to match image conventions
    for x, y in pixels:
        color = pixels[x, y]
        for k in ti.static(range(3)):
            scaled = ti.floor(color[k] * 255.0 + 0.5)
            out[y, x, k] = ti.cast(ti.math.clamp(scaled, 0.0, 255.0), ti.u8)


class Canvas:
    """A width x height grid of colors backed by a Taichi field.

    Attributes:
        width: Number of pixel columns.
        height: Number of pixel rows.
    """

    def __init__(self, width: int, height: int, background: Color = BLACK) -> None:
        """Allocate the canvas and fill it with the background color.

        Args:
            width: Image width in pixels (positive).
            height: Image height in pixels (positive).
            background: Initial color of every pixel.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        # Quantised output, indexed [row, column, channel]; reused by every export
        self._rgb8 = ti.field(dtype=ti.u8, shape=(height, width, 3))
        self.fill(background)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def field(self) -> ti.MatrixField:
        """The underlying Taichi field, indexed [x, y]."""
        return self._pixels

    def fill(self, color: Color) -> None:
        """Set every pixel to color."""
        _fill(self._pixels, color.red, color.green, color.blue)

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Store color at column x, row y.

        Raises:
            CanvasBoundsError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = (color.red, color.green, color.blue)

    def load_numpy(self, image: npt.NDArray[np.floating]) -> None:
        """Replace every pixel from a (height, width, 3) array of linear colors.

        Raises:
            ValueError: If the array shape does not match the canvas.
        """
        expected = (self._height, self._width, 3)
        if image.shape != expected:
            raise ValueError(f"Expected an image of shape {expected}, got {image.shape}")
        pixels = np.ascontiguousarray(image.transpose(1, 0, 2), dtype=np.float32)
        self._pixels.from_numpy(pixels)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def rows(self) -> list[list[Color]]:
        """Return the pixels as a list of rows, top row first."""
        image = self.to_numpy()
        return [[Color(float(r), float(g), float(b)) for r, g, b in row] for row in image]

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return the linear colors as a (height, width, 3) float32 array."""
        return np.ascontiguousarray(self._pixels.to_numpy().transpose(1, 0, 2))

    def to_rgb8(self) -> npt.NDArray[np.uint8]:
        """Return the colors scaled to [0, 255] as a (height, width, 3) uint8 array."""
        _quantize(self._pixels, self._rgb8)
        return self._rgb8.to_numpy()

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise CanvasBoundsError(
                f"Coordinate ({x}, {y}) lies outside canvas of size {self._width}x{self._height}"
            )
