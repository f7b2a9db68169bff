"""Pinhole camera model and the per-pixel render loop.

The camera sits at the origin of its own space looking down -z at a view
plane one unit away. Its transform (usually built with view_transform) maps
world space into camera space, so the inverse transform carries pixel rays
back out into the world.

The view plane is sized from the field of view and the aspect ratio of the
output resolution:
    half_view = tan(field_of_view / 2)
    aspect >= 1: half_width = half_view, half_height = half_view / aspect
    aspect <  1: half_width = half_view * aspect, half_height = half_view

Example:
    >>> import math
    >>> from raytracer.camera.camera import Camera, Resolution
    >>> from raytracer.core.transformations import view_transform
    >>> from raytracer.core.tuples import Point, Vector
    >>> camera = Camera(
    ...     Resolution(400, 200),
    ...     math.pi / 3,
    ...     view_transform(Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0)),
    ... )
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
import math
import multiprocessing
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import repeat
from typing import TYPE_CHECKING

import numpy as np

from raytracer.core.color import Color
from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import ORIGIN, Point
from raytracer.preview.canvas import Canvas

if TYPE_CHECKING:
    from raytracer.scene.world import World

logger = logging.getLogger(__name__)

# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


# =============================================================================
# Resolution
# =============================================================================


@dataclass(frozen=True)
class Resolution:
    """Output image size in pixels.

    Attributes:
        hsize: Horizontal size (width).
        vsize: Vertical size (height).
    """

    hsize: int
    vsize: int

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(f"Resolution must be positive, got {self.hsize}x{self.vsize}")

    @property
    def aspect(self) -> float:
        return self.hsize / self.vsize

    def coordinates(self) -> list[tuple[int, int]]:
        """Return every (x, y) pixel coordinate, row by row from the top."""
        return [(x, y) for y in range(self.vsize) for x in range(self.hsize)]


LOW = Resolution(400, 200)
FHD = Resolution(1920, 1080)


# =============================================================================
# Camera
# =============================================================================


@dataclass(frozen=True)
class Camera:
    """A pinhole camera producing one ray per pixel.

    Attributes:
        resolution: Output size in pixels.
        field_of_view: Horizontal (or vertical, for portrait output) angle of
            view in radians.
        transform: World-to-camera transform (default identity).
        half_width: Half the width of the view plane (derived).
        half_height: Half the height of the view plane (derived).
        pixel_size: Size of one pixel on the view plane (derived).
    """

    resolution: Resolution
    field_of_view: float
    transform: Matrix = field(default_factory=Matrix.identity)
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    pixel_size: float = field(init=False)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.resolution.aspect
        if aspect >= 1:
            half_width, half_height = half_view, half_view / aspect
        else:
            half_width, half_height = half_view * aspect, half_view
        object.__setattr__(self, "half_width", half_width)
        object.__setattr__(self, "half_height", half_height)
        object.__setattr__(self, "pixel_size", half_width * 2 / self.resolution.hsize)

    @property
    def hsize(self) -> int:
        return self.resolution.hsize

    @property
    def vsize(self) -> int:
        return self.resolution.vsize

    def with_transform(self, transform: Matrix) -> Camera:
        return Camera(self.resolution, self.field_of_view, transform)

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Return the world-space ray from the camera through the centre of pixel (x, y).

        Args:
            x: Pixel column, 0 at the left.
            y: Pixel row, 0 at the top.

        Returns:
            A ray with a normalized direction.

        Raises:
            NonInvertibleMatrixError: If the camera transform cannot be inverted.
        """
        # Offset from the edge of the canvas to the pixel's centre
        x_offset = (x + 0.5) * self.pixel_size
        y_offset = (y + 0.5) * self.pixel_size

        # Untransformed pixel coordinates; the camera looks toward -z, so +x is left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        # The view plane is at z = -1
        inverse = self.transform.inverse()
        pixel = inverse @ Point(world_x, world_y, -1.0)
        origin = inverse @ ORIGIN
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render_row(self, world: World, y: int) -> list[Color]:
        """Return the colors of every pixel in row y, left to right."""
        return [world.color_at(self.ray_for_pixel(x, y)) for x in range(self.hsize)]

    def render(
        self,
        world: World,
        *,
        workers: int | None = None,
        progress: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world as seen from this camera.

        Every pixel is a pure function of (world, camera, x, y). With
        workers > 1, rows are computed in a process pool. Rows are collected in order
        into a NumPy buffer that is copied into the canvas in one transfer.

        Args:
            world: The scene to render.
            workers: Number of worker processes. None or 1 renders in-process.
            progress: Optional callback invoked after each row as
                progress(rows_done, total_rows).

        Returns:
            A canvas of size hsize x vsize holding the rendered colors.
        """
        canvas = Canvas(self.hsize, self.vsize)
        total = self.vsize
        start = time.perf_counter()
        logger.info(
            "Rendering %dx%d image of %d objects (workers=%s)",
            self.hsize,
            self.vsize,
            len(world.objects),
            workers or 1,
        )

        if workers is not None and workers > 1:
            # Taichi runtimes do not survive fork
            context = multiprocessing.get_context("spawn")
            with ProcessPoolExecutor(max_workers=workers, mp_context=context) as pool:
                rows = pool.map(_render_row, repeat(self), repeat(world), range(total))
                self._write_rows(canvas, rows, progress)
        else:
            rows = (self.render_row(world, y) for y in range(total))
            self._write_rows(canvas, rows, progress)

        logger.info("Rendered %d pixels in %.2fs", self.hsize * self.vsize, time.perf_counter() - start)
        return canvas

    def _write_rows(
        self,
        canvas: Canvas,
        rows: Iterable[list[Color]],
        progress: ProgressCallback | None,
    ) -> None:
        total = self.vsize
        # Buffer in NumPy and copy into the Taichi field once
        image = np.zeros((self.vsize, self.hsize, 3), dtype=np.float32)
        for y, row in enumerate(rows):
            image[y] = [color.as_tuple() for color in row]
            if progress is not None:
                progress(y + 1, total)
        canvas.load_numpy(image)


def _render_row(camera: Camera, world: World, y: int) -> list[Color]:
    """Process-pool entry point; must be a module-level function to pickle."""
    return camera.render_row(world, y)
