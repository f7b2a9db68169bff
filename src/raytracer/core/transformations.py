"""Factories for the named 4x4 affine transforms.

All rotations are right-handed and take radians. Combine transforms with
Matrix.then() to read them in the order they are applied:

    >>> from raytracer.core.transformations import scaling, translation
    >>> scaling(0.5, 0.5, 0.5).then(translation(1.5, 0.5, -0.5))
"""

from __future__ import annotations

import math

from raytracer.core.matrix import Matrix
from raytracer.core.tuples import Point, Vector


def translation(x: float, y: float, z: float) -> Matrix:
    """Return a transform that shifts points by (x, y, z)."""
    return Matrix.square(
        4,
        [
            1, 0, 0, x,
            0, 1, 0, y,
            0, 0, 1, z,
            0, 0, 0, 1,
        ],
    )  # fmt: skip


def scaling(x: float, y: float, z: float) -> Matrix:
    """Return a transform that scales each axis independently.

    A negative factor reflects across the corresponding plane.
    """
    return Matrix.square(
        4,
        [
            x, 0, 0, 0,
            0, y, 0, 0,
            0, 0, z, 0,
            0, 0, 0, 1,
        ],
    )  # fmt: skip


def rotation_x(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix.square(
        4,
        [
            1, 0, 0, 0,
            0, cos, -sin, 0,
            0, sin, cos, 0,
            0, 0, 0, 1,
        ],
    )  # fmt: skip


def rotation_y(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix.square(
        4,
        [
            cos, 0, sin, 0,
            0, 1, 0, 0,
            -sin, 0, cos, 0,
            0, 0, 0, 1,
        ],
    )  # fmt: skip


def rotation_z(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix.square(
        4,
        [
            cos, -sin, 0, 0,
            sin, cos, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        ],
    )  # fmt: skip


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Return a transform that moves each coordinate in proportion to the others.

    Args:
        xy: How much x moves in proportion to y.
        xz: How much x moves in proportion to z.
        yx: How much y moves in proportion to x.
        yz: How much y moves in proportion to z.
        zx: How much z moves in proportion to x.
        zy: How much z moves in proportion to y.
    """
    return Matrix.square(
        4,
        [
            1, xy, xz, 0,
            yx, 1, yz, 0,
            zx, zy, 1, 0,
            0, 0, 0, 1,
        ],
    )  # fmt: skip


def view_transform(from_point: Point, to: Point, up: Vector) -> Matrix:
    """Return the transform that orients the world relative to an eye.

    The result maps world space into camera space: the eye sits at the origin
    looking down -z, with +y as the (corrected) up direction.

    Args:
        from_point: Where the eye is.
        to: The point the eye looks at.
        up: Approximate up direction; it need not be exactly perpendicular
            to the view direction.

    Returns:
        A 4x4 view matrix.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix.square(
        4,
        [
            left.x, left.y, left.z, 0,
            true_up.x, true_up.y, true_up.z, 0,
            -forward.x, -forward.y, -forward.z, 0,
            0, 0, 0, 1,
        ],
    )  # fmt: skip
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
