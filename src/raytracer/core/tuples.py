"""Points and vectors in homogeneous 3-D coordinates.

A Point is a position (homogeneous w = 1) and is moved by translations; a
Vector is a direction or displacement (w = 0) and is not. Keeping them as two
distinct types lets the arithmetic return the right kind of value:

    Point - Point   -> Vector
    Point +/- Vector -> Point
    Vector +/- Vector -> Vector

Equality is approximate: two tuples are equal when every component differs by
less than EPSILON. This makes the types usable directly in golden-value tests.

Example:
    >>> from raytracer.core.tuples import Point, Vector
    >>> p = Point(3, -2, 5) + Vector(-2, 3, 1)
    >>> p == Point(1, 1, 6)
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.core.approximate import almost


def _components_almost(a: Point | Vector, b: Point | Vector) -> bool:
    return almost(a.x, b.x) and almost(a.y, b.y) and almost(a.z, b.z)


@dataclass(frozen=True, eq=False)
class Vector:
    """A direction in space.

    Attributes:
        x: Component along the x-axis.
        y: Component along the y-axis.
        z: Component along the z-axis.
    """

    x: float
    y: float
    z: float

    w = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return _components_almost(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        # Division by zero is the caller's problem.
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self) -> float:
        """Return the Euclidean length sqrt(x^2 + y^2 + z^2)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector:
        """Return a unit vector pointing the same way.

        Raises:
            ZeroDivisionError: If the vector has zero length.
        """
        return self / self.magnitude()

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Return the right-handed cross product self x other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a surface normal.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            self - normal * 2 * dot(self, normal).
        """
        return self - normal * (2.0 * self.dot(normal))

    def as_homogeneous(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)


@dataclass(frozen=True, eq=False)
class Point:
    """A position in space.

    Attributes:
        x: Coordinate along the x-axis.
        y: Coordinate along the y-axis.
        z: Coordinate along the z-axis.
    """

    x: float
    y: float
    z: float

    w = 1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return _components_almost(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point | Vector) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)

    def as_homogeneous(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)


ORIGIN = Point(0.0, 0.0, 0.0)
