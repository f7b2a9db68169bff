"""Ray data structure.

A ray is a half-line: every point on it is ``origin + direction * t`` for
some parameter ``t``. Negative ``t`` values lie behind the origin.

Shapes never move their own geometry. Instead, a world-space ray is moved
into a shape's object space with ``ray.transform(shape_transform.inverse())``
and intersected with the canonical, untransformed shape there.

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.tuples import Point, Vector
    >>> ray = Ray(Point(2, 3, 4), Vector(1, 0, 0))
    >>> ray.position(2.5) == Point(4.5, 3, 4)
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.core.matrix import Matrix
from raytracer.core.tuples import Point, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not required to be
            normalized; object-space rays usually are not.
    """

    origin: Point
    direction: Vector

    __hash__ = None  # type: ignore[assignment]

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return the ray with both origin and direction multiplied by matrix."""
        return Ray(matrix @ self.origin, matrix @ self.direction)
