"""Polymorphic shape interface and the transformed-shape decorator.

Every shape answers two questions in world space: where does a ray meet it
(intersect) and which way does its surface face at a point (normal_at). It
also carries the Material used to shade it.

Concrete shapes solve both questions in their own object space. Wrapping a
shape in a TransformedShape moves it into a different frame without touching
the shape itself: rays are carried into the delegate's frame by the inverse
transform, and normals are carried back out by the inverse-transpose. The
wrapper substitutes itself as the owner of every intersection it returns, so
callers only ever see the wrapper.

Example:
    >>> from raytracer.core.transformations import translation
    >>> from raytracer.geometry.sphere import Sphere
    >>> from raytracer.geometry.shape import TransformedShape
    >>> moved = TransformedShape(Sphere(), translation(0, 1, 0))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property

from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import Point, Vector
from raytracer.geometry.intersection import Intersection
from raytracer.materials.material import Material


class Shape(ABC):
    """Base class for anything a ray can hit.

    Attributes:
        material: The material used to shade the shape.
    """

    material: Material

    @abstractmethod
    def intersect(self, ray: Ray) -> list[Intersection]:
        """Return every intersection of the world-space ray with this shape.

        Intersections are ordered by ascending time and reference the shape
        the caller holds. An empty list means the ray misses.
        """

    @abstractmethod
    def normal_at(self, point: Point) -> Vector:
        """Return the unit surface normal at a world-space point on the shape."""

    @abstractmethod
    def with_material(self, material: Material) -> Shape:
        """Return a copy of this shape using a different material."""

    def with_transform(self, transform: Matrix) -> Shape:
        """Return this shape placed in the world by an additional transform."""
        return TransformedShape(self, transform)


def normal_matrix(transform: Matrix) -> Matrix:
    """Return the matrix carrying object-space normals into world space.

    This is the inverse-transpose of the upper-left 3x3 of the transform,
    which keeps normals perpendicular to the surface under non-uniform scaling.
    """
    return transform.submatrix(3, 3).inverse().transpose()


@dataclass(frozen=True, eq=False)
class TransformedShape(Shape):
    """A shape wrapped in an extra transform.

    Attributes:
        delegate: The wrapped shape, expressed in its own frame.
        transform: Maps the delegate's frame into the wrapper's frame.
    """

    delegate: Shape
    transform: Matrix

    @property
    def material(self) -> Material:  # type: ignore[override]
        return self.delegate.material

    @cached_property
    def _normal_matrix(self) -> Matrix:
        return normal_matrix(self.transform)

    def intersect(self, ray: Ray) -> list[Intersection]:
        local_ray = ray.transform(self.transform.inverse())
        # Re-own the delegate's intersections so shading looks up this shape
        return [Intersection(found.time, self) for found in self.delegate.intersect(local_ray)]

    def normal_at(self, point: Point) -> Vector:
        local_point = self.transform.inverse() @ point
        local_normal = self.delegate.normal_at(local_point)
        return (self._normal_matrix @ local_normal).normalize()

    def with_material(self, material: Material) -> TransformedShape:
        return TransformedShape(self.delegate.with_material(material), self.transform)
