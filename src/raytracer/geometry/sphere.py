"""Unit sphere primitive with ray-sphere intersection.

The sphere is canonically the unit sphere centred on its local origin. Its
placement in the world comes entirely from its transform: incoming rays are
moved into object space with the inverse transform before solving, and the
object-space normal is moved back out with the inverse-transpose.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = 1

which expands to the quadratic a*t^2 + b*t + c = 0 with:
    a = dot(direction, direction)
    b = 2 * dot(direction, sphere_to_ray)
    c = dot(sphere_to_ray, sphere_to_ray) - 1
    sphere_to_ray = origin - center

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.tuples import Point, Vector
    >>> from raytracer.geometry.sphere import Sphere
    >>> xs = Sphere().intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    >>> [x.time for x in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from functools import cached_property

from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.tuples import ORIGIN, Point, Vector
from raytracer.geometry.intersection import Intersection
from raytracer.geometry.shape import Shape, normal_matrix
from raytracer.materials.material import Material


@dataclass(frozen=True, eq=False)
class Sphere(Shape):
    """A unit sphere placed in the world by an affine transform.

    Spheres compare by identity, so an Intersection always points at the
    exact sphere instance that produced it.

    Attributes:
        transform: Maps object space into world space (default identity).
        origin: Centre of the sphere in object space (default the origin).
        material: Surface material (default Material()).
    """

    transform: Matrix = field(default_factory=Matrix.identity)
    origin: Point = field(default_factory=lambda: ORIGIN)
    material: Material = field(default_factory=Material)

    @cached_property
    def _normal_matrix(self) -> Matrix:
        return normal_matrix(self.transform)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with the sphere.

        Args:
            ray: The ray to test.

        Returns:
            Two intersections in ascending time order (equal for a tangent
            ray, possibly negative), or an empty list on a miss.

        Raises:
            NonInvertibleMatrixError: If the transform cannot be inverted.
        """
        local_ray = ray.transform(self.transform.inverse())
        sphere_to_ray = local_ray.origin - self.origin

        a = local_ray.direction.dot(local_ray.direction)
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def normal_at(self, point: Point) -> Vector:
        """Return the unit normal at a world-space point on the sphere surface."""
        object_point = self.transform.inverse() @ point
        object_normal = object_point - self.origin
        return (self._normal_matrix @ object_normal).normalize()

    def with_transform(self, transform: Matrix) -> Sphere:
        """Return a copy of this sphere using transform in place of its own."""
        return replace(self, transform=transform)

    def with_material(self, material: Material) -> Sphere:
        return replace(self, material=material)

    def with_origin(self, origin: Point) -> Sphere:
        return replace(self, origin=origin)
