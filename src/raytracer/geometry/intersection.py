"""Intersection records, hit selection and shading precomputation.

An Intersection is a candidate hit: the ray parameter ``time`` at which a ray
meets a shape, plus the shape itself (``thing``). Times may be negative when
the shape lies behind the ray origin.

The visible surface along a ray is its *hit*: the intersection with the
smallest non-negative time. Once the hit is known, pre_computations() derives
everything the shading step needs (point, eye vector, normal, over point).

Example:
    >>> from raytracer.geometry.intersection import Intersection, hit
    >>> from raytracer.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> hit([Intersection(5, s), Intersection(-3, s), Intersection(2, s)]).time
    2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytracer.core.approximate import EPSILON
from raytracer.core.ray import Ray
from raytracer.core.tuples import Point, Vector

if TYPE_CHECKING:
    from collections.abc import Iterable

    from raytracer.geometry.shape import Shape


@dataclass(frozen=True)
class Intersection:
    """A ray/shape intersection.

    Attributes:
        time: The ray parameter t at the intersection.
        thing: The shape that was intersected.
    """

    time: float
    thing: Shape

    def pre_computations(self, ray: Ray) -> PreComputedIntersection:
        """Evaluate this intersection against the ray that produced it.

        The normal is flipped to face the eye when the ray starts inside the
        shape, and the over point is nudged along that normal by EPSILON so
        shadow rays cast from it do not re-hit the same surface.

        Args:
            ray: The ray whose intersection this is (world space).

        Returns:
            A PreComputedIntersection snapshot.
        """
        point = ray.position(self.time)
        eye_vector = -ray.direction
        normal = self.thing.normal_at(point).normalize()
        inside = normal.dot(eye_vector) < 0
        if inside:
            normal = -normal
        return PreComputedIntersection(
            time=self.time,
            thing=self.thing,
            point=point,
            eye_vector=eye_vector,
            normal_vector=normal,
            inside=inside,
            over_point=point + normal * EPSILON,
        )


@dataclass(frozen=True)
class PreComputedIntersection:
    """Shading inputs derived from an Intersection and its ray.

    Attributes:
        time: The ray parameter of the intersection.
        thing: The intersected shape.
        point: World-space intersection point.
        eye_vector: Vector from the point back toward the ray origin.
        normal_vector: Unit surface normal, always facing the eye.
        inside: True if the ray originated inside the shape.
        over_point: point moved slightly along normal_vector, used as the
            origin for shadow rays.
    """

    time: float
    thing: Shape
    point: Point
    eye_vector: Vector
    normal_vector: Vector
    inside: bool
    over_point: Point

    __hash__ = None  # type: ignore[assignment]


def intersections(*items: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by time."""
    return sorted(items, key=lambda intersection: intersection.time)


def hit(candidates: Iterable[Intersection]) -> Intersection | None:
    """Return the intersection with the lowest non-negative time.

    Args:
        candidates: Intersections in any order.

    Returns:
        The visible intersection, or None if every time is negative or there
        are no intersections at all.
    """
    visible = [intersection for intersection in candidates if intersection.time >= 0]
    return min(visible, key=lambda intersection: intersection.time, default=None)
