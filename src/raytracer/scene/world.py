"""World: the shapes of a scene plus its single point light.

The world answers the per-ray questions of the render loop:

    intersects(ray)  -> every intersection with every shape, sorted by time
    color_at(ray)    -> the shaded color seen along the ray (black on a miss)
    shade_hit(comps) -> the Phong color of a precomputed hit, with shadows
    is_shadowed(pt)  -> whether some shape blocks the light from a point

A World is an immutable value; rendering it twice with the same camera gives
the same image.

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.tuples import Point, Vector
    >>> from raytracer.scene.world import default_world
    >>> world = default_world()
    >>> world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    Color(red=0.38066..., green=0.47583..., blue=0.2855...)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from raytracer.core.color import BLACK, Color
from raytracer.core.ray import Ray
from raytracer.core.transformations import scaling
from raytracer.core.tuples import Point
from raytracer.geometry.intersection import Intersection, PreComputedIntersection, hit
from raytracer.geometry.shape import Shape
from raytracer.geometry.sphere import Sphere
from raytracer.materials.lighting import lighting
from raytracer.materials.material import Material
from raytracer.scene.light import PointLight, black_light, default_light


@dataclass(frozen=True)
class World:
    """A collection of shapes lit by one point light.

    Attributes:
        objects: The shapes in the scene, in insertion order.
        light: The scene's light source.
    """

    objects: tuple[Shape, ...] = ()
    light: PointLight = field(default_factory=black_light)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        # Accept any iterable of shapes but always store an immutable tuple
        object.__setattr__(self, "objects", tuple(self.objects))

    @classmethod
    def empty(cls) -> World:
        return cls()

    def with_objects(self, objects: Iterable[Shape]) -> World:
        return replace(self, objects=tuple(objects))

    def with_light(self, light: PointLight) -> World:
        return replace(self, light=light)

    def intersects(self, ray: Ray) -> list[Intersection]:
        """Intersect the ray with every shape.

        Returns:
            All intersections sorted by ascending time. Intersections of one
            shape need not be adjacent; ties keep the order of self.objects.
        """
        found = (intersection for shape in self.objects for intersection in shape.intersect(ray))
        return sorted(found, key=lambda intersection: intersection.time)

    def color_at(self, ray: Ray) -> Color:
        """Return the color produced by firing the ray into the world."""
        visible = hit(self.intersects(ray))
        if visible is None:
            return BLACK
        return self.shade_hit(visible.pre_computations(ray))

    def shade_hit(self, comps: PreComputedIntersection) -> Color:
        """Return the color at a precomputed hit, accounting for shadows."""
        shadowed = self.is_shadowed(comps.over_point)
        return lighting(
            comps.thing.material,
            self.light,
            comps.point,
            comps.eye_vector,
            comps.normal_vector,
            shadowed,
        )

    def is_shadowed(self, point: Point) -> bool:
        """Return True if a shape lies strictly between the point and the light."""
        point_to_light = self.light.position - point
        distance = point_to_light.magnitude()
        shadow_ray = Ray(point, point_to_light.normalize())
        blocker = hit(self.intersects(shadow_ray))
        return blocker is not None and blocker.time < distance


def default_spheres() -> tuple[Sphere, Sphere]:
    """Return the two concentric spheres of the default world.

    The outer sphere is a unit sphere with a green-yellow material; the inner
    sphere has the default material and half the radius.
    """
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    return (outer, inner)


def default_world() -> World:
    """Return a fresh default world: two concentric spheres and the default light."""
    return World(default_spheres(), default_light())
