"""The classic "first world" scene: three spheres in a room.

The floor and the two back walls are unit spheres squashed flat. The walls
reuse the floor geometry wrapped in a TransformedShape that stands it up and
turns it to face the camera. Three spheres of different sizes sit on the
floor, lit from above and to the left.

Example:
    >>> from raytracer.scene.first_world import create_first_world_scene
    >>> world, camera = create_first_world_scene(100, 50)
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import math

from raytracer.camera.camera import Camera, Resolution
from raytracer.core.color import WHITE, Color
from raytracer.core.transformations import (
    rotation_x,
    rotation_y,
    scaling,
    translation,
    view_transform,
)
from raytracer.core.tuples import Point, Vector
from raytracer.geometry.shape import Shape, TransformedShape
from raytracer.geometry.sphere import Sphere
from raytracer.materials.material import default_material
from raytracer.scene.light import PointLight
from raytracer.scene.world import World

# Camera placement
CAMERA_FROM = Point(0.0, 1.5, -5.0)
CAMERA_TO = Point(0.0, 1.0, 0.0)
CAMERA_UP = Vector(0.0, 1.0, 0.0)
FIELD_OF_VIEW = math.pi / 3


def create_first_world_objects() -> list[Shape]:
    """Return the six shapes of the scene: floor, two walls and three spheres."""
    wall_material = default_material().with_color(Color(1.0, 0.9, 0.9)).with_specular(0.0)
    floor = Sphere(transform=scaling(10.0, 0.01, 10.0), material=wall_material)

    def wall(angle: float) -> Shape:
        stand_up = rotation_x(math.pi / 2).then(rotation_y(angle)).then(translation(0, 0, 5))
        return TransformedShape(floor, stand_up)

    middle = Sphere(
        transform=translation(-0.5, 1.0, 0.5),
        material=default_material()
        .with_color(Color(0.1, 1.0, 0.5))
        .with_diffuse(0.7)
        .with_specular(0.3),
    )
    right = Sphere(
        transform=scaling(0.5, 0.5, 0.5).then(translation(1.5, 0.5, -0.5)),
        material=default_material()
        .with_color(Color(0.5, 1.0, 0.1))
        .with_diffuse(0.7)
        .with_specular(0.3),
    )
    left = Sphere(
        transform=scaling(0.33, 0.33, 0.33).then(translation(-1.5, 0.33, -0.75)),
        material=default_material()
        .with_color(Color(1.0, 0.8, 0.1))
        .with_diffuse(0.7)
        .with_specular(0.3),
    )
    return [floor, wall(-math.pi / 4), wall(math.pi / 4), middle, right, left]


def create_first_world_scene(
    width: int = 400,
    height: int = 200,
    field_of_view: float = FIELD_OF_VIEW,
) -> tuple[World, Camera]:
    """Create the scene and a camera framing it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        field_of_view: Camera field of view in radians (default pi / 3).

    Returns:
        A tuple (world, camera).
    """
    light = PointLight(Point(-10.0, 10.0, -10.0), WHITE)
    world = World(create_first_world_objects(), light)
    camera = Camera(
        Resolution(width, height),
        field_of_view,
        view_transform(CAMERA_FROM, CAMERA_TO, CAMERA_UP),
    )
    return world, camera
