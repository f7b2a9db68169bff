"""Scene module for lights and the world.

Components:
    light: PointLight and the default/black light factories
    world: World (shapes + light) with intersection, shading and shadows
    first_world: The three-spheres-in-a-room example scene and its camera

first_world builds a Camera and so pulls in the Taichi canvas; import it
directly from raytracer.scene.first_world. The rest of the package does not
need Taichi.

Factories such as default_world() build fresh values on every call; there is
no shared scene state.
"""

from .light import PointLight, black_light, default_light
from .world import World, default_spheres, default_world

__all__ = [
    "PointLight",
    "default_light",
    "black_light",
    "World",
    "default_spheres",
    "default_world",
]
