"""Phong local illumination.

The color at a surface point is the sum of three contributions:

    ambient  = effective_color * material.ambient
    diffuse  = effective_color * material.diffuse * dot(light_dir, normal)
    specular = light.intensity * material.specular * dot(reflect_dir, eye)^shininess

where effective_color is the surface color mixed (Hadamard product) with the
light intensity. Points in shadow receive only the ambient term.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from raytracer.core.color import BLACK, Color
from raytracer.core.tuples import Point, Vector
from raytracer.materials.material import Material

if TYPE_CHECKING:
    from raytracer.scene.light import PointLight


def lighting(
    material: Material,
    light: PointLight,
    position: Point,
    eye_vector: Vector,
    normal: Vector,
    in_shadow: bool = False,
) -> Color:
    """Shade a surface point with the Phong reflection model.

    Args:
        material: The surface material.
        light: The single point light illuminating the scene.
        position: The point being shaded, in world space.
        eye_vector: Unit vector from the point toward the eye.
        normal: Unit surface normal at the point, facing the eye.
        in_shadow: If True, only the ambient contribution is returned.

    Returns:
        The (unclamped) color of the point.
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    light_direction = (light.position - position).normalize()
    light_dot_normal = light_direction.dot(normal)
    if light_dot_normal < 0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflect_vector = (-light_direction).reflect(normal)
    reflect_dot_eye = reflect_vector.dot(eye_vector)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
