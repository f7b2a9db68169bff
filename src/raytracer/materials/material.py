"""Surface reflectance parameters for the Phong model.

A Material combines a surface color with the three Phong reflectance
coefficients and a shininess exponent. Materials are immutable; the with_*
builders return modified copies:

    >>> from raytracer.core.color import Color
    >>> from raytracer.materials.material import default_material
    >>> green = default_material().with_color(Color(0.1, 1, 0.5)).with_diffuse(0.7)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from raytracer.core.color import WHITE, Color


@dataclass(frozen=True)
class Material:
    """Phong material description.

    Attributes:
        color: Surface color, mixed with the light intensity.
        ambient: Fraction of light reflected regardless of geometry, in [0, 1].
        diffuse: Fraction of light reflected diffusely (Lambertian), in [0, 1].
        specular: Strength of the mirror-like highlight, in [0, 1].
        shininess: Specular exponent; larger values give smaller highlights.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    __hash__ = None  # type: ignore[assignment]

    def with_color(self, color: Color) -> Material:
        return replace(self, color=color)

    def with_ambient(self, ambient: float) -> Material:
        return replace(self, ambient=ambient)

    def with_diffuse(self, diffuse: float) -> Material:
        return replace(self, diffuse=diffuse)

    def with_specular(self, specular: float) -> Material:
        return replace(self, specular=specular)

    def with_shininess(self, shininess: float) -> Material:
        return replace(self, shininess=shininess)


def default_material() -> Material:
    """Return the default material: white, ambient 0.1, diffuse 0.9, specular 0.9, shininess 200."""
    return Material()
