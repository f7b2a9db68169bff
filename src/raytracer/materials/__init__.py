"""Materials module for surface appearance.

Components:
    material: Phong material parameters (color, ambient, diffuse, specular, shininess)
    lighting: The Phong local illumination function

Materials are immutable values. Use the with_* builders to derive variants
from default_material().
"""

from .lighting import lighting
from .material import Material, default_material

__all__ = [
    "Material",
    "default_material",
    "lighting",
]
