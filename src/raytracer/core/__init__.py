"""Core rendering module.

This module contains the fundamental value types for ray tracing:

Components:
    approximate: EPSILON and tolerance-based float comparison
    tuples: Point and Vector in homogeneous coordinates
    color: Linear RGB colors and named constants
    matrix: Immutable matrices with cofactor-based inverse
    transformations: Translation, scaling, rotation, shearing and view transforms
    ray: Ray data structure with position and transform

Every type here is an immutable value: operations return new instances and
equality is approximate (component-wise within EPSILON).
"""

from .approximate import EPSILON, almost, almost_zero
from .color import BLACK, BLUE, GREEN, RED, WHITE, Color
from .matrix import Matrix, NonInvertibleMatrixError
from .ray import Ray
from .transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import ORIGIN, Point, Vector

__all__ = [
    "EPSILON",
    "almost",
    "almost_zero",
    "Point",
    "Vector",
    "ORIGIN",
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "Matrix",
    "NonInvertibleMatrixError",
    "Ray",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
]
