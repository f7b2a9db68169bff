"""Geometry module for shapes and intersections.

This module provides the shape interface and intersection bookkeeping:

Components:
    shape: Shape base class and the TransformedShape decorator
    sphere: Unit sphere primitive with ray-sphere intersection
    intersection: Intersection records, hit selection and precomputation

All shapes answer intersect(ray) and normal_at(point) in world space by
transforming into their own object space, so the intersection and shading
pipeline never needs to know which concrete shape it is working with.
"""

from .intersection import Intersection, PreComputedIntersection, hit, intersections
from .shape import Shape, TransformedShape, normal_matrix
from .sphere import Sphere

__all__ = [
    "Shape",
    "TransformedShape",
    "normal_matrix",
    "Sphere",
    "Intersection",
    "PreComputedIntersection",
    "hit",
    "intersections",
]
