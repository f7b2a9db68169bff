"""Whitted-style ray tracer with Phong shading.

This package renders scenes of transformed unit spheres lit by a single point
light. Rays are cast from a virtual camera through every pixel of the view
plane, the nearest intersection is found, and the surface is shaded with the
Phong local illumination model including hard shadows.

Subpackages:
    core: Points, vectors, colors, matrices, transforms and rays
    geometry: Shape interface, spheres, transformed shapes and intersections
    materials: Surface reflectance parameters and the lighting function
    scene: Point lights and the world (shape list + light)
    camera: Resolution and camera models with per-pixel ray generation
    preview: Taichi-backed canvas and image export (PNG/PPM)
"""

__version__ = "0.1.0"
