"""Camera module for view and ray generation.

Components:
    camera: Resolution, the pinhole Camera and the render loop

Camera responsibilities:
    - Size the view plane from the field of view and aspect ratio
    - Map pixel (x, y) to a world-space ray through the pixel centre
    - Drive the per-pixel render loop into a Canvas

Rays are generated in camera space and carried into the world by the inverse
of the camera transform, usually built with view_transform().
"""

from .camera import FHD, LOW, Camera, ProgressCallback, Resolution

__all__ = [
    "Camera",
    "Resolution",
    "ProgressCallback",
    "LOW",
    "FHD",
]
