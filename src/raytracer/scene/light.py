"""Point light sources."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.core.color import BLACK, WHITE, Color
from raytracer.core.tuples import ORIGIN, Point


@dataclass(frozen=True)
class PointLight:
    """A light with no size that radiates equally in every direction.

    Attributes:
        position: Where the light is in world space.
        intensity: Color and brightness of the light.
    """

    position: Point
    intensity: Color

    __hash__ = None  # type: ignore[assignment]


def default_light() -> PointLight:
    """Return a white light above, left of and in front of the origin."""
    return PointLight(Point(-10.0, 10.0, -10.0), WHITE)


def black_light() -> PointLight:
    """Return a light that contributes nothing; the light of an empty world."""
    return PointLight(ORIGIN, BLACK)
