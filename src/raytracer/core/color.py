"""Linear RGB colors.

Channels are unbounded floats: lighting may push them above 1 or (through
subtraction) below 0. Clamping only happens when a color is quantised for
output via to_255().
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.core.approximate import almost


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB intensity triple.

    Attributes:
        red: Red channel intensity.
        green: Green channel intensity.
        blue: Blue channel intensity.
    """

    red: float
    green: float
    blue: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            almost(self.red, other.red)
            and almost(self.green, other.green)
            and almost(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        """Scale by a number, or mix with another color (Hadamard product)."""
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return self * scalar

    def to_255(self) -> tuple[int, int, int]:
        """Return the channels scaled to [0, 255], rounded and clamped."""
        return (_to_255(self.red), _to_255(self.green), _to_255(self.blue))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)


def _to_255(value: float) -> int:
    # Round half up, matching the canvas quantisation kernel
    return min(255, max(0, math.floor(value * 255 + 0.5)))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
