"""Tolerance-based float comparison shared by every value type."""

EPSILON = 1e-5


def almost(a: float, b: float) -> bool:
    """Return True if a and b differ by less than EPSILON."""
    return abs(a - b) < EPSILON


def almost_zero(a: float) -> bool:
    return almost(a, 0.0)
