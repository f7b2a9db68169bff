"""Unit tests for rays."""

import pytest

from raytracer.core.ray import Ray
from raytracer.core.transformations import scaling, translation
from raytracer.core.tuples import Point, Vector


class TestRay:
    """Tests for ray construction, evaluation and transformation."""

    def test_create(self):
        """A ray keeps its origin and direction."""
        origin = Point(1, 2, 3)
        direction = Vector(4, 5, 6)
        ray = Ray(origin, direction)
        assert ray.origin == origin
        assert ray.direction == direction

    @pytest.mark.parametrize(
        "t, expected",
        [
            (0, Point(2, 3, 4)),
            (1, Point(3, 3, 4)),
            (-1, Point(1, 3, 4)),
            (2.5, Point(4.5, 3, 4)),
        ],
    )
    def test_position(self, t, expected):
        """position(t) = origin + direction * t."""
        assert Ray(Point(2, 3, 4), Vector(1, 0, 0)).position(t) == expected

    def test_translate(self):
        """Translation moves the origin but not the direction."""
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        moved = ray.transform(translation(3, 4, 5))
        assert moved.origin == Point(4, 6, 8)
        assert moved.direction == Vector(0, 1, 0)

    def test_scale(self):
        """Scaling changes both origin and direction, leaving the direction unnormalized."""
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        scaled = ray.transform(scaling(2, 3, 4))
        assert scaled.origin == Point(2, 6, 12)
        assert scaled.direction == Vector(0, 3, 0)

    def test_transform_returns_new_ray(self):
        """The original ray is left untouched."""
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        ray.transform(translation(3, 4, 5))
        assert ray.origin == Point(1, 2, 3)

    def test_equal_but_unhashable(self):
        """Rays compare by value but cannot be hashed."""
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        assert ray == Ray(Point(1, 2, 3), Vector(0, 1, 0))
        with pytest.raises(TypeError):
            hash(ray)
