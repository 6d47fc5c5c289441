"""Tests for geometry.py: midpoints and signed rectangle geometry."""

from colors import Color
from geometry import Point, Rectangle, midpoint


RED = Color.from_rgb(255, 0, 0)


class TestMidpoint:

    def test_midpoint(self):
        assert midpoint(Point(0, 0), Point(10, 20)) == Point(5, 10)

    def test_midpoint_is_symmetric(self):
        a, b = Point(-4, 7), Point(12, -3)
        assert midpoint(a, b) == midpoint(b, a)


class TestRectangle:
    """Rectangles keep drag order, so width/height are signed."""

    def test_forward_drag(self):
        rect = Rectangle(Point(10, 10), Point(50, 70), RED)
        assert rect.width == 40
        assert rect.height == 60
        assert rect.center == Point(30, 40)

    def test_backward_drag_has_negative_size(self):
        rect = Rectangle(Point(50, 70), Point(10, 10), RED)
        assert rect.width == -40
        assert rect.height == -60
        assert rect.center == Point(30, 40)

    def test_corners_walk_from_p1(self):
        rect = Rectangle(Point(0, 0), Point(200, 100), RED)
        assert rect.corners() == (
            Point(0, 0), Point(200, 0), Point(200, 100), Point(0, 100),
        )

    def test_corners_for_backward_drag(self):
        rect = Rectangle(Point(200, 100), Point(0, 0), RED)
        assert rect.corners() == (
            Point(200, 100), Point(0, 100), Point(0, 0), Point(200, 0),
        )
