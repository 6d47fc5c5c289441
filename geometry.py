"""Plain 2D geometry for the sketch surface: points and dragged rectangles.

Coordinates are surface-relative pixels with y pointing down. Rectangles
keep their corners in drag order, so width and height are signed.
"""

from __future__ import annotations

from dataclasses import dataclass

from colors import Color


@dataclass(frozen=True)
class Point:
    """A surface-relative 2D coordinate."""

    x: float
    y: float


def midpoint(a: Point, b: Point) -> Point:
    """Return the point halfway between a and b."""
    return Point((b.x - a.x) / 2 + a.x, (b.y - a.y) / 2 + a.y)


@dataclass(frozen=True)
class Rectangle:
    """A committed rectangle: opposite corners in the order they were dragged.

    Attributes:
        p1: Corner where the drag started.
        p2: Corner where the drag ended.
        color: Base color of the fractal decoration.
    """

    p1: Point
    p2: Point
    color: Color

    @property
    def width(self) -> float:
        return self.p2.x - self.p1.x

    @property
    def height(self) -> float:
        return self.p2.y - self.p1.y

    @property
    def center(self) -> Point:
        return Point(self.p1.x + self.width / 2, self.p1.y + self.height / 2)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Four corners walking around the rectangle, starting at p1."""
        w, h = self.width, self.height
        p1 = self.p1
        return (
            p1,
            Point(p1.x + w, p1.y),
            Point(p1.x + w, p1.y + h),
            Point(p1.x, p1.y + h),
        )
