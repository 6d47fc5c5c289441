"""Fractal pattern: recursive triangle subdivision of a committed rectangle.

The rectangle is split into four triangles around its center. Each
triangle emits one face spanning its edge midpoints and, while depth
remains, recurses into three children with a darker color. Generation is
lazy and pure; painting the commands is the compositor's job.

Depth grows by one for every DEPTH_STEP pixels of the rectangle's smaller
side, except that exact multiples of DEPTH_STEP lose one level:

    smaller side   depth
    -----------    -----
      0 .. 127     0 (0 itself gives -1)
         128       0
    129 .. 255     1
         256       1

A negative depth draws the four top-level faces with no recursion.
"""

from __future__ import annotations

import math
from typing import Iterator, NamedTuple

from colors import Color
from geometry import Point, Rectangle, midpoint


DEPTH_STEP = 128       # pixels of the smaller side per recursion level
DARKEN_AMOUNT = 0.25   # lightness removed per level


class TriangleCommand(NamedTuple):
    """One filled-and-stroked face.

    ``path`` visits the first midpoint twice before the other two, which
    paints a zero-length segment ahead of the face.
    """

    path: tuple[Point, Point, Point, Point]
    color: Color


def pattern_depth(rect: Rectangle) -> int:
    """Recursion depth for rect, derived from its smaller side."""
    smaller = min(abs(rect.width), abs(rect.height))
    depth = math.floor(smaller / DEPTH_STEP)
    if smaller % DEPTH_STEP == 0:
        depth -= 1
    return depth


def subdivide(
    center: Point, a: Point, b: Point, color: Color, depth: int,
) -> Iterator[TriangleCommand]:
    """Yield the face for triangle (center, a, b) and, if depth > 0, its children."""
    mid_a = midpoint(center, a)
    mid_b = midpoint(center, b)
    mid_c = midpoint(a, b)

    yield TriangleCommand((mid_a, mid_a, mid_b, mid_c), color)

    if depth > 0:
        yield from subdivide(center, mid_a, mid_b, color.darken(DARKEN_AMOUNT), depth - 1)
        yield from subdivide(mid_a, a, mid_c, color.darken(DARKEN_AMOUNT), depth - 1)
        yield from subdivide(mid_b, mid_c, b, color.darken(DARKEN_AMOUNT), depth - 1)


def fractal_pattern(rect: Rectangle) -> Iterator[TriangleCommand]:
    """Yield every face of rect's pattern, top-level triangles in corner order."""
    depth = pattern_depth(rect)
    center = rect.center
    corners = rect.corners()
    for i, corner in enumerate(corners):
        following = corners[(i + 1) % len(corners)]
        yield from subdivide(center, corner, following, rect.color, depth)


def triangle_count(depth: int) -> int:
    """Number of faces fractal_pattern emits at the given depth."""
    if depth < 0:
        return 4
    return 4 * (3 ** (depth + 1) - 1) // 2

