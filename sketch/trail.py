"""Trail buffer: oldest-to-newest history of pointer positions.

The buffer itself enforces no capacity. The frame compositor adds one
point per frame while the pointer is on the surface and drops one per
frame once it leaves, which is what bounds the trail.
"""

from collections import deque

from geometry import Point


class TrailBuffer:
    """Double-ended point sequence; index 0 is the oldest point."""

    def __init__(self, points=()):
        self._points = deque(points)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def add_point(self, point: Point) -> None:
        """Append point as the newest entry."""
        self._points.append(point)

    def drop_point(self) -> None:
        """Remove the oldest entry. Does nothing when the buffer is empty."""
        if self._points:
            self._points.popleft()

    def get_point(self, index: int) -> Point:
        """Point at index, oldest first. Raises IndexError when out of range."""
        if not 0 <= index < len(self._points):
            raise IndexError(
                f"trail index {index} out of range for length {len(self._points)}"
            )
        return self._points[index]

    def newest_first(self):
        """Iterate from the newest point back to the oldest."""
        return reversed(self._points)

    def clear(self) -> None:
        self._points.clear()
