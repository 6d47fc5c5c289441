"""Pointer interaction: turns down/move/up/leave into committed rectangles.

A press starts a drag, a release while dragging commits a Rectangle with
a fresh random color, and leaving the surface abandons any drag in
progress. Committed rectangles are only ever appended.
"""

from __future__ import annotations

import enum
import logging
import random

from colors import Color, random_color
from geometry import Point, Rectangle

logger = logging.getLogger(__name__)


class DragState(enum.Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class InteractionStateMachine:
    """Pointer state plus the append-only list of committed rectangles.

    Args:
        color_factory: Zero-argument callable returning the color for each
            newly committed rectangle. Defaults to random colors drawn
            from ``rng``.
        rng: Random source for the default color factory.
    """

    def __init__(self, color_factory=None, rng: random.Random | None = None):
        if color_factory is None:
            rng = rng or random.Random()
            color_factory = lambda: random_color(rng)
        self._color_factory = color_factory
        self.click_start: Point | None = None
        self.pointer: Point | None = None
        self._rectangles: list[Rectangle] = []

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self.click_start is not None else DragState.IDLE

    @property
    def dragging(self) -> bool:
        return self.click_start is not None

    @property
    def rectangles(self) -> tuple[Rectangle, ...]:
        """Committed rectangles in commit (z) order."""
        return tuple(self._rectangles)

    @property
    def pending(self) -> tuple[Point, Point] | None:
        """Rubber-band corners (click_start, pointer) while a drag is live."""
        if self.click_start is None or self.pointer is None:
            return None
        return self.click_start, self.pointer

    def pointer_down(self, point: Point) -> None:
        self.click_start = point
        self.pointer = point

    def pointer_move(self, point: Point) -> None:
        self.pointer = point

    def pointer_up(self, point: Point) -> Rectangle | None:
        """Finish a drag at point. Returns the committed rectangle, if any."""
        committed = None
        if self.click_start is not None:
            color: Color = self._color_factory()
            committed = Rectangle(self.click_start, point, color)
            self._rectangles.append(committed)
            self.click_start = None
            logger.debug(
                "Committed rectangle #%d from (%.0f, %.0f) to (%.0f, %.0f)",
                len(self._rectangles), committed.p1.x, committed.p1.y,
                committed.p2.x, committed.p2.y,
            )
        self.pointer = point
        return committed

    def pointer_leave(self) -> None:
        if self.click_start is not None:
            logger.debug("Pointer left the surface; drag abandoned")
        self.pointer = None
        self.click_start = None

    def cancel_drag(self) -> None:
        """Drop the drag start but keep tracking the pointer."""
        self.click_start = None


def route_move(machine: InteractionStateMachine, point: Point, inside: bool) -> None:
    """Forward a move from the pointer source; positions off the surface count as leaving."""
    if inside:
        machine.pointer_move(point)
    else:
        machine.pointer_leave()


def route_release(
    machine: InteractionStateMachine, point: Point, inside: bool,
) -> Rectangle | None:
    """Forward a release; one off the surface abandons the drag instead of committing."""
    if inside:
        return machine.pointer_up(point)
    machine.pointer_leave()
    return None
