"""Frame compositor: renders one frame of a drawing session onto a Surface.

Order within a frame is fixed: clear, trail update, committed rectangles
with their fractal patterns, trail, rubber band. The compositor never
schedules itself. The canvas frame clock calls advance() once per tick
and paintEvent calls render(); step() does both for a synchronous frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from colors import Color
from geometry import Rectangle
from sketch.pattern import fractal_pattern
from sketch.session import DrawingSession
from sketch.surface import Surface

logger = logging.getLogger(__name__)


def _default_trail_color() -> Color:
    return Color.from_name("blue").darken(0.25)


@dataclass(frozen=True)
class SketchSettings:
    """Rendering parameters for the sketch surface."""

    fps: int = 60
    trail_fade: float = 0.7         # alpha removed per step back along the trail
    trail_point_size: float = 5.0
    line_width: float = 5.0         # rectangle outlines and pattern faces
    background: Color = field(default_factory=lambda: Color.from_name("lightgrey"))
    trail_color: Color = field(default_factory=_default_trail_color)
    rubber_band_color: Color = field(default_factory=lambda: Color.from_name("grey"))

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if not 0.0 <= self.trail_fade <= 1.0:
            raise ValueError(f"trail_fade must be within [0, 1], got {self.trail_fade}")


class FrameCompositor:
    """Sequences the per-frame update and drawing for one DrawingSession."""

    def __init__(self, session: DrawingSession, settings: SketchSettings | None = None):
        self.session = session
        self.settings = settings or SketchSettings()

    def step(self, surface: Surface) -> None:
        """Advance the session by one frame and render it."""
        self.advance()
        self.render(surface)

    def advance(self) -> None:
        """Per-tick state update: one trail add or drop, stale drag cleanup."""
        interaction = self.session.interaction
        if interaction.pointer is not None:
            self.session.trail.add_point(interaction.pointer)
        else:
            self.session.trail.drop_point()
        if interaction.dragging and interaction.pending is None:
            logger.debug("Drag has no pointer position; cleared")
            interaction.cancel_drag()
        self.session.frame_count += 1

    def render(self, surface: Surface) -> None:
        """Paint the current session state. Does not modify the session."""
        self._clear(surface)
        for rect in self.session.rectangles:
            self._draw_rectangle(surface, rect)
        self._draw_trail(surface)
        self._draw_rubber_band(surface)

    def _clear(self, surface: Surface) -> None:
        surface.fill_style = self.settings.background
        surface.fill_rect(0, 0, surface.width, surface.height)

    def _draw_rectangle(self, surface: Surface, rect: Rectangle) -> None:
        previous_width = surface.line_width
        surface.line_width = self.settings.line_width
        surface.stroke_style = rect.color
        w, h = rect.width, rect.height
        surface.stroke_rect(rect.p1.x, rect.p1.y, w, h)

        # Diagonals: p1 -> p2 and the opposite pair of corners
        surface.begin_path()
        surface.move_to(rect.p1.x, rect.p1.y)
        surface.line_to(rect.p2.x, rect.p2.y)
        surface.move_to(rect.p1.x + w, rect.p1.y)
        surface.line_to(rect.p2.x - w, rect.p2.y)
        surface.stroke()
        surface.close_path()
        surface.line_width = previous_width

        self._draw_pattern(surface, rect)

    def _draw_pattern(self, surface: Surface, rect: Rectangle) -> None:
        for command in fractal_pattern(rect):
            surface.fill_style = command.color
            surface.stroke_style = command.color
            surface.line_width = self.settings.line_width
            surface.begin_path()
            first, *rest = command.path
            surface.move_to(first.x, first.y)
            for point in rest:
                surface.line_to(point.x, point.y)
            surface.stroke()
            surface.fill()
            surface.close_path()

    def _draw_trail(self, surface: Surface) -> None:
        size = self.settings.trail_point_size
        color = self.settings.trail_color
        for point in self.session.trail.newest_first():
            surface.fill_style = color
            surface.fill_rect(point.x, point.y, size, size)
            color = color.fade(self.settings.trail_fade)

    def _draw_rubber_band(self, surface: Surface) -> None:
        pending = self.session.interaction.pending
        if pending is None:
            return
        start, end = pending
        original = surface.stroke_style
        surface.stroke_style = self.settings.rubber_band_color
        surface.stroke_rect(start.x, start.y, end.x - start.x, end.y - start.y)
        surface.stroke_style = original
