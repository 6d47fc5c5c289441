"""Tests for sketch/compositor.py and sketch/surface.py.

Frames are rendered into a recording surface, so no QApplication is
needed. Widget behaviour (SketchCanvas, AppWindow) is verified manually.
"""

import pytest

from colors import Color
from geometry import Point, Rectangle
from sketch.compositor import FrameCompositor, SketchSettings
from sketch.interaction import InteractionStateMachine
from sketch.pattern import fractal_pattern, triangle_count, pattern_depth
from sketch.canvas import paint_frame
from sketch.session import DrawingSession
from sketch.surface import QPainterSurface, SurfaceUnavailableError


RED = Color.from_rgb(255, 0, 0)


class RecordingSurface:
    """Surface fake that logs each drawing call with the styles in effect."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.fill_style = Color.from_name("black")
        self.stroke_style = Color.from_name("black")
        self.line_width = 1.0
        self.calls = []

    def _log(self, name, *args):
        self.calls.append((name, args, self.fill_style, self.stroke_style, self.line_width))

    def fill_rect(self, x, y, w, h):
        self._log("fill_rect", x, y, w, h)

    def stroke_rect(self, x, y, w, h):
        self._log("stroke_rect", x, y, w, h)

    def begin_path(self):
        self._log("begin_path")

    def move_to(self, x, y):
        self._log("move_to", x, y)

    def line_to(self, x, y):
        self._log("line_to", x, y)

    def close_path(self):
        self._log("close_path")

    def stroke(self):
        self._log("stroke")

    def fill(self):
        self._log("fill")

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


def _session():
    return DrawingSession(interaction=InteractionStateMachine(color_factory=lambda: RED))


def _commit(session, p1, p2):
    session.interaction.pointer_down(p1)
    session.interaction.pointer_up(p2)


class TestFrameOrder:

    def test_first_call_clears_background(self):
        surface = RecordingSurface(320, 240)
        FrameCompositor(_session()).step(surface)
        name, args, fill, _, _ = surface.calls[0]
        assert name == "fill_rect"
        assert args == (0, 0, 320, 240)
        assert fill == Color.from_name("lightgrey")

    def test_empty_session_only_clears(self):
        surface = RecordingSurface()
        FrameCompositor(_session()).step(surface)
        assert len(surface.calls) == 1

    def test_rectangles_then_trail_then_rubber_band(self):
        session = _session()
        _commit(session, Point(10, 10), Point(50, 70))
        session.interaction.pointer_down(Point(100, 100))
        session.interaction.pointer_move(Point(140, 130))
        surface = RecordingSurface()
        FrameCompositor(session).step(surface)

        names = [c[0] for c in surface.calls]
        first_outline = names.index("stroke_rect")
        last_fill = len(names) - 1 - names[::-1].index("fill")
        trail_square = names.index("fill_rect", 1)
        assert first_outline < last_fill < trail_square
        assert surface.calls[-1][0] == "stroke_rect"
        assert surface.calls[-1][1] == (100, 100, 40, 30)

    def test_frame_counter(self):
        session = _session()
        compositor = FrameCompositor(session)
        for _ in range(3):
            compositor.step(RecordingSurface())
        assert session.frame_count == 3


class TestTrailUpdate:
    """One add or one drop per frame."""

    def test_growth_and_decay(self):
        session = _session()
        compositor = FrameCompositor(session)
        points = [Point(i, i) for i in range(6)]
        for p in points:
            session.interaction.pointer_move(p)
            compositor.step(RecordingSurface())
        assert list(session.trail) == points

        session.interaction.pointer_leave()
        compositor.step(RecordingSurface())
        assert list(session.trail) == points[1:]

    def test_decay_floor(self):
        session = _session()
        compositor = FrameCompositor(session)
        session.interaction.pointer_move(Point(1, 1))
        compositor.step(RecordingSurface())
        session.interaction.pointer_leave()
        for _ in range(5):
            compositor.step(RecordingSurface())
        assert len(session.trail) == 0

    def test_stationary_pointer_keeps_growing(self):
        session = _session()
        compositor = FrameCompositor(session)
        session.interaction.pointer_move(Point(5, 5))
        for _ in range(50):
            compositor.step(RecordingSurface())
        assert len(session.trail) == 50


class TestTrailRender:

    def test_newest_opaque_older_faded(self):
        session = _session()
        compositor = FrameCompositor(session)
        for p in (Point(1, 1), Point(2, 2), Point(3, 3)):
            session.interaction.pointer_move(p)
            surface = RecordingSurface()
            compositor.step(surface)

        squares = surface.named("fill_rect")[1:]
        assert [c[1][:2] for c in squares] == [(3, 3), (2, 2), (1, 1)]
        assert all(c[1][2:] == (5.0, 5.0) for c in squares)
        alphas = [c[2].alpha for c in squares]
        assert alphas == pytest.approx([1.0, 0.3, 0.09])

    def test_trail_color_is_darkened_blue(self):
        session = _session()
        session.interaction.pointer_move(Point(0, 0))
        surface = RecordingSurface()
        FrameCompositor(session).step(surface)
        assert surface.calls[-1][2] == Color.from_name("blue").darken(0.25)

    def test_custom_settings(self):
        session = _session()
        session.interaction.pointer_move(Point(0, 0))
        surface = RecordingSurface()
        FrameCompositor(session, SketchSettings(trail_point_size=9)).step(surface)
        assert surface.calls[-1][1] == (0, 0, 9, 9)


class TestRectangleRender:

    def test_outline_in_rectangle_color_at_width_five(self):
        session = _session()
        _commit(session, Point(10, 10), Point(50, 70))
        surface = RecordingSurface()
        FrameCompositor(session).step(surface)
        name, args, _, stroke, width = surface.named("stroke_rect")[0]
        assert args == (10, 10, 40, 60)
        assert stroke == RED
        assert width == 5.0

    def test_diagonals(self):
        session = _session()
        _commit(session, Point(10, 10), Point(50, 70))
        surface = RecordingSurface()
        FrameCompositor(session).step(surface)
        moves = [c[1] for c in surface.named("move_to")[:2]]
        lines = [c[1] for c in surface.named("line_to")[:2]]
        assert moves == [(10, 10), (50, 10)]
        assert lines == [(50, 70), (10, 70)]

    def test_one_face_per_pattern_command(self):
        session = _session()
        _commit(session, Point(0, 0), Point(300, 300))
        rect = session.rectangles[0]
        surface = RecordingSurface()
        FrameCompositor(session).step(surface)
        fills = surface.named("fill")
        assert len(fills) == triangle_count(pattern_depth(rect))
        assert [c[2] for c in fills] == [cmd.color for cmd in fractal_pattern(rect)]

    def test_rectangles_unchanged_across_frames(self):
        session = _session()
        _commit(session, Point(10, 10), Point(50, 70))
        before = session.rectangles[0]
        compositor = FrameCompositor(session)
        for _ in range(3):
            compositor.step(RecordingSurface())
        assert session.rectangles[0] is before
        assert before == Rectangle(Point(10, 10), Point(50, 70), RED)


class TestRubberBand:

    def test_grey_outline_and_style_restored(self):
        session = _session()
        session.interaction.pointer_down(Point(10, 10))
        session.interaction.pointer_move(Point(50, 60))
        surface = RecordingSurface()
        surface.stroke_style = RED
        FrameCompositor(session).step(surface)
        name, args, _, stroke, _ = surface.calls[-1]
        assert name == "stroke_rect"
        assert args == (10, 10, 40, 50)
        assert stroke == Color.from_name("grey")
        assert surface.stroke_style == RED

    def test_no_rubber_band_when_idle(self):
        session = _session()
        session.interaction.pointer_move(Point(50, 60))
        surface = RecordingSurface()
        FrameCompositor(session).step(surface)
        assert surface.named("stroke_rect") == []

    def test_drag_without_pointer_is_cleared(self):
        session = _session()
        session.interaction.pointer_down(Point(10, 10))
        session.interaction.pointer = None
        FrameCompositor(session).step(RecordingSurface())
        assert not session.interaction.dragging


class TestSettings:

    def test_rejects_bad_fade(self):
        with pytest.raises(ValueError):
            SketchSettings(trail_fade=1.5)

    def test_rejects_bad_fps(self):
        with pytest.raises(ValueError):
            SketchSettings(fps=0)


class TestQPainterSurface:

    def test_missing_painter_is_fatal(self):
        with pytest.raises(SurfaceUnavailableError):
            QPainterSurface(None, 100, 100)


class TestAdvanceRender:
    """State changes happen in advance(); render() only paints."""

    def test_render_does_not_touch_trail(self):
        session = _session()
        compositor = FrameCompositor(session)
        session.interaction.pointer_move(Point(4, 4))
        compositor.advance()
        compositor.render(RecordingSurface())
        compositor.render(RecordingSurface())
        assert len(session.trail) == 1
        assert session.frame_count == 1

    def test_render_does_not_decay_trail(self):
        session = _session()
        compositor = FrameCompositor(session)
        session.interaction.pointer_move(Point(4, 4))
        compositor.advance()
        compositor.advance()
        session.interaction.pointer_leave()
        for _ in range(3):
            compositor.render(RecordingSurface())
        assert len(session.trail) == 2

    def test_advance_draws_nothing(self):
        session = _session()
        session.interaction.pointer_move(Point(4, 4))
        surface = RecordingSurface()
        FrameCompositor(session).advance()
        assert surface.calls == []


class _FakePainter:
    """Stand-in for an active QPainter that records end()."""

    def __init__(self, active=True):
        self.active = active
        self.ended = False

    def isActive(self):
        return self.active

    def setRenderHint(self, hint):
        pass

    def end(self):
        self.ended = True


class _FailingCompositor:
    def render(self, surface):
        raise RuntimeError("render failed")


class TestPaintFrame:

    def test_painter_ended_when_render_raises(self):
        painter = _FakePainter()
        with pytest.raises(RuntimeError):
            paint_frame(_FailingCompositor(), painter, 100, 100)
        assert painter.ended

    def test_inactive_painter_reports_failure(self):
        painter = _FakePainter(active=False)
        assert paint_frame(_FailingCompositor(), painter, 100, 100) is False
        assert not painter.ended
