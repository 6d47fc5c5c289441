"""Sketch canvas: QWidget that feeds pointer events to the session and paints frames.

The QTimer frame clock advances the session once per tick and requests a
repaint; paintEvent only renders, so extra repaints (resize, expose) do
not move the trail. Positions outside the widget count as leaving it.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QWidget

from geometry import Point
from sketch.compositor import FrameCompositor, SketchSettings
from sketch.interaction import route_move, route_release
from sketch.session import DrawingSession
from sketch.surface import QPainterSurface, SurfaceUnavailableError

logger = logging.getLogger(__name__)


def paint_frame(compositor: FrameCompositor, painter, width, height) -> bool:
    """Render the session through painter and end it.

    Returns False when the painter is not usable; the painter is ended
    even if rendering raises.
    """
    try:
        surface = QPainterSurface(painter, width, height)
    except SurfaceUnavailableError:
        return False
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        compositor.render(surface)
    finally:
        painter.end()
    return True


class SketchCanvas(QWidget):
    """Custom widget hosting one drawing session."""

    rectangle_committed = pyqtSignal(int)  # total committed count

    def __init__(self, session: DrawingSession | None = None,
                 settings: SketchSettings | None = None, parent=None):
        super().__init__(parent)
        self.session = session or DrawingSession()
        self.compositor = FrameCompositor(self.session, settings)
        self.surface_failed = False
        self.setMouseTracking(True)
        self.setMinimumSize(400, 400)

        self.timer = QTimer(self)
        self.timer.setInterval(int(1000 / self.compositor.settings.fps))
        self.timer.timeout.connect(self._on_timer)

    @property
    def settings(self) -> SketchSettings:
        return self.compositor.settings

    def set_settings(self, settings: SketchSettings) -> None:
        self.compositor.settings = settings
        self.timer.setInterval(int(1000 / settings.fps))

    def start(self):
        if not self.surface_failed:
            self.timer.start()

    def stop(self):
        self.timer.stop()

    def _on_timer(self):
        self.compositor.advance()
        self.update()

    @staticmethod
    def _event_point(event) -> Point:
        pos = event.position()
        return Point(pos.x(), pos.y())

    def _inside(self, event) -> bool:
        return self.rect().contains(event.position().toPoint())

    # -- Pointer events --

    def mousePressEvent(self, event):
        self.session.interaction.pointer_down(self._event_point(event))

    def mouseMoveEvent(self, event):
        route_move(self.session.interaction, self._event_point(event), self._inside(event))

    def mouseReleaseEvent(self, event):
        committed = route_release(
            self.session.interaction, self._event_point(event), self._inside(event),
        )
        if committed is not None:
            self.rectangle_committed.emit(len(self.session.rectangles))

    def leaveEvent(self, event):
        self.session.interaction.pointer_leave()
        super().leaveEvent(event)

    # -- Rendering --

    def paintEvent(self, event):
        if self.surface_failed:
            return
        if not paint_frame(self.compositor, QPainter(self), self.width(), self.height()):
            logger.error("Canvas has no usable drawing context; rendering stopped")
            self.surface_failed = True
            self.timer.stop()
