"""Drawing surface: a canvas-2d style Protocol and its QPainter adapter.

The compositor only talks to the Surface Protocol, so frames can be
rendered into a recording fake in tests and into a QPainter on screen.
Styles are Color values; the surface keeps them as state between calls,
the way a 2D canvas context does.
"""

from __future__ import annotations

from typing import Protocol

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QBrush, QPainter, QPainterPath, QPen

from colors import Color


class SurfaceUnavailableError(RuntimeError):
    """No usable drawing context; the session cannot render."""


class Surface(Protocol):
    """Stateful 2D drawing context consumed by the frame compositor."""

    width: float
    height: float
    fill_style: Color
    stroke_style: Color
    line_width: float

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...


class QPainterSurface:
    """Surface backed by an active QPainter.

    Raises:
        SurfaceUnavailableError: if the painter is missing or not active.
    """

    def __init__(self, painter: QPainter | None, width: float, height: float):
        if painter is None or not painter.isActive():
            raise SurfaceUnavailableError("QPainter is not active on the canvas")
        self._painter = painter
        self.width = width
        self.height = height
        self.fill_style = Color.from_name("black")
        self.stroke_style = Color.from_name("black")
        self.line_width = 1.0
        self._path = QPainterPath()

    def _pen(self) -> QPen:
        pen = QPen(self.stroke_style.to_qcolor())
        pen.setWidthF(self.line_width)
        return pen

    def fill_rect(self, x, y, w, h):
        self._painter.fillRect(QRectF(x, y, w, h).normalized(), self.fill_style.to_qcolor())

    def stroke_rect(self, x, y, w, h):
        self._painter.setPen(self._pen())
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawRect(QRectF(x, y, w, h).normalized())

    def begin_path(self):
        self._path = QPainterPath()

    def move_to(self, x, y):
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x, y):
        self._path.lineTo(QPointF(x, y))

    def close_path(self):
        self._path.closeSubpath()

    def stroke(self):
        self._painter.strokePath(self._path, self._pen())

    def fill(self):
        self._painter.fillPath(self._path, QBrush(self.fill_style.to_qcolor()))
