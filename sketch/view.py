"""Sketch view: canvas + controls wiring.

A QWidget suitable for use as a main window's central widget.
"""

import dataclasses

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QSplitter, QWidget

from sketch.canvas import SketchCanvas
from sketch.compositor import SketchSettings
from sketch.controls import SketchControls
from sketch.session import DrawingSession


class SketchView(QWidget):
    """Complete sketch mode: canvas, controls and the settings bridge."""

    def __init__(self, session=None, settings=None, parent=None):
        super().__init__(parent)
        settings = settings or SketchSettings()

        self.canvas = SketchCanvas(session or DrawingSession(), settings)
        self.controls = SketchControls()
        self.controls.set_trail(settings.trail_fade, settings.trail_point_size)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.controls)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(splitter)

        self.controls.fade_slider.valueChanged.connect(self._on_trail_changed)
        self.controls.size_slider.valueChanged.connect(self._on_trail_changed)

    @property
    def session(self):
        return self.canvas.session

    def activate(self):
        self.canvas.start()

    def deactivate(self):
        self.canvas.stop()

    def refresh_counts(self):
        self.controls.show_counts(len(self.session.rectangles), len(self.session.trail))

    def _on_trail_changed(self, _value):
        self.canvas.set_settings(dataclasses.replace(
            self.canvas.settings,
            trail_fade=self.controls.get_trail_fade(),
            trail_point_size=self.controls.get_trail_point_size(),
        ))
