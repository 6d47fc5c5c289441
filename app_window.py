"""App window: hosts the sketch view with a status bar.

The status bar shows the pointer position, committed rectangle count and
trail length, refreshed by a 10 Hz timer.
"""

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from sketch.view import SketchView

logger = logging.getLogger(__name__)


class AppWindow(QMainWindow):
    """Top-level window for one drawing session."""

    STATUS_INTERVAL_MS = 100  # 10 Hz

    def __init__(self, session=None, settings=None):
        super().__init__()
        self.setWindowTitle("Fractal Sketch")
        self.resize(1200, 750)

        self.sketch_view = SketchView(session, settings)
        self.setCentralWidget(self.sketch_view)

        # --- Status bar ---
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._pointer_label = QLabel()
        self._rect_label = QLabel()
        self._trail_label = QLabel()
        self._status_bar.addWidget(self._pointer_label)
        self._status_bar.addWidget(self._rect_label)
        self._status_bar.addWidget(self._trail_label)

        self.sketch_view.canvas.rectangle_committed.connect(self._on_committed)

        self._status_timer = QTimer()
        self._status_timer.setInterval(self.STATUS_INTERVAL_MS)
        self._status_timer.timeout.connect(self._update_status)
        self._status_timer.start()

        self.sketch_view.activate()
        self._update_status()

    def _update_status(self):
        session = self.sketch_view.session
        pointer = session.interaction.pointer
        if pointer is not None:
            self._pointer_label.setText(f"  x={pointer.x:.0f}  y={pointer.y:.0f}  ")
        else:
            self._pointer_label.setText("  (off canvas)  ")
        self._rect_label.setText(f"  Rectangles: {len(session.rectangles)}  ")
        self._trail_label.setText(f"  Trail: {len(session.trail)}  ")
        self.sketch_view.refresh_counts()

    def _on_committed(self, count: int) -> None:
        logger.info("Rectangle committed (%d total)", count)

    def closeEvent(self, event):
        self.sketch_view.deactivate()
        self._status_timer.stop()
        logger.info("Sketch window closed after %d frames", self.sketch_view.session.frame_count)
        super().closeEvent(event)
