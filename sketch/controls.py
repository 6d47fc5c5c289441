"""Sketch control panel: trail appearance sliders and session readouts."""

from PyQt6.QtWidgets import QGroupBox, QGridLayout, QLabel, QVBoxLayout, QWidget

from ui_common import add_slider_row, make_slider, slider_value


class SketchControls(QWidget):
    """Sliders for trail fade and point size, plus live session counts."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        trail_group = QGroupBox("Trail")
        grid = QGridLayout(trail_group)
        self.fade_slider = make_slider(0.0, 1.0, 0.7)
        self.size_slider = make_slider(1.0, 20.0, 5.0, resolution=1)
        add_slider_row(grid, 0, "Fade", self.fade_slider)
        add_slider_row(grid, 1, "Point size", self.size_slider, fmt="{:.0f}", unit=" px")
        layout.addWidget(trail_group)

        info_group = QGroupBox("Session")
        info = QVBoxLayout(info_group)
        self.rect_count_label = QLabel("Rectangles: 0")
        self.trail_length_label = QLabel("Trail: 0 points")
        info.addWidget(self.rect_count_label)
        info.addWidget(self.trail_length_label)
        layout.addWidget(info_group)

        layout.addStretch()

    def get_trail_fade(self):
        return slider_value(self.fade_slider)

    def get_trail_point_size(self):
        return slider_value(self.size_slider)

    def set_trail(self, fade, point_size):
        self.fade_slider.setValue(int(round(fade * self.fade_slider.resolution)))
        self.size_slider.setValue(int(round(point_size * self.size_slider.resolution)))

    def show_counts(self, rectangles, trail_points):
        self.rect_count_label.setText(f"Rectangles: {rectangles}")
        self.trail_length_label.setText(f"Trail: {trail_points} points")
