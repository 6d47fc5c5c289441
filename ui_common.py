"""Shared UI helpers for the sketch window.

Contains float-valued slider helpers and the labelled slider row used by
the sketch controls panel.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGridLayout, QLabel, QSlider


# ---------------------------------------------------------------------------
# Slider helpers
# ---------------------------------------------------------------------------

def make_slider(minimum, maximum, value, resolution=100):
    """Create an integer QSlider that maps to float values.

    The slider range is [minimum*resolution, maximum*resolution].
    """
    slider = QSlider(Qt.Orientation.Horizontal)
    slider.setMinimum(int(minimum * resolution))
    slider.setMaximum(int(maximum * resolution))
    slider.setValue(int(round(value * resolution)))
    slider.resolution = resolution
    return slider


def slider_value(slider):
    """Read the float value from a slider created by make_slider."""
    return slider.value() / slider.resolution


def add_slider_row(layout: QGridLayout, row, label_text, slider, fmt="{:.2f}", unit=""):
    """Place label | slider | live value readout on one grid row.

    Returns the value label so callers can restyle it.
    """
    label = QLabel(label_text)
    value_label = QLabel()
    value_label.setMinimumWidth(55)
    value_label.setAlignment(
        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
    )
    layout.addWidget(label, row, 0)
    layout.addWidget(slider, row, 1)
    layout.addWidget(value_label, row, 2)

    def _update(_val, vl=value_label, sl=slider, u=unit):
        vl.setText(fmt.format(slider_value(sl)) + u)

    slider.valueChanged.connect(_update)
    _update(slider.value())
    return value_label
