"""Immutable RGBA color value with derived darken/fade operations.

Conversions go through QColor so the HSL math matches what the Qt
surface paints. Channels are floats in [0, 255]; alpha is in [0, 1].
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from PyQt6.QtGui import QColor


# Named colors used by the sketch surface
NAMED_COLORS = {
    "black": (0, 0, 0),
    "blue": (0, 0, 255),
    "grey": (128, 128, 128),
    "lightgrey": (211, 211, 211),
}


def _check_amount(amount: float) -> None:
    if not 0.0 <= amount <= 1.0:
        raise ValueError(f"amount must be within [0, 1], got {amount}")


def _linear(channel: float) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


@dataclass(frozen=True)
class Color:
    """RGBA color. Every operation returns a new Color."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0.0 <= value <= 255.0:
                raise ValueError(f"channel {name}={value} outside [0, 255]")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha={self.alpha} outside [0, 1]")

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> Color:
        return cls(float(r), float(g), float(b), float(alpha))

    @classmethod
    def from_name(cls, name: str) -> Color:
        try:
            r, g, b = NAMED_COLORS[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown color name: {name!r}") from None
        return cls.from_rgb(r, g, b)

    @classmethod
    def from_qcolor(cls, qcolor: QColor) -> Color:
        return cls(
            qcolor.redF() * 255.0,
            qcolor.greenF() * 255.0,
            qcolor.blueF() * 255.0,
            qcolor.alphaF(),
        )

    def to_qcolor(self) -> QColor:
        return QColor.fromRgbF(
            self.r / 255.0, self.g / 255.0, self.b / 255.0, self.alpha,
        )

    def darken(self, amount: float) -> Color:
        """Reduce HSL lightness by ``lightness * amount``."""
        _check_amount(amount)
        h, s, l, a = self.to_qcolor().getHslF()
        return Color.from_qcolor(QColor.fromHslF(h, s, l - l * amount, a))

    def fade(self, amount: float) -> Color:
        """Reduce alpha by ``alpha * amount``."""
        _check_amount(amount)
        return Color(self.r, self.g, self.b, self.alpha - self.alpha * amount)

    def luminosity(self) -> float:
        """WCAG relative luminance in [0, 1]."""
        return (
            0.2126 * _linear(self.r)
            + 0.7152 * _linear(self.g)
            + 0.0722 * _linear(self.b)
        )


def random_color(rng: random.Random | None = None) -> Color:
    """Color with three independent uniform channels in [0, 255)."""
    rng = rng or random
    return Color(rng.random() * 255, rng.random() * 255, rng.random() * 255)
