"""Entry point for the Fractal Sketch application.

Drag out rectangles on the canvas; each one is decorated with a nested
triangle pattern and a fading trail follows the pointer.
"""

import argparse
import logging
import random
import sys

from PyQt6.QtWidgets import QApplication

from app_window import AppWindow
from sketch.compositor import SketchSettings
from sketch.interaction import InteractionStateMachine
from sketch.session import DrawingSession


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Interactive rectangle sketcher with fractal decoration.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Frame clock rate (default: 60)",
    )
    parser.add_argument(
        "--trail-fade",
        type=float,
        default=0.7,
        help="Alpha removed per step back along the trail, 0..1 (default: 0.7)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for rectangle colors (default: unseeded)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    settings = SketchSettings(fps=args.fps, trail_fade=args.trail_fade)
    session = DrawingSession(
        interaction=InteractionStateMachine(rng=random.Random(args.seed)),
    )

    app = QApplication(sys.argv[:1])
    window = AppWindow(session, settings)
    window.show()
    logging.getLogger(__name__).info("Sketch window opened at %d fps", settings.fps)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
