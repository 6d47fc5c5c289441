"""Drawing session: the single owner of all mutable sketch state."""

from dataclasses import dataclass, field

from sketch.interaction import InteractionStateMachine
from sketch.trail import TrailBuffer


@dataclass
class DrawingSession:
    """Trail, pointer/drag state and committed rectangles for one canvas."""

    interaction: InteractionStateMachine = field(default_factory=InteractionStateMachine)
    trail: TrailBuffer = field(default_factory=TrailBuffer)
    frame_count: int = 0

    @property
    def rectangles(self):
        return self.interaction.rectangles
