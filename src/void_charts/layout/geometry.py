"""Shared geometry primitives for the radial layouts."""

import math
from dataclasses import dataclass
from enum import Enum

Point = tuple[float, float]


class AngleFrame(Enum):
    """Where angle zero points and which way angles grow.

    Both frames use canvas coordinates (y grows downward).
    """

    SCREEN = "screen"  # zero at 3 o'clock, (cos, sin) offsets
    CLOCK = "clock"  # zero at 12 o'clock, clockwise


@dataclass(frozen=True)
class TransitionHint:
    """Declarative animation timing attached to a geometry record."""

    duration_ms: int
    easing: str
    delay_ms: int = 0


def transition_for(index: int, config) -> TransitionHint:
    """Staggered transition for the index-th shape of a chart."""
    return TransitionHint(
        duration_ms=config.transition_ms,
        easing=config.transition_easing,
        delay_ms=index * config.transition_stagger_ms,
    )


def direction(angle: float, frame: AngleFrame) -> Point:
    """Unit vector for an angle in the given frame."""
    if frame is AngleFrame.CLOCK:
        return math.sin(angle), -math.cos(angle)
    return math.cos(angle), math.sin(angle)


def polar_point(center: Point, radius: float, angle: float, frame: AngleFrame) -> Point:
    """Project a polar coordinate onto the canvas."""
    dx, dy = direction(angle, frame)
    return center[0] + radius * dx, center[1] + radius * dy
