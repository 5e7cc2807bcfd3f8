"""Continuous gap-score color ramp in HSL space."""

import colorsys
import math
from typing import NamedTuple

SCORE_MIN = 0.0
SCORE_MAX = 100.0
SCORE_MID = 50.0

# (hue, saturation %, lightness %) at score 0, 50 and 100
_LOW = (0.0, 85.0, 55.0)  # red
_MID = (35.0, 100.0, 60.0)  # amber
_HIGH = (155.0, 90.0, 50.0)  # green

# Tier names shown next to a score, highest threshold first
_SCORE_TIERS = [
    (80, "Deep Void"),
    (60, "Open Void"),
    (40, "Moderate"),
    (20, "Shallow"),
]


class HslColor(NamedTuple):
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float  # noqa: E741

    def css(self) -> str:
        return f"hsl({self.h:.1f}, {self.s:.1f}%, {self.l:.1f}%)"

    def hex(self) -> str:
        r, g, b = colorsys.hls_to_rgb(self.h / 360, self.l / 100, self.s / 100)
        return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


def clamp_score(score: float) -> float:
    """Clamp a score into [0, 100]; NaN counts as the lowest score."""
    if math.isnan(score):
        return SCORE_MIN
    return min(max(score, SCORE_MIN), SCORE_MAX)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def score_color(score: float) -> HslColor:
    """Map a gap score to a color.

    Two linear segments meet at 50: red to amber below, amber to green
    above. Both segments produce the amber midpoint at exactly 50.

    Args:
        score: Gap score; values outside [0, 100] are clamped.

    Returns:
        The HSL color for the score.
    """
    score = clamp_score(score)
    if score <= SCORE_MID:
        start, end = _LOW, _MID
        t = score / SCORE_MID
    else:
        start, end = _MID, _HIGH
        t = (score - SCORE_MID) / (SCORE_MAX - SCORE_MID)

    return HslColor(*(_lerp(a, b, t) for a, b in zip(start, end)))


def score_label(score: float) -> str:
    """Return the tier name for a score."""
    score = clamp_score(score)
    for threshold, label in _SCORE_TIERS:
        if score >= threshold:
            return label
    return "Filled"


def gradient_stops(count: int = 5) -> list[tuple[float, HslColor]]:
    """Sample the ramp at evenly spaced scores for a legend swatch.

    Args:
        count: Number of stops, at least 2.

    Returns:
        List of (offset in [0, 1], color) pairs.
    """
    count = max(count, 2)
    return [
        (i / (count - 1), score_color(SCORE_MAX * i / (count - 1)))
        for i in range(count)
    ]
