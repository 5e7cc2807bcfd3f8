"""Legend descriptors for the radial charts."""

from dataclasses import dataclass
from enum import Enum

from .color import gradient_stops

PRIORITY_RING_COLOR = "#00D4FF"

# Interpretation hints per chart kind
_HINTS = {
    "saturation": ["Further from center = higher opportunity"],
    "orbital": ["Closer to center = more TVL, larger node = more projects"],
}


class LegendType(Enum):
    GRADIENT = "gradient"
    RING = "ring"
    TEXT = "text"


@dataclass(frozen=True)
class LegendEntry:
    type: LegendType
    label: str
    color: str | None = None


def gradient_css(stops: int = 5) -> str:
    """CSS linear-gradient covering scores 0 to 100."""
    parts = [f"{color.hex()} {offset * 100:.0f}%" for offset, color in gradient_stops(stops)]
    return f"linear-gradient(to right, {', '.join(parts)})"


def build_legend(kind: str) -> list[LegendEntry]:
    """Build the static legend for a chart kind.

    The legend does not depend on the data, so empty charts still get one.

    Args:
        kind: ``"saturation"`` or ``"orbital"``.

    Returns:
        Gradient swatch, priority ring marker, then text hints.
    """
    if kind not in _HINTS:
        raise ValueError(f"Unknown chart kind: {kind}")

    entries = [
        LegendEntry(LegendType.GRADIENT, "Gap score 0-100", gradient_css()),
        LegendEntry(LegendType.RING, "Priority category", PRIORITY_RING_COLOR),
    ]
    entries.extend(LegendEntry(LegendType.TEXT, hint) for hint in _HINTS[kind])
    return entries
