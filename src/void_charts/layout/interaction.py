"""Hover state machine and the emphasis/tooltip derived from it."""

from dataclasses import dataclass
from enum import Enum

from ..config import EmphasisStyle
from .chart import Chart
from .color import HslColor, clamp_score, score_label
from .geometry import Point


class HoverPhase(Enum):
    IDLE = "idle"
    HOVERING = "hovering"


@dataclass(frozen=True)
class Emphasis:
    """Visual weight for one shape."""

    fill_opacity: float
    stroke_width: float
    stroke_color: str


@dataclass(frozen=True)
class Tooltip:
    """Tooltip content for the hovered category."""

    category_id: str
    title: str
    lines: list[str]
    color: HslColor
    position: Point
    shape: object = None  # WedgeGeometry or OrbitalNodeGeometry


class InteractionState:
    """Tracks the single hovered category of one chart instance.

    Leaving a shape only clears the hover when that shape is the hovered
    one, so an enter on a neighbour that arrives before the previous
    leave does not flicker back to idle.
    """

    def __init__(self) -> None:
        self.hovered_id: str | None = None

    @property
    def phase(self) -> HoverPhase:
        return HoverPhase.IDLE if self.hovered_id is None else HoverPhase.HOVERING

    def pointer_enter(self, category_id: str) -> None:
        self.hovered_id = category_id

    def pointer_leave(self, category_id: str) -> None:
        if self.hovered_id == category_id:
            self.hovered_id = None

    def clear(self) -> None:
        self.hovered_id = None

    def is_hovered(self, category_id: str) -> bool:
        return self.hovered_id is not None and self.hovered_id == category_id


def emphasis_for(state: InteractionState, category_id: str, style: EmphasisStyle) -> Emphasis:
    """Emphasis of a single shape under the current hover state."""
    if state.is_hovered(category_id):
        return Emphasis(style.active_opacity, style.active_stroke_width, style.active_stroke_color)
    if state.phase is HoverPhase.HOVERING:
        return Emphasis(style.dimmed_opacity, style.stroke_width, style.stroke_color)
    return Emphasis(style.neutral_opacity, style.stroke_width, style.stroke_color)


def derive_emphasis(
    state: InteractionState,
    category_ids: list[str],
    style: EmphasisStyle | None = None,
) -> dict[str, Emphasis]:
    """Emphasis for every shape of a chart.

    Args:
        state: Current hover state.
        category_ids: Ids of all drawn shapes.
        style: Opacity/stroke values; defaults to EmphasisStyle().

    Returns:
        Mapping of category id to Emphasis.
    """
    style = style or EmphasisStyle()
    return {cid: emphasis_for(state, cid, style) for cid in category_ids}


def format_compact_currency(value: float) -> str:
    """Format a dollar amount as $1.2B / $3.4M / $5.6K / $78."""
    for divisor, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
        if abs(value) >= divisor:
            return f"${value / divisor:.1f}{suffix}"
    return f"${value:,.0f}"


def derive_tooltip(
    state: InteractionState,
    chart: Chart,
    style: EmphasisStyle | None = None,
) -> Tooltip | None:
    """Tooltip for the hovered category, or None when idle.

    The position is a fixed offset from the canvas corner rather than
    following the hovered shape.

    Args:
        state: Current hover state.
        chart: Chart whose categories and geometry are looked up.
        style: Supplies the tooltip offset.

    Returns:
        Tooltip, or None if nothing (or an unknown id) is hovered.
    """
    style = style or EmphasisStyle()
    if state.hovered_id is None:
        return None
    category = chart.categories.get(state.hovered_id)
    shape = chart.shape_for(state.hovered_id)
    if category is None or shape is None:
        return None

    score = clamp_score(category.score)
    lines = [
        f"Gap score: {score:g} ({score_label(score)})",
        f"TVL: {format_compact_currency(category.metric_a)}",
        f"Projects: {category.metric_b:g}",
    ]
    if category.is_priority:
        lines.append("Priority category")

    return Tooltip(
        category_id=category.id,
        title=category.name,
        lines=lines,
        color=shape.color,
        position=style.tooltip_offset,
        shape=shape,
    )
