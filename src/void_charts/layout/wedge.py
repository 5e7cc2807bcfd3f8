"""Polar wedge layout for the category saturation chart."""

import math
from dataclasses import dataclass

from ..config import SaturationConfig
from ..stats import CategoryStat
from .color import HslColor, SCORE_MAX, clamp_score, score_color
from .geometry import TransitionHint, transition_for

FULL_CIRCLE = 2 * math.pi


@dataclass(frozen=True)
class WedgeGeometry:
    """One annular sector; angles use the clock frame (zero = up)."""

    category_id: str
    index: int
    start_angle: float
    end_angle: float
    inner_radius: float
    radius: float
    color: HslColor
    transition: TransitionHint

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


def effective_gap(n: int, padding: float) -> float:
    """Gap actually left between wedges for ``n`` categories.

    The configured gap is capped at half a step so that every wedge keeps a
    positive span however many categories there are.
    """
    if n <= 0:
        return 0.0
    return min(padding, FULL_CIRCLE / n / 2)


def score_radius(score: float, config: SaturationConfig) -> float:
    """Interpolate the outer radius for a score between the radius bounds."""
    fraction = clamp_score(score) / SCORE_MAX
    return config.min_radius + fraction * (config.max_radius - config.min_radius)


def layout_wedges(
    categories: list[CategoryStat],
    config: SaturationConfig,
) -> list[WedgeGeometry]:
    """Partition the circle into one wedge per category.

    Wedges are ordered by descending score (ties keep input order) and each
    gets an equal angular step. Half the gap is taken from each side of a
    wedge, so spans plus ``n`` gaps add up to exactly 2*pi.

    Args:
        categories: Category statistics in data-layer order.
        config: Saturation chart configuration.

    Returns:
        Wedge geometry in drawing order; empty for empty input.
    """
    n = len(categories)
    if n == 0:
        return []

    # sorted() is stable, so equal scores keep their input order
    ranked = sorted(categories, key=lambda c: -clamp_score(c.score))

    step = FULL_CIRCLE / n
    half_gap = effective_gap(n, config.padding) / 2

    wedges: list[WedgeGeometry] = []
    for i, category in enumerate(ranked):
        wedges.append(
            WedgeGeometry(
                category_id=category.id,
                index=i,
                start_angle=i * step + half_gap,
                end_angle=(i + 1) * step - half_gap,
                inner_radius=config.inner_radius,
                radius=score_radius(category.score, config),
                color=score_color(category.score),
                transition=transition_for(i, config),
            )
        )

    return wedges
