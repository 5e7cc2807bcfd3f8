"""Golden-angle orbital layout for the TVL chart."""

import math
from dataclasses import dataclass

from ..config import OrbitalConfig
from ..stats import CategoryStat
from .color import HslColor, score_color
from .geometry import AngleFrame, Point, TransitionHint, polar_point, transition_for

# pi * (3 - sqrt(5)), about 137.5 degrees
GOLDEN_ANGLE = math.pi * (3 - math.sqrt(5))


@dataclass(frozen=True)
class OrbitalNodeGeometry:
    """One node placed on the golden-angle spiral."""

    category_id: str
    index: int
    angle: float
    orbit_radius: float
    node_size: float
    position: Point
    color: HslColor
    transition: TransitionHint


def _normalizer(values: list[float]) -> float:
    """Largest finite value, floored at 1 so all-zero input stays finite."""
    return max(max((v for v in values if math.isfinite(v)), default=0.0), 1.0)


def _fraction(value: float, denominator: float) -> float:
    """Share of ``denominator`` clamped to [0, 1]; NaN counts as 0."""
    fraction = value / denominator
    if math.isnan(fraction):
        return 0.0
    return min(max(fraction, 0.0), 1.0)


def node_angle(index: int, config: OrbitalConfig) -> float:
    """Spiral angle for the index-th node.

    The angle is left unbounded unless ``wrap_angles`` is set.
    """
    angle = index * GOLDEN_ANGLE - config.angle_offset
    if config.wrap_angles:
        angle = math.fmod(angle, 2 * math.pi)
        if angle < 0:
            angle += 2 * math.pi
    return angle


def layout_orbital_nodes(
    categories: list[CategoryStat],
    config: OrbitalConfig,
) -> list[OrbitalNodeGeometry]:
    """Place one node per category on a golden-angle spiral.

    Larger ``metric_a`` pulls a node toward the center; larger ``metric_b``
    makes it bigger. Both metrics are normalized to their maximum over the
    set of finite values, with the denominator floored at 1. A NaN metric
    counts as 0; an infinite one saturates at the bound.

    Args:
        categories: Category statistics; input order sets the spiral index.
        config: Orbital chart configuration.

    Returns:
        Node geometry in input order; empty for empty input.
    """
    if not categories:
        return []

    max_a = _normalizer([c.metric_a for c in categories])
    max_b = _normalizer([c.metric_b for c in categories])
    orbit_span = config.max_orbit - config.min_orbit
    size_span = config.max_size - config.min_size

    nodes: list[OrbitalNodeGeometry] = []
    for i, category in enumerate(categories):
        frac_a = _fraction(category.metric_a, max_a)
        frac_b = _fraction(category.metric_b, max_b)

        angle = node_angle(i, config)
        orbit_radius = config.max_orbit - frac_a * orbit_span
        nodes.append(
            OrbitalNodeGeometry(
                category_id=category.id,
                index=i,
                angle=angle,
                orbit_radius=orbit_radius,
                node_size=config.min_size + frac_b * size_span,
                position=polar_point(config.center, orbit_radius, angle, AngleFrame.SCREEN),
                color=score_color(category.score),
                transition=transition_for(i, config),
            )
        )

    return nodes
