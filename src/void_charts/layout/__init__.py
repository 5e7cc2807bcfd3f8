"""Radial layout engine for the category saturation and orbital TVL charts.

Every layout function is pure; only InteractionState holds mutable state.
"""

from .chart import Chart, build_chart, build_orbital_chart, build_saturation_chart
from .color import HslColor, score_color, score_label
from .interaction import InteractionState, derive_emphasis, derive_tooltip
from .labels import (
    LabelGeometry,
    TextAnchor,
    place_label,
    place_node_label,
    place_wedge_label,
    spread_labels,
)
from .legend import LegendEntry, LegendType, build_legend
from .orbital import GOLDEN_ANGLE, OrbitalNodeGeometry, layout_orbital_nodes
from .render import render_html, render_svg
from .wedge import WedgeGeometry, layout_wedges

__all__ = [
    "HslColor",
    "score_color",
    "score_label",
    "WedgeGeometry",
    "layout_wedges",
    "GOLDEN_ANGLE",
    "OrbitalNodeGeometry",
    "layout_orbital_nodes",
    "TextAnchor",
    "LabelGeometry",
    "place_label",
    "place_wedge_label",
    "place_node_label",
    "spread_labels",
    "InteractionState",
    "derive_emphasis",
    "derive_tooltip",
    "LegendType",
    "LegendEntry",
    "build_legend",
    "Chart",
    "build_saturation_chart",
    "build_orbital_chart",
    "build_chart",
    "render_svg",
    "render_html",
]
