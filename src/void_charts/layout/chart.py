"""Assemble full chart descriptions from category statistics."""

import math
from dataclasses import dataclass, field

from ..config import OrbitalConfig, SaturationConfig
from ..stats import CategoryStat
from .geometry import Point
from .labels import LabelGeometry, place_node_label, place_wedge_label, spread_labels
from .legend import LegendEntry, build_legend
from .orbital import OrbitalNodeGeometry, layout_orbital_nodes
from .wedge import WedgeGeometry, layout_wedges

SATURATION = "saturation"
ORBITAL = "orbital"
CHART_KINDS = (SATURATION, ORBITAL)


@dataclass
class Chart:
    """Everything a renderer needs to draw one radial chart."""

    kind: str
    width: float
    height: float
    center: Point
    categories: dict[str, CategoryStat] = field(default_factory=dict)
    shapes: list[WedgeGeometry] | list[OrbitalNodeGeometry] = field(default_factory=list)
    labels: list[LabelGeometry] = field(default_factory=list)
    legend: list[LegendEntry] = field(default_factory=list)
    total_tvl: float | None = None  # Center readout, orbital chart only

    @property
    def ids(self) -> list[str]:
        """Category ids in drawing order."""
        return [shape.category_id for shape in self.shapes]

    @property
    def is_empty(self) -> bool:
        return not self.shapes

    def shape_for(self, category_id: str):
        for shape in self.shapes:
            if shape.category_id == category_id:
                return shape
        return None

    def to_dict(self) -> dict:
        """JSON-ready representation of the chart."""
        shapes = []
        for shape in self.shapes:
            record = {
                "id": shape.category_id,
                "index": shape.index,
                "color": shape.color.hex(),
                "transition": {
                    "duration_ms": shape.transition.duration_ms,
                    "easing": shape.transition.easing,
                    "delay_ms": shape.transition.delay_ms,
                },
            }
            if isinstance(shape, WedgeGeometry):
                record.update(
                    start_angle=shape.start_angle,
                    end_angle=shape.end_angle,
                    inner_radius=shape.inner_radius,
                    radius=shape.radius,
                )
            else:
                record.update(
                    angle=shape.angle,
                    orbit_radius=shape.orbit_radius,
                    node_size=shape.node_size,
                    x=shape.position[0],
                    y=shape.position[1],
                )
            record["is_priority"] = self.categories[shape.category_id].is_priority
            shapes.append(record)

        return {
            "kind": self.kind,
            "width": self.width,
            "height": self.height,
            "center": list(self.center),
            "shapes": shapes,
            "labels": [
                {
                    "id": label.category_id,
                    "text": label.text,
                    "anchor": list(label.anchor),
                    "text_anchor": label.text_anchor.value,
                    "leader_line": [list(p) for p in label.leader_line],
                }
                for label in self.labels
            ],
            "legend": [
                {"type": entry.type.value, "label": entry.label, "color": entry.color}
                for entry in self.legend
            ],
            "total_tvl": self.total_tvl,
        }


def _index_categories(categories: list[CategoryStat]) -> dict[str, CategoryStat]:
    # Later duplicates would be unreachable by id, keep the first
    indexed: dict[str, CategoryStat] = {}
    for category in categories:
        indexed.setdefault(category.id, category)
    return indexed


def build_saturation_chart(
    categories: list[CategoryStat],
    config: SaturationConfig | None = None,
) -> Chart:
    """Lay out the polar saturation chart.

    Args:
        categories: Category statistics.
        config: Chart configuration; defaults to the 800x500 canvas.

    Returns:
        Chart with wedges, labels and legend.
    """
    config = config or SaturationConfig()
    by_id = _index_categories(categories)
    wedges = layout_wedges(list(by_id.values()), config)
    labels = [place_wedge_label(w, config, by_id[w.category_id].name) for w in wedges]
    labels = spread_labels(labels, config.label_min_spacing, config.label_char_width)

    return Chart(
        kind=SATURATION,
        width=config.width,
        height=config.height,
        center=config.center,
        categories=by_id,
        shapes=wedges,
        labels=labels,
        legend=build_legend(SATURATION),
    )


def build_orbital_chart(
    categories: list[CategoryStat],
    config: OrbitalConfig | None = None,
) -> Chart:
    """Lay out the golden-angle orbital chart.

    Args:
        categories: Category statistics.
        config: Chart configuration; defaults to the 800x520 canvas.

    Returns:
        Chart with nodes, labels, legend and the total TVL.
    """
    config = config or OrbitalConfig()
    by_id = _index_categories(categories)
    nodes = layout_orbital_nodes(list(by_id.values()), config)
    labels = [place_node_label(n, config, by_id[n.category_id].name) for n in nodes]
    labels = spread_labels(labels, config.label_min_spacing, config.label_char_width)
    total_tvl = sum(c.metric_a for c in by_id.values() if math.isfinite(c.metric_a))

    return Chart(
        kind=ORBITAL,
        width=config.width,
        height=config.height,
        center=config.center,
        categories=by_id,
        shapes=nodes,
        labels=labels,
        legend=build_legend(ORBITAL),
        total_tvl=total_tvl,
    )


def build_chart(kind: str, categories: list[CategoryStat], settings) -> Chart:
    """Dispatch to the builder for ``kind`` using a ChartSettings bundle."""
    if kind == SATURATION:
        return build_saturation_chart(categories, settings.saturation)
    if kind == ORBITAL:
        return build_orbital_chart(categories, settings.orbital)
    raise ValueError(f"Unknown chart kind: {kind}")
