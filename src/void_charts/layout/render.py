"""SVG and pyvis rendering of laid-out charts."""

import json
import math
from html import escape
from pathlib import Path

from ..config import EmphasisStyle
from .chart import SATURATION, Chart
from .color import gradient_stops
from .geometry import AngleFrame, polar_point
from .interaction import (
    InteractionState,
    derive_emphasis,
    derive_tooltip,
    format_compact_currency,
)
from .legend import LegendType
from .wedge import WedgeGeometry

BACKGROUND = "#0a0a0a"
TEXT_COLOR = "#aaaaaa"
LEADER_COLOR = "#444444"
HALO_GAP = 5

# Synthetic hub node for the pyvis saturation view
CENTER_NODE = "__center__"


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _arc_path(center, inner: float, outer: float, start: float, end: float) -> str:
    """SVG path for an annular sector in the clock frame."""
    span = end - start
    if span >= 2 * math.pi - 1e-9:
        # A closed arc has coincident endpoints, so draw two rings instead
        cx, cy = center
        ring = (
            f"M {_fmt(cx - outer)} {_fmt(cy)} a {_fmt(outer)} {_fmt(outer)} 0 1 0 {_fmt(2 * outer)} 0 "
            f"a {_fmt(outer)} {_fmt(outer)} 0 1 0 {_fmt(-2 * outer)} 0 Z"
        )
        if inner > 0:
            ring += (
                f" M {_fmt(cx - inner)} {_fmt(cy)} a {_fmt(inner)} {_fmt(inner)} 0 1 0 {_fmt(2 * inner)} 0 "
                f"a {_fmt(inner)} {_fmt(inner)} 0 1 0 {_fmt(-2 * inner)} 0 Z"
            )
        return ring

    large = 1 if span > math.pi else 0
    ox1, oy1 = polar_point(center, outer, start, AngleFrame.CLOCK)
    ox2, oy2 = polar_point(center, outer, end, AngleFrame.CLOCK)
    path = f"M {_fmt(ox1)} {_fmt(oy1)} A {_fmt(outer)} {_fmt(outer)} 0 {large} 1 {_fmt(ox2)} {_fmt(oy2)}"
    if inner > 0:
        ix2, iy2 = polar_point(center, inner, end, AngleFrame.CLOCK)
        ix1, iy1 = polar_point(center, inner, start, AngleFrame.CLOCK)
        path += (
            f" L {_fmt(ix2)} {_fmt(iy2)}"
            f" A {_fmt(inner)} {_fmt(inner)} 0 {large} 0 {_fmt(ix1)} {_fmt(iy1)}"
        )
    else:
        path += f" L {_fmt(center[0])} {_fmt(center[1])}"
    return path + " Z"


def _shape_svg(chart: Chart, shape, emphasis) -> list[str]:
    """SVG elements for one wedge or node, halo included."""
    category = chart.categories[shape.category_id]
    style = (
        f'fill="{shape.color.hex()}" fill-opacity="{emphasis.fill_opacity}" '
        f'stroke="{emphasis.stroke_color}" stroke-width="{emphasis.stroke_width}"'
    )
    halo = f'fill="none" stroke="{shape.color.hex()}" stroke-width="1.5" stroke-dasharray="4 3"'
    transition = (
        f'style="transition: all {shape.transition.duration_ms}ms {shape.transition.easing} '
        f'{shape.transition.delay_ms}ms"'
    )

    elements: list[str] = []
    if isinstance(shape, WedgeGeometry):
        path = _arc_path(chart.center, shape.inner_radius, shape.radius, shape.start_angle, shape.end_angle)
        elements.append(
            f'<path data-id="{escape(shape.category_id)}" d="{path}" {style} {transition}/>'
        )
        if category.is_priority:
            r = shape.radius + HALO_GAP
            x1, y1 = polar_point(chart.center, r, shape.start_angle, AngleFrame.CLOCK)
            x2, y2 = polar_point(chart.center, r, shape.end_angle, AngleFrame.CLOCK)
            large = 1 if shape.span > math.pi else 0
            elements.append(
                f'<path d="M {_fmt(x1)} {_fmt(y1)} A {_fmt(r)} {_fmt(r)} 0 {large} 1 '
                f'{_fmt(x2)} {_fmt(y2)}" {halo}/>'
            )
    else:
        x, y = shape.position
        elements.append(
            f'<circle data-id="{escape(shape.category_id)}" cx="{_fmt(x)}" cy="{_fmt(y)}" '
            f'r="{_fmt(shape.node_size)}" {style} {transition}/>'
        )
        if category.is_priority:
            elements.append(
                f'<circle cx="{_fmt(x)}" cy="{_fmt(y)}" r="{_fmt(shape.node_size + HALO_GAP)}" {halo}/>'
            )
    return elements


def _legend_svg(chart: Chart) -> list[str]:
    """Legend drawn in the bottom-left corner."""
    x = 16
    y = chart.height - 16 - 18 * len(chart.legend)
    elements: list[str] = []
    for i, entry in enumerate(chart.legend):
        row_y = y + i * 18
        if entry.type is LegendType.GRADIENT:
            elements.append(
                f'<rect x="{x}" y="{row_y}" width="60" height="10" fill="url(#score-gradient)"/>'
            )
            text_x = x + 68
        elif entry.type is LegendType.RING:
            elements.append(
                f'<circle cx="{x + 6}" cy="{row_y + 5}" r="5" fill="none" '
                f'stroke="{entry.color}" stroke-dasharray="2 2"/>'
            )
            text_x = x + 18
        else:
            text_x = x
        elements.append(
            f'<text x="{text_x}" y="{row_y + 9}" font-size="11" fill="{TEXT_COLOR}">'
            f"{escape(entry.label)}</text>"
        )
    return elements


def render_svg(
    chart: Chart,
    state: InteractionState | None = None,
    style: EmphasisStyle | None = None,
) -> str:
    """Render a chart as a standalone SVG document.

    Args:
        chart: Laid-out chart.
        state: Optional hover state; emphasis and tooltip follow it.
        style: Emphasis values.

    Returns:
        SVG markup.
    """
    state = state or InteractionState()
    style = style or EmphasisStyle()
    emphasis = derive_emphasis(state, chart.ids, style)

    stops = "".join(
        f'<stop offset="{offset * 100:.0f}%" stop-color="{color.hex()}"/>'
        for offset, color in gradient_stops()
    )
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{chart.width:g}" height="{chart.height:g}" '
        f'viewBox="0 0 {chart.width:g} {chart.height:g}" preserveAspectRatio="xMidYMid meet">',
        f'<defs><linearGradient id="score-gradient">{stops}</linearGradient></defs>',
        f'<rect width="100%" height="100%" fill="{BACKGROUND}"/>',
    ]

    if chart.is_empty:
        parts.append(
            f'<text x="{_fmt(chart.center[0])}" y="{_fmt(chart.center[1])}" text-anchor="middle" '
            f'font-size="13" fill="{TEXT_COLOR}">No category data</text>'
        )
    elif chart.total_tvl is not None:
        cx, cy = chart.center
        parts.append(
            f'<g class="total-tvl"><text x="{_fmt(cx)}" y="{_fmt(cy - 8)}" text-anchor="middle" '
            f'font-size="11" fill="{TEXT_COLOR}">Total TVL</text>'
            f'<text x="{_fmt(cx)}" y="{_fmt(cy + 12)}" text-anchor="middle" font-size="16" '
            f'font-weight="bold" fill="#ffffff">{format_compact_currency(chart.total_tvl)}</text></g>'
        )

    for shape in chart.shapes:
        parts.extend(_shape_svg(chart, shape, emphasis[shape.category_id]))

    for label in chart.labels:
        (x1, y1), (x2, y2) = label.leader_line
        opacity = emphasis[label.category_id].fill_opacity
        parts.append(
            f'<line x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
            f'stroke="{LEADER_COLOR}" stroke-width="0.75" opacity="{opacity}"/>'
        )
        parts.append(
            f'<text x="{_fmt(label.anchor[0])}" y="{_fmt(label.anchor[1])}" '
            f'text-anchor="{label.text_anchor.value}" dominant-baseline="middle" '
            f'font-size="11" fill="{TEXT_COLOR}" opacity="{opacity}">{escape(label.text)}</text>'
        )

    parts.extend(_legend_svg(chart))

    tooltip = derive_tooltip(state, chart, style)
    if tooltip:
        tx, ty = tooltip.position
        height = 22 + 15 * len(tooltip.lines)
        parts.append(
            f'<g class="tooltip"><rect x="{tx}" y="{ty}" width="190" height="{height}" rx="6" '
            f'fill="#111111" stroke="{tooltip.color.hex()}"/>'
        )
        parts.append(
            f'<text x="{tx + 10}" y="{ty + 17}" font-size="12" font-weight="bold" '
            f'fill="#ffffff">{escape(tooltip.title)}</text>'
        )
        for i, line in enumerate(tooltip.lines):
            parts.append(
                f'<text x="{tx + 10}" y="{ty + 34 + 15 * i}" font-size="11" '
                f'fill="{TEXT_COLOR}">{escape(line)}</text>'
            )
        parts.append("</g>")

    parts.append("</svg>")
    return "\n".join(parts)


def _tooltip_text(chart: Chart, category_id: str) -> str:
    """Plain-text tooltip used as the pyvis node title."""
    state = InteractionState()
    state.pointer_enter(category_id)
    tooltip = derive_tooltip(state, chart)
    return "\n".join([tooltip.title, *tooltip.lines]) if tooltip else category_id


def render_html(
    chart: Chart,
    output_path: Path,
    style: EmphasisStyle | None = None,
) -> None:
    """Render an interactive chart with pyvis.

    Positions are fixed (physics disabled). Orbital nodes are drawn as dots;
    saturation wedges become radial spokes from a hub to each wedge's outer
    arc. A hover script applies the same emphasis rule as derive_emphasis.

    Args:
        chart: Laid-out chart.
        output_path: Path to write the HTML file.
        style: Emphasis values.
    """
    from pyvis.network import Network

    style = style or EmphasisStyle()
    cx, cy = chart.center

    net = Network(
        height=f"{chart.height:g}px",
        width=f"{chart.width:g}px",
        bgcolor=BACKGROUND,
        font_color=TEXT_COLOR,
        cdn_resources="remote",
    )
    net.toggle_physics(False)

    if chart.kind == SATURATION and not chart.is_empty:
        net.add_node(
            CENTER_NODE,
            label=" ",
            x=0,
            y=0,
            fixed=True,
            shape="dot",
            size=chart.shapes[0].inner_radius / 4,
            color="#222222",
        )

    for shape in chart.shapes:
        category = chart.categories[shape.category_id]
        common = {
            "label": category.name,
            "title": _tooltip_text(chart, shape.category_id),
            "fixed": True,
            "color": shape.color.hex(),
            "opacity": style.neutral_opacity,
            "borderWidth": style.stroke_width,
            "shapeProperties": {"borderDashes": [4, 3] if category.is_priority else False},
        }
        if isinstance(shape, WedgeGeometry):
            tip_x, tip_y = polar_point(chart.center, shape.radius, shape.mid_angle, AngleFrame.CLOCK)
            net.add_node(shape.category_id, x=tip_x - cx, y=tip_y - cy, shape="dot", size=6, **common)
            # Spoke thickness follows the wedge's mean arc length
            mean_arc = shape.span * (shape.inner_radius + shape.radius) / 2
            net.add_edge(
                CENTER_NODE,
                shape.category_id,
                color=shape.color.hex(),
                width=max(2.0, min(mean_arc * 0.8, 40.0)),
            )
        else:
            x, y = shape.position
            net.add_node(
                shape.category_id, x=x - cx, y=y - cy, shape="dot", size=shape.node_size, **common
            )

    net.set_options("""
    {
        "physics": {"enabled": false},
        "interaction": {"hover": true, "zoomView": true, "dragView": true, "tooltipDelay": 100},
        "edges": {"smooth": false, "arrows": {"to": {"enabled": false}}}
    }
    """)

    net.save_graph(str(output_path))

    _inject_hover_script(output_path, chart, style)


def _inject_hover_script(output_file: Path, chart: Chart, style: EmphasisStyle) -> None:
    """Inject the hover-emphasis script and the legend panel.

    Mirrors InteractionState: entering a node makes it the only hovered
    node; leaving resets only when the node left is the hovered one.

    Args:
        output_file: Path to the HTML file to modify.
        chart: Chart providing ids and legend.
        style: Emphasis values.
    """
    with open(output_file, "r") as f:
        html = f.read()

    ids_json = json.dumps(chart.ids)
    style_json = json.dumps(
        {
            "active": style.active_opacity,
            "dimmed": style.dimmed_opacity,
            "neutral": style.neutral_opacity,
            "strokeWidth": style.stroke_width,
            "activeStrokeWidth": style.active_stroke_width,
        }
    )
    rows: list[str] = []
    for entry in chart.legend:
        if entry.type is LegendType.GRADIENT:
            marker = f'<span class="legend-swatch" style="background:{entry.color};"></span> '
        elif entry.type is LegendType.RING:
            marker = f'<span class="legend-ring" style="border-color:{entry.color};"></span> '
        else:
            marker = ""
        rows.append(f"<div>{marker}{escape(entry.label)}</div>")
    legend_rows = "".join(rows)

    custom_script = f"""
    <script type="text/javascript">
    var chartIds = {ids_json};
    var emphasis = {style_json};
    var hoveredId = null;

    function applyEmphasis() {{
        var updates = chartIds.map(function(id) {{
            var opacity = emphasis.neutral;
            var width = emphasis.strokeWidth;
            if (hoveredId !== null) {{
                opacity = id === hoveredId ? emphasis.active : emphasis.dimmed;
                width = id === hoveredId ? emphasis.activeStrokeWidth : emphasis.strokeWidth;
            }}
            return {{id: id, opacity: opacity, borderWidth: width}};
        }});
        nodes.update(updates);
    }}

    document.addEventListener('DOMContentLoaded', function() {{
        setTimeout(function() {{
            if (typeof network === 'undefined') return;

            var legend = document.createElement('div');
            legend.innerHTML = '<div style="position:fixed;bottom:10px;left:10px;padding:10px;background:#111;color:#aaa;border:1px solid #333;border-radius:5px;font-family:sans-serif;font-size:11px;z-index:1000;">' +
                {json.dumps(legend_rows)} + '</div>';
            document.body.appendChild(legend);

            var css = document.createElement('style');
            css.textContent = '.legend-swatch {{ display:inline-block;width:60px;height:10px;margin-right:5px;vertical-align:middle; }}' +
                '.legend-ring {{ display:inline-block;width:10px;height:10px;margin-right:5px;vertical-align:middle;border:1px dashed;border-radius:50%; }}';
            document.head.appendChild(css);

            network.on('hoverNode', function(params) {{
                if (chartIds.indexOf(params.node) === -1) return;
                hoveredId = params.node;
                applyEmphasis();
            }});

            network.on('blurNode', function(params) {{
                if (params.node !== hoveredId) return;
                hoveredId = null;
                applyEmphasis();
            }});

            applyEmphasis();
        }}, 500);
    }});
    </script>
    """

    html = html.replace("</body>", custom_script + "</body>")

    with open(output_file, "w") as f:
        f.write(html)
