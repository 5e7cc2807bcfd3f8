"""External label anchors and leader lines."""

from dataclasses import dataclass, replace
from enum import Enum

from ..config import OrbitalConfig, SaturationConfig
from .geometry import AngleFrame, Point, direction, polar_point
from .orbital import OrbitalNodeGeometry
from .wedge import WedgeGeometry


class TextAnchor(Enum):
    """SVG text-anchor values."""

    START = "start"  # Text runs rightward from the anchor
    MIDDLE = "middle"
    END = "end"  # Text runs leftward into the anchor


@dataclass(frozen=True)
class LabelGeometry:
    """Where to typeset a label and how to connect it to its shape."""

    category_id: str
    text: str
    anchor: Point
    text_anchor: TextAnchor
    leader_line: tuple[Point, Point]


def text_anchor_for(component: float, threshold: float) -> TextAnchor:
    """Pick text alignment from the horizontal component of a direction.

    Args:
        component: Horizontal unit-vector component in [-1, 1].
        threshold: Magnitude below which text is centered.

    Returns:
        MIDDLE near the vertical axis, else START on the right, END on the left.
    """
    if abs(component) < threshold:
        return TextAnchor.MIDDLE
    return TextAnchor.START if component > 0 else TextAnchor.END


def place_label(
    category_id: str,
    text: str,
    origin: Point,
    boundary_radius: float,
    angle: float,
    offset: float,
    threshold: float,
    frame: AngleFrame = AngleFrame.SCREEN,
) -> LabelGeometry:
    """Push a label outward along ``angle`` beyond a shape boundary.

    Args:
        category_id: Id of the labelled category.
        text: Label text.
        origin: Point the angle is measured from.
        boundary_radius: Distance from origin to the shape's outer edge.
        angle: Direction of the label in radians.
        offset: Gap in pixels between boundary and anchor.
        threshold: Centering threshold passed to text_anchor_for.
        frame: Angle convention of ``angle``.

    Returns:
        LabelGeometry with the leader line running boundary -> anchor.
    """
    boundary = polar_point(origin, boundary_radius, angle, frame)
    anchor = polar_point(origin, boundary_radius + offset, angle, frame)
    dx, _dy = direction(angle, frame)
    return LabelGeometry(
        category_id=category_id,
        text=text,
        anchor=anchor,
        text_anchor=text_anchor_for(dx, threshold),
        leader_line=(boundary, anchor),
    )


def place_wedge_label(wedge: WedgeGeometry, config: SaturationConfig, text: str) -> LabelGeometry:
    """Label a wedge at its outer arc midpoint.

    Wedge angles start at 12 o'clock, so the horizontal component is
    ``sin(mid_angle)``.
    """
    return place_label(
        wedge.category_id,
        text,
        origin=config.center,
        boundary_radius=wedge.radius,
        angle=wedge.mid_angle,
        offset=config.label_offset,
        threshold=config.text_anchor_threshold,
        frame=AngleFrame.CLOCK,
    )


def place_node_label(node: OrbitalNodeGeometry, config: OrbitalConfig, text: str) -> LabelGeometry:
    """Label an orbital node just outside its circle, away from the center."""
    return place_label(
        node.category_id,
        text,
        origin=node.position,
        boundary_radius=node.node_size,
        angle=node.angle,
        offset=config.label_offset,
        threshold=config.text_anchor_threshold,
        frame=AngleFrame.SCREEN,
    )


def _extent(label: LabelGeometry, char_width: float) -> tuple[float, float]:
    """Estimated horizontal span of the label text."""
    x = label.anchor[0]
    width = len(label.text) * char_width
    if label.text_anchor is TextAnchor.END:
        return x - width, x
    return x, x + width


def _overlapping_groups(
    labels: list[LabelGeometry], indices: list[int], char_width: float
) -> list[list[int]]:
    """Split indices into groups whose horizontal extents chain together."""
    extents = {i: _extent(labels[i], char_width) for i in indices}
    groups: list[list[int]] = []
    reach = None
    for i in sorted(indices, key=lambda i: extents[i][0]):
        left, right = extents[i]
        if reach is None or left > reach:
            groups.append([])
            reach = right
        else:
            reach = max(reach, right)
        groups[-1].append(i)
    return groups


def spread_labels(
    labels: list[LabelGeometry], min_spacing: float, char_width: float = 6.5
) -> list[LabelGeometry]:
    """Separate side labels vertically so they do not overlap.

    Start- and end-anchored labels are handled per side, and within a side
    only labels whose estimated text extents overlap horizontally can
    collide. Each such group is sorted by height, each anchor is pushed
    down to at least ``min_spacing`` below the previous one, then the group
    is shifted back so its mean height is unchanged. Centered labels are
    left alone. Leader lines keep their boundary end and follow the moved
    anchor.

    Args:
        labels: Labels as placed.
        min_spacing: Minimum vertical distance between anchors in one group.
        char_width: Estimated width of one character of label text.

    Returns:
        Labels in the same order as the input.
    """
    if min_spacing <= 0:
        return list(labels)

    moved: dict[int, Point] = {}
    for side in (TextAnchor.START, TextAnchor.END):
        indices = [i for i, label in enumerate(labels) if label.text_anchor is side]
        for group in _overlapping_groups(labels, indices, char_width):
            if len(group) < 2:
                continue
            group.sort(key=lambda i: labels[i].anchor[1])

            original = [labels[i].anchor[1] for i in group]
            spaced = [original[0]]
            for y in original[1:]:
                spaced.append(max(y, spaced[-1] + min_spacing))

            # Re-center so the group does not drift downward as a whole
            shift = (sum(original) - sum(spaced)) / len(spaced)
            for i, y in zip(group, spaced):
                moved[i] = (labels[i].anchor[0], y + shift)

    result: list[LabelGeometry] = []
    for i, label in enumerate(labels):
        if i in moved:
            anchor = moved[i]
            label = replace(label, anchor=anchor, leader_line=(label.leader_line[0], anchor))
        result.append(label)
    return result
