"""Category statistics consumed by the chart layouts."""

import json
import math
from dataclasses import dataclass
from pathlib import Path

# Accepted source keys for each field, first match wins
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "score": ("score", "gapScore", "gap_score"),
    "metric_a": ("metric_a", "metricA", "totalTVL", "total_tvl"),
    "metric_b": ("metric_b", "metricB", "projectCount", "project_count"),
    "is_priority": ("is_priority", "isPriority", "is_strategic"),
}

_TRUE_STRINGS = ("1", "true", "yes", "y", "on")


def _metric(value) -> float:
    """Parse a metric, flooring negatives and dropping non-finite values to 0."""
    number = float(value)
    if not math.isfinite(number):
        return 0.0
    return max(number, 0.0)


def _flag(value) -> bool:
    """Parse a boolean that may arrive as a string such as "false"."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class CategoryStat:
    """One category row as supplied by the data layer."""

    id: str
    name: str
    score: float = 0.0  # Gap/void score, semantically in [0, 100]
    metric_a: float = 0.0  # Total value locked
    metric_b: float = 0.0  # Project count
    is_priority: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "CategoryStat":
        """Build a CategoryStat from a loosely-keyed record.

        Both snake_case and camelCase keys are accepted. Missing numbers
        default to 0; negative or non-finite metrics become 0. The priority
        flag also accepts strings such as "true" or "false".

        Args:
            data: Mapping with at least an ``id`` key.

        Returns:
            The parsed CategoryStat.

        Raises:
            ValueError: If the record has no ``id``.
        """
        if data.get("id") in (None, ""):
            raise ValueError(f"Category record is missing an id: {data!r}")

        def pick(field_name: str, default):
            for key in _FIELD_ALIASES[field_name]:
                if key in data and data[key] is not None:
                    return data[key]
            return default

        category_id = str(data["id"])
        return cls(
            id=category_id,
            name=str(data.get("name") or category_id),
            score=float(pick("score", 0.0)),
            metric_a=_metric(pick("metric_a", 0.0)),
            metric_b=_metric(pick("metric_b", 0.0)),
            is_priority=_flag(pick("is_priority", False)),
        )


def load_categories(path: Path) -> list[CategoryStat]:
    """Load category statistics from a JSON file.

    The file holds either a list of records or an object with a
    ``categories`` list.

    Args:
        path: Path to the JSON file.

    Returns:
        Categories in file order.

    Raises:
        ValueError: If the payload does not contain a category list.
    """
    with open(path) as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        payload = payload.get("categories")
    if not isinstance(payload, list):
        raise ValueError(f"No category list found in {path}")

    return [CategoryStat.from_dict(record) for record in payload]
