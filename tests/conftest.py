"""Pytest fixtures for layout module tests."""

import json

import pytest

from void_charts.stats import CategoryStat


@pytest.fixture
def two_categories() -> list[CategoryStat]:
    """DeFi (high score, high TVL) and NFT (low score, low TVL)."""
    return [
        CategoryStat(id="defi", name="DeFi", score=82, metric_a=1_000_000, metric_b=40),
        CategoryStat(id="nft", name="NFT", score=31, metric_a=200_000, metric_b=12),
    ]


@pytest.fixture
def ecosystem() -> list[CategoryStat]:
    """A realistic set of categories with mixed scores and metrics."""
    return [
        CategoryStat(id="defi", name="DeFi", score=82, metric_a=1_000_000, metric_b=40),
        CategoryStat(id="nft", name="NFT", score=31, metric_a=200_000, metric_b=12),
        CategoryStat(
            id="ai", name="AI & Agents", score=91, metric_a=50_000, metric_b=5, is_priority=True
        ),
        CategoryStat(id="gaming", name="Gaming", score=55, metric_a=300_000, metric_b=18),
        CategoryStat(id="infra", name="Infrastructure", score=12, metric_a=2_500_000, metric_b=64),
        CategoryStat(
            id="privacy", name="Privacy", score=67, metric_a=0, metric_b=2, is_priority=True
        ),
        CategoryStat(id="social", name="Social", score=48, metric_a=75_000, metric_b=9),
    ]


@pytest.fixture
def zero_metrics() -> list[CategoryStat]:
    """Categories with every metric at zero."""
    return [
        CategoryStat(id="a", name="A", score=10),
        CategoryStat(id="b", name="B", score=50),
        CategoryStat(id="c", name="C", score=90),
    ]


@pytest.fixture
def categories_file(tmp_path, ecosystem):
    """Ecosystem categories written as upstream camelCase JSON."""
    records = [
        {
            "id": c.id,
            "name": c.name,
            "score": c.score,
            "metricA": c.metric_a,
            "metricB": c.metric_b,
            "isPriority": c.is_priority,
        }
        for c in ecosystem
    ]
    path = tmp_path / "categories.json"
    path.write_text(json.dumps({"categories": records}))
    return path
