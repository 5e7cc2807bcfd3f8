"""Tests for wedge.py layout module."""

import math

import pytest

from void_charts.config import SaturationConfig
from void_charts.layout.color import score_color
from void_charts.layout.wedge import effective_gap, layout_wedges
from void_charts.stats import CategoryStat


def _categories(scores: list[float]) -> list[CategoryStat]:
    return [CategoryStat(id=f"c{i}", name=f"C{i}", score=s) for i, s in enumerate(scores)]


class TestLayoutWedges:
    """Tests for layout_wedges function."""

    @pytest.mark.parametrize("n", [1, 2, 3, 7, 12, 40])
    def test_spans_and_gaps_tile_circle(self, n):
        """Spans plus n gaps add up to exactly 2*pi."""
        config = SaturationConfig()
        wedges = layout_wedges(_categories([i * 7 % 100 for i in range(n)]), config)

        total = sum(w.span for w in wedges) + n * effective_gap(n, config.padding)
        assert total == pytest.approx(2 * math.pi, abs=1e-9)

    def test_wedges_do_not_overlap(self, ecosystem):
        """Consecutive wedges are separated by the gap and stay within [0, 2*pi]."""
        config = SaturationConfig()
        wedges = layout_wedges(ecosystem, config)

        assert wedges[0].start_angle >= 0
        assert wedges[-1].end_angle <= 2 * math.pi
        for prev, nxt in zip(wedges, wedges[1:]):
            assert nxt.start_angle - prev.end_angle == pytest.approx(config.padding)

    def test_sorted_by_descending_score(self, ecosystem):
        """Wedges are ordered highest score first."""
        wedges = layout_wedges(ecosystem, SaturationConfig())
        scores = {c.id: c.score for c in ecosystem}

        ordered = [scores[w.category_id] for w in wedges]
        assert ordered == sorted(ordered, reverse=True)
        assert [w.index for w in wedges] == list(range(len(ecosystem)))

    def test_ties_keep_input_order(self):
        """Equal scores keep their input order."""
        categories = [
            CategoryStat(id="a", name="A", score=50),
            CategoryStat(id="b", name="B", score=50),
            CategoryStat(id="c", name="C", score=70),
        ]
        wedges = layout_wedges(categories, SaturationConfig())

        assert [w.category_id for w in wedges] == ["c", "a", "b"]

    def test_radius_monotonic_in_score(self):
        """Radius never decreases as score increases."""
        config = SaturationConfig(inner_radius=5, min_radius=10, max_radius=20)
        wedges = layout_wedges(_categories([0, 12.5, 33, 50, 50, 71, 99, 100]), config)

        by_score = sorted(wedges, key=lambda w: int(w.category_id[1:]))
        radii = [w.radius for w in by_score]
        assert radii == sorted(radii)
        assert radii[0] == pytest.approx(10)
        assert radii[-1] == pytest.approx(20)

    def test_out_of_range_scores_clamped(self):
        """Scores outside [0, 100] map to the radius bounds."""
        config = SaturationConfig()
        wedges = layout_wedges(_categories([150, -20]), config)

        assert wedges[0].radius == pytest.approx(config.max_radius)
        assert wedges[1].radius == pytest.approx(config.min_radius)

    def test_empty_input(self):
        """No categories means no wedges."""
        assert layout_wedges([], SaturationConfig()) == []

    def test_single_wedge_spans_nearly_full_circle(self):
        """One category covers the circle minus one gap."""
        config = SaturationConfig()
        wedges = layout_wedges(_categories([40]), config)

        assert len(wedges) == 1
        assert wedges[0].span == pytest.approx(2 * math.pi - config.padding)

    def test_gap_capped_for_many_categories(self):
        """A gap wider than half a step is capped so spans stay positive."""
        config = SaturationConfig(padding_degrees=5)
        wedges = layout_wedges(_categories([50] * 500), config)

        step = 2 * math.pi / 500
        assert effective_gap(500, config.padding) == pytest.approx(step / 2)
        assert all(w.span > 0 for w in wedges)

    def test_color_and_transition(self, two_categories):
        """Each wedge carries its score color and a staggered transition."""
        config = SaturationConfig(transition_stagger_ms=25)
        wedges = layout_wedges(two_categories, config)

        assert wedges[0].color == score_color(82)
        assert wedges[1].color == score_color(31)
        assert wedges[0].transition.delay_ms == 0
        assert wedges[1].transition.delay_ms == 25
        assert wedges[1].transition.duration_ms == config.transition_ms

    def test_idempotent(self, ecosystem):
        """Laying out the same input twice gives identical geometry."""
        config = SaturationConfig()
        assert layout_wedges(ecosystem, config) == layout_wedges(ecosystem, config)


def test_scenario_two_categories(two_categories):
    """DeFi/NFT: two wedges covering 2*pi minus two gaps, DeFi longer."""
    config = SaturationConfig()
    wedges = layout_wedges(two_categories, config)

    assert len(wedges) == 2
    assert sum(w.span for w in wedges) == pytest.approx(2 * math.pi - 2 * config.padding)
    radius = {w.category_id: w.radius for w in wedges}
    assert radius["defi"] > radius["nft"]
