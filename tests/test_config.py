"""Tests for config.py and stats.py modules."""

import json
import math

import pytest

from void_charts.config import (
    EmphasisStyle,
    OrbitalConfig,
    SaturationConfig,
    load_config,
    settings_from_mapping,
)
from void_charts.layout.chart import build_saturation_chart
from void_charts.stats import CategoryStat, load_categories


class TestChartConfig:
    """Tests for the config dataclasses."""

    def test_default_canvases(self):
        """Saturation uses 800x500, orbital 800x520, both centered."""
        saturation = SaturationConfig()
        orbital = OrbitalConfig()

        assert (saturation.width, saturation.height) == (800, 500)
        assert saturation.center == (400, 250)
        assert (orbital.width, orbital.height) == (800, 520)
        assert orbital.center == (400, 260)

    def test_padding_in_radians(self):
        assert SaturationConfig(padding_degrees=90).padding == pytest.approx(math.pi / 2)

    def test_radius_bounds_validated(self):
        with pytest.raises(ValueError, match="min_radius"):
            SaturationConfig(min_radius=100, max_radius=100)

    def test_inner_radius_validated(self):
        with pytest.raises(ValueError, match="inner_radius"):
            SaturationConfig(inner_radius=80, min_radius=70)

    def test_orbit_bounds_validated(self):
        with pytest.raises(ValueError, match="min_orbit"):
            OrbitalConfig(min_orbit=300, max_orbit=200)

    def test_size_bounds_validated(self):
        with pytest.raises(ValueError, match="Node size"):
            OrbitalConfig(min_size=40, max_size=10)

    def test_canvas_validated(self):
        with pytest.raises(ValueError, match="Canvas"):
            SaturationConfig(width=0)


class TestSettingsFromMapping:
    """Tests for settings_from_mapping and load_config."""

    def test_defaults(self):
        settings = settings_from_mapping(None)
        assert settings.saturation == SaturationConfig()
        assert settings.orbital == OrbitalConfig()
        assert settings.emphasis == EmphasisStyle()

    def test_overrides(self):
        settings = settings_from_mapping(
            {
                "saturation": {"max_radius": 200, "center": [300, 200]},
                "emphasis": {"dimmed_opacity": 0.1, "tooltip_offset": [8, 8]},
            }
        )
        assert settings.saturation.max_radius == 200
        assert settings.saturation.center == (300.0, 200.0)
        assert settings.emphasis.dimmed_opacity == 0.1
        assert settings.emphasis.tooltip_offset == (8, 8)

    def test_unknown_section(self):
        with pytest.raises(ValueError, match="sections"):
            settings_from_mapping({"bars": {}})

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="max_radus"):
            settings_from_mapping({"saturation": {"max_radus": 200}})

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "charts.yaml"
        path.write_text("orbital:\n  max_orbit: 240\n  wrap_angles: true\n")

        settings = settings_from_mapping(load_config(path))
        assert settings.orbital.max_orbit == 240
        assert settings.orbital.wrap_angles is True

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == {}


class TestCategoryStat:
    """Tests for CategoryStat parsing."""

    def test_camel_case_keys(self):
        stat = CategoryStat.from_dict(
            {"id": "defi", "name": "DeFi", "score": 82, "metricA": 1e6, "metricB": 40, "isPriority": True}
        )
        assert stat == CategoryStat("defi", "DeFi", 82.0, 1e6, 40.0, True)

    def test_upstream_keys(self):
        """Records straight from the categories API are understood."""
        stat = CategoryStat.from_dict(
            {"id": "nft", "name": "NFT", "gapScore": 31, "totalTVL": 2e5, "projectCount": 12, "is_strategic": False}
        )
        assert stat.score == 31
        assert stat.metric_a == 2e5
        assert stat.metric_b == 12
        assert stat.is_priority is False

    def test_defaults_and_flooring(self):
        stat = CategoryStat.from_dict({"id": 7, "metric_a": -5})
        assert stat.id == "7"
        assert stat.name == "7"
        assert stat.score == 0
        assert stat.metric_a == 0

    def test_non_finite_metrics_zeroed(self):
        stat = CategoryStat.from_dict({"id": "x", "metricA": float("inf"), "metricB": float("nan")})
        assert stat.metric_a == 0
        assert stat.metric_b == 0

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("false", False),
            ("False", False),
            ("0", False),
            ("no", False),
            ("", False),
            ("true", True),
            (" TRUE ", True),
            ("yes", True),
            ("1", True),
            (True, True),
            (False, False),
            (1, True),
            (0, False),
        ],
    )
    def test_priority_flag_parsing(self, value, expected):
        """String flags are parsed by value, not by truthiness."""
        assert CategoryStat.from_dict({"id": "x", "isPriority": value}).is_priority is expected

    def test_missing_id(self):
        with pytest.raises(ValueError, match="missing an id"):
            CategoryStat.from_dict({"name": "Nameless"})


class TestLoadCategories:
    """Tests for load_categories function."""

    def test_wrapped_payload(self, categories_file, ecosystem):
        assert load_categories(categories_file) == ecosystem

    def test_list_payload(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([{"id": "a", "score": 10}, {"id": "b", "score": 20}]))
        assert [c.id for c in load_categories(path)] == ["a", "b"]

    def test_invalid_payload(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"rows": []}))
        with pytest.raises(ValueError, match="No category list"):
            load_categories(path)

    def test_nan_score_renders(self, tmp_path):
        """A NaN literal in the data file still produces a serializable chart."""
        path = tmp_path / "nan.json"
        path.write_text('[{"id": "a", "score": NaN}, {"id": "b", "score": 40}]')
        categories = load_categories(path)

        data = build_saturation_chart(categories).to_dict()

        assert [s["id"] for s in data["shapes"]] == ["b", "a"]
        assert data["shapes"][1]["color"] == "#ee2b2b"
        assert data["shapes"][1]["radius"] == pytest.approx(SaturationConfig().min_radius)
