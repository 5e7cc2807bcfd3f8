"""Chart configuration: canvas, radius bounds, and emphasis styling."""

import math
from dataclasses import dataclass, fields
from pathlib import Path


@dataclass
class CanvasConfig:
    """Settings shared by both radial charts.

    ``center`` defaults to the middle of the canvas when left unset.
    """

    width: float = 800
    height: float = 500
    center: tuple[float, float] | None = None
    label_offset: float = 16
    text_anchor_threshold: float = 0.2
    label_min_spacing: float = 14  # 0 disables label de-collision
    label_char_width: float = 6.5  # Estimated glyph width for label extents
    transition_ms: int = 600
    transition_easing: str = "ease-out"
    transition_stagger_ms: int = 40

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must be positive, got {self.width}x{self.height}")
        if self.center is None:
            self.center = (self.width / 2, self.height / 2)
        else:
            self.center = (float(self.center[0]), float(self.center[1]))
        if not 0 <= self.text_anchor_threshold < 1:
            raise ValueError("text_anchor_threshold must be in [0, 1)")


@dataclass
class SaturationConfig(CanvasConfig):
    """Polar wedge chart settings."""

    inner_radius: float = 40
    min_radius: float = 70
    max_radius: float = 180
    padding_degrees: float = 1.5  # Full gap between adjacent wedges

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.min_radius >= self.max_radius:
            raise ValueError(
                f"min_radius ({self.min_radius}) must be below max_radius ({self.max_radius})"
            )
        if not 0 <= self.inner_radius <= self.min_radius:
            raise ValueError("inner_radius must be in [0, min_radius]")
        if self.padding_degrees < 0:
            raise ValueError("padding_degrees must be non-negative")

    @property
    def padding(self) -> float:
        """Gap between adjacent wedges in radians."""
        return math.radians(self.padding_degrees)


@dataclass
class OrbitalConfig(CanvasConfig):
    """Golden-angle orbital chart settings."""

    height: float = 520
    label_offset: float = 10
    text_anchor_threshold: float = 0.3
    min_orbit: float = 60
    max_orbit: float = 210
    min_size: float = 8
    max_size: float = 34
    angle_offset: float = math.pi / 2  # Index 0 sits at 12 o'clock
    wrap_angles: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.min_orbit >= self.max_orbit:
            raise ValueError(
                f"min_orbit ({self.min_orbit}) must be below max_orbit ({self.max_orbit})"
            )
        if self.min_size > self.max_size or self.min_size < 0:
            raise ValueError(
                f"Node size bounds invalid: min_size={self.min_size}, max_size={self.max_size}"
            )


@dataclass
class EmphasisStyle:
    """Opacity and stroke rules applied by hover state."""

    active_opacity: float = 1.0
    dimmed_opacity: float = 0.25
    neutral_opacity: float = 0.75
    stroke_width: float = 1.0
    active_stroke_width: float = 2.5
    stroke_color: str = "#222222"
    active_stroke_color: str = "#ffffff"
    tooltip_offset: tuple[float, float] = (16, 16)  # From the top-left corner


@dataclass
class ChartSettings:
    """All configuration sections, as loaded from YAML."""

    saturation: SaturationConfig
    orbital: OrbitalConfig
    emphasis: EmphasisStyle


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.
    """
    try:
        import yaml

        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err


def _build_section(cls, values: dict | None):
    """Instantiate a config dataclass, rejecting unknown keys."""
    values = dict(values or {})
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} keys: {', '.join(unknown)}")
    for key in ("center", "tooltip_offset"):
        if key in values and values[key] is not None:
            values[key] = tuple(values[key])
    return cls(**values)


def settings_from_mapping(mapping: dict | None) -> ChartSettings:
    """Build typed settings from a parsed config mapping.

    Args:
        mapping: Dict with optional ``saturation``, ``orbital`` and
            ``emphasis`` sections.

    Returns:
        ChartSettings with defaults filled in.

    Raises:
        ValueError: On unknown sections/keys or invalid bounds.
    """
    mapping = mapping or {}
    unknown = sorted(set(mapping) - {"saturation", "orbital", "emphasis"})
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(unknown)}")

    return ChartSettings(
        saturation=_build_section(SaturationConfig, mapping.get("saturation")),
        orbital=_build_section(OrbitalConfig, mapping.get("orbital")),
        emphasis=_build_section(EmphasisStyle, mapping.get("emphasis")),
    )
