"""Presentation configuration for the two rendering modes.

A PresentationConfig bundles everything that differs between the compact
preview and the full-screen view: canvas size, radii table, node styling,
LOD thresholds, tooltip placement and whether a viewport is attached. The
layout and render code take a config instead of branching on the mode.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import ConfigError
from ..core.models import Point
from . import defaults


class PresentationMode(StrEnum):
    COMPACT = "compact"
    FULL_SCREEN = "full-screen"


@dataclass(frozen=True)
class CanvasSize:
    """Internal coordinate system of the drawing surface."""

    width: float
    height: float

    @property
    def center(self) -> Point:
        return (self.width / 2, self.height / 2)


@dataclass(frozen=True)
class RadiiTable:
    """Placement radius (rx, ry) for each tier."""

    tier0: Point
    tier1: Point
    tier2: Point

    def for_tier(self, tier: int) -> Point:
        return (self.tier0, self.tier1, self.tier2)[tier]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RadiiTable:
        return cls(**{key: _as_point(key, value) for key, value in data.items()})


@dataclass(frozen=True)
class ViewportLimits:
    """Zoom bounds and step sizes."""

    min_scale: float = defaults.MIN_SCALE
    max_scale: float = defaults.MAX_SCALE
    wheel_sensitivity: float = defaults.WHEEL_SENSITIVITY
    zoom_step: float = defaults.ZOOM_STEP

    def clamp(self, scale: float) -> float:
        return min(max(self.min_scale, scale), self.max_scale)


@dataclass(frozen=True)
class NodeStyle:
    radius: float = 6.0
    hover_radius: float = 10.0
    ring_radius: float = 16.0
    ring_opacity: float = 0.3
    stroke_width: float = 2.0
    dim_opacity: float = 0.2
    fallback_color: str = defaults.COMPACT_FALLBACK_COLOR


@dataclass(frozen=True)
class EdgeStyle:
    stroke_width: float = 1.0
    highlight_stroke_width: float = 2.0
    dim_opacity: float = defaults.EDGE_DIM_OPACITY
    arrows: bool = False


@dataclass(frozen=True)
class LodThresholds:
    """Minimum scale (exclusive) at which labels are drawn; None disables them."""

    edge_labels: float | None = 0.6
    node_labels: float | None = 0.4
    edge_label_font: float = 10.0
    node_label_font: float = 12.0
    node_label_font_hover: float = 16.0
    font_padding: float = 2.0
    node_label_offset: float = 35.0


@dataclass(frozen=True)
class TooltipStyle:
    """Tooltip panel geometry.

    An anchored tooltip is drawn above the hovered node (compact mode has a
    static camera, so node coordinates are screen coordinates). A fixed
    tooltip sits at (x, y) in screen space.
    """

    anchored: bool = False
    x: float = 20.0
    y: float = 20.0
    width: float = 220.0
    height: float = 90.0
    offset_y: float = -20.0
    max_label_chars: int | None = None
    show_category: bool = True
    hint: str | None = defaults.TOOLTIP_HINT


@dataclass(frozen=True)
class PresentationConfig:
    """Complete presentation configuration for one mode."""

    mode: PresentationMode
    canvas: CanvasSize
    radii: RadiiTable
    node: NodeStyle = field(default_factory=NodeStyle)
    edge: EdgeStyle = field(default_factory=EdgeStyle)
    lod: LodThresholds = field(default_factory=LodThresholds)
    tooltip: TooltipStyle = field(default_factory=TooltipStyle)
    viewport: ViewportLimits = field(default_factory=ViewportLimits)
    interactive: bool = False
    scale_compensation: bool = False
    background_grid: bool = False

    @classmethod
    def load(cls, path: Path) -> PresentationConfig:
        """Load configuration from a YAML file.

        The file names a base ``mode`` (defaults to full-screen) and may
        override any section of that preset.

        Args:
            path: Path to YAML configuration file

        Returns:
            PresentationConfig instance

        Raises:
            ConfigError: If the file is missing or malformed
        """
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", {"path": str(path)})

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}", {"path": str(path)}) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PresentationConfig:
        """Create a config from a dictionary of overrides on a preset.

        Args:
            data: Configuration dictionary

        Returns:
            PresentationConfig instance
        """
        base = get_presentation(data.get("mode", PresentationMode.FULL_SCREEN))
        sections = {
            "canvas": CanvasSize,
            "node": NodeStyle,
            "edge": EdgeStyle,
            "lod": LodThresholds,
            "tooltip": TooltipStyle,
            "viewport": ViewportLimits,
        }
        overrides: dict[str, Any] = {}
        try:
            for name, section_cls in sections.items():
                if name in data:
                    section = replace(getattr(base, name), **data[name])
                    overrides[name] = _validate(section_cls, asdict(section))
            if "radii" in data:
                radii = {**asdict(base.radii), **data["radii"]}
                overrides["radii"] = RadiiTable.from_dict(radii)
            for flag in ("interactive", "scale_compensation", "background_grid"):
                if flag in data:
                    overrides[flag] = _validate(bool, data[flag])

            config = replace(base, **overrides)
            if config.viewport.min_scale > config.viewport.max_scale:
                raise ConfigError(
                    "viewport.min_scale must not exceed viewport.max_scale",
                    {"viewport": asdict(config.viewport)},
                )
        except ValidationError as e:
            raise ConfigError(
                f"Invalid presentation config: {e.error_count()} error(s)",
                {"errors": e.errors(include_url=False)},
            ) from e
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid presentation config: {e}") from e

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        data = asdict(self)
        data["mode"] = str(self.mode)
        data["radii"] = {key: list(value) for key, value in data["radii"].items()}
        return data


def _validate(target: Any, value: Any) -> Any:
    """Coerce ``value`` to ``target``'s declared field types (lax mode)."""
    return TypeAdapter(target).validate_python(value)


def _as_point(key: str, value: Any) -> Point:
    if isinstance(value, (int, float)):
        return (float(value), float(value))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    raise ConfigError(f"Radius '{key}' must be a number or an [rx, ry] pair")


COMPACT = PresentationConfig(
    mode=PresentationMode.COMPACT,
    canvas=CanvasSize(400, 300),
    radii=RadiiTable.from_dict(defaults.COMPACT_RADII),
    lod=LodThresholds(edge_labels=None, node_labels=None),
    tooltip=TooltipStyle(
        anchored=True,
        width=100.0,
        height=30.0,
        max_label_chars=15,
        show_category=False,
        hint=None,
    ),
)

FULL_SCREEN = PresentationConfig(
    mode=PresentationMode.FULL_SCREEN,
    canvas=CanvasSize(800, 600),
    radii=RadiiTable.from_dict(defaults.FULL_SCREEN_RADII),
    node=NodeStyle(
        radius=14.0,
        hover_radius=18.0,
        ring_radius=32.0,
        ring_opacity=0.5,
        dim_opacity=0.3,
        fallback_color=defaults.FULL_SCREEN_FALLBACK_COLOR,
    ),
    edge=EdgeStyle(stroke_width=1.5, highlight_stroke_width=3.0, arrows=True),
    interactive=True,
    scale_compensation=True,
    background_grid=True,
)

_PRESETS = {
    PresentationMode.COMPACT: COMPACT,
    PresentationMode.FULL_SCREEN: FULL_SCREEN,
}


def get_presentation(mode: str | PresentationMode) -> PresentationConfig:
    """Return the preset for a mode name.

    Raises:
        ConfigError: If the mode is unknown
    """
    try:
        return _PRESETS[PresentationMode(mode)]
    except ValueError as e:
        valid = ", ".join(m.value for m in PresentationMode)
        raise ConfigError(f"Unknown mode '{mode}'. Must be one of: {valid}") from e
