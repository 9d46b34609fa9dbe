# arclayout/core/types.py
"""
Dataclasses for layout metrics, solved arc layout, and per-item placement.
All are plain values; nothing here owns items or views.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal

from arclayout.core.config import (
    DEFAULT_BASE_RADIUS,
    DEFAULT_ITEM_HEIGHT,
    DEFAULT_ITEM_SPACING,
    DEFAULT_ITEM_WIDTH,
    DEFAULT_MAX_ANGLE_RAD,
    DEFAULT_MAX_RADIUS,
    DEFAULT_MIN_DEPTH_SCALE,
    DEFAULT_MIN_OPACITY,
    DEFAULT_MIN_RADIUS,
    DEFAULT_MINIMUM_STEP_RAD,
    DEFAULT_PERSPECTIVE,
    DEFAULT_SELECTED_SCALE_BOOST,
    DEFAULT_VERTICAL_OFFSET,
)


LayoutMode = Literal["fixed_radius", "radius_solving"]
SpacingSemantics = Literal["arc_length", "chord"]

LAYOUT_MODES: tuple[str, ...] = ("fixed_radius", "radius_solving")


@dataclass(frozen=True)
class Metrics:
    """
    Item size, spacing, angular budget, radius bounds and projection tuning.
    Angles are in radians; use Metrics.from_degrees for degree inputs.
    """
    item_width: float = DEFAULT_ITEM_WIDTH
    item_height: float = DEFAULT_ITEM_HEIGHT
    item_spacing: float = DEFAULT_ITEM_SPACING
    max_angle_span: float = DEFAULT_MAX_ANGLE_RAD
    base_radius: float = DEFAULT_BASE_RADIUS
    min_radius: float = DEFAULT_MIN_RADIUS
    max_radius: float | None = DEFAULT_MAX_RADIUS
    minimum_angular_step: float = DEFAULT_MINIMUM_STEP_RAD
    vertical_offset: float = DEFAULT_VERTICAL_OFFSET
    perspective: float = DEFAULT_PERSPECTIVE
    min_depth_scale: float = DEFAULT_MIN_DEPTH_SCALE
    selected_scale_boost: float = DEFAULT_SELECTED_SCALE_BOOST
    min_opacity: float = DEFAULT_MIN_OPACITY

    @property
    def desired_chord(self) -> float:
        """Center-to-center pitch between adjacent items (before flooring)."""
        return self.item_width + self.item_spacing

    @classmethod
    def from_degrees(
        cls,
        max_angle_deg: float,
        minimum_step_deg: float = 0.0,
        **kwargs: float | None,
    ) -> "Metrics":
        """Build Metrics with the angular budget and minimum step given in degrees."""
        return cls(
            max_angle_span=math.radians(max_angle_deg),
            minimum_angular_step=math.radians(minimum_step_deg),
            **kwargs,  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class ArcLayout:
    """Solver output: effective radius, step between neighbours, centered angles."""
    radius: float
    angular_step: float
    angles: tuple[float, ...]
    mode: LayoutMode
    spacing_semantics: SpacingSemantics

    @property
    def count(self) -> int:
        return len(self.angles)

    @property
    def span(self) -> float:
        """Angle between first and last item; 0 for fewer than two items."""
        if len(self.angles) < 2:
            return 0.0
        return self.angles[-1] - self.angles[0]


@dataclass(frozen=True)
class Placement:
    """
    Per-item transform for the renderer. scale and opacity multiply the
    item's own size and alpha; stack_order is higher for nearer items.
    """
    offset_x: float
    offset_y: float
    scale: float
    opacity: float
    stack_order: float
    depth_scale: float
    depth: float  # z relative to the front of the arc, always <= 0
    rotation_deg: float  # rotation about the vertical axis
    perspective: float


@dataclass
class CarouselLayout:
    """Full layout pass: solved arc plus one placement per item index."""
    layout: ArcLayout
    placements: list[Placement]
    draw_order: list[int]  # back to front
    selected_index: int | None
    overlaps_detected: int
    warnings: list[str] = field(default_factory=list)
