# arclayout/core/projector.py
"""
Project an item's angle on the arc to a screen-space placement:
lateral offset, depth-based scale and opacity, and stacking order.
"""

from __future__ import annotations

import math

from arclayout.core.config import DEPTH_FALLOFF, MIN_RADIUS_FLOOR
from arclayout.core.geometry import clamp, safe_radius
from arclayout.core.types import Metrics, Placement


def depth_scale_for(angle: float, radius: float, min_depth_scale: float) -> float:
    """Scale factor for an item at `angle`: 1.0 at the front, shrinking toward the edges."""
    r = safe_radius(radius)
    z = math.cos(angle) * r - r
    denom = max(MIN_RADIUS_FLOOR, r * DEPTH_FALLOFF)
    return max(min_depth_scale, min(1.0, 1.0 + z / denom))


def project(angle: float, radius: float, metrics: Metrics, is_selected: bool = False) -> Placement:
    """
    Placement for one item. The camera looks down the arc's axis; the item at
    angle 0 sits in front at full size. The selected item is boosted and opaque.
    """
    r = safe_radius(radius)
    x = math.sin(angle) * r
    z = math.cos(angle) * r - r
    depth_scale = depth_scale_for(angle, r, metrics.min_depth_scale)
    selected_scale = metrics.selected_scale_boost if is_selected else 1.0
    if is_selected:
        opacity = 1.0
    else:
        opacity = clamp(max(metrics.min_opacity, depth_scale), 0.0, 1.0)
    return Placement(
        offset_x=x,
        offset_y=metrics.vertical_offset,
        scale=depth_scale * selected_scale,
        opacity=opacity,
        stack_order=depth_scale,
        depth_scale=depth_scale,
        depth=min(0.0, z),
        rotation_deg=math.degrees(angle),
        perspective=metrics.perspective,
    )
