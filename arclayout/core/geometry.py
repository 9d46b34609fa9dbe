# arclayout/core/geometry.py
"""
Geometry helpers: chord/angle relation on a circle, arc length,
projected item footprints and their overlap.
"""

from __future__ import annotations

import math

from shapely.geometry import Polygon, box

from arclayout.core.config import MAX_CHORD_RATIO, MIN_CHORD_FLOOR, MIN_RADIUS_FLOOR
from arclayout.core.types import Placement


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]; lo wins when the bounds cross."""
    return max(lo, min(hi, value))


def safe_radius(radius: float) -> float:
    """Radius floored to MIN_RADIUS_FLOOR."""
    return max(MIN_RADIUS_FLOOR, radius)


def safe_chord(chord: float) -> float:
    """Chord floored to MIN_CHORD_FLOOR."""
    return max(MIN_CHORD_FLOOR, chord)


def chord_for_step(step: float, radius: float) -> float:
    """Straight-line distance between two points `step` radians apart: 2 r sin(step/2)."""
    return 2.0 * radius * math.sin(step / 2.0)


def step_for_chord(chord: float, radius: float) -> float:
    """
    Angle subtending `chord` at `radius`. The ratio chord / diameter is clamped
    to MAX_CHORD_RATIO, so a chord wider than the circle yields a step just under pi.
    """
    ratio = min(MAX_CHORD_RATIO, safe_chord(chord) / (2.0 * safe_radius(radius)))
    return 2.0 * math.asin(ratio)


def radius_for_chord(chord: float, step: float) -> float | None:
    """Radius at which `step` radians subtend `chord`; None when the step gives no solution."""
    denom = 2.0 * math.sin(step / 2.0)
    if denom <= 0:
        return None
    return safe_chord(chord) / denom


def chord_between(angle_a: float, angle_b: float, radius: float) -> float:
    """Distance between two points on the circle (law of cosines)."""
    d2 = 2.0 * radius * radius * (1.0 - math.cos(angle_b - angle_a))
    return math.sqrt(max(0.0, d2))


def arc_length(angle_a: float, angle_b: float, radius: float) -> float:
    return abs(angle_b - angle_a) * radius


def item_footprint(placement: Placement, width: float, height: float) -> Polygon:
    """
    Screen-space rectangle of an item after projection: its size times
    placement.scale, centered at (offset_x, offset_y).
    """
    hw = width * placement.scale / 2.0
    hh = height * placement.scale / 2.0
    cx, cy = placement.offset_x, placement.offset_y
    return box(cx - hw, cy - hh, cx + hw, cy + hh)


def overlap_area(a: Polygon, b: Polygon) -> float:
    """Intersection area of two footprints (0.0 when disjoint or empty)."""
    if a is None or b is None or a.is_empty or b.is_empty:
        return 0.0
    inter = a.intersection(b)
    if inter.is_empty:
        return 0.0
    return float(inter.area)
