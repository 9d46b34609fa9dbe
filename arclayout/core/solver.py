# arclayout/core/solver.py
"""
Arc solver: distribute N items over an angular budget.

Two modes share one entry point:
- fixed_radius: radius is base_radius; pitch is treated as arc length.
- radius_solving: pitch is a straight-line chord; the radius grows until the
  pitch fits inside the angular budget, then is clamped to [min_radius, max_radius].
"""

from __future__ import annotations

import logging

from arclayout.core.config import DEFAULT_MODE, MIN_RADIUS_FLOOR
from arclayout.core.geometry import radius_for_chord, safe_chord, safe_radius, step_for_chord
from arclayout.core.types import LAYOUT_MODES, ArcLayout, LayoutMode, Metrics
from arclayout.core.validate import check_metrics

logger = logging.getLogger(__name__)


def _empty_radius(metrics: Metrics) -> float:
    """Radius reported when there is nothing to lay out."""
    radius = max(metrics.min_radius, metrics.base_radius)
    if metrics.max_radius is not None:
        radius = min(radius, max(MIN_RADIUS_FLOOR, metrics.max_radius))
    return safe_radius(radius)


def _solve_fixed_radius(count: int, metrics: Metrics) -> ArcLayout:
    radius = safe_radius(metrics.base_radius)
    step = safe_chord(metrics.desired_chord) / radius
    total = step * (count - 1)
    budget = max(0.0, metrics.max_angle_span)
    clamped_total = min(total, budget)
    if clamped_total < total:
        logger.debug("fixed_radius: span %.4f rad clamped to budget %.4f rad", total, budget)
    actual_step = clamped_total / (count - 1) if count > 1 else 0.0
    start = -clamped_total / 2.0
    angles = tuple(start + actual_step * i for i in range(count))
    return ArcLayout(
        radius=radius,
        angular_step=actual_step,
        angles=angles,
        mode="fixed_radius",
        spacing_semantics="arc_length",
    )


def _solve_radius(count: int, metrics: Metrics) -> ArcLayout:
    desired_chord = safe_chord(metrics.desired_chord)
    radius = max(max(MIN_RADIUS_FLOOR, metrics.min_radius), metrics.base_radius)

    allowed_step = metrics.max_angle_span / (count - 1) if count > 1 else 0.0
    minimum_step = max(0.0, metrics.minimum_angular_step)

    if allowed_step > 0:
        required = radius_for_chord(desired_chord, allowed_step)
        if required is not None and required > radius:
            logger.debug("radius_solving: radius raised %.2f -> %.2f to fit chord %.2f", radius, required, desired_chord)
            radius = required

    if metrics.max_radius is not None:
        cap = max(MIN_RADIUS_FLOOR, metrics.max_radius)
        if radius > cap:
            logger.debug("radius_solving: radius %.2f clamped to max_radius %.2f", radius, cap)
            radius = cap

    if count > 1:
        step_at_radius = step_for_chord(desired_chord, radius)
        upper = allowed_step if allowed_step > 0 else step_at_radius
        step = max(minimum_step, min(step_at_radius, upper))
    else:
        step = 0.0

    center = (count - 1) / 2.0
    angles = tuple((i - center) * step for i in range(count))
    return ArcLayout(
        radius=radius,
        angular_step=step,
        angles=angles,
        mode="radius_solving",
        spacing_semantics="chord",
    )


def solve(
    count: int,
    metrics: Metrics,
    mode: LayoutMode = DEFAULT_MODE,
    strict: bool | None = None,
) -> ArcLayout:
    """
    Solve the arc for `count` items. Returns radius, angular step and one
    angle per item, centered on 0 and ordered by index.
    Raises ValueError for a negative count or unknown mode; malformed metrics
    raise MetricsError only in strict mode.
    """
    check_metrics(metrics, strict=strict)
    return _solve_arc(count, metrics, mode)


def _solve_arc(count: int, metrics: Metrics, mode: LayoutMode) -> ArcLayout:
    """solve() without the metrics precondition check."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if mode not in LAYOUT_MODES:
        raise ValueError(f"Unknown layout mode: {mode!r}")

    if count == 0:
        return ArcLayout(
            radius=_empty_radius(metrics),
            angular_step=0.0,
            angles=(),
            mode=mode,
            spacing_semantics="arc_length" if mode == "fixed_radius" else "chord",
        )
    if mode == "fixed_radius":
        return _solve_fixed_radius(count, metrics)
    return _solve_radius(count, metrics)
