# arclayout/core/layout.py
"""
Carousel layout orchestration: solve the arc, project every item, derive
back-to-front draw order and flag neighbouring items whose footprints overlap.
"""

from __future__ import annotations

import logging

from arclayout.core import error_codes
from arclayout.core.config import DEFAULT_MODE, OVERLAP_TOLERANCE_AREA
from arclayout.core.geometry import item_footprint, overlap_area
from arclayout.core.projector import project
from arclayout.core.solver import _solve_arc
from arclayout.core.types import CarouselLayout, LayoutMode, Metrics, Placement
from arclayout.core.validate import check_metrics

logger = logging.getLogger(__name__)


def draw_order(placements: list[Placement]) -> list[int]:
    """Indices sorted back to front by stack_order; equal stack orders keep index order."""
    return sorted(range(len(placements)), key=lambda i: placements[i].stack_order)


def count_overlaps(
    placements: list[Placement],
    metrics: Metrics,
    tolerance_area: float = OVERLAP_TOLERANCE_AREA,
) -> int:
    """Number of adjacent item pairs whose projected footprints overlap beyond tolerance_area."""
    footprints = [item_footprint(p, metrics.item_width, metrics.item_height) for p in placements]
    overlaps = 0
    for a, b in zip(footprints, footprints[1:]):
        if overlap_area(a, b) > tolerance_area:
            overlaps += 1
    return overlaps


def run_carousel_layout(
    count: int,
    metrics: Metrics,
    selected_index: int | None = None,
    mode: LayoutMode = DEFAULT_MODE,
    strict: bool | None = None,
) -> CarouselLayout:
    """
    Lay out `count` items. The item at selected_index (if in range) is
    highlighted. Returns CarouselLayout with one placement per index.
    """
    warnings = check_metrics(metrics, strict=strict)
    arc = _solve_arc(count, metrics, mode)

    if selected_index is not None and not 0 <= selected_index < count:
        logger.warning("Selected index %d outside 0..%d; ignoring selection", selected_index, count - 1)
        warnings.append(error_codes.SELECTION_OUT_OF_RANGE)
        selected_index = None

    placements = [
        project(angle, arc.radius, metrics, is_selected=(i == selected_index))
        for i, angle in enumerate(arc.angles)
    ]
    overlaps = count_overlaps(placements, metrics)
    if overlaps:
        logger.debug("%d adjacent item pairs overlap at radius %.2f", overlaps, arc.radius)

    return CarouselLayout(
        layout=arc,
        placements=placements,
        draw_order=draw_order(placements),
        selected_index=selected_index,
        overlaps_detected=overlaps,
        warnings=warnings,
    )
