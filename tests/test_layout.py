# tests/test_layout.py
"""
Carousel layout: one placement per item, selection highlight, back-to-front
draw order and overlap detection between neighbours.
"""

from __future__ import annotations

import math

import pytest

from arclayout.core import error_codes
from arclayout.core.layout import count_overlaps, draw_order, run_carousel_layout
from arclayout.core.projector import project
from arclayout.core.types import Metrics
from arclayout.core.validate import MetricsError


def test_layout_five_items_center_selected() -> None:
    m = Metrics()
    layout = run_carousel_layout(5, m, selected_index=2)
    assert len(layout.placements) == 5
    assert layout.selected_index == 2
    assert layout.draw_order[-1] == 2
    selected = layout.placements[2]
    assert selected.opacity == 1.0
    assert selected.scale == pytest.approx(selected.depth_scale * m.selected_scale_boost)
    assert layout.overlaps_detected == 0
    assert layout.warnings == []


def test_layout_placements_match_projector() -> None:
    m = Metrics()
    layout = run_carousel_layout(4, m, selected_index=0, mode="fixed_radius")
    for i, angle in enumerate(layout.layout.angles):
        assert layout.placements[i] == project(angle, layout.layout.radius, m, is_selected=(i == 0))


def test_layout_even_count_draw_order() -> None:
    layout = run_carousel_layout(4, Metrics())
    assert set(layout.draw_order[:2]) == {0, 3}
    assert set(layout.draw_order[2:]) == {1, 2}


def test_draw_order_ties_keep_index_order() -> None:
    m = Metrics()
    placements = [project(0.0, 700.0, m), project(0.5, 700.0, m), project(0.0, 700.0, m)]
    assert draw_order(placements) == [1, 0, 2]


def test_layout_empty() -> None:
    layout = run_carousel_layout(0, Metrics())
    assert layout.placements == []
    assert layout.draw_order == []
    assert layout.overlaps_detected == 0


def test_layout_selection_out_of_range() -> None:
    layout = run_carousel_layout(3, Metrics(), selected_index=7)
    assert layout.selected_index is None
    assert error_codes.SELECTION_OUT_OF_RANGE in layout.warnings
    assert all(p.scale == p.depth_scale for p in layout.placements)


def test_layout_detects_crowded_items() -> None:
    m = Metrics(item_spacing=1.0, max_angle_span=math.radians(10))
    layout = run_carousel_layout(10, m, mode="fixed_radius")
    assert layout.overlaps_detected == 9
    assert count_overlaps(layout.placements, m) == 9


def test_layout_malformed_metrics_warn() -> None:
    layout = run_carousel_layout(3, Metrics(min_opacity=1.5), strict=False)
    assert error_codes.OPACITY_OUT_OF_RANGE in layout.warnings
    assert all(0.0 <= p.opacity <= 1.0 for p in layout.placements)


def test_layout_strict_raises() -> None:
    with pytest.raises(MetricsError):
        run_carousel_layout(3, Metrics(item_height=0.0), strict=True)
