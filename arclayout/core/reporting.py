# arclayout/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json (exact schema), run_metadata.json.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime, timezone
from pathlib import Path

from arclayout.core.config import (
    DEPTH_FALLOFF,
    MAX_CHORD_RATIO,
    MIN_CHORD_FLOOR,
    MIN_RADIUS_FLOOR,
    OVERLAP_TOLERANCE_AREA,
    REPORTS_DIR,
    STRICT_METRICS,
)
from arclayout.core.types import CarouselLayout, Metrics, Placement

SCHEMA_VERSION = "1.0"


def metrics_to_dict(metrics: Metrics) -> dict:
    return dataclasses.asdict(metrics)


def placement_to_dict(index: int, placement: Placement, selected: bool) -> dict:
    return {
        "index": index,
        "selected": selected,
        "offset": {"x": placement.offset_x, "y": placement.offset_y},
        "scale": placement.scale,
        "opacity": placement.opacity,
        "stack_order": placement.stack_order,
        "depth_scale": placement.depth_scale,
        "depth": placement.depth,
        "rotation_deg": placement.rotation_deg,
        "perspective": placement.perspective,
    }


def layout_to_dict(result: CarouselLayout, metrics: Metrics) -> dict:
    """Exact structure for layout.json."""
    arc = result.layout
    return {
        "schema_version": SCHEMA_VERSION,
        "metrics": metrics_to_dict(metrics),
        "layout": {
            "mode": arc.mode,
            "spacing_semantics": arc.spacing_semantics,
            "radius": arc.radius,
            "angular_step": arc.angular_step,
            "angles": list(arc.angles),
            "span": arc.span,
        },
        "placements": [
            placement_to_dict(i, p, i == result.selected_index)
            for i, p in enumerate(result.placements)
        ],
        "summary": {
            "count": arc.count,
            "selected_index": result.selected_index,
            "draw_order": list(result.draw_order),
            "overlaps_detected": result.overlaps_detected,
        },
        "warnings": list(result.warnings),
    }


def run_metadata_dict(run_name: str, count: int, mode: str, selected_index: int | None) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "count": count,
        "mode": mode,
        "selected_index": selected_index,
        "config": {
            "DEPTH_FALLOFF": DEPTH_FALLOFF,
            "MAX_CHORD_RATIO": MAX_CHORD_RATIO,
            "MIN_RADIUS_FLOOR": MIN_RADIUS_FLOOR,
            "MIN_CHORD_FLOOR": MIN_CHORD_FLOOR,
            "OVERLAP_TOLERANCE_AREA": OVERLAP_TOLERANCE_AREA,
            "STRICT_METRICS": STRICT_METRICS,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(report_dir: Path, result: CarouselLayout, metrics: Metrics) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    data = layout_to_dict(result, metrics)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    count: int,
    mode: str,
    selected_index: int | None,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, count, mode, selected_index)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
