# tests/test_smoke_contract.py
"""
Validate CarouselLayout serializes to the layout.json schema shape; required keys exist.
Smoke test: run a full layout, write reports, and read them back.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from arclayout.core.layout import run_carousel_layout
from arclayout.core.reporting import (
    SCHEMA_VERSION,
    ensure_report_dir,
    layout_to_dict,
    write_layout_json,
    write_run_metadata_json,
)
from arclayout.core.types import Metrics


REQUIRED_KEYS = [
    "schema_version",
    ("metrics", "item_width"),
    ("metrics", "max_angle_span"),
    ("layout", "mode"),
    ("layout", "spacing_semantics"),
    ("layout", "radius"),
    ("layout", "angular_step"),
    ("layout", "angles"),
    ("summary", "count"),
    ("summary", "selected_index"),
    ("summary", "draw_order"),
    ("summary", "overlaps_detected"),
    "placements",
    "warnings",
]

PLACEMENT_KEYS = ("index", "selected", "offset", "scale", "opacity", "stack_order", "rotation_deg")


def test_layout_schema_required_keys_exist() -> None:
    m = Metrics()
    data = layout_to_dict(run_carousel_layout(5, m, selected_index=1), m)
    assert data["schema_version"] == SCHEMA_VERSION
    for key in REQUIRED_KEYS:
        if isinstance(key, tuple):
            obj = data
            for k in key:
                assert k in obj, f"Missing key: {key}"
                obj = obj[k]
        else:
            assert key in data, f"Missing key: {key}"
    assert len(data["placements"]) == 5
    for p in data["placements"]:
        for k in PLACEMENT_KEYS:
            assert k in p, f"Missing placement key: {k}"
    assert [p["selected"] for p in data["placements"]] == [False, True, False, False, False]


def test_layout_json_roundtrip() -> None:
    m = Metrics(max_radius=2000.0)
    result = run_carousel_layout(3, m, mode="fixed_radius")
    loaded = json.loads(json.dumps(layout_to_dict(result, m)))
    assert loaded["layout"]["mode"] == "fixed_radius"
    assert loaded["layout"]["angles"] == pytest.approx(list(result.layout.angles))
    assert loaded["metrics"]["max_radius"] == 2000.0
    assert loaded["summary"]["selected_index"] is None


def test_write_reports(tmp_path: Path) -> None:
    m = Metrics()
    result = run_carousel_layout(7, m, selected_index=3)
    report_dir = ensure_report_dir(tmp_path, "smoke")
    assert report_dir.is_dir()
    layout_path = write_layout_json(report_dir, result, m)
    meta_path = write_run_metadata_json(report_dir, "smoke", 7, "radius_solving", 3)
    layout = json.loads(layout_path.read_text(encoding="utf-8"))
    meta = json.loads(meta_path.read_text(encoding="utf-8"))
    assert layout["summary"]["count"] == 7
    assert meta["run_name"] == "smoke"
    assert meta["config"]["DEPTH_FALLOFF"] == 1.6


def test_smoke_main_writes_both_modes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    from arclayout.core import smoke

    monkeypatch.chdir(tmp_path)
    smoke.main()
    for mode in ("fixed_radius", "radius_solving"):
        report_dir = tmp_path / "reports" / f"smoke_{mode}"
        data = json.loads((report_dir / "layout.json").read_text(encoding="utf-8"))
        assert data["layout"]["mode"] == mode
        assert (report_dir / "arc_topdown.png").exists()
