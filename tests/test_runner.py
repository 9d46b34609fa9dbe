# tests/test_runner.py
"""
CLI entrypoint: layout run writes layout.json and plots; strict mode rejects
malformed metrics with a non-zero exit code; --sweep writes evaluation CSV.
"""

from __future__ import annotations

import json
from pathlib import Path

from arclayout.core.runner import main


def test_runner_writes_layout(tmp_path: Path) -> None:
    code = main(["--count", "5", "--selected", "2", "--run-name", "cli", "--repo-root", str(tmp_path)])
    assert code == 0
    report_dir = tmp_path / "reports" / "cli"
    data = json.loads((report_dir / "layout.json").read_text(encoding="utf-8"))
    assert data["summary"]["count"] == 5
    assert data["summary"]["selected_index"] == 2
    assert (report_dir / "run_metadata.json").exists()
    assert (report_dir / "arc_topdown.png").exists()
    assert (report_dir / "front_view.png").exists()


def test_runner_fixed_radius_degrees(tmp_path: Path) -> None:
    code = main([
        "--count", "3", "--mode", "fixed_radius", "--max-angle-deg", "90",
        "--no-plots", "--repo-root", str(tmp_path),
    ])
    assert code == 0
    data = json.loads((tmp_path / "reports" / "run" / "layout.json").read_text(encoding="utf-8"))
    assert data["layout"]["mode"] == "fixed_radius"
    assert data["layout"]["radius"] == 700.0


def test_runner_strict_rejects_bad_metrics(tmp_path: Path) -> None:
    code = main(["--item-width", "-5", "--strict", "--no-plots", "--repo-root", str(tmp_path)])
    assert code == 2
    assert not (tmp_path / "reports" / "run" / "layout.json").exists()


def test_runner_negative_count_fails(tmp_path: Path) -> None:
    assert main(["--count", "-1", "--no-plots", "--repo-root", str(tmp_path)]) == 2


def test_runner_sweep(tmp_path: Path) -> None:
    code = main(["--sweep", "--sweep-counts", "1,4", "--no-plots", "--run-name", "sw", "--repo-root", str(tmp_path)])
    assert code == 0
    assert (tmp_path / "reports" / "sw" / "evaluation_results.csv").exists()
