# arclayout/core/smoke.py
"""
Single entrypoint to verify the engine end-to-end: both layout modes with
default metrics, layout.json and plots under reports/smoke_<mode>/.
Does not run on import.
"""

from __future__ import annotations

from pathlib import Path

from arclayout.core.layout import run_carousel_layout
from arclayout.core.plots import plot_arc_topdown, plot_front_view
from arclayout.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json
from arclayout.core.types import LAYOUT_MODES, Metrics

SMOKE_COUNT = 9


def main() -> None:
    """Run both modes with default metrics and the middle item selected."""
    repo_root = Path.cwd().resolve()
    metrics = Metrics()
    selected = SMOKE_COUNT // 2
    for mode in LAYOUT_MODES:
        result = run_carousel_layout(SMOKE_COUNT, metrics, selected_index=selected, mode=mode)  # type: ignore[arg-type]
        if len(result.placements) != SMOKE_COUNT:
            raise RuntimeError(f"{mode}: expected {SMOKE_COUNT} placements, got {len(result.placements)}")
        run_name = f"smoke_{mode}"
        report_dir = ensure_report_dir(repo_root, run_name)
        write_layout_json(report_dir, result, metrics)
        write_run_metadata_json(report_dir, run_name, SMOKE_COUNT, mode, selected)
        plot_arc_topdown(result, report_dir / "arc_topdown.png")
        plot_front_view(result, metrics, report_dir / "front_view.png")


if __name__ == "__main__":
    main()
