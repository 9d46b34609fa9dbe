# arclayout/core/evaluate.py
"""
Evaluation sweep: run both layout modes over a range of item counts and record
radius, step, span, pitch error and overlaps per case.
Saves evaluation_results.csv and evaluation_summary.json under reports/<run_name>/.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from arclayout.core.config import (
    ANGLE_TOLERANCE_RAD,
    LOG_LEVEL,
    MIN_CHORD_FLOOR,
    SWEEP_COUNTS_DEFAULT,
    SWEEP_MODES_DEFAULT,
)
from arclayout.core.layout import run_carousel_layout
from arclayout.core.reporting import ensure_report_dir, metrics_to_dict
from arclayout.core.types import ArcLayout, Metrics

logger = logging.getLogger(__name__)

RESULT_KEYS = [
    "mode",
    "count",
    "radius",
    "angular_step",
    "span",
    "within_budget",
    "symmetric",
    "max_pitch_error",
    "min_depth_scale",
    "overlaps",
    "duration_ms",
]


def realized_pitches(arc: ArcLayout) -> np.ndarray:
    """
    Distance between adjacent item centers as the mode defines it:
    arc length for fixed_radius, straight-line chord for radius_solving.
    """
    angles = np.asarray(arc.angles, dtype=float)
    if angles.size < 2:
        return np.zeros(0)
    steps = np.diff(angles)
    if arc.spacing_semantics == "arc_length":
        return steps * arc.radius
    return 2.0 * arc.radius * np.sin(steps / 2.0)


def max_pitch_error(arc: ArcLayout, metrics: Metrics) -> float:
    """Largest absolute gap between realized pitch and item_width + item_spacing."""
    pitches = realized_pitches(arc)
    if pitches.size == 0:
        return 0.0
    target = max(MIN_CHORD_FLOOR, metrics.desired_chord)
    return float(np.max(np.abs(pitches - target)))


def is_symmetric(arc: ArcLayout, tol: float = 1e-9) -> bool:
    angles = np.asarray(arc.angles, dtype=float)
    if angles.size == 0:
        return True
    return bool(np.allclose(angles, -angles[::-1], atol=tol, rtol=0.0))


def evaluate_case(count: int, metrics: Metrics, mode: str) -> dict:
    """Run one layout and return its metrics row."""
    t0 = time.perf_counter()
    result = run_carousel_layout(count, metrics, selected_index=count // 2 if count else None, mode=mode)  # type: ignore[arg-type]
    duration_ms = (time.perf_counter() - t0) * 1000.0
    arc = result.layout
    depth_scales = [p.depth_scale for p in result.placements]
    return {
        "mode": mode,
        "count": count,
        "radius": arc.radius,
        "angular_step": arc.angular_step,
        "span": arc.span,
        "within_budget": arc.span <= metrics.max_angle_span + ANGLE_TOLERANCE_RAD,
        "symmetric": is_symmetric(arc),
        "max_pitch_error": max_pitch_error(arc, metrics),
        "min_depth_scale": min(depth_scales) if depth_scales else 1.0,
        "overlaps": result.overlaps_detected,
        "duration_ms": duration_ms,
    }


def _summarize(rows: list[dict], run_name: str) -> dict:
    by_mode: dict[str, list[dict]] = {}
    for r in rows:
        by_mode.setdefault(r["mode"], []).append(r)

    summary: dict = {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "n_cases": len(rows),
        "within_budget_rate": {},
        "symmetric_rate": {},
        "mean_pitch_error": {},
        "overlap_rate": {},
    }
    for mode, list_r in by_mode.items():
        n = len(list_r)
        summary["within_budget_rate"][mode] = sum(1 for r in list_r if r["within_budget"]) / n if n else 0.0
        summary["symmetric_rate"][mode] = sum(1 for r in list_r if r["symmetric"]) / n if n else 0.0
        summary["mean_pitch_error"][mode] = float(np.mean([r["max_pitch_error"] for r in list_r])) if n else 0.0
        summary["overlap_rate"][mode] = sum(1 for r in list_r if r["overlaps"] > 0) / n if n else 0.0
    return summary


def run_evaluation(
    run_name: str = "eval_01",
    metrics: Metrics | None = None,
    counts: tuple[int, ...] = SWEEP_COUNTS_DEFAULT,
    modes: tuple[str, ...] = SWEEP_MODES_DEFAULT,
    repo_root: Path | None = None,
    output_dir: str | None = None,
    make_plots: bool = True,
) -> Path:
    """
    Sweep counts x modes with the given metrics (defaults if None).
    Writes evaluation_results.csv and evaluation_summary.json; returns report_dir.
    """
    root = repo_root or Path.cwd().resolve()
    report_dir = ensure_report_dir(root, run_name, output_dir=output_dir)
    m = metrics or Metrics()

    rows = [evaluate_case(count, m, mode) for mode in modes for count in counts]
    logger.info("Evaluated %d cases across modes %s", len(rows), ", ".join(modes))

    summary = _summarize(rows, run_name)
    summary["metrics"] = metrics_to_dict(m)
    (report_dir / "evaluation_summary.json").write_text(
        json.dumps(summary, indent=2), encoding="utf-8",
    )

    with open(report_dir / "evaluation_results.csv", "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=RESULT_KEYS, extrasaction="ignore")
        w.writeheader()
        for r in rows:
            w.writerow({k: r.get(k, "") for k in RESULT_KEYS})

    if make_plots:
        from arclayout.core.plots import generate_evaluation_plots
        generate_evaluation_plots(report_dir)

    return report_dir


def _parse_counts(s: str) -> tuple[int, ...]:
    """Parse '0,1,5,12' into counts; empty string gives the default sweep."""
    out: list[int] = []
    for part in (s or "").split(","):
        part = part.strip()
        if part:
            try:
                count = int(part)
            except ValueError:
                logger.warning("Ignoring count %r: not an integer", part)
                continue
            if count < 0:
                logger.warning("Ignoring count %d: must be non-negative", count)
                continue
            out.append(count)
    return tuple(out) or SWEEP_COUNTS_DEFAULT


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    p = argparse.ArgumentParser(description="Sweep item counts for both arc layout modes.")
    p.add_argument("--run-name", default="eval_01", dest="run_name", help="Reports subdir name")
    p.add_argument("--counts", default="", help="Item counts, e.g. '0,1,5,12'")
    p.add_argument("--no-plots", action="store_true", dest="no_plots", help="Skip PNG plots")
    p.add_argument("--repo-root", default=None, dest="repo_root")
    args = p.parse_args()
    root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    report_dir = run_evaluation(
        run_name=args.run_name,
        counts=_parse_counts(args.counts),
        repo_root=root,
        make_plots=not args.no_plots,
    )
    print(report_dir)


if __name__ == "__main__":
    main()
