# arclayout/core/runner.py
"""
CLI entrypoint: build metrics from flags, run one carousel layout, export
layout.json, run_metadata.json and diagnostic plots. --sweep runs the
evaluation over many item counts instead.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from arclayout.core import error_codes
from arclayout.core.config import (
    DEFAULT_BASE_RADIUS,
    DEFAULT_ITEM_HEIGHT,
    DEFAULT_ITEM_SPACING,
    DEFAULT_ITEM_WIDTH,
    DEFAULT_MAX_ANGLE_DEG,
    DEFAULT_MIN_DEPTH_SCALE,
    DEFAULT_MIN_OPACITY,
    DEFAULT_MIN_RADIUS,
    DEFAULT_MINIMUM_STEP_DEG,
    DEFAULT_MODE,
    DEFAULT_PERSPECTIVE,
    DEFAULT_SELECTED_SCALE_BOOST,
    DEFAULT_VERTICAL_OFFSET,
    LOG_LEVEL,
)
from arclayout.core.layout import run_carousel_layout
from arclayout.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)
from arclayout.core.types import LAYOUT_MODES, Metrics
from arclayout.core.validate import MetricsError

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Arc carousel layout.")
    p.add_argument("--count", type=int, default=7, help="Number of items")
    p.add_argument("--selected", type=int, default=None, help="Selected item index")
    p.add_argument("--mode", choices=LAYOUT_MODES, default=DEFAULT_MODE, help="Layout mode")
    p.add_argument("--item-width", type=float, default=DEFAULT_ITEM_WIDTH, dest="item_width")
    p.add_argument("--item-height", type=float, default=DEFAULT_ITEM_HEIGHT, dest="item_height")
    p.add_argument("--item-spacing", type=float, default=DEFAULT_ITEM_SPACING, dest="item_spacing")
    p.add_argument("--max-angle-deg", type=float, default=DEFAULT_MAX_ANGLE_DEG, dest="max_angle_deg")
    p.add_argument("--min-step-deg", type=float, default=DEFAULT_MINIMUM_STEP_DEG, dest="min_step_deg")
    p.add_argument("--base-radius", type=float, default=DEFAULT_BASE_RADIUS, dest="base_radius")
    p.add_argument("--min-radius", type=float, default=DEFAULT_MIN_RADIUS, dest="min_radius")
    p.add_argument("--max-radius", type=float, default=None, dest="max_radius")
    p.add_argument("--vertical-offset", type=float, default=DEFAULT_VERTICAL_OFFSET, dest="vertical_offset")
    p.add_argument("--perspective", type=float, default=DEFAULT_PERSPECTIVE)
    p.add_argument("--min-depth-scale", type=float, default=DEFAULT_MIN_DEPTH_SCALE, dest="min_depth_scale")
    p.add_argument("--selected-scale", type=float, default=DEFAULT_SELECTED_SCALE_BOOST, dest="selected_scale")
    p.add_argument("--min-opacity", type=float, default=DEFAULT_MIN_OPACITY, dest="min_opacity")
    p.add_argument("--strict", action="store_true", help="Fail on malformed metrics instead of clamping")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default="reports", dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--no-plots", action="store_true", dest="no_plots", help="Skip PNG plots")
    p.add_argument("--sweep", action="store_true", help="Run the evaluation sweep over item counts")
    p.add_argument("--sweep-counts", type=str, default="", dest="sweep_counts", help="Counts for --sweep, e.g. '0,1,5,12'")
    return p.parse_args(argv)


def metrics_from_args(args: argparse.Namespace) -> Metrics:
    return Metrics.from_degrees(
        args.max_angle_deg,
        minimum_step_deg=args.min_step_deg,
        item_width=args.item_width,
        item_height=args.item_height,
        item_spacing=args.item_spacing,
        base_radius=args.base_radius,
        min_radius=args.min_radius,
        max_radius=args.max_radius,
        vertical_offset=args.vertical_offset,
        perspective=args.perspective,
        min_depth_scale=args.min_depth_scale,
        selected_scale_boost=args.selected_scale,
        min_opacity=args.min_opacity,
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    metrics = metrics_from_args(args)

    if args.sweep:
        from arclayout.core.evaluate import _parse_counts, run_evaluation
        out = run_evaluation(
            run_name=args.run_name,
            metrics=metrics,
            counts=_parse_counts(args.sweep_counts),
            repo_root=repo_root,
            output_dir=args.output_dir,
            make_plots=not args.no_plots,
        )
        print(out / "evaluation_results.csv")
        return 0

    try:
        result = run_carousel_layout(
            args.count,
            metrics,
            selected_index=args.selected,
            mode=args.mode,
            strict=True if args.strict else None,
        )
    except MetricsError as e:
        for key in e.error_keys:
            logger.error(error_codes.user_message(key))
        return 2
    except ValueError as e:
        logger.error("%s: %s", error_codes.user_message(error_codes.RUN_FAILED), e)
        return 2

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [write_layout_json(report_dir, result, metrics)]
    write_run_metadata_json(report_dir, args.run_name, args.count, args.mode, result.selected_index)

    if not args.no_plots:
        from arclayout.core.plots import plot_arc_topdown, plot_front_view
        paths.append(plot_arc_topdown(result, report_dir / "arc_topdown.png"))
        paths.append(plot_front_view(result, metrics, report_dir / "front_view.png"))

    for p in paths:
        print(p)
    for key in result.warnings:
        print("Warning:", error_codes.user_message(key))
    print(f"Radius: {result.layout.radius:.2f}  step: {result.layout.angular_step:.4f} rad")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
