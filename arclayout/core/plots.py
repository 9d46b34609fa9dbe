# arclayout/core/plots.py
"""
Diagnostic figures for a layout pass and for evaluation sweeps.
Top-down view of the arc, front view of projected footprints, and
radius / pitch error by item count. Saves PNGs under reports/<run_name>/.
"""

from __future__ import annotations

import csv
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from arclayout.core.config import PLOT_DPI, PLOT_HEIGHT_PX, PLOT_WIDTH_PX
from arclayout.core.geometry import item_footprint
from arclayout.core.types import CarouselLayout, Metrics


def _new_fig() -> tuple[plt.Figure, plt.Axes]:
    fig, ax = plt.subplots(figsize=(PLOT_WIDTH_PX / PLOT_DPI, PLOT_HEIGHT_PX / PLOT_DPI), dpi=PLOT_DPI)
    return fig, ax


def plot_arc_topdown(result: CarouselLayout, output_path: str | Path) -> Path:
    """
    Arc seen from above: circle of the solved radius, camera at the origin side,
    item centers at their angles (selected item highlighted).
    """
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    arc = result.layout
    r = arc.radius

    fig, ax = _new_fig()
    theta = np.linspace(-np.pi, np.pi, 361)
    ax.plot(r * np.sin(theta), r * np.cos(theta) - r, color="lightgray", linewidth=1)
    ax.plot([0.0], [-r], marker="^", color="black", markersize=10, label="arc center")

    if arc.angles:
        angles = np.asarray(arc.angles, dtype=float)
        xs = r * np.sin(angles)
        zs = r * np.cos(angles) - r
        ax.scatter(xs, zs, color="steelblue", zorder=3, label="items")
        if result.selected_index is not None:
            i = result.selected_index
            ax.scatter([xs[i]], [zs[i]], color="crimson", s=80, zorder=4, label="selected")

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("x")
    ax.set_ylabel("z (depth)")
    ax.set_title(f"{arc.mode}: r={r:.1f}, step={np.degrees(arc.angular_step):.2f}°")
    ax.legend(loc="lower right")
    plt.tight_layout()
    fig.savefig(out, dpi=PLOT_DPI)
    plt.close(fig)
    return out


def plot_front_view(result: CarouselLayout, metrics: Metrics, output_path: str | Path) -> Path:
    """Projected item footprints drawn back to front with their opacity."""
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = _new_fig()
    for i in result.draw_order:
        p = result.placements[i]
        fp = item_footprint(p, metrics.item_width, metrics.item_height)
        xy = np.array(fp.exterior.coords)
        color = "crimson" if i == result.selected_index else "steelblue"
        ax.fill(xy[:, 0], xy[:, 1], facecolor=color, edgecolor="navy", linewidth=1, alpha=p.opacity)
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_title(f"Front view ({len(result.placements)} items, overlaps={result.overlaps_detected})")
    ax.invert_yaxis()
    plt.tight_layout()
    fig.savefig(out, dpi=PLOT_DPI)
    plt.close(fig)
    return out


def _load_rows(report_dir: Path) -> list[dict]:
    rows: list[dict] = []
    csv_path = report_dir / "evaluation_results.csv"
    if not csv_path.exists():
        return rows
    with open(csv_path, newline="", encoding="utf-8") as f:
        for r in csv.DictReader(f):
            try:
                r["count"] = int(r.get("count", 0))
                r["radius"] = float(r.get("radius", 0))
                r["max_pitch_error"] = float(r.get("max_pitch_error", 0))
            except (TypeError, ValueError):
                continue
            rows.append(r)
    return rows


def _plot_by_count(report_dir: Path, key: str, ylabel: str, filename: str) -> Path:
    rows = _load_rows(report_dir)
    plots_dir = report_dir / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    out = plots_dir / filename

    by_mode: dict[str, list[tuple[int, float]]] = {}
    for r in rows:
        by_mode.setdefault(r.get("mode", "unknown"), []).append((r["count"], r[key]))

    fig, ax = plt.subplots(figsize=(6, 4))
    for mode, pts in by_mode.items():
        pts.sort()
        ax.plot([c for c, _ in pts], [v for _, v in pts], marker="o", label=mode)
    ax.set_xlabel("Item count")
    ax.set_ylabel(ylabel)
    ax.set_title(f"{ylabel} by item count" if rows else f"{ylabel} (no data)")
    if by_mode:
        ax.legend()
    plt.tight_layout()
    fig.savefig(out, dpi=120)
    plt.close(fig)
    return out


def plot_radius_by_count(report_dir: Path) -> Path:
    return _plot_by_count(report_dir, "radius", "Radius", "radius_by_count.png")


def plot_pitch_error_by_count(report_dir: Path) -> Path:
    return _plot_by_count(report_dir, "max_pitch_error", "Max pitch error", "pitch_error_by_count.png")


def generate_evaluation_plots(report_dir: Path) -> list[Path]:
    """Generate all evaluation plots."""
    return [plot_radius_by_count(report_dir), plot_pitch_error_by_count(report_dir)]
