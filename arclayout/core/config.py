# arclayout/core/config.py
"""
Central configuration for the arc-layout engine.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations

import math
import os
from typing import Literal

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Default metrics -----
DEFAULT_ITEM_WIDTH: float = 180.0
DEFAULT_ITEM_HEIGHT: float = 180.0
DEFAULT_ITEM_SPACING: float = 26.0
"""Gap between adjacent item edges; item_width + item_spacing is the pitch."""

DEFAULT_MAX_ANGLE_DEG: float = 110.0
"""Total angular budget for the whole band."""

DEFAULT_MINIMUM_STEP_DEG: float = 0.0

DEFAULT_BASE_RADIUS: float = 700.0
DEFAULT_MIN_RADIUS: float = 240.0
DEFAULT_MAX_RADIUS: float | None = None

DEFAULT_VERTICAL_OFFSET: float = 0.0
DEFAULT_PERSPECTIVE: float = 0.75
DEFAULT_MIN_DEPTH_SCALE: float = 0.62
DEFAULT_SELECTED_SCALE_BOOST: float = 1.06
DEFAULT_MIN_OPACITY: float = 0.55

# ----- Solver -----
DEFAULT_MODE: Literal["fixed_radius", "radius_solving"] = "radius_solving"
"""Layout mode used when none is given: 'fixed_radius' or 'radius_solving'."""

MIN_RADIUS_FLOOR: float = 1.0
"""Radius never drops below this before being used as a denominator."""

MIN_CHORD_FLOOR: float = 1.0
"""Pitch (item_width + item_spacing) never drops below this."""

MAX_CHORD_RATIO: float = 0.999
"""Upper clamp for chord / diameter before asin; keeps the step just under pi."""

# ----- Projection -----
DEPTH_FALLOFF: float = 1.6
"""Depth scale = 1 + z / (radius * DEPTH_FALLOFF). Larger is a gentler falloff."""

# ----- Tolerances -----
ANGLE_TOLERANCE_RAD: float = 1e-9
"""Tolerance for symmetry and span checks."""

OVERLAP_TOLERANCE_AREA: float = 0.5
"""Adjacent footprints sharing more than this area (pt²) count as overlapping."""

# ----- Evaluation sweep -----
SWEEP_COUNTS_DEFAULT: tuple[int, ...] = (0, 1, 2, 3, 5, 8, 12, 20, 40)
SWEEP_MODES_DEFAULT: tuple[str, ...] = ("fixed_radius", "radius_solving")

# ----- Plots -----
PLOT_WIDTH_PX: int = 900
PLOT_HEIGHT_PX: int = 600
PLOT_DPI: int = 100

# ----- Environment flags -----
STRICT_METRICS: bool = os.environ.get("ARCLAYOUT_STRICT", "").lower() in ("1", "true", "yes")
"""Raise on malformed metrics instead of clamping. Set env ARCLAYOUT_STRICT=1."""

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for CLI entrypoints (e.g. LOG_LEVEL=DEBUG)."""

DEFAULT_MAX_ANGLE_RAD: float = math.radians(DEFAULT_MAX_ANGLE_DEG)
DEFAULT_MINIMUM_STEP_RAD: float = math.radians(DEFAULT_MINIMUM_STEP_DEG)
