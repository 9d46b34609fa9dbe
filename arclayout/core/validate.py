# arclayout/core/validate.py
"""
Precondition checks for Metrics. The engine clamps best-effort on bad input;
these checks make violations visible (warnings) or fatal (strict mode).
"""

from __future__ import annotations

import dataclasses
import logging
import math

from arclayout.core import error_codes
from arclayout.core.config import STRICT_METRICS
from arclayout.core.types import Metrics

logger = logging.getLogger(__name__)


class MetricsError(ValueError):
    """Raised in strict mode when metrics violate their invariants."""

    def __init__(self, error_keys: list[str]) -> None:
        self.error_keys = list(error_keys)
        detail = "; ".join(error_codes.user_message(k) for k in self.error_keys)
        super().__init__(f"Invalid layout metrics: {detail}")


def validate_metrics(metrics: Metrics) -> list[str]:
    """Return error keys for every violated invariant (empty list when valid)."""
    errors: list[str] = []
    values = [v for v in dataclasses.astuple(metrics) if v is not None]
    if any(not math.isfinite(float(v)) for v in values):
        # Comparisons below are meaningless with NaN
        return [error_codes.NON_FINITE_VALUE]
    if metrics.item_width <= 0 or metrics.item_height <= 0:
        errors.append(error_codes.NON_POSITIVE_ITEM_SIZE)
    if metrics.item_spacing <= 0:
        errors.append(error_codes.NON_POSITIVE_SPACING)
    if metrics.base_radius <= 0 or metrics.min_radius <= 0:
        errors.append(error_codes.NON_POSITIVE_RADIUS)
    if metrics.max_radius is not None and metrics.max_radius < metrics.min_radius:
        errors.append(error_codes.MAX_RADIUS_BELOW_MIN)
    if metrics.max_angle_span < 0:
        errors.append(error_codes.NEGATIVE_ANGLE_BUDGET)
    if metrics.minimum_angular_step < 0:
        errors.append(error_codes.NEGATIVE_MINIMUM_STEP)
    if not 0.0 <= metrics.perspective <= 1.0:
        errors.append(error_codes.PERSPECTIVE_OUT_OF_RANGE)
    if metrics.min_depth_scale <= 0:
        errors.append(error_codes.NON_POSITIVE_DEPTH_SCALE)
    if not 0.0 <= metrics.min_opacity <= 1.0:
        errors.append(error_codes.OPACITY_OUT_OF_RANGE)
    return errors


def check_metrics(metrics: Metrics, strict: bool | None = None) -> list[str]:
    """
    Validate metrics. In strict mode (argument, or ARCLAYOUT_STRICT env when None)
    raise MetricsError; otherwise log a warning and return the error keys.
    """
    errors = validate_metrics(metrics)
    if not errors:
        return errors
    if STRICT_METRICS if strict is None else strict:
        raise MetricsError(errors)
    logger.warning("Malformed metrics, clamping best-effort: %s", ", ".join(errors))
    return errors
