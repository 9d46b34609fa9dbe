# tests/test_validate.py
"""
Deterministic tests for metric precondition checks and error messages.
"""

from __future__ import annotations

import math

import pytest

from arclayout.core import error_codes
from arclayout.core.types import Metrics
from arclayout.core.validate import MetricsError, check_metrics, validate_metrics


def test_default_metrics_valid() -> None:
    assert validate_metrics(Metrics()) == []


@pytest.mark.parametrize(
    "kwargs, key",
    [
        ({"item_width": 0.0}, error_codes.NON_POSITIVE_ITEM_SIZE),
        ({"item_height": -1.0}, error_codes.NON_POSITIVE_ITEM_SIZE),
        ({"item_spacing": 0.0}, error_codes.NON_POSITIVE_SPACING),
        ({"base_radius": 0.0}, error_codes.NON_POSITIVE_RADIUS),
        ({"min_radius": 300.0, "max_radius": 200.0}, error_codes.MAX_RADIUS_BELOW_MIN),
        ({"max_angle_span": -0.1}, error_codes.NEGATIVE_ANGLE_BUDGET),
        ({"minimum_angular_step": -0.1}, error_codes.NEGATIVE_MINIMUM_STEP),
        ({"perspective": 1.5}, error_codes.PERSPECTIVE_OUT_OF_RANGE),
        ({"min_depth_scale": 0.0}, error_codes.NON_POSITIVE_DEPTH_SCALE),
        ({"min_opacity": 1.2}, error_codes.OPACITY_OUT_OF_RANGE),
    ],
)
def test_validate_metrics_reports_violation(kwargs: dict, key: str) -> None:
    assert key in validate_metrics(Metrics(**kwargs))


def test_validate_metrics_non_finite() -> None:
    assert validate_metrics(Metrics(base_radius=math.nan)) == [error_codes.NON_FINITE_VALUE]


def test_check_metrics_strict_raises() -> None:
    with pytest.raises(MetricsError) as exc:
        check_metrics(Metrics(item_width=-1.0, min_opacity=2.0), strict=True)
    assert exc.value.error_keys == [error_codes.NON_POSITIVE_ITEM_SIZE, error_codes.OPACITY_OUT_OF_RANGE]
    assert isinstance(exc.value, ValueError)


def test_check_metrics_lenient_returns_keys() -> None:
    keys = check_metrics(Metrics(item_spacing=-3.0), strict=False)
    assert keys == [error_codes.NON_POSITIVE_SPACING]


def test_user_message() -> None:
    assert error_codes.user_message(error_codes.NON_POSITIVE_SPACING).startswith("Item spacing")
    assert error_codes.user_message(None) == "Something went wrong."
    assert error_codes.user_message("unknown_key", fallback="x") == "x"
