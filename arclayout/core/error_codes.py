"""
Structured error codes for malformed layout metrics and run failures.
Use these keys in warnings and exceptions; map to user-facing messages in the CLI.
"""

# Known error keys (returned from validate_metrics)
NON_POSITIVE_ITEM_SIZE = "non_positive_item_size"
NON_POSITIVE_SPACING = "non_positive_spacing"
NON_POSITIVE_RADIUS = "non_positive_radius"
MAX_RADIUS_BELOW_MIN = "max_radius_below_min"
NEGATIVE_ANGLE_BUDGET = "negative_angle_budget"
NEGATIVE_MINIMUM_STEP = "negative_minimum_step"
PERSPECTIVE_OUT_OF_RANGE = "perspective_out_of_range"
NON_POSITIVE_DEPTH_SCALE = "non_positive_depth_scale"
OPACITY_OUT_OF_RANGE = "opacity_out_of_range"
NON_FINITE_VALUE = "non_finite_value"
SELECTION_OUT_OF_RANGE = "selection_out_of_range"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    NON_POSITIVE_ITEM_SIZE: "Item width and height must be greater than zero.",
    NON_POSITIVE_SPACING: "Item spacing must be greater than zero.",
    NON_POSITIVE_RADIUS: "Base and minimum radius must be greater than zero.",
    MAX_RADIUS_BELOW_MIN: "Maximum radius is smaller than minimum radius; the maximum wins.",
    NEGATIVE_ANGLE_BUDGET: "Maximum angle span must not be negative.",
    NEGATIVE_MINIMUM_STEP: "Minimum angular step must not be negative.",
    PERSPECTIVE_OUT_OF_RANGE: "Perspective must be between 0 and 1.",
    NON_POSITIVE_DEPTH_SCALE: "Minimum depth scale must be greater than zero.",
    OPACITY_OUT_OF_RANGE: "Minimum opacity must be between 0 and 1.",
    NON_FINITE_VALUE: "Metrics contain NaN or infinite values.",
    SELECTION_OUT_OF_RANGE: "Selected index is outside the item range; nothing is highlighted.",
    RUN_FAILED: "Layout run failed. Check metrics and inputs.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
