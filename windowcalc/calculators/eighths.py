"""
Eighths-of-an-inch display formatting.

Shop convention: "46.6" means 46 and 6/8 inches, not 46.6 decimal inches.
"""

import math


def round_half_up(value: float) -> int:
    """Nearest integer, ties toward +infinity (1.5 -> 2, 0.5 -> 1)."""
    return math.floor(value + 0.5)


def format_eighths(value) -> str:
    """
    Convert decimal inches to 'whole.eighths'.

    Returns '' for anything that is not a finite number.
    The numerator is never carried: 0.9999 formats as '0.8', not '1.0'.
    Negative values floor, so -0.5 formats as '-1.4'.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ""
    if not math.isfinite(value):
        return ""
    whole = math.floor(value)
    fraction = value - whole
    numerator = round_half_up(fraction * 8)
    return f"{whole}.{numerator}"
