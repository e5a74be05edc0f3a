"""
Rounding helpers shared by the geometry calculations.

Rounding is half-up (2.5 -> 3, -2.5 -> -2), which is how ruler values have
always been rounded in the calculator; Python's built-in ``round`` rounds
half to even and would disagree on exact halves.
"""

import math
from typing import Optional

from darkroom_easel.config import PrecisionSettings, get_settings


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves towards positive infinity."""
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def round_to_precision(value: float, places: Optional[int] = None) -> float:
    """Round ``value`` to ``places`` decimals (default: configured precision).

    Examples:
        >>> round_to_precision(3.14159, 2)
        3.14
        >>> round_to_precision(2.5, 0)
        3.0
    """
    if places is None:
        places = get_settings().precision.decimal_places
    multiplier = 10**places
    return round_half_up(value * multiplier) / multiplier


def round_to_standard_precision(
    value: float, settings: Optional[PrecisionSettings] = None
) -> float:
    """Round using the application's standard precision (2 decimals by default)."""
    settings = settings or get_settings().precision
    multiplier = settings.rounding_multiplier
    return round_half_up(value * multiplier) / multiplier


def format_for_display(value: float, settings: Optional[PrecisionSettings] = None) -> str:
    """Format a value for display, hiding floating point noise.

    Examples:
        >>> format_for_display(3.14159)
        '3.142'
        >>> format_for_display(1.00001)
        '1'
    """
    settings = settings or get_settings().precision
    multiplier = 10**settings.display_places
    rounded = round_half_up(value * multiplier) / multiplier
    if not math.isfinite(rounded):
        return str(value)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{settings.display_places}f}".rstrip("0").rstrip(".")
