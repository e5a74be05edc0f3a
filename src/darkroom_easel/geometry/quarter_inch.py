"""
Quarter-inch min-border rounding.

Suggests the smallest move of the minimum border that makes both print
dimensions land on quarter-inch marks, trying the largest print first.
"""

import math
from typing import Optional

from darkroom_easel.geometry.precision import round_to_standard_precision
from darkroom_easel.geometry.print_size import compute_print_size

QUARTER_INCH = 0.25
EPSILON = 0.0001
INCREMENT_TOLERANCE = 0.001


def is_quarter_increment(value: float) -> bool:
    if not math.isfinite(value):
        return False
    scaled = value / QUARTER_INCH
    return abs(scaled - round(scaled)) < INCREMENT_TOLERANCE


def quarter_inch_min_border(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    current_min_border: float,
    print_w: float,
    print_h: float,
) -> Optional[float]:
    """Min border that puts the print on quarter-inch dimensions.

    Args:
        paper_w: Oriented paper width.
        paper_h: Oriented paper height.
        ratio_w: Oriented aspect ratio width.
        ratio_h: Oriented aspect ratio height.
        current_min_border: Border in use now; suggestions never go below it.
        print_w: Current print width.
        print_h: Current print height.

    Returns:
        The suggested border rounded to standard precision, or None when the
        input is degenerate, the print is already aligned, or no candidate
        within a quarter inch of the current print works.
    """
    if min(paper_w, paper_h, ratio_w, ratio_h, print_w, print_h) <= 0:
        return None
    if is_quarter_increment(print_w) and is_quarter_increment(print_h):
        return None

    unit_w = ratio_w * QUARTER_INCH
    unit_h = ratio_h * QUARTER_INCH
    multiplier = min(
        math.floor((print_w + EPSILON) / unit_w),
        math.floor((print_h + EPSILON) / unit_h),
    )

    def evaluate(candidate: float) -> Optional[float]:
        if not math.isfinite(candidate) or candidate < current_min_border - EPSILON:
            return None

        size = compute_print_size(paper_w, paper_h, ratio_w, ratio_h, candidate)
        if (
            size.is_degenerate
            or size.print_w > print_w + QUARTER_INCH
            or size.print_h > print_h + QUARTER_INCH
        ):
            return None
        if not (is_quarter_increment(size.print_w) and is_quarter_increment(size.print_h)):
            return None

        rounded = round_to_standard_precision(max(candidate, 0.0))
        if abs(rounded - current_min_border) < EPSILON:
            return None
        return rounded

    while multiplier > 0:
        from_width = (paper_w - unit_w * multiplier) / 2
        suggestion = evaluate(from_width)
        if suggestion is not None:
            return suggestion

        from_height = (paper_h - unit_h * multiplier) / 2
        if abs(from_height - from_width) > EPSILON:
            suggestion = evaluate(from_height)
            if suggestion is not None:
                return suggestion

        multiplier -= 1

    return None
