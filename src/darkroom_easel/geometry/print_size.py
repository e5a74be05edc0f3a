"""
Print rectangle sizing.

The print is the largest rectangle of the requested aspect ratio that fits
inside the paper once the minimum border is taken off every edge.
"""

from typing import Optional

from darkroom_easel.core.models import PrintSize

_ZERO = PrintSize(print_w=0.0, print_h=0.0)


def fit_ratio(avail_w: float, avail_h: float, ratio: float) -> tuple[float, float]:
    """Largest ``ratio``-shaped rectangle inside ``avail_w x avail_h``.

    Height binds when the available area is wider than the ratio, otherwise
    width binds.
    """
    if avail_w / avail_h > ratio:
        return avail_h * ratio, avail_h
    return avail_w, avail_w / ratio


def border_gaps(
    paper_w: float, paper_h: float, ratio: float, min_border: float
) -> Optional[tuple[float, float, float, float]]:
    """Centered border gaps ``(left, right, top, bottom)`` for a min border.

    Returns None when the border leaves no printable area.
    """
    avail_w = paper_w - 2 * min_border
    avail_h = paper_h - 2 * min_border
    if avail_w <= 0 or avail_h <= 0:
        return None

    print_w, print_h = fit_ratio(avail_w, avail_h, ratio)
    gap_w = (paper_w - print_w) / 2
    gap_h = (paper_h - print_h) / 2
    return gap_w, gap_w, gap_h, gap_h


def compute_print_size(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    min_border: float,
) -> PrintSize:
    """Compute the maximal print for a paper, aspect ratio and min border.

    Args:
        paper_w: Oriented paper width.
        paper_h: Oriented paper height.
        ratio_w: Aspect ratio width component.
        ratio_h: Aspect ratio height component.
        min_border: Border to keep on every edge.

    Returns:
        PrintSize; ``0 x 0`` for degenerate input or when the border
        consumes the paper.

    Example:
        >>> compute_print_size(8, 10, 3, 2, 0.5).print_w
        7.0
    """
    if ratio_h <= 0 or ratio_w <= 0 or paper_w <= 0 or paper_h <= 0 or min_border < 0:
        return _ZERO

    avail_w = paper_w - 2 * min_border
    avail_h = paper_h - 2 * min_border
    if avail_w <= 0 or avail_h <= 0:
        return _ZERO

    print_w, print_h = fit_ratio(avail_w, avail_h, ratio_w / ratio_h)
    return PrintSize(print_w=print_w, print_h=print_h)
