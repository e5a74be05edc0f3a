"""
Minimum-border optimizer.

Searches a window around the requested minimum border for the value whose
four resulting border gaps sit closest to ruler snap increments, so the easel
blades can be set to readable marks without straying far from what the user
asked for.

Candidates are scored in ascending order and only a strictly better score
replaces the best, so ties resolve to the smallest border found first.
"""

import math
from typing import Optional

from darkroom_easel.config import OptimizerSettings, PrecisionSettings, get_settings
from darkroom_easel.core.logging import get_logger
from darkroom_easel.geometry.precision import round_to_standard_precision
from darkroom_easel.geometry.print_size import border_gaps

logger = get_logger(__name__)


def search_window(start: float, settings: Optional[OptimizerSettings] = None) -> tuple[float, float]:
    """Return the ``(lower, upper)`` bounds searched around ``start``."""
    settings = settings or get_settings().optimizer
    lower = max(settings.min_search_border, start - settings.search_span)
    upper = start + settings.search_span
    return lower, upper


def snap_distance(value: float, snap: float) -> float:
    """Distance from ``value`` to the nearest multiple of ``snap``."""
    remainder = value % snap
    return min(remainder, snap - remainder)


def optimal_min_border(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    start: float,
    settings: Optional[OptimizerSettings] = None,
    precision: Optional[PrecisionSettings] = None,
) -> float:
    """Find a minimum border near ``start`` that snaps the borders to the ruler.

    Args:
        paper_w: Oriented paper width.
        paper_h: Oriented paper height.
        ratio_w: Aspect ratio width component.
        ratio_h: Aspect ratio height component.
        start: Requested minimum border.
        settings: Optimizer settings. If None, uses global settings.
        precision: Rounding settings. If None, uses global settings.

    Returns:
        The best border, rounded to standard precision and inside the search
        window, or ``start`` unchanged when nothing in the window leaves a
        printable area (or the ratio is degenerate).
    """
    settings = settings or get_settings().optimizer
    if ratio_h == 0 or not math.isfinite(start):
        return start

    ratio = ratio_w / ratio_h
    lower, upper = search_window(start, settings)
    step = max(settings.step, (upper - lower) / settings.adaptive_step_divisor)
    snap = settings.snap
    eps = settings.epsilon

    best: Optional[float] = None
    best_score = float("inf")

    candidate = lower
    while candidate <= upper:
        gaps = border_gaps(paper_w, paper_h, ratio, candidate)
        if gaps is not None:
            score = 0.0
            for gap in gaps:
                score += snap_distance(gap, snap)
                if score >= best_score:
                    break

            if score < best_score - eps:
                best_score = score
                best = candidate
                if best_score < eps:
                    break
        next_candidate = candidate + step
        if next_candidate <= candidate:
            break  # step lost to float precision at huge borders
        candidate = next_candidate

    if best is None:
        logger.debug(f"No printable border within [{lower:.3f}, {upper:.3f}]; keeping {start}")
        return start

    rounded = round_to_standard_precision(best, precision)
    # Rounding must not push the answer out of the window searched
    result = min(max(rounded, lower), upper)
    logger.debug(f"Optimal min border {result} for start {start} (score {best_score:.4f})")
    return result
