"""
Print offset clamping.

An offset slides the print off-center. Each axis can move at most by the
centering slack on that axis, less the minimum border unless the caller has
chosen to ignore it.
"""

from darkroom_easel.core.logging import get_logger
from darkroom_easel.core.models import OffsetResult

logger = get_logger(__name__)

OFFSET_WARNING_PAPER_EDGE = "Offset adjusted to keep print on paper."
OFFSET_WARNING_MIN_BORDER = "Offset adjusted to honour min-border."


def max_offset(half: float, min_border: float, ignore_min_border: bool) -> float:
    """Largest offset magnitude allowed on an axis with ``half`` slack.

    Never negative, so the clamp interval ``[-max, +max]`` cannot invert.
    """
    limit = half if ignore_min_border else min(half - min_border, half)
    return max(limit, 0.0)


def _clamp(value: float, limit: float) -> float:
    return min(limit, max(-limit, value))


def clamp_offsets(
    paper_w: float,
    paper_h: float,
    print_w: float,
    print_h: float,
    min_border: float,
    offset_h: float,
    offset_v: float,
    ignore_min_border: bool,
) -> OffsetResult:
    """Bound requested offsets so the print stays where it physically can.

    Args:
        paper_w: Oriented paper width.
        paper_h: Oriented paper height.
        print_w: Print width.
        print_h: Print height.
        min_border: Minimum border to honour.
        offset_h: Requested horizontal offset.
        offset_v: Requested vertical offset.
        ignore_min_border: Allow the print to reach the paper edge.

    Returns:
        OffsetResult with the clamped offsets, the centering slack per axis,
        and a warning when either offset had to change.
    """
    half_w = (paper_w - print_w) / 2
    half_h = (paper_h - print_h) / 2

    h = _clamp(offset_h, max_offset(half_w, min_border, ignore_min_border))
    v = _clamp(offset_v, max_offset(half_h, min_border, ignore_min_border))

    warning = None
    if h != offset_h or v != offset_v:
        warning = OFFSET_WARNING_PAPER_EDGE if ignore_min_border else OFFSET_WARNING_MIN_BORDER
        logger.debug(f"Offsets ({offset_h}, {offset_v}) clamped to ({h}, {v})")

    return OffsetResult(h=h, v=v, half_w=half_w, half_h=half_h, warning=warning)


def validate_print_fits(
    paper_w: float,
    paper_h: float,
    print_w: float,
    print_h: float,
    offset_h: float,
    offset_v: float,
) -> bool:
    """True when the offset print leaves a non-negative border on every side."""
    half_w = (paper_w - print_w) / 2
    half_h = (paper_h - print_h) / 2
    return (
        half_w - offset_h >= 0
        and half_w + offset_h >= 0
        and half_h - offset_v >= 0
        and half_h + offset_v >= 0
    )
