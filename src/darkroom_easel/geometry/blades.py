"""
Border and blade-reading arithmetic.
"""

from typing import Optional

from darkroom_easel.core.models import BladeReadings, Borders

NEGATIVE_BLADE_WARNING = "Negative blade reading – use opposite side of scale."
SMALL_BLADE_WARNING = "Many easels have no markings below about 3 in."

# Smallest reading most easel scales are marked for
MIN_MARKED_READING = 3.0


def borders_from_gaps(half_w: float, half_h: float, h: float, v: float) -> Borders:
    """Borders left by a print shifted ``(h, v)`` from center.

    A positive vertical offset moves the print down, widening the top border.
    """
    return Borders(
        left=half_w - h,
        right=half_w + h,
        bottom=half_h - v,
        top=half_h + v,
    )


def blade_readings(print_w: float, print_h: float, scale_x: float, scale_y: float) -> BladeReadings:
    """Scale readings for the four blades.

    Args:
        print_w: Print width.
        print_h: Print height.
        scale_x: Horizontal shift of the print relative to the easel scale.
        scale_y: Vertical shift of the print relative to the easel scale.
    """
    return BladeReadings(
        left=print_w - 2 * scale_x,
        right=print_w + 2 * scale_x,
        top=print_h - 2 * scale_y,
        bottom=print_h + 2 * scale_y,
    )


def blade_warning(readings: BladeReadings) -> Optional[str]:
    """Warn about readings an easel scale cannot show."""
    values = readings.values()
    messages = []
    if any(v < 0 for v in values):
        messages.append(NEGATIVE_BLADE_WARNING)
    if any(abs(v) < MIN_MARKED_READING and v != 0 for v in values):
        messages.append(SMALL_BLADE_WARNING)
    return "\n".join(messages) or None
