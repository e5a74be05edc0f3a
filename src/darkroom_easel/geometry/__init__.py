"""
Print geometry: sizing, border optimization, offsets and blade readings.
"""

from darkroom_easel.geometry.blades import blade_readings, blade_warning, borders_from_gaps
from darkroom_easel.geometry.offsets import clamp_offsets, max_offset, validate_print_fits
from darkroom_easel.geometry.optimizer import optimal_min_border, search_window, snap_distance
from darkroom_easel.geometry.precision import (
    format_for_display,
    round_half_up,
    round_to_precision,
    round_to_standard_precision,
)
from darkroom_easel.geometry.print_size import border_gaps, compute_print_size
from darkroom_easel.geometry.quarter_inch import is_quarter_increment, quarter_inch_min_border
from darkroom_easel.geometry.thickness import blade_thickness

__all__ = [
    "blade_readings",
    "blade_thickness",
    "blade_warning",
    "border_gaps",
    "borders_from_gaps",
    "clamp_offsets",
    "compute_print_size",
    "format_for_display",
    "is_quarter_increment",
    "max_offset",
    "optimal_min_border",
    "quarter_inch_min_border",
    "round_half_up",
    "round_to_precision",
    "round_to_standard_precision",
    "search_window",
    "snap_distance",
    "validate_print_fits",
]
