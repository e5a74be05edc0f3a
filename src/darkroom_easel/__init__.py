"""
Darkroom Easel - border and easel geometry for enlarger printing.

This package provides the calculations behind a darkroom border calculator:

- Fitting paper sizes onto a catalog of standard enlarging easels
- A bounded FIFO cache of easel fits
- Print sizing for any aspect ratio and minimum border
- A minimum-border optimizer that snaps borders to readable ruler marks
- Offset clamping and blade-reading derivation
- A composing calculator producing borders, blade readings and warnings
"""

__version__ = "1.0.0"

# Configuration
from darkroom_easel.config import Settings, configure, get_settings

# Core models
from darkroom_easel.core.models import (
    AspectRatio,
    BladeReadings,
    BorderCalculation,
    BorderPreset,
    Borders,
    BorderSettings,
    EaselSize,
    FitResult,
    OffsetResult,
    PaperSize,
    PrintSize,
    Size,
)
from darkroom_easel.core.types import BladeSide, Orientation, SelectionKind

# Easels
from darkroom_easel.easel import (
    DEFAULT_CATALOG,
    EaselCatalog,
    FitCache,
    get_cached_fit,
    get_fit_cache,
    reset_fit_cache,
    resolve_fit,
)

# Geometry
from darkroom_easel.geometry import (
    blade_readings,
    blade_thickness,
    blade_warning,
    borders_from_gaps,
    clamp_offsets,
    compute_print_size,
    optimal_min_border,
    quarter_inch_min_border,
    round_to_standard_precision,
    validate_print_fits,
)

# Calculator
from darkroom_easel.calculator import BorderCalculator

__all__ = [
    "__version__",
    # Config
    "Settings",
    "configure",
    "get_settings",
    # Models
    "AspectRatio",
    "BladeReadings",
    "BorderCalculation",
    "BorderPreset",
    "Borders",
    "BorderSettings",
    "EaselSize",
    "FitResult",
    "OffsetResult",
    "PaperSize",
    "PrintSize",
    "Size",
    "BladeSide",
    "Orientation",
    "SelectionKind",
    # Easels
    "DEFAULT_CATALOG",
    "EaselCatalog",
    "FitCache",
    "get_cached_fit",
    "get_fit_cache",
    "reset_fit_cache",
    "resolve_fit",
    # Geometry
    "blade_readings",
    "blade_thickness",
    "blade_warning",
    "borders_from_gaps",
    "clamp_offsets",
    "compute_print_size",
    "optimal_min_border",
    "quarter_inch_min_border",
    "round_to_standard_precision",
    "validate_print_fits",
    # Calculator
    "BorderCalculator",
]
