"""
Border calculator and its presets.
"""

from darkroom_easel.calculator.border_calculator import BorderCalculator, ResolvedDimensions
from darkroom_easel.calculator.presets import (
    ASPECT_RATIO_MAP,
    ASPECT_RATIOS,
    DEFAULT_BORDER_PRESETS,
    DEFAULT_MIN_BORDER,
    PAPER_SIZE_MAP,
    PAPER_SIZES,
    border_slider_labels,
    get_aspect_ratio,
    get_paper_size,
)

__all__ = [
    "ASPECT_RATIO_MAP",
    "ASPECT_RATIOS",
    "BorderCalculator",
    "DEFAULT_BORDER_PRESETS",
    "DEFAULT_MIN_BORDER",
    "PAPER_SIZE_MAP",
    "PAPER_SIZES",
    "ResolvedDimensions",
    "border_slider_labels",
    "get_aspect_ratio",
    "get_paper_size",
]
