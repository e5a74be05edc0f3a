"""
Core data models and types for the darkroom easel engine.
"""

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

__all__ = [
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
    # Types
    "BladeSide",
    "Orientation",
    "SelectionKind",
]
