"""
Domain-specific types and enumerations for easel geometry.
"""

from enum import Enum


class Orientation(str, Enum):
    """Paper orientation on the easel."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def from_landscape(cls, is_landscape: bool) -> "Orientation":
        return cls.LANDSCAPE if is_landscape else cls.PORTRAIT


class SelectionKind(str, Enum):
    """Special selector values for paper size and aspect ratio pickers."""

    CUSTOM = "custom"
    EVEN_BORDERS = "even-borders"  # Aspect ratio only: print matches the paper


class BladeSide(str, Enum):
    """The four easel blades."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
