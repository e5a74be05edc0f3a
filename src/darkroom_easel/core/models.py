"""
Core data models for the darkroom easel engine.

All models use Pydantic and are frozen, so results are value-equal and
hashable. Dimension fields carry no range constraints: the engine accepts
degenerate input and answers with fallbacks instead of raising.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from darkroom_easel.core.types import BladeSide, Orientation


class Size(BaseModel):
    """A width/height pair in an abstract length unit (inches in presets)."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def rotated(self) -> "Size":
        """Return the same rectangle turned 90 degrees."""
        return Size(width=self.height, height=self.width)

    def oriented(self, is_landscape: bool) -> "Size":
        return self.rotated() if is_landscape else self

    def contains(self, other: "Size") -> bool:
        """True when ``other`` fits inside without rotation."""
        return self.width >= other.width and self.height >= other.height

    def __str__(self) -> str:
        return f"{self.width:g}x{self.height:g}"


class EaselSize(BaseModel):
    """A standard enlarging easel in the catalog."""

    model_config = ConfigDict(frozen=True)

    label: str
    width: float
    height: float

    @property
    def size(self) -> Size:
        return Size(width=self.width, height=self.height)

    @property
    def area(self) -> float:
        return self.width * self.height


class FitResult(BaseModel):
    """Outcome of fitting a paper onto the easel catalog.

    ``effective_slot`` is the part of the chosen easel the paper occupies
    after orientation; it is never smaller than the oriented paper.
    """

    model_config = ConfigDict(frozen=True)

    easel_size: Size
    effective_slot: Size
    is_non_standard_paper_size: bool


class PrintSize(BaseModel):
    """Printed image rectangle."""

    model_config = ConfigDict(frozen=True)

    print_w: float
    print_h: float

    @property
    def is_degenerate(self) -> bool:
        return self.print_w <= 0 or self.print_h <= 0


class OffsetResult(BaseModel):
    """Clamped print offsets plus the centering slack they were bounded by."""

    model_config = ConfigDict(frozen=True)

    h: float
    v: float
    half_w: float
    half_h: float
    warning: Optional[str] = None


class Borders(BaseModel):
    """Border widths on each side of the print."""

    model_config = ConfigDict(frozen=True)

    left: float
    right: float
    top: float
    bottom: float


class BladeReadings(BaseModel):
    """Ruler positions for the four easel blades."""

    model_config = ConfigDict(frozen=True)

    left: float
    right: float
    top: float
    bottom: float

    def get(self, side: BladeSide) -> float:
        return getattr(self, BladeSide(side).value)

    def values(self) -> list[float]:
        return [self.left, self.right, self.top, self.bottom]


class AspectRatio(BaseModel):
    """Aspect ratio preset; ``width``/``height`` are absent for special entries."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    width: Optional[float] = None
    height: Optional[float] = None


class PaperSize(BaseModel):
    """Paper size preset in inches."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    width: float
    height: float


class BorderSettings(BaseModel):
    """Complete set of inputs for one border calculation.

    The ``last_valid_*`` fields hold the most recent accepted custom values,
    which stand in whenever the current entry is rejected.
    """

    model_config = ConfigDict(frozen=True)

    aspect_ratio: str = Field(default="3:2")
    paper_size: str = Field(default="8x10")
    custom_aspect_width: float = 2.0
    custom_aspect_height: float = 3.0
    custom_paper_width: float = 13.0
    custom_paper_height: float = 10.0
    min_border: float = 0.5
    enable_offset: bool = False
    ignore_min_border: bool = False
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    is_landscape: bool = True
    is_ratio_flipped: bool = False

    last_valid_min_border: float = 0.5
    last_valid_custom_aspect_width: Optional[float] = None
    last_valid_custom_aspect_height: Optional[float] = None
    last_valid_custom_paper_width: Optional[float] = None
    last_valid_custom_paper_height: Optional[float] = None

    @property
    def orientation(self) -> Orientation:
        return Orientation.from_landscape(self.is_landscape)


class BorderPreset(BaseModel):
    """A named, reusable set of border settings."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    settings: BorderSettings


class BorderCalculation(BaseModel):
    """Full result of a border calculation."""

    model_config = ConfigDict(frozen=True)

    # Borders
    left_border: float
    right_border: float
    top_border: float
    bottom_border: float

    # Print and (oriented) paper dimensions
    print_width: float
    print_height: float
    paper_width: float
    paper_height: float

    # Percentages of the paper
    print_width_percent: float
    print_height_percent: float
    left_border_percent: float
    right_border_percent: float
    top_border_percent: float
    bottom_border_percent: float

    # Blade setup
    left_blade_reading: float
    right_blade_reading: float
    top_blade_reading: float
    bottom_blade_reading: float
    blade_thickness: int

    # Easel
    is_non_standard_paper_size: bool
    easel_size: Size
    easel_size_label: str

    # Warnings
    offset_warning: Optional[str] = None
    blade_warning: Optional[str] = None
    min_border_warning: Optional[str] = None
    paper_size_warning: Optional[str] = None

    last_valid_min_border: float
    clamped_horizontal_offset: float
    clamped_vertical_offset: float

    @property
    def borders(self) -> Borders:
        return Borders(
            left=self.left_border,
            right=self.right_border,
            top=self.top_border,
            bottom=self.bottom_border,
        )

    @property
    def blade_readings(self) -> BladeReadings:
        return BladeReadings(
            left=self.left_blade_reading,
            right=self.right_blade_reading,
            top=self.top_blade_reading,
            bottom=self.bottom_blade_reading,
        )

    @property
    def warnings(self) -> list[str]:
        """All active warnings, in display order."""
        return [
            w
            for w in (
                self.paper_size_warning,
                self.min_border_warning,
                self.offset_warning,
                self.blade_warning,
            )
            if w
        ]
