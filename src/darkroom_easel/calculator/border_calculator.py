"""
Border calculator composing the easel and geometry engines.

Turns one set of user settings into a complete border calculation: the
validated, oriented paper and ratio, the print size, clamped offsets, the
four borders, the easel fit and the blade readings with their warnings.
"""

from dataclasses import dataclass
from functools import partial
from typing import Optional

from darkroom_easel.config import Settings, get_settings
from darkroom_easel.core.logging import LogContext, LoggingMixin, log_operation
from darkroom_easel.core.models import BorderCalculation, BorderSettings, Size
from darkroom_easel.core.types import SelectionKind
from darkroom_easel.easel.cache import FitCache
from darkroom_easel.easel.catalog import DEFAULT_CATALOG, EaselCatalog
from darkroom_easel.easel.fit import resolve_fit
from darkroom_easel.geometry.blades import blade_readings, blade_warning, borders_from_gaps
from darkroom_easel.geometry.offsets import clamp_offsets
from darkroom_easel.geometry.optimizer import optimal_min_border
from darkroom_easel.geometry.print_size import compute_print_size
from darkroom_easel.geometry.quarter_inch import quarter_inch_min_border
from darkroom_easel.geometry.thickness import blade_thickness
from darkroom_easel.calculator.presets import (
    DEFAULT_CUSTOM_ASPECT_HEIGHT,
    DEFAULT_CUSTOM_ASPECT_WIDTH,
    DEFAULT_CUSTOM_PAPER_HEIGHT,
    DEFAULT_CUSTOM_PAPER_WIDTH,
    get_aspect_ratio,
    get_paper_size,
)


@dataclass(frozen=True)
class ResolvedDimensions:
    """Paper, ratio and min border after preset lookup and validation."""

    paper: Size
    is_custom_paper: bool
    paper_size_warning: Optional[str]
    ratio: Size
    oriented_paper: Size
    oriented_ratio: Size
    min_border: float
    min_border_warning: Optional[str]
    last_valid_min_border: float


def _positive_or(value: float, *fallbacks: Optional[float]) -> float:
    """First strictly positive value among ``value`` and ``fallbacks``."""
    for candidate in (value, *fallbacks):
        if candidate is not None and candidate > 0:
            return candidate
    return fallbacks[-1] if fallbacks else value


class BorderCalculator(LoggingMixin):
    """Calculate borders, blade readings and easel fit for darkroom prints.

    The calculator owns its fit cache unless one is injected, so separate
    calculators (or tests) never share cached fits by accident.

    Example:
        >>> calc = BorderCalculator()
        >>> result = calc.calculate(BorderSettings(paper_size="8x10", aspect_ratio="3:2"))
        >>> result.easel_size_label
        '8x10'
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[FitCache] = None,
        catalog: Optional[EaselCatalog] = None,
    ):
        """Initialize the calculator.

        Args:
            settings: Application settings. If None, uses global settings.
            cache: Fit cache to use. If None, a private cache is created.
            catalog: Easel catalog. Defaults to the standard easels.
        """
        self.settings = settings or get_settings()
        self.catalog = catalog or DEFAULT_CATALOG
        if cache is None:
            resolver = partial(resolve_fit, catalog=self.catalog)
            cache = FitCache(resolver=resolver, settings=self.settings.cache)
        self.cache = cache

    # ------------------------------------------------------------------
    # Dimension resolution
    # ------------------------------------------------------------------

    def resolve_dimensions(self, settings: BorderSettings) -> ResolvedDimensions:
        """Resolve presets, orientation and the usable minimum border."""
        is_custom = settings.paper_size == SelectionKind.CUSTOM
        if is_custom:
            paper = Size(
                width=_positive_or(
                    settings.custom_paper_width,
                    settings.last_valid_custom_paper_width,
                    DEFAULT_CUSTOM_PAPER_WIDTH,
                ),
                height=_positive_or(
                    settings.custom_paper_height,
                    settings.last_valid_custom_paper_height,
                    DEFAULT_CUSTOM_PAPER_HEIGHT,
                ),
            )
        else:
            preset = get_paper_size(settings.paper_size)
            paper = Size(width=preset.width, height=preset.height)

        paper_size_warning = self._paper_size_warning(paper) if is_custom else None

        if settings.aspect_ratio == SelectionKind.EVEN_BORDERS:
            ratio = Size(
                width=paper.width if paper.width > 0 else 1,
                height=paper.height if paper.height > 0 else 1,
            )
        elif settings.aspect_ratio == SelectionKind.CUSTOM:
            ratio = Size(
                width=_positive_or(
                    settings.custom_aspect_width,
                    settings.last_valid_custom_aspect_width,
                    DEFAULT_CUSTOM_ASPECT_WIDTH,
                ),
                height=_positive_or(
                    settings.custom_aspect_height,
                    settings.last_valid_custom_aspect_height,
                    DEFAULT_CUSTOM_ASPECT_HEIGHT,
                ),
            )
        else:
            preset_ratio = get_aspect_ratio(settings.aspect_ratio)
            ratio = Size(width=preset_ratio.width or 1, height=preset_ratio.height or 1)

        oriented_paper = paper.oriented(settings.is_landscape)
        if settings.aspect_ratio == SelectionKind.EVEN_BORDERS:
            oriented_ratio = oriented_paper
        elif settings.is_ratio_flipped:
            oriented_ratio = ratio.rotated()
        else:
            oriented_ratio = ratio

        min_border, min_border_warning = self._validate_min_border(
            settings.min_border, settings.last_valid_min_border, oriented_paper
        )

        return ResolvedDimensions(
            paper=paper,
            is_custom_paper=is_custom,
            paper_size_warning=paper_size_warning,
            ratio=ratio,
            oriented_paper=oriented_paper,
            oriented_ratio=oriented_ratio,
            min_border=min_border,
            min_border_warning=min_border_warning,
            last_valid_min_border=min_border,
        )

    def _paper_size_warning(self, paper: Size) -> Optional[str]:
        max_dimension = self.catalog.max_dimension
        if paper.width <= max_dimension and paper.height <= max_dimension:
            return None
        largest = self.catalog.by_area[-1]
        short_side = min(largest.width, largest.height)
        long_side = max(largest.width, largest.height)
        return (
            f"Custom paper ({paper.width:g}×{paper.height:g}) exceeds largest "
            f'standard easel ({short_side:g}×{long_side:g}").'
        )

    @staticmethod
    def _validate_min_border(
        requested: float, last_valid: float, oriented_paper: Size
    ) -> tuple[float, Optional[str]]:
        max_border = min(oriented_paper.width, oriented_paper.height) / 2
        if requested < 0:
            return last_valid, f"Border cannot be negative; using {last_valid:g}."
        if requested >= max_border and max_border > 0:
            return last_valid, f"Minimum border too large; using {last_valid:g}."
        return requested, None

    # ------------------------------------------------------------------
    # Calculation
    # ------------------------------------------------------------------

    def calculate(self, settings: BorderSettings) -> BorderCalculation:
        """Run the full border calculation for one set of settings."""
        with LogContext(
            paper_size=settings.paper_size,
            aspect_ratio=settings.aspect_ratio,
            orientation=settings.orientation.value,
        ):
            with log_operation(self.logger, "border_calculation"):
                return self._calculate(settings)

    def _calculate(self, settings: BorderSettings) -> BorderCalculation:
        dims = self.resolve_dimensions(settings)
        paper = dims.oriented_paper
        ratio = dims.oriented_ratio

        print_size = compute_print_size(
            paper.width, paper.height, ratio.width, ratio.height, dims.min_border
        )

        offsets = clamp_offsets(
            paper.width,
            paper.height,
            print_size.print_w,
            print_size.print_h,
            dims.min_border,
            settings.horizontal_offset if settings.enable_offset else 0.0,
            settings.vertical_offset if settings.enable_offset else 0.0,
            settings.ignore_min_border,
        )
        borders = borders_from_gaps(offsets.half_w, offsets.half_h, offsets.h, offsets.v)

        fit = self.cache.get(dims.paper.width, dims.paper.height, settings.is_landscape)
        if fit.is_non_standard_paper_size:
            shift_x = (paper.width - fit.effective_slot.width) / 2
            shift_y = (paper.height - fit.effective_slot.height) / 2
        else:
            shift_x = shift_y = 0.0

        readings = blade_readings(
            print_size.print_w,
            print_size.print_h,
            shift_x + offsets.h,
            shift_y + offsets.v,
        )

        inv_w = 100 / paper.width if paper.width else 0.0
        inv_h = 100 / paper.height if paper.height else 0.0

        return BorderCalculation(
            left_border=borders.left,
            right_border=borders.right,
            top_border=borders.top,
            bottom_border=borders.bottom,
            print_width=print_size.print_w,
            print_height=print_size.print_h,
            paper_width=paper.width,
            paper_height=paper.height,
            print_width_percent=print_size.print_w * inv_w,
            print_height_percent=print_size.print_h * inv_h,
            left_border_percent=borders.left * inv_w,
            right_border_percent=borders.right * inv_w,
            top_border_percent=borders.top * inv_h,
            bottom_border_percent=borders.bottom * inv_h,
            left_blade_reading=readings.left,
            right_blade_reading=readings.right,
            top_blade_reading=readings.top,
            bottom_blade_reading=readings.bottom,
            blade_thickness=blade_thickness(paper.width, paper.height, self.settings.paper),
            is_non_standard_paper_size=fit.is_non_standard_paper_size and not dims.paper_size_warning,
            easel_size=fit.easel_size,
            easel_size_label=self.catalog.label_for(fit.easel_size),
            offset_warning=offsets.warning,
            blade_warning=blade_warning(readings),
            min_border_warning=dims.min_border_warning,
            paper_size_warning=dims.paper_size_warning,
            last_valid_min_border=dims.last_valid_min_border,
            clamped_horizontal_offset=offsets.h,
            clamped_vertical_offset=offsets.v,
        )

    # ------------------------------------------------------------------
    # Min-border suggestions
    # ------------------------------------------------------------------

    def optimal_min_border(self, settings: BorderSettings) -> float:
        """Snap-optimized min border near the one in ``settings``."""
        dims = self.resolve_dimensions(settings)
        self.log_method_call("optimal_min_border", start=dims.min_border)
        return optimal_min_border(
            dims.oriented_paper.width,
            dims.oriented_paper.height,
            dims.oriented_ratio.width,
            dims.oriented_ratio.height,
            dims.min_border,
            self.settings.optimizer,
            self.settings.precision,
        )

    def quarter_inch_min_border(self, settings: BorderSettings) -> Optional[float]:
        """Min border putting the print on quarter-inch dimensions, if any."""
        dims = self.resolve_dimensions(settings)
        self.log_method_call("quarter_inch_min_border", current=dims.min_border)
        paper = dims.oriented_paper
        ratio = dims.oriented_ratio
        print_size = compute_print_size(
            paper.width, paper.height, ratio.width, ratio.height, dims.min_border
        )
        return quarter_inch_min_border(
            paper.width,
            paper.height,
            ratio.width,
            ratio.height,
            dims.min_border,
            print_size.print_w,
            print_size.print_h,
        )
